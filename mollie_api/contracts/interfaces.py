from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Optional

from pydantic import BaseModel, ConfigDict, PlainSerializer, ValidationInfo, model_validator
from pydantic.alias_generators import to_camel


# Sent as a JSON number, not a string.
Amount = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


# ---------------------------------------------------------------------------
# Base model
# ---------------------------------------------------------------------------

class MollieModel(BaseModel):
    """Immutable model using Mollie's camelCase wire names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def drop_null_fields(cls, data: Any, info: ValidationInfo) -> Any:
        # Only this model's own keys; free-form values such as metadata keep their nulls.
        if not isinstance(data, dict):
            return data
        if info.context is not None and not info.context.get("drop_nulls", True):
            return data
        return {key: value for key, value in data.items() if value is not None}


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Mode(str, Enum):
    LIVE = "live"
    TEST = "test"


class PaymentStatus(str, Enum):
    OPEN = "open"
    CANCELLED = "cancelled"
    EXPIRED = "expired"
    FAILED = "failed"
    PENDING = "pending"
    PAID = "paid"
    PAID_OUT = "paidout"
    REFUNDED = "refunded"
    CHARGED_BACK = "charged_back"


class RecurringType(str, Enum):
    FIRST = "first"
    RECURRING = "recurring"


class RefundStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    REFUNDED = "refunded"


# ---------------------------------------------------------------------------
# Shared value objects
# ---------------------------------------------------------------------------

class PaymentLinks(MollieModel):
    payment_url: Optional[str] = None
    webhook_url: Optional[str] = None
    redirect_url: Optional[str] = None
    settlement: Optional[str] = None
    refunds: Optional[str] = None
    chargebacks: Optional[str] = None


class ListLinks(MollieModel):
    first: Optional[str] = None
    previous: Optional[str] = None
    next: Optional[str] = None
    last: Optional[str] = None
