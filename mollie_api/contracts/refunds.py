from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import ValidationInfo, field_validator

from .interfaces import Amount, MollieModel, RefundStatus
from .payments import PaymentResponse, payment_variant_for


class RefundRequest(MollieModel):
    """Leave ``amount`` unset to refund the full payment amount."""
    amount: Optional[Amount] = None
    description: Optional[str] = None


class RefundResponse(MollieModel):
    resource: Optional[str] = None
    id: str
    amount: Optional[Decimal] = None
    status: Optional[RefundStatus] = None
    description: Optional[str] = None
    refunded_datetime: Optional[datetime] = None
    payment: Optional[PaymentResponse] = None

    @field_validator("payment", mode="before")
    @classmethod
    def decode_payment_variant(cls, value: Any, info: ValidationInfo) -> Any:
        # The embedded payment goes through the same variant table as a direct lookup.
        if isinstance(value, dict):
            return payment_variant_for(value.get("method")).model_validate(value, context=info.context)
        return value
