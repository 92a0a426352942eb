from __future__ import annotations

from decimal import Decimal
from typing import Optional

from .interfaces import MollieModel
from .payments import PaymentMethod


class AmountRange(MollieModel):
    minimum: Optional[Decimal] = None
    maximum: Optional[Decimal] = None


class MethodImage(MollieModel):
    normal: Optional[str] = None
    bigger: Optional[str] = None


class PaymentMethodResponse(MollieModel):
    resource: Optional[str] = None
    id: PaymentMethod
    description: Optional[str] = None
    amount: Optional[AmountRange] = None
    image: Optional[MethodImage] = None
