from __future__ import annotations

from typing import Optional

from .interfaces import MollieModel
from .payments import PaymentMethod


class IssuerResponse(MollieModel):
    resource: Optional[str] = None
    id: str
    name: Optional[str] = None
    method: Optional[PaymentMethod] = None
