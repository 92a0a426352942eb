"""
Payment contracts.

Defines the request/response structures for the payments endpoints:
- PaymentRequest (and method-specific request subclasses) for ``POST payments``
- PaymentResponse, a closed family of variants selected by the ``method`` field

Variant rule:
- every PaymentMethod is bound to exactly one PaymentResponse subclass
- the binding lives in PAYMENT_RESPONSE_VARIANTS and is fixed at import time
- a variant only knows its own ``details`` fields; foreign keys are dropped
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Type

from pydantic import model_validator

from .interfaces import Amount, MollieModel, Mode, PaymentLinks, PaymentStatus, RecurringType


class PaymentMethod(str, Enum):
    BANCONTACT = "bancontact"
    BANK_TRANSFER = "banktransfer"
    BELFIUS = "belfius"
    BITCOIN = "bitcoin"
    CREDIT_CARD = "creditcard"
    DIRECT_DEBIT = "directdebit"
    GIFTCARD = "giftcard"
    IDEAL = "ideal"
    KBC = "kbc"
    PAYPAL = "paypal"
    PAYSAFECARD = "paysafecard"
    SOFORT = "sofort"


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

class PaymentRequest(MollieModel):
    amount: Amount
    description: str
    redirect_url: Optional[str] = None
    webhook_url: Optional[str] = None
    method: Optional[PaymentMethod] = None
    locale: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    recurring_type: Optional[RecurringType] = None
    customer_id: Optional[str] = None
    mandate_id: Optional[str] = None


class IdealPaymentRequest(PaymentRequest):
    method: Optional[PaymentMethod] = PaymentMethod.IDEAL
    issuer: Optional[str] = None


class CreditCardPaymentRequest(PaymentRequest):
    method: Optional[PaymentMethod] = PaymentMethod.CREDIT_CARD
    billing_address: Optional[str] = None
    billing_city: Optional[str] = None
    billing_region: Optional[str] = None
    billing_postal: Optional[str] = None
    billing_country: Optional[str] = None
    shipping_address: Optional[str] = None
    shipping_city: Optional[str] = None
    shipping_region: Optional[str] = None
    shipping_postal: Optional[str] = None
    shipping_country: Optional[str] = None


class BankTransferPaymentRequest(PaymentRequest):
    method: Optional[PaymentMethod] = PaymentMethod.BANK_TRANSFER
    billing_email: Optional[str] = None
    due_date: Optional[date] = None


class DirectDebitPaymentRequest(PaymentRequest):
    method: Optional[PaymentMethod] = PaymentMethod.DIRECT_DEBIT
    consumer_name: Optional[str] = None
    consumer_account: Optional[str] = None


class PaySafeCardPaymentRequest(PaymentRequest):
    method: Optional[PaymentMethod] = PaymentMethod.PAYSAFECARD
    customer_reference: Optional[str] = None


# ---------------------------------------------------------------------------
# Method-specific response details
# ---------------------------------------------------------------------------

class ConsumerAccountDetails(MollieModel):
    """Details of bank-redirect methods (iDEAL, SOFORT, Belfius, KBC)."""
    consumer_name: Optional[str] = None
    consumer_account: Optional[str] = None     # IBAN
    consumer_bic: Optional[str] = None


class BancontactDetails(MollieModel):
    card_number: Optional[str] = None          # last four digits
    card_holder: Optional[str] = None
    card_fingerprint: Optional[str] = None


class BankTransferDetails(MollieModel):
    bank_name: Optional[str] = None
    bank_account: Optional[str] = None         # IBAN to transfer to
    bank_bic: Optional[str] = None
    transfer_reference: Optional[str] = None
    consumer_name: Optional[str] = None
    consumer_account: Optional[str] = None
    consumer_bic: Optional[str] = None
    billing_email: Optional[str] = None


class BitcoinDetails(MollieModel):
    bitcoin_address: Optional[str] = None
    bitcoin_amount: Optional[Decimal] = None
    bitcoin_rate: Optional[Decimal] = None
    bitcoin_uri: Optional[str] = None


class CreditCardDetails(MollieModel):
    card_holder: Optional[str] = None
    card_number: Optional[str] = None          # last four digits
    card_fingerprint: Optional[str] = None
    card_audience: Optional[str] = None
    card_label: Optional[str] = None
    card_country_code: Optional[str] = None
    card_security: Optional[str] = None
    fee_region: Optional[str] = None
    failure_reason: Optional[str] = None


class DirectDebitDetails(MollieModel):
    transfer_reference: Optional[str] = None
    creditor_identifier: Optional[str] = None
    consumer_name: Optional[str] = None
    consumer_account: Optional[str] = None
    consumer_bic: Optional[str] = None
    due_date: Optional[date] = None
    signature_date: Optional[date] = None
    bank_reason_code: Optional[str] = None
    bank_reason: Optional[str] = None


class GiftcardDetails(MollieModel):
    voucher_number: Optional[str] = None
    issuer: Optional[str] = None
    remainder_amount: Optional[Decimal] = None
    remainder_method: Optional[str] = None


class PayPalDetails(MollieModel):
    consumer_name: Optional[str] = None
    consumer_account: Optional[str] = None
    paypal_reference: Optional[str] = None


class PaySafeCardDetails(MollieModel):
    customer_reference: Optional[str] = None


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------

class PaymentResponse(MollieModel):
    """
    Fields shared by every payment, whatever method was used.

    Read ``method`` before touching ``details``: each variant declares its
    own details model and only that variant exposes it.
    """

    bound_method: ClassVar[Optional[PaymentMethod]] = None

    resource: Optional[str] = None
    id: str
    method: PaymentMethod
    mode: Optional[Mode] = None
    status: Optional[PaymentStatus] = None
    amount: Optional[Decimal] = None
    amount_refunded: Optional[Decimal] = None
    amount_remaining: Optional[Decimal] = None
    description: Optional[str] = None
    metadata: Optional[Any] = None
    locale: Optional[str] = None
    profile_id: Optional[str] = None
    settlement_id: Optional[str] = None
    customer_id: Optional[str] = None
    mandate_id: Optional[str] = None
    subscription_id: Optional[str] = None
    recurring_type: Optional[RecurringType] = None
    expiry_period: Optional[str] = None
    created_datetime: Optional[datetime] = None
    paid_datetime: Optional[datetime] = None
    cancelled_datetime: Optional[datetime] = None
    expired_datetime: Optional[datetime] = None
    failed_datetime: Optional[datetime] = None
    links: Optional[PaymentLinks] = None

    @model_validator(mode="after")
    def check_method_matches_variant(self) -> "PaymentResponse":
        bound = type(self).bound_method
        if bound is not None and self.method is not bound:
            raise ValueError(f"{type(self).__name__} cannot hold a '{self.method.value}' payment.")
        return self


class BancontactPaymentResponse(PaymentResponse):
    bound_method: ClassVar[Optional[PaymentMethod]] = PaymentMethod.BANCONTACT
    details: Optional[BancontactDetails] = None


class BankTransferPaymentResponse(PaymentResponse):
    bound_method: ClassVar[Optional[PaymentMethod]] = PaymentMethod.BANK_TRANSFER
    details: Optional[BankTransferDetails] = None


class BelfiusPaymentResponse(PaymentResponse):
    bound_method: ClassVar[Optional[PaymentMethod]] = PaymentMethod.BELFIUS
    details: Optional[ConsumerAccountDetails] = None


class BitcoinPaymentResponse(PaymentResponse):
    bound_method: ClassVar[Optional[PaymentMethod]] = PaymentMethod.BITCOIN
    details: Optional[BitcoinDetails] = None


class CreditCardPaymentResponse(PaymentResponse):
    bound_method: ClassVar[Optional[PaymentMethod]] = PaymentMethod.CREDIT_CARD
    details: Optional[CreditCardDetails] = None


class DirectDebitPaymentResponse(PaymentResponse):
    bound_method: ClassVar[Optional[PaymentMethod]] = PaymentMethod.DIRECT_DEBIT
    details: Optional[DirectDebitDetails] = None


class GiftcardPaymentResponse(PaymentResponse):
    bound_method: ClassVar[Optional[PaymentMethod]] = PaymentMethod.GIFTCARD
    details: Optional[GiftcardDetails] = None


class IdealPaymentResponse(PaymentResponse):
    bound_method: ClassVar[Optional[PaymentMethod]] = PaymentMethod.IDEAL
    details: Optional[ConsumerAccountDetails] = None


class KbcPaymentResponse(PaymentResponse):
    bound_method: ClassVar[Optional[PaymentMethod]] = PaymentMethod.KBC
    details: Optional[ConsumerAccountDetails] = None


class PayPalPaymentResponse(PaymentResponse):
    bound_method: ClassVar[Optional[PaymentMethod]] = PaymentMethod.PAYPAL
    details: Optional[PayPalDetails] = None


class PaySafeCardPaymentResponse(PaymentResponse):
    bound_method: ClassVar[Optional[PaymentMethod]] = PaymentMethod.PAYSAFECARD
    details: Optional[PaySafeCardDetails] = None


class SofortPaymentResponse(PaymentResponse):
    bound_method: ClassVar[Optional[PaymentMethod]] = PaymentMethod.SOFORT
    details: Optional[ConsumerAccountDetails] = None


_VARIANTS: List[Type[PaymentResponse]] = [
    BancontactPaymentResponse,
    BankTransferPaymentResponse,
    BelfiusPaymentResponse,
    BitcoinPaymentResponse,
    CreditCardPaymentResponse,
    DirectDebitPaymentResponse,
    GiftcardPaymentResponse,
    IdealPaymentResponse,
    KbcPaymentResponse,
    PayPalPaymentResponse,
    PaySafeCardPaymentResponse,
    SofortPaymentResponse,
]

PAYMENT_RESPONSE_VARIANTS: Mapping[PaymentMethod, Type[PaymentResponse]] = MappingProxyType(
    {variant.bound_method: variant for variant in _VARIANTS}
)

_unbound = set(PaymentMethod) - set(PAYMENT_RESPONSE_VARIANTS)
if _unbound or len(PAYMENT_RESPONSE_VARIANTS) != len(_VARIANTS):
    raise RuntimeError(f"Payment variant table is not one-to-one; unbound methods: {sorted(m.value for m in _unbound)}")


def payment_variant_for(method: Any) -> Type[PaymentResponse]:
    """Return the response class bound to a raw ``method`` value."""
    if method is None:
        raise ValueError("Payment response has no 'method' discriminator.")
    try:
        key = PaymentMethod(method)
    except (TypeError, ValueError):
        raise ValueError(f"Unsupported payment method {method!r}.") from None
    return PAYMENT_RESPONSE_VARIANTS[key]
