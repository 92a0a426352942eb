"""
Contracts (data models).

Request/response shapes for the Mollie v1 endpoints. All models are
immutable pydantic models using Mollie's camelCase wire names.
"""

from .interfaces import Amount, ListLinks, Mode, MollieModel, PaymentLinks, PaymentStatus, RecurringType, RefundStatus
from .issuers import IssuerResponse
from .lists import ListResponse
from .methods import AmountRange, MethodImage, PaymentMethodResponse
from .payments import (
    PAYMENT_RESPONSE_VARIANTS,
    BancontactDetails,
    BancontactPaymentResponse,
    BankTransferDetails,
    BankTransferPaymentRequest,
    BankTransferPaymentResponse,
    BelfiusPaymentResponse,
    BitcoinDetails,
    BitcoinPaymentResponse,
    ConsumerAccountDetails,
    CreditCardDetails,
    CreditCardPaymentRequest,
    CreditCardPaymentResponse,
    DirectDebitDetails,
    DirectDebitPaymentRequest,
    DirectDebitPaymentResponse,
    GiftcardDetails,
    GiftcardPaymentResponse,
    IdealPaymentRequest,
    IdealPaymentResponse,
    KbcPaymentResponse,
    PaymentMethod,
    PaymentRequest,
    PaymentResponse,
    PayPalDetails,
    PayPalPaymentResponse,
    PaySafeCardDetails,
    PaySafeCardPaymentRequest,
    PaySafeCardPaymentResponse,
    SofortPaymentResponse,
    payment_variant_for,
)
from .refunds import RefundRequest, RefundResponse

__all__ = [
    # interfaces
    "Amount", "ListLinks", "Mode", "MollieModel", "PaymentLinks", "PaymentStatus",
    "RecurringType", "RefundStatus",
    # payments
    "PAYMENT_RESPONSE_VARIANTS", "PaymentMethod", "PaymentRequest", "PaymentResponse",
    "payment_variant_for",
    "IdealPaymentRequest", "CreditCardPaymentRequest", "BankTransferPaymentRequest",
    "DirectDebitPaymentRequest", "PaySafeCardPaymentRequest",
    "BancontactPaymentResponse", "BankTransferPaymentResponse", "BelfiusPaymentResponse",
    "BitcoinPaymentResponse", "CreditCardPaymentResponse", "DirectDebitPaymentResponse",
    "GiftcardPaymentResponse", "IdealPaymentResponse", "KbcPaymentResponse",
    "PayPalPaymentResponse", "PaySafeCardPaymentResponse", "SofortPaymentResponse",
    "BancontactDetails", "BankTransferDetails", "BitcoinDetails", "ConsumerAccountDetails",
    "CreditCardDetails", "DirectDebitDetails", "GiftcardDetails", "PayPalDetails",
    "PaySafeCardDetails",
    # other resources
    "IssuerResponse", "ListResponse", "AmountRange", "MethodImage", "PaymentMethodResponse",
    "RefundRequest", "RefundResponse",
]
