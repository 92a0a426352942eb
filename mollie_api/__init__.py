"""
Asynchronous client for the Mollie payments API (v1).

Key rule:
- Operations return ``Ok``/``Err`` results; ``result.unwrap()`` raises the
  matching ``MollieError`` subclass for callers that prefer exceptions.
"""

from .client import MollieClient
from .config import ClientSettings, load_client_settings
from .contracts import (
    PAYMENT_RESPONSE_VARIANTS,
    IssuerResponse,
    ListResponse,
    PaymentMethod,
    PaymentMethodResponse,
    PaymentRequest,
    PaymentResponse,
    PaymentStatus,
    RefundRequest,
    RefundResponse,
)
from .errors import (
    ApiError,
    ConfigurationError,
    DecodeError,
    ErrorInfo,
    ErrorKind,
    InvalidRequestError,
    MollieError,
    TransportError,
)
from .result import Err, Ok, Result
from .serialization import SerializerSettings

__all__ = [
    "MollieClient", "ClientSettings", "load_client_settings", "SerializerSettings",
    # results and errors
    "Ok", "Err", "Result", "ErrorInfo", "ErrorKind", "MollieError",
    "ConfigurationError", "InvalidRequestError", "DecodeError", "ApiError", "TransportError",
    # contracts
    "PAYMENT_RESPONSE_VARIANTS", "PaymentMethod", "PaymentRequest", "PaymentResponse",
    "PaymentStatus", "ListResponse", "IssuerResponse", "PaymentMethodResponse",
    "RefundRequest", "RefundResponse",
]
