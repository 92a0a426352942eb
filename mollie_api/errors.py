"""
Error taxonomy for the Mollie client.

Every failure the client can report is described by an ``ErrorInfo`` value.
Operations hand these back inside ``Err`` results; callers who prefer
exceptions call ``Result.unwrap()`` and get the matching ``MollieError``
subclass below.

Retry rule of thumb:
- TRANSPORT / UNKNOWN_STATUS may be transient and are safe to retry
- API means the request itself was rejected; resending it unchanged fails again
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    CONFIGURATION = "configuration"
    INVALID_REQUEST = "invalid_request"
    DECODE = "decode"
    API = "api"
    TRANSPORT = "transport"
    UNKNOWN_STATUS = "unknown_status"


_RETRYABLE_KINDS = frozenset({ErrorKind.TRANSPORT, ErrorKind.UNKNOWN_STATUS})


@dataclass(frozen=True)
class ErrorInfo:
    kind: ErrorKind
    message: str
    status_code: Optional[int] = None
    body: Optional[str] = None

    @property
    def retryable(self) -> bool:
        return self.kind in _RETRYABLE_KINDS

    def to_exception(self) -> "MollieError":
        return _EXCEPTION_BY_KIND[self.kind](self)


class MollieError(Exception):
    """Base error for the Mollie client. Carries the originating ``ErrorInfo``."""

    def __init__(self, info: ErrorInfo) -> None:
        super().__init__(info.message)
        self.info = info

    @property
    def kind(self) -> ErrorKind:
        return self.info.kind

    @property
    def status_code(self) -> Optional[int]:
        return self.info.status_code


class ConfigurationError(MollieError):
    """Client could not be constructed (missing or blank API key, bad settings)."""


class InvalidRequestError(MollieError):
    """A request descriptor could not be built from the given arguments."""


class DecodeError(MollieError):
    """Response body is malformed or inconsistent with its discriminator."""


class ApiError(MollieError):
    """Request rejected by Mollie. ``str(error)`` is the raw upstream body."""


class TransportError(MollieError):
    """Network failure, timeout, server-class or unrecognized status."""


_EXCEPTION_BY_KIND = {
    ErrorKind.CONFIGURATION: ConfigurationError,
    ErrorKind.INVALID_REQUEST: InvalidRequestError,
    ErrorKind.DECODE: DecodeError,
    ErrorKind.API: ApiError,
    ErrorKind.TRANSPORT: TransportError,
    ErrorKind.UNKNOWN_STATUS: TransportError,
}
