"""Status classification and error mapping for Mollie responses."""

from __future__ import annotations

import logging
from enum import Enum

from mollie_api.errors import ErrorInfo, ErrorKind

logger = logging.getLogger(__name__)

# Statuses Mollie uses to reject a request; the body explains why.
API_FAILURE_STATUSES = frozenset({400, 401, 403, 404, 405, 415, 422})


class ResponseClass(str, Enum):
    SUCCESS = "success"
    API_FAILURE = "api_failure"
    UNCLASSIFIED_FAILURE = "unclassified_failure"


def classify(status: int) -> ResponseClass:
    if 200 <= status < 300:
        return ResponseClass.SUCCESS
    if status in API_FAILURE_STATUSES:
        return ResponseClass.API_FAILURE
    return ResponseClass.UNCLASSIFIED_FAILURE


def map_error(status: int, body: str) -> ErrorInfo:
    """
    Build the ErrorInfo for a non-2xx response.

    API failures pass the upstream body through untouched. Everything else is
    reported by status code only; 5xx counts as a transport failure, any other
    code as an unknown status.
    """
    if classify(status) is ResponseClass.API_FAILURE:
        logger.warning("Mollie rejected request: status=%s", status)
        return ErrorInfo(kind=ErrorKind.API, message=body, status_code=status, body=body)

    kind = ErrorKind.TRANSPORT if 500 <= status < 600 else ErrorKind.UNKNOWN_STATUS
    logger.warning("Unexpected Mollie response: status=%s kind=%s", status, kind.value)
    return ErrorInfo(
        kind=kind,
        message=f"Unknown http exception occurred with status code: {status}.",
        status_code=status,
    )
