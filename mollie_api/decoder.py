"""
Response decoding.

Turns raw response bodies into contract models:
- decode(...) for plain resources (issuers, methods, refunds)
- decode_payment(...) for payments, dispatching on the ``method`` field
- decode_list(...) for paged collections of either

Every failure comes back as ``Err`` with kind DECODE so callers can tell a
broken body apart from a rejected request or a network problem.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from mollie_api.contracts.lists import ListResponse
from mollie_api.contracts.payments import PaymentResponse, payment_variant_for
from mollie_api.errors import ErrorInfo, ErrorKind
from mollie_api.result import Err, Ok, Result
from mollie_api.serialization import DEFAULT_SERIALIZER_SETTINGS, SerializerSettings, parse_json_object

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def payment_from_dict(raw: Any, context: Optional[Dict[str, Any]] = None) -> PaymentResponse:
    """Build the payment variant bound to ``raw['method']``. Raises ``ValueError``."""
    if not isinstance(raw, dict):
        raise ValueError(f"Expected a payment object, got {type(raw).__name__}.")
    variant = payment_variant_for(raw.get("method"))
    return variant.model_validate(raw, context=context)


def decode(
    body: str,
    model_type: Type[M],
    settings: SerializerSettings = DEFAULT_SERIALIZER_SETTINGS,
) -> Result[M]:
    raw = _load(body)
    if isinstance(raw, Err):
        return raw
    try:
        return Ok(model_type.model_validate(raw, context=_context(settings)))
    except ValidationError as exc:
        return _decode_error(f"{model_type.__name__} validation failed: {exc}", body)


def decode_payment(
    body: str,
    settings: SerializerSettings = DEFAULT_SERIALIZER_SETTINGS,
) -> Result[PaymentResponse]:
    raw = _load(body)
    if isinstance(raw, Err):
        return raw
    try:
        return Ok(payment_from_dict(raw, context=_context(settings)))
    except (ValidationError, ValueError) as exc:
        return _decode_error(f"Payment response rejected: {exc}", body)


def decode_list(
    body: str,
    item_type: Type[M],
    item_decoder: Optional[Callable[..., M]] = None,
    settings: SerializerSettings = DEFAULT_SERIALIZER_SETTINGS,
) -> Result[ListResponse[M]]:
    """
    Decode one page of a collection.

    ``item_decoder`` builds each entry of ``data`` and is called as
    ``item_decoder(entry, context=...)``; it defaults to plain validation
    against ``item_type``. A single bad entry fails the whole page.
    """
    raw = _load(body)
    if isinstance(raw, Err):
        return raw
    entries = raw.get("data")
    if entries is None:
        entries = []
    if not isinstance(entries, list):
        return _decode_error("List response 'data' is not an array.", body)

    context = _context(settings)
    build = item_decoder or item_type.model_validate
    try:
        items = [build(entry, context=context) for entry in entries]
        page = ListResponse[item_type].model_validate({**raw, "data": items}, context=context)
    except (ValidationError, ValueError) as exc:
        return _decode_error(f"List of {item_type.__name__} rejected: {exc}", body)
    return Ok(page)


def _context(settings: SerializerSettings) -> Dict[str, Any]:
    # Read by MollieModel.drop_null_fields at every model level.
    return {"drop_nulls": settings.omit_none}


def _load(body: str):
    try:
        return parse_json_object(body)
    except ValueError as exc:
        return _decode_error(f"Malformed JSON response: {exc}", body)


def _decode_error(message: str, body: str) -> Err:
    logger.error("Could not decode Mollie response: %s", message)
    return Err(ErrorInfo(kind=ErrorKind.DECODE, message=message, body=body))
