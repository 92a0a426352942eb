"""Builds the request descriptors handed to the transport."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel

from mollie_api.errors import ErrorInfo, ErrorKind
from mollie_api.result import Err, Ok, Result
from mollie_api.serialization import DEFAULT_SERIALIZER_SETTINGS, SerializerSettings, encode_body


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


@dataclass(frozen=True)
class RequestDescriptor:
    method: HttpMethod
    path: str
    query: Dict[str, Any] = field(default_factory=dict)
    body: Optional[str] = None


def build_request(
    method: HttpMethod,
    path: str,
    query: Optional[Mapping[str, Any]] = None,
    body: Optional[Union[BaseModel, Mapping[str, Any]]] = None,
    settings: SerializerSettings = DEFAULT_SERIALIZER_SETTINGS,
) -> Result[RequestDescriptor]:
    if not isinstance(path, str) or not path.strip():
        return Err(ErrorInfo(kind=ErrorKind.INVALID_REQUEST, message="Request path must be a non-empty string."))
    if path.startswith("/"):
        return Err(ErrorInfo(kind=ErrorKind.INVALID_REQUEST, message=f"Request path must be relative: {path!r}."))
    if "" in path.split("/"):
        return Err(ErrorInfo(kind=ErrorKind.INVALID_REQUEST, message=f"Request path has an empty segment: {path!r}."))

    params = {name: value for name, value in (query or {}).items() if value is not None}

    encoded: Optional[str] = None
    if body is not None:
        try:
            encoded = encode_body(body, settings)
        except (TypeError, ValueError) as exc:
            return Err(ErrorInfo(kind=ErrorKind.INVALID_REQUEST, message=f"Request body is not serializable: {exc}"))

    return Ok(RequestDescriptor(method=HttpMethod(method), path=path, query=params, body=encoded))
