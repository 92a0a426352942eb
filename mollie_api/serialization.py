"""
JSON serialization rules shared by the request builder and the decoder.

Mollie expects camelCase keys, no explicit nulls and amounts as JSON numbers.
Responses may contain nulls; MollieModel treats those as "field not present"
on each model level so an omitted field never turns into a zero value.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Mapping, Union

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


@dataclass(frozen=True)
class SerializerSettings:
    camel_case: bool = True
    omit_none: bool = True


DEFAULT_SERIALIZER_SETTINGS = SerializerSettings()


def encode_body(payload: Union[BaseModel, Mapping[str, Any]], settings: SerializerSettings) -> str:
    """
    Encode a request payload to JSON text.

    Pydantic models are dumped through their aliases; plain mappings get their
    top-level keys camel-cased (nested values such as metadata are left as-is).
    Fields whose value is ``None`` are dropped; ``0``, ``""`` and ``False`` are kept.
    """
    if isinstance(payload, BaseModel):
        data = payload.model_dump(
            mode="json",
            by_alias=settings.camel_case,
            exclude_none=settings.omit_none,
        )
    else:
        data = {}
        for key, value in payload.items():
            if value is None and settings.omit_none:
                continue
            data[to_camel(key) if settings.camel_case else key] = value
    return json.dumps(data, default=_json_default)


def _json_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return float(value)
    return str(value)


def parse_json_object(body: str) -> Dict[str, Any]:
    """Parse raw body text into a JSON object. Raises ``ValueError`` otherwise."""
    parsed = json.loads(body)
    if not isinstance(parsed, dict):
        raise ValueError(f"Expected a JSON object, got {type(parsed).__name__}.")
    return parsed
