"""
Transport adapter.

Purpose:
- Executes one RequestDescriptor against the Mollie base address
- Attaches the bearer credential and JSON content type to every request
- Returns status, headers and raw body without interpreting them

Notes:
- One httpx.AsyncClient is kept per transport and shared by concurrent calls
- Timeouts and network errors surface as httpx exceptions; the client maps them
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Protocol, Union

import httpx
from pydantic import SecretStr

from mollie_api.request_builder import RequestDescriptor


@dataclass(frozen=True)
class RawResponse:
    status_code: int
    body: str
    headers: Dict[str, str] = field(default_factory=dict)


class Transport(Protocol):
    async def send(self, request: RequestDescriptor) -> RawResponse:
        ...

    async def aclose(self) -> None:
        ...


class HttpxTransport:
    def __init__(
        self,
        base_url: str,
        api_key: Union[SecretStr, str],
        timeout_seconds: float = 20.0,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        headers = {
            "Authorization": f"Bearer {_secret(api_key).get_secret_value()}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if user_agent:
            headers["User-Agent"] = user_agent
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers=headers,
            timeout=timeout_seconds,
            transport=transport,
        )

    async def send(self, request: RequestDescriptor) -> RawResponse:
        response = await self._client.request(
            request.method.value,
            request.path,
            params=request.query or None,
            content=request.body,
        )
        return RawResponse(
            status_code=response.status_code,
            body=response.text,
            headers=dict(response.headers),
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    def __repr__(self) -> str:
        return f"HttpxTransport(base_url={str(self._client.base_url)!r})"


def _secret(api_key: Union[SecretStr, str]) -> SecretStr:
    return api_key if isinstance(api_key, SecretStr) else SecretStr(api_key)
