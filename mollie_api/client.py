"""
Mollie API client.

Each public coroutine is one request/response round trip:
build the request, send it through the transport, classify the status, then
decode the body or map the failure. Nothing is retried and nothing is raised
for expected failures; every operation returns ``Ok`` or ``Err``.

Usage:
    async with MollieClient("test_xxx") as client:
        result = await client.get_payment("tr_WDqYK6vllg")
        if result.is_ok:
            payment = result.value
"""

from __future__ import annotations

import asyncio
import logging
from decimal import Decimal
from typing import Any, Callable, Optional, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, SecretStr

from mollie_api.config import API_ENDPOINT, API_VERSION, ClientSettings
from mollie_api.contracts.issuers import IssuerResponse
from mollie_api.contracts.lists import ListResponse
from mollie_api.contracts.methods import PaymentMethodResponse
from mollie_api.contracts.payments import PaymentMethod, PaymentRequest, PaymentResponse
from mollie_api.contracts.refunds import RefundRequest, RefundResponse
from mollie_api.decoder import decode, decode_list, decode_payment, payment_from_dict
from mollie_api.error_handler import ResponseClass, classify, map_error
from mollie_api.errors import ConfigurationError, ErrorInfo, ErrorKind
from mollie_api.request_builder import HttpMethod, RequestDescriptor, build_request
from mollie_api.result import Err, Ok, Result
from mollie_api.serialization import SerializerSettings
from mollie_api.transport import HttpxTransport, Transport

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MollieClient:
    API_ENDPOINT = API_ENDPOINT
    API_VERSION = API_VERSION

    def __init__(
        self,
        api_key: str,
        *,
        api_endpoint: str = API_ENDPOINT,
        api_version: str = API_VERSION,
        timeout_seconds: float = 20.0,
        user_agent: Optional[str] = None,
        transport: Optional[Transport] = None,
        serializer_settings: Optional[SerializerSettings] = None,
    ) -> None:
        if not isinstance(api_key, str) or not api_key.strip():
            raise ConfigurationError(
                ErrorInfo(kind=ErrorKind.CONFIGURATION, message="Mollie API key cannot be empty")
            )

        self.base_url = f"{api_endpoint.rstrip('/')}/{api_version.strip('/')}/"
        self.serializer_settings = serializer_settings or SerializerSettings()
        self._transport: Transport = transport or HttpxTransport(
            base_url=self.base_url,
            api_key=SecretStr(api_key),
            timeout_seconds=timeout_seconds,
            user_agent=user_agent,
        )

    @classmethod
    def create(cls, api_key: str, **kwargs: Any) -> Result["MollieClient"]:
        """Like the constructor, but reports a bad configuration as ``Err``."""
        try:
            return Ok(cls(api_key, **kwargs))
        except ConfigurationError as exc:
            return Err(exc.info)

    @classmethod
    def from_settings(cls, settings: ClientSettings, **kwargs: Any) -> "MollieClient":
        return cls(
            settings.api_key.get_secret_value(),
            api_endpoint=settings.api_endpoint,
            api_version=settings.api_version,
            timeout_seconds=settings.timeout_seconds,
            user_agent=settings.user_agent,
            **kwargs,
        )

    async def __aenter__(self) -> "MollieClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._transport.aclose()

    def __repr__(self) -> str:
        return f"MollieClient(base_url={self.base_url!r})"

    # -- Payments --

    async def create_payment(self, payment_request: PaymentRequest) -> Result[PaymentResponse]:
        return await self._post("payments", payment_request, self._decode_payment)

    async def get_payment(self, payment_id: str) -> Result[PaymentResponse]:
        return await self._get(f"payments/{_segment(payment_id)}", self._decode_payment)

    async def get_payment_list(
        self, offset: Optional[int] = None, count: Optional[int] = None
    ) -> Result[ListResponse[PaymentResponse]]:
        return await self._get_list("payments", offset, count, self._list_of(PaymentResponse, payment_from_dict))

    # -- Payment methods --

    async def get_payment_method_list(
        self, offset: Optional[int] = None, count: Optional[int] = None
    ) -> Result[ListResponse[PaymentMethodResponse]]:
        return await self._get_list("methods", offset, count, self._list_of(PaymentMethodResponse))

    async def get_payment_method(self, payment_method: PaymentMethod) -> Result[PaymentMethodResponse]:
        try:
            method = PaymentMethod(payment_method)
        except ValueError:
            return Err(ErrorInfo(kind=ErrorKind.INVALID_REQUEST, message=f"Unknown payment method {payment_method!r}."))
        return await self._get(f"methods/{method.value}", self._decoder_for(PaymentMethodResponse))

    # -- Issuers --

    async def get_issuer_list(
        self, offset: Optional[int] = None, count: Optional[int] = None
    ) -> Result[ListResponse[IssuerResponse]]:
        return await self._get_list("issuers", offset, count, self._list_of(IssuerResponse))

    async def get_issuer(self, issuer_id: str) -> Result[IssuerResponse]:
        return await self._get(f"issuers/{_segment(issuer_id)}", self._decoder_for(IssuerResponse))

    # -- Refunds --

    async def create_refund(
        self, payment_id: str, amount: Optional[Decimal] = None, description: Optional[str] = None
    ) -> Result[RefundResponse]:
        refund_request = RefundRequest(amount=amount, description=description)
        return await self._post(
            f"payments/{_segment(payment_id)}/refunds", refund_request, self._decoder_for(RefundResponse)
        )

    async def get_refund_list(
        self, payment_id: str, offset: Optional[int] = None, count: Optional[int] = None
    ) -> Result[ListResponse[RefundResponse]]:
        return await self._get_list(
            f"payments/{_segment(payment_id)}/refunds", offset, count, self._list_of(RefundResponse)
        )

    async def get_refund(self, payment_id: str, refund_id: str) -> Result[RefundResponse]:
        return await self._get(
            f"payments/{_segment(payment_id)}/refunds/{_segment(refund_id)}", self._decoder_for(RefundResponse)
        )

    async def cancel_refund(self, payment_id: str, refund_id: str) -> Result[None]:
        built = build_request(
            HttpMethod.DELETE,
            f"payments/{_segment(payment_id)}/refunds/{_segment(refund_id)}",
            settings=self.serializer_settings,
        )
        return await self._execute(built, None)

    # -- Plumbing --

    def _decode_payment(self, body: str) -> Result[PaymentResponse]:
        return decode_payment(body, self.serializer_settings)

    def _decoder_for(self, model_type) -> Callable[[str], Result[Any]]:
        return lambda body: decode(body, model_type, self.serializer_settings)

    def _list_of(self, item_type, item_decoder=None) -> Callable[[str], Result[Any]]:
        return lambda body: decode_list(body, item_type, item_decoder, self.serializer_settings)

    async def _get(self, path: str, decoder: Callable[[str], Result[T]]) -> Result[T]:
        built = build_request(HttpMethod.GET, path, settings=self.serializer_settings)
        return await self._execute(built, decoder)

    async def _get_list(
        self, path: str, offset: Optional[int], count: Optional[int], decoder: Callable[[str], Result[T]]
    ) -> Result[T]:
        built = build_request(
            HttpMethod.GET, path, query={"offset": offset, "count": count}, settings=self.serializer_settings
        )
        return await self._execute(built, decoder)

    async def _post(self, path: str, payload: BaseModel, decoder: Callable[[str], Result[T]]) -> Result[T]:
        built = build_request(HttpMethod.POST, path, body=payload, settings=self.serializer_settings)
        return await self._execute(built, decoder)

    async def _execute(
        self,
        built: Result[RequestDescriptor],
        decoder: Optional[Callable[[str], Result[T]]],
    ) -> Result[T]:
        if isinstance(built, Err):
            logger.warning("Mollie request not sent: %s", built.error.message)
            return built
        request = built.value

        logger.info("Mollie request: %s %s", request.method.value, request.path)
        if request.query:
            logger.debug("Mollie query parameters: %s", request.query)

        try:
            response = await self._transport.send(request)
        except (httpx.TimeoutException, asyncio.TimeoutError):
            logger.error("Mollie request timed out: %s %s", request.method.value, request.path)
            return Err(
                ErrorInfo(
                    kind=ErrorKind.TRANSPORT,
                    message=f"Request timed out: {request.method.value} {request.path}",
                )
            )
        except httpx.RequestError as exc:
            logger.error("Request error connecting to Mollie: %s", exc)
            return Err(ErrorInfo(kind=ErrorKind.TRANSPORT, message=f"Request error connecting to Mollie: {exc}"))

        logger.info("Mollie response: status=%s", response.status_code)
        if classify(response.status_code) is not ResponseClass.SUCCESS:
            return Err(map_error(response.status_code, response.body))
        if decoder is None:
            return Ok(None)
        return decoder(response.body)


def _segment(identifier: str) -> str:
    return quote(str(identifier), safe="") if identifier else ""
