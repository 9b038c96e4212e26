"""
Real Zbozi.cz conversion HTTP client.

Purpose:
- Validates an order and maps it onto the conversion payload
- Sends it to the production or sandbox endpoint over HTTPS
- Turns transport failures and rejected responses into typed errors

Important:
- One POST per send, no retries. A failure surfaces to the caller immediately.
- The private key travels inside the JSON body and is never logged.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import httpx

from zbozi_konverze.contracts.orders import Order, build_order_payload, is_empty_like, validate_order
from zbozi_konverze.contracts.requests import ConversionRequest, build_endpoint_url, encode_payload
from zbozi_konverze.errors import ConfigurationError, ConnectivityError, ValidationError
from zbozi_konverze.policy.response_wrappers import raise_for_conversion_response

logger = logging.getLogger(__name__)


class ConversionClient:
    def __init__(
        self,
        shop_id: str,
        private_key: str,
        sandbox: bool = False,
        *,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.Client] = None,
        async_http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        if is_empty_like(shop_id):
            raise ConfigurationError('Missing "shopId"')
        if is_empty_like(private_key):
            raise ConfigurationError('Missing "privateKey"')
        self.shop_id = shop_id
        self.private_key = private_key
        self.sandbox = sandbox
        self.timeout = timeout
        self._http_client = http_client
        self._async_http_client = async_http_client

    def is_sandbox(self) -> bool:
        return bool(self.sandbox)

    @property
    def url(self) -> str:
        return build_endpoint_url(self.shop_id, self.is_sandbox())

    def validate_order(self, order: Order) -> List[str]:
        return validate_order(order)

    def build_request(self, order: Order) -> ConversionRequest:
        errors = self.validate_order(order)
        if errors:
            raise ValidationError(errors[0], errors=errors)

        data = build_order_payload(order, private_key=self.private_key, sandbox=self.is_sandbox())
        return ConversionRequest(
            method="POST",
            url=self.url,
            headers={"Content-type": "application/json"},
            body=encode_payload(data),
        )

    def send(self, order: Order) -> None:
        request = self.build_request(order)
        logger.info("Submitting conversion for order %s to %s", order.id, request.url)
        logger.debug("Conversion payload: %s", request.redacted_payload())

        status_code, content = self._dispatch(request)

        raise_for_conversion_response(status_code, content)
        logger.info("Conversion for order %s accepted", order.id)

    async def send_async(self, order: Order) -> None:
        request = self.build_request(order)
        logger.info("Submitting conversion for order %s to %s", order.id, request.url)
        logger.debug("Conversion payload: %s", request.redacted_payload())

        status_code, content = await self._dispatch_async(request)

        raise_for_conversion_response(status_code, content)
        logger.info("Conversion for order %s accepted", order.id)

    def _dispatch(self, request: ConversionRequest) -> Tuple[int, bytes]:
        http_request = _as_httpx(request)
        try:
            if self._http_client is not None:
                response = self._http_client.send(http_request)
            else:
                with httpx.Client(**self._client_options()) as client:
                    response = client.send(http_request)
        except httpx.RequestError as exc:
            raise _connectivity_error(exc) from exc
        return response.status_code, response.content

    async def _dispatch_async(self, request: ConversionRequest) -> Tuple[int, bytes]:
        http_request = _as_httpx(request)
        try:
            if self._async_http_client is not None:
                response = await self._async_http_client.send(http_request)
            else:
                async with httpx.AsyncClient(**self._client_options()) as client:
                    response = await client.send(http_request)
        except httpx.RequestError as exc:
            raise _connectivity_error(exc) from exc
        return response.status_code, response.content

    def _client_options(self) -> Dict[str, Any]:
        options: Dict[str, Any] = {"verify": True}
        # leave httpx's own default in place unless a timeout was configured
        if self.timeout is not None:
            options["timeout"] = self.timeout
        return options


def _connectivity_error(exc: httpx.RequestError) -> ConnectivityError:
    return ConnectivityError(
        "Unable to establish connection to Zbozi.cz conversion service: "
        f"{type(exc).__name__} - {exc}"
    )


def _as_httpx(request: ConversionRequest) -> httpx.Request:
    try:
        return request.to_httpx()
    except httpx.InvalidURL as exc:
        raise ConfigurationError(f"Invalid conversion endpoint URL {request.url!r}: {exc}") from exc
