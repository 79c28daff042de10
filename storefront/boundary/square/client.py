"""
Square REST API client.

Thin async wrapper over the catalog, orders and checkout endpoints. Each
client instance is bound to one access token; the factory shares a single
connection pool between the platform client and seller-scoped clients.

Dependencies: httpx, storefront.configs, storefront.observability
System role: Outbound calls to the payment platform
"""

import logging
from typing import Any

import httpx

from storefront.configs.square import SquareSettings
from storefront.core.exceptions import (
    SellerNotConnectedError,
    SquareAPIError,
    SquareTransportError,
)
from storefront.observability.correlation import get_correlation_id

logger = logging.getLogger(__name__)


class SquareClient:
    """Square API client scoped to a single access token."""

    def __init__(self, http: httpx.AsyncClient, access_token: str, api_version: str) -> None:
        """
        Initialize client.

        Args:
            http: Shared async HTTP client with the Square base URL set
            access_token: Platform or seller OAuth access token
            api_version: Square-Version header value
        """
        self._http = http
        self._access_token = access_token
        self._api_version = api_version

    async def batch_upsert_catalog_objects(self, body: dict[str, Any]) -> dict[str, Any]:
        return await self._request("POST", "/v2/catalog/batch-upsert", "batch_upsert_catalog_objects", body)

    async def search_catalog_items(self, body: dict[str, Any]) -> dict[str, Any]:
        return await self._request("POST", "/v2/catalog/search-catalog-items", "search_catalog_items", body)

    async def create_order(self, body: dict[str, Any]) -> dict[str, Any]:
        return await self._request("POST", "/v2/orders", "create_order", body)

    async def retrieve_order(self, order_id: str) -> dict[str, Any]:
        return await self._request("GET", f"/v2/orders/{order_id}", "retrieve_order")

    async def update_order(self, order_id: str, body: dict[str, Any]) -> dict[str, Any]:
        return await self._request("PUT", f"/v2/orders/{order_id}", "update_order", body)

    async def calculate_order(self, body: dict[str, Any]) -> dict[str, Any]:
        return await self._request("POST", "/v2/orders/calculate", "calculate_order", body)

    async def create_payment_link(self, body: dict[str, Any]) -> dict[str, Any]:
        return await self._request(
            "POST", "/v2/online-checkout/payment-links", "create_payment_link", body
        )

    def _headers(self) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self._access_token}",
            "Square-Version": self._api_version,
            "Accept": "application/json",
        }
        correlation_id = get_correlation_id()
        if correlation_id:
            headers["X-Correlation-ID"] = correlation_id
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        operation: str,
        body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Send one request and decode the JSON result.

        Raises:
            SquareAPIError: Non-2xx response from Square
            SquareTransportError: Network failure or undecodable body
        """
        try:
            response = await self._http.request(method, path, json=body, headers=self._headers())
        except httpx.HTTPError as e:
            logger.error(
                "Square request failed",
                extra={"operation": operation, "error_type": type(e).__name__, "error": str(e)},
            )
            raise SquareTransportError(
                f"Could not reach Square: {e}", {"operation": operation}
            ) from e

        try:
            payload = response.json() if response.content else {}
        except ValueError as e:
            raise SquareTransportError(
                "Square returned a non-JSON response",
                {"operation": operation, "status_code": response.status_code},
            ) from e

        if response.is_error:
            logger.warning(
                "Square API error",
                extra={"operation": operation, "status_code": response.status_code},
            )
            raise SquareAPIError(response.status_code, payload.get("errors"), operation)

        logger.debug(
            "Square request completed",
            extra={"operation": operation, "status_code": response.status_code},
        )
        return payload


class SquareClientFactory:
    """Hands out token-scoped clients over one shared connection pool."""

    def __init__(self, settings: SquareSettings, http: httpx.AsyncClient | None = None) -> None:
        """
        Initialize factory.

        Args:
            settings: Square settings (base URL, version, platform token)
            http: Optional pre-built HTTP client (tests pass a mock transport)
        """
        self._settings = settings
        self._http = http or httpx.AsyncClient(
            base_url=settings.base_url,
            timeout=settings.timeout_seconds,
        )

    @property
    def platform_token(self) -> str | None:
        return self._settings.access_token

    def for_token(self, access_token: str | None) -> SquareClient:
        """
        Build a client bound to ``access_token``.

        Raises:
            SellerNotConnectedError: If no token is given
        """
        if not access_token:
            raise SellerNotConnectedError(
                "sellerAccessToken missing (connected seller OAuth token required)",
                field="sellerAccessToken",
            )
        return SquareClient(self._http, access_token, self._settings.api_version)

    def platform(self) -> SquareClient:
        """Client for the platform's own account."""
        return self.for_token(self._settings.access_token)

    async def aclose(self) -> None:
        await self._http.aclose()
