"""Standard Relayer API client for fetching orderbooks and asset pairs."""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import ValidationError

from sra.errors import SraClientError
from sra.logging import get_logger
from sra.models import AssetPairsResponse, OrderbookResponse
from sra.types import AssetPairsRequest, OrderbookRequest, RequestOpts

logger = get_logger("client")

DEFAULT_TIMEOUT = 30.0


class SraHttpClient:
    """Async client for the public endpoints of a Standard Relayer API.

    Only the read-only endpoints the order provider needs are implemented.
    Every failure, including an unparseable payload, raises SraClientError.
    """

    def __init__(
        self,
        api_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the relayer client.

        Args:
            api_url: Relayer base URL, e.g. https://api.radarrelay.com/0x/v2
            timeout: HTTP timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self._base_url = api_url.rstrip("/")
        self._timeout = httpx.Timeout(timeout)
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        return self._base_url

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                headers={"Accept": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> SraHttpClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def _request(self, endpoint: str, params: dict[str, Any]) -> Any:
        """Make a GET request to the relayer.

        Args:
            endpoint: API endpoint path
            params: Query parameters

        Returns:
            Decoded JSON body

        Raises:
            SraClientError: If the request fails or the body is not JSON
        """
        client = self._get_client()
        try:
            logger.info(f"GET {endpoint}", extra={"params": params})
            response = await client.get(endpoint, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.debug(f"HTTP error: {e.response.status_code} - {e.response.text}")
            raise SraClientError(
                f"HTTP {e.response.status_code}: {e.response.text}",
                status_code=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            logger.debug(f"Request error: {e}")
            raise SraClientError(f"Request failed: {e}") from e
        except ValueError as e:
            logger.debug(f"Invalid JSON from {endpoint}: {e}")
            raise SraClientError(f"Invalid JSON response: {e}") from e

    async def get_orderbook(
        self,
        request: OrderbookRequest,
        opts: RequestOpts,
    ) -> OrderbookResponse:
        """Fetch the orderbook for a base/quote asset pair.

        Args:
            request: Base and quote asset data
            opts: Network id and pagination

        Returns:
            Parsed orderbook

        Raises:
            SraClientError: On transport failure or malformed payload
        """
        data = await self._request("/orderbook", {**request.to_params(), **opts.to_params()})
        try:
            orderbook = OrderbookResponse.model_validate(data)
        except ValidationError as e:
            raise SraClientError(f"Malformed orderbook response: {e}") from e

        logger.info(
            f"Fetched orderbook with {len(orderbook.bids.records)} bids "
            f"and {len(orderbook.asks.records)} asks"
        )
        return orderbook

    async def get_asset_pairs(
        self,
        request: AssetPairsRequest,
        opts: RequestOpts,
    ) -> AssetPairsResponse:
        """Fetch one page of asset pairs.

        Args:
            request: Asset data filters
            opts: Network id and pagination

        Returns:
            Parsed page of asset pairs

        Raises:
            SraClientError: On transport failure or malformed payload
        """
        data = await self._request("/asset_pairs", {**request.to_params(), **opts.to_params()})
        try:
            asset_pairs = AssetPairsResponse.model_validate(data)
        except ValidationError as e:
            raise SraClientError(f"Malformed asset pairs response: {e}") from e

        logger.info(f"Fetched {len(asset_pairs.records)} asset pairs")
        return asset_pairs
