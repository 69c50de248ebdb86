"""Order provider backed by a Standard Relayer API.

Fetches the asks side of a relayer orderbook for a maker/taker pair and
annotates every order with its remaining fillable maker asset amount. Also
answers which assets can be paired with a given asset.

USAGE:
    from sra import OrderProviderRequest, StandardRelayerApiOrderProvider

    async with StandardRelayerApiOrderProvider(api_url, network_id=1) as provider:
        response = await provider.get_orders(
            OrderProviderRequest(maker_asset_data=weth, taker_asset_data=dai)
        )
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from sra.client import SraHttpClient
from sra.config import Settings, get_settings
from sra.discovery import build_asset_pairs_query, extract_paired_asset_datas, resolve_per_page
from sra.errors import InvalidRequestError, RemoteServiceError
from sra.logging import get_logger
from sra.models import AssetPairsResponse, OrderbookResponse
from sra.normalizer import normalize_api_orders
from sra.order_math import get_maker_fill_amount
from sra.protocols import FillAmountCalculator, RelayerClientProtocol
from sra.types import (
    AssetPairDirection,
    OrderbookRequest,
    OrderProviderRequest,
    OrderProviderResponse,
    RequestOpts,
)
from sra.validation import (
    is_hex_string,
    validate_api_url,
    validate_network_id,
    validate_order_provider_request,
)

logger = get_logger("provider")

T = TypeVar("T")


class StandardRelayerApiOrderProvider:
    """Sources orders and asset pairs from a Standard Relayer API.

    Configuration is fixed at construction. Each operation makes exactly one
    relayer request and any relayer failure surfaces as RemoteServiceError.
    """

    def __init__(
        self,
        api_url: str,
        network_id: int,
        client: RelayerClientProtocol | None = None,
        settings: Settings | None = None,
        fill_calculator: FillAmountCalculator = get_maker_fill_amount,
        strict_asset_pairs: bool = False,
    ) -> None:
        """Initialize the provider.

        Args:
            api_url: Standard relayer API base URL to source orders from
            network_id: Ethereum network id
            client: Optional pre-configured relayer client
            settings: Settings for page size and timeout (uses global if not provided)
            fill_calculator: Maker-for-taker fill amount function
            strict_asset_pairs: Reject asset pairs that do not contain the queried asset

        Raises:
            InvalidConfigurationError: If api_url or network_id is invalid
        """
        self._api_url = validate_api_url(api_url)
        self._network_id = validate_network_id(network_id)
        self._settings = settings or get_settings()
        self._fill_calculator = fill_calculator
        self._strict_asset_pairs = strict_asset_pairs
        self._owns_client = client is None
        self._client: RelayerClientProtocol = client or SraHttpClient(
            self._api_url, timeout=self._settings.http_timeout
        )

    @classmethod
    def from_settings(
        cls, settings: Settings | None = None, **kwargs: Any
    ) -> StandardRelayerApiOrderProvider:
        """Create a provider for the relayer configured in settings."""
        settings = settings or get_settings()
        return cls(settings.api_url, settings.network_id, settings=settings, **kwargs)

    @property
    def api_url(self) -> str:
        return self._api_url

    @property
    def network_id(self) -> int:
        return self._network_id

    async def close(self) -> None:
        """Close the relayer client if this provider created it."""
        if self._owns_client:
            await self._client.close()

    async def __aenter__(self) -> StandardRelayerApiOrderProvider:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def _call_relayer(self, method: Callable[..., Awaitable[T]], *args: Any) -> T:
        """Call the relayer client, mapping every failure to RemoteServiceError."""
        try:
            return await method(*args)
        except Exception as e:
            raise RemoteServiceError() from e

    async def get_orders(self, request: OrderProviderRequest) -> OrderProviderResponse:
        """Fetch orders selling the maker asset for the taker asset.

        Args:
            request: Maker and taker asset data

        Returns:
            Asks from the relayer orderbook, in relayer order, each annotated
            with its remaining fillable maker asset amount

        Raises:
            InvalidRequestError: If the request is malformed
            RemoteServiceError: If the relayer call fails
        """
        validate_order_provider_request(request)
        orderbook_request = OrderbookRequest(
            base_asset_data=request.maker_asset_data,
            quote_asset_data=request.taker_asset_data,
        )
        opts = RequestOpts(network_id=self._network_id)

        orderbook: OrderbookResponse = await self._call_relayer(
            self._client.get_orderbook, orderbook_request, opts
        )
        orders = normalize_api_orders(orderbook.asks.records, self._fill_calculator)
        return OrderProviderResponse(orders=orders)

    async def list_paired_assets(
        self,
        asset_data: str,
        direction: AssetPairDirection,
        per_page: int | None = None,
    ) -> list[str]:
        """List asset data strings paired with ``asset_data`` on the relayer.

        Requests a single page; results are not aggregated across pages.

        Args:
            asset_data: Asset to find pairs for
            direction: AS_BASE when asset_data is the taker asset, AS_QUOTE when
                it is the maker asset
            per_page: Page size override

        Returns:
            Other-side asset data of each pair, in relayer order

        Raises:
            InvalidRequestError: If asset_data is not a hex string or per_page is
                outside 1..1000
            RemoteServiceError: If the relayer call fails
        """
        if not is_hex_string(asset_data):
            raise InvalidRequestError(f"Expected asset_data to be a hex string, got {asset_data!r}")
        page_size = resolve_per_page(direction, self._settings.default_per_page, per_page)
        request, opts = build_asset_pairs_query(asset_data, self._network_id, page_size)

        response: AssetPairsResponse = await self._call_relayer(
            self._client.get_asset_pairs, request, opts
        )
        return extract_paired_asset_datas(response.records, asset_data, self._strict_asset_pairs)

    async def get_available_maker_asset_datas(self, taker_asset_data: str) -> list[str]:
        """Asset data strings that can be purchased using ``taker_asset_data``."""
        return await self.list_paired_assets(taker_asset_data, AssetPairDirection.AS_BASE)

    async def get_available_taker_asset_datas(self, maker_asset_data: str) -> list[str]:
        """Asset data strings that can be used to purchase ``maker_asset_data``."""
        return await self.list_paired_assets(maker_asset_data, AssetPairDirection.AS_QUOTE)
