"""Protocol definitions for the order provider's collaborators.

The relayer transport and the fill-amount math are consumed through these
narrow interfaces so they can be swapped for fakes in tests.

USAGE:
    from sra.protocols import RelayerClientProtocol

    async def top_of_book(client: RelayerClientProtocol, request, opts):
        book = await client.get_orderbook(request, opts)
        return book.asks.records[:1]
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sra.models import AssetPairsResponse, OrderbookResponse, SignedOrder
    from sra.types import (
        AssetPairsRequest,
        OrderbookRequest,
        OrderProviderRequest,
        OrderProviderResponse,
        RequestOpts,
    )


@runtime_checkable
class RelayerClientProtocol(Protocol):
    """Protocol for read-only Standard Relayer API access."""

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
            OrderbookResponse with bids and asks
        """
        ...

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
            One page of AssetPairsItem records
        """
        ...

    async def close(self) -> None:
        """Release transport resources."""
        ...


class FillAmountCalculator(Protocol):
    """Computes the maker amount received for filling part of an order."""

    def __call__(self, order: SignedOrder, taker_fill_amount: Decimal) -> Decimal: ...


@runtime_checkable
class OrderProviderProtocol(Protocol):
    """Protocol for anything that can source orders for an asset pair."""

    async def get_orders(self, request: OrderProviderRequest) -> OrderProviderResponse:
        """Return orders matching the request."""
        ...

    async def get_available_maker_asset_datas(self, taker_asset_data: str) -> list[str]:
        """Return asset data strings that can be bought with taker_asset_data."""
        ...

    async def get_available_taker_asset_datas(self, maker_asset_data: str) -> list[str]:
        """Return asset data strings that can be used to buy maker_asset_data."""
        ...
