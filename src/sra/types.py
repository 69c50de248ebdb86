"""Request and response types exchanged with the order provider.

Query types serialize to the camelCase parameter names used on the wire.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from sra.models import SignedOrderWithRemainingFillableMakerAssetAmount


class AssetPairDirection(str, Enum):
    """Which side of a pair the queried asset data plays."""

    # Asset is the taker asset; discover maker assets it can buy
    AS_BASE = "AS_BASE"
    # Asset is the maker asset; discover taker assets that can buy it
    AS_QUOTE = "AS_QUOTE"


@dataclass(frozen=True)
class OrderProviderRequest:
    """Asset pair the caller wants liquidity for.

    Attributes:
        maker_asset_data: Encoded asset data of the asset being bought
        taker_asset_data: Encoded asset data of the asset being sold
    """

    maker_asset_data: str
    taker_asset_data: str


@dataclass
class OrderProviderResponse:
    """Orders available for an OrderProviderRequest."""

    orders: list[SignedOrderWithRemainingFillableMakerAssetAmount] = field(default_factory=list)


@dataclass(frozen=True)
class RequestOpts:
    """Options common to every relayer query."""

    network_id: int
    page: int | None = None
    per_page: int | None = None

    def to_params(self) -> dict[str, Any]:
        params: dict[str, Any] = {"networkId": self.network_id}
        if self.page is not None:
            params["page"] = self.page
        if self.per_page is not None:
            params["perPage"] = self.per_page
        return params


@dataclass(frozen=True)
class OrderbookRequest:
    """Orderbook query for a base/quote pair."""

    base_asset_data: str
    quote_asset_data: str

    def to_params(self) -> dict[str, Any]:
        return {
            "baseAssetData": self.base_asset_data,
            "quoteAssetData": self.quote_asset_data,
        }


@dataclass(frozen=True)
class AssetPairsRequest:
    """Asset pairs query, optionally narrowed to pairs containing given assets."""

    asset_data_a: str | None = None
    asset_data_b: str | None = None

    def to_params(self) -> dict[str, Any]:
        params: dict[str, Any] = {}
        if self.asset_data_a is not None:
            params["assetDataA"] = self.asset_data_a
        if self.asset_data_b is not None:
            params["assetDataB"] = self.asset_data_b
        return params
