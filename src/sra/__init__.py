"""Order provider for 0x Standard Relayer API liquidity.

USAGE:
    from sra import OrderProviderRequest, StandardRelayerApiOrderProvider

    provider = StandardRelayerApiOrderProvider("https://api.radarrelay.com/0x/v2", 1)
    response = await provider.get_orders(OrderProviderRequest(weth_asset_data, dai_asset_data))
"""

from sra.client import SraHttpClient
from sra.errors import (
    InvalidConfigurationError,
    InvalidRequestError,
    OrderProviderError,
    ProviderErrorCode,
    RemoteServiceError,
    SraClientError,
)
from sra.models import (
    ApiOrder,
    Asset,
    AssetPairsItem,
    AssetPairsResponse,
    OrderbookResponse,
    PaginatedCollection,
    SignedOrder,
    SignedOrderWithRemainingFillableMakerAssetAmount,
)
from sra.normalizer import normalize_api_orders
from sra.order_math import get_maker_fill_amount
from sra.protocols import FillAmountCalculator, OrderProviderProtocol, RelayerClientProtocol
from sra.provider import StandardRelayerApiOrderProvider
from sra.types import (
    AssetPairDirection,
    AssetPairsRequest,
    OrderbookRequest,
    OrderProviderRequest,
    OrderProviderResponse,
    RequestOpts,
)

__all__ = [
    # Provider
    "StandardRelayerApiOrderProvider",
    "SraHttpClient",
    # Protocols
    "RelayerClientProtocol",
    "OrderProviderProtocol",
    "FillAmountCalculator",
    # Types
    "AssetPairDirection",
    "OrderProviderRequest",
    "OrderProviderResponse",
    "OrderbookRequest",
    "AssetPairsRequest",
    "RequestOpts",
    # Models
    "SignedOrder",
    "SignedOrderWithRemainingFillableMakerAssetAmount",
    "ApiOrder",
    "Asset",
    "AssetPairsItem",
    "AssetPairsResponse",
    "OrderbookResponse",
    "PaginatedCollection",
    # Functions
    "normalize_api_orders",
    "get_maker_fill_amount",
    # Errors
    "OrderProviderError",
    "ProviderErrorCode",
    "InvalidConfigurationError",
    "InvalidRequestError",
    "RemoteServiceError",
    "SraClientError",
]
