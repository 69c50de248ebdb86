"""Pydantic v2 data models for Standard Relayer API payloads."""

from decimal import Decimal
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

T = TypeVar("T")

NULL_ADDRESS = "0x0000000000000000000000000000000000000000"


# =============================================================================
# Orders
# =============================================================================


class SignedOrder(BaseModel):
    """A signed 0x order as published by a relayer.

    Amounts are arbitrary-precision base units. Fields the relayer sends
    beyond the standard order schema are kept as extras.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    maker_address: str = Field(default=NULL_ADDRESS, alias="makerAddress")
    taker_address: str = Field(default=NULL_ADDRESS, alias="takerAddress")
    fee_recipient_address: str = Field(default=NULL_ADDRESS, alias="feeRecipientAddress")
    sender_address: str = Field(default=NULL_ADDRESS, alias="senderAddress")
    maker_asset_amount: Decimal = Field(ge=0, alias="makerAssetAmount")
    taker_asset_amount: Decimal = Field(ge=0, alias="takerAssetAmount")
    maker_fee: Decimal = Field(default=Decimal(0), ge=0, alias="makerFee")
    taker_fee: Decimal = Field(default=Decimal(0), ge=0, alias="takerFee")
    expiration_time_seconds: Decimal = Field(default=Decimal(0), alias="expirationTimeSeconds")
    salt: Decimal = Field(default=Decimal(0))
    maker_asset_data: str = Field(alias="makerAssetData")
    taker_asset_data: str = Field(alias="takerAssetData")
    exchange_address: str = Field(default=NULL_ADDRESS, alias="exchangeAddress")
    signature: str = ""


class SignedOrderWithRemainingFillableMakerAssetAmount(SignedOrder):
    """Signed order annotated with how much of its maker asset is still fillable."""

    remaining_fillable_maker_asset_amount: Decimal = Field(
        ge=0, alias="remainingFillableMakerAssetAmount"
    )


class ApiOrder(BaseModel):
    """Order record returned by the relayer: the order plus free-form metadata."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    order: SignedOrder
    meta_data: dict[str, Any] = Field(default_factory=dict, alias="metaData")

    @field_validator("meta_data", mode="before")
    @classmethod
    def null_meta_data_is_empty(cls, v: Any) -> Any:
        """Relayers may send metaData: null for orders they track nothing about."""
        return {} if v is None else v


# =============================================================================
# Pagination
# =============================================================================


class PaginatedCollection(BaseModel, Generic[T]):
    """One page of records from a paginated relayer endpoint."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    total: int = 0
    page: int = 1
    per_page: int = Field(default=0, alias="perPage")
    records: list[T] = Field(default_factory=list)


class OrderbookResponse(BaseModel):
    """Both sides of a relayer orderbook for one asset pair."""

    model_config = ConfigDict(extra="ignore")

    bids: PaginatedCollection[ApiOrder]
    asks: PaginatedCollection[ApiOrder]


# =============================================================================
# Asset pairs
# =============================================================================


class Asset(BaseModel):
    """One side of a tradeable asset pair."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    asset_data: str = Field(alias="assetData")
    min_amount: Decimal = Field(default=Decimal(0), alias="minAmount")
    max_amount: Decimal = Field(default=Decimal(0), alias="maxAmount")
    precision: int = 18


class AssetPairsItem(BaseModel):
    """A pair of assets the relayer has orders for."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    asset_data_a: Asset = Field(alias="assetDataA")
    asset_data_b: Asset = Field(alias="assetDataB")


AssetPairsResponse = PaginatedCollection[AssetPairsItem]
