"""Tests for StandardRelayerApiOrderProvider."""

from __future__ import annotations

import asyncio
import json
from decimal import Decimal
from typing import Any
from unittest.mock import patch

import httpx
import pytest

from sra.client import SraHttpClient
from sra.config import Settings
from sra.errors import (
    InvalidConfigurationError,
    InvalidRequestError,
    ProviderErrorCode,
    RemoteServiceError,
    SraClientError,
)
from sra.models import AssetPairsItem, AssetPairsResponse, OrderbookResponse
from sra.protocols import OrderProviderProtocol, RelayerClientProtocol
from sra.provider import StandardRelayerApiOrderProvider
from sra.types import (
    AssetPairDirection,
    AssetPairsRequest,
    OrderbookRequest,
    OrderProviderRequest,
    RequestOpts,
)

API_URL = "https://api.relayer.test/0x/v2"
WETH = "0xf47261b0000000000000000000000000c02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"
DAI = "0xf47261b000000000000000000000000089d24a6b4ccb1b6faa2625fe562bdd9a23260359"
ZRX = "0xf47261b0000000000000000000000000e41d2489571d322189246dafa5ebde1f4699f498"


def api_order(maker_amount: str, taker_amount: str, meta: dict[str, Any] | None = None) -> dict:
    return {
        "order": {
            "makerAssetAmount": maker_amount,
            "takerAssetAmount": taker_amount,
            "makerAssetData": WETH,
            "takerAssetData": DAI,
        },
        "metaData": meta or {},
    }


def orderbook(asks: list[dict], bids: list[dict] | None = None) -> OrderbookResponse:
    return OrderbookResponse.model_validate(
        {"bids": {"records": bids or []}, "asks": {"records": asks}}
    )


def asset_pairs(*pairs: tuple[str, str]) -> AssetPairsResponse:
    return AssetPairsResponse(
        records=[
            AssetPairsItem.model_validate(
                {"assetDataA": {"assetData": a}, "assetDataB": {"assetData": b}}
            )
            for a, b in pairs
        ]
    )


class FakeRelayerClient:
    """In-memory relayer client that records calls."""

    def __init__(
        self,
        orderbook_response: OrderbookResponse | None = None,
        asset_pairs_response: AssetPairsResponse | None = None,
        error: BaseException | None = None,
    ) -> None:
        self.orderbook_response = orderbook_response or orderbook([])
        self.asset_pairs_response = asset_pairs_response or asset_pairs()
        self.error = error
        self.orderbook_calls: list[tuple[OrderbookRequest, RequestOpts]] = []
        self.asset_pairs_calls: list[tuple[AssetPairsRequest, RequestOpts]] = []
        self.closed = False

    async def get_orderbook(self, request: OrderbookRequest, opts: RequestOpts) -> OrderbookResponse:
        self.orderbook_calls.append((request, opts))
        if self.error is not None:
            raise self.error
        return self.orderbook_response

    async def get_asset_pairs(
        self, request: AssetPairsRequest, opts: RequestOpts
    ) -> AssetPairsResponse:
        self.asset_pairs_calls.append((request, opts))
        if self.error is not None:
            raise self.error
        return self.asset_pairs_response

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def settings() -> Settings:
    return Settings(api_url=API_URL, network_id=42, default_per_page=100, _env_file=None)


def make_provider(client: FakeRelayerClient, settings: Settings) -> StandardRelayerApiOrderProvider:
    return StandardRelayerApiOrderProvider(API_URL, 42, client=client, settings=settings)


class TestConstruction:
    """Tests for provider construction."""

    def test_stores_configuration(self, settings: Settings) -> None:
        provider = StandardRelayerApiOrderProvider(API_URL, 42, settings=settings)

        assert provider.api_url == API_URL
        assert provider.network_id == 42
        assert isinstance(provider._client, SraHttpClient)
        assert provider._client.base_url == API_URL

    def test_configuration_is_read_only(self, settings: Settings) -> None:
        provider = StandardRelayerApiOrderProvider(API_URL, 42, settings=settings)

        with pytest.raises(AttributeError):
            provider.network_id = 1  # type: ignore[misc]

    def test_invalid_url_fails_before_client_created(self, settings: Settings) -> None:
        with patch("sra.provider.SraHttpClient") as mock_client_class:
            with pytest.raises(InvalidConfigurationError):
                StandardRelayerApiOrderProvider("not a url", 42, settings=settings)

        mock_client_class.assert_not_called()

    @pytest.mark.parametrize("network_id", ["42", None, float("nan"), float("inf")])
    def test_invalid_network_id(self, network_id: Any, settings: Settings) -> None:
        with patch("sra.provider.SraHttpClient") as mock_client_class:
            with pytest.raises(InvalidConfigurationError):
                StandardRelayerApiOrderProvider(API_URL, network_id, settings=settings)

        mock_client_class.assert_not_called()

    def test_from_settings(self, settings: Settings) -> None:
        provider = StandardRelayerApiOrderProvider.from_settings(settings)

        assert provider.api_url == API_URL
        assert provider.network_id == 42

    def test_satisfies_protocols(self, settings: Settings) -> None:
        provider = make_provider(FakeRelayerClient(), settings)

        assert isinstance(provider, OrderProviderProtocol)
        assert isinstance(FakeRelayerClient(), RelayerClientProtocol)
        assert isinstance(SraHttpClient(API_URL), RelayerClientProtocol)


class TestGetOrders:
    """Tests for get_orders."""

    @pytest.mark.asyncio
    async def test_queries_orderbook_for_pair(self, settings: Settings) -> None:
        client = FakeRelayerClient()
        provider = make_provider(client, settings)

        await provider.get_orders(OrderProviderRequest(maker_asset_data=WETH, taker_asset_data=DAI))

        assert client.orderbook_calls == [
            (
                OrderbookRequest(base_asset_data=WETH, quote_asset_data=DAI),
                RequestOpts(network_id=42),
            )
        ]

    @pytest.mark.asyncio
    async def test_returns_normalized_asks(self, settings: Settings) -> None:
        client = FakeRelayerClient(
            orderbook_response=orderbook(
                asks=[
                    api_order("200", "100", {"remainingTakerAssetAmount": "50"}),
                    api_order("50", "100"),
                ],
                bids=[api_order("1", "1")],
            )
        )
        provider = make_provider(client, settings)

        response = await provider.get_orders(
            OrderProviderRequest(maker_asset_data=WETH, taker_asset_data=DAI)
        )

        assert [o.remaining_fillable_maker_asset_amount for o in response.orders] == [
            Decimal(100),
            Decimal(50),
        ]
        assert [o.maker_asset_amount for o in response.orders] == [Decimal(200), Decimal(50)]

    @pytest.mark.asyncio
    async def test_null_metadata_order_is_kept(self, settings: Settings) -> None:
        book = OrderbookResponse.model_validate(
            {
                "bids": {"records": []},
                "asks": {"records": [{**api_order("50", "100"), "metaData": None}]},
            }
        )
        provider = make_provider(FakeRelayerClient(orderbook_response=book), settings)

        response = await provider.get_orders(
            OrderProviderRequest(maker_asset_data=WETH, taker_asset_data=DAI)
        )

        [order] = response.orders
        assert order.remaining_fillable_maker_asset_amount == Decimal(50)

    @pytest.mark.asyncio
    async def test_transport_error_chained_as_cause(self, settings: Settings) -> None:
        error = SraClientError("HTTP 502: bad gateway", status_code=502)
        provider = make_provider(FakeRelayerClient(error=error), settings)

        with pytest.raises(RemoteServiceError) as exc_info:
            await provider.get_orders(
                OrderProviderRequest(maker_asset_data=WETH, taker_asset_data=DAI)
            )

        assert type(exc_info.value) is RemoteServiceError
        assert exc_info.value.__cause__ is error

    @pytest.mark.asyncio
    async def test_empty_orderbook(self, settings: Settings) -> None:
        provider = make_provider(FakeRelayerClient(), settings)

        response = await provider.get_orders(
            OrderProviderRequest(maker_asset_data=WETH, taker_asset_data=DAI)
        )

        assert response.orders == []

    @pytest.mark.asyncio
    async def test_invalid_request_makes_no_call(self, settings: Settings) -> None:
        client = FakeRelayerClient()
        provider = make_provider(client, settings)

        with pytest.raises(InvalidRequestError):
            await provider.get_orders(OrderProviderRequest(maker_asset_data="", taker_asset_data=DAI))

        assert client.orderbook_calls == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            SraClientError("HTTP 500: boom", status_code=500),
            httpx.ConnectError("connection refused"),
            httpx.ReadTimeout("timed out"),
            asyncio.TimeoutError(),
            json.JSONDecodeError("Expecting value", "<html>", 0),
            RuntimeError("unexpected"),
        ],
    )
    async def test_any_failure_is_remote_service_error(
        self, error: Exception, settings: Settings
    ) -> None:
        client = FakeRelayerClient(error=error)
        provider = make_provider(client, settings)

        with pytest.raises(RemoteServiceError) as exc_info:
            await provider.get_orders(
                OrderProviderRequest(maker_asset_data=WETH, taker_asset_data=DAI)
            )

        assert exc_info.value.code == ProviderErrorCode.STANDARD_RELAYER_API_ERROR
        assert len(client.orderbook_calls) == 1


class TestListPairedAssets:
    """Tests for asset pair discovery through the provider."""

    @pytest.mark.asyncio
    async def test_maker_discovery_requests_max_page_once(self, settings: Settings) -> None:
        client = FakeRelayerClient(asset_pairs_response=asset_pairs((DAI, WETH), (DAI, ZRX)))
        provider = make_provider(client, settings)

        result = await provider.get_available_maker_asset_datas(DAI)

        assert result == [WETH, ZRX]
        assert client.asset_pairs_calls == [
            (AssetPairsRequest(asset_data_a=DAI), RequestOpts(network_id=42, per_page=1000))
        ]

    @pytest.mark.asyncio
    async def test_taker_discovery_uses_default_page(self, settings: Settings) -> None:
        client = FakeRelayerClient(asset_pairs_response=asset_pairs((WETH, DAI)))
        provider = make_provider(client, settings)

        result = await provider.get_available_taker_asset_datas(WETH)

        assert result == [DAI]
        assert client.asset_pairs_calls == [
            (AssetPairsRequest(asset_data_a=WETH), RequestOpts(network_id=42, per_page=100))
        ]

    @pytest.mark.asyncio
    async def test_pair_symmetry(self, settings: Settings) -> None:
        client = FakeRelayerClient(asset_pairs_response=asset_pairs((WETH, DAI)))
        provider = make_provider(client, settings)

        assert await provider.list_paired_assets(WETH, AssetPairDirection.AS_BASE) == [DAI]
        assert await provider.list_paired_assets(DAI, AssetPairDirection.AS_BASE) == [WETH]

    @pytest.mark.asyncio
    async def test_per_page_override(self, settings: Settings) -> None:
        client = FakeRelayerClient()
        provider = make_provider(client, settings)

        await provider.list_paired_assets(WETH, AssetPairDirection.AS_QUOTE, per_page=10)

        assert client.asset_pairs_calls[0][1].per_page == 10

    @pytest.mark.asyncio
    async def test_unmatched_pair_falls_back_to_side_a(self, settings: Settings) -> None:
        client = FakeRelayerClient(asset_pairs_response=asset_pairs((ZRX, DAI)))
        provider = make_provider(client, settings)

        assert await provider.get_available_maker_asset_datas(WETH) == [ZRX]

    @pytest.mark.asyncio
    async def test_unmatched_pair_strict_raises(self, settings: Settings) -> None:
        client = FakeRelayerClient(asset_pairs_response=asset_pairs((ZRX, DAI)))
        provider = StandardRelayerApiOrderProvider(
            API_URL, 42, client=client, settings=settings, strict_asset_pairs=True
        )

        with pytest.raises(RemoteServiceError):
            await provider.get_available_maker_asset_datas(WETH)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("per_page", [0, -5])
    async def test_invalid_per_page_makes_no_call(self, per_page: int, settings: Settings) -> None:
        client = FakeRelayerClient()
        provider = make_provider(client, settings)

        with pytest.raises(InvalidRequestError):
            await provider.list_paired_assets(WETH, AssetPairDirection.AS_QUOTE, per_page=per_page)

        assert client.asset_pairs_calls == []

    @pytest.mark.asyncio
    async def test_invalid_asset_data(self, settings: Settings) -> None:
        client = FakeRelayerClient()
        provider = make_provider(client, settings)

        with pytest.raises(InvalidRequestError):
            await provider.get_available_maker_asset_datas("weth")

        assert client.asset_pairs_calls == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            SraClientError("HTTP 503: unavailable", status_code=503),
            httpx.ConnectTimeout("timed out"),
            ValueError("bad payload"),
        ],
    )
    async def test_any_failure_is_remote_service_error(
        self, error: Exception, settings: Settings
    ) -> None:
        client = FakeRelayerClient(error=error)
        provider = make_provider(client, settings)

        with pytest.raises(RemoteServiceError):
            await provider.get_available_taker_asset_datas(WETH)

        assert len(client.asset_pairs_calls) == 1


class TestEndToEnd:
    """Provider wired to the real HTTP client over a mock transport."""

    @pytest.mark.asyncio
    async def test_orders_over_http(self, settings: Settings) -> None:
        body = {
            "bids": {"total": 0, "page": 1, "perPage": 100, "records": []},
            "asks": {
                "total": 1,
                "page": 1,
                "perPage": 100,
                "records": [api_order("200", "100", {"remainingTakerAssetAmount": "50"})],
            },
        }
        transport = httpx.MockTransport(lambda r: httpx.Response(200, json=body))
        client = SraHttpClient(API_URL, transport=transport)

        async with StandardRelayerApiOrderProvider(
            API_URL, 42, client=client, settings=settings
        ) as provider:
            response = await provider.get_orders(
                OrderProviderRequest(maker_asset_data=WETH, taker_asset_data=DAI)
            )
        await client.close()

        [order] = response.orders
        assert order.remaining_fillable_maker_asset_amount == Decimal(100)

    @pytest.mark.asyncio
    async def test_server_error_over_http(self, settings: Settings) -> None:
        transport = httpx.MockTransport(lambda r: httpx.Response(500, text="boom"))
        client = SraHttpClient(API_URL, transport=transport)
        provider = StandardRelayerApiOrderProvider(API_URL, 42, client=client, settings=settings)

        with pytest.raises(RemoteServiceError):
            await provider.get_available_maker_asset_datas(WETH)
        await client.close()

    @pytest.mark.asyncio
    async def test_close_only_closes_owned_client(self, settings: Settings) -> None:
        client = FakeRelayerClient()
        provider = make_provider(client, settings)

        await provider.close()

        assert client.closed is False
