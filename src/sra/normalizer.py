"""Converts relayer order records into orders annotated with fillable amounts."""

from collections.abc import Iterable
from decimal import Decimal, InvalidOperation
from typing import Any

from sra.logging import get_logger
from sra.models import ApiOrder, SignedOrder, SignedOrderWithRemainingFillableMakerAssetAmount
from sra.order_math import get_maker_fill_amount
from sra.protocols import FillAmountCalculator

logger = get_logger("normalizer")

# metaData is free-form; relayers that track partial fills report this key
REMAINING_TAKER_ASSET_AMOUNT_KEY = "remainingTakerAssetAmount"


def get_remaining_taker_asset_amount(order: SignedOrder, meta_data: dict[str, Any]) -> Decimal:
    """Remaining taker amount reported in metadata, else the full taker amount.

    Args:
        order: The relayer's order
        meta_data: Free-form metadata attached to the order

    Returns:
        Remaining fillable taker asset amount
    """
    value = meta_data.get(REMAINING_TAKER_ASSET_AMOUNT_KEY)
    if value is None or value == "":
        return order.taker_asset_amount
    try:
        remaining = Decimal(str(value))
    except InvalidOperation:
        logger.debug(f"Ignoring non-numeric {REMAINING_TAKER_ASSET_AMOUNT_KEY}: {value!r}")
        return order.taker_asset_amount
    if not remaining.is_finite():
        return order.taker_asset_amount
    return remaining


def normalize_api_order(
    api_order: ApiOrder,
    fill_calculator: FillAmountCalculator = get_maker_fill_amount,
) -> SignedOrderWithRemainingFillableMakerAssetAmount:
    """Annotate one relayer order with its remaining fillable maker amount."""
    order = api_order.order
    remaining_taker = get_remaining_taker_asset_amount(order, api_order.meta_data)
    remaining_maker = fill_calculator(order, remaining_taker)
    fields = order.model_dump()
    # Relayer-sent extras under either key must not shadow the computed value
    fields.pop("remainingFillableMakerAssetAmount", None)
    fields.pop("remaining_fillable_maker_asset_amount", None)
    return SignedOrderWithRemainingFillableMakerAssetAmount(
        **fields,
        remaining_fillable_maker_asset_amount=remaining_maker,
    )


def normalize_api_orders(
    api_orders: Iterable[ApiOrder],
    fill_calculator: FillAmountCalculator = get_maker_fill_amount,
) -> list[SignedOrderWithRemainingFillableMakerAssetAmount]:
    """Annotate relayer orders with their remaining fillable maker amounts.

    Input order and count are preserved. No I/O is performed.

    Args:
        api_orders: Order records from a relayer response
        fill_calculator: Maker-for-taker fill amount function

    Returns:
        One annotated order per input record
    """
    orders = [normalize_api_order(api_order, fill_calculator) for api_order in api_orders]
    logger.debug(f"Normalized {len(orders)} orders")
    return orders
