"""Fill-amount math for 0x orders.

Amounts are integer base units (up to uint256) held as Decimal. Results round
down so a partial fill never pays out more maker asset than settlement would.
"""

import math
from decimal import ROUND_FLOOR, Decimal
from fractions import Fraction

from sra.models import SignedOrder


def get_maker_fill_amount(order: SignedOrder, taker_fill_amount: Decimal) -> Decimal:
    """Maker asset paid out when ``taker_fill_amount`` of the taker asset is filled.

    Computes floor(taker_fill_amount * makerAssetAmount / takerAssetAmount)
    exactly. The fill is clamped to [0, takerAssetAmount] and truncated to
    whole base units; an order with a zero taker amount has nothing fillable.

    Args:
        order: Order providing the exchange rate
        taker_fill_amount: Taker asset amount being filled

    Returns:
        Maker asset amount, a non-negative integral Decimal
    """
    if order.taker_asset_amount <= 0:
        return Decimal(0)
    fill = min(max(taker_fill_amount, Decimal(0)), order.taker_asset_amount)
    whole_fill = int(fill.to_integral_value(rounding=ROUND_FLOOR))
    maker_amount = (
        Fraction(whole_fill) * Fraction(order.maker_asset_amount) / Fraction(order.taker_asset_amount)
    )
    return Decimal(math.floor(maker_amount))
