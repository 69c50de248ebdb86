"""Asset pair discovery: which assets trade against a given asset."""

from collections.abc import Iterable

from sra.config import MAX_PER_PAGE
from sra.errors import InvalidRequestError, RemoteServiceError
from sra.logging import get_logger
from sra.models import AssetPairsItem
from sra.types import AssetPairDirection, AssetPairsRequest, RequestOpts

logger = get_logger("discovery")


def build_asset_pairs_query(
    asset_data: str,
    network_id: int,
    per_page: int,
) -> tuple[AssetPairsRequest, RequestOpts]:
    """Query for pairs containing ``asset_data``, requesting a single page.

    The asset is always sent as assetDataA; relayers match it against either
    side of a pair.
    """
    return AssetPairsRequest(asset_data_a=asset_data), RequestOpts(
        network_id=network_id, per_page=per_page
    )


def resolve_per_page(
    direction: AssetPairDirection,
    default_per_page: int,
    per_page: int | None = None,
) -> int:
    """Page size for a discovery query.

    Base-side discovery asks for the maximum page; quote-side discovery uses
    the configured default. An explicit ``per_page`` wins.

    Raises:
        InvalidRequestError: If ``per_page`` is outside 1..MAX_PER_PAGE
    """
    if per_page is not None:
        if isinstance(per_page, bool) or not 0 < per_page <= MAX_PER_PAGE:
            raise InvalidRequestError(
                f"Expected per_page between 1 and {MAX_PER_PAGE}, got {per_page!r}"
            )
        return per_page
    if direction == AssetPairDirection.AS_BASE:
        return MAX_PER_PAGE
    return default_per_page


def get_paired_asset_data(item: AssetPairsItem, asset_data: str, strict: bool = False) -> str:
    """Asset data on the other side of ``item`` from ``asset_data``.

    If neither side matches, side A is returned and a warning is logged.
    With ``strict`` a RemoteServiceError is raised instead.
    """
    side_a = item.asset_data_a.asset_data
    side_b = item.asset_data_b.asset_data
    if side_a == asset_data:
        return side_b
    if side_b == asset_data:
        return side_a
    if strict:
        raise RemoteServiceError(f"Asset pair {side_a}/{side_b} does not contain {asset_data}")
    logger.warning(
        "Asset pair does not contain queried asset, using side A",
        extra={"asset_data": asset_data, "asset_data_a": side_a, "asset_data_b": side_b},
    )
    return side_a


def extract_paired_asset_datas(
    records: Iterable[AssetPairsItem],
    asset_data: str,
    strict: bool = False,
) -> list[str]:
    """Other-side asset data for every pair, in response order, duplicates kept.

    Args:
        records: Asset pair records from one page of results
        asset_data: The asset that was queried
        strict: Raise on pairs that do not contain ``asset_data``

    Returns:
        List of paired asset data strings
    """
    paired = [get_paired_asset_data(item, asset_data, strict) for item in records]
    logger.debug(f"Found {len(paired)} assets paired with {asset_data}")
    return paired
