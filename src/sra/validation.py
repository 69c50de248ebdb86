"""Validation of provider configuration and caller requests."""

import math
import re
from decimal import Decimal
from numbers import Real
from typing import Any

from pydantic import AnyHttpUrl, TypeAdapter, ValidationError

from sra.errors import InvalidConfigurationError, InvalidRequestError
from sra.types import OrderProviderRequest

_HEX_STRING = re.compile(r"^0x[0-9a-fA-F]*$")
_HTTP_URL = TypeAdapter(AnyHttpUrl)


def validate_api_url(api_url: Any) -> str:
    """Ensure ``api_url`` is an absolute http(s) URL.

    Raises:
        InvalidConfigurationError: If the URL is malformed
    """
    if not isinstance(api_url, str) or not api_url.strip():
        raise InvalidConfigurationError(f"Expected api_url to be a web URI, got {api_url!r}")
    try:
        _HTTP_URL.validate_python(api_url)
    except ValidationError as e:
        raise InvalidConfigurationError(
            f"Expected api_url to be a web URI, got {api_url!r}"
        ) from e
    return api_url


def validate_network_id(network_id: Any) -> int:
    """Ensure ``network_id`` is a finite, integer-valued number.

    Raises:
        InvalidConfigurationError: If the value is not a usable network id
    """
    if isinstance(network_id, bool) or not isinstance(network_id, (Real, Decimal)):
        raise InvalidConfigurationError(f"Expected network_id to be a number, got {network_id!r}")
    if isinstance(network_id, Decimal):
        finite = network_id.is_finite()
    else:
        finite = math.isfinite(network_id)
    if not finite or int(network_id) != network_id:
        raise InvalidConfigurationError(
            f"Expected network_id to be a finite integer, got {network_id!r}"
        )
    return int(network_id)


def is_hex_string(value: Any) -> bool:
    """True for non-empty 0x-prefixed hex strings."""
    return isinstance(value, str) and len(value) > 2 and bool(_HEX_STRING.match(value))


def validate_order_provider_request(request: Any) -> OrderProviderRequest:
    """Ensure ``request`` carries hex-encoded maker and taker asset data.

    Raises:
        InvalidRequestError: If the request is malformed
    """
    if not isinstance(request, OrderProviderRequest):
        raise InvalidRequestError(f"Expected an OrderProviderRequest, got {type(request).__name__}")
    for name in ("maker_asset_data", "taker_asset_data"):
        value = getattr(request, name)
        if not is_hex_string(value):
            raise InvalidRequestError(f"Expected {name} to be a hex string, got {value!r}")
    return request
