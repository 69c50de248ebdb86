"""Exceptions raised by the order provider."""

from enum import Enum


class ProviderErrorCode(str, Enum):
    """Error codes carried by provider exceptions."""

    INVALID_CONFIGURATION = "INVALID_CONFIGURATION"
    INVALID_REQUEST = "INVALID_REQUEST"
    STANDARD_RELAYER_API_ERROR = "STANDARD_RELAYER_API_ERROR"


class OrderProviderError(Exception):
    """Base exception for order provider errors."""

    code: ProviderErrorCode

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.code.value)


class InvalidConfigurationError(OrderProviderError):
    """Provider was constructed with a bad API URL or network id."""

    code = ProviderErrorCode.INVALID_CONFIGURATION


class InvalidRequestError(OrderProviderError):
    """Caller supplied a malformed order provider request."""

    code = ProviderErrorCode.INVALID_REQUEST


class RemoteServiceError(OrderProviderError):
    """The relayer could not be reached or returned an unusable response.

    Every transport failure maps to this one error. The underlying exception is
    chained as ``__cause__`` for debugging only; callers should not rely on it.
    """

    code = ProviderErrorCode.STANDARD_RELAYER_API_ERROR


class SraClientError(Exception):
    """Transport-level failure raised by the HTTP relayer client."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
