"""Error types for fetchkit."""

from enum import Enum

import httpx


class FetchKitError(Exception):
    """Base exception for fetchkit errors."""


class NoNetworkConnectionError(FetchKitError):
    """The host has no usable network route; no request was attempted."""

    def __init__(self, message: str = "No network connection") -> None:
        """Initialize the error.

        Args:
            message: Human-readable message.
        """
        super().__init__(message)


class InvalidURLError(FetchKitError, ValueError):
    """A URL string could not be turned into an absolute http(s) URL."""

    def __init__(self, url: str, reason: str) -> None:
        """Initialize the error.

        Args:
            url: The rejected URL string.
            reason: Why it was rejected.
        """
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid URL {url!r}: {reason}")


class InvalidHeaderError(FetchKitError, ValueError):
    """A header was constructed with an empty name."""


class FetchErrorClass(str, Enum):
    """Classification of fetch failures for logs and metrics.

    - NO_NETWORK: Connectivity check failed, nothing was sent
    - NETWORK_TIMEOUT: Request timed out
    - CONNECTION_ERROR: Could not establish a connection
    - PROTOCOL_ERROR: Malformed exchange at the HTTP level
    - TOO_MANY_REDIRECTS: Redirect limit exceeded
    - UNKNOWN: Unclassified error
    """

    NO_NETWORK = "NO_NETWORK"
    NETWORK_TIMEOUT = "NETWORK_TIMEOUT"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    PROTOCOL_ERROR = "PROTOCOL_ERROR"
    TOO_MANY_REDIRECTS = "TOO_MANY_REDIRECTS"
    UNKNOWN = "UNKNOWN"


def classify_error(error: BaseException) -> FetchErrorClass:
    """Map an exception to its error class.

    Args:
        error: Exception stored on a failed response.

    Returns:
        Matching FetchErrorClass.
    """
    if isinstance(error, NoNetworkConnectionError):
        return FetchErrorClass.NO_NETWORK
    if isinstance(error, httpx.TimeoutException):
        return FetchErrorClass.NETWORK_TIMEOUT
    if isinstance(error, (httpx.ConnectError, httpx.NetworkError)):
        return FetchErrorClass.CONNECTION_ERROR
    if isinstance(error, httpx.ProtocolError):
        return FetchErrorClass.PROTOCOL_ERROR
    if isinstance(error, httpx.TooManyRedirects):
        return FetchErrorClass.TOO_MANY_REDIRECTS
    return FetchErrorClass.UNKNOWN
