"""fetchkit: typed HTTP fetch with automatic retries.

Example::

    from fetchkit import HTTPContentType, HTTPHeader, fetch

    response = fetch(
        "https://api.example.com/items",
        headers=[HTTPHeader.accept(HTTPContentType.JSON)],
    )
    if response.ok:
        items = response.json()
"""

from fetchkit.errors import (
    FetchErrorClass,
    FetchKitError,
    InvalidHeaderError,
    InvalidURLError,
    NoNetworkConnectionError,
)
from fetchkit.fetch import (
    AsyncFetcher,
    FetchConfig,
    Fetcher,
    Response,
    RetryPolicy,
    afetch,
    fetch,
    fetch_async,
)
from fetchkit.http import (
    HTTPAuthorization,
    HTTPContentEncoding,
    HTTPContentType,
    HTTPHeader,
    HTTPMethod,
)


__all__ = [
    # Entry points
    "fetch",
    "fetch_async",
    "afetch",
    "Fetcher",
    "AsyncFetcher",
    "FetchConfig",
    "RetryPolicy",
    "Response",
    # Vocabulary
    "HTTPMethod",
    "HTTPHeader",
    "HTTPContentType",
    "HTTPContentEncoding",
    "HTTPAuthorization",
    # Errors
    "FetchKitError",
    "NoNetworkConnectionError",
    "InvalidURLError",
    "InvalidHeaderError",
    "FetchErrorClass",
]
