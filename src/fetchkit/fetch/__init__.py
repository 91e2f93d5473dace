"""HTTP fetch layer with typed headers and automatic retries.

This module provides:
- Request building from typed headers
- Up to three sequential attempts per call, first 2xx wins
- Failures delivered as Response values instead of exceptions
- Blocking, callback and asyncio entry points
"""

from fetchkit.fetch.async_client import AsyncFetcher, afetch
from fetchkit.fetch.client import Fetcher, ResponseHandler, fetch, fetch_async
from fetchkit.fetch.config import FetchConfig
from fetchkit.fetch.connectivity import ConnectivityCheck, is_connected_to_network
from fetchkit.fetch.constants import (
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_TIMEOUT_SECONDS,
    STATUS_NO_HTTP_STATUS,
    STATUS_NO_NETWORK,
)
from fetchkit.fetch.cookies import CookieStore, SharedCookieStore
from fetchkit.fetch.metrics import FetchMetrics
from fetchkit.fetch.models import RetryPolicy
from fetchkit.fetch.redact import redact_headers, redact_url
from fetchkit.fetch.request import build_request, flatten_headers, parse_url
from fetchkit.fetch.response import Response


__all__ = [
    # Client
    "Fetcher",
    "AsyncFetcher",
    "ResponseHandler",
    "fetch",
    "fetch_async",
    "afetch",
    # Request / Response
    "build_request",
    "flatten_headers",
    "parse_url",
    "Response",
    # Config
    "FetchConfig",
    "RetryPolicy",
    # Collaborators
    "ConnectivityCheck",
    "is_connected_to_network",
    "CookieStore",
    "SharedCookieStore",
    # Constants
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_TIMEOUT_SECONDS",
    "STATUS_NO_HTTP_STATUS",
    "STATUS_NO_NETWORK",
    # Metrics
    "FetchMetrics",
    # Redaction
    "redact_headers",
    "redact_url",
]
