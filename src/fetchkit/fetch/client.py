"""HTTP fetch with connectivity check, retries, and callback delivery."""

import time
from collections.abc import Callable, Iterable
from concurrent.futures import Future, ThreadPoolExecutor
from functools import partial
from threading import Lock

import httpx
import structlog

from fetchkit.errors import NoNetworkConnectionError, classify_error
from fetchkit.fetch.config import FetchConfig
from fetchkit.fetch.connectivity import ConnectivityCheck, is_connected_to_network
from fetchkit.fetch.constants import STATUS_NO_NETWORK
from fetchkit.fetch.cookies import CookieStore, SharedCookieStore
from fetchkit.fetch.metrics import FetchMetrics
from fetchkit.fetch.redact import redact_headers, redact_url
from fetchkit.fetch.request import build_request, parse_url
from fetchkit.fetch.response import Response
from fetchkit.http.header import HTTPHeader
from fetchkit.http.method import HTTPMethod
from fetchkit.settings.app import get_settings


logger = structlog.get_logger()

ResponseHandler = Callable[[Response], None]

# Module-level singleton state
_default_fetcher: "Fetcher | None" = None
_default_lock: Lock = Lock()


class Fetcher:
    """HTTP client wrapper that turns every call into one Response.

    Each call:
    - Checks connectivity and answers with status -3 when offline
    - Builds the request from typed headers
    - Makes up to ``max_attempts`` sequential attempts, stopping at the
      first 2xx response
    - Returns the last attempt's Response otherwise

    The transport is an ``httpx.Client``, which only ever produces HTTP
    responses. Callback-style calls run on a thread pool owned by the
    fetcher.
    """

    def __init__(
        self,
        config: FetchConfig | None = None,
        client: httpx.Client | None = None,
        connectivity: ConnectivityCheck = is_connected_to_network,
        cookie_store: CookieStore | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            config: Fetch configuration.
            client: Transport. A client sharing the cookie store's jar is
                created (and owned) when omitted.
            connectivity: Reachability check run before each call.
            cookie_store: Store backing ``Response.cookies``.
        """
        self._config = config or FetchConfig()
        self._connectivity = connectivity
        if cookie_store is None:
            cookie_store = SharedCookieStore.get_instance()
        self._cookie_store = cookie_store
        self._owns_client = client is None
        self._client = client if client is not None else self._create_client()
        self._executor: ThreadPoolExecutor | None = None
        self._executor_lock = Lock()
        self._metrics = FetchMetrics.get_instance()
        self._log = logger.bind(component="fetch")

    @classmethod
    def get_default(cls) -> "Fetcher":
        """Get the process-wide fetcher configured from the environment."""
        global _default_fetcher  # noqa: PLW0603
        if _default_fetcher is None:
            with _default_lock:
                if _default_fetcher is None:
                    _default_fetcher = cls(config=get_settings().to_fetch_config())
        return _default_fetcher

    @classmethod
    def reset_default(cls) -> None:
        """Close and drop the process-wide fetcher."""
        global _default_fetcher  # noqa: PLW0603
        with _default_lock:
            if _default_fetcher is not None:
                _default_fetcher.close()
            _default_fetcher = None

    @property
    def config(self) -> FetchConfig:
        """Fetch configuration in use."""
        return self._config

    def fetch(
        self,
        url: httpx.URL | str,
        headers: Iterable[HTTPHeader] = (),
        method: HTTPMethod = HTTPMethod.GET,
        body: bytes | None = None,
    ) -> Response:
        """Fetch a resource, blocking until the final Response is ready.

        Args:
            url: Target URL.
            headers: Request headers.
            method: HTTP method.
            body: Optional request body.

        Returns:
            Response of the first successful attempt, or of the last one.

        Raises:
            InvalidURLError: If ``url`` is not an absolute http(s) URL.
        """
        target = parse_url(url)
        return self._perform(target, list(headers), method, body)

    def fetch_async(
        self,
        url: httpx.URL | str,
        headers: Iterable[HTTPHeader] = (),
        method: HTTPMethod = HTTPMethod.GET,
        body: bytes | None = None,
        callback: ResponseHandler | None = None,
    ) -> "Future[Response]":
        """Fetch a resource on a worker thread and return immediately.

        Args:
            url: Target URL.
            headers: Request headers.
            method: HTTP method.
            body: Optional request body.
            callback: Called exactly once with the final Response.

        Returns:
            Future resolving to the same Response the callback receives.

        Raises:
            InvalidURLError: If ``url`` is not an absolute http(s) URL.
        """
        target = parse_url(url)
        return self._get_executor().submit(
            self._perform_with_callback,
            target,
            list(headers),
            method,
            body,
            callback,
        )

    def close(self) -> None:
        """Stop the worker pool and close the client if this fetcher owns it."""
        with self._executor_lock:
            if self._executor is not None:
                self._executor.shutdown(wait=True)
                self._executor = None
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "Fetcher":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _create_client(self) -> httpx.Client:
        jar = (
            self._cookie_store.jar
            if isinstance(self._cookie_store, SharedCookieStore)
            else None
        )
        return httpx.Client(
            timeout=self._config.timeout_seconds,
            follow_redirects=self._config.follow_redirects,
            cookies=jar,
        )

    def _get_executor(self) -> ThreadPoolExecutor:
        with self._executor_lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self._config.max_workers,
                    thread_name_prefix="fetchkit",
                )
            return self._executor

    def _perform_with_callback(
        self,
        url: httpx.URL,
        headers: list[HTTPHeader],
        method: HTTPMethod,
        body: bytes | None,
        callback: ResponseHandler | None,
    ) -> Response:
        try:
            response = self._perform(url, headers, method, body)
        except Exception:
            self._log.exception("fetch_failed", url=redact_url(url))
            raise
        if callback is not None:
            try:
                callback(response)
            except Exception:
                self._log.exception("fetch_callback_failed", url=redact_url(url))
                raise
        return response

    def _perform(
        self,
        url: httpx.URL,
        headers: list[HTTPHeader],
        method: HTTPMethod,
        body: bytes | None,
    ) -> Response:
        """Run the connectivity check and the retry loop for one call."""
        start_time_ns = time.perf_counter_ns()
        log = self._log.bind(url=redact_url(url), method=method.value)

        if not self._connectivity():
            self._metrics.record_no_network()
            log.warning("fetch_no_network")
            return Response.from_error(
                url,
                NoNetworkConnectionError(),
                status=STATUS_NO_NETWORK,
                cookie_store=self._cookie_store,
            )

        new_request = partial(
            build_request,
            url,
            default_headers(self._config) + headers,
            method,
            body,
            timeout=self._config.timeout_seconds,
            client=self._client,
        )
        response, attempts = self._execute_with_retry(new_request, url, log)

        duration_ms = (time.perf_counter_ns() - start_time_ns) / 1_000_000
        self._metrics.record_fetch(duration_ms)
        log_complete(log, response, attempts, duration_ms)
        return response

    def _execute_with_retry(
        self,
        new_request: Callable[[], httpx.Request],
        url: httpx.URL,
        log: structlog.stdlib.BoundLogger,
    ) -> tuple[Response, int]:
        """Issue the request until it succeeds or attempts run out.

        The request is rebuilt for every attempt so cookies set by an earlier
        attempt are sent with the next one.

        Returns:
            Final Response and the number of attempts made.
        """
        policy = self._config.retry_policy
        attempt = 0
        while True:
            try:
                request = new_request()
            except ValueError as e:
                failed = record_invalid_request(
                    self._metrics, log, url, e, self._cookie_store
                )
                return failed, attempt

            response = self._execute_single(request, url, log, attempt)
            if not policy.should_retry(response, attempt):
                return response, attempt + 1

            attempt += 1
            self._metrics.record_retry()
            log.debug(
                "fetch_retry",
                attempt=attempt,
                max_attempts=policy.max_attempts,
                previous_status=response.status,
            )

    def _execute_single(
        self,
        request: httpx.Request,
        url: httpx.URL,
        log: structlog.stdlib.BoundLogger,
        attempt: int,
    ) -> Response:
        log.debug(
            "fetch_attempt",
            attempt=attempt,
            headers=redact_headers(dict(request.headers)),
        )
        try:
            raw = self._client.send(
                request, follow_redirects=self._config.follow_redirects
            )
        except httpx.HTTPError as e:
            return record_transport_error(
                self._metrics, log, url, e, attempt, self._cookie_store
            )

        self._metrics.record_attempt(raw.status_code, len(raw.content))
        return Response.from_transport(
            url, raw.content, raw, cookie_store=self._cookie_store
        )


def default_headers(config: FetchConfig) -> list[HTTPHeader]:
    """Headers sent on every request; caller headers override them."""
    if config.user_agent:
        return [HTTPHeader.user_agent(config.user_agent)]
    return []


def record_transport_error(
    metrics: FetchMetrics,
    log: structlog.stdlib.BoundLogger,
    url: httpx.URL,
    error: httpx.HTTPError,
    attempt: int,
    cookie_store: CookieStore,
) -> Response:
    """Turn a transport exception into a failed Response."""
    error_class = classify_error(error)
    metrics.record_failure(error_class)
    log.debug(
        "fetch_attempt_failed",
        attempt=attempt,
        error_class=error_class.value,
        error=str(error),
    )
    return Response.from_error(url, error, cookie_store=cookie_store)


def record_invalid_request(
    metrics: FetchMetrics,
    log: structlog.stdlib.BoundLogger,
    url: httpx.URL,
    error: ValueError,
    cookie_store: CookieStore,
) -> Response:
    """Turn a request that cannot be encoded into a failed Response.

    httpx raises ``UnicodeEncodeError`` for header values outside ASCII.
    Such a request can never be sent, so it is not retried.
    """
    metrics.record_failure(classify_error(error))
    log.warning("fetch_request_invalid", error=str(error))
    return Response.from_error(url, error, cookie_store=cookie_store)


def log_complete(
    log: structlog.stdlib.BoundLogger,
    response: Response,
    attempts: int,
    duration_ms: float,
) -> None:
    """Log the outcome of a fetch call."""
    log.info(
        "fetch_complete",
        status=response.status,
        ok=response.ok,
        attempts=attempts,
        bytes=len(response.body or b""),
        duration_ms=round(duration_ms, 2),
        error_class=response.error_class.value if response.error_class else None,
    )


def fetch(
    url: httpx.URL | str,
    headers: Iterable[HTTPHeader] = (),
    method: HTTPMethod = HTTPMethod.GET,
    body: bytes | None = None,
) -> Response:
    """Fetch a resource synchronously with the default fetcher.

    See ``Fetcher.fetch``.
    """
    return Fetcher.get_default().fetch(url, headers, method, body)


def fetch_async(
    url: httpx.URL | str,
    headers: Iterable[HTTPHeader] = (),
    method: HTTPMethod = HTTPMethod.GET,
    body: bytes | None = None,
    callback: ResponseHandler | None = None,
) -> "Future[Response]":
    """Fetch a resource in the background with the default fetcher.

    See ``Fetcher.fetch_async``.
    """
    return Fetcher.get_default().fetch_async(url, headers, method, body, callback)
