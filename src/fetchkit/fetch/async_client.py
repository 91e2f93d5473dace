"""asyncio flavour of the fetch orchestrator."""

import asyncio
import time
from collections.abc import Iterable

import httpx
import structlog

from fetchkit.errors import NoNetworkConnectionError
from fetchkit.fetch.client import (
    default_headers,
    log_complete,
    record_invalid_request,
    record_transport_error,
)
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


class AsyncFetcher:
    """Coroutine-based fetcher with the same retry semantics as ``Fetcher``.

    Attempts are awaited one after another; the first 2xx response ends the
    loop. Without an injected ``httpx.AsyncClient`` a client is opened for
    the duration of each call.
    """

    def __init__(
        self,
        config: FetchConfig | None = None,
        client: httpx.AsyncClient | None = None,
        connectivity: ConnectivityCheck = is_connected_to_network,
        cookie_store: CookieStore | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            config: Fetch configuration.
            client: Transport shared by all calls, owned by the caller.
            connectivity: Reachability check, run in a worker thread before
                each call.
            cookie_store: Store backing ``Response.cookies``.
        """
        self._config = config or FetchConfig()
        self._client = client
        self._connectivity = connectivity
        if cookie_store is None:
            cookie_store = SharedCookieStore.get_instance()
        self._cookie_store = cookie_store
        self._metrics = FetchMetrics.get_instance()
        self._log = logger.bind(component="fetch")

    async def fetch(
        self,
        url: httpx.URL | str,
        headers: Iterable[HTTPHeader] = (),
        method: HTTPMethod = HTTPMethod.GET,
        body: bytes | None = None,
    ) -> Response:
        """Fetch a resource.

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
        header_list = list(headers)
        if self._client is not None:
            return await self._perform(self._client, target, header_list, method, body)

        async with self._create_client() as client:
            return await self._perform(client, target, header_list, method, body)

    def _create_client(self) -> httpx.AsyncClient:
        jar = (
            self._cookie_store.jar
            if isinstance(self._cookie_store, SharedCookieStore)
            else None
        )
        return httpx.AsyncClient(
            timeout=self._config.timeout_seconds,
            follow_redirects=self._config.follow_redirects,
            cookies=jar,
        )

    async def _perform(
        self,
        client: httpx.AsyncClient,
        url: httpx.URL,
        headers: list[HTTPHeader],
        method: HTTPMethod,
        body: bytes | None,
    ) -> Response:
        start_time_ns = time.perf_counter_ns()
        log = self._log.bind(url=redact_url(url), method=method.value)

        # the probe opens a socket, so it runs off the event loop
        if not await asyncio.to_thread(self._connectivity):
            self._metrics.record_no_network()
            log.warning("fetch_no_network")
            return Response.from_error(
                url,
                NoNetworkConnectionError(),
                status=STATUS_NO_NETWORK,
                cookie_store=self._cookie_store,
            )

        all_headers = default_headers(self._config) + headers
        policy = self._config.retry_policy
        attempt = 0
        while True:
            # rebuilt per attempt so cookies from earlier attempts are sent
            try:
                request = build_request(
                    url,
                    all_headers,
                    method,
                    body,
                    timeout=self._config.timeout_seconds,
                    client=client,
                )
            except ValueError as e:
                response = record_invalid_request(
                    self._metrics, log, url, e, self._cookie_store
                )
                attempts = attempt
                break

            response = await self._execute_single(client, request, url, log, attempt)
            if not policy.should_retry(response, attempt):
                attempts = attempt + 1
                break
            attempt += 1
            self._metrics.record_retry()
            log.debug(
                "fetch_retry",
                attempt=attempt,
                max_attempts=policy.max_attempts,
                previous_status=response.status,
            )

        duration_ms = (time.perf_counter_ns() - start_time_ns) / 1_000_000
        self._metrics.record_fetch(duration_ms)
        log_complete(log, response, attempts, duration_ms)
        return response

    async def _execute_single(
        self,
        client: httpx.AsyncClient,
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
            raw = await client.send(
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


async def afetch(
    url: httpx.URL | str,
    headers: Iterable[HTTPHeader] = (),
    method: HTTPMethod = HTTPMethod.GET,
    body: bytes | None = None,
) -> Response:
    """Fetch a resource from a coroutine, configured from the environment.

    See ``AsyncFetcher.fetch``.
    """
    fetcher = AsyncFetcher(config=get_settings().to_fetch_config())
    return await fetcher.fetch(url, headers, method, body)
