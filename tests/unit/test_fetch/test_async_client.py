"""Unit tests for the asyncio fetcher."""

import asyncio
import threading

import httpx
import pytest

from fetchkit.errors import InvalidURLError, NoNetworkConnectionError
from fetchkit.fetch.async_client import AsyncFetcher, afetch
from fetchkit.fetch.config import FetchConfig
from fetchkit.fetch.connectivity import ConnectivityCheck
from fetchkit.fetch.cookies import SharedCookieStore
from fetchkit.fetch.metrics import FetchMetrics
from fetchkit.fetch.models import RetryPolicy
from fetchkit.fetch.response import Response
from fetchkit.http.header import HTTPHeader
from fetchkit.http.method import HTTPMethod
from tests.helpers.transport import ScriptedTransport, StaticCookieStore


URL = "https://api.example.com/items"


@pytest.fixture(autouse=True)
def reset_metrics() -> None:
    """Start every test with fresh metrics."""
    FetchMetrics.reset()


def run_fetch(
    transport: ScriptedTransport,
    connected: bool = True,
    config: FetchConfig | None = None,
    connectivity: ConnectivityCheck | None = None,
    cookie_store: SharedCookieStore | None = None,
    **kwargs: object,
) -> Response:
    """Run one async fetch against a scripted transport."""
    jar = cookie_store.jar if cookie_store is not None else None

    async def go() -> Response:
        async with transport.async_client(cookies=jar) as client:
            fetcher = AsyncFetcher(
                config=config,
                client=client,
                connectivity=connectivity or (lambda: connected),
                cookie_store=cookie_store or StaticCookieStore(),
            )
            return await fetcher.fetch(URL, **kwargs)  # type: ignore[arg-type]

    return asyncio.run(go())


class TestAsyncRetryLoop:
    """Tests for the awaited attempt loop."""

    def test_first_attempt_success(self) -> None:
        """Test that a 200 on the first attempt makes one call."""
        transport = ScriptedTransport([200])

        response = run_fetch(transport)

        assert transport.call_count == 1
        assert response.ok is True
        assert response.error is None

    def test_success_on_third_attempt(self) -> None:
        """Test that two 500s then a 200 make three calls."""
        transport = ScriptedTransport([500, 500, 200])

        response = run_fetch(transport)

        assert transport.call_count == 3
        assert response.status == 200

    def test_all_attempts_fail(self) -> None:
        """Test that the last non-2xx response is delivered."""
        transport = ScriptedTransport([500])

        response = run_fetch(transport)

        assert transport.call_count == 3
        assert response.status == 500
        assert response.ok is False
        assert response.error is None

    def test_transport_errors(self) -> None:
        """Test that transport errors become status -1 responses."""
        transport = ScriptedTransport([httpx.ConnectError("refused")])

        response = run_fetch(transport)

        assert transport.call_count == 3
        assert response.status == -1
        assert isinstance(response.error, httpx.ConnectError)

    def test_attempt_budget(self) -> None:
        """Test that the retry policy bounds the attempts."""
        transport = ScriptedTransport([500])
        config = FetchConfig(retry_policy=RetryPolicy(max_attempts=1))

        run_fetch(transport, config=config)

        assert transport.call_count == 1

    def test_request_rebuilt_per_attempt(self) -> None:
        """Test that a cookie set by one attempt is sent with the next."""
        transport = ScriptedTransport(
            [
                httpx.Response(500, headers={"Set-Cookie": "session=abc; Path=/"}),
                200,
            ]
        )

        response = run_fetch(transport, cookie_store=SharedCookieStore())

        assert response.status == 200
        assert "cookie" not in transport.requests[0].headers
        assert transport.requests[1].headers["Cookie"] == "session=abc"

    def test_unencodable_header(self) -> None:
        """Test that a header httpx cannot encode gives a failed response."""
        transport = ScriptedTransport([200])

        response = run_fetch(
            transport, headers=[HTTPHeader.accept_language("français")]
        )

        assert transport.call_count == 0
        assert response.status == -1
        assert isinstance(response.error, UnicodeEncodeError)

    def test_request_shape(self) -> None:
        """Test that method, headers and body reach the transport."""
        transport = ScriptedTransport([204])

        run_fetch(
            transport,
            headers=[HTTPHeader.custom("X-Id", "9")],
            method=HTTPMethod.PATCH,
            body=b"patch",
        )

        request = transport.requests[0]
        assert request.method == "PATCH"
        assert request.headers["X-Id"] == "9"
        assert request.content == b"patch"


class TestAsyncConnectivity:
    """Tests for the offline short-circuit."""

    def test_offline(self) -> None:
        """Test that no call is made when offline."""
        transport = ScriptedTransport([200])

        response = run_fetch(transport, connected=False)

        assert transport.call_count == 0
        assert response.status == -3
        assert isinstance(response.error, NoNetworkConnectionError)

    def test_checked_off_the_event_loop(self) -> None:
        """Test that the reachability check runs in a worker thread."""
        threads: list[threading.Thread] = []

        def check() -> bool:
            threads.append(threading.current_thread())
            return True

        run_fetch(ScriptedTransport([200]), connectivity=check)

        assert len(threads) == 1
        assert threads[0] is not threading.main_thread()


class TestAfetch:
    """Tests for the module-level coroutine."""

    def test_invalid_url_raises(self) -> None:
        """Test that malformed URLs raise before any request."""
        with pytest.raises(InvalidURLError):
            asyncio.run(afetch("ftp://example.com/file"))
