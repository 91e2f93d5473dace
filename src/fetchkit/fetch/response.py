"""Uniform result of a fetch call."""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter

from fetchkit.errors import FetchErrorClass, classify_error
from fetchkit.fetch.constants import (
    HTTP_STATUS_OK_MAX,
    HTTP_STATUS_OK_MIN,
    STATUS_NO_HTTP_STATUS,
)
from fetchkit.fetch.cookies import CookieStore, SharedCookieStore


T = TypeVar("T")


@dataclass(frozen=True)
class Response:
    """Server response, or the failure that prevented one.

    Exactly one Response is produced per fetch call. Failures are carried in
    ``error`` and ``status`` instead of being raised:

    - ``status == -3``: no network connection, nothing was sent
    - ``status == -1``: the transport failed, ``error`` holds the exception
    - any other status: the server answered, ``error`` is None

    Attributes:
        url: Resolved response URL, or the requested URL on failure.
        status: HTTP status code or a negative sentinel.
        headers: Read-only response headers, last value wins on duplicate
            names.
        error: Exception describing the failure, None on success.
        raw: Underlying httpx response, None on failure.
        body: Raw body bytes, None on failure.
        cookie_store: Store consulted by ``cookies``.
    """

    url: httpx.URL
    status: int
    headers: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )
    error: BaseException | None = None
    raw: httpx.Response | None = field(default=None, repr=False)
    body: bytes | None = field(default=None, repr=False)
    cookie_store: CookieStore = field(
        default_factory=SharedCookieStore.get_instance, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        # read-only copy, so a delivered Response cannot be altered
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @classmethod
    def from_transport(
        cls,
        url: httpx.URL,
        data: bytes | None,
        raw: httpx.Response,
        cookie_store: CookieStore | None = None,
    ) -> "Response":
        """Create a response from a completed exchange.

        Only fetch should need this.

        Args:
            url: Requested URL.
            data: Response body.
            raw: Response returned by the transport.
            cookie_store: Cookie store, the shared store if omitted.

        Returns:
            Response without error.
        """
        encoding = raw.headers.encoding
        headers = {
            key.decode(encoding): value.decode(encoding)
            for key, value in raw.headers.raw
        }
        return cls(
            url=_resolved_url(raw, url),
            status=raw.status_code,
            headers=headers,
            error=None,
            raw=raw,
            body=data,
            cookie_store=_store_or_shared(cookie_store),
        )

    @classmethod
    def from_error(
        cls,
        url: httpx.URL,
        error: BaseException,
        status: int = STATUS_NO_HTTP_STATUS,
        cookie_store: CookieStore | None = None,
    ) -> "Response":
        """Create a failed response.

        Only fetch should need this.

        Args:
            url: Requested URL.
            error: What went wrong.
            status: Sentinel status code.
            cookie_store: Cookie store, the shared store if omitted.

        Returns:
            Response without headers or body.
        """
        return cls(
            url=url,
            status=status,
            error=error,
            cookie_store=_store_or_shared(cookie_store),
        )

    @property
    def ok(self) -> bool:
        """Whether the status is in the range 200-299."""
        return HTTP_STATUS_OK_MIN <= self.status <= HTTP_STATUS_OK_MAX

    @property
    def data(self) -> bytes | None:
        """Response body bytes."""
        return self.body

    @property
    def error_class(self) -> FetchErrorClass | None:
        """Classification of ``error``, None on success."""
        if self.error is None:
            return None
        return classify_error(self.error)

    @property
    def cookies(self) -> dict[str, str]:
        """Cookies stored for the host of the response URL."""
        if not self.url.host:
            return {}
        return self.cookie_store.lookup(self.url.host)

    def header(self, name: str) -> str | None:
        """Look up a response header case-insensitively."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None

    def text(self, encoding: str = "utf-8") -> str | None:
        """Decode the body to text.

        Args:
            encoding: Codec name.

        Returns:
            Decoded text, or None if there is no body, the codec is unknown
            or the bytes are not valid in that encoding.
        """
        if self.body is None:
            return None
        try:
            return self.body.decode(encoding)
        except (UnicodeDecodeError, LookupError):
            return None

    def json(self, model: type[T] | None = None) -> T | Any | None:
        """Parse the body as JSON.

        Args:
            model: Target type, validated with pydantic. Plain JSON values
                are returned when omitted.

        Returns:
            Parsed value, or None if there is no body, the body is not JSON
            or it does not match ``model``.
        """
        if self.body is None:
            return None
        try:
            if model is None:
                return json.loads(self.body)
            return TypeAdapter(model).validate_json(self.body)
        except (ValueError, RecursionError):
            # json.loads hits the recursion limit on deeply nested arrays
            return None


def _resolved_url(raw: httpx.Response, fallback: httpx.URL) -> httpx.URL:
    try:
        return raw.url
    except RuntimeError:
        # response was built without a request
        return fallback


def _store_or_shared(cookie_store: CookieStore | None) -> CookieStore:
    if cookie_store is None:
        return SharedCookieStore.get_instance()
    return cookie_store
