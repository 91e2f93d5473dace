"""Request construction for the fetch layer."""

from collections.abc import Iterable

import httpx

from fetchkit.errors import InvalidURLError
from fetchkit.fetch.constants import ALLOWED_URL_SCHEMES, DEFAULT_TIMEOUT_SECONDS
from fetchkit.http.header import HTTPHeader
from fetchkit.http.method import HTTPMethod


def parse_url(url: httpx.URL | str) -> httpx.URL:
    """Parse a URL and check it is an absolute http(s) URL.

    Args:
        url: URL value or string.

    Returns:
        Parsed URL.

    Raises:
        InvalidURLError: If the URL cannot be parsed, uses another scheme,
            or has no host.
    """
    if isinstance(url, httpx.URL):
        parsed = url
    else:
        try:
            parsed = httpx.URL(url)
        except (httpx.InvalidURL, TypeError) as e:
            raise InvalidURLError(str(url), str(e)) from e

    if parsed.scheme not in ALLOWED_URL_SCHEMES:
        raise InvalidURLError(str(url), "scheme must be http or https")
    if not parsed.host:
        raise InvalidURLError(str(url), "missing host")
    return parsed


def flatten_headers(headers: Iterable[HTTPHeader]) -> dict[str, str]:
    """Render headers into a mapping.

    Header names are case-insensitive. When a name occurs more than once,
    in any spelling, the last occurrence wins and keeps its spelling.

    Args:
        headers: Headers in the order given by the caller.

    Returns:
        Mapping of header name to value.
    """
    folded: dict[str, tuple[str, str]] = {}
    for header in headers:
        name, value = header.create_header()
        folded[name.lower()] = (name, value)
    return dict(folded.values())


def build_request(
    url: httpx.URL | str,
    headers: Iterable[HTTPHeader] = (),
    method: HTTPMethod = HTTPMethod.GET,
    body: bytes | None = None,
    *,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    client: httpx.Client | httpx.AsyncClient | None = None,
) -> httpx.Request:
    """Build a transport request.

    Args:
        url: Target URL.
        headers: Request headers.
        method: HTTP method.
        body: Optional request body.
        timeout: Timeout in seconds applied to connect, read, write and pool.
        client: Client whose defaults (cookie jar, default headers) apply.

    Returns:
        Request ready to be sent.
    """
    flat = flatten_headers(headers)
    if client is not None:
        return client.build_request(
            method.value,
            url,
            headers=flat,
            content=body,
            timeout=timeout,
        )
    return httpx.Request(
        method.value,
        url,
        headers=flat,
        content=body,
        extensions={"timeout": httpx.Timeout(timeout).as_dict()},
    )
