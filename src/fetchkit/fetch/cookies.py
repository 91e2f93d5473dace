"""Cookie store consulted by ``Response.cookies``."""

from http.cookiejar import CookieJar
from threading import Lock
from typing import Protocol, runtime_checkable


@runtime_checkable
class CookieStore(Protocol):
    """Read-only view of stored cookies.

    Abstracts the process-wide cookie storage so tests can substitute it.
    """

    def lookup(self, host: str) -> dict[str, str]:
        """Return the cookies stored for a host.

        Args:
            host: Host name of the response URL.

        Returns:
            Mapping of cookie name to value.
        """
        ...


# Module-level singleton state
_shared_instance: "SharedCookieStore | None" = None
_shared_lock: Lock = Lock()


class SharedCookieStore:
    """Cookie store backed by a ``CookieJar``.

    The jar is handed to the HTTP client, so cookies set by responses are
    visible here. Use get_instance() for the process-wide store.
    """

    def __init__(self, jar: CookieJar | None = None) -> None:
        """Initialize the store.

        Args:
            jar: Jar to read from. A new empty jar is created if omitted.
        """
        self.jar = jar if jar is not None else CookieJar()

    @classmethod
    def get_instance(cls) -> "SharedCookieStore":
        """Get the process-wide store (thread-safe)."""
        global _shared_instance  # noqa: PLW0603
        if _shared_instance is None:
            with _shared_lock:
                if _shared_instance is None:
                    _shared_instance = cls()
        return _shared_instance

    @classmethod
    def reset(cls) -> None:
        """Drop the process-wide store (for testing)."""
        global _shared_instance  # noqa: PLW0603
        with _shared_lock:
            _shared_instance = None

    def lookup(self, host: str) -> dict[str, str]:
        """Return cookies whose domain is exactly ``host``.

        A leading dot on the cookie domain is ignored, so ``.example.com``
        matches ``example.com`` but not ``www.example.com``.
        """
        wanted = host.lower()
        return {
            cookie.name: cookie.value or ""
            for cookie in self.jar
            if cookie.domain.lstrip(".").lower() == wanted
        }
