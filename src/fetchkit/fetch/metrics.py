"""Metrics collection for the fetch layer."""

from dataclasses import dataclass, field
from threading import Lock

from fetchkit.errors import FetchErrorClass


# Module-level singleton state
_metrics_instance: "FetchMetrics | None" = None
_metrics_lock: Lock = Lock()


@dataclass
class FetchMetrics:
    """Thread-safe metrics for fetch operations.

    Tracks attempts by status, retries, failures and timing.
    Use get_instance() for singleton access.
    """

    _lock: Lock = field(default_factory=Lock, repr=False, compare=False)

    attempts_by_status: dict[int, int] = field(default_factory=dict)
    failures_by_class: dict[str, int] = field(default_factory=dict)
    retries_total: int = 0
    no_network_total: int = 0
    bytes_total: int = 0
    duration_ms_total: float = 0.0
    fetch_count: int = 0

    @classmethod
    def get_instance(cls) -> "FetchMetrics":
        """Get the singleton instance (thread-safe)."""
        global _metrics_instance  # noqa: PLW0603
        if _metrics_instance is None:
            with _metrics_lock:
                if _metrics_instance is None:
                    _metrics_instance = cls()
        return _metrics_instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance (for testing)."""
        global _metrics_instance  # noqa: PLW0603
        with _metrics_lock:
            _metrics_instance = None

    def record_attempt(self, status: int, bytes_received: int) -> None:
        """Record an attempt that produced an HTTP response.

        Args:
            status: HTTP status code.
            bytes_received: Size of the response body.
        """
        with self._lock:
            self.attempts_by_status[status] = (
                self.attempts_by_status.get(status, 0) + 1
            )
            self.bytes_total += bytes_received

    def record_failure(self, error_class: FetchErrorClass) -> None:
        """Record an attempt that failed at the transport level."""
        with self._lock:
            key = error_class.value
            self.failures_by_class[key] = self.failures_by_class.get(key, 0) + 1

    def record_retry(self) -> None:
        """Record a retry attempt."""
        with self._lock:
            self.retries_total += 1

    def record_no_network(self) -> None:
        """Record a fetch skipped because the network was unreachable."""
        with self._lock:
            self.no_network_total += 1

    def record_fetch(self, duration_ms: float) -> None:
        """Record a completed fetch call.

        Args:
            duration_ms: Wall time of all attempts in milliseconds.
        """
        with self._lock:
            self.fetch_count += 1
            self.duration_ms_total += duration_ms

    @property
    def avg_duration_ms(self) -> float:
        """Average duration of a fetch call in milliseconds."""
        if self.fetch_count == 0:
            return 0.0
        return self.duration_ms_total / self.fetch_count

    def to_dict(self) -> dict[str, int | float | dict[str, int] | dict[int, int]]:
        """Convert metrics to dictionary."""
        with self._lock:
            return {
                "attempts_by_status": dict(self.attempts_by_status),
                "failures_by_class": dict(self.failures_by_class),
                "retries_total": self.retries_total,
                "no_network_total": self.no_network_total,
                "bytes_total": self.bytes_total,
                "duration_ms_total": self.duration_ms_total,
                "fetch_count": self.fetch_count,
            }
