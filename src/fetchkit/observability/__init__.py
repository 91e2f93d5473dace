"""Logging setup for fetchkit's structured events."""

from fetchkit.observability.logging import configure_logging, resolve_level


__all__ = [
    "configure_logging",
    "resolve_level",
]
