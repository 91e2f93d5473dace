"""Environment settings loading."""

from .app import FetchSettings, get_settings


__all__ = ["FetchSettings", "get_settings"]
