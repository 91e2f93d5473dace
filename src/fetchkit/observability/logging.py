"""structlog setup for applications that want to see fetchkit's events."""

import logging
import sys
from typing import TextIO

import structlog


def resolve_level(level: int | str) -> int:
    """Turn a level name such as ``"debug"`` into its number.

    Unknown names fall back to INFO.
    """
    if isinstance(level, int):
        return level
    return logging.getLevelNamesMapping().get(level.upper(), logging.INFO)


def configure_logging(
    level: int | str = logging.INFO,
    output: TextIO | None = None,
    json_format: bool = True,
) -> None:
    """Render the events fetchkit emits through ``structlog.get_logger()``.

    fetchkit logs attempts, retries and failures at DEBUG and one
    ``fetch_complete`` event per call at INFO.

    Args:
        level: Minimum level, as a number or a name.
        output: Stream to write to, stderr at call time if omitted.
        json_format: JSON lines when True, plain console output otherwise.
    """
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer(sort_keys=True)
        if json_format
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(resolve_level(level)),
        logger_factory=structlog.PrintLoggerFactory(file=output or sys.stderr),
        cache_logger_on_first_use=False,
    )
