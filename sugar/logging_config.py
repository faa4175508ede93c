"""Structured logging configuration using structlog + rich.

Nothing here runs on import; applications opt in with setup_logging().
"""

import logging
import sys

import structlog
from rich.traceback import install as install_rich_traceback

from sugar.config import settings


def setup_logging(
    *,
    json_logs: bool | None = None,
    log_level: str | None = None,
    rich_tracebacks: bool | None = None,
) -> None:
    """Configure structlog with console output or JSON formatting.

    Arguments left as None fall back to sugar.config.settings.

    Args:
        json_logs: If True, output JSON logs (for production). Otherwise, console.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rich_tracebacks: Install rich's traceback handler for uncaught exceptions.
    """
    if json_logs is None:
        json_logs = settings.json_logs
    level = getattr(logging, str(log_level or settings.log_level).upper())
    if rich_tracebacks is None:
        rich_tracebacks = settings.rich_tracebacks

    if rich_tracebacks:
        install_rich_traceback(show_locals=True, width=120)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_logs:
        renderer: list[structlog.types.Processor] = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        renderer = [
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    structlog.configure(
        processors=[*shared_processors, *renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Also configure standard library logging at the same level
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger instance.

    Args:
        name: Optional logger name (typically __name__).

    Returns:
        A bound structlog logger.
    """
    return structlog.get_logger(name)
