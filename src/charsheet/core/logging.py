"""Structured logging for the character sheet engine.

Every entry carries the configured application name, and callers can scope
extra keys (such as the character being resolved) to a block of work with
``log_context``. Output is a console renderer by default, or one JSON
object per line when ``json_logs`` is set.

Example:
    >>> from charsheet.core.logging import get_logger, log_context
    >>> logger = get_logger(__name__)
    >>> with log_context(character_id=42):
    ...     logger.debug("Skill check rolled", skill="Athletics", roll=14)
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import Processor

from charsheet.core.config import get_settings


if TYPE_CHECKING:
    from structlog.types import EventDict, WrappedLogger


def app_context(app_name: str) -> Processor:
    """Build a processor that tags every entry with ``app=<app_name>``."""

    def add_app_context(
        logger: WrappedLogger,
        method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        event_dict.setdefault("app", app_name)
        return event_dict

    return add_app_context


def configure_logging(
    *,
    level: str | None = None,
    json_format: bool | None = None,
    log_file: str | None = None,
    app_name: str | None = None,
) -> None:
    """Configure application-wide logging.

    Arguments left as ``None`` come from the cached settings
    (``CHARSHEET_LOG_LEVEL``, ``CHARSHEET_JSON_LOGS``, ``CHARSHEET_LOG_FILE``
    and ``CHARSHEET_APP_NAME``).

    Args:
        level: The logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_format: If True, output logs in JSON format.
        log_file: Optional path to a log file.
        app_name: Value of the ``app`` key on every entry.

    Example:
        >>> configure_logging(level="DEBUG", json_format=False)
    """
    settings = get_settings()
    level = level or settings.log_level
    json_format = settings.json_logs if json_format is None else json_format
    log_file = log_file or settings.log_file
    app_name = app_name or settings.app_name

    numeric_level = getattr(logging, level.upper(), logging.INFO)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        app_context(app_name),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    renderer: Processor
    if json_format:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=False,
            exception_formatter=structlog.dev.plain_traceback,
        )

    # structlog entries go through stdlib logging so the file handler sees them
    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        format="%(message)s",
        level=numeric_level,
        handlers=handlers,
        force=True,
    )
    for handler in handlers:
        handler.setLevel(numeric_level)


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a logger instance.

    Args:
        name: Optional name for the logger (typically __name__).

    Returns:
        A structlog BoundLogger instance.
    """
    return structlog.get_logger(name)


@contextmanager
def log_context(**kwargs: Any) -> Iterator[None]:
    """Attach ``kwargs`` to every entry logged inside the block.

    Keys bound by an enclosing block are restored on exit.

    Example:
        >>> with log_context(character_id=42):
        ...     get_logger().debug("Sheet built")
    """
    with structlog.contextvars.bound_contextvars(**kwargs):
        yield


__all__ = [
    "app_context",
    "configure_logging",
    "get_logger",
    "log_context",
]
