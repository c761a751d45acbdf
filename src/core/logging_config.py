"""Structured logging configuration.

This module configures structlog once with a JSON event format on stderr,
keeping stdout free for command output.
Every module obtains its logger through ``get_logger(__name__)``.
"""

from __future__ import annotations

import logging
import sys
import threading
from typing import Any

import structlog

from core.config import resolve_log_level

_CONFIGURE_LOCK = threading.Lock()
_configured = False


def configure_logging(level_name: str | None = None) -> None:
    """Configure structlog processors and the level filter.

    Args:
        level_name: Log level name. Reads ENGLISHGATE_LOG_LEVEL when omitted.

    Raises:
        EnglishGateConfigError: If the level name is unsupported.
    """
    global _configured
    level = resolve_log_level(level_name)
    with _CONFIGURE_LOCK:
        structlog.configure(
            processors=[
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.add_log_level,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level)),
            logger_factory=_stderr_logger_factory,
            cache_logger_on_first_use=False,
        )
        _configured = True


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog bound logger with structured output.
    """
    if not _configured:
        configure_logging()
    return structlog.get_logger(name)


def _stderr_logger_factory(*args: Any) -> Any:
    # Looks up sys.stderr on every call.
    return structlog.PrintLogger(sys.stderr)
