"""Structured logging configuration.

This module initializes structlog with a stable JSON event format.
Events are routed through stdlib logging so output stays on stderr.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Protocol

import structlog


class EventLogger(Protocol):
    """Logger interface injected into pipeline components."""

    def debug(self, event: str, **fields: Any) -> Any: ...

    def info(self, event: str, **fields: Any) -> Any: ...

    def warning(self, event: str, **fields: Any) -> Any: ...

    def error(self, event: str, **fields: Any) -> Any: ...


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured JSON output.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    return structlog.get_logger(name)


def configure_logging(level: int = logging.INFO) -> None:
    """Attach a stderr handler for command-line runs.

    Args:
        level: Minimum stdlib level to emit.
    """
    logging.basicConfig(stream=sys.stderr, level=level, format="%(message)s")
