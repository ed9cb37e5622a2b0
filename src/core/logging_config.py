"""Structured logging configuration.

This module initializes structlog loggers with a stable JSON format.
The minimum level is shared by every logger. Only entry points call
``configure_logging``; importing a module that logs leaves the host
process structlog setup untouched.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from core.constants import DEFAULT_LOG_LEVEL


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure structlog processors and the minimum emitted level.

    Args:
        level: Level name such as ``"debug"`` or ``"warning"``.
    """
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_level_number(level)),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A lazy structlog logger bound on first use.
    """
    return structlog.get_logger(name)


def _level_number(level: str) -> int:
    """Map a level name onto its stdlib numeric value.

    Args:
        level: Case-insensitive level name.

    Returns:
        Numeric logging level.
    """
    return logging.getLevelName(level.upper())
