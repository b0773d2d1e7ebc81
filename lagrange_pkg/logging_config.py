"""Structured logging configuration for Lagrange.

Core modules attach measurements to their records through
``extra={"context": {...}}``; the formatter renders them as sorted
``key=value`` pairs after the message, e.g.::

    2024-05-01T12:00:00 [DEBUG] lagrange.interpolation: Interpolated points=5 degree=4
"""

import logging
import sys
from datetime import datetime
from typing import Any, Mapping, Optional

from . import config

ROOT_LOGGER = "lagrange"


def format_context(context: Optional[Mapping[str, Any]]) -> str:
    """Render a context mapping as ``key=value`` pairs in key order."""
    if not context:
        return ""
    return " ".join(f"{key}={context[key]}" for key in sorted(context))


class StructuredFormatter(logging.Formatter):
    """Formatter that outputs timestamp, logger name, level, message and context fields."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).isoformat()
        message = f"{timestamp} [{record.levelname}] {record.name}: {record.getMessage()}"
        context = format_context(getattr(record, "context", None))
        if context:
            message = f"{message} {context}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


def setup_logging(
    level: Optional[str] = None, log_file: Optional[str] = None
) -> logging.Logger:
    """Set up structured logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL);
            defaults to config.LOG_LEVEL
        log_file: Optional file path to also write logs to (UTF-8)

    Returns:
        Configured logger instance
    """
    if level is None:
        level = config.LOG_LEVEL
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    # Handlers from an earlier call are replaced, not stacked
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(StructuredFormatter())
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get the logger for a package module, e.g. ``lagrange.rational``."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
