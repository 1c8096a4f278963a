"""Centralized logging configuration for dagrun.

Logging is diagnostic only: rendered graphs go to stdout, log records go
to stderr (and optionally a file), and nothing logged ever changes how a
walk proceeds.

Usage:
    from dagrun.core.logging_config import configure_logging, get_logger

    # Configure once at application startup
    configure_logging(level="DEBUG")

    # Get loggers in modules
    logger = get_logger(__name__)

Environment Variables:
    DAGRUN_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    DAGRUN_LOG_FORMAT: Output format ("text" or "json")
    DAGRUN_LOG_FILE: Optional log file path
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime
from typing import Any, Literal

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
TEXT_FORMAT_WITH_MS = "%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DEFAULT_LEVEL = "WARNING"

# Track if logging has been configured
_configured = False

_STANDARD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "message",
    }
)


class JsonFormatter(logging.Formatter):
    """JSON log formatter for structured logging.

    Outputs logs as JSON objects with consistent structure:
    {
        "timestamp": "2026-10-18T14:30:00.123",
        "level": "DEBUG",
        "logger": "dagrun.core.walker",
        "message": "[build] execute_start: command=make",
        "extra": {...}
    }
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # Anything set on the record that logging itself doesn't set
        extra = {k: v for k, v in record.__dict__.items() if k not in _STANDARD_ATTRS}
        if extra:
            log_data["extra"] = extra

        return json.dumps(log_data, default=str)


def configure_logging(
    level: str | None = None,
    format: Literal["text", "json"] | None = None,
    file_path: str | None = None,
    include_ms: bool = True,
    force: bool = False,
) -> None:
    """Configure logging for the application.

    This should be called once at application startup. Subsequent calls
    are ignored unless force=True.

    Args:
        level: Log level. Defaults to DAGRUN_LOG_LEVEL or "WARNING".
        format: Output format. Defaults to DAGRUN_LOG_FORMAT or "text".
        file_path: Optional file path. Defaults to DAGRUN_LOG_FILE.
        include_ms: Include milliseconds in timestamp.
        force: Force reconfiguration even if already configured.
    """
    global _configured
    if _configured and not force:
        return

    level = level or os.environ.get("DAGRUN_LOG_LEVEL", DEFAULT_LEVEL)
    format = format or os.environ.get("DAGRUN_LOG_FORMAT", "text")  # type: ignore
    file_path = file_path or os.environ.get("DAGRUN_LOG_FILE")

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    if format == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        fmt = TEXT_FORMAT_WITH_MS if include_ms else TEXT_FORMAT
        formatter = logging.Formatter(fmt, datefmt=DATE_FORMAT)

    # Console handler - stderr so rendered output on stdout stays clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if file_path:
        file_handler = logging.FileHandler(file_path)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Configured logger.
    """
    return logging.getLogger(name)


def verbosity_to_level(verbosity: int) -> str | None:
    """Map a repeat count of -v to a log level.

    Returns:
        None for 0 (use the configured default), "INFO" for 1, "DEBUG" above.
    """
    if verbosity <= 0:
        return None
    if verbosity == 1:
        return "INFO"
    return "DEBUG"
