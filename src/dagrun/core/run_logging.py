"""Logging helpers for walks and program execution.

Log Format:
    [<identifier>] action: key=value, key=value (duration)

Examples:
    [dag] walk_start: starts=['api'], show=True, run=False
    [db] execute_start: command=make db
    [db] execute_complete: exit_code=0 (1.2s)
    [api] execute_failed: error=exited with code 2, exit_code=2
"""

from __future__ import annotations

import logging
from typing import Any


def truncate(value: Any, max_length: int = 100) -> str:
    """Truncate a value for logging.

    Args:
        value: Value to truncate.
        max_length: Maximum length before truncation.

    Returns:
        Truncated string with length indicator if truncated.
    """
    s = str(value)
    if len(s) <= max_length:
        return s
    return f"{s[:max_length]}... ({len(s)} chars)"


def _format(identifier: str, action: str, kwargs: dict[str, Any]) -> str:
    kv_pairs = ", ".join(f"{k}={truncate(v)}" for k, v in kwargs.items())
    return f"[{identifier}] {action}: {kv_pairs}" if kv_pairs else f"[{identifier}] {action}"


def log_start(
    logger: logging.Logger | None,
    identifier: str,
    action: str,
    **kwargs: Any,
) -> None:
    """Log a start event.

    Args:
        logger: Logger to use. If None, this is a no-op.
        identifier: Primary identifier (node name, "dag", etc.).
        action: Action name (e.g., "walk_start", "execute_start").
        **kwargs: Additional key=value pairs to log.
    """
    if logger is None:
        return
    logger.debug(_format(identifier, action, kwargs))


def log_complete(
    logger: logging.Logger | None,
    identifier: str,
    action: str,
    duration_s: float,
    **kwargs: Any,
) -> None:
    """Log a completion event with duration.

    Args:
        logger: Logger to use. If None, this is a no-op.
        identifier: Primary identifier.
        action: Action name (e.g., "execute_complete").
        duration_s: Duration in seconds.
        **kwargs: Additional key=value pairs to log.
    """
    if logger is None:
        return
    msg = _format(identifier, action, kwargs)
    if not kwargs:
        msg += ":"
    logger.info(f"{msg} ({duration_s:.1f}s)")


def log_error(
    logger: logging.Logger | None,
    identifier: str,
    action: str,
    error: str | Exception,
    **kwargs: Any,
) -> None:
    """Log an error event.

    Args:
        logger: Logger to use. If None, this is a no-op.
        identifier: Primary identifier.
        action: Action name (e.g., "execute_failed").
        error: Error message or exception.
        **kwargs: Additional key=value pairs to log.
    """
    if logger is None:
        return
    error_str = str(error) if isinstance(error, Exception) else error
    logger.error(_format(identifier, action, {"error": error_str, **kwargs}))
