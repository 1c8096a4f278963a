"""Output helpers for CLI commands."""

from __future__ import annotations

import sys
from typing import NoReturn

import rich_click as click


def error_exit(message: str, code: int = 1) -> NoReturn:
    """Print error message and exit with code."""
    click.echo(f"Error: {message}", err=True)
    sys.exit(code)
