"""Shared CLI decorators and utilities."""

from __future__ import annotations

import functools
import sys
from collections.abc import Callable
from typing import Any

import click

from piiscan.config import get_settings
from piiscan.exceptions import PiiScanError
from piiscan.logging_config import setup_logging


def common_options(f: Callable[..., Any]) -> Callable[..., Any]:
    """Add ``--quiet`` flag to any command."""
    @click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output")
    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return f(*args, **kwargs)
    return wrapper


def logging_options(f: Callable[..., Any]) -> Callable[..., Any]:
    """Add ``--log-level`` and ``--json-logs`` and configure logging.

    Unset options fall back to the ``logging`` section of the settings.
    The wrapped command does not receive either option.
    """
    @click.option(
        "--log-level",
        type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
        default=None,
        help="Log level (default from settings)",
    )
    @click.option("--json-logs", is_flag=True, help="Emit logs as JSON")
    @functools.wraps(f)
    def wrapper(*args: Any, log_level: str | None, json_logs: bool, **kwargs: Any) -> Any:
        try:
            log_settings = get_settings().logging
        except PiiScanError as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)
        setup_logging(
            level=log_level or log_settings.level,
            json_format=json_logs or log_settings.json_format,
            log_file=log_settings.file,
        )
        return f(*args, **kwargs)
    return wrapper


def format_option(
    choices: list[str] | None = None,
    default: str | None = None,
) -> Callable[..., Any]:
    """Add ``--format`` / ``-f`` option with configurable choices.

    The Python parameter is named ``output_format`` to avoid shadowing the
    built-in ``format``.
    """
    if choices is None:
        choices = ["table", "json", "csv"]
    if default is None:
        default = choices[0]

    def decorator(f: Callable[..., Any]) -> Callable[..., Any]:
        @click.option(
            "--format", "-f", "output_format",
            type=click.Choice(choices),
            default=default,
            help="Output format",
        )
        @functools.wraps(f)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return f(*args, **kwargs)
        return wrapper
    return decorator


def split_types(value: str | None) -> list[str] | None:
    """Split a comma-separated ``--types`` value."""
    if not value:
        return None
    return [part.strip() for part in value.split(",") if part.strip()]
