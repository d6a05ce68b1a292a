"""Structured output formatting for CLI commands."""

from __future__ import annotations

import csv
import io
import json
from typing import Any

import click

# Table cells longer than this are truncated with "..."
MAX_COLUMN_WIDTH = 50


class OutputFormatter:
    """Format command output as table, JSON, or CSV.

    Usage::

        fmt = OutputFormatter(output_format, quiet)
        fmt.print_table(rows, columns=["entity_type", "start", "end"])
        fmt.print_message("3 spans found")
    """

    def __init__(self, output_format: str = "table", quiet: bool = False) -> None:
        self.format = output_format
        self.quiet = quiet

    def print_table(
        self,
        data: list[dict[str, Any]],
        columns: list[str] | None = None,
    ) -> None:
        """Print *data* as a formatted table, JSON array, or CSV.

        Always prints the header row even when *data* is empty so callers
        can tell the command succeeded.
        """
        if columns is None:
            columns = list(data[0].keys()) if data else []

        if self.format == "json":
            rows = [{c: row.get(c) for c in columns} for row in data] if columns else data
            click.echo(json.dumps(rows, indent=2, ensure_ascii=False, default=str))
            return

        if self.format == "csv":
            buf = io.StringIO()
            writer = csv.DictWriter(buf, fieldnames=columns, extrasaction="ignore")
            writer.writeheader()
            writer.writerows(data)
            click.echo(buf.getvalue().rstrip())
            return

        if not columns:
            return

        headers = {c: c.replace("_", " ").title() for c in columns}
        widths: dict[str, int] = {c: len(headers[c]) for c in columns}
        for row in data:
            for c in columns:
                widths[c] = max(widths[c], len(_cell(row.get(c, ""))))
        widths = {c: min(w, MAX_COLUMN_WIDTH) for c, w in widths.items()}

        header = "  ".join(headers[c].ljust(widths[c]) for c in columns)
        click.echo(header)
        click.echo("-" * len(header))

        for row in data:
            parts: list[str] = []
            for c in columns:
                val = _cell(row.get(c, ""))
                if len(val) > widths[c]:
                    val = val[: widths[c] - 3] + "..."
                parts.append(val.ljust(widths[c]))
            click.echo("  ".join(parts).rstrip())

    def print_error(self, message: str) -> None:
        """Print an error message to stderr."""
        click.echo(f"Error: {message}", err=True)

    def print_message(self, message: str) -> None:
        """Print an informational message to stderr (suppressed in quiet mode)."""
        if not self.quiet:
            click.echo(message, err=True)


def _cell(value: Any) -> str:
    # Keep table rows on one line
    if isinstance(value, float):
        return f"{value:.2f}"
    return str(value).replace("\n", "\\n").replace("\t", "\\t")
