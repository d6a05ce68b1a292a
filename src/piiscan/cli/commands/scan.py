"""
Scan command: detect sensitive spans in a file or stdin.
"""

from __future__ import annotations

import dataclasses
import logging
import sys
import uuid
from pathlib import Path

import click

from piiscan.cli.base import common_options, format_option, logging_options, split_types
from piiscan.cli.output import OutputFormatter
from piiscan.config import get_settings
from piiscan.core.detectors.catalog import RuleCatalog, default_catalog, load_catalog
from piiscan.core.detectors.orchestrator import ScanEngine
from piiscan.exceptions import PiiScanError
from piiscan.logging_config import set_scan_id

logger = logging.getLogger(__name__)

SPAN_COLUMNS = ["entity_type", "start", "end", "score", "text"]


@click.command()
@click.argument("path", required=False, type=click.Path(dir_okay=False, allow_dash=True))
@click.option("--types", "-t", "types", default=None, help="Comma-separated entity types to detect")
@click.option("--exclude", "-x", default=None, help="Comma-separated entity types to skip")
@click.option("--min-score", type=click.FloatRange(0.0, 1.0), default=None,
              help="Drop spans scoring below this")
@click.option("--sequential", is_flag=True, help="Evaluate rules on one thread")
@click.option("--catalog", "catalog_file", type=click.Path(exists=True, dir_okay=False),
              default=None, help="YAML rule catalog to use instead of the built-in one")
@format_option()
@logging_options
@common_options
def scan(
    path: str | None,
    types: str | None,
    exclude: str | None,
    min_score: float | None,
    sequential: bool,
    catalog_file: str | None,
    output_format: str,
    quiet: bool,
) -> None:
    """Detect sensitive spans in PATH (or stdin).

    Prints one row per span, sorted by start offset. Offsets are character
    positions in the decoded text.

    \b
    Examples:
        piiscan scan invoice.txt
        piiscan scan letter.txt --types IBAN,PERSON --format json
        cat mail.txt | piiscan scan --exclude DATE --min-score 0.9
    """
    fmt = OutputFormatter(output_format, quiet)

    try:
        text = _read_input(path)
        settings = get_settings().detection
        config = settings.to_detection_config()

        overrides: dict[str, object] = {}
        if types:
            overrides["entity_types"] = split_types(types)
        if exclude:
            overrides["exclude_types"] = split_types(exclude)
        if min_score is not None:
            overrides["min_score"] = min_score
        if sequential:
            overrides["parallel"] = False
        if overrides:
            config = dataclasses.replace(config, **overrides)

        catalog_path = catalog_file or settings.catalog_file
        catalog: RuleCatalog = load_catalog(catalog_path) if catalog_path else default_catalog()

        set_scan_id(uuid.uuid4().hex)
        logger.info("Scanning %s (%d chars)", path or "stdin", len(text))
        with ScanEngine(catalog=catalog, config=config) as engine:
            result = engine.scan(text)
    except PiiScanError as e:
        fmt.print_error(str(e))
        sys.exit(1)
    except OSError as e:
        fmt.print_error(f"Cannot read {path}: {e}")
        sys.exit(1)
    except UnicodeDecodeError as e:
        fmt.print_error(f"{path} is not valid UTF-8: {e.reason}")
        sys.exit(1)
    finally:
        set_scan_id(None)

    fmt.print_table([s.to_dict() for s in result.spans], columns=SPAN_COLUMNS)
    fmt.print_message(
        f"{len(result.spans)} spans, {result.rules_evaluated} rules, "
        f"{result.processing_time_ms:.1f}ms"
    )


def _read_input(path: str | None) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")
