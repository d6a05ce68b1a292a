"""
Rules command: list the rule families of a catalog.
"""

from __future__ import annotations

import sys

import click

from piiscan.cli.base import format_option
from piiscan.cli.output import OutputFormatter
from piiscan.core.detectors.catalog import default_catalog, load_catalog
from piiscan.exceptions import PiiScanError


@click.command()
@click.option("--catalog", "catalog_file", type=click.Path(exists=True, dir_okay=False),
              default=None, help="YAML rule catalog to list instead of the built-in one")
@click.option("--verbose", "-v", is_flag=True, help="List every rule, not just families")
@format_option()
def rules(catalog_file: str | None, verbose: bool, output_format: str) -> None:
    """List rule families with rank, entity type and rule count.

    \b
    Examples:
        piiscan rules
        piiscan rules --verbose --format json
    """
    fmt = OutputFormatter(output_format)
    try:
        catalog = load_catalog(catalog_file) if catalog_file else default_catalog()
    except PiiScanError as e:
        fmt.print_error(str(e))
        sys.exit(1)

    if verbose:
        rows = [
            {"family": family["name"], "rank": family["rank"], **rule}
            for family in catalog.describe()
            for rule in family["rules"]
        ]
        fmt.print_table(
            rows,
            columns=["family", "rank", "name", "entity_type", "score", "group",
                     "value_validator", "context_validator"],
        )
        return

    fmt.print_table(
        [
            {
                "rank": family.rank,
                "family": family.name,
                "entity_type": family.entity_type.value,
                "rules": len(family),
            }
            for family in catalog
        ],
        columns=["rank", "family", "entity_type", "rules"],
    )
