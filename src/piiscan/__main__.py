"""
piiscan CLI entry point.

Usage:
    piiscan scan [PATH] [--types T1,T2] [--exclude T] [--min-score S] [--format table|json|csv]
    piiscan rules [--verbose]
"""

import click

from piiscan.cli.commands import rules, scan


@click.group()
@click.version_option(package_name="piiscan")
def cli():
    """piiscan - Multilingual PII, secret and financial data detection"""
    pass


cli.add_command(scan)
cli.add_command(rules)


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
