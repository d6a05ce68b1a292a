"""
CLI command modules.
"""

# Detection
from piiscan.cli.commands.scan import scan

# Catalog inspection
from piiscan.cli.commands.rules import rules

__all__ = ["scan", "rules"]
