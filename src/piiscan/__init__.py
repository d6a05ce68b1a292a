"""
piiscan - detect secrets, personal and financial data in free-form text.

Usage:
    from piiscan import scan

    result = scan("Bitte Zahlung auf AT611904300234573201 bis 12.03.2026")
    for span in result.spans:
        print(span.entity_type, span.start, span.end)
"""

from piiscan.core import (
    DetectionConfig,
    EntityType,
    RuleCatalog,
    ScanEngine,
    ScanResult,
    Span,
    default_catalog,
    load_catalog,
    scan,
)
from piiscan.exceptions import (
    ConfigurationError,
    DetectionError,
    PiiScanError,
    RuleCompilationError,
)

__version__ = "0.1.0"

__all__ = [
    "DetectionConfig",
    "EntityType",
    "RuleCatalog",
    "ScanEngine",
    "ScanResult",
    "Span",
    "default_catalog",
    "load_catalog",
    "scan",
    "ConfigurationError",
    "DetectionError",
    "PiiScanError",
    "RuleCompilationError",
]
