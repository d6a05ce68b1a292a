"""
piiscan core detection engine.

Usage:
    from piiscan.core import scan

    result = scan("IBAN: GB82 WEST 1234 5698 7654 32, Herr Max Mustermann")
    for span in result.spans:
        print(f"{span.entity_type}: {span.start}-{span.end}")
"""

from .types import (
    Candidate,
    EntityType,
    ScanResult,
    Span,
    parse_entity_type,
)
from .detectors import (
    BaseScanner,
    DetectionConfig,
    DetectionRule,
    RuleCatalog,
    RuleFamily,
    ScanEngine,
    default_catalog,
    load_catalog,
    scan,
)
from .pipeline import resolve_spans

__all__ = [
    "Candidate",
    "EntityType",
    "ScanResult",
    "Span",
    "parse_entity_type",
    "BaseScanner",
    "DetectionConfig",
    "DetectionRule",
    "RuleCatalog",
    "RuleFamily",
    "ScanEngine",
    "default_catalog",
    "load_catalog",
    "scan",
    "resolve_spans",
]
