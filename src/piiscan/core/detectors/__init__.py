"""
Detection rules, rule catalog and scan engine.

Rule families:
- secrets: API keys, tokens, private keys
- contact: Email, URL, phone
- financial: IBAN, credit cards, amounts, BIC/SWIFT
- identifiers: SSNs and national IDs, document numbers
- network: MAC and IP addresses
- dates: Numeric and written dates
- clinical: Medical codes and values, ages
- names: Organisations and persons
- address: Postal addresses
"""

from .base import BaseScanner, RuleScanner
from .catalog import (
    DEFAULT_FAMILIES,
    RuleCatalog,
    RuleFamily,
    default_catalog,
    load_catalog,
)
from .config import DetectionConfig
from .orchestrator import ScanEngine, scan
from .pattern_registry import DetectionRule, _r

__all__ = [
    "BaseScanner",
    "RuleScanner",
    "DetectionRule",
    "RuleFamily",
    "RuleCatalog",
    "DEFAULT_FAMILIES",
    "default_catalog",
    "load_catalog",
    "DetectionConfig",
    "ScanEngine",
    "scan",
]
