"""
Unified exception hierarchy for piiscan.

All exception classes live here. No per-module exception files.

Hierarchy:
    PiiScanError (base)
    ├── ConfigurationError
    │   └── RuleCompilationError
    └── DetectionError

Usage:
    from piiscan.exceptions import RuleCompilationError, DetectionError
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "PiiScanError",
    "ConfigurationError",
    "RuleCompilationError",
    "DetectionError",
]


# =============================================================================
# ROOT
# =============================================================================


class PiiScanError(Exception):
    """
    Base exception for all piiscan errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about what was being done
        details: Technical details (rule name, entity type, etc.)
    """

    def __init__(
        self,
        message: str,
        context: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.context = context
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [self.message]
        if self.context:
            parts.append(f"Context: {self.context}")
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            parts.append(f"Details: {detail_str}")
        return ". ".join(parts)


# =============================================================================
# CONFIGURATION & CATALOG CONSTRUCTION
# =============================================================================


class ConfigurationError(PiiScanError):
    """Raised for invalid configuration values or settings files."""


class RuleCompilationError(ConfigurationError):
    """
    Raised when a detection rule cannot be built.

    Covers invalid regular expressions, extract groups the pattern does not
    define, scores outside (0, 1] and unknown validator names. Always raised
    while the catalog is being built, never during a scan.
    """

    def __init__(
        self,
        message: str,
        rule_name: str | None = None,
        pattern: str | None = None,
        **kwargs: Any,
    ):
        details = kwargs.pop("details", {})
        if rule_name:
            details["rule"] = rule_name
        if pattern is not None:
            details["pattern"] = pattern
        super().__init__(message, details=details, **kwargs)
        self.rule_name = rule_name
        self.pattern = pattern


# =============================================================================
# DETECTION
# =============================================================================


class DetectionError(PiiScanError):
    """Raised when a scanner fails while evaluating a document."""

    def __init__(
        self,
        message: str,
        rule_name: str | None = None,
        input_length: int | None = None,
        **kwargs: Any,
    ):
        details = kwargs.pop("details", {})
        if rule_name:
            details["rule"] = rule_name
        if input_length is not None:
            details["input_length"] = input_length
        super().__init__(message, details=details, **kwargs)
        self.rule_name = rule_name
        self.input_length = input_length
