"""
Core data types for the piiscan detection engine.

This module defines the fundamental types used throughout the engine:
- EntityType: Closed set of entity tags a rule can emit
- Candidate: A raw, unresolved match produced by one rule
- Span: A resolved span that survived conflict resolution (final output)
- ScanResult: Envelope returned by the engine for one document

Offsets are ``str`` indices (code points) into the scanned document.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

__all__ = [
    "EntityType",
    "parse_entity_type",
    "Candidate",
    "Span",
    "ScanResult",
]


# =============================================================================
# ENTITY TYPES
# =============================================================================

class EntityType(str, Enum):
    """Entity tags emitted by detection rules."""

    SECRET = "SECRET"
    EMAIL = "EMAIL"
    URL = "URL"
    IBAN = "IBAN"
    CREDIT_CARD = "CREDIT_CARD"
    SSN = "SSN"
    MAC_ADDRESS = "MAC_ADDRESS"
    PHONE = "PHONE"
    DATE = "DATE"
    IP_ADDRESS = "IP_ADDRESS"
    MEDICAL = "MEDICAL"
    AGE = "AGE"
    ID_NUMBER = "ID_NUMBER"
    ORG = "ORG"
    FINANCIAL = "FINANCIAL"
    ADDRESS = "ADDRESS"
    PERSON = "PERSON"

    def __str__(self) -> str:
        return self.value


def parse_entity_type(value: str | EntityType) -> EntityType:
    """
    Convert a user-supplied name to an EntityType.

    Accepts enum members, and names in any case with ``-`` or ``_``
    separators ("credit-card", "CREDIT_CARD").

    Raises:
        ValueError: If the name is not a known entity type
    """
    if isinstance(value, EntityType):
        return value
    normalized = value.strip().upper().replace("-", "_")
    try:
        return EntityType(normalized)
    except ValueError:
        known = ", ".join(e.value for e in EntityType)
        raise ValueError(f"Unknown entity type: {value!r}. Known types: {known}") from None


# =============================================================================
# SPAN DATA CLASSES
# =============================================================================

def _check_bounds(start: int, end: int, text: str) -> None:
    if start < 0:
        raise ValueError(f"Invalid span: start={start} cannot be negative")
    if start >= end:
        raise ValueError(f"Invalid span: start={start} >= end={end}")
    if len(text) != end - start:
        raise ValueError(
            f"Invalid span: text length {len(text)} != span length {end - start}"
        )


@dataclass(frozen=True)
class Candidate:
    """
    A match produced by a single rule, before conflict resolution.

    Attributes:
        entity_type: Tag of the rule that produced the match
        start: Start offset (inclusive)
        end: End offset (exclusive)
        text: Extracted text (the extract group when the rule defines one)
        score: Base score of the producing rule
        family_rank: Precedence rank of the owning family (lower wins ties)
        rule: Name of the producing rule, for diagnostics
    """
    entity_type: EntityType
    start: int
    end: int
    text: str
    score: float
    family_rank: int = 0
    rule: str = ""

    def __post_init__(self) -> None:
        _check_bounds(self.start, self.end, self.text)

    def __len__(self) -> int:
        return self.end - self.start

    def __repr__(self) -> str:
        """Safe repr that doesn't expose sensitive text."""
        return (
            f"Candidate(start={self.start}, end={self.end}, "
            f"entity_type={self.entity_type.value!r}, score={self.score:.2f}, "
            f"family_rank={self.family_rank}, rule={self.rule!r})"
        )

    def to_span(self) -> Span:
        """Drop the resolution-only fields."""
        return Span(
            entity_type=self.entity_type,
            start=self.start,
            end=self.end,
            text=self.text,
            score=self.score,
        )


@dataclass(frozen=True)
class Span:
    """
    A resolved entity span; the engine's externally visible result.

    Spans returned for one document never share an offset.
    """
    entity_type: EntityType
    start: int
    end: int
    text: str
    score: float

    def __post_init__(self) -> None:
        _check_bounds(self.start, self.end, self.text)
        if not 0.0 < self.score <= 1.0:
            raise ValueError(f"Invalid score: {self.score}")

    def overlaps(self, other: Span | Candidate) -> bool:
        """Check if this span shares any offset with another."""
        return not (self.end <= other.start or other.end <= self.start)

    def __len__(self) -> int:
        return self.end - self.start

    def __repr__(self) -> str:
        """Safe repr that doesn't expose sensitive text."""
        return (
            f"Span(start={self.start}, end={self.end}, "
            f"entity_type={self.entity_type.value!r}, score={self.score:.2f})"
        )

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for serialization."""
        return {
            "entity_type": self.entity_type.value,
            "start": self.start,
            "end": self.end,
            "text": self.text,
            "score": self.score,
        }


# =============================================================================
# RESULT DATA CLASSES
# =============================================================================

@dataclass
class ScanResult:
    """Result of scanning one document."""
    spans: list[Span] = field(default_factory=list)
    entity_counts: dict[str, int] = field(default_factory=dict)
    processing_time_ms: float = 0.0
    rules_evaluated: int = 0
    text_length: int = 0

    def __repr__(self) -> str:
        return (
            f"ScanResult(spans={len(self.spans)}, "
            f"entity_counts={self.entity_counts}, "
            f"processing_time_ms={self.processing_time_ms:.2f})"
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "spans": [s.to_dict() for s in self.spans],
            "entity_counts": dict(self.entity_counts),
            "processing_time_ms": self.processing_time_ms,
            "rules_evaluated": self.rules_evaluated,
            "text_length": self.text_length,
        }
