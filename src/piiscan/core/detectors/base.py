"""
Base scanner interface for the piiscan detection engine.

All scanners must inherit from BaseScanner and implement the evaluate() method.
"""

from abc import ABC, abstractmethod

from ..types import Candidate, EntityType
from .pattern_registry import DetectionRule


class BaseScanner(ABC):
    """
    Base class for all scanners.

    Each scanner:
    - Has a name and a family precedence rank
    - Takes the full document text
    - Returns list of Candidate
    - Is independent (no shared state between evaluate() calls)

    Attributes:
        name: Unique identifier for the scanner
        rank: Precedence of the owning family (lower wins ties)
    """

    name: str = "base"
    rank: int = 0

    @abstractmethod
    def evaluate(self, text: str) -> list[Candidate]:
        """
        Find candidates in text.

        Args:
            text: Document to scan

        Returns:
            List of Candidate objects (may overlap each other)
        """
        pass

    def is_available(self) -> bool:
        """
        Check if scanner is ready to use.

        Returns:
            True if scanner is operational
        """
        return True

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, rank={self.rank})"


class RuleScanner(BaseScanner):
    """Scanner backed by a single DetectionRule.

    The catalog creates one per rule so rules can be evaluated in parallel.
    """

    def __init__(self, rule: DetectionRule, family: str, rank: int, index: int = 0):
        self.rule = rule
        self.family = family
        self.rank = rank
        self.name = rule.name or f"{family}#{index}"

    @property
    def entity_type(self) -> EntityType:
        return self.rule.entity_type

    def evaluate(self, text: str) -> list[Candidate]:
        return self.rule.evaluate(text, family_rank=self.rank, rule_name=self.name)
