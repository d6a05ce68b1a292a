"""Detection configuration."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ...exceptions import ConfigurationError
from ..constants import DEFAULT_SCAN_WORKERS, MAX_RULE_SCORE, MIN_RULE_SCORE
from ..types import EntityType, parse_entity_type


@dataclass(frozen=True)
class DetectionConfig:
    """Configuration for the scan engine.

    Use class methods for common presets:
        config = DetectionConfig.default()     # All families, parallel
        config = DetectionConfig.sequential()  # All families, one thread

    Entity selection removes whole families before scanning, so an excluded
    type never claims a span from an included one.
    """

    # Entity selection
    entity_types: frozenset[EntityType] | None = None
    exclude_types: frozenset[EntityType] = frozenset()

    # Tuning
    min_score: float = 0.0
    max_workers: int = DEFAULT_SCAN_WORKERS
    parallel: bool = True

    def __post_init__(self) -> None:
        try:
            if self.entity_types is not None:
                object.__setattr__(self, "entity_types", _to_types(self.entity_types))
            object.__setattr__(self, "exclude_types", _to_types(self.exclude_types))
        except (ValueError, TypeError) as e:
            raise ConfigurationError(str(e), context="DetectionConfig") from e

        if not MIN_RULE_SCORE <= self.min_score <= MAX_RULE_SCORE:
            raise ConfigurationError(
                f"min_score must be between {MIN_RULE_SCORE} and {MAX_RULE_SCORE}, "
                f"got {self.min_score}",
                context="DetectionConfig",
            )
        if self.max_workers < 1:
            raise ConfigurationError(
                f"max_workers must be >= 1, got {self.max_workers}",
                context="DetectionConfig",
            )

    @classmethod
    def default(cls) -> DetectionConfig:
        """Every family, rules evaluated in parallel."""
        return cls()

    @classmethod
    def sequential(cls) -> DetectionConfig:
        """Every family, rules evaluated on the calling thread."""
        return cls(parallel=False, max_workers=1)


def _to_types(values: Iterable[EntityType | str] | str) -> frozenset[EntityType]:
    if isinstance(values, str):
        values = [values]
    return frozenset(parse_entity_type(v) for v in values)
