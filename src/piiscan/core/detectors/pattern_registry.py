"""Immutable detection rule definitions.

Rules are frozen dataclasses stored in tuples: no mutation, no import-time
side effects, safe to share across scanners and threads. Construction checks
everything that could otherwise fail during a scan (regex syntax, extract
group, score range, validator names) and raises ``RuleCompilationError``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from ...exceptions import RuleCompilationError
from ..constants import MAX_RULE_SCORE, MIN_RULE_SCORE
from ..types import Candidate, EntityType, parse_entity_type
from ..validators import (
    Validator,
    ValidatorKind,
    ValidatorRef,
    resolve_context_validator,
    resolve_value_validator,
)


@dataclass(frozen=True)
class DetectionRule:
    """
    One pattern plus everything needed to turn its matches into candidates.

    Attributes:
        pattern: Compiled regular expression
        entity_type: Tag given to every candidate
        score: Static confidence in (0, 1]
        group: Capture group reported as the candidate (0 = whole match)
        value_validator: Optional check on the extracted text
        context_validator: Optional check on (document, start, end)
        name: Identifier used in diagnostics and listings
    """

    pattern: re.Pattern[str]
    entity_type: EntityType
    score: float
    group: int = 0
    value_validator: Validator | None = None
    context_validator: Validator | None = None
    name: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.entity_type, EntityType):
            raise RuleCompilationError(
                f"entity_type must be an EntityType, got {type(self.entity_type).__name__}",
                rule_name=self.name,
            )
        if not MIN_RULE_SCORE < self.score <= MAX_RULE_SCORE:
            raise RuleCompilationError(
                f"Score must be in ({MIN_RULE_SCORE}, {MAX_RULE_SCORE}], got {self.score}",
                rule_name=self.name,
                pattern=self.pattern.pattern,
            )
        if self.group < 0 or self.group > self.pattern.groups:
            raise RuleCompilationError(
                f"Extract group {self.group} not defined "
                f"(pattern has {self.pattern.groups} groups)",
                rule_name=self.name,
                pattern=self.pattern.pattern,
            )

    @property
    def validator_kind(self) -> ValidatorKind:
        if self.value_validator and self.context_validator:
            return ValidatorKind.BOTH
        if self.value_validator:
            return ValidatorKind.VALUE
        if self.context_validator:
            return ValidatorKind.CONTEXT
        return ValidatorKind.NONE

    def evaluate(self, text: str, family_rank: int = 0, rule_name: str | None = None) -> list[Candidate]:
        """
        Run the rule over a whole document.

        Args:
            text: Document to scan
            family_rank: Precedence rank stamped on each candidate
            rule_name: Name stamped on each candidate (defaults to ``self.name``)

        Returns:
            Candidates in match order, one per surviving match
        """
        candidates: list[Candidate] = []
        label = rule_name or self.name

        for match in self.pattern.finditer(text):
            start, end = match.span(self.group)
            # Group did not take part in this match (e.g. other alternative)
            if start < 0:
                continue

            value = text[start:end]
            if not value or not value.strip():
                continue

            if self.value_validator and not self.value_validator(value):
                continue
            if self.context_validator and not self.context_validator(text, start, end):
                continue

            candidates.append(Candidate(
                entity_type=self.entity_type,
                start=start,
                end=end,
                text=value,
                score=self.score,
                family_rank=family_rank,
                rule=label,
            ))

        return candidates

    def describe(self) -> dict[str, Any]:
        """Serializable summary of the rule."""
        return {
            "name": self.name,
            "pattern": self.pattern.pattern,
            "flags": self.pattern.flags & ~(re.UNICODE | re.ASCII),
            "ascii_only": bool(self.pattern.flags & re.ASCII),
            "entity_type": self.entity_type.value,
            "score": self.score,
            "group": self.group,
            "validators": self.validator_kind.value,
            "value_validator": self.value_validator.name if self.value_validator else None,
            "context_validator": self.context_validator.name if self.context_validator else None,
        }

    def __repr__(self) -> str:
        return (
            f"DetectionRule(name={self.name!r}, entity_type={self.entity_type.value!r}, "
            f"score={self.score}, group={self.group}, validators={self.validator_kind.value!r})"
        )


def _r(
    regex: str,
    entity_type: EntityType | str,
    score: float,
    group: int = 0,
    validator: ValidatorRef | None = None,
    context: ValidatorRef | None = None,
    flags: int = 0,
    name: str = "",
    ascii_only: bool = True,
) -> DetectionRule:
    """Shorthand for defining a rule.

    ``\\d``, ``\\w``, ``\\s`` and ``\\b`` match ASCII only unless *ascii_only*
    is False, so Arabic-Indic or full-width digit runs are never reported.
    Letters outside ASCII are matched through explicit character classes.

    Raises:
        RuleCompilationError: Bad regex, unknown entity type or validator name,
            missing extract group, or score out of range
    """
    if ascii_only:
        flags |= re.ASCII
    try:
        pattern = re.compile(regex, flags)
    except re.error as e:
        raise RuleCompilationError(
            f"Invalid regular expression: {e}", rule_name=name, pattern=regex
        ) from e

    try:
        etype = parse_entity_type(entity_type)
    except ValueError as e:
        raise RuleCompilationError(str(e), rule_name=name, pattern=regex) from e

    try:
        value_validator = resolve_value_validator(validator)
        context_validator = resolve_context_validator(context)
    except (KeyError, TypeError) as e:
        raise RuleCompilationError(
            str(e.args[0]) if e.args else str(e), rule_name=name, pattern=regex
        ) from e

    return DetectionRule(
        pattern=pattern,
        entity_type=etype,
        score=score,
        group=group,
        value_validator=value_validator,
        context_validator=context_validator,
        name=name,
    )
