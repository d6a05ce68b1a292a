"""
Rule catalog: ordered, ranked families of detection rules.

A catalog is a plain immutable value. It is built once (from the built-in
rule modules or from data such as a YAML file) and then only read; the
engine never mutates it. Building a catalog is where every rule fault
surfaces: no partially built catalog is ever returned.

Family ranks (lower wins conflict ties)::

    0 secrets      6 mac-address   12 id-number
    1 email        7 phone         13 org
    2 url          8 date          14 financial
    3 iban         9 ip-address    15 address
    4 credit-card 10 medical       16 person
    5 ssn         11 age

Usage::

    from piiscan.core.detectors.catalog import default_catalog, load_catalog

    catalog = default_catalog().select(exclude_types=["PERSON"])
    custom = load_catalog("rules.yaml")
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from ...exceptions import ConfigurationError, RuleCompilationError
from ..types import EntityType, parse_entity_type
from .address import ADDRESS_RULES
from .base import RuleScanner
from .clinical import AGE_RULES, MEDICAL_RULES
from .contact import EMAIL_RULES, PHONE_RULES, URL_RULES
from .dates import DATE_RULES
from .financial import CREDIT_CARD_RULES, FINANCIAL_RULES, IBAN_RULES
from .identifiers import ID_NUMBER_RULES, SSN_RULES
from .names import ORG_RULES, PERSON_RULES
from .network import IP_ADDRESS_RULES, MAC_ADDRESS_RULES
from .pattern_registry import DetectionRule, _r
from .secrets import SECRET_RULES

logger = logging.getLogger(__name__)

__all__ = [
    "RuleFamily",
    "RuleCatalog",
    "DEFAULT_FAMILIES",
    "default_catalog",
    "load_catalog",
]

_REGEX_FLAGS = {
    "IGNORECASE": re.IGNORECASE,
    "I": re.IGNORECASE,
    "MULTILINE": re.MULTILINE,
    "M": re.MULTILINE,
    "DOTALL": re.DOTALL,
    "S": re.DOTALL,
    "ASCII": re.ASCII,
    "A": re.ASCII,
    "VERBOSE": re.VERBOSE,
    "X": re.VERBOSE,
}


@dataclass(frozen=True)
class RuleFamily:
    """
    Rules that target the same entity type, in evaluation order.

    More specific rules come first within a family. The rank is the family's
    precedence in conflict resolution (lower wins ties).
    """

    name: str
    rank: int
    entity_type: EntityType
    rules: tuple[DetectionRule, ...]

    def __post_init__(self) -> None:
        if not self.name:
            raise ConfigurationError("Rule family must have a name")
        if self.rank < 0:
            raise ConfigurationError(
                f"Family rank must be >= 0, got {self.rank}",
                details={"family": self.name},
            )
        for rule in self.rules:
            if rule.entity_type is not self.entity_type:
                raise RuleCompilationError(
                    f"Rule emits {rule.entity_type.value} but family {self.name!r} "
                    f"is {self.entity_type.value}",
                    rule_name=rule.name,
                )

    def scanners(self) -> list[RuleScanner]:
        """One scanner per rule, stamped with this family's rank."""
        return [
            RuleScanner(rule, family=self.name, rank=self.rank, index=i)
            for i, rule in enumerate(self.rules)
        ]

    def __len__(self) -> int:
        return len(self.rules)

    def __repr__(self) -> str:
        return (
            f"RuleFamily(name={self.name!r}, rank={self.rank}, "
            f"entity_type={self.entity_type.value!r}, rules={len(self.rules)})"
        )


@dataclass(frozen=True)
class RuleCatalog:
    """Immutable, rank-ordered collection of rule families."""

    families: tuple[RuleFamily, ...]

    def __post_init__(self) -> None:
        names: set[str] = set()
        ranks: set[int] = set()
        for family in self.families:
            if family.name in names:
                raise ConfigurationError(f"Duplicate rule family: {family.name!r}")
            if family.rank in ranks:
                raise ConfigurationError(
                    f"Duplicate family rank {family.rank}",
                    details={"family": family.name},
                )
            names.add(family.name)
            ranks.add(family.rank)
        # Keep families in precedence order regardless of input order
        ordered = tuple(sorted(self.families, key=lambda f: f.rank))
        object.__setattr__(self, "families", ordered)

    def __iter__(self) -> Iterator[RuleFamily]:
        return iter(self.families)

    def __len__(self) -> int:
        return len(self.families)

    @property
    def rule_count(self) -> int:
        return sum(len(f) for f in self.families)

    @property
    def entity_types(self) -> list[EntityType]:
        return [f.entity_type for f in self.families]

    def family(self, name: str) -> RuleFamily:
        """Look up a family by name. Raises ``KeyError`` if unknown."""
        for f in self.families:
            if f.name == name:
                return f
        raise KeyError(f"Unknown rule family: {name!r}. Available: {[f.name for f in self.families]}")

    def scanners(self) -> list[RuleScanner]:
        """All rule scanners, in catalog order."""
        result: list[RuleScanner] = []
        for family in self.families:
            result.extend(family.scanners())
        return result

    def select(
        self,
        entity_types: Iterable[EntityType | str] | None = None,
        exclude_types: Iterable[EntityType | str] | None = None,
    ) -> RuleCatalog:
        """
        Return a catalog restricted to some entity types.

        Args:
            entity_types: Types to keep (None keeps all)
            exclude_types: Types to drop, applied after ``entity_types``

        Raises:
            ConfigurationError: If a type name is unknown
        """
        try:
            include = {parse_entity_type(t) for t in entity_types} if entity_types is not None else None
            exclude = {parse_entity_type(t) for t in exclude_types or ()}
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

        kept = tuple(
            f for f in self.families
            if (include is None or f.entity_type in include) and f.entity_type not in exclude
        )
        return RuleCatalog(kept)

    def describe(self) -> list[dict[str, Any]]:
        """Serializable summary of every family and its rules."""
        return [
            {
                "name": f.name,
                "rank": f.rank,
                "entity_type": f.entity_type.value,
                "rules": [rule.describe() for rule in f.rules],
            }
            for f in self.families
        ]

    @classmethod
    def from_definitions(cls, families: Iterable[Mapping[str, Any]]) -> RuleCatalog:
        """
        Build a catalog from plain data.

        Each family mapping has ``name``, ``entity_type``, optional ``rank``
        (defaults to its position) and ``rules``. Each rule mapping has
        ``pattern`` and ``score``, and optionally ``group``, ``validator``,
        ``context``, ``flags`` (list of ``re`` flag names) and ``name``.

        Raises:
            ConfigurationError: Malformed family definitions
            RuleCompilationError: A rule cannot be built
        """
        built: list[RuleFamily] = []
        for position, fdef in enumerate(families):
            if not isinstance(fdef, Mapping):
                raise ConfigurationError(
                    f"Family definition #{position} must be a mapping, got {type(fdef).__name__}"
                )
            try:
                name = str(fdef["name"])
                entity_type = parse_entity_type(fdef["entity_type"])
            except KeyError as e:
                raise ConfigurationError(
                    f"Family definition #{position} is missing {e.args[0]!r}"
                ) from None
            except ValueError as e:
                raise ConfigurationError(str(e), details={"family": fdef.get("name")}) from e

            rules = tuple(
                _rule_from_definition(rdef, name, i, entity_type)
                for i, rdef in enumerate(fdef.get("rules") or ())
            )
            built.append(RuleFamily(
                name=name,
                rank=int(fdef.get("rank", position)),
                entity_type=entity_type,
                rules=rules,
            ))

        catalog = cls(tuple(built))
        logger.info(
            "Built rule catalog from definitions: %d families, %d rules",
            len(catalog), catalog.rule_count,
        )
        return catalog


def _rule_from_definition(
    rdef: Mapping[str, Any],
    family: str,
    index: int,
    family_type: EntityType,
) -> DetectionRule:
    name = str(rdef.get("name") or f"{family}#{index}")
    if "pattern" not in rdef or "score" not in rdef:
        raise RuleCompilationError("Rule definition needs 'pattern' and 'score'", rule_name=name)

    flags = 0
    for flag in rdef.get("flags") or ():
        try:
            flags |= _REGEX_FLAGS[str(flag).upper()]
        except KeyError:
            raise RuleCompilationError(
                f"Unknown regex flag: {flag!r}", rule_name=name, pattern=rdef["pattern"]
            ) from None

    try:
        score = float(rdef["score"])
        group = int(rdef.get("group", 0))
    except (TypeError, ValueError) as e:
        raise RuleCompilationError(
            f"Invalid number in rule definition: {e}", rule_name=name, pattern=rdef["pattern"]
        ) from e

    return _r(
        str(rdef["pattern"]),
        rdef.get("entity_type", family_type),
        score,
        group,
        validator=rdef.get("validator"),
        context=rdef.get("context"),
        flags=flags,
        name=name,
        ascii_only=False,
    )


# =============================================================================
# BUILT-IN CATALOG
# =============================================================================

DEFAULT_FAMILIES: tuple[RuleFamily, ...] = (
    RuleFamily("secrets", 0, EntityType.SECRET, SECRET_RULES),
    RuleFamily("email", 1, EntityType.EMAIL, EMAIL_RULES),
    RuleFamily("url", 2, EntityType.URL, URL_RULES),
    RuleFamily("iban", 3, EntityType.IBAN, IBAN_RULES),
    RuleFamily("credit-card", 4, EntityType.CREDIT_CARD, CREDIT_CARD_RULES),
    RuleFamily("ssn", 5, EntityType.SSN, SSN_RULES),
    RuleFamily("mac-address", 6, EntityType.MAC_ADDRESS, MAC_ADDRESS_RULES),
    RuleFamily("phone", 7, EntityType.PHONE, PHONE_RULES),
    RuleFamily("date", 8, EntityType.DATE, DATE_RULES),
    RuleFamily("ip-address", 9, EntityType.IP_ADDRESS, IP_ADDRESS_RULES),
    RuleFamily("medical", 10, EntityType.MEDICAL, MEDICAL_RULES),
    RuleFamily("age", 11, EntityType.AGE, AGE_RULES),
    RuleFamily("id-number", 12, EntityType.ID_NUMBER, ID_NUMBER_RULES),
    RuleFamily("org", 13, EntityType.ORG, ORG_RULES),
    RuleFamily("financial", 14, EntityType.FINANCIAL, FINANCIAL_RULES),
    RuleFamily("address", 15, EntityType.ADDRESS, ADDRESS_RULES),
    RuleFamily("person", 16, EntityType.PERSON, PERSON_RULES),
)


@lru_cache(maxsize=1)
def default_catalog() -> RuleCatalog:
    """The built-in multilingual catalog (built once, shared)."""
    catalog = RuleCatalog(DEFAULT_FAMILIES)
    logger.info(
        "Built default rule catalog: %d families, %d rules",
        len(catalog), catalog.rule_count,
    )
    return catalog


def load_catalog(path: str | Path) -> RuleCatalog:
    """
    Load a catalog from a YAML file with a top-level ``families`` list.

    Raises:
        ConfigurationError: Unreadable file or malformed YAML
        RuleCompilationError: A rule cannot be built
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read catalog file: {e}", details={"path": str(path)}) from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in catalog file: {e}", details={"path": str(path)}) from e

    if not isinstance(data, Mapping) or not isinstance(data.get("families"), list):
        raise ConfigurationError(
            "Catalog file must contain a top-level 'families' list",
            details={"path": str(path)},
        )
    return RuleCatalog.from_definitions(data["families"])
