"""Candidate conflict resolution.

Turns the raw, possibly overlapping candidates of every rule into one
non-overlapping span list. The result depends only on the candidate set,
never on the order rules finished in.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..types import Candidate, Span


def resolution_key(candidate: Candidate) -> tuple[int, int, int, float, str, str]:
    """Total order used by the resolver.

    Earlier start first, then longer span, then lower family rank, then higher
    score. Rule name and entity type break any remaining tie so identical
    inputs always sort identically.
    """
    return (
        candidate.start,
        -len(candidate),
        candidate.family_rank,
        -candidate.score,
        candidate.entity_type.value,
        candidate.rule,
    )


def resolve_spans(candidates: Iterable[Candidate]) -> list[Span]:
    """Greedy interval selection over the sorted candidates.

    A candidate is kept if it starts at or after the end of the last kept
    candidate; anything overlapping the last kept span is dropped.

    Args:
        candidates: Raw candidates from all scanners, in any order.

    Returns:
        Non-overlapping spans sorted by start offset.
    """
    ordered = sorted(candidates, key=resolution_key)
    if not ordered:
        return []

    accepted: list[Span] = []
    cursor_end = -1

    for candidate in ordered:
        if candidate.start < cursor_end:
            continue
        accepted.append(candidate.to_span())
        cursor_end = candidate.end

    return accepted
