"""
Shared test configuration for piiscan.

Provides candidate/span factories and fixtures that keep settings and
logging from leaking between tests.
"""

import logging

import pytest

from piiscan.config import get_settings
from piiscan.core.detectors.catalog import default_catalog
from piiscan.core.detectors.config import DetectionConfig
from piiscan.core.detectors.orchestrator import ScanEngine
from piiscan.core.types import Candidate, EntityType, Span


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )


# =============================================================================
# FACTORY FUNCTIONS
# =============================================================================

def make_candidate(
    text: str,
    start: int = 0,
    entity_type: EntityType = EntityType.PHONE,
    score: float = 0.9,
    family_rank: int = 7,
    rule: str = "test",
) -> Candidate:
    """
    Factory function to create a valid Candidate for testing.

    Automatically calculates end position from start + len(text).

    Args:
        text: The matched text
        start: Start position in document (default 0)
        entity_type: Entity type (default PHONE)
        score: Rule score (default 0.9)
        family_rank: Family precedence rank (default 7 = phone)
        rule: Rule name (default "test")
    """
    return Candidate(
        entity_type=entity_type,
        start=start,
        end=start + len(text),
        text=text,
        score=score,
        family_rank=family_rank,
        rule=rule,
    )


def make_span(
    text: str,
    start: int = 0,
    entity_type: EntityType = EntityType.EMAIL,
    score: float = 0.9,
) -> Span:
    """Factory function to create a valid Span for testing."""
    return Span(
        entity_type=entity_type,
        start=start,
        end=start + len(text),
        text=text,
        score=score,
    )


def spans_of(result, entity_type: EntityType) -> list[Span]:
    """Spans of one entity type from a ScanResult."""
    return [s for s in result.spans if s.entity_type == entity_type]


def texts_of(result, entity_type: EntityType) -> list[str]:
    """Texts of one entity type from a ScanResult."""
    return [s.text for s in spans_of(result, entity_type)]


def assert_non_overlapping(spans: list[Span]) -> None:
    """No two spans share an offset, and spans are sorted by start."""
    for prev, cur in zip(spans, spans[1:]):
        assert prev.end <= cur.start, f"{prev!r} overlaps {cur!r}"


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def engine():
    """Sequential engine over the built-in catalog."""
    with ScanEngine(config=DetectionConfig.sequential()) as eng:
        yield eng


@pytest.fixture
def parallel_engine():
    """Parallel engine over the built-in catalog."""
    with ScanEngine(config=DetectionConfig(max_workers=4)) as eng:
        yield eng


@pytest.fixture
def catalog():
    return default_catalog()


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch, tmp_path):
    """Run every test from an empty directory with no PIISCAN_ variables."""
    import os

    for key in list(os.environ):
        if key.startswith("PIISCAN_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Drop handlers installed by setup_logging during a test."""
    root = logging.getLogger()
    before = set(root.handlers)
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in before and type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
