"""Scan engine: runs every rule of a catalog over a document in parallel."""

from __future__ import annotations

import asyncio
import contextvars
import logging
import time
from concurrent.futures import Future, ThreadPoolExecutor

from ...exceptions import DetectionError, PiiScanError
from ..constants import MAX_RULE_SCORE, MIN_RULE_SCORE
from ..pipeline.span_resolver import resolve_spans
from ..types import Candidate, ScanResult, Span
from .base import BaseScanner
from .catalog import RuleCatalog, default_catalog
from .config import DetectionConfig

logger = logging.getLogger(__name__)


class ScanEngine:
    """
    Fan-out/fan-in matching engine.

    Every scanner reads the same immutable document; the only synchronisation
    point is collecting all candidates before the single-threaded resolver
    runs. Results do not depend on which worker finished first.
    """

    def __init__(
        self,
        catalog: RuleCatalog | None = None,
        config: DetectionConfig | None = None,
    ):
        self.config = config or DetectionConfig()
        base = catalog if catalog is not None else default_catalog()
        self.catalog = base.select(self.config.entity_types, self.config.exclude_types)
        self.scanners: list[BaseScanner] = list(self.catalog.scanners())
        self.max_workers = self.config.max_workers
        self._executor: ThreadPoolExecutor | None = None
        if self.config.parallel and self.max_workers > 1:
            self._executor = ThreadPoolExecutor(
                max_workers=self.max_workers, thread_name_prefix="piiscan",
            )

        logger.info(
            f"ScanEngine initialized with {len(self.catalog)} families, "
            f"{len(self.scanners)} rules"
            f"{f' ({self.max_workers} workers)' if self._executor else ' (sequential)'}"
        )

    async def scan_async(self, text: str) -> ScanResult:
        """Async wrapper around scan via run_in_executor."""
        loop = asyncio.get_running_loop()
        ctx = contextvars.copy_context()
        return await loop.run_in_executor(None, ctx.run, self.scan, text)

    def scan(self, text: str) -> ScanResult:
        """
        Scan one document.

        Args:
            text: Document to scan

        Returns:
            ScanResult with non-overlapping spans sorted by start offset

        Raises:
            DetectionError: If a scanner raised (a faulty validator or rule)
        """
        start_time = time.perf_counter()

        if not text or not text.strip():
            return ScanResult(text_length=len(text or ""))

        candidates = self._collect(text)
        spans = self._post_process(candidates)

        entity_counts: dict[str, int] = {}
        for span in spans:
            key = span.entity_type.value
            entity_counts[key] = entity_counts.get(key, 0) + 1

        processing_time_ms = (time.perf_counter() - start_time) * 1000
        logger.debug(
            "Scanned %d chars: %d candidates, %d spans in %.2fms",
            len(text), len(candidates), len(spans), processing_time_ms,
        )

        return ScanResult(
            spans=spans,
            entity_counts=entity_counts,
            processing_time_ms=processing_time_ms,
            rules_evaluated=len(self.scanners),
            text_length=len(text),
        )

    def _collect(self, text: str) -> list[Candidate]:
        """Fan out over all scanners and gather every candidate."""
        candidates: list[Candidate] = []

        if self._executor is None:
            for scanner in self.scanners:
                candidates.extend(self._run_scanner(scanner, text))
            return candidates

        # One context copy per task; a Context cannot be entered by two threads
        futures: list[Future[list[Candidate]]] = [
            self._executor.submit(contextvars.copy_context().run, self._run_scanner, scanner, text)
            for scanner in self.scanners
        ]
        try:
            for future in futures:
                candidates.extend(future.result())
        except PiiScanError:
            for future in futures:
                future.cancel()
            raise
        return candidates

    def _run_scanner(self, scanner: BaseScanner, text: str) -> list[Candidate]:
        """Run a single scanner, surfacing faults as DetectionError."""
        if not scanner.is_available():
            logger.warning(f"Scanner {scanner.name} not available")
            return []
        try:
            candidates = scanner.evaluate(text)
        except PiiScanError:
            raise
        except Exception as e:
            logger.error(f"Error in scanner {scanner.name}: {type(e).__name__}")
            raise DetectionError(
                f"Scanner {scanner.name!r} failed: {type(e).__name__}",
                rule_name=scanner.name,
                input_length=len(text),
            ) from e

        for candidate in candidates:
            problem = _candidate_problem(candidate, text)
            if problem:
                logger.error(f"Scanner {scanner.name} returned a bad candidate: {problem}")
                raise DetectionError(
                    f"Scanner {scanner.name!r} returned a bad candidate: {problem}",
                    rule_name=scanner.name,
                    input_length=len(text),
                )
        return candidates

    def _post_process(self, candidates: list[Candidate]) -> list[Span]:
        """Resolve conflicts, then apply the score threshold."""
        spans = resolve_spans(candidates)
        if self.config.min_score > 0.0:
            spans = [s for s in spans if s.score >= self.config.min_score]
        return spans

    def shutdown(self) -> None:
        """Shut down the persistent thread pool."""
        if self._executor is not None:
            self._executor.shutdown(wait=False)

    def __enter__(self) -> ScanEngine:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()

    def add_scanner(self, scanner: BaseScanner) -> None:
        """Add a custom scanner to the engine."""
        self.scanners.append(scanner)
        logger.info(f"Added scanner: {scanner.name}")

    def remove_scanner(self, name: str) -> bool:
        """Remove a scanner by name."""
        for i, scanner in enumerate(self.scanners):
            if scanner.name == name:
                self.scanners.pop(i)
                logger.info(f"Removed scanner: {name}")
                return True
        return False

    @property
    def scanner_names(self) -> list[str]:
        """Get list of active scanner names."""
        return [s.name for s in self.scanners]


def _candidate_problem(candidate: object, text: str) -> str | None:
    """Why a candidate cannot become a span of *text*, or None if it can.

    Messages carry offsets and scores only, never document text.
    """
    if not isinstance(candidate, Candidate):
        return f"expected Candidate, got {type(candidate).__name__}"
    if not MIN_RULE_SCORE < candidate.score <= MAX_RULE_SCORE:
        return f"score {candidate.score} outside ({MIN_RULE_SCORE}, {MAX_RULE_SCORE}]"
    if candidate.end > len(text):
        return f"end {candidate.end} past document length {len(text)}"
    if text[candidate.start:candidate.end] != candidate.text:
        return f"text does not match document at {candidate.start}:{candidate.end}"
    return None


def scan(
    text: str,
    catalog: RuleCatalog | None = None,
    config: DetectionConfig | None = None,
) -> ScanResult:
    """Scan text using a one-shot engine."""
    with ScanEngine(catalog=catalog, config=config) as engine:
        return engine.scan(text)
