"""
Detector — Analysis Orchestrator

Runs every registered detector against one page snapshot, keeps the
positive detections, scores them and stamps the result.

  - analyze:               synchronous, CPU-bound, bounded by input size.
  - detect_dark_patterns:  the same work run off the event loop, for services.

Detectors share no mutable state, so one orchestrator instance can serve
concurrent callers. A detector that raises, or returns a malformed result,
is logged and skipped; it never fails the whole analysis.
"""

from __future__ import annotations

import asyncio
import logging
import time
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Any, Optional, Sequence

from uxdetective.config import settings
from uxdetective.detectors import Detector
from uxdetective.registry import DetectorRegistry, RegistryError, default_registry
from uxdetective.report import generate_verification_report
from uxdetective.schemas.snapshot import PageSnapshot
from uxdetective.scorer import calculate_risk_score
from uxdetective.types import AnalysisResult, DetectionResult, PatternType, Severity

logger = logging.getLogger(__name__)


class MalformedDetectionError(ValueError):
    """A detector returned something that cannot be stored as a detection."""


def validate_detection(pattern_type: PatternType, result: Any) -> DetectionResult:
    """
    Check that a detector's return value is a well-formed detection.

    Raises:
        MalformedDetectionError: describing the first problem found.
    """
    if not isinstance(result, DetectionResult):
        raise MalformedDetectionError(f"returned {type(result).__name__}, not DetectionResult")
    if result.pattern_type is not pattern_type:
        raise MalformedDetectionError(
            f"type {result.pattern_type!r} does not match registry key {pattern_type.value}"
        )
    if not isinstance(result.severity, Severity):
        raise MalformedDetectionError(f"invalid severity {result.severity!r}")
    if not isinstance(result.confidence, (int, float)) or not 0.0 <= result.confidence <= 1.0:
        raise MalformedDetectionError(f"confidence {result.confidence!r} outside [0, 1]")
    if not result.description:
        raise MalformedDetectionError("missing description")
    if result.detected != (result.confidence > 0):
        raise MalformedDetectionError(
            f"detected={result.detected} inconsistent with confidence={result.confidence}"
        )
    return result


class DarkPatternDetector:
    """Runs a detector registry over page snapshots."""

    def __init__(
        self,
        registry: Optional[DetectorRegistry] = None,
        workers: Optional[int] = None,
    ):
        self.registry = registry if registry is not None else default_registry()
        if not isinstance(self.registry, DetectorRegistry):
            raise RegistryError(f"Expected DetectorRegistry, got {type(self.registry).__name__}")
        self.workers = settings.DETECTOR_WORKERS if workers is None else workers

    # --------------------------------------------------------
    # Analysis
    # --------------------------------------------------------

    def analyze(self, snapshot: PageSnapshot) -> AnalysisResult:
        """Run every detector and aggregate the positive detections."""
        started = time.perf_counter()

        if self.workers > 0:
            with ThreadPoolExecutor(max_workers=self.workers) as pool:
                outcomes = list(pool.map(
                    lambda item: self._run_one(item[0], item[1], snapshot),
                    self.registry.items(),
                ))
        else:
            outcomes = [
                self._run_one(pattern_type, detector, snapshot)
                for pattern_type, detector in self.registry.items()
            ]

        # pool.map preserves input order, so outcomes follow registry order
        detections = tuple(d for d in outcomes if d is not None and d.detected)
        risk_score = calculate_risk_score(detections)

        result = AnalysisResult(
            url=snapshot.url,
            timestamp=datetime.now(timezone.utc).isoformat(),
            total_patterns=len(detections),
            patterns=detections,
            risk_score=risk_score,
        )

        logger.info(
            "Analysis complete",
            extra={
                "url": snapshot.url,
                "total_patterns": result.total_patterns,
                "risk_score": risk_score,
                "detector_count": len(self.registry),
                "duration_ms": round((time.perf_counter() - started) * 1000, 2),
            },
        )
        return result

    async def detect_dark_patterns(self, snapshot: PageSnapshot) -> AnalysisResult:
        """Analyze without blocking the event loop."""
        return await asyncio.to_thread(self.analyze, snapshot)

    def _run_one(
        self, pattern_type: PatternType, detector: Detector, snapshot: PageSnapshot,
    ) -> Optional[DetectionResult]:
        try:
            raw = detector.detect(snapshot)
        except Exception as e:
            logger.warning(
                "Detector %s failed: %s", pattern_type.value, e,
                exc_info=True,
                extra={"pattern_type": pattern_type.value, "error_type": type(e).__name__},
            )
            return None

        try:
            return validate_detection(pattern_type, raw)
        except MalformedDetectionError as e:
            logger.warning(
                "Dropping malformed detection from %s: %s", pattern_type.value, e,
                extra={"pattern_type": pattern_type.value, "error": str(e)},
            )
            return None

    # --------------------------------------------------------
    # Reporting
    # --------------------------------------------------------

    def generate_verification_report(self, analysis_result: AnalysisResult) -> dict:
        return generate_verification_report(analysis_result)

    def get_patterns(self) -> list[dict]:
        """
        Return the catalogue of registered detectors.

        Used by presentation layers to map a pattern type to its display name,
        category and fixed severity.
        """
        return [detector.describe() for detector in self.registry.values()]


def analyze_snapshots(
    snapshots: Sequence[PageSnapshot], detector: Optional[DarkPatternDetector] = None,
) -> list[AnalysisResult]:
    """Analyze several snapshots in order with one orchestrator."""
    detector = detector or DarkPatternDetector()
    return [detector.analyze(s) for s in snapshots]
