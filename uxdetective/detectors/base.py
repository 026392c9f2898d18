"""
Detector capability shared by every pattern family.

A detector is a stateless object: its pattern type, severity, fixed
confidence and wording are class-level constants, and ``detect()`` reads
nothing but the snapshot it is given. One instance can serve any number of
concurrent analyses.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Iterable, Optional, Sequence

from uxdetective.config import settings
from uxdetective.locator import find_array_item_locations, find_text_locations
from uxdetective.schemas.snapshot import PageSnapshot
from uxdetective.types import (
    DetectionResult,
    PatternType,
    Severity,
    Source,
    TextLocation,
)


class Detector(ABC):
    """Decides whether one dark pattern family is present in a snapshot."""

    pattern_type: ClassVar[PatternType]
    severity: ClassVar[Severity]
    confidence: ClassVar[float] = 0.0   # Reported when detected (fixed-confidence detectors)
    name: ClassVar[str]                 # Display name
    category: ClassVar[str]             # financial | subscription | interface | shopping | privacy | psychological
    description: ClassVar[str]
    location: ClassVar[str]

    def __init__(self, context_length: int = settings.CONTEXT_LENGTH):
        self.context_length = context_length

    @abstractmethod
    def detect(self, snapshot: PageSnapshot) -> DetectionResult:
        """Evaluate the snapshot. Must not raise for well-formed input."""

    def __call__(self, snapshot: PageSnapshot) -> DetectionResult:
        return self.detect(snapshot)

    # --- Helpers for subclasses ---

    def find_text(self, text: str, terms: Iterable[str]) -> list[TextLocation]:
        return find_text_locations(text, terms, self.context_length)

    def find_items(self, items: Sequence[str], terms: Iterable[str]) -> list[TextLocation]:
        return find_array_item_locations(items, terms, self.context_length)

    def result(
        self,
        detected: bool,
        evidence: Any,
        exact_locations: Iterable[TextLocation] = (),
        verification_data: Optional[dict] = None,
        confidence: Optional[float] = None,
    ) -> DetectionResult:
        """Build this detector's result. Confidence is forced to 0 when not detected."""
        if confidence is None:
            confidence = self.confidence
        return DetectionResult(
            pattern_type=self.pattern_type,
            severity=self.severity,
            confidence=confidence if detected else 0.0,
            detected=detected,
            description=self.description,
            evidence=evidence,
            location=self.location,
            exact_locations=tuple(exact_locations),
            verification_data=verification_data or {},
        )

    def describe(self) -> dict:
        """Catalogue entry for this detector."""
        return {
            "type": self.pattern_type.value,
            "name": self.name,
            "category": self.category,
            "severity": self.severity.value,
            "description": self.description,
            "location": self.location,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.pattern_type.value})"


def tag(
    locations: Iterable[TextLocation], source: Source, pattern_type: str, **extra: Any,
) -> list[TextLocation]:
    """Stamp a batch of locations with their corpus and a free-form tag."""
    return [loc.tagged(source, pattern_type, **extra) for loc in locations]


def terms_of(locations: Iterable[TextLocation]) -> tuple[str, ...]:
    return tuple(loc.term for loc in locations)


def items_of(locations: Iterable[TextLocation]) -> tuple[str, ...]:
    return tuple(loc.array_item for loc in locations)
