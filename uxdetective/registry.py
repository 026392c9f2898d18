"""
Detector Registry

Immutable mapping from pattern type to detector. Lookup is by key;
iteration follows insertion order, and that order is the order of
``AnalysisResult.patterns``. Adding a pattern family means adding one
detector here and nothing else.

The registry is a value handed to the orchestrator, not a global, so tests
can run any subset of detectors.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Iterable, Iterator, Optional

from uxdetective.config import settings
from uxdetective.detectors import DETECTOR_CLASSES, Detector
from uxdetective.types import PatternType


class RegistryError(ValueError):
    """The registry is misconfigured. Always a programming defect."""


class DetectorRegistry(Mapping):
    """Read-only, insertion-ordered mapping of PatternType -> Detector."""

    def __init__(self, detectors: Iterable[Detector]):
        table: dict[PatternType, Detector] = {}
        for detector in detectors:
            if not isinstance(detector, Detector):
                raise RegistryError(f"Not a detector: {detector!r}")
            pattern_type = getattr(detector, "pattern_type", None)
            if not isinstance(pattern_type, PatternType):
                raise RegistryError(f"{type(detector).__name__} has no pattern type")
            if pattern_type in table:
                raise RegistryError(f"Duplicate detector for {pattern_type.value}")
            table[pattern_type] = detector
        self._table = MappingProxyType(table)

    def __getitem__(self, key: PatternType | str) -> Detector:
        try:
            pattern_type = PatternType(key)
        except ValueError:
            raise KeyError(key) from None
        return self._table[pattern_type]

    def __iter__(self) -> Iterator[PatternType]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, key: object) -> bool:
        try:
            return PatternType(key) in self._table
        except ValueError:
            return False

    def subset(self, *pattern_types: PatternType | str) -> DetectorRegistry:
        """A registry holding only the given types, in this registry's order."""
        wanted = {PatternType(t) for t in pattern_types}
        return DetectorRegistry(d for t, d in self._table.items() if t in wanted)

    def __repr__(self) -> str:
        return f"DetectorRegistry({[t.value for t in self._table]})"


def default_registry(context_length: Optional[int] = None) -> DetectorRegistry:
    """All fourteen detectors in canonical order."""
    if context_length is None:
        context_length = settings.CONTEXT_LENGTH
    return DetectorRegistry(cls(context_length) for cls in DETECTOR_CLASSES)
