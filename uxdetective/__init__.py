"""
UX Detective — Dark Pattern Detection Engine

Inspects captured page content (visible text, headings, button labels,
alerts) for manipulative UX tactics using literal phrase matching and
simple co-occurrence rules.

Public API:
  - PageSnapshot:          validated input for one captured page
  - DarkPatternDetector:   runs every registered detector, scores the result
  - DetectorRegistry:      pattern type -> detector mapping (default_registry())
  - calculate_risk_score:  0-100 severity-weighted confidence score
  - generate_verification_report / generate_summary_stats: audit projections
  - find_text_locations / find_array_item_locations: the text locator

Usage:
    from uxdetective import DarkPatternDetector, PageSnapshot
    snapshot = PageSnapshot.model_validate(payload)
    result = DarkPatternDetector().analyze(snapshot)
"""

__version__ = "1.0.0"

from uxdetective.detector import DarkPatternDetector, analyze_snapshots
from uxdetective.locator import find_array_item_locations, find_text_locations
from uxdetective.registry import DetectorRegistry, RegistryError, default_registry
from uxdetective.report import (
    filter_by_pattern_type,
    filter_by_risk_score,
    generate_summary_stats,
    generate_verification_report,
    summarize_analysis,
)
from uxdetective.schemas.snapshot import PageSnapshot
from uxdetective.scorer import calculate_risk_score, risk_breakdown, risk_level
from uxdetective.types import (
    AnalysisResult,
    DetectionResult,
    PatternType,
    Severity,
    Source,
    TextLocation,
)

__all__ = [
    "DarkPatternDetector",
    "analyze_snapshots",
    "find_text_locations",
    "find_array_item_locations",
    "DetectorRegistry",
    "RegistryError",
    "default_registry",
    "generate_verification_report",
    "generate_summary_stats",
    "summarize_analysis",
    "filter_by_risk_score",
    "filter_by_pattern_type",
    "PageSnapshot",
    "calculate_risk_score",
    "risk_breakdown",
    "risk_level",
    "AnalysisResult",
    "DetectionResult",
    "PatternType",
    "Severity",
    "Source",
    "TextLocation",
]
