"""
Core data structures shared by the locator, detectors, orchestrator and reports.

Everything here is immutable once built. ``to_dict()`` projections produce the
flat camelCase documents stored and displayed downstream.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, is_dataclass, replace
from enum import Enum
from typing import Any, Optional


class PatternType(str, Enum):
    """Canonical dark pattern identifiers. Used as a closed lookup key downstream."""
    CREDIT_CARD_FOR_FREE_TRIAL = "creditCardForFreeTrial"
    AUTO_SUBSCRIPTION_TO_EMAILS = "autoSubscriptionToEmails"
    MANIPULATIVE_BUTTONS = "manipulativeButtons"
    SNEAK_INTO_BASKET = "sneakIntoBasket"
    CONTACT_ACCESS = "contactAccess"
    FOMO = "fomo"
    BAIT_AND_SWITCH = "baitAndSwitch"
    FORCED_CONTINUITY = "forcedContinuity"
    HIDDEN_COSTS = "hiddenCosts"
    MISDIRECTION = "misdirection"
    ROACH_MOTEL = "roachMotel"
    TRICK_QUESTIONS = "trickQuestions"
    PRIVACY_ZUCKERING = "privacyZuckering"
    URGENCY_TACTICS = "urgencyTactics"


class Severity(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Source(str, Enum):
    """Which snapshot corpus a location was found in."""
    RAW_TEXT = "rawText"
    BUTTONS = "buttons"
    HEADINGS = "headings"
    ALERTS = "alerts"


# ============================================================
# JSON PROJECTION
# ============================================================

def to_camel(name: str) -> str:
    """snake_case -> camelCase."""
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def to_json_value(value: Any) -> Any:
    """Convert dataclasses, enums and tuples into JSON-compatible values."""
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value) and not isinstance(value, type):
        return {
            to_camel(f.name): to_json_value(getattr(value, f.name))
            for f in fields(value)
        }
    if isinstance(value, (list, tuple)):
        return [to_json_value(v) for v in value]
    if isinstance(value, dict):
        return {str(k): to_json_value(v) for k, v in value.items()}
    return value


# ============================================================
# DATA STRUCTURES
# ============================================================

@dataclass(frozen=True)
class TextLocation:
    """
    One occurrence of a configured term.

    ``start_index``/``end_index`` are offsets into the searched string (the
    raw text, or the individual heading/alert/button). ``context`` is the
    clipped window ``[context_start, context_end)`` of that same string, so
    ``context[start_index - context_start:end_index - context_start]``
    always equals ``exact_match``.
    """
    term: str
    start_index: int
    end_index: int
    context: str
    exact_match: str
    context_start: int
    context_end: int
    source: Optional[Source] = None
    pattern_type: Optional[str] = None
    weight: Optional[int] = None
    array_index: Optional[int] = None
    array_item: Optional[str] = None
    heading_index: Optional[int] = None
    heading_text: Optional[str] = None
    alert_index: Optional[int] = None
    alert_text: Optional[str] = None
    pattern_index: Optional[int] = None

    def tagged(self, source: Source, pattern_type: str, **extra: Any) -> TextLocation:
        """Return a copy carrying its corpus, a free-form tag and any provenance fields."""
        return replace(self, source=source, pattern_type=pattern_type, **extra)

    def to_dict(self) -> dict:
        return {
            to_camel(f.name): to_json_value(getattr(self, f.name))
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass(frozen=True)
class DetectionResult:
    """Outcome of one detector against one snapshot."""
    pattern_type: PatternType
    severity: Severity
    confidence: float         # 0.0 to 1.0; 0.0 whenever detected is False
    detected: bool
    description: str
    evidence: Any             # One of the records in uxdetective.evidence
    location: str             # Where the pattern manifests, for humans
    exact_locations: tuple[TextLocation, ...] = ()
    verification_data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "type": self.pattern_type.value,
            "severity": self.severity.value,
            "confidence": self.confidence,
            "detected": self.detected,
            "description": self.description,
            "evidence": to_json_value(self.evidence),
            "location": self.location,
            "exactLocations": [loc.to_dict() for loc in self.exact_locations],
            "verificationData": to_json_value(self.verification_data),
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Aggregate produced once per snapshot by the orchestrator."""
    url: str
    timestamp: str            # ISO-8601 generation time
    total_patterns: int
    patterns: tuple[DetectionResult, ...]
    risk_score: int           # 0 to 100

    def to_dict(self) -> dict:
        return {
            "url": self.url,
            "timestamp": self.timestamp,
            "totalPatterns": self.total_patterns,
            "patterns": [p.to_dict() for p in self.patterns],
            "riskScore": self.risk_score,
        }
