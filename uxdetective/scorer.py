"""
Risk Score Calculator

Turns the positive detections for one page into a 0-100 risk score.
Separated from detector.py for single-responsibility.

Each detection contributes weight[severity] x confidence, and the sum is
normalised against the maximum possible for that many detections (all high
severity at confidence 1.0):

    risk = round(100 * sum(contributions) / (3 * len(detections)))

The score therefore reflects the average severity-weighted confidence, not
the raw number of patterns found. No detections scores 0.
"""

from __future__ import annotations

import math
from typing import Sequence

from uxdetective.types import DetectionResult, Severity

SEVERITY_WEIGHTS = {
    Severity.HIGH: 3,
    Severity.MEDIUM: 2,
    Severity.LOW: 1,
}
MAX_WEIGHT = max(SEVERITY_WEIGHTS.values())

# Lower bounds of the risk bands shown to users
RISK_LEVELS = ((70, "high"), (40, "medium"), (0, "low"))


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _contribution(detection: DetectionResult) -> float:
    return SEVERITY_WEIGHTS[Severity(detection.severity)] * detection.confidence


def calculate_risk_score(detections: Sequence[DetectionResult]) -> int:
    """Risk score in [0, 100] for a set of positive detections."""
    if not detections:
        return 0
    total = sum(_contribution(d) for d in detections)
    max_possible = MAX_WEIGHT * len(detections)
    return max(0, min(100, round_half_up(total / max_possible * 100)))


def risk_breakdown(detections: Sequence[DetectionResult]) -> dict:
    """
    Show how the score was reached.

    Returns:
        dict with one contribution entry per detection, the weighted total,
        the normalising maximum and the final score.
    """
    contributions = [
        {
            "pattern": d.pattern_type.value,
            "severity": Severity(d.severity).value,
            "weight": SEVERITY_WEIGHTS[Severity(d.severity)],
            "confidence": d.confidence,
            "contribution": round(_contribution(d), 4),
        }
        for d in detections
    ]
    return {
        "contributions": contributions,
        "weightedTotal": round(sum(c["contribution"] for c in contributions), 4),
        "maxPossible": MAX_WEIGHT * len(detections),
        "finalScore": calculate_risk_score(detections),
    }


def risk_level(score: int) -> str:
    """Band a risk score: >= 70 high, >= 40 medium, otherwise low."""
    for floor, level in RISK_LEVELS:
        if score >= floor:
            return level
    return "low"
