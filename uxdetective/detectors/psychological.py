"""
Psychological pressure patterns: FOMO and artificial urgency.

Both use a weighted multi-corpus keyword scan. The same keyword counts for
more in a heading than in body copy, and most in an alert:

    rawText hit = 1, heading hit = 2, alert hit = 3

A pattern is detected once the cumulative score reaches its threshold, and
its confidence grows with the score up to 1.0.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import ClassVar

from uxdetective.detectors.base import Detector, tag
from uxdetective.evidence import FomoEvidence, KeywordInstance, UrgencyEvidence
from uxdetective.schemas.snapshot import PageSnapshot
from uxdetective.types import DetectionResult, PatternType, Severity, Source, TextLocation

SOURCE_WEIGHTS = {
    Source.RAW_TEXT: 1,
    Source.HEADINGS: 2,
    Source.ALERTS: 3,
}

FOMO_TERMS = [
    "limited time", "only", "left", "hurry", "ending soon", "last chance",
    "limited offer", "expires", "countdown", "almost gone", "few remaining",
    "act now", "don't miss out", "exclusive", "today only",
]

URGENCY_TERMS = [
    "act now", "limited time", "expires soon", "hurry up", "don't wait",
    "immediate action", "urgent", "deadline", "time sensitive", "last chance",
]


class WeightedKeywordDetector(Detector):
    """Scores keyword hits across rawText, headings and alerts."""

    keywords: ClassVar[list[str]]
    tag_name: ClassVar[str]
    threshold: ClassVar[int]
    saturation: ClassVar[int]    # Score at which confidence reaches 1.0

    def scan(self, snapshot: PageSnapshot) -> tuple[int, list[TextLocation], int]:
        """Return (score, locations, rawText hit count)."""
        text_hits = self.find_text(snapshot.raw_text, self.keywords)
        locations = tag(
            text_hits, Source.RAW_TEXT, self.tag_name,
            weight=SOURCE_WEIGHTS[Source.RAW_TEXT],
        )

        for index, heading in enumerate(snapshot.headings):
            locations.extend(tag(
                self.find_text(heading, self.keywords), Source.HEADINGS, self.tag_name,
                weight=SOURCE_WEIGHTS[Source.HEADINGS],
                heading_index=index, heading_text=heading,
            ))

        for index, alert in enumerate(snapshot.alerts):
            locations.extend(tag(
                self.find_text(alert, self.keywords), Source.ALERTS, self.tag_name,
                weight=SOURCE_WEIGHTS[Source.ALERTS],
                alert_index=index, alert_text=alert,
            ))

        score = sum(loc.weight for loc in locations)
        return score, locations, len(text_hits)

    @abstractmethod
    def build_evidence(self, score: int, instances: tuple[KeywordInstance, ...]):
        """Wrap the score and instances in this pattern's evidence record."""

    def detect(self, snapshot: PageSnapshot) -> DetectionResult:
        score, locations, text_mentions = self.scan(snapshot)
        detected = score >= self.threshold

        instances = tuple(
            KeywordInstance(location=loc.source.value, keyword=loc.term, context=loc.context)
            for loc in locations
        )

        return self.result(
            detected,
            self.build_evidence(score, instances),
            exact_locations=locations,
            verification_data={
                "totalScore": score,
                "textMentions": text_mentions,
                "headingMentions": sum(1 for loc in locations if loc.source is Source.HEADINGS),
                "alertMentions": sum(1 for loc in locations if loc.source is Source.ALERTS),
            },
            confidence=min(score / self.saturation, 1.0),
        )


class FomoDetector(WeightedKeywordDetector):
    pattern_type = PatternType.FOMO
    severity = Severity.MEDIUM
    name = "Fear of Missing Out (FOMO)"
    category = "psychological"
    description = "Uses fear of missing out tactics to pressure users"
    location = "Headlines, alerts, and promotional content"

    keywords = FOMO_TERMS
    tag_name = "fomo"
    threshold = 3
    saturation = 10

    def build_evidence(self, score: int, instances: tuple[KeywordInstance, ...]) -> FomoEvidence:
        return FomoEvidence(fomo_score=score, instances=instances)


class UrgencyTacticsDetector(WeightedKeywordDetector):
    pattern_type = PatternType.URGENCY_TACTICS
    severity = Severity.MEDIUM
    name = "Urgency Tactics"
    category = "psychological"
    description = "Uses artificial urgency to pressure users into quick decisions"
    location = "Headlines, alerts, and call-to-action sections"

    keywords = URGENCY_TERMS
    tag_name = "urgency"
    threshold = 2
    saturation = 8

    def build_evidence(self, score: int, instances: tuple[KeywordInstance, ...]) -> UrgencyEvidence:
        return UrgencyEvidence(urgency_score=score, instances=instances)
