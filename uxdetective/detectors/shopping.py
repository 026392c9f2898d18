"""Shopping patterns: extras slipped into the basket."""

from __future__ import annotations

from uxdetective.detectors.base import Detector, tag, terms_of
from uxdetective.evidence import SneakIntoBasketEvidence
from uxdetective.schemas.snapshot import PageSnapshot
from uxdetective.types import DetectionResult, PatternType, Severity, Source

CHECKOUT_TERMS = ["checkout", "cart", "basket", "order", "purchase"]
ADD_ON_TERMS = ["insurance", "warranty", "express delivery", "premium shipping", "add-on", "extra"]
PRESELECTED_TERMS = ["pre-selected", "automatically added", "included by default"]


class SneakIntoBasketDetector(Detector):
    """All three must co-occur: a checkout, an add-on, and wording that it was pre-selected."""

    pattern_type = PatternType.SNEAK_INTO_BASKET
    severity = Severity.HIGH
    confidence = 0.8
    name = "Sneak into Basket"
    category = "shopping"
    description = "Additional items automatically added to cart/checkout"
    location = "Checkout process"

    def detect(self, snapshot: PageSnapshot) -> DetectionResult:
        checkout = self.find_text(snapshot.raw_text, CHECKOUT_TERMS)
        add_ons = self.find_text(snapshot.raw_text, ADD_ON_TERMS)
        preselected = self.find_text(snapshot.raw_text, PRESELECTED_TERMS)

        detected = bool(checkout) and bool(add_ons) and bool(preselected)

        return self.result(
            detected,
            SneakIntoBasketEvidence(
                checkout_context=terms_of(checkout),
                additional_items=terms_of(add_ons),
                preselected_language=terms_of(preselected),
            ),
            exact_locations=[
                *tag(checkout, Source.RAW_TEXT, "checkout"),
                *tag(add_ons, Source.RAW_TEXT, "additionalItems"),
                *tag(preselected, Source.RAW_TEXT, "preselected"),
            ],
            verification_data={
                "checkoutMentions": len(checkout),
                "additionalItemMentions": len(add_ons),
                "preselectedMentions": len(preselected),
            },
        )
