"""Financial patterns: payment demanded for trials, hard-to-stop billing, hidden fees."""

from __future__ import annotations

from uxdetective.detectors.base import Detector, items_of, tag, terms_of
from uxdetective.evidence import (
    CreditCardTrialEvidence,
    ForcedContinuityEvidence,
    HiddenCostsEvidence,
)
from uxdetective.schemas.snapshot import PageSnapshot
from uxdetective.types import DetectionResult, PatternType, Severity, Source

FREE_TRIAL_TERMS = ["free trial", "trial", "free", "no charge", "try free"]
PAYMENT_TERMS = ["credit card", "payment", "billing", "card number", "visa", "mastercard"]

CONTINUITY_TERMS = ["auto-renew", "automatically renew", "recurring", "subscription continues"]
EASY_CANCEL_TERMS = ["cancel", "stop subscription", "opt out", "end subscription"]
DIFFICULT_CANCEL_TERMS = ["call to cancel", "contact us to cancel", "phone only"]

HIDDEN_FEE_TERMS = ["additional fees", "extra charges", "processing fee", "handling fee", "service charge"]
FINE_PRINT_TERMS = ["fine print", "terms apply", "see details", "additional terms"]


class CreditCardTrialDetector(Detector):
    """Free-trial language paired with a demand for payment details."""

    pattern_type = PatternType.CREDIT_CARD_FOR_FREE_TRIAL
    severity = Severity.HIGH
    confidence = 0.8
    name = "Credit Card for Free Trial"
    category = "financial"
    description = "Requires credit card information for free trial"
    location = "Form fields and payment section"

    def detect(self, snapshot: PageSnapshot) -> DetectionResult:
        trial = self.find_text(snapshot.raw_text, FREE_TRIAL_TERMS)
        payment = self.find_text(snapshot.raw_text, PAYMENT_TERMS)
        payment_buttons = self.find_items(snapshot.buttons, PAYMENT_TERMS)

        detected = bool(trial) and (bool(payment) or bool(payment_buttons))

        return self.result(
            detected,
            CreditCardTrialEvidence(
                free_trial_mentions=terms_of(trial),
                payment_mentions=terms_of(payment),
                suspicious_buttons=items_of(payment_buttons),
            ),
            exact_locations=[
                *tag(trial, Source.RAW_TEXT, "freeTrial"),
                *tag(payment, Source.RAW_TEXT, "creditCard"),
                *tag(payment_buttons, Source.BUTTONS, "creditCard"),
            ],
            verification_data={
                "freeTrialCount": len(trial),
                "creditCardCount": len(payment),
                "buttonCount": len(payment_buttons),
            },
        )


class ForcedContinuityDetector(Detector):
    """Auto-renewal with no visible way out, or with an explicitly awkward one."""

    pattern_type = PatternType.FORCED_CONTINUITY
    severity = Severity.HIGH
    confidence = 0.8
    name = "Forced Continuity"
    category = "financial"
    description = "Makes it difficult to cancel recurring subscriptions"
    location = "Subscription and billing sections"

    def detect(self, snapshot: PageSnapshot) -> DetectionResult:
        continuity = self.find_text(snapshot.raw_text, CONTINUITY_TERMS)
        easy_cancel = self.find_text(snapshot.raw_text, EASY_CANCEL_TERMS)
        cancel_buttons = self.find_items(snapshot.buttons, EASY_CANCEL_TERMS)
        difficult = self.find_text(snapshot.raw_text, DIFFICULT_CANCEL_TERMS)

        has_easy_cancel = bool(easy_cancel) or bool(cancel_buttons)
        detected = bool(continuity) and (not has_easy_cancel or bool(difficult))

        return self.result(
            detected,
            ForcedContinuityEvidence(
                continuity_mentions=terms_of(continuity),
                difficult_cancellation=terms_of(difficult),
                cancel_buttons=items_of(cancel_buttons),
            ),
            exact_locations=[
                *tag(continuity, Source.RAW_TEXT, "continuity"),
                *tag(difficult, Source.RAW_TEXT, "difficultCancel"),
            ],
            verification_data={
                "continuityMentions": len(continuity),
                "cancelMentions": len(easy_cancel),
                "cancelButtonCount": len(cancel_buttons),
                "difficultCancelMentions": len(difficult),
            },
        )


class HiddenCostsDetector(Detector):
    """Fees mentioned only in passing, or pushed into the fine print."""

    pattern_type = PatternType.HIDDEN_COSTS
    severity = Severity.HIGH
    confidence = 0.7
    name = "Hidden Costs"
    category = "financial"
    description = "Contains hidden or unclear additional costs"
    location = "Pricing and checkout sections"

    def detect(self, snapshot: PageSnapshot) -> DetectionResult:
        costs = self.find_text(snapshot.raw_text, HIDDEN_FEE_TERMS)
        references = self.find_text(snapshot.raw_text, FINE_PRINT_TERMS)

        detected = bool(costs) or bool(references)

        return self.result(
            detected,
            HiddenCostsEvidence(
                cost_mentions=terms_of(costs),
                hidden_references=terms_of(references),
            ),
            exact_locations=[
                *tag(costs, Source.RAW_TEXT, "hiddenCost"),
                *tag(references, Source.RAW_TEXT, "hiddenReference"),
            ],
            verification_data={
                "costMentions": len(costs),
                "hiddenReferences": len(references),
            },
        )
