"""Interface patterns: lopsided button choices, misleading labels and confusing questions."""

from __future__ import annotations

from uxdetective.detectors.base import Detector, items_of, tag, terms_of
from uxdetective.evidence import (
    BaitAndSwitchEvidence,
    BaitButtonEvidence,
    ButtonPairEvidence,
    ManipulativeButtonsEvidence,
    MisdirectionEvidence,
    TrickQuestionsEvidence,
)
from uxdetective.schemas.snapshot import PageSnapshot
from uxdetective.types import DetectionResult, PatternType, Severity, Source

# (positive labels, negative labels); a page offering only the positive side is flagged
BUTTON_PAIRS: list[tuple[list[str], list[str]]] = [
    (["yes", "accept", "continue", "start"], ["no", "decline", "cancel", "skip"]),
    (["upgrade now", "get premium"], ["maybe later", "not now"]),
]

BAIT_BUTTON_TERMS = ["free", "download", "continue", "next", "start"]
SWITCH_TERMS = ["pay", "subscribe", "upgrade", "premium", "billing"]

MISDIRECTION_BUTTON_TERMS = ["click here", "download now", "get started"]
REAL_ACTION_TERMS = ["subscribe", "purchase", "pay", "upgrade"]
VAGUE_BUTTON_TERMS = ["continue", "next", "proceed"]

TRICK_QUESTION_TERMS = [
    "do not want to not receive",
    "uncheck to not opt out",
    "disable to enable",
    "turn off to turn on",
    "opt out of not receiving",
    # Confusing conditionals
    "unless you don't want",
    "if you don't want to not",
]


class ManipulativeButtonsDetector(Detector):
    """
    Positive actions offered as buttons while the matching refusal is missing.

    ``positive_buttons`` lists one entry per matched (button, label) pair, so a
    button matching two positive labels appears twice, in step with
    ``exact_locations`` and ``totalPositiveButtons``.
    """

    pattern_type = PatternType.MANIPULATIVE_BUTTONS
    severity = Severity.MEDIUM
    confidence = 0.6
    name = "Manipulative Buttons"
    category = "interface"
    description = "Manipulative button design - positive actions emphasized, negative options hidden"
    location = "Interactive buttons"

    def detect(self, snapshot: PageSnapshot) -> DetectionResult:
        pairs: list[ButtonPairEvidence] = []
        locations = []

        for index, (positive, negative) in enumerate(BUTTON_PAIRS):
            positive_buttons = self.find_items(snapshot.buttons, positive)
            negative_buttons = self.find_items(snapshot.buttons, negative)
            if not positive_buttons or negative_buttons:
                continue

            # A refusal mentioned in body copy is still not a button
            negative_in_text = bool(self.find_text(snapshot.raw_text, negative))
            pairs.append(ButtonPairEvidence(
                pattern_index=index,
                positive_buttons=items_of(positive_buttons),
                missing_negative_options=tuple(negative),
                negative_in_text=negative_in_text,
            ))
            locations.extend(tag(
                positive_buttons, Source.BUTTONS, "manipulativePositive",
                pattern_index=index,
            ))

        return self.result(
            bool(pairs),
            ManipulativeButtonsEvidence(pairs=tuple(pairs)),
            exact_locations=locations,
            verification_data={
                "patternsFound": len(pairs),
                "totalPositiveButtons": len(locations),
            },
        )


class BaitAndSwitchDetector(Detector):
    """Buttons promising one thing on a page that talks about paying for another."""

    pattern_type = PatternType.BAIT_AND_SWITCH
    severity = Severity.HIGH
    confidence = 0.7
    name = "Bait and Switch"
    category = "interface"
    description = "Misleading button text that doesn't match actual action"
    location = "Action buttons and forms"

    def detect(self, snapshot: PageSnapshot) -> DetectionResult:
        bait_buttons = self.find_items(snapshot.buttons, BAIT_BUTTON_TERMS)
        switch = self.find_text(snapshot.raw_text, SWITCH_TERMS)

        detected = bool(bait_buttons) and bool(switch)
        entries: tuple[BaitButtonEvidence, ...] = ()
        locations = []
        if detected:
            switch_words = terms_of(switch)
            entries = tuple(
                BaitButtonEvidence(
                    button_text=loc.array_item,
                    button_index=loc.array_index,
                    bait_word=loc.term,
                    contextual_switch_words=switch_words,
                )
                for loc in bait_buttons
            )
            locations = [
                *tag(bait_buttons, Source.BUTTONS, "bait"),
                *tag(switch, Source.RAW_TEXT, "switch"),
            ]

        return self.result(
            detected,
            BaitAndSwitchEvidence(buttons=entries),
            exact_locations=locations,
            verification_data={
                "baitButtonCount": len(bait_buttons),
                "switchWordCount": len(switch),
                "matchedPairs": len(entries),
            },
        )


class MisdirectionDetector(Detector):
    """Generic call-to-action buttons on a page whose real action is a purchase or subscription."""

    pattern_type = PatternType.MISDIRECTION
    severity = Severity.MEDIUM
    confidence = 0.6
    name = "Misdirection"
    category = "interface"
    description = "Uses misdirection in button labels or calls to action"
    location = "Action buttons and CTAs"

    def detect(self, snapshot: PageSnapshot) -> DetectionResult:
        misdirecting = self.find_items(snapshot.buttons, MISDIRECTION_BUTTON_TERMS)
        actions = self.find_text(snapshot.raw_text, REAL_ACTION_TERMS)
        vague = tuple(
            button for button in snapshot.buttons
            if any(term in button.lower() for term in VAGUE_BUTTON_TERMS)
        )

        detected = bool(misdirecting) and bool(actions)

        return self.result(
            detected,
            MisdirectionEvidence(
                misdirection_buttons=items_of(misdirecting),
                vague_buttons=vague,
                actual_actions=terms_of(actions),
            ),
            exact_locations=[
                *tag(misdirecting, Source.BUTTONS, "misdirection"),
                *tag(actions, Source.RAW_TEXT, "actualAction"),
            ],
            verification_data={
                "misdirectionButtons": len(misdirecting),
                "vagueButtons": len(vague),
                "actualActionMentions": len(actions),
            },
        )


class TrickQuestionsDetector(Detector):
    pattern_type = PatternType.TRICK_QUESTIONS
    severity = Severity.MEDIUM
    confidence = 0.8
    name = "Trick Questions"
    category = "interface"
    description = "Uses confusing or trick questions to mislead users"
    location = "Form questions and labels"

    def detect(self, snapshot: PageSnapshot) -> DetectionResult:
        found = self.find_text(snapshot.raw_text, TRICK_QUESTION_TERMS)
        phrases = terms_of(found)

        return self.result(
            bool(found),
            TrickQuestionsEvidence(phrases=phrases),
            exact_locations=tag(found, Source.RAW_TEXT, "trickQuestion"),
            verification_data={
                "trickPatternCount": len(found),
                "foundPatterns": list(phrases),
            },
        )
