"""
Evidence records, one shape per pattern type.

Each detector fills exactly one of these. ``EVIDENCE_TYPES`` maps a
``PatternType`` to its record class, so callers can dispatch on the pattern
type instead of probing an untyped payload. ``to_json()`` reproduces the
document shape consumed downstream (an object for most patterns, a list for
manipulativeButtons, baitAndSwitch and trickQuestions).
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, ClassVar

from uxdetective.types import PatternType, to_camel, to_json_value


@dataclass(frozen=True)
class Evidence:
    pattern_type: ClassVar[PatternType]

    def to_json(self) -> Any:
        return {
            to_camel(f.name): to_json_value(getattr(self, f.name))
            for f in fields(self)
        }

    def to_dict(self) -> Any:
        return self.to_json()


# --- Financial ---

@dataclass(frozen=True)
class CreditCardTrialEvidence(Evidence):
    pattern_type = PatternType.CREDIT_CARD_FOR_FREE_TRIAL
    free_trial_mentions: tuple[str, ...]
    payment_mentions: tuple[str, ...]
    suspicious_buttons: tuple[str, ...]


@dataclass(frozen=True)
class ForcedContinuityEvidence(Evidence):
    pattern_type = PatternType.FORCED_CONTINUITY
    continuity_mentions: tuple[str, ...]
    difficult_cancellation: tuple[str, ...]
    cancel_buttons: tuple[str, ...]


@dataclass(frozen=True)
class HiddenCostsEvidence(Evidence):
    pattern_type = PatternType.HIDDEN_COSTS
    cost_mentions: tuple[str, ...]
    hidden_references: tuple[str, ...]


# --- Subscription ---

@dataclass(frozen=True)
class AutoSubscriptionEvidence(Evidence):
    pattern_type = PatternType.AUTO_SUBSCRIPTION_TO_EMAILS
    email_mentions: tuple[str, ...]
    auto_language: tuple[str, ...]
    opt_out_language: tuple[str, ...]


@dataclass(frozen=True)
class RoachMotelEvidence(Evidence):
    pattern_type = PatternType.ROACH_MOTEL
    easy_sign_up: tuple[str, ...]
    difficult_cancel: tuple[str, ...]
    sign_up_buttons: int
    cancel_buttons: int


# --- Interface ---

@dataclass(frozen=True)
class ButtonPairEvidence:
    """One positive/negative label pair where only the positive side is offered."""
    pattern_index: int
    positive_buttons: tuple[str, ...]
    missing_negative_options: tuple[str, ...]
    negative_in_text: bool


@dataclass(frozen=True)
class ManipulativeButtonsEvidence(Evidence):
    pattern_type = PatternType.MANIPULATIVE_BUTTONS
    pairs: tuple[ButtonPairEvidence, ...]

    def to_json(self) -> list:
        return [to_json_value(p) for p in self.pairs]


@dataclass(frozen=True)
class BaitButtonEvidence:
    button_text: str
    button_index: int
    bait_word: str
    contextual_switch_words: tuple[str, ...]


@dataclass(frozen=True)
class BaitAndSwitchEvidence(Evidence):
    pattern_type = PatternType.BAIT_AND_SWITCH
    buttons: tuple[BaitButtonEvidence, ...]

    def to_json(self) -> list:
        return [to_json_value(b) for b in self.buttons]


@dataclass(frozen=True)
class MisdirectionEvidence(Evidence):
    pattern_type = PatternType.MISDIRECTION
    misdirection_buttons: tuple[str, ...]
    vague_buttons: tuple[str, ...]
    actual_actions: tuple[str, ...]


@dataclass(frozen=True)
class TrickQuestionsEvidence(Evidence):
    pattern_type = PatternType.TRICK_QUESTIONS
    phrases: tuple[str, ...]

    def to_json(self) -> list:
        return list(self.phrases)


# --- Shopping ---

@dataclass(frozen=True)
class SneakIntoBasketEvidence(Evidence):
    pattern_type = PatternType.SNEAK_INTO_BASKET
    checkout_context: tuple[str, ...]
    additional_items: tuple[str, ...]
    preselected_language: tuple[str, ...]


# --- Privacy ---

@dataclass(frozen=True)
class ContactAccessEvidence(Evidence):
    pattern_type = PatternType.CONTACT_ACCESS
    contact_mentions: tuple[str, ...]
    access_mentions: tuple[str, ...]


@dataclass(frozen=True)
class PrivacyZuckeringEvidence(Evidence):
    pattern_type = PatternType.PRIVACY_ZUCKERING
    privacy_mentions: tuple[str, ...]
    tricky_language: tuple[str, ...]
    disguised_collection: tuple[str, ...]


# --- Psychological ---

@dataclass(frozen=True)
class KeywordInstance:
    location: str     # Source corpus
    keyword: str
    context: str


@dataclass(frozen=True)
class FomoEvidence(Evidence):
    pattern_type = PatternType.FOMO
    fomo_score: int
    instances: tuple[KeywordInstance, ...]


@dataclass(frozen=True)
class UrgencyEvidence(Evidence):
    pattern_type = PatternType.URGENCY_TACTICS
    urgency_score: int
    instances: tuple[KeywordInstance, ...]


EVIDENCE_TYPES: dict[PatternType, type[Evidence]] = {
    cls.pattern_type: cls
    for cls in (
        CreditCardTrialEvidence,
        AutoSubscriptionEvidence,
        ManipulativeButtonsEvidence,
        SneakIntoBasketEvidence,
        ContactAccessEvidence,
        FomoEvidence,
        BaitAndSwitchEvidence,
        ForcedContinuityEvidence,
        HiddenCostsEvidence,
        MisdirectionEvidence,
        RoachMotelEvidence,
        TrickQuestionsEvidence,
        PrivacyZuckeringEvidence,
        UrgencyEvidence,
    )
}
