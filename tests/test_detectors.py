"""
Tests for the fourteen detectors.

Each pattern gets a positive case, the negative case its co-occurrence rule
exists to prevent, and the edge cases its rule singles out.
"""

import pytest

from uxdetective.detectors import (
    DETECTOR_CLASSES,
    AutoSubscriptionDetector,
    BaitAndSwitchDetector,
    ContactAccessDetector,
    CreditCardTrialDetector,
    FomoDetector,
    ForcedContinuityDetector,
    HiddenCostsDetector,
    ManipulativeButtonsDetector,
    MisdirectionDetector,
    PrivacyZuckeringDetector,
    RoachMotelDetector,
    SneakIntoBasketDetector,
    TrickQuestionsDetector,
    UrgencyTacticsDetector,
)
from uxdetective.evidence import EVIDENCE_TYPES
from uxdetective.types import PatternType, Severity, Source

from conftest import assert_context_invariant, build_snapshot


class TestCreditCardTrial:
    """Free trial + payment demand, in text or on a button."""

    def test_free_cancellation_with_visa_button(self):
        result = CreditCardTrialDetector().detect(build_snapshot(
            raw_text="Up to ₹300 OFF* on Free Cancellation feature & more on trains!",
            buttons=["Visa"],
        ))
        assert result.detected is True
        assert result.severity is Severity.HIGH
        assert result.confidence == 0.8
        matches = {(loc.source, loc.exact_match) for loc in result.exact_locations}
        assert (Source.RAW_TEXT, "Free") in matches
        assert (Source.BUTTONS, "Visa") in matches
        assert result.evidence.suspicious_buttons == ("Visa",)

    def test_payment_mentioned_in_text(self):
        result = CreditCardTrialDetector().detect(build_snapshot(
            raw_text="Start your free trial. Enter your credit card to continue.",
        ))
        assert result.detected is True
        assert "credit card" in result.evidence.payment_mentions
        assert result.verification_data["creditCardCount"] >= 1

    def test_trial_alone_is_not_a_violation(self):
        result = CreditCardTrialDetector().detect(build_snapshot(
            raw_text="Try free for 30 days. No strings attached.",
        ))
        assert result.detected is False
        assert result.confidence == 0

    def test_payment_alone_is_not_a_violation(self):
        result = CreditCardTrialDetector().detect(build_snapshot(
            raw_text="We accept Mastercard and Visa.", buttons=["Pay with card"],
        ))
        assert result.detected is False


class TestAutoSubscription:
    def test_newsletter_with_automatic_enrolment(self):
        result = AutoSubscriptionDetector().detect(build_snapshot(
            raw_text="Get our newsletter! You will be automatically enrolled.",
        ))
        assert result.detected is True
        assert result.confidence == 0.7
        assert result.severity is Severity.MEDIUM
        assert result.evidence.auto_language == ("automatically",)

    def test_newsletter_with_opt_out_wording(self):
        result = AutoSubscriptionDetector().detect(build_snapshot(
            raw_text="Marketing emails: uncheck to not receive offers.",
        ))
        assert result.detected is True
        assert result.verification_data["optOutCount"] == 1

    def test_plain_newsletter_signup(self):
        result = AutoSubscriptionDetector().detect(build_snapshot(
            raw_text="Sign up for our newsletter to hear about new releases.",
        ))
        assert result.detected is False


class TestManipulativeButtons:
    """Positive labels offered without the matching refusal."""

    def test_continue_without_refusal(self):
        result = ManipulativeButtonsDetector().detect(build_snapshot(
            raw_text="You can cancel your booking later.", buttons=["Continue"],
        ))
        assert result.detected is True
        assert result.confidence == 0.6
        assert len(result.evidence.pairs) == 1
        pair = result.evidence.pairs[0]
        assert pair.positive_buttons == ("Continue",)
        assert pair.missing_negative_options == ("no", "decline", "cancel", "skip")
        assert pair.negative_in_text is True
        assert result.exact_locations[0].source is Source.BUTTONS
        assert result.exact_locations[0].pattern_index == 0

    def test_refusal_present(self):
        result = ManipulativeButtonsDetector().detect(build_snapshot(
            buttons=["Accept", "Decline"],
        ))
        assert result.detected is False
        assert result.evidence.pairs == ()

    def test_upgrade_without_maybe_later(self):
        # No label from the first pair appears, so only the upgrade pair can fire
        result = ManipulativeButtonsDetector().detect(build_snapshot(
            buttons=["Upgrade now"],
        ))
        assert result.detected is True
        assert [p.pattern_index for p in result.evidence.pairs] == [1]

    def test_button_matching_two_labels_listed_per_label(self):
        result = ManipulativeButtonsDetector().detect(build_snapshot(buttons=["Yes, continue"]))
        pair = result.evidence.pairs[0]
        assert pair.positive_buttons == ("Yes, continue", "Yes, continue")
        assert len(result.exact_locations) == 2
        assert result.verification_data["totalPositiveButtons"] == len(pair.positive_buttons)

    def test_evidence_serializes_as_list(self):
        result = ManipulativeButtonsDetector().detect(build_snapshot(buttons=["Continue"]))
        payload = result.to_dict()["evidence"]
        assert payload == [{
            "patternIndex": 0,
            "positiveButtons": ["Continue"],
            "missingNegativeOptions": ["no", "decline", "cancel", "skip"],
            "negativeInText": False,
        }]

    def test_no_buttons(self):
        result = ManipulativeButtonsDetector().detect(build_snapshot(raw_text="Continue"))
        assert result.detected is False


class TestSneakIntoBasket:
    """Checkout + add-on + pre-selection, all three required."""

    def test_insurance_added_at_checkout(self):
        result = SneakIntoBasketDetector().detect(build_snapshot(
            raw_text="Your cart: travel insurance was automatically added.",
        ))
        assert result.detected is True
        assert result.confidence == 0.8
        assert result.evidence.checkout_context == ("cart",)
        assert result.evidence.additional_items == ("insurance",)

    def test_missing_preselection_language(self):
        result = SneakIntoBasketDetector().detect(build_snapshot(
            raw_text="Your cart: add travel insurance for $12?",
        ))
        assert result.detected is False

    def test_missing_checkout_context(self):
        result = SneakIntoBasketDetector().detect(build_snapshot(
            raw_text="Warranty pre-selected for your convenience.",
        ))
        assert result.detected is False


class TestContactAccess:
    def test_mandatory_phone_number(self):
        result = ContactAccessDetector().detect(build_snapshot(
            raw_text="Phone number (required) to view prices.",
        ))
        assert result.detected is True
        assert result.confidence == 0.6

    def test_optional_contact_field(self):
        result = ContactAccessDetector().detect(build_snapshot(
            raw_text="Email address (optional)",
        ))
        assert result.detected is False


class TestFomo:
    """Weighted scan: text 1, heading 2, alert 3; detected at >= 3."""

    def test_heading_alert_and_text(self):
        result = FomoDetector().detect(build_snapshot(
            raw_text="Book today, offer valid only this week.",
            headings=["Exclusive Offers"],
            alerts=["Valid only on app"],
        ))
        assert result.detected is True
        assert result.evidence.fomo_score == 6
        assert result.confidence == pytest.approx(0.6)
        assert result.verification_data == {
            "totalScore": 6, "textMentions": 1, "headingMentions": 1, "alertMentions": 1,
        }

    def test_heading_location_provenance(self):
        result = FomoDetector().detect(build_snapshot(
            headings=["Welcome", "Hurry, almost gone"],
        ))
        heading_locs = [loc for loc in result.exact_locations if loc.source is Source.HEADINGS]
        assert {loc.term for loc in heading_locs} == {"hurry", "almost gone"}
        for loc in heading_locs:
            assert loc.heading_index == 1
            assert loc.heading_text == "Hurry, almost gone"
            assert loc.weight == 2
            assert_context_invariant(loc)
        assert result.evidence.fomo_score == 4

    def test_below_threshold(self):
        result = FomoDetector().detect(build_snapshot(raw_text="only one, only two"))
        assert result.evidence.fomo_score == 2
        assert result.detected is False
        assert result.confidence == 0

    def test_at_threshold(self):
        result = FomoDetector().detect(build_snapshot(raw_text="only one, only two, only three"))
        assert result.detected is True
        assert result.confidence == pytest.approx(0.3)

    def test_confidence_saturates(self):
        result = FomoDetector().detect(build_snapshot(
            alerts=["Hurry! Last chance", "Today only", "Ending soon"],
        ))
        assert result.evidence.fomo_score >= 10
        assert result.confidence == 1.0

    def test_alert_weight(self):
        result = FomoDetector().detect(build_snapshot(alerts=["Countdown started"]))
        assert result.evidence.fomo_score == 3
        assert result.exact_locations[0].alert_index == 0
        assert result.exact_locations[0].alert_text == "Countdown started"


class TestUrgencyTactics:
    """Same weighted scan with its own list; detected at >= 2."""

    def test_single_body_mention_is_not_enough(self):
        result = UrgencyTacticsDetector().detect(build_snapshot(raw_text="This is urgent."))
        assert result.detected is False

    def test_heading_mentions(self):
        result = UrgencyTacticsDetector().detect(build_snapshot(
            headings=["Urgent: deadline tonight"],
        ))
        assert result.detected is True
        assert result.evidence.urgency_score == 4
        assert result.confidence == pytest.approx(0.5)
        assert result.to_dict()["evidence"]["urgencyScore"] == 4

    def test_alert_alone_crosses_threshold(self):
        result = UrgencyTacticsDetector().detect(build_snapshot(alerts=["Time sensitive"]))
        assert result.detected is True
        assert result.confidence == pytest.approx(3 / 8)


class TestBaitAndSwitch:
    def test_free_download_on_paid_page(self):
        result = BaitAndSwitchDetector().detect(build_snapshot(
            raw_text="Premium plan requires billing details.",
            buttons=["Download free", "Help"],
        ))
        assert result.detected is True
        assert result.confidence == 0.7
        assert result.severity is Severity.HIGH
        # One entry per matching (button, bait word)
        assert [(e.button_index, e.bait_word) for e in result.evidence.buttons] == [
            (0, "free"), (0, "download"),
        ]
        assert result.evidence.buttons[0].contextual_switch_words == ("premium", "billing")
        assert result.verification_data["matchedPairs"] == 2

    def test_no_switch_language(self):
        result = BaitAndSwitchDetector().detect(build_snapshot(
            raw_text="Download the brochure.", buttons=["Download"],
        ))
        assert result.detected is False
        assert result.exact_locations == ()
        assert result.verification_data["baitButtonCount"] == 1


class TestForcedContinuity:
    def test_auto_renew_without_cancel_option(self):
        result = ForcedContinuityDetector().detect(build_snapshot(
            raw_text="Your plan will auto-renew each month.",
        ))
        assert result.detected is True
        assert result.confidence == 0.8

    def test_cancel_button_offered(self):
        result = ForcedContinuityDetector().detect(build_snapshot(
            raw_text="Your plan will auto-renew each month.",
            buttons=["Cancel anytime"],
        ))
        assert result.detected is False

    def test_difficult_cancellation_overrides(self):
        result = ForcedContinuityDetector().detect(build_snapshot(
            raw_text="Recurring billing. Call to cancel.",
            buttons=["Cancel"],
        ))
        assert result.detected is True
        assert result.evidence.difficult_cancellation == ("call to cancel",)


class TestHiddenCosts:
    def test_processing_fee(self):
        result = HiddenCostsDetector().detect(build_snapshot(
            raw_text="Total $49. A processing fee applies.",
        ))
        assert result.detected is True
        assert result.confidence == 0.7

    def test_fine_print_reference_alone(self):
        result = HiddenCostsDetector().detect(build_snapshot(raw_text="Terms apply."))
        assert result.detected is True
        assert result.evidence.hidden_references == ("terms apply",)

    def test_clear_pricing(self):
        result = HiddenCostsDetector().detect(build_snapshot(raw_text="Total $49, all inclusive."))
        assert result.detected is False


class TestMisdirection:
    def test_get_started_on_subscription_page(self):
        result = MisdirectionDetector().detect(build_snapshot(
            raw_text="Subscribe for $9.99 per month.",
            buttons=["Get started", "Next"],
        ))
        assert result.detected is True
        assert result.confidence == 0.6
        assert result.evidence.misdirection_buttons == ("Get started",)
        assert result.evidence.vague_buttons == ("Next",)

    def test_no_contradicting_action(self):
        result = MisdirectionDetector().detect(build_snapshot(
            raw_text="Read the getting started guide.", buttons=["Click here"],
        ))
        assert result.detected is False


class TestRoachMotel:
    def test_signup_without_any_exit(self):
        result = RoachMotelDetector().detect(build_snapshot(buttons=["Sign up"]))
        assert result.detected is True
        assert result.confidence == 0.7
        assert result.verification_data["cancelButtonCount"] == 0

    def test_signup_with_cancel_button(self):
        result = RoachMotelDetector().detect(build_snapshot(
            raw_text="Create an account.", buttons=["Sign up", "Unsubscribe"],
        ))
        assert result.detected is False

    def test_hard_exit_wording_despite_cancel_button(self):
        result = RoachMotelDetector().detect(build_snapshot(
            raw_text="Quick signup! To leave, call to cancel.", buttons=["Cancel"],
        ))
        assert result.detected is True
        assert result.evidence.easy_sign_up == ("quick signup",)

    def test_no_signup_invitation(self):
        result = RoachMotelDetector().detect(build_snapshot(raw_text="Read our blog."))
        assert result.detected is False


class TestTrickQuestions:
    def test_double_negative(self):
        result = TrickQuestionsDetector().detect(build_snapshot(
            raw_text="Uncheck to not opt out of partner offers.",
        ))
        assert result.detected is True
        assert result.confidence == 0.8
        assert result.evidence.phrases == ("uncheck to not opt out",)
        assert result.to_dict()["evidence"] == ["uncheck to not opt out"]

    def test_plain_question(self):
        result = TrickQuestionsDetector().detect(build_snapshot(
            raw_text="Would you like to receive offers?",
        ))
        assert result.detected is False


class TestPrivacyZuckering:
    def test_consent_by_continuing(self):
        result = PrivacyZuckeringDetector().detect(build_snapshot(
            raw_text="We value your privacy. By continuing you agree to data sharing.",
        ))
        assert result.detected is True
        assert result.confidence == 0.6
        assert result.evidence.tricky_language == ("by continuing", "you agree")

    def test_disguised_benefit(self):
        result = PrivacyZuckeringDetector().detect(build_snapshot(
            raw_text="Allow data collection for a personalized experience.",
        ))
        assert result.detected is True

    def test_privacy_notice_alone(self):
        result = PrivacyZuckeringDetector().detect(build_snapshot(raw_text="Privacy policy"))
        assert result.detected is False


class TestDetectorContract:
    """Properties every detector must satisfy."""

    SNAPSHOTS = [
        build_snapshot(),
        build_snapshot(
            raw_text=(
                "Free trial! Credit card required. Newsletter automatically added. "
                "Your cart includes insurance, pre-selected. Phone number required. "
                "Hurry, only 2 left! Auto-renew, call to cancel. Processing fee applies. "
                "Subscribe now. Quick signup. Uncheck to not opt out. "
                "Privacy: by continuing you agree. Act now, urgent deadline."
            ),
            headings=["Limited time offer", "Exclusive deals"],
            buttons=["Start Free Trial", "Get started", "Sign up", "Visa"],
            alerts=["Last chance, expires soon"],
        ),
        build_snapshot(raw_text="An ordinary article about gardening."),
    ]

    @pytest.mark.parametrize("detector_cls", DETECTOR_CLASSES)
    def test_confidence_detected_coupling(self, detector_cls):
        for snapshot in self.SNAPSHOTS:
            result = detector_cls().detect(snapshot)
            assert result.detected == (result.confidence > 0)
            assert 0.0 <= result.confidence <= 1.0

    @pytest.mark.parametrize("detector_cls", DETECTOR_CLASSES)
    def test_fixed_identity(self, detector_cls):
        result = detector_cls().detect(self.SNAPSHOTS[1])
        assert result.pattern_type is detector_cls.pattern_type
        assert result.severity is detector_cls.severity
        assert result.description == detector_cls.description
        assert result.location == detector_cls.location
        assert isinstance(result.evidence, EVIDENCE_TYPES[detector_cls.pattern_type])

    @pytest.mark.parametrize("detector_cls", DETECTOR_CLASSES)
    def test_locations_hold_context_invariant(self, detector_cls):
        result = detector_cls().detect(self.SNAPSHOTS[1])
        for loc in result.exact_locations:
            assert loc.source is not None
            assert_context_invariant(loc)

    @pytest.mark.parametrize("detector_cls", DETECTOR_CLASSES)
    def test_empty_snapshot_detects_nothing(self, detector_cls):
        result = detector_cls().detect(self.SNAPSHOTS[0])
        assert result.detected is False
        assert result.confidence == 0

    def test_every_pattern_type_has_one_detector(self):
        assert {cls.pattern_type for cls in DETECTOR_CLASSES} == set(PatternType)
        assert len(DETECTOR_CLASSES) == 14
