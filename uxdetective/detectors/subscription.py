"""Subscription patterns: silent newsletter sign-ups and easy-in, hard-out accounts."""

from __future__ import annotations

from uxdetective.detectors.base import Detector, tag, terms_of
from uxdetective.evidence import AutoSubscriptionEvidence, RoachMotelEvidence
from uxdetective.schemas.snapshot import PageSnapshot
from uxdetective.types import DetectionResult, PatternType, Severity, Source

EMAIL_TERMS = ["newsletter", "email updates", "promotional emails", "marketing emails", "subscribe"]
AUTO_SUBSCRIBE_TERMS = ["automatically", "by default", "pre-selected", "opt-out"]
OPT_OUT_TERMS = ["opt-out", "uncheck to not receive"]

EASY_SIGNUP_TERMS = ["quick signup", "easy registration", "one click", "instant access"]
HARD_EXIT_TERMS = ["call to cancel", "contact support", "customer service required"]
SIGNUP_BUTTON_TERMS = ["sign up", "register", "join"]
EXIT_BUTTON_TERMS = ["cancel", "unsubscribe", "delete account"]


class AutoSubscriptionDetector(Detector):
    pattern_type = PatternType.AUTO_SUBSCRIPTION_TO_EMAILS
    severity = Severity.MEDIUM
    confidence = 0.7
    name = "Auto Subscription to Emails"
    category = "subscription"
    description = "Automatically subscribes users to emails/newsletters"
    location = "Signup forms and checkboxes"

    def detect(self, snapshot: PageSnapshot) -> DetectionResult:
        email = self.find_text(snapshot.raw_text, EMAIL_TERMS)
        auto = self.find_text(snapshot.raw_text, AUTO_SUBSCRIBE_TERMS)
        opt_out = self.find_text(snapshot.raw_text, OPT_OUT_TERMS)

        detected = bool(email) and (bool(auto) or bool(opt_out))

        return self.result(
            detected,
            AutoSubscriptionEvidence(
                email_mentions=terms_of(email),
                auto_language=terms_of(auto),
                opt_out_language=terms_of(opt_out),
            ),
            exact_locations=[
                *tag(email, Source.RAW_TEXT, "emailSubscription"),
                *tag(auto, Source.RAW_TEXT, "autoSubscribe"),
                *tag(opt_out, Source.RAW_TEXT, "optOut"),
            ],
            verification_data={
                "emailMentionCount": len(email),
                "autoLanguageCount": len(auto),
                "optOutCount": len(opt_out),
            },
        )


class RoachMotelDetector(Detector):
    """
    Easy to get in, hard to get out.

    A page that invites sign-up but offers no cancel/unsubscribe control at
    all counts as hard to leave, as does explicit "call to cancel" wording.
    """

    pattern_type = PatternType.ROACH_MOTEL
    severity = Severity.HIGH
    confidence = 0.7
    name = "Roach Motel"
    category = "subscription"
    description = "Easy to sign up but difficult to cancel or leave"
    location = "Registration and account management"

    def detect(self, snapshot: PageSnapshot) -> DetectionResult:
        easy_signup = self.find_text(snapshot.raw_text, EASY_SIGNUP_TERMS)
        hard_exit = self.find_text(snapshot.raw_text, HARD_EXIT_TERMS)
        signup_buttons = self.find_items(snapshot.buttons, SIGNUP_BUTTON_TERMS)
        exit_buttons = self.find_items(snapshot.buttons, EXIT_BUTTON_TERMS)

        has_easy_signup = bool(easy_signup) or bool(signup_buttons)
        has_hard_exit = bool(hard_exit) or not exit_buttons
        detected = has_easy_signup and has_hard_exit

        return self.result(
            detected,
            RoachMotelEvidence(
                easy_sign_up=terms_of(easy_signup),
                difficult_cancel=terms_of(hard_exit),
                sign_up_buttons=len(signup_buttons),
                cancel_buttons=len(exit_buttons),
            ),
            exact_locations=[
                *tag(easy_signup, Source.RAW_TEXT, "easySignUp"),
                *tag(hard_exit, Source.RAW_TEXT, "difficultCancel"),
                *tag(signup_buttons, Source.BUTTONS, "signUpButton"),
            ],
            verification_data={
                "easySignUpMentions": len(easy_signup),
                "difficultCancelMentions": len(hard_exit),
                "signUpButtonCount": len(signup_buttons),
                "cancelButtonCount": len(exit_buttons),
            },
        )
