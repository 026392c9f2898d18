"""Privacy patterns: mandatory contact details and consent obtained by stealth."""

from __future__ import annotations

from uxdetective.detectors.base import Detector, tag, terms_of
from uxdetective.evidence import ContactAccessEvidence, PrivacyZuckeringEvidence
from uxdetective.schemas.snapshot import PageSnapshot
from uxdetective.types import DetectionResult, PatternType, Severity, Source

CONTACT_TERMS = ["phone number", "contact info", "email address", "personal details"]
MANDATORY_TERMS = ["required", "mandatory", "must provide", "need your"]

PRIVACY_TERMS = ["privacy", "personal data", "share information", "data collection"]
IMPLIED_CONSENT_TERMS = ["by continuing", "you agree", "accept terms", "implicit consent"]
DISGUISED_BENEFIT_TERMS = ["personalized experience", "better recommendations", "improve service"]


class ContactAccessDetector(Detector):
    pattern_type = PatternType.CONTACT_ACCESS
    severity = Severity.MEDIUM
    confidence = 0.6
    name = "Contact Access"
    category = "privacy"
    description = "Requires unnecessary contact information access"
    location = "Contact forms and privacy settings"

    def detect(self, snapshot: PageSnapshot) -> DetectionResult:
        contact = self.find_text(snapshot.raw_text, CONTACT_TERMS)
        mandatory = self.find_text(snapshot.raw_text, MANDATORY_TERMS)

        detected = bool(contact) and bool(mandatory)

        return self.result(
            detected,
            ContactAccessEvidence(
                contact_mentions=terms_of(contact),
                access_mentions=terms_of(mandatory),
            ),
            exact_locations=[
                *tag(contact, Source.RAW_TEXT, "contact"),
                *tag(mandatory, Source.RAW_TEXT, "access"),
            ],
            verification_data={
                "contactMentions": len(contact),
                "accessMentions": len(mandatory),
            },
        )


class PrivacyZuckeringDetector(Detector):
    """Data collection framed as consent-by-continuing or as a feature for the user."""

    pattern_type = PatternType.PRIVACY_ZUCKERING
    severity = Severity.MEDIUM
    confidence = 0.6
    name = "Privacy Zuckering"
    category = "privacy"
    description = "Tricks users into sharing more personal information than necessary"
    location = "Privacy policies and consent forms"

    def detect(self, snapshot: PageSnapshot) -> DetectionResult:
        privacy = self.find_text(snapshot.raw_text, PRIVACY_TERMS)
        consent = self.find_text(snapshot.raw_text, IMPLIED_CONSENT_TERMS)
        disguised = self.find_text(snapshot.raw_text, DISGUISED_BENEFIT_TERMS)

        detected = bool(privacy) and (bool(consent) or bool(disguised))

        return self.result(
            detected,
            PrivacyZuckeringEvidence(
                privacy_mentions=terms_of(privacy),
                tricky_language=terms_of(consent),
                disguised_collection=terms_of(disguised),
            ),
            exact_locations=[
                *tag(privacy, Source.RAW_TEXT, "privacy"),
                *tag(consent, Source.RAW_TEXT, "trickyLanguage"),
                *tag(disguised, Source.RAW_TEXT, "disguisedCollection"),
            ],
            verification_data={
                "privacyMentions": len(privacy),
                "trickyLanguageCount": len(consent),
                "disguisedCollectionCount": len(disguised),
            },
        )
