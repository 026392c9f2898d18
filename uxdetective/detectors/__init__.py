"""
Detectors: one class per dark pattern family.

``DETECTOR_CLASSES`` lists them in canonical order, which becomes the
order of ``AnalysisResult.patterns``.
"""

from uxdetective.detectors.base import Detector
from uxdetective.detectors.financial import (
    CreditCardTrialDetector,
    ForcedContinuityDetector,
    HiddenCostsDetector,
)
from uxdetective.detectors.interface import (
    BaitAndSwitchDetector,
    ManipulativeButtonsDetector,
    MisdirectionDetector,
    TrickQuestionsDetector,
)
from uxdetective.detectors.privacy import ContactAccessDetector, PrivacyZuckeringDetector
from uxdetective.detectors.psychological import (
    FomoDetector,
    UrgencyTacticsDetector,
    WeightedKeywordDetector,
)
from uxdetective.detectors.shopping import SneakIntoBasketDetector
from uxdetective.detectors.subscription import AutoSubscriptionDetector, RoachMotelDetector

DETECTOR_CLASSES: tuple[type[Detector], ...] = (
    CreditCardTrialDetector,
    AutoSubscriptionDetector,
    ManipulativeButtonsDetector,
    SneakIntoBasketDetector,
    ContactAccessDetector,
    FomoDetector,
    BaitAndSwitchDetector,
    ForcedContinuityDetector,
    HiddenCostsDetector,
    MisdirectionDetector,
    RoachMotelDetector,
    TrickQuestionsDetector,
    PrivacyZuckeringDetector,
    UrgencyTacticsDetector,
)

__all__ = [
    "Detector",
    "WeightedKeywordDetector",
    "DETECTOR_CLASSES",
    "CreditCardTrialDetector",
    "AutoSubscriptionDetector",
    "ManipulativeButtonsDetector",
    "SneakIntoBasketDetector",
    "ContactAccessDetector",
    "FomoDetector",
    "BaitAndSwitchDetector",
    "ForcedContinuityDetector",
    "HiddenCostsDetector",
    "MisdirectionDetector",
    "RoachMotelDetector",
    "TrickQuestionsDetector",
    "PrivacyZuckeringDetector",
    "UrgencyTacticsDetector",
]
