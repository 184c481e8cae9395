"""Built-in signatures aggregated across all categories."""

from hardcoded_detector.patterns.builtin.cloud import ALL_CLOUD_SIGNATURES
from hardcoded_detector.patterns.builtin.communication import ALL_COMMUNICATION_SIGNATURES
from hardcoded_detector.patterns.builtin.database import ALL_DATABASE_SIGNATURES
from hardcoded_detector.patterns.builtin.development import ALL_DEVELOPMENT_SIGNATURES
from hardcoded_detector.patterns.builtin.generic import ALL_GENERIC_SIGNATURES
from hardcoded_detector.patterns.builtin.keys import ALL_KEY_SIGNATURES
from hardcoded_detector.patterns.builtin.payment import ALL_PAYMENT_SIGNATURES
from hardcoded_detector.patterns.models import Signature

ALL_BUILTIN_SIGNATURES: list[Signature] = [
    *ALL_CLOUD_SIGNATURES,
    *ALL_DEVELOPMENT_SIGNATURES,
    *ALL_COMMUNICATION_SIGNATURES,
    *ALL_PAYMENT_SIGNATURES,
    *ALL_DATABASE_SIGNATURES,
    *ALL_KEY_SIGNATURES,
    *ALL_GENERIC_SIGNATURES,
]

__all__ = ["ALL_BUILTIN_SIGNATURES"]
