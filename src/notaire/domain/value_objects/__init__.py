"""
Domain value objects.
"""

from notaire.domain.value_objects.signature import (
    SIGNATURE_LENGTH,
    RecoverableSignature,
)
from notaire.domain.value_objects.verification_result import (
    INVALID_SIGNATURE_ERROR,
    VerificationRequest,
    VerificationResult,
)

__all__ = [
    "SIGNATURE_LENGTH",
    "INVALID_SIGNATURE_ERROR",
    "RecoverableSignature",
    "VerificationRequest",
    "VerificationResult",
]
