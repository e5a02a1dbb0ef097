"""
Verification request and result value objects.
"""

from dataclasses import dataclass
from typing import Optional

INVALID_SIGNATURE_ERROR = "Invalid signature or message"


@dataclass(frozen=True)
class VerificationRequest:
    """Validated (message, signature) pair ready for verification."""

    message: str
    signature: str


@dataclass(frozen=True)
class VerificationResult:
    """
    Outcome of recovering the signer of a message.

    original_message always echoes the verified message unchanged.
    """

    is_valid: bool
    original_message: str
    signer: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, message: str, signer: str) -> "VerificationResult":
        """Build a successful result for a recovered signer."""
        return cls(is_valid=True, original_message=message, signer=signer)

    @classmethod
    def failure(
        cls, message: str, error: str = INVALID_SIGNATURE_ERROR
    ) -> "VerificationResult":
        """Build a failed result carrying a human-readable reason."""
        return cls(
            is_valid=False,
            original_message=message,
            signer=None,
            error=error,
        )
