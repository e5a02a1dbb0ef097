"""
Signature verifier service interface.
"""

from abc import ABC, abstractmethod

from notaire.domain.value_objects.verification_result import VerificationResult


class ISignatureVerifier(ABC):
    """
    Abstract service interface for message signature verification.

    Implements signer recovery for Web3 message signing:
    - User signs message with wallet private key
    - Backend recovers the signer address from message and signature
    """

    @abstractmethod
    def verify(self, message: str, signature: str) -> VerificationResult:
        """
        Recover the signer of a message.

        Args:
            message: Original message that was signed
            signature: Signature (0x-prefixed hex)

        Returns:
            VerificationResult; malformed signatures yield is_valid=False
        """
