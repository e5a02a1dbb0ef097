"""
Ethereum message signature verifier.

Recovers the signer of an EIP-191 personal message using secp256k1
public key recovery.
"""

from eth_account import Account
from eth_account.messages import encode_defunct
from eth_keys.exceptions import BadSignature
from eth_keys.exceptions import ValidationError as KeysValidationError

from notaire.domain.services.i_signature_verifier import ISignatureVerifier
from notaire.domain.value_objects.signature import RecoverableSignature
from notaire.domain.value_objects.verification_result import VerificationResult
from notaire.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


class EthereumSignatureVerifier(ISignatureVerifier):
    """
    Ethereum signed-message verifier.

    The digest is keccak256("\\x19Ethereum Signed Message:\\n" + len + message),
    the signer is the EIP-55 checksummed address of the recovered key.
    Stateless and safe to share between concurrent requests.
    """

    def verify(self, message: str, signature: str) -> VerificationResult:
        """
        Recover the signer of a personal message.

        Args:
            message: Original message that was signed
            signature: Signature (0x + 130 hex characters)

        Returns:
            VerificationResult with the recovered signer, or a failed
            result if the signature cannot be decoded or recovered
        """
        try:
            decoded = RecoverableSignature.from_hex(signature)
            signer = Account.recover_message(
                encode_defunct(text=message),
                signature=decoded.to_bytes(),
            )
        except (ValueError, BadSignature, KeysValidationError) as e:
            logger.debug(f"Signature recovery failed: {e}")
            return VerificationResult.failure(message)

        return VerificationResult.success(message, signer)
