"""
Verify Signature use case.

Validates the request, recovers the signer and records the outcome in
the history of the caller when the caller is known.
"""

from typing import Optional

from notaire.application.validation import (
    DEFAULT_MESSAGE_MAX_LENGTH,
    validate_verification_request,
)
from notaire.domain.entities.signature_record import SignatureRecord
from notaire.domain.repositories.i_signature_history_repository import (
    ISignatureHistoryRepository,
)
from notaire.domain.services.i_signature_verifier import ISignatureVerifier
from notaire.domain.value_objects.verification_result import VerificationResult
from notaire.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


class VerifySignature:
    """
    Verify a signed message.

    Business rules:
    - Structurally invalid input raises ValidationError
    - A signature that does not recover is a normal result, not an error
    - History is appended only when a user identity is known
    """

    def __init__(
        self,
        signature_verifier: ISignatureVerifier,
        history_repository: Optional[ISignatureHistoryRepository] = None,
        max_message_length: int = DEFAULT_MESSAGE_MAX_LENGTH,
        strict_signature_format: bool = False,
    ):
        """
        Initialize use case with dependencies.

        Args:
            signature_verifier: Service recovering signers
            history_repository: History store (None disables recording)
            max_message_length: Longest accepted message
            strict_signature_format: Reject non canonical signatures early
        """
        self.signature_verifier = signature_verifier
        self.history_repository = history_repository
        self.max_message_length = max_message_length
        self.strict_signature_format = strict_signature_format

    async def execute(
        self,
        message: str,
        signature: str,
        user_id: Optional[str] = None,
    ) -> VerificationResult:
        """
        Execute signature verification.

        Args:
            message: Message that was signed
            signature: Hex signature
            user_id: Identity of the caller, if authenticated

        Returns:
            VerificationResult

        Raises:
            ValidationError: If the request is malformed
        """
        request = validate_verification_request(
            message,
            signature,
            max_message_length=self.max_message_length,
            strict_signature_format=self.strict_signature_format,
        )

        result = self.signature_verifier.verify(
            request.message, request.signature
        )

        if user_id and self.history_repository is not None:
            record = SignatureRecord(
                user_id=user_id,
                message=request.message,
                signature=request.signature,
                is_valid=result.is_valid,
                signer=result.signer,
            )
            await self.history_repository.append(user_id, record)
            logger.debug(
                f"Recorded verification {record.id}",
                extra={"user_id": user_id, "is_valid": result.is_valid},
            )

        return result
