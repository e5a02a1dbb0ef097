"""
Schemas for signature verification and history endpoints.

JSON field names are camelCase to match browser clients.
"""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from notaire.domain.entities.signature_record import SignatureRecord
from notaire.domain.value_objects.verification_result import VerificationResult


def utc_timestamp() -> str:
    """Current time as ISO-8601 with a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class VerifySignatureRequest(BaseModel):
    """
    Verification request body.

    Fields are optional here so that missing values reach request
    validation and get its messages; non-string values are rejected.
    """

    message: Optional[StrictStr] = Field(None, description="Signed message")
    signature: Optional[StrictStr] = Field(
        None, description="Hex signature (0x + 130 hex chars)"
    )


class VerifySignatureResponse(BaseModel):
    """Verification outcome."""

    model_config = ConfigDict(populate_by_name=True)

    is_valid: bool = Field(..., alias="isValid")
    signer: Optional[str] = Field(None, description="EIP-55 signer address")
    original_message: str = Field(..., alias="originalMessage")
    error: Optional[str] = Field(None, description="Failure reason")
    timestamp: str = Field(..., description="Server time (ISO-8601)")

    @classmethod
    def from_result(cls, result: VerificationResult) -> "VerifySignatureResponse":
        """Build response from domain result (error only set on failure)."""
        data = {
            "is_valid": result.is_valid,
            "signer": result.signer,
            "original_message": result.original_message,
            "timestamp": utc_timestamp(),
        }
        if result.error is not None:
            data["error"] = result.error
        return cls(**data)


class SignatureRecordResponse(BaseModel):
    """One server-side history entry."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    message: str
    signature: str
    is_valid: bool = Field(..., alias="isValid")
    signer: Optional[str] = None
    created_at: datetime = Field(..., alias="createdAt")

    @classmethod
    def from_entity(cls, record: SignatureRecord) -> "SignatureRecordResponse":
        return cls(
            id=str(record.id),
            message=record.message,
            signature=record.signature,
            is_valid=record.is_valid,
            signer=record.signer,
            created_at=record.created_at,
        )


class SignatureHistoryResponse(BaseModel):
    """History of the caller, newest first."""

    items: List[SignatureRecordResponse]
    count: int


class ClearHistoryResponse(BaseModel):
    """Result of clearing the history of the caller."""

    removed: int
