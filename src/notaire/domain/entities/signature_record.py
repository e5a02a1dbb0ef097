"""
SignatureRecord entity - server-side history of verification submissions.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4


@dataclass
class SignatureRecord:
    """
    One verification submitted by an authenticated user.

    Records are append-only: they are created after a verification
    and only ever removed by clearing the whole history of a user.
    """

    user_id: str = field(default="")
    message: str = field(default="")
    signature: str = field(default="")
    is_valid: bool = False
    signer: Optional[str] = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    def __post_init__(self):
        """Validate record data after initialization."""
        if not self.user_id:
            raise ValueError("User id is required")

    def to_dict(self) -> dict:
        """Convert entity to dictionary representation."""
        return {
            "id": str(self.id),
            "user_id": self.user_id,
            "message": self.message,
            "signature": self.signature,
            "is_valid": self.is_valid,
            "signer": self.signer,
            "created_at": self.created_at.isoformat(),
        }
