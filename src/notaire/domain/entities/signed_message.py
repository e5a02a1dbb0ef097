"""
SignedMessageHistoryEntry entity - client-side signing history record.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from uuid import uuid4


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class SignedMessageHistoryEntry:
    """
    Convenience record of one sign + verify round trip.

    Not authoritative state: kept in local client storage only and
    never synchronized back to the server.
    """

    message: str
    signature: str
    address: str
    verified: bool = False
    signer: Optional[str] = None
    timestamp: str = field(default_factory=_now_iso)
    id: str = field(default_factory=lambda: uuid4().hex)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for local storage."""
        return {
            "id": self.id,
            "message": self.message,
            "signature": self.signature,
            "address": self.address,
            "timestamp": self.timestamp,
            "verified": self.verified,
            "signer": self.signer,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SignedMessageHistoryEntry":
        """Deserialize an entry read back from local storage."""
        return cls(
            id=data.get("id") or uuid4().hex,
            message=data["message"],
            signature=data["signature"],
            address=data.get("address", ""),
            timestamp=data.get("timestamp") or _now_iso(),
            verified=bool(data.get("verified", False)),
            signer=data.get("signer"),
        )
