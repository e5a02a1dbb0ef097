"""
Domain entities.
"""

from notaire.domain.entities.signature_record import SignatureRecord
from notaire.domain.entities.signed_message import SignedMessageHistoryEntry

__all__ = ["SignatureRecord", "SignedMessageHistoryEntry"]
