"""
Repository interfaces.
"""

from notaire.domain.repositories.i_signature_history_repository import (
    ISignatureHistoryRepository,
)

__all__ = ["ISignatureHistoryRepository"]
