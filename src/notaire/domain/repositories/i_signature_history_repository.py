"""
Signature history repository interface.
"""

from abc import ABC, abstractmethod
from typing import List

from notaire.domain.entities.signature_record import SignatureRecord


class ISignatureHistoryRepository(ABC):
    """Interface for per-user signature history persistence."""

    @abstractmethod
    async def get(self, user_id: str) -> List[SignatureRecord]:
        """
        Get history of a user.

        Args:
            user_id: User identity

        Returns:
            Records of the user, newest first (empty if none)
        """

    @abstractmethod
    async def append(self, user_id: str, record: SignatureRecord) -> None:
        """
        Append a record to the history of a user.

        Args:
            user_id: User identity
            record: Record to store
        """

    @abstractmethod
    async def clear(self, user_id: str) -> int:
        """
        Remove all records of a user.

        Args:
            user_id: User identity

        Returns:
            Number of records removed
        """

    async def health_check(self) -> bool:
        """
        Check the backing store is reachable.

        Returns:
            True if healthy
        """
        return True
