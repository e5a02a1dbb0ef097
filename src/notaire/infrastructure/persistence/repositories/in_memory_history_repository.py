"""
In-memory signature history repository.

Process-local and lost on restart. Suitable for development, tests and
single-instance deployments that do not need durable history.
"""

import asyncio
from typing import Dict, List

from notaire.domain.entities.signature_record import SignatureRecord
from notaire.domain.repositories.i_signature_history_repository import (
    ISignatureHistoryRepository,
)


class InMemorySignatureHistoryRepository(ISignatureHistoryRepository):
    """Dict of per-user record lists guarded by an asyncio lock."""

    def __init__(self, max_entries_per_user: int | None = None):
        """
        Args:
            max_entries_per_user: Oldest records beyond this count are
                dropped on append (unbounded when None)
        """
        self.max_entries_per_user = max_entries_per_user
        self._records: Dict[str, List[SignatureRecord]] = {}
        self._lock = asyncio.Lock()

    async def get(self, user_id: str) -> List[SignatureRecord]:
        async with self._lock:
            return list(self._records.get(user_id, []))

    async def append(self, user_id: str, record: SignatureRecord) -> None:
        async with self._lock:
            records = self._records.setdefault(user_id, [])
            records.insert(0, record)
            if self.max_entries_per_user is not None:
                del records[self.max_entries_per_user :]

    async def clear(self, user_id: str) -> int:
        async with self._lock:
            removed = self._records.pop(user_id, [])
            return len(removed)
