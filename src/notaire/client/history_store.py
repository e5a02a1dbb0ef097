"""
Local signing history.

A JSON file holding one key, newest entry first, capped in size.
Convenience state only: never synchronized with the server.
"""

import json
import logging
from pathlib import Path
from typing import List

from notaire.domain.entities.signed_message import SignedMessageHistoryEntry

logger = logging.getLogger(__name__)

HISTORY_KEY = "web3-signature-history"
MAX_HISTORY_ENTRIES = 50


class LocalHistoryStore:
    """JSON file backed history of sign + verify round trips."""

    def __init__(self, path: str | Path, max_entries: int = MAX_HISTORY_ENTRIES):
        self.path = Path(path)
        self.max_entries = max_entries

    def load(self) -> List[SignedMessageHistoryEntry]:
        """
        Read all entries, newest first.

        A missing or unreadable file yields an empty history.
        """
        if not self.path.exists():
            return []

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            raw_entries = data.get(HISTORY_KEY, [])
            return [SignedMessageHistoryEntry.from_dict(e) for e in raw_entries]
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning(f"Ignoring unreadable history file {self.path}: {e}")
            return []

    def _save(self, entries: List[SignedMessageHistoryEntry]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump({HISTORY_KEY: [e.to_dict() for e in entries]}, f, indent=2)

    def add(self, entry: SignedMessageHistoryEntry) -> List[SignedMessageHistoryEntry]:
        """
        Prepend an entry and drop the oldest beyond the cap.

        Returns:
            History after the insertion
        """
        entries = [entry] + self.load()
        entries = entries[: self.max_entries]
        self._save(entries)
        return entries

    def clear(self) -> None:
        self._save([])
