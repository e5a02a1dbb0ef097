"""
Signature history repository implementations.
"""

from notaire.infrastructure.persistence.repositories.in_memory_history_repository import (  # noqa: E501
    InMemorySignatureHistoryRepository,
)
from notaire.infrastructure.persistence.repositories.sql_history_repository import (
    SqlSignatureHistoryRepository,
)

__all__ = [
    "InMemorySignatureHistoryRepository",
    "SqlSignatureHistoryRepository",
]
