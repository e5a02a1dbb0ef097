"""
Clear Signature History use case.
"""

from typing import Optional

from notaire.domain.exceptions import IdentityRequiredError
from notaire.domain.repositories.i_signature_history_repository import (
    ISignatureHistoryRepository,
)
from notaire.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


class ClearSignatureHistory:
    """Remove every history record of a user."""

    def __init__(self, history_repository: ISignatureHistoryRepository):
        self.history_repository = history_repository

    async def execute(self, user_id: Optional[str]) -> int:
        """
        Args:
            user_id: User identity

        Returns:
            Number of records removed

        Raises:
            IdentityRequiredError: If user_id is empty
        """
        if not user_id:
            raise IdentityRequiredError()

        removed = await self.history_repository.clear(user_id)
        logger.info(f"Cleared {removed} history records for {user_id}")
        return removed
