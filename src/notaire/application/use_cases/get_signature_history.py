"""
Get Signature History use case.
"""

from typing import List, Optional

from notaire.domain.entities.signature_record import SignatureRecord
from notaire.domain.exceptions import IdentityRequiredError
from notaire.domain.repositories.i_signature_history_repository import (
    ISignatureHistoryRepository,
)


class GetSignatureHistory:
    """Return the verification history of a user, newest first."""

    def __init__(self, history_repository: ISignatureHistoryRepository):
        self.history_repository = history_repository

    async def execute(
        self, user_id: Optional[str], limit: Optional[int] = None
    ) -> List[SignatureRecord]:
        """
        Args:
            user_id: User identity
            limit: Max records returned (all when None)

        Raises:
            IdentityRequiredError: If user_id is empty
        """
        if not user_id:
            raise IdentityRequiredError()

        records = await self.history_repository.get(user_id)
        if limit is not None:
            records = records[: max(limit, 0)]
        return records
