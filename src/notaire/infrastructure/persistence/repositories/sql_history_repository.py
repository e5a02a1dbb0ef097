"""
SQLAlchemy implementation of the signature history repository.
"""

from datetime import timezone
from typing import List, Optional

from sqlalchemy import delete, select

from notaire.domain.entities.signature_record import SignatureRecord
from notaire.domain.repositories.i_signature_history_repository import (
    ISignatureHistoryRepository,
)
from notaire.infrastructure.persistence.database import Database
from notaire.infrastructure.persistence.models import SignatureRecordModel


class SqlSignatureHistoryRepository(ISignatureHistoryRepository):
    """
    Signature history stored in the signature_records table.

    Each operation runs in its own session: committed on success and
    rolled back on error by Database.session().
    """

    def __init__(
        self,
        database: Database,
        max_entries_per_user: Optional[int] = None,
    ):
        """
        Initialize repository.

        Args:
            database: Connected Database instance
            max_entries_per_user: Rows beyond this count, oldest first,
                are deleted on append (None keeps everything)
        """
        self.database = database
        self.max_entries_per_user = max_entries_per_user

    async def get(self, user_id: str) -> List[SignatureRecord]:
        """
        Get history of a user, newest first.

        Args:
            user_id: User identity

        Returns:
            List of records (empty if none)
        """
        stmt = (
            select(SignatureRecordModel)
            .where(SignatureRecordModel.user_id == user_id)
            .order_by(SignatureRecordModel.created_at.desc())
        )
        async with self.database.session() as session:
            result = await session.execute(stmt)
            models = result.scalars().all()
        return [self._to_entity(model) for model in models]

    async def append(self, user_id: str, record: SignatureRecord) -> None:
        model = SignatureRecordModel(
            id=record.id,
            user_id=user_id,
            message=record.message,
            signature=record.signature,
            is_valid=record.is_valid,
            signer=record.signer,
            created_at=record.created_at,
        )
        async with self.database.session() as session:
            session.add(model)
            if self.max_entries_per_user is not None:
                await session.flush()
                await self._prune(session, user_id)

    async def _prune(self, session, user_id: str) -> None:
        """Delete a user's rows beyond max_entries_per_user, oldest first."""
        stale_stmt = (
            select(SignatureRecordModel.id)
            .where(SignatureRecordModel.user_id == user_id)
            .order_by(SignatureRecordModel.created_at.desc())
            .offset(self.max_entries_per_user)
        )
        stale_ids = (await session.execute(stale_stmt)).scalars().all()
        if not stale_ids:
            return

        await session.execute(
            delete(SignatureRecordModel)
            .where(SignatureRecordModel.id.in_(stale_ids))
            .execution_options(synchronize_session=False)
        )

    async def clear(self, user_id: str) -> int:
        stmt = delete(SignatureRecordModel).where(
            SignatureRecordModel.user_id == user_id
        )
        async with self.database.session() as session:
            result = await session.execute(stmt)
        return result.rowcount or 0

    async def health_check(self) -> bool:
        return await self.database.health_check()

    @staticmethod
    def _to_entity(model: SignatureRecordModel) -> SignatureRecord:
        """Convert database model to domain entity."""
        created_at = model.created_at
        # SQLite drops tzinfo on the way back
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return SignatureRecord(
            id=model.id,
            user_id=model.user_id,
            message=model.message,
            signature=model.signature,
            is_valid=model.is_valid,
            signer=model.signer,
            created_at=created_at,
        )
