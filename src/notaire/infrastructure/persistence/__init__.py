"""
Persistence infrastructure (database, models, repositories).
"""

from notaire.infrastructure.persistence.database import Database
from notaire.infrastructure.persistence.models import Base, SignatureRecordModel

__all__ = ["Base", "Database", "SignatureRecordModel"]
