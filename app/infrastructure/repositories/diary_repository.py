"""
SQLAlchemy Implementation of Diary Entry Repository.
"""

from typing import List, Optional

from app.domain.models.diary_entry import DiaryEntry
from app.domain.repositories.diary_repository import DiaryEntryRepository
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyDiaryEntryRepository(SQLAlchemyRepository[DiaryEntry], DiaryEntryRepository):
    """Diary entry repository implementation using SQLAlchemy."""

    def list_for_user(self, user_id: int) -> List[DiaryEntry]:
        return (
            self.db.query(DiaryEntry)
            .filter(DiaryEntry.user_id == user_id)
            .order_by(DiaryEntry.created_at.desc(), DiaryEntry.id.desc())
            .all()
        )

    def get_for_user(self, entry_id: int, user_id: int) -> Optional[DiaryEntry]:
        return (
            self.db.query(DiaryEntry)
            .filter(DiaryEntry.id == entry_id, DiaryEntry.user_id == user_id)
            .first()
        )
