"""
Diary Entry Repository Interface.
Every read is scoped to the owning user.
"""

from typing import List, Optional

from app.domain.repositories.base import BaseRepository
from app.domain.models.diary_entry import DiaryEntry


class DiaryEntryRepository(BaseRepository[DiaryEntry]):
    """Interface for DiaryEntry-specific operations."""

    def list_for_user(self, user_id: int) -> List[DiaryEntry]:
        """All entries of a user, newest first."""
        ...

    def get_for_user(self, entry_id: int, user_id: int) -> Optional[DiaryEntry]:
        """Entry by id, only if owned by the user."""
        ...
