"""
API Dependencies.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from app.infrastructure.database import get_db
from app.domain.models.user import User
from app.domain.models.diary_entry import DiaryEntry
from app.domain.repositories.user_repository import UserRepository
from app.domain.repositories.diary_repository import DiaryEntryRepository
from app.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from app.infrastructure.repositories.diary_repository import SQLAlchemyDiaryEntryRepository
from app.infrastructure.file_storage import ProfilePictureStorage


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    """Get user repository instance."""
    return SQLAlchemyUserRepository(db, User)


def get_diary_repository(db: Session = Depends(get_db)) -> DiaryEntryRepository:
    """Get diary entry repository instance."""
    return SQLAlchemyDiaryEntryRepository(db, DiaryEntry)


def get_picture_storage() -> ProfilePictureStorage:
    return ProfilePictureStorage()
