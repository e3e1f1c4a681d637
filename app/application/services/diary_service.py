"""Diary service — per-user CRUD for diary entries."""

from typing import List, Optional

import structlog

from app.core.security import utcnow
from app.domain.models.diary_entry import DiaryEntry
from app.domain.repositories.diary_repository import DiaryEntryRepository
from app.domain.repositories.user_repository import UserRepository
from app.domain.schemas.auth import ServiceResult
from app.domain.schemas.diary import DiaryEntryCreate, DiaryEntryRead, DiaryEntryUpdate

logger = structlog.get_logger(__name__)


def list_entries(repo: DiaryEntryRepository, user_id: int) -> List[DiaryEntryRead]:
    """All entries of the user, newest first."""
    return [DiaryEntryRead.model_validate(e) for e in repo.list_for_user(user_id)]


def get_entry(repo: DiaryEntryRepository, entry_id: int, user_id: int) -> Optional[DiaryEntryRead]:
    entry = repo.get_for_user(entry_id, user_id)
    if entry is None:
        return None
    return DiaryEntryRead.model_validate(entry)


def create_entry(
    repo: DiaryEntryRepository,
    users: UserRepository,
    user_id: int,
    data: DiaryEntryCreate,
) -> ServiceResult:
    if users.get_by_id(user_id) is None:
        return ServiceResult(success=False, message="User not found.")

    now = utcnow()
    entry = repo.create({
        "user_id": user_id,
        "title": data.title,
        "content": data.content,
        "created_at": now,
        "last_modified_at": now,
    })
    logger.info("Diary entry created", user_id=user_id, entry_id=entry.id)
    return ServiceResult(
        success=True,
        message="Diary entry created successfully.",
        data=DiaryEntryRead.model_validate(entry),
    )


def update_entry(
    repo: DiaryEntryRepository,
    user_id: int,
    entry_id: int,
    data: DiaryEntryUpdate,
) -> ServiceResult:
    entry: Optional[DiaryEntry] = repo.get_for_user(entry_id, user_id)
    if entry is None:
        return ServiceResult(
            success=False,
            message="Diary entry not found or you don't have permission to edit it.",
        )

    entry.title = data.title
    entry.content = data.content
    entry.last_modified_at = utcnow()
    repo.save(entry)
    logger.info("Diary entry updated", user_id=user_id, entry_id=entry_id)
    return ServiceResult(
        success=True,
        message="Diary entry updated successfully.",
        data=DiaryEntryRead.model_validate(entry),
    )


def delete_entry(repo: DiaryEntryRepository, entry_id: int, user_id: int) -> ServiceResult:
    entry = repo.get_for_user(entry_id, user_id)
    if entry is None:
        return ServiceResult(
            success=False,
            message="Diary entry not found or you don't have permission to delete it.",
        )

    repo.delete(entry.id)
    logger.info("Diary entry deleted", user_id=user_id, entry_id=entry_id)
    return ServiceResult(success=True, message="Diary entry deleted successfully.")
