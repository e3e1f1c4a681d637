"""Diary API routes — list, read, create, update, delete own entries."""

from typing import List

from fastapi import APIRouter, Depends, status

from app.application.services.diary_service import (
    create_entry,
    delete_entry,
    get_entry,
    list_entries,
    update_entry,
)
from app.core.exceptions import EntityNotFoundException
from app.domain.models.user import User
from app.domain.repositories.diary_repository import DiaryEntryRepository
from app.domain.repositories.user_repository import UserRepository
from app.domain.schemas.auth import MessageResponse
from app.domain.schemas.diary import DiaryEntryCreate, DiaryEntryRead, DiaryEntryUpdate
from app.interfaces.api.deps import get_current_user
from app.interfaces.deps import get_diary_repository, get_user_repository

router = APIRouter(prefix="/api/diary", tags=["Diary"])


@router.get("", response_model=List[DiaryEntryRead])
def list_diary_entries(
    repo: DiaryEntryRepository = Depends(get_diary_repository),
    user: User = Depends(get_current_user),
):
    return list_entries(repo, user.id)


@router.post("", response_model=DiaryEntryRead, status_code=status.HTTP_201_CREATED)
def create_diary_entry(
    body: DiaryEntryCreate,
    repo: DiaryEntryRepository = Depends(get_diary_repository),
    users: UserRepository = Depends(get_user_repository),
    user: User = Depends(get_current_user),
):
    result = create_entry(repo, users, user.id, body)
    if not result.success:
        raise EntityNotFoundException(result.message)
    return result.data


@router.get("/{entry_id}", response_model=DiaryEntryRead)
def read_diary_entry(
    entry_id: int,
    repo: DiaryEntryRepository = Depends(get_diary_repository),
    user: User = Depends(get_current_user),
):
    entry = get_entry(repo, entry_id, user.id)
    if entry is None:
        raise EntityNotFoundException("Diary entry not found or you don't have permission to view it.")
    return entry


@router.put("/{entry_id}", response_model=DiaryEntryRead)
def update_diary_entry(
    entry_id: int,
    body: DiaryEntryUpdate,
    repo: DiaryEntryRepository = Depends(get_diary_repository),
    user: User = Depends(get_current_user),
):
    result = update_entry(repo, user.id, entry_id, body)
    if not result.success:
        raise EntityNotFoundException(result.message)
    return result.data


@router.delete("/{entry_id}", response_model=MessageResponse)
def delete_diary_entry(
    entry_id: int,
    repo: DiaryEntryRepository = Depends(get_diary_repository),
    user: User = Depends(get_current_user),
):
    result = delete_entry(repo, entry_id, user.id)
    if not result.success:
        raise EntityNotFoundException(result.message)
    return MessageResponse(message=result.message)
