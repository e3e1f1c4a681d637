"""Profile API routes — view, edit, picture upload and removal."""

from fastapi import APIRouter, Depends, File, UploadFile

from app.application.services.auth_service import USER_NOT_FOUND, to_profile, update_profile
from app.application.services.profile_service import remove_profile_picture, upload_profile_picture
from app.core.exceptions import BadRequestException, ConflictException, EntityNotFoundException
from app.domain.models.user import User
from app.domain.repositories.user_repository import UserRepository
from app.domain.schemas.auth import UserProfile
from app.domain.schemas.profile import ProfileUpdate
from app.infrastructure.file_storage import ProfilePictureStorage
from app.interfaces.api.deps import get_current_user
from app.interfaces.deps import get_picture_storage, get_user_repository

router = APIRouter(prefix="/api/profile", tags=["Profile"])


@router.get("", response_model=UserProfile)
def get_profile(user: User = Depends(get_current_user)):
    return to_profile(user)


@router.patch("", response_model=UserProfile)
def edit_profile(
    body: ProfileUpdate,
    repo: UserRepository = Depends(get_user_repository),
    user: User = Depends(get_current_user),
):
    result = update_profile(repo, user.id, body)
    if not result.success:
        if result.message == USER_NOT_FOUND:
            raise EntityNotFoundException(result.message)
        raise ConflictException(result.message)
    return result.data


@router.post("/picture", response_model=UserProfile)
async def upload_picture(
    file: UploadFile = File(...),
    repo: UserRepository = Depends(get_user_repository),
    storage: ProfilePictureStorage = Depends(get_picture_storage),
    user: User = Depends(get_current_user),
):
    # One byte past the limit is enough to reject an oversized file
    content = await file.read(storage.max_size + 1)
    result = upload_profile_picture(repo, storage, user.id, file.filename, content)
    if not result.success:
        raise BadRequestException(result.message)
    return result.data


@router.delete("/picture", response_model=UserProfile)
def delete_picture(
    repo: UserRepository = Depends(get_user_repository),
    storage: ProfilePictureStorage = Depends(get_picture_storage),
    user: User = Depends(get_current_user),
):
    result = remove_profile_picture(repo, storage, user.id)
    if not result.success:
        raise EntityNotFoundException(result.message)
    return result.data
