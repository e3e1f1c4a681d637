"""Profile picture workflow — store the file, then point the user record at it."""

from typing import Optional

import structlog

from app.application.services.auth_service import get_user_profile, update_profile_picture
from app.domain.repositories.user_repository import UserRepository
from app.domain.schemas.auth import ServiceResult
from app.infrastructure.file_storage import ProfilePictureStorage

logger = structlog.get_logger(__name__)


def upload_profile_picture(
    repo: UserRepository,
    storage: ProfilePictureStorage,
    user_id: int,
    filename: Optional[str],
    content: bytes,
) -> ServiceResult:
    error = storage.validate(filename, len(content))
    if error:
        return ServiceResult(success=False, message=error)

    previous = get_user_profile(repo, user_id)
    public_path = storage.save(user_id, filename, content)

    try:
        result = update_profile_picture(repo, user_id, public_path)
    except Exception:
        storage.delete(public_path)
        raise

    if not result.success:
        storage.delete(public_path)
        return result

    # Replaced picture is no longer referenced
    if previous and previous.profile_picture_path:
        storage.delete(previous.profile_picture_path)
    return result


def remove_profile_picture(repo: UserRepository, storage: ProfilePictureStorage, user_id: int) -> ServiceResult:
    profile = get_user_profile(repo, user_id)
    if profile is None:
        return ServiceResult(success=False, message="User not found.")

    if not profile.profile_picture_path:
        return ServiceResult(success=True, message="No profile picture to remove.", data=profile)

    storage.delete(profile.profile_picture_path)
    result = update_profile_picture(repo, user_id, None)
    if result.success:
        result.message = "Profile picture removed successfully."
    return result
