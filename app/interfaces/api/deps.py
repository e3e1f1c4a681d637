"""FastAPI dependency — session cookie auth."""

from fastapi import Depends, Request

from app.core.exceptions import UnauthorizedException
from app.domain.models.user import User
from app.domain.repositories.user_repository import UserRepository
from app.interfaces.deps import get_user_repository

SESSION_USER_ID = "user_id"
SESSION_USERNAME = "username"


def get_current_user(
    request: Request,
    repo: UserRepository = Depends(get_user_repository),
) -> User:
    """Resolve the logged-in user from the session cookie."""
    user_id = request.session.get(SESSION_USER_ID)
    if user_id is None:
        raise UnauthorizedException("Authentication required")

    user = repo.get_by_id(int(user_id))
    if user is None:
        # Account vanished since login; drop the stale session
        request.session.clear()
        raise UnauthorizedException("Authentication required")

    return user
