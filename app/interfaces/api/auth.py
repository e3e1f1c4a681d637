"""Auth API routes — register, login, logout, me, password reset."""

from fastapi import APIRouter, Depends, Request, status

from app.application.services.auth_service import (
    REASON_LOCKED,
    attempt_login,
    consume_reset_token,
    issue_reset_token,
    register_user,
    to_profile,
)
from app.core.exceptions import (
    AccountLockedException,
    BadRequestException,
    ConflictException,
    UnauthorizedException,
)
from app.domain.models.user import User
from app.domain.repositories.user_repository import UserRepository
from app.domain.schemas.auth import (
    ForgotPasswordRequest,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    ResetPasswordRequest,
    UserProfile,
)
from app.interfaces.api.deps import SESSION_USER_ID, SESSION_USERNAME, get_current_user
from app.interfaces.deps import get_user_repository

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/register", response_model=UserProfile, status_code=status.HTTP_201_CREATED)
def register(body: RegisterRequest, repo: UserRepository = Depends(get_user_repository)):
    result = register_user(repo, body)
    if not result.success:
        raise ConflictException(result.message)
    return result.data


@router.post("/login", response_model=LoginResponse)
def login(request: Request, body: LoginRequest, repo: UserRepository = Depends(get_user_repository)):
    result = attempt_login(repo, body.username, body.password)
    if not result.success:
        if result.reason == REASON_LOCKED:
            raise AccountLockedException(result.message)
        raise UnauthorizedException(result.message)

    profile: UserProfile = result.data
    request.session.clear()
    request.session[SESSION_USER_ID] = profile.id
    request.session[SESSION_USERNAME] = profile.username
    return LoginResponse(message=result.message, user=profile)


@router.post("/logout", response_model=MessageResponse)
def logout(request: Request):
    request.session.clear()
    return MessageResponse(message="You have been logged out successfully.")


@router.get("/me", response_model=UserProfile)
def get_me(user: User = Depends(get_current_user)):
    return to_profile(user)


@router.post("/forgot-password", response_model=MessageResponse)
def forgot_password(body: ForgotPasswordRequest, repo: UserRepository = Depends(get_user_repository)):
    result = issue_reset_token(repo, body.email)
    return MessageResponse(message=result.message)


@router.post("/reset-password", response_model=MessageResponse)
def reset_password(body: ResetPasswordRequest, repo: UserRepository = Depends(get_user_repository)):
    result = consume_reset_token(repo, body.token, body.new_password)
    if not result.success:
        raise BadRequestException(result.message)
    return MessageResponse(message=result.message)
