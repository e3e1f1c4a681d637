"""Auth service — registration, login lockout policy, password reset and profile.

Expected failures come back as ServiceResult(success=False, ...) and never raise.
Login and forgot-password answer identically whether or not the account exists.
"""

from datetime import timedelta
from typing import Optional

import structlog

from app.config import get_settings
from app.core.security import generate_reset_token, hash_password, utcnow, verify_password
from app.domain.models.user import User
from app.domain.repositories.user_repository import UserRepository
from app.domain.schemas.auth import RegisterRequest, ServiceResult, UserProfile
from app.domain.schemas.profile import ProfileUpdate

logger = structlog.get_logger(__name__)

INVALID_CREDENTIALS = "Invalid username or password."
RESET_REQUESTED = "If the email exists, a password reset link has been sent."
INVALID_RESET_TOKEN = "Invalid or expired reset token."
USER_NOT_FOUND = "User not found."
LOCKOUT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

REASON_INVALID = "invalid_credentials"
REASON_LOCKED = "locked"


def to_profile(user: User) -> UserProfile:
    return UserProfile.model_validate(user)


def is_locked(user: User, now) -> bool:
    return user.lockout_end is not None and user.lockout_end > now


def register_user(repo: UserRepository, data: RegisterRequest) -> ServiceResult:
    if repo.username_exists(data.username):
        return ServiceResult(success=False, message="Username already exists.")

    if repo.email_exists(data.email):
        return ServiceResult(success=False, message="Email already exists.")

    now = utcnow()
    user = repo.create({
        "username": data.username,
        "email": data.email,
        "password_hash": hash_password(data.password),
        "first_name": data.first_name,
        "last_name": data.last_name,
        "created_at": now,
        "last_login_at": now,
        "failed_login_attempts": 0,
    })
    logger.info("User registered", user_id=user.id, username=user.username)
    return ServiceResult(success=True, message="Registration successful.", data=to_profile(user))


def attempt_login(repo: UserRepository, username: str, password: str) -> ServiceResult:
    """Verify credentials and apply the failed-attempt lockout policy."""
    settings = get_settings()
    user = repo.get_by_username(username)

    if user is None:
        logger.info("Login rejected", reason=REASON_INVALID)
        return ServiceResult(success=False, message=INVALID_CREDENTIALS, reason=REASON_INVALID)

    now = utcnow()
    if is_locked(user, now):
        logger.info("Login rejected", reason=REASON_LOCKED, user_id=user.id)
        return ServiceResult(
            success=False,
            reason=REASON_LOCKED,
            message=f"Account is locked until {user.lockout_end.strftime(LOCKOUT_TIMESTAMP_FORMAT)}.",
        )

    if not verify_password(password, user.password_hash):
        user.failed_login_attempts = (user.failed_login_attempts or 0) + 1

        if user.failed_login_attempts >= settings.MAX_FAILED_LOGIN_ATTEMPTS:
            user.lockout_end = now + timedelta(minutes=settings.LOCKOUT_MINUTES)
            repo.save(user)
            logger.warning(
                "Account locked",
                user_id=user.id,
                failed_attempts=user.failed_login_attempts,
                lockout_end=user.lockout_end.isoformat(),
            )
            return ServiceResult(
                success=False,
                reason=REASON_LOCKED,
                message=(
                    "Account locked due to too many failed login attempts. "
                    f"Try again in {settings.LOCKOUT_MINUTES} minutes."
                ),
            )

        repo.save(user)
        logger.info("Login rejected", reason=REASON_INVALID, user_id=user.id,
                    failed_attempts=user.failed_login_attempts)
        return ServiceResult(success=False, message=INVALID_CREDENTIALS, reason=REASON_INVALID)

    user.failed_login_attempts = 0
    user.lockout_end = None
    user.last_login_at = now
    repo.save(user)
    logger.info("Login succeeded", user_id=user.id)
    return ServiceResult(success=True, message="Login successful.", data=to_profile(user))


def issue_reset_token(repo: UserRepository, email: str) -> ServiceResult:
    """Store a fresh reset token for the account, if there is one.

    The answer is the same either way so callers cannot probe for accounts.
    """
    settings = get_settings()
    user = repo.get_by_email(email)

    if user is not None:
        user.password_reset_token = generate_reset_token()
        user.password_reset_token_expiry = utcnow() + timedelta(hours=settings.RESET_TOKEN_EXPIRY_HOURS)
        repo.save(user)
        logger.info("Password reset token issued", user_id=user.id)
        if settings.ENVIRONMENT == "development":
            # No mail transport; surface the link locally so the flow can be finished
            logger.debug("Password reset link", reset_path=f"/reset-password?token={user.password_reset_token}")

    return ServiceResult(success=True, message=RESET_REQUESTED)


def consume_reset_token(repo: UserRepository, token: str, new_password: str) -> ServiceResult:
    """Set a new password with a valid token; the token is spent and the account unlocked."""
    user = repo.get_by_reset_token(token, utcnow())

    if user is None:
        logger.info("Password reset rejected", reason="invalid_or_expired_token")
        return ServiceResult(success=False, message=INVALID_RESET_TOKEN)

    user.password_hash = hash_password(new_password)
    user.password_reset_token = None
    user.password_reset_token_expiry = None
    user.failed_login_attempts = 0
    user.lockout_end = None
    repo.save(user)
    logger.info("Password reset completed", user_id=user.id)
    return ServiceResult(success=True, message="Password reset successful.")


def get_user_profile(repo: UserRepository, user_id: int) -> Optional[UserProfile]:
    user = repo.get_by_id(user_id)
    if user is None:
        return None
    return to_profile(user)


def update_profile(repo: UserRepository, user_id: int, data: ProfileUpdate) -> ServiceResult:
    user = repo.get_by_id(user_id)
    if user is None:
        return ServiceResult(success=False, message=USER_NOT_FOUND)

    if data.email and data.email != user.email:
        if repo.email_exists(data.email, exclude_id=user_id):
            return ServiceResult(success=False, message="Email is already in use by another account.")
        user.email = data.email

    # Blank names leave the stored value untouched
    if data.first_name:
        user.first_name = data.first_name
    if data.last_name:
        user.last_name = data.last_name

    repo.save(user)
    logger.info("Profile updated", user_id=user_id)
    return ServiceResult(success=True, message="Profile updated successfully.", data=to_profile(user))


def update_profile_picture(repo: UserRepository, user_id: int, picture_path: Optional[str]) -> ServiceResult:
    user = repo.get_by_id(user_id)
    if user is None:
        return ServiceResult(success=False, message=USER_NOT_FOUND)

    user.profile_picture_path = picture_path
    repo.save(user)
    return ServiceResult(success=True, message="Profile picture updated successfully.", data=to_profile(user))
