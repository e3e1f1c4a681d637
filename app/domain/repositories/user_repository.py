"""
User Repository Interface.
Lookups by the user's unique fields and by reset token.
"""

from datetime import datetime
from typing import Optional

from app.domain.repositories.base import BaseRepository
from app.domain.models.user import User


class UserRepository(BaseRepository[User]):
    """Interface for User-specific operations."""

    def get_by_username(self, username: str) -> Optional[User]:
        """Exact-match lookup by username."""
        ...

    def get_by_email(self, email: str) -> Optional[User]:
        """Exact-match lookup by email."""
        ...

    def get_by_reset_token(self, token: str, now: datetime) -> Optional[User]:
        """User holding this reset token with an expiry strictly after now."""
        ...

    def username_exists(self, username: str) -> bool:
        ...

    def email_exists(self, email: str, exclude_id: Optional[int] = None) -> bool:
        """Whether the email is taken, optionally ignoring one user."""
        ...
