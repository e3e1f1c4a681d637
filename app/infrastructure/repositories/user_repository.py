"""
SQLAlchemy Implementation of User Repository.
"""

from datetime import datetime
from typing import Optional

from app.domain.models.user import User
from app.domain.repositories.user_repository import UserRepository
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyUserRepository(SQLAlchemyRepository[User], UserRepository):
    """User repository implementation using SQLAlchemy."""

    def get_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def get_by_reset_token(self, token: str, now: datetime) -> Optional[User]:
        return (
            self.db.query(User)
            .filter(
                User.password_reset_token == token,
                User.password_reset_token_expiry > now,
            )
            .first()
        )

    def username_exists(self, username: str) -> bool:
        return self.db.query(User.id).filter(User.username == username).first() is not None

    def email_exists(self, email: str, exclude_id: Optional[int] = None) -> bool:
        query = self.db.query(User.id).filter(User.email == email)
        if exclude_id is not None:
            query = query.filter(User.id != exclude_id)
        return query.first() is not None
