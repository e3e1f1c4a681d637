"""User domain model — maps to the 'users' table."""

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    profile_picture_path = Column(String(500), nullable=True)

    # Lockout state
    failed_login_attempts = Column(Integer, nullable=False, default=0)
    lockout_end = Column(DateTime, nullable=True)

    # Password reset — token and expiry are always set and cleared together
    password_reset_token = Column(String(100), nullable=True, index=True)
    password_reset_token_expiry = Column(DateTime, nullable=True)

    created_at = Column(DateTime, nullable=False)
    last_login_at = Column(DateTime, nullable=True)

    entries = relationship(
        "DiaryEntry",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<User {self.username}>"
