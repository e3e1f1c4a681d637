"""Pydantic schemas for User and Auth."""

from pydantic import BaseModel, EmailStr, Field
from datetime import datetime
from typing import Any, Optional


class RegisterRequest(BaseModel):
    username: str = Field(min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(min_length=6, max_length=100)
    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)


class LoginRequest(BaseModel):
    username: str
    password: str


class ForgotPasswordRequest(BaseModel):
    email: EmailStr


class ResetPasswordRequest(BaseModel):
    token: str = Field(min_length=1)
    new_password: str = Field(min_length=6, max_length=100)


class UserProfile(BaseModel):
    """Public projection of a user — never carries the hash or reset token."""
    id: int
    username: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_picture_path: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ServiceResult(BaseModel):
    """Outcome of a service operation: success flag, message, optional payload."""
    success: bool
    message: str
    reason: Optional[str] = None
    data: Optional[Any] = None


class MessageResponse(BaseModel):
    message: str


class LoginResponse(BaseModel):
    message: str
    user: UserProfile
