"""Pydantic schemas for profile editing."""

from pydantic import BaseModel, EmailStr, Field
from typing import Optional


class ProfileUpdate(BaseModel):
    email: Optional[EmailStr] = None
    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
