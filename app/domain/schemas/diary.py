"""Pydantic schemas for diary entries."""

from pydantic import BaseModel, Field
from datetime import datetime


class DiaryEntryBase(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)


class DiaryEntryCreate(DiaryEntryBase):
    pass


class DiaryEntryUpdate(DiaryEntryBase):
    pass


class DiaryEntryRead(DiaryEntryBase):
    id: int
    user_id: int
    created_at: datetime
    last_modified_at: datetime

    model_config = {"from_attributes": True}
