"""Diary entry — one dated note owned by a user."""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from app.infrastructure.database import Base


class DiaryEntry(Base):
    __tablename__ = "diary_entries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime, nullable=False, index=True)
    last_modified_at = Column(DateTime, nullable=False)

    user = relationship("User", back_populates="entries")

    def __repr__(self):
        return f"<DiaryEntry {self.id} - {self.title}>"
