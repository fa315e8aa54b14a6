# Note model for user content
import uuid
from typing import Optional

from sqlalchemy import CheckConstraint, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel
from .types import GUID


class Note(BaseModel):
    """Note owned by exactly one user."""

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    body: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # display name captured at creation, never used for access checks
    author: Mapped[str] = mapped_column(String(50), nullable=False)

    # owner reference, set once at creation
    owner_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    __table_args__ = (
        Index("idx_notes_owner_id", "owner_id"),
        Index("idx_notes_owner_created", "owner_id", "created_at"),
        # Enforce title max length (SQLite compatible)
        CheckConstraint("length(title) <= 200", name="ck_notes_title_len"),
    )

    def __repr__(self) -> str:
        truncated = self.title if len(self.title) <= 30 else (self.title[:30] + "...")
        return f"<Note(title='{truncated}', owner_id={self.owner_id})>"
