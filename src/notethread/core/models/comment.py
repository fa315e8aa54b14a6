# Comments attached to notes
import uuid

from sqlalchemy import ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel
from .types import GUID


class Comment(BaseModel):
    """Plain-text comment on a note. Never edited after creation."""

    __tablename__ = "comments"

    content: Mapped[str] = mapped_column(Text, nullable=False)

    # storage-level backstop; the note service deletes comments explicitly first
    note_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("notes.id", ondelete="CASCADE"), nullable=False
    )
    owner_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    author: Mapped[str] = mapped_column(String(50), nullable=False)

    __table_args__ = (
        Index("idx_comments_note_created", "note_id", "created_at"),
        Index("idx_comments_owner_id", "owner_id"),
    )

    def __repr__(self) -> str:
        return f"<Comment(note_id={self.note_id}, author='{self.author}')>"
