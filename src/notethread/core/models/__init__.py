"""
Database models for NoteThread.

SQLAlchemy ORM models defining the schema. Every note and comment carries
the id of the user that owns it; repositories filter on that column.

Models included:
    - User: account with username/password authentication
    - Note: titled note owned by one user
    - Comment: plain-text comment attached to a note
"""

from .base import BaseModel
from .comment import Comment
from .note import Note
from .user import User

__all__ = [
    "BaseModel",
    "User",
    "Note",
    "Comment",
]
