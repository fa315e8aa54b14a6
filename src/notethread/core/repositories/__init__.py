"""Repository layer for data access."""

from .comment_repository import CommentRepository
from .note_repository import NoteRepository
from .user_repository import UserRepository

__all__ = [
    "UserRepository",
    "NoteRepository",
    "CommentRepository",
]
