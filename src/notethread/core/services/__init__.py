"""
Service layer interfaces and implementations.
"""

from .auth_service import AuthService
from .comment_service import CommentService
from .health_service import HealthService
from .interfaces import IAuthService, ICommentService, IHealthService, INoteService
from .note_service import NoteService

__all__ = [
    # Interfaces
    "IAuthService",
    "INoteService",
    "ICommentService",
    "IHealthService",
    # Implementations
    "AuthService",
    "NoteService",
    "CommentService",
    "HealthService",
]
