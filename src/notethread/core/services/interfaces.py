"""
Service interfaces for NoteThread.

Every note and comment operation takes the caller's ``Identity``; the
implementations scope all store access by ``identity.user_id``.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Tuple
from uuid import UUID

from ...security.jwt import Identity
from ..schemas.auth import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from ..schemas.comments import CommentCreate, CommentResponse, CommentSort
from ..schemas.common import HealthCheckResponse, PageMeta
from ..schemas.notes import NoteCreate, NoteResponse, NoteUpdate


class IAuthService(ABC):
    """Auth service for user management."""

    @abstractmethod
    async def register_user(self, request: RegisterRequest) -> AuthResponse:
        """Register new user and issue a token."""
        pass

    @abstractmethod
    async def authenticate_user(self, request: LoginRequest) -> AuthResponse:
        """Login user and issue a token."""
        pass

    @abstractmethod
    async def get_current_user(self, identity: Identity) -> UserResponse:
        """Get the caller's profile."""
        pass


class INoteService(ABC):
    """Note service for ownership-scoped CRUD."""

    @abstractmethod
    async def list_notes(self, identity: Identity) -> List[NoteResponse]:
        """List the caller's notes."""
        pass

    @abstractmethod
    async def get_note(self, identity: Identity, note_id: UUID) -> NoteResponse:
        """Get one of the caller's notes."""
        pass

    @abstractmethod
    async def create_note(self, identity: Identity, request: NoteCreate) -> NoteResponse:
        """Create a note owned by the caller."""
        pass

    @abstractmethod
    async def update_note(
        self, identity: Identity, note_id: UUID, request: NoteUpdate
    ) -> NoteResponse:
        """Merge title/body changes into one of the caller's notes."""
        pass

    @abstractmethod
    async def delete_note(self, identity: Identity, note_id: UUID) -> NoteResponse:
        """Delete a note and its comments, returning the note's prior state."""
        pass


class ICommentService(ABC):
    """Comment threads on notes."""

    @abstractmethod
    async def add_comment(
        self, identity: Identity, note_id: UUID, request: CommentCreate
    ) -> CommentResponse:
        """Add a sanitized comment to one of the caller's notes."""
        pass

    @abstractmethod
    async def list_comments(
        self,
        identity: Identity,
        note_id: UUID,
        sort: CommentSort = CommentSort.LATEST,
        page: int = 1,
        limit: int = 10,
    ) -> Tuple[List[CommentResponse], PageMeta]:
        """One page of a note's comments."""
        pass


class IHealthService(ABC):
    """Health check service."""

    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        """Get overall system health."""
        pass

    @abstractmethod
    async def check_database_health(self) -> Dict[str, Any]:
        """Check database connectivity."""
        pass
