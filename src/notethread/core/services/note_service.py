"""Note service implementation.

Ownership rule: a note that belongs to someone else is reported exactly
like a note that does not exist.
"""

from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ...security.jwt import Identity
from ..exceptions import NotFound, ValidationError
from ..logging import get_logger
from ..repositories.comment_repository import CommentRepository
from ..repositories.note_repository import NoteRepository
from ..schemas.notes import NoteCreate, NoteResponse, NoteUpdate
from .interfaces import INoteService
from .transaction import persistence_guard

logger = get_logger("services.notes")

NOTE_NOT_FOUND = "Note not found"

# never taken from a client payload
IMMUTABLE_NOTE_FIELDS = ("id", "owner_id", "user_id", "author", "created_at", "updated_at")


class NoteService(INoteService):
    """Note service implementation."""

    def __init__(
        self,
        session: AsyncSession,
        note_repo: Optional[NoteRepository] = None,
        comment_repo: Optional[CommentRepository] = None,
    ):
        self.session = session
        self.note_repo = note_repo or NoteRepository(session)
        # needed for the comment cascade on delete
        self.comment_repo = comment_repo or CommentRepository(session)

    async def list_notes(self, identity: Identity) -> List[NoteResponse]:
        """List the caller's notes."""
        async with persistence_guard(self.session, "list notes", commit=False):
            notes = await self.note_repo.list_user_notes(identity.user_id)
        return [NoteResponse.model_validate(note) for note in notes]

    async def get_note(self, identity: Identity, note_id: UUID) -> NoteResponse:
        """Get note by ID."""
        async with persistence_guard(self.session, "fetch note", commit=False):
            note = await self.note_repo.get_by_id_and_user(note_id, identity.user_id)
        if not note:
            raise NotFound(NOTE_NOT_FOUND)
        return NoteResponse.model_validate(note)

    async def create_note(self, identity: Identity, request: NoteCreate) -> NoteResponse:
        """Create new note owned by the caller."""
        if not request.title or not request.title.strip():
            raise ValidationError("Title is required")

        note_data = {
            "title": request.title,
            "body": request.body,
            "author": identity.username,
            "owner_id": identity.user_id,
        }

        async with persistence_guard(self.session, "create note"):
            note = await self.note_repo.create_note(note_data)

        logger.info("Note created", extra={"note_id": str(note.id), "owner_id": str(identity.user_id)})
        return NoteResponse.model_validate(note)

    async def update_note(
        self, identity: Identity, note_id: UUID, request: NoteUpdate
    ) -> NoteResponse:
        """Update existing note."""
        update_data = request.model_dump(exclude_unset=True)
        for field in IMMUTABLE_NOTE_FIELDS:
            update_data.pop(field, None)

        if "title" in update_data and (
            update_data["title"] is None or not update_data["title"].strip()
        ):
            raise ValidationError("Title cannot be empty")

        async with persistence_guard(self.session, "update note"):
            note = await self.note_repo.get_by_id_and_user(note_id, identity.user_id)
            if not note:
                raise NotFound(NOTE_NOT_FOUND)

            if update_data:
                note = await self.note_repo.update_note(note_id, identity.user_id, update_data)

        return NoteResponse.model_validate(note)

    async def delete_note(self, identity: Identity, note_id: UUID) -> NoteResponse:
        """Delete note and its comments in one transaction."""
        async with persistence_guard(self.session, "delete note"):
            note = await self.note_repo.get_by_id_and_user(note_id, identity.user_id)
            if not note:
                raise NotFound(NOTE_NOT_FOUND)

            deleted = NoteResponse.model_validate(note)
            removed = await self.comment_repo.delete_by_note(note.id)
            await self.note_repo.delete_note(note)

        logger.info(
            "Note deleted",
            extra={"note_id": str(note_id), "comments_removed": removed},
        )
        return deleted
