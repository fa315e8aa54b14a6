"""Comment service implementation."""

from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ...config import get_settings
from ...security.jwt import Identity
from ...security.sanitize import sanitize_text
from ..exceptions import NotFound, ValidationError
from ..logging import get_logger
from ..repositories.comment_repository import CommentRepository
from ..repositories.note_repository import NoteRepository
from ..schemas.comments import CommentCreate, CommentResponse, CommentSort
from ..schemas.common import PageMeta
from .interfaces import ICommentService
from .note_service import NOTE_NOT_FOUND
from .transaction import persistence_guard

logger = get_logger("services.comments")

CONTENT_REQUIRED = "Comment content is required"


class CommentService(ICommentService):
    """Comment threads, readable and writable only by the note's owner."""

    def __init__(
        self,
        session: AsyncSession,
        note_repo: Optional[NoteRepository] = None,
        comment_repo: Optional[CommentRepository] = None,
    ):
        self.session = session
        self.note_repo = note_repo or NoteRepository(session)
        self.comment_repo = comment_repo or CommentRepository(session)
        self.settings = get_settings()

    async def add_comment(
        self, identity: Identity, note_id: UUID, request: CommentCreate
    ) -> CommentResponse:
        """Add a comment to one of the caller's notes."""
        if not request.content or not request.content.strip():
            raise ValidationError(CONTENT_REQUIRED)

        content = sanitize_text(request.content)
        if not content.strip():
            # nothing left once markup is removed
            raise ValidationError(CONTENT_REQUIRED)

        async with persistence_guard(self.session, "add comment"):
            note = await self.note_repo.get_by_id_and_user(note_id, identity.user_id)
            if not note:
                raise NotFound(NOTE_NOT_FOUND)

            comment = await self.comment_repo.create_comment(
                {
                    "content": content,
                    "note_id": note.id,
                    "owner_id": identity.user_id,
                    "author": identity.username,
                }
            )

        logger.info("Comment added", extra={"note_id": str(note_id), "comment_id": str(comment.id)})
        return CommentResponse.model_validate(comment)

    async def list_comments(
        self,
        identity: Identity,
        note_id: UUID,
        sort: CommentSort = CommentSort.LATEST,
        page: int = 1,
        limit: int = 10,
    ) -> Tuple[List[CommentResponse], PageMeta]:
        """One page of a note's comments, ordered by creation time."""
        try:
            sort = CommentSort(sort)
        except ValueError:
            raise ValidationError("Sort must be 'latest' or 'oldest'") from None

        if page < 1:
            page = 1
        if limit < 1 or limit > self.settings.max_page_size:
            limit = self.settings.default_page_size

        async with persistence_guard(self.session, "list comments", commit=False):
            note = await self.note_repo.get_by_id_and_user(note_id, identity.user_id)
            if not note:
                raise NotFound(NOTE_NOT_FOUND)

            comments, total = await self.comment_repo.list_by_note(
                note.id,
                newest_first=sort is CommentSort.LATEST,
                page=page,
                limit=limit,
            )

        items = [CommentResponse.model_validate(comment) for comment in comments]
        return items, PageMeta.create(total=total, page=page, limit=limit)
