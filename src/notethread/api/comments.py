"""Comment API endpoints, nested under notes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import get_settings
from ..core.schemas.comments import (
    CommentCreate,
    CommentListResponse,
    CommentResponse,
    CommentSort,
)
from ..core.schemas.common import ErrorResponse, SuccessResponse
from ..core.services import CommentService
from ..database import get_db_session
from ..middleware.auth import get_current_identity
from ..security.jwt import Identity

settings = get_settings()

router = APIRouter(
    prefix="/notes/{note_id}/comments",
    tags=["comments"],
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)


@router.post(
    "", response_model=SuccessResponse[CommentResponse], status_code=status.HTTP_201_CREATED
)
async def add_comment(
    note_id: UUID,
    request: CommentCreate,
    identity: Identity = Depends(get_current_identity),
    session: AsyncSession = Depends(get_db_session),
):
    """Add a comment to a note."""
    comment = await CommentService(session).add_comment(identity, note_id, request)
    return SuccessResponse(data=comment, message="Comment added successfully")


@router.get("", response_model=CommentListResponse)
async def list_comments(
    note_id: UUID,
    sort: CommentSort = Query(CommentSort.LATEST),
    page: int = Query(1, ge=1),
    limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    identity: Identity = Depends(get_current_identity),
    session: AsyncSession = Depends(get_db_session),
):
    """List a note's comments with sorting and pagination."""
    comments, meta = await CommentService(session).list_comments(
        identity, note_id, sort=sort, page=page, limit=limit
    )
    return CommentListResponse(data=comments, meta=meta, message="Comments fetched successfully")
