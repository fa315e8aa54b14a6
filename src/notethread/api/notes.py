"""Notes API endpoints."""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.common import ErrorResponse, SuccessResponse
from ..core.schemas.notes import NoteCreate, NoteResponse, NoteUpdate
from ..core.services import NoteService
from ..database import get_db_session
from ..middleware.auth import get_current_identity
from ..security.jwt import Identity

router = APIRouter(
    prefix="/notes",
    tags=["notes"],
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)


@router.get("", response_model=SuccessResponse[List[NoteResponse]])
async def list_notes(
    identity: Identity = Depends(get_current_identity),
    session: AsyncSession = Depends(get_db_session),
):
    """List the caller's notes."""
    notes = await NoteService(session).list_notes(identity)
    return SuccessResponse(data=notes, message="Notes fetched successfully")


@router.get("/{note_id}", response_model=SuccessResponse[NoteResponse])
async def get_note(
    note_id: UUID,
    identity: Identity = Depends(get_current_identity),
    session: AsyncSession = Depends(get_db_session),
):
    """Get a specific note."""
    note = await NoteService(session).get_note(identity, note_id)
    return SuccessResponse(data=note, message="Note fetched successfully")


@router.post("", response_model=SuccessResponse[NoteResponse], status_code=status.HTTP_201_CREATED)
async def create_note(
    request: NoteCreate,
    identity: Identity = Depends(get_current_identity),
    session: AsyncSession = Depends(get_db_session),
):
    """Create a new note."""
    note = await NoteService(session).create_note(identity, request)
    return SuccessResponse(data=note, message="Note created successfully")


@router.patch("/{note_id}", response_model=SuccessResponse[NoteResponse])
async def update_note(
    note_id: UUID,
    request: NoteUpdate,
    identity: Identity = Depends(get_current_identity),
    session: AsyncSession = Depends(get_db_session),
):
    """Update a note's title and/or body."""
    note = await NoteService(session).update_note(identity, note_id, request)
    return SuccessResponse(data=note, message="Note updated successfully")


@router.delete("/{note_id}", response_model=SuccessResponse[NoteResponse])
async def delete_note(
    note_id: UUID,
    identity: Identity = Depends(get_current_identity),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete a note together with its comments."""
    note = await NoteService(session).delete_note(identity, note_id)
    return SuccessResponse(data=note, message="Note deleted successfully")
