"""Note repository for database operations.

Every lookup that serves a caller is filtered by ``owner_id``. Methods
flush but never commit; the service decides the transaction boundary.
"""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.note import Note


class NoteRepository:
    """Repository for note database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_note(self, note_data: dict) -> Note:
        """Create new note."""
        note = Note(**note_data)
        self.session.add(note)
        await self.session.flush()
        return note

    async def get_by_id_and_user(self, note_id: UUID, user_id: UUID) -> Optional[Note]:
        """Get note by ID if owned by user."""
        stmt = select(Note).where(and_(Note.id == note_id, Note.owner_id == user_id))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_user_notes(self, user_id: UUID) -> List[Note]:
        """All notes owned by the user, newest first."""
        stmt = select(Note).where(Note.owner_id == user_id).order_by(desc(Note.created_at))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def update_note(self, note_id: UUID, user_id: UUID, update_data: dict) -> Optional[Note]:
        """Update note if owned by user."""
        note = await self.get_by_id_and_user(note_id, user_id)
        if not note:
            return None

        for key, value in update_data.items():
            setattr(note, key, value)

        await self.session.flush()
        await self.session.refresh(note)
        return note

    async def delete_note(self, note: Note) -> None:
        """Delete an already-authorized note."""
        await self.session.delete(note)
        await self.session.flush()
