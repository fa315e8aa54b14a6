"""Comment repository for database operations."""

from typing import List, Tuple
from uuid import UUID

from sqlalchemy import asc, delete, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.comment import Comment


class CommentRepository:
    """Repository for comment database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_comment(self, comment_data: dict) -> Comment:
        """Create new comment."""
        comment = Comment(**comment_data)
        self.session.add(comment)
        await self.session.flush()
        return comment

    async def list_by_note(
        self,
        note_id: UUID,
        newest_first: bool = True,
        page: int = 1,
        limit: int = 10,
    ) -> Tuple[List[Comment], int]:
        """One page of a note's comments plus the note's total comment count."""
        offset = (page - 1) * limit

        count_stmt = select(func.count(Comment.id)).where(Comment.note_id == note_id)
        total_result = await self.session.execute(count_stmt)
        total_count = total_result.scalar() or 0

        # past the last page; also keeps huge offsets away from the driver
        if offset >= total_count:
            return [], total_count

        order = desc(Comment.created_at) if newest_first else asc(Comment.created_at)
        stmt = (
            select(Comment)
            .where(Comment.note_id == note_id)
            .order_by(order)
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total_count

    async def delete_by_note(self, note_id: UUID) -> int:
        """Delete every comment of a note; returns the number removed."""
        stmt = delete(Comment).where(Comment.note_id == note_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0
