"""Transaction boundary shared by the services."""

from contextlib import asynccontextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import PersistenceError
from ..logging import get_logger

logger = get_logger("services.transaction")


@asynccontextmanager
async def persistence_guard(session: AsyncSession, action: str, commit: bool = True):
    """Run a block of store calls as one unit.

    Commits when the block finishes (if ``commit``). A store failure rolls
    the whole block back and is re-raised as ``PersistenceError`` chained to
    the driver error; other exceptions pass through untouched. Driver
    details go to the log only.
    """
    try:
        yield
        if commit:
            await session.commit()
    except SQLAlchemyError as e:
        await session.rollback()
        reason = getattr(e, "orig", None) or e
        logger.error(f"Failed to {action}: {reason}", extra={"action": action})
        raise PersistenceError(f"Failed to {action}") from e
