"""Health service implementation."""

import time
from datetime import datetime, timezone
from typing import Any, Dict

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from ... import __version__
from ..schemas.common import HealthCheckResponse
from .interfaces import IHealthService


class HealthService(IHealthService):
    """Health check service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_health_status(self) -> HealthCheckResponse:
        """Get app health status."""
        db_health = await self.check_database_health()

        return HealthCheckResponse(
            status="healthy" if db_health["connected"] else "unhealthy",
            timestamp=datetime.now(timezone.utc),
            version=__version__,
            checks={"database": db_health},
        )

    async def check_database_health(self) -> Dict[str, Any]:
        """Check DB connection."""
        start = time.perf_counter()
        try:
            result = await self.session.execute(text("SELECT 1"))
            result.scalar()
        except Exception as e:
            return {
                "connected": False,
                "status": "unhealthy",
                "error": str(e),
                "response_time_ms": 0.0,
            }

        return {
            "connected": True,
            "status": "healthy",
            "response_time_ms": round((time.perf_counter() - start) * 1000, 2),
        }
