"""
Shared response schemas - envelopes, pagination, errors etc
"""

import math
from datetime import datetime, timezone
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class SuccessResponse(BaseModel, Generic[T]):
    """Standard success envelope."""

    success: bool = Field(default=True, description="Operation success status")
    data: T
    message: str = Field(description="Success message")


class PageMeta(BaseModel):
    """Pagination info for list responses"""

    page: int
    limit: int
    total: int
    total_pages: int = Field(alias="totalPages")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def create(cls, total: int, page: int, limit: int) -> "PageMeta":
        return cls(
            page=page,
            limit=limit,
            total=total,
            total_pages=math.ceil(total / limit) if limit else 0,
        )


class ErrorResponse(BaseModel):
    """Standard error envelope."""

    success: bool = Field(default=False)
    error: str = Field(description="Human-readable error message")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": False,
                "error": "Note not found",
            }
        }
    )


class HealthCheckResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(description="Overall health status")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    version: str = Field(description="Application version")
    checks: dict[str, dict[str, Any]] = Field(description="Individual component health checks")
    error: Optional[str] = None
