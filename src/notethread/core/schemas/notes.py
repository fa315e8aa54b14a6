"""
Note schemas.

Only title and body are accepted from clients. Owner and author are
stamped by the service from the caller's token; extra keys in a payload
are ignored.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class NoteCreate(BaseModel):
    """Note creation request schema."""

    title: str = Field(max_length=200, description="Note title")
    body: Optional[str] = Field(default=None, description="Note body")

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "title": "Groceries",
                "body": "milk, eggs, coffee",
            }
        },
    )


class NoteUpdate(BaseModel):
    """Partial note update. Unset fields are left untouched."""

    title: Optional[str] = Field(default=None, max_length=200, description="Note title")
    body: Optional[str] = Field(default=None, description="Note body")

    model_config = ConfigDict(extra="ignore")


class NoteResponse(BaseModel):
    """Note response schema."""

    id: uuid.UUID
    title: str
    body: Optional[str] = None
    author: str
    owner_id: uuid.UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
