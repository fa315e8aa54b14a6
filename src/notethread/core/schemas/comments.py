"""Comment schemas."""

import uuid
from datetime import datetime
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .common import PageMeta


class CommentSort(str, Enum):
    """Creation-time ordering for comment lists."""

    LATEST = "latest"
    OLDEST = "oldest"


class CommentCreate(BaseModel):
    """Comment creation request schema."""

    content: str = Field(max_length=5000, description="Comment text; markup is stripped")


class CommentResponse(BaseModel):
    """Comment response schema."""

    id: uuid.UUID
    content: str
    note_id: uuid.UUID
    owner_id: uuid.UUID
    author: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CommentListResponse(BaseModel):
    """One page of a note's comments."""

    success: bool = Field(default=True)
    data: List[CommentResponse]
    meta: PageMeta
    message: str
