"""
Pydantic schemas for validating and documenting API requests and responses.

This package exposes the models that define the input/output contracts for
authentication, notes, comments and the shared response envelopes.
"""

from .auth import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from .comments import CommentCreate, CommentListResponse, CommentResponse, CommentSort
from .common import ErrorResponse, HealthCheckResponse, PageMeta, SuccessResponse
from .notes import NoteCreate, NoteResponse, NoteUpdate

__all__ = [
    # Auth schemas
    "LoginRequest",
    "RegisterRequest",
    "UserResponse",
    "AuthResponse",
    # Note schemas
    "NoteCreate",
    "NoteUpdate",
    "NoteResponse",
    # Comment schemas
    "CommentCreate",
    "CommentResponse",
    "CommentListResponse",
    "CommentSort",
    # Common schemas
    "SuccessResponse",
    "PageMeta",
    "ErrorResponse",
    "HealthCheckResponse",
]
