"""
Authentication schemas.

These schemas define the API contracts for registration and login.
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class RegisterRequest(BaseModel):
    """User registration request schema."""

    username: str = Field(min_length=3, max_length=50, description="Unique username")
    email: EmailStr = Field(description="Contact email")
    password: str = Field(min_length=8, max_length=128, description="User password")

    @field_validator("username")
    @classmethod
    def validate_username(cls, v):
        """Validate username format."""
        if not v.replace("_", "").replace("-", "").isalnum():
            raise ValueError("Username can only contain letters, numbers, hyphens, and underscores")
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "new_user",
                "email": "new_user@example.com",
                "password": "securepassword123",
            }
        }
    )


class LoginRequest(BaseModel):
    """User login request schema."""

    username: str = Field(min_length=1, max_length=50, description="Username")
    password: str = Field(min_length=1, max_length=128, description="User password")


class UserResponse(BaseModel):
    """User information response schema."""

    id: uuid.UUID = Field(description="User unique identifier")
    username: str = Field(description="Username")
    email: str = Field(description="Contact email")
    created_at: datetime = Field(description="Account creation timestamp")

    model_config = ConfigDict(from_attributes=True)


class AuthResponse(BaseModel):
    """Token issued at registration or login."""

    success: bool = Field(default=True)
    token: str = Field(description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(description="Token lifetime in seconds")
    user: UserResponse
