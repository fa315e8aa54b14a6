"""JWT token utilities.

Tokens are never stored server-side: a token is valid while its signature
checks out and ``exp`` lies in the future.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from uuid import UUID

from jose import JWTError, jwt

from ..config import get_settings
from ..core.exceptions import InvalidTokenError

TOKEN_TYPE = "access"


@dataclass(frozen=True)
class Identity:
    """Caller resolved from a verified token."""

    user_id: UUID
    username: str


def create_access_token(
    user_id: UUID, username: str, expires_delta: Optional[timedelta] = None
) -> str:
    """Create a signed access token for the given user."""
    settings = get_settings()
    now = datetime.now(timezone.utc)

    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)

    claims: Dict[str, Any] = {
        "sub": str(user_id),
        "username": username,
        "iat": now,
        "exp": now + expires_delta,
        "type": TOKEN_TYPE,
    }
    return jwt.encode(claims, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> Dict[str, Any]:
    """Decode and validate an access token.

    Raises:
        InvalidTokenError: bad signature, malformed, expired or wrong type.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as e:
        raise InvalidTokenError(str(e)) from e

    if payload.get("type") != TOKEN_TYPE:
        raise InvalidTokenError("Not an access token")

    return payload


def verify_access_token(token: str) -> Identity:
    """Verify a token and return the identity it carries."""
    payload = decode_access_token(token)

    subject = payload.get("sub")
    username = payload.get("username")
    if not subject or not username:
        raise InvalidTokenError("Token is missing identity claims")

    try:
        user_id = UUID(subject)
    except (TypeError, ValueError) as e:
        raise InvalidTokenError("Token subject is not a user id") from e

    return Identity(user_id=user_id, username=username)
