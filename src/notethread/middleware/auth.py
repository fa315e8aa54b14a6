"""Authentication middleware."""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..core.exceptions import InvalidTokenError, Unauthenticated
from ..security.jwt import Identity, verify_access_token


class JWTBearer(HTTPBearer):
    """JWT Bearer token authentication.

    Resolves the caller's identity from the token alone; every failure is a
    401.
    """

    def __init__(self):
        # we raise our own 401 instead of HTTPBearer's default error
        super().__init__(auto_error=False)

    async def __call__(self, request: Request) -> Identity:
        # None for an absent header or a non-Bearer scheme
        credentials: Optional[HTTPAuthorizationCredentials] = await super().__call__(request)
        if not credentials:
            raise Unauthenticated("Missing or malformed authorization header")

        try:
            identity = verify_access_token(credentials.credentials)
        except InvalidTokenError:
            raise Unauthenticated("Invalid or expired token") from None

        request.state.identity = identity
        return identity


# Dependency for getting the current caller from the JWT
async def get_current_identity(identity: Identity = Depends(JWTBearer())) -> Identity:
    """Get current authenticated caller."""
    return identity
