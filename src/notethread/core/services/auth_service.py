"""Authentication service implementation."""

from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ...config import get_settings
from ...security import Identity, create_access_token, hash_password, verify_password
from ..exceptions import NotFound, PersistenceError, Unauthenticated, ValidationError
from ..logging import get_logger
from ..models.user import User
from ..repositories.user_repository import UserRepository
from ..schemas.auth import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from .interfaces import IAuthService
from .transaction import persistence_guard

logger = get_logger("services.auth")


class AuthService(IAuthService):
    """Authentication service implementation."""

    def __init__(self, session: AsyncSession, user_repo: Optional[UserRepository] = None):
        self.session = session
        self.user_repo = user_repo or UserRepository(session)
        self.settings = get_settings()

    async def register_user(self, request: RegisterRequest) -> AuthResponse:
        """Register new user."""
        try:
            async with persistence_guard(self.session, "register user"):
                if await self.user_repo.is_username_taken(request.username):
                    raise ValidationError("Username already taken")

                user = await self.user_repo.create_user(
                    {
                        "username": request.username,
                        "email": str(request.email),
                        "password_hash": hash_password(request.password),
                    }
                )
        except PersistenceError as e:
            # a concurrent registration won the unique constraint
            if isinstance(e.__cause__, IntegrityError):
                raise ValidationError("Username already taken") from e
            raise

        logger.info("User registered", extra={"user_id": str(user.id)})
        return self._issue_token(user)

    async def authenticate_user(self, request: LoginRequest) -> AuthResponse:
        """Login user and return a JWT."""
        async with persistence_guard(self.session, "load user", commit=False):
            user = await self.user_repo.get_by_username(request.username)

        # same message for unknown user and wrong password
        if not user or not verify_password(request.password, user.password_hash):
            raise Unauthenticated("Invalid credentials")

        return self._issue_token(user)

    async def get_current_user(self, identity: Identity) -> UserResponse:
        """Get user by ID."""
        async with persistence_guard(self.session, "load user", commit=False):
            user = await self.user_repo.get_by_id(identity.user_id)
        if not user:
            raise NotFound("User not found")

        return UserResponse.model_validate(user)

    def _issue_token(self, user: User) -> AuthResponse:
        token = create_access_token(user.id, user.username)
        return AuthResponse(
            token=token,
            expires_in=self.settings.access_token_expire_minutes * 60,
            user=UserResponse.model_validate(user),
        )
