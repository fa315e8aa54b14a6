"""Authentication API endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.auth import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from ..core.schemas.common import ErrorResponse, SuccessResponse
from ..core.services import AuthService
from ..database import get_db_session
from ..middleware.auth import get_current_identity
from ..security.jwt import Identity

router = APIRouter(
    prefix="/auth",
    tags=["authentication"],
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(request: RegisterRequest, session: AsyncSession = Depends(get_db_session)):
    """Register a new user and return a token."""
    auth_service = AuthService(session)
    return await auth_service.register_user(request)


@router.post("/login", response_model=AuthResponse)
async def login(request: LoginRequest, session: AsyncSession = Depends(get_db_session)):
    """Login user and get a JWT."""
    auth_service = AuthService(session)
    return await auth_service.authenticate_user(request)


@router.get("/me", response_model=SuccessResponse[UserResponse])
async def get_current_user(
    identity: Identity = Depends(get_current_identity),
    session: AsyncSession = Depends(get_db_session),
):
    """Get current user profile."""
    auth_service = AuthService(session)
    user = await auth_service.get_current_user(identity)
    return SuccessResponse(data=user, message="User fetched successfully")
