"""Authentication and user profile API endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.auth import (
    LoginRequest,
    LoginResponse,
    SignupRequest,
    UserProfileResponse,
    UserResponse,
    UserUpdateRequest,
)
from ..core.schemas.common import ErrorResponse, MessageResponse
from ..core.services import AuthService
from ..database import get_db_session
from ..middleware.auth import get_current_identity, require_self
from ..security import PasswordHasher, TokenService, get_password_hasher, get_token_service

router = APIRouter(prefix="/auth", tags=["User"])


def get_auth_service(
    session: AsyncSession = Depends(get_db_session),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
) -> AuthService:
    return AuthService(session, hasher, tokens)


@router.get("", response_model=MessageResponse)
async def auth_root():
    """Continue towards authentication."""
    return {"msg": "Continue towards authentication"}


@router.get(
    "/user/{user_id}",
    response_model=UserProfileResponse,
    dependencies=[Depends(get_current_identity)],
    responses={401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_user_profile(user_id: UUID, auth_service: AuthService = Depends(get_auth_service)):
    """Get a user's profile by ID."""
    user = await auth_service.get_profile(user_id)
    return {"msg": "Profile fetched successfully", "user": UserResponse.model_validate(user)}


@router.patch(
    "/update/{user_id}",
    response_model=MessageResponse,
    dependencies=[Depends(require_self)],
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
)
async def update_user_profile(
    user_id: UUID,
    request: UserUpdateRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Update the authenticated user's profile."""
    await auth_service.update_profile(user_id, request)
    return {"msg": "Profile updated successfully"}


@router.post(
    "/signup",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Authentication"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def signup(request: SignupRequest, auth_service: AuthService = Depends(get_auth_service)):
    """Sign up a new user."""
    await auth_service.signup(request)
    return {"msg": "Signup Successful"}


@router.post(
    "/login",
    response_model=LoginResponse,
    tags=["Authentication"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def login(request: LoginRequest, auth_service: AuthService = Depends(get_auth_service)):
    """Log in and get a bearer token."""
    token = await auth_service.login(request)
    return {"message": "login successful", "token": token}
