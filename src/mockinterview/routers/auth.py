"""Signup, login and profile endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from mockinterview.db import get_db
from mockinterview.exceptions import NotFoundError
from mockinterview.repositories.user import UserRepository
from mockinterview.schemas.auth import AuthResponse, LoginRequest, SignupRequest, UserResponse
from mockinterview.security import AuthenticatedUser, get_current_user
from mockinterview.services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/signup", response_model=AuthResponse, summary="Create an account")
async def signup(
    request: SignupRequest,
    session: AsyncSession = Depends(get_db),
) -> AuthResponse:
    """Register a user and return an access token."""
    user, token = await AuthService.signup(session, request)
    return AuthResponse(user=UserResponse.model_validate(user), token=token)


@router.post("/login", response_model=AuthResponse, summary="Log in")
async def login(
    request: LoginRequest,
    session: AsyncSession = Depends(get_db),
) -> AuthResponse:
    """Exchange credentials for an access token."""
    user, token = await AuthService.login(session, request)
    return AuthResponse(user=UserResponse.model_validate(user), token=token)


@router.get("/me", response_model=UserResponse, summary="Current user profile")
async def get_me(
    current_user: AuthenticatedUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> UserResponse:
    """Return the profile of the authenticated user."""
    user = await UserRepository.get_by_id(session, current_user.id)
    if user is None:
        raise NotFoundError(resource="User", resource_id=current_user.id)
    return UserResponse.model_validate(user)
