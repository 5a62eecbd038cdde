"""Pydantic schemas for signup, login and profile endpoints."""

from pydantic import EmailStr, Field

from mockinterview.schemas.common import CamelModel


class SignupRequest(CamelModel):
    """Request model for account creation."""

    email: EmailStr
    password: str = Field(..., min_length=6)
    name: str = Field(..., min_length=2)
    college: str | None = None
    year: str | None = None
    target_role: str | None = None


class LoginRequest(CamelModel):
    """Request model for logging in."""

    email: EmailStr
    password: str = Field(..., min_length=6)


class UserResponse(CamelModel):
    """Public view of a user, without the password hash."""

    id: str
    email: str
    name: str
    college: str | None = None
    year: str | None = None
    target_role: str | None = None


class AuthResponse(CamelModel):
    """Response model carrying the user and an access token."""

    user: UserResponse
    token: str
