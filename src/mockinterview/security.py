"""Password hashing, JWT issuance and bearer-token authentication."""

from datetime import UTC, datetime, timedelta

import bcrypt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from loguru import logger
from pydantic import BaseModel

from mockinterview.config import settings
from mockinterview.exceptions import AuthenticationError, PermissionDeniedError

# auto_error=False so a missing header maps to our 401 instead of FastAPI's 403
bearer_scheme = HTTPBearer(auto_error=False)


class AuthenticatedUser(BaseModel):
    """Identity carried by a verified access token."""

    id: str
    email: str


def hash_password(plain_password: str) -> str:
    """Hash a password with bcrypt."""
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(plain_password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plain password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"), hashed_password.encode("utf-8")
        )
    except ValueError:
        return False


def create_access_token(
    user_id: str,
    email: str,
    expires_delta: timedelta | None = None,
) -> str:
    """Issue a signed JWT for a user."""
    expire = datetime.now(UTC) + (
        expires_delta or timedelta(days=settings.jwt_expire_days)
    )
    payload = {"sub": user_id, "email": email, "exp": expire}
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> AuthenticatedUser:
    """Verify a JWT and return the identity it carries.

    Raises:
        PermissionDeniedError: If the token is malformed, forged or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except JWTError as exc:
        logger.warning("Rejected access token", error=str(exc))
        raise PermissionDeniedError("Invalid or expired token") from exc

    user_id = payload.get("sub")
    email = payload.get("email")
    if not user_id or not email:
        raise PermissionDeniedError("Invalid or expired token")
    return AuthenticatedUser(id=user_id, email=email)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> AuthenticatedUser:
    """FastAPI dependency resolving the bearer token to a user."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Authentication required")
    return decode_access_token(credentials.credentials)
