"""Account creation and credential checks."""

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from mockinterview.exceptions import AuthenticationError, DomainValidationError
from mockinterview.models.user import User
from mockinterview.repositories.user import UserRepository
from mockinterview.schemas.auth import LoginRequest, SignupRequest
from mockinterview.security import create_access_token, hash_password, verify_password


class AuthService:
    """Register users and exchange credentials for access tokens."""

    @staticmethod
    async def signup(session: AsyncSession, request: SignupRequest) -> tuple[User, str]:
        """Create an account and return it with a fresh token.

        Raises:
            DomainValidationError: If the email is already registered
        """
        email = request.email.lower()
        if await UserRepository.get_by_email(session, email) is not None:
            raise DomainValidationError("Email already registered", field="email")

        user = await UserRepository.create(
            session=session,
            email=email,
            password_hash=hash_password(request.password),
            name=request.name,
            college=request.college,
            year=request.year,
            target_role=request.target_role,
        )
        logger.info("User registered", user_id=user.id)
        return user, create_access_token(user.id, user.email)

    @staticmethod
    async def login(session: AsyncSession, request: LoginRequest) -> tuple[User, str]:
        """Verify credentials and return the user with a fresh token.

        Raises:
            AuthenticationError: If the email is unknown or the password is wrong
        """
        user = await UserRepository.get_by_email(session, request.email.lower())
        if user is None or not verify_password(request.password, user.password):
            logger.info("Login rejected")
            raise AuthenticationError("Invalid email or password")

        logger.info("User logged in", user_id=user.id)
        return user, create_access_token(user.id, user.email)
