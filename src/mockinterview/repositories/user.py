"""Repository for user database operations."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mockinterview.models.user import User


class UserRepository:
    """Handle user persistence operations."""

    @staticmethod
    async def create(
        session: AsyncSession,
        email: str,
        password_hash: str,
        name: str,
        college: str | None = None,
        year: str | None = None,
        target_role: str | None = None,
    ) -> User:
        """Create a new user with an already hashed password."""
        user = User(
            email=email,
            password=password_hash,
            name=name,
            college=college,
            year=year,
            target_role=target_role,
        )
        session.add(user)
        await session.flush()
        await session.refresh(user)
        return user

    @staticmethod
    async def get_by_id(session: AsyncSession, user_id: str) -> User | None:
        """Retrieve a user by ID."""
        result = await session.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    @staticmethod
    async def get_by_email(session: AsyncSession, email: str) -> User | None:
        """Retrieve a user by email address."""
        result = await session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()
