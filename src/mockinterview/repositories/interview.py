"""Repository for interview database operations."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mockinterview.models.interview import Interview


class InterviewRepository:
    """Handle interview persistence operations."""

    @staticmethod
    async def create(
        session: AsyncSession,
        user_id: str,
        category: str,
        difficulty: str,
        duration: int,
        questions_answered: int,
        total_questions: int,
        average_rating: int,
        ratings: list[int],
    ) -> Interview:
        """Create a record for a finished interview session."""
        interview = Interview(
            user_id=user_id,
            category=category,
            difficulty=difficulty,
            duration=duration,
            questions_answered=questions_answered,
            total_questions=total_questions,
            average_rating=average_rating,
            ratings=ratings,
        )
        session.add(interview)
        await session.flush()
        await session.refresh(interview)
        return interview

    @staticmethod
    async def get_by_id(session: AsyncSession, interview_id: str) -> Interview | None:
        """Retrieve an interview by its ID."""
        result = await session.execute(
            select(Interview).where(Interview.id == interview_id)
        )
        return result.scalar_one_or_none()
