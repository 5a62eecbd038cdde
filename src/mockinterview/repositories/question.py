"""Repository for question bank operations."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from mockinterview.models.question import Question


class QuestionRepository:
    """Handle question persistence operations."""

    @staticmethod
    async def get_by_id(session: AsyncSession, question_id: str) -> Question | None:
        """Retrieve a question by its ID."""
        result = await session.execute(
            select(Question).where(Question.id == question_id)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def get_random(
        session: AsyncSession,
        category: str,
        difficulty: str,
        count: int,
    ) -> list[Question]:
        """Retrieve up to ``count`` random questions for a category and difficulty."""
        result = await session.execute(
            select(Question)
            .where(Question.category == category, Question.difficulty == difficulty)
            .order_by(func.random())
            .limit(count)
        )
        return list(result.scalars().all())

    @staticmethod
    async def count(session: AsyncSession) -> int:
        """Return the number of stored questions."""
        result = await session.execute(select(func.count()).select_from(Question))
        return result.scalar_one()

    @staticmethod
    async def create_bulk(
        session: AsyncSession,
        questions: list[tuple[str, str, str]],
    ) -> list[Question]:
        """Batch insert (text, category, difficulty) questions."""
        db_questions = [
            Question(text=text, category=category, difficulty=difficulty)
            for text, category, difficulty in questions
        ]
        session.add_all(db_questions)
        await session.flush()
        return db_questions
