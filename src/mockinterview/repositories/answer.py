"""Repository for answer database operations."""

from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mockinterview.exceptions import NotFoundError
from mockinterview.models.answer import Answer, EvaluationStatus
from mockinterview.services.answer_evaluation import AnswerEvaluation


class AnswerRepository:
    """Handle answer persistence operations."""

    @staticmethod
    async def create(
        session: AsyncSession,
        interview_id: str,
        question_id: str,
        user_id: str,
        answer_text: str,
        confidence: int | None = None,
    ) -> Answer:
        """Create a new answer record in PENDING status."""
        answer = Answer(
            interview_id=interview_id,
            question_id=question_id,
            user_id=user_id,
            answer_text=answer_text,
            confidence=confidence,
            evaluation_status=EvaluationStatus.PENDING,
            submitted_at=datetime.now(UTC),
        )
        session.add(answer)
        await session.flush()
        await session.refresh(answer)
        return answer

    @staticmethod
    async def get_by_id(session: AsyncSession, answer_id: str) -> Answer | None:
        """Retrieve an answer by its ID."""
        result = await session.execute(select(Answer).where(Answer.id == answer_id))
        return result.scalar_one_or_none()

    @staticmethod
    async def list_by_interview(
        session: AsyncSession,
        interview_id: str,
    ) -> list[Answer]:
        """Retrieve all answers for an interview in submission order."""
        result = await session.execute(
            select(Answer)
            .where(Answer.interview_id == interview_id)
            .order_by(Answer.submitted_at.asc(), Answer.id.asc())
        )
        return list(result.scalars().all())

    @staticmethod
    async def apply_evaluation(
        session: AsyncSession,
        answer_id: str,
        evaluation: AnswerEvaluation,
    ) -> Answer:
        """Store an evaluation result and mark the answer COMPLETED.

        Raises:
            NotFoundError: If no answer with this ID exists
        """
        answer = await AnswerRepository.get_by_id(session, answer_id)
        if answer is None:
            raise NotFoundError(resource="Answer", resource_id=answer_id)

        answer.score = evaluation.score
        answer.feedback = evaluation.feedback
        answer.evaluation_status = EvaluationStatus.COMPLETED
        answer.evaluated_at = datetime.now(UTC)
        await session.flush()
        return answer

    @staticmethod
    async def mark_error(session: AsyncSession, answer_id: str) -> Answer:
        """Transition an answer whose evaluation could not run to ERROR.

        Raises:
            NotFoundError: If no answer with this ID exists
        """
        answer = await AnswerRepository.get_by_id(session, answer_id)
        if answer is None:
            raise NotFoundError(resource="Answer", resource_id=answer_id)

        answer.evaluation_status = EvaluationStatus.ERROR
        await session.flush()
        return answer
