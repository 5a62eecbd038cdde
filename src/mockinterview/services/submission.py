"""Answer submission lifecycle: persist as pending, evaluate in the background.

The request path only creates the pending record. Scoring happens in
``evaluate_in_background`` after the response has been sent, and moves the
record to COMPLETED, or to ERROR when the question is missing or scoring
fails.
"""

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from mockinterview.db import async_session_factory
from mockinterview.models.answer import Answer, EvaluationStatus
from mockinterview.repositories.answer import AnswerRepository
from mockinterview.repositories.question import QuestionRepository
from mockinterview.schemas.answer import AnswerSubmissionRequest
from mockinterview.services.answer_evaluation import AnswerEvaluator


class AnswerSubmissionService:
    """Create answer records and drive their evaluation."""

    def __init__(
        self,
        evaluator: AnswerEvaluator | None = None,
        session_factory: async_sessionmaker[AsyncSession] | None = None,
    ) -> None:
        self.evaluator = evaluator or AnswerEvaluator()
        self.session_factory = session_factory or async_session_factory

    async def submit(
        self,
        session: AsyncSession,
        user_id: str,
        request: AnswerSubmissionRequest,
    ) -> Answer:
        """Store a validated submission as a PENDING answer."""
        answer = await AnswerRepository.create(
            session=session,
            interview_id=str(request.interview_id),
            question_id=str(request.question_id),
            user_id=user_id,
            answer_text=request.answer_text,
            confidence=request.confidence,
        )
        # The background evaluation opens its own session, so the row has to
        # be committed before the response is sent.
        await session.commit()

        logger.info(
            "Answer stored as pending",
            answer_id=answer.id,
            interview_id=answer.interview_id,
            question_id=answer.question_id,
        )
        return answer

    async def evaluate_in_background(self, answer_id: str) -> None:
        """Score a pending answer and record the outcome.

        Uses its own database session because BackgroundTasks run after
        the request session has already been closed.
        """
        async with self.session_factory() as session:
            try:
                answer = await AnswerRepository.get_by_id(session, answer_id)
                if answer is None:
                    logger.error("Answer vanished before evaluation", answer_id=answer_id)
                    return
                if answer.evaluation_status != EvaluationStatus.PENDING:
                    logger.warning(
                        "Skipping evaluation of non-pending answer",
                        answer_id=answer_id,
                        status=answer.evaluation_status,
                    )
                    return

                question = await QuestionRepository.get_by_id(
                    session, answer.question_id
                )
                if question is None:
                    logger.error(
                        "Question not found for answer evaluation",
                        answer_id=answer_id,
                        question_id=answer.question_id,
                    )
                    await AnswerRepository.mark_error(session, answer_id)
                    await session.commit()
                    return

                logger.info(
                    "Evaluating answer",
                    answer_id=answer_id,
                    question_id=question.id,
                    difficulty=question.difficulty,
                )

                evaluation = self.evaluator.evaluate_answer(
                    answer_text=answer.answer_text,
                    question_text=question.text,
                    difficulty=question.difficulty,
                    category=question.category,
                )
                await AnswerRepository.apply_evaluation(session, answer_id, evaluation)
                await session.commit()

                logger.info(
                    "Answer evaluation completed",
                    answer_id=answer_id,
                    score=evaluation.score,
                    evaluation_time_ms=round(evaluation.evaluation_time_ms, 2),
                )

            except Exception as exc:
                await session.rollback()
                error_msg = f"{type(exc).__name__}: {exc}"
                logger.error(
                    "Answer evaluation failed",
                    answer_id=answer_id,
                    error=error_msg,
                )
                try:
                    await AnswerRepository.mark_error(session, answer_id)
                    await session.commit()
                except Exception as status_exc:
                    logger.error(
                        "Failed to update answer status to ERROR",
                        answer_id=answer_id,
                        error=str(status_exc),
                    )
