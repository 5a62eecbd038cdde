"""Answer submission and evaluation polling endpoints."""

from fastapi import APIRouter, BackgroundTasks, Depends
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from mockinterview.db import get_db
from mockinterview.exceptions import NotFoundError, PermissionDeniedError
from mockinterview.repositories.answer import AnswerRepository
from mockinterview.schemas.answer import (
    AnswerEvaluationResponse,
    AnswerSubmissionRequest,
    AnswerSubmissionResponse,
)
from mockinterview.security import AuthenticatedUser, get_current_user
from mockinterview.services.submission import AnswerSubmissionService

router = APIRouter(prefix="/answers", tags=["Answers"])


@router.post(
    "/submit",
    response_model=AnswerSubmissionResponse,
    summary="Submit an answer for evaluation",
    description=(
        "Store the answer as pending and return immediately. "
        "Scoring runs in the background; poll the evaluation endpoint for the result."
    ),
)
async def submit_answer(
    request: AnswerSubmissionRequest,
    background_tasks: BackgroundTasks,
    current_user: AuthenticatedUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> AnswerSubmissionResponse:
    """Persist a pending answer and enqueue its evaluation."""
    logger.info(
        "Answer submission requested",
        user_id=current_user.id,
        interview_id=str(request.interview_id),
        question_id=str(request.question_id),
    )

    submission_service = AnswerSubmissionService()
    answer = await submission_service.submit(
        session=session,
        user_id=current_user.id,
        request=request,
    )

    background_tasks.add_task(submission_service.evaluate_in_background, answer.id)

    logger.info("Background evaluation enqueued", answer_id=answer.id)

    return AnswerSubmissionResponse(answer_id=answer.id)


@router.get(
    "/{answer_id}/evaluation",
    response_model=AnswerEvaluationResponse,
    summary="Get answer evaluation",
    description="Poll the evaluation status and result of a submitted answer.",
)
async def get_answer_evaluation(
    answer_id: str,
    current_user: AuthenticatedUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> AnswerEvaluationResponse:
    """Return the current evaluation state of an answer owned by the caller."""
    answer = await AnswerRepository.get_by_id(session, answer_id)
    if answer is None:
        raise NotFoundError(resource="Answer", resource_id=answer_id)

    if answer.user_id != current_user.id:
        raise PermissionDeniedError()

    return AnswerEvaluationResponse(
        answer_id=answer.id,
        status=answer.evaluation_status,
        score=answer.score,
        feedback=answer.feedback,
        evaluated_at=answer.evaluated_at,
    )
