"""Interview session endpoints."""

from fastapi import APIRouter, Depends
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from mockinterview.db import get_db
from mockinterview.exceptions import NotFoundError, PermissionDeniedError
from mockinterview.models.interview import Interview
from mockinterview.repositories.answer import AnswerRepository
from mockinterview.repositories.interview import InterviewRepository
from mockinterview.schemas.answer import AnswerResponse
from mockinterview.schemas.interview import InterviewCreateRequest, InterviewResponse
from mockinterview.security import AuthenticatedUser, get_current_user

router = APIRouter(prefix="/interviews", tags=["Interviews"])


async def _get_owned_interview(
    session: AsyncSession,
    interview_id: str,
    user_id: str,
) -> Interview:
    """Load an interview, enforcing that the caller owns it."""
    interview = await InterviewRepository.get_by_id(session, interview_id)
    if interview is None:
        raise NotFoundError(resource="Interview", resource_id=interview_id)
    if interview.user_id != user_id:
        raise PermissionDeniedError()
    return interview


@router.post(
    "",
    response_model=InterviewResponse,
    summary="Save a finished interview",
)
async def create_interview(
    request: InterviewCreateRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> InterviewResponse:
    """Store a completed interview session for the caller."""
    interview = await InterviewRepository.create(
        session=session,
        user_id=current_user.id,
        category=request.category,
        difficulty=str(request.difficulty),
        duration=request.duration,
        questions_answered=request.questions_answered,
        total_questions=request.total_questions,
        average_rating=request.average_rating,
        ratings=request.ratings,
    )

    logger.info(
        "Interview saved",
        interview_id=interview.id,
        user_id=current_user.id,
    )

    return InterviewResponse.model_validate(interview)


@router.get(
    "/{interview_id}",
    response_model=InterviewResponse,
    summary="Get an interview",
)
async def get_interview(
    interview_id: str,
    current_user: AuthenticatedUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> InterviewResponse:
    """Return an interview owned by the caller."""
    interview = await _get_owned_interview(session, interview_id, current_user.id)
    return InterviewResponse.model_validate(interview)


@router.get(
    "/{interview_id}/answers",
    response_model=list[AnswerResponse],
    summary="List answers for an interview",
    description="Return every answer submitted within an interview, oldest first.",
)
async def list_interview_answers(
    interview_id: str,
    current_user: AuthenticatedUser = Depends(get_current_user),
    session: AsyncSession = Depends(get_db),
) -> list[AnswerResponse]:
    """Return all answers of an interview owned by the caller."""
    await _get_owned_interview(session, interview_id, current_user.id)
    answers = await AnswerRepository.list_by_interview(session, interview_id)
    return [AnswerResponse.model_validate(answer) for answer in answers]
