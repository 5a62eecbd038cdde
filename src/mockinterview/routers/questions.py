"""Question bank endpoints."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from mockinterview.config import settings
from mockinterview.db import get_db
from mockinterview.exceptions import DomainValidationError
from mockinterview.repositories.question import QuestionRepository
from mockinterview.schemas.question import QuestionResponse

router = APIRouter(prefix="/questions", tags=["Questions"])


@router.get(
    "/random",
    response_model=list[QuestionResponse],
    summary="Draw random questions",
    description="Return random questions for a category and difficulty.",
)
async def get_random_questions(
    category: str | None = None,
    difficulty: str | None = None,
    count: int = Query(
        default=settings.default_question_count,
        ge=1,
        le=settings.max_question_count,
    ),
    session: AsyncSession = Depends(get_db),
) -> list[QuestionResponse]:
    """Draw up to ``count`` questions matching the filters."""
    if not category or not difficulty:
        raise DomainValidationError("Category and difficulty are required")

    questions = await QuestionRepository.get_random(
        session, category=category, difficulty=difficulty, count=count
    )
    return [QuestionResponse.model_validate(q) for q in questions]
