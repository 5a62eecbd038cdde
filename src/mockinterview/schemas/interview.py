"""Pydantic schemas for interview endpoints."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from mockinterview.models.question import Difficulty
from mockinterview.schemas.common import CamelModel


class InterviewCreateRequest(CamelModel):
    """Request model for saving a finished interview session."""

    category: str = Field(..., min_length=1)
    difficulty: Difficulty
    duration: Literal[5, 10, 15] = Field(..., description="Duration in minutes")
    questions_answered: int = Field(..., ge=0)
    total_questions: int = Field(..., ge=0)
    average_rating: int = Field(..., ge=0)
    ratings: list[int] = Field(default_factory=list)


class InterviewResponse(CamelModel):
    """Response model for a stored interview."""

    id: str
    user_id: str
    category: str
    difficulty: str
    duration: int
    questions_answered: int
    total_questions: int
    average_rating: int
    ratings: list[int]
    completed_at: datetime | None = None
