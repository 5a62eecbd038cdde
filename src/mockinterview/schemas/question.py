"""Pydantic schemas for question bank endpoints."""

from mockinterview.schemas.common import CamelModel


class QuestionResponse(CamelModel):
    """Response model for a question."""

    id: str
    text: str
    category: str
    difficulty: str
