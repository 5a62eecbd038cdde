"""Pydantic schemas for answer submission and evaluation endpoints."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import Field

from mockinterview.models.answer import EvaluationStatus
from mockinterview.schemas.common import CamelModel


class AnswerSubmissionRequest(CamelModel):
    """Request model for submitting an answer to an interview question."""

    interview_id: UUID = Field(..., description="Interview the answer belongs to")
    question_id: UUID = Field(..., description="Question being answered")
    answer_text: str = Field(
        ...,
        min_length=1,
        description="User-submitted answer text",
    )
    confidence: int | None = Field(
        None,
        ge=1,
        le=5,
        strict=True,
        description="Self-reported confidence on a 1-5 scale",
    )


class AnswerSubmissionResponse(CamelModel):
    """Immediate acknowledgement of a submission awaiting evaluation."""

    answer_id: str = Field(..., description="ID of the stored answer")
    status: Literal["evaluating"] = "evaluating"
    message: str = "Your answer is being evaluated..."


class AnswerEvaluationResponse(CamelModel):
    """Polling view of an answer's evaluation state."""

    answer_id: str = Field(..., description="Answer ID")
    status: EvaluationStatus = Field(..., description="Evaluation status")
    score: int | None = Field(None, description="Score in range 0-100")
    feedback: str | None = Field(None, description="Evaluation feedback")
    evaluated_at: datetime | None = Field(None, description="Evaluation timestamp")


class AnswerResponse(CamelModel):
    """Full stored answer record."""

    id: str = Field(..., description="Answer ID")
    interview_id: str = Field(..., description="Associated interview ID")
    question_id: str = Field(..., description="Associated question ID")
    user_id: str = Field(..., description="Submitting user ID")
    answer_text: str = Field(..., description="Submitted answer text")
    confidence: int | None = Field(None, description="Self-reported confidence")
    feedback: str | None = Field(None, description="Evaluation feedback")
    score: int | None = Field(None, description="Score in range 0-100")
    evaluation_status: EvaluationStatus = Field(..., description="Evaluation status")
    submitted_at: datetime = Field(..., description="Submission timestamp")
    evaluated_at: datetime | None = Field(None, description="Evaluation timestamp")
