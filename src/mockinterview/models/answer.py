"""Answer model for storing submitted interview answers."""

from datetime import datetime
from enum import StrEnum

from sqlalchemy import DateTime, Enum, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from mockinterview.models.base import Base, generate_uuid


class EvaluationStatus(StrEnum):
    """Lifecycle position of an answer's evaluation."""

    PENDING = "pending"
    COMPLETED = "completed"
    ERROR = "error"


class Answer(Base):
    """Represents one user's response to one question within an interview.

    ``score``, ``feedback`` and ``evaluated_at`` stay unset while the answer is
    pending and are written together when the evaluation completes.
    """

    __tablename__ = "answers"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    interview_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    question_id: Mapped[str] = mapped_column(String(36), nullable=False)
    user_id: Mapped[str] = mapped_column(String(36), nullable=False)
    answer_text: Mapped[str] = mapped_column(Text, nullable=False)
    confidence: Mapped[int | None] = mapped_column()
    feedback: Mapped[str | None] = mapped_column(Text)
    score: Mapped[int | None] = mapped_column()
    evaluation_status: Mapped[EvaluationStatus] = mapped_column(
        Enum(EvaluationStatus, values_callable=lambda e: [m.value for m in e]),
        default=EvaluationStatus.PENDING,
        nullable=False,
    )
    submitted_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    evaluated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
