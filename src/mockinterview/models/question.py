"""Question model for the interview question bank."""

from enum import StrEnum

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from mockinterview.models.base import Base, generate_uuid


class Difficulty(StrEnum):
    """Difficulty level of a question or interview."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


CATEGORIES = ("DSA", "Web Development", "Java", "System Design", "HR")


class Question(Base):
    """Represents a single interview question."""

    __tablename__ = "questions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    difficulty: Mapped[str] = mapped_column(String(16), nullable=False, index=True)
