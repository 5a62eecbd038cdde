"""Database models package."""

from mockinterview.models.answer import Answer, EvaluationStatus
from mockinterview.models.base import Base
from mockinterview.models.interview import Interview
from mockinterview.models.question import Question
from mockinterview.models.user import User

__all__ = ["Answer", "Base", "EvaluationStatus", "Interview", "Question", "User"]
