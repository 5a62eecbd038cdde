"""Repository layer for database operations."""

from mockinterview.repositories.answer import AnswerRepository
from mockinterview.repositories.interview import InterviewRepository
from mockinterview.repositories.question import QuestionRepository
from mockinterview.repositories.user import UserRepository

__all__ = [
    "AnswerRepository",
    "InterviewRepository",
    "QuestionRepository",
    "UserRepository",
]
