"""Service layer for business logic."""

from mockinterview.services.answer_evaluation import AnswerEvaluation, AnswerEvaluator

__all__ = ["AnswerEvaluation", "AnswerEvaluator"]
