"""Heuristic answer evaluation: score, feedback, strengths and suggestions."""

import re
import time
from collections.abc import Callable

from pydantic import BaseModel, Field

from mockinterview.services import evaluation_rules as rules

ProgressCallback = Callable[[int], None]

_WHITESPACE_RE = re.compile(r"\s+")


class AnswerEvaluation(BaseModel):
    """Validated structure for an answer evaluation."""

    score: int = Field(ge=rules.MIN_SCORE, le=rules.MAX_SCORE)
    feedback: str
    strengths: list[str]
    improvements: list[str]
    suggestions: list[str]
    evaluation_time_ms: float = Field(ge=0.0)


def count_words(text: str) -> int:
    """Count whitespace-separated pieces of the stripped text.

    An empty answer still counts as one word.
    """
    return len(_WHITESPACE_RE.split(text.strip()))


class AnswerEvaluator:
    """Deterministic scorer for free-text interview answers.

    Evaluation never raises for string input and never touches shared state,
    so the same answer and question always produce the same result.
    """

    def evaluate_answer(
        self,
        answer_text: str,
        question_text: str,
        difficulty: str,
        category: str,
        on_progress: ProgressCallback | None = None,
    ) -> AnswerEvaluation:
        """Evaluate an answer against its question context.

        Args:
            answer_text: The submitted answer
            question_text: Text of the question being answered
            difficulty: Question difficulty (easy, medium or hard)
            category: Question category, used in feedback and suggestions
            on_progress: Optional observer receiving percentages up to 100

        Returns:
            AnswerEvaluation with score in [0, 100] and feedback lists
        """
        start_time = time.perf_counter()

        if on_progress is not None:
            for step in range(1, rules.PROGRESS_STEPS + 1):
                on_progress(step * 100 // rules.PROGRESS_STEPS)

        score = self.calculate_score(answer_text, question_text, difficulty)
        feedback = self.generate_feedback(answer_text, score, category, difficulty)
        strengths, improvements = self.analyze_answer(answer_text, difficulty)
        suggestions = self.generate_suggestions(category, difficulty)

        return AnswerEvaluation(
            score=score,
            feedback=feedback,
            strengths=strengths,
            improvements=improvements,
            suggestions=suggestions,
            evaluation_time_ms=(time.perf_counter() - start_time) * 1000,
        )

    def calculate_score(
        self,
        answer_text: str,
        question_text: str,
        difficulty: str,
    ) -> int:
        """Compute the capped additive score for an answer."""
        score = rules.BASELINE_SCORE
        score += self.length_bonus(count_words(answer_text), difficulty)
        score += self.technical_bonus(answer_text)
        score += self.structure_bonus(answer_text)
        score += self.relevance_bonus(answer_text, question_text)
        return min(max(score, rules.MIN_SCORE), rules.MAX_SCORE)

    @staticmethod
    def length_bonus(word_count: int, difficulty: str) -> int:
        """Return the difficulty-dependent bonus for answer length."""
        thresholds = rules.LENGTH_THRESHOLDS.get(
            difficulty, rules.DEFAULT_LENGTH_THRESHOLDS
        )
        if word_count >= thresholds.high_words:
            return thresholds.high_bonus
        if word_count >= thresholds.mid_words:
            return thresholds.mid_bonus
        return 0

    @staticmethod
    def count_technical_terms(text: str) -> int:
        """Count distinct technical terms present in the text."""
        lower_text = text.lower()
        return sum(1 for term in rules.TECHNICAL_TERMS if term in lower_text)

    def technical_bonus(self, answer_text: str) -> int:
        """Return points for technical vocabulary, capped."""
        return min(
            self.count_technical_terms(answer_text) * rules.TECHNICAL_TERM_POINTS,
            rules.TECHNICAL_TERM_CAP,
        )

    @staticmethod
    def structure_bonus(answer_text: str) -> int:
        """Return the flat bonus when any structure marker is present."""
        if any(marker in answer_text for marker in rules.STRUCTURE_MARKERS):
            return rules.STRUCTURE_BONUS
        return 0

    @staticmethod
    def relevance_bonus(answer_text: str, question_text: str) -> int:
        """Return points for question terms echoed in the answer, capped.

        Matching is a case-insensitive substring check, so a question term
        embedded in a longer answer word still counts.
        """
        lower_answer = answer_text.lower()
        question_terms = [
            term
            for term in question_text.split()
            if len(term) >= rules.RELEVANCE_MIN_TOKEN_LENGTH
        ]
        matches = sum(1 for term in question_terms if term.lower() in lower_answer)
        return min(matches * rules.RELEVANCE_POINTS, rules.RELEVANCE_CAP)

    @staticmethod
    def generate_feedback(
        answer_text: str,
        score: int,
        category: str,
        difficulty: str,
    ) -> str:
        """Pick the feedback sentence for the score band."""
        feedback = rules.FALLBACK_FEEDBACK
        for threshold, template in rules.FEEDBACK_BANDS:
            if score >= threshold:
                feedback = template.format(category=category)
                break

        if count_words(answer_text) < rules.SHORT_ANSWER_WORDS and difficulty != "easy":
            feedback = f"{feedback} {rules.SHORT_ANSWER_ADDENDUM}"

        return feedback

    @staticmethod
    def analyze_answer(
        answer_text: str,
        difficulty: str,
    ) -> tuple[list[str], list[str]]:
        """Derive strengths and improvement areas from structural cues."""
        strengths: list[str] = []
        improvements: list[str] = []
        lower_text = answer_text.lower()

        if any(marker in answer_text for marker in rules.CODE_MARKERS):
            strengths.append(rules.STRENGTH_CODE)
        elif difficulty != "easy":
            improvements.append(rules.IMPROVEMENT_CODE)

        if len(answer_text.split("\n")) >= rules.STRUCTURED_MIN_LINES:
            strengths.append(rules.STRENGTH_STRUCTURE)
        else:
            improvements.append(rules.IMPROVEMENT_STRUCTURE)

        if any(term in lower_text for term in rules.TERMINOLOGY_TERMS):
            strengths.append(rules.STRENGTH_TERMINOLOGY)
        elif difficulty in ("medium", "hard"):
            improvements.append(rules.IMPROVEMENT_TERMINOLOGY)

        if any(connective in answer_text for connective in rules.CAUSAL_CONNECTIVES):
            strengths.append(rules.STRENGTH_REASONING)
        else:
            improvements.append(rules.IMPROVEMENT_REASONING)

        if not strengths:
            strengths.append(rules.DEFAULT_STRENGTH)
        if not improvements:
            improvements.append(rules.DEFAULT_IMPROVEMENT)

        return strengths, improvements

    @staticmethod
    def generate_suggestions(category: str, difficulty: str) -> list[str]:
        """Return the practice tips for a category and difficulty."""
        suggestions = [
            tip.format(category=category, difficulty=difficulty)
            for tip in rules.GENERAL_SUGGESTIONS
        ]
        if difficulty == "hard":
            suggestions.extend(rules.HARD_SUGGESTIONS)
        return suggestions
