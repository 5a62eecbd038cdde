"""Static vocabularies and thresholds used by the answer evaluator."""

from typing import NamedTuple

BASELINE_SCORE = 50
MIN_SCORE = 0
MAX_SCORE = 100


class LengthThresholds(NamedTuple):
    """Word-count thresholds and bonuses for one difficulty."""

    high_words: int
    high_bonus: int
    mid_words: int
    mid_bonus: int


LENGTH_THRESHOLDS: dict[str, LengthThresholds] = {
    "easy": LengthThresholds(high_words=30, high_bonus=20, mid_words=15, mid_bonus=10),
    "medium": LengthThresholds(high_words=60, high_bonus=20, mid_words=40, mid_bonus=10),
    "hard": LengthThresholds(high_words=100, high_bonus=20, mid_words=70, mid_bonus=10),
}
# Unknown difficulties are scored like hard questions.
DEFAULT_LENGTH_THRESHOLDS = LENGTH_THRESHOLDS["hard"]

TECHNICAL_TERMS: tuple[str, ...] = (
    "algorithm",
    "time complexity",
    "space complexity",
    "optimization",
    "database",
    "api",
    "async",
    "promise",
    "callback",
    "inheritance",
    "encapsulation",
    "polymorphism",
    "design pattern",
    "microservice",
    "cache",
    "index",
    "query",
    "transaction",
    "concurrency",
    "thread",
)
TECHNICAL_TERM_POINTS = 3
TECHNICAL_TERM_CAP = 15

STRUCTURE_MARKERS: tuple[str, ...] = ("\n", ":", ";", ",")
STRUCTURE_BONUS = 10

RELEVANCE_MIN_TOKEN_LENGTH = 4
RELEVANCE_POINTS = 5
RELEVANCE_CAP = 15

# Feedback bands, highest first
FEEDBACK_BANDS: tuple[tuple[int, str], ...] = (
    (
        80,
        "Excellent answer! You provided a comprehensive response to the "
        "{category} question. Your explanation demonstrates strong understanding.",
    ),
    (60, "Good response! Your answer shows solid understanding of the topic."),
    (40, "Your answer covers the basics but could be more detailed."),
)
FALLBACK_FEEDBACK = (
    "Your answer needs improvement. Try including more technical depth and examples."
)
SHORT_ANSWER_WORDS = 20
SHORT_ANSWER_ADDENDUM = "Consider providing more details in your answer."

CODE_MARKERS: tuple[str, ...] = ("```", "{", "[")
STRUCTURED_MIN_LINES = 4
TERMINOLOGY_TERMS: tuple[str, ...] = ("algorithm", "complexity", "optimization")
CAUSAL_CONNECTIVES: tuple[str, ...] = ("because", "therefore", "this means")

STRENGTH_CODE = "Good: Included code examples or pseudo-code"
STRENGTH_STRUCTURE = "Good: Well-structured and organized answer"
STRENGTH_TERMINOLOGY = "Good: Used appropriate technical terminology"
STRENGTH_REASONING = "Good: Clear explanations and reasoning"
DEFAULT_STRENGTH = "Attempted to answer the question"

IMPROVEMENT_CODE = "Consider adding code examples to illustrate concepts"
IMPROVEMENT_STRUCTURE = "Try formatting your answer with line breaks for clarity"
IMPROVEMENT_TERMINOLOGY = "Use more technical terminology specific to the domain"
IMPROVEMENT_REASONING = "Explain your reasoning behind key points"
DEFAULT_IMPROVEMENT = "Keep practicing with similar questions"

GENERAL_SUGGESTIONS: tuple[str, ...] = (
    "Practice more {difficulty} level {category} questions",
    "Review resources and documentation for this topic",
    "Explain your answers out loud to practice communication",
    "Mock interviews help - they simulate real interview conditions",
)
HARD_SUGGESTIONS: tuple[str, ...] = (
    "Work through similar problems step by step",
    "Understand the core concepts before attempting harder variants",
)

PROGRESS_STEPS = 5
