"""Unit tests for the heuristic answer evaluator."""

import pytest

from mockinterview.services import evaluation_rules as rules
from mockinterview.services.answer_evaluation import AnswerEvaluator, count_words

# 32 words, one technical term ("algorithm"), one comma, nothing from the question
EASY_ANSWER = (
    "I would pick the algorithm that fits the data, then test it on small "
    "inputs first and compare the results with what I expected before moving "
    "on to the larger cases ahead"
)
UNRELATED_QUESTION = "Name a sorting method"


@pytest.fixture
def evaluator() -> AnswerEvaluator:
    """Create an evaluator instance."""
    return AnswerEvaluator()


class TestWordCount:
    """Tests for whitespace word counting."""

    def test_counts_whitespace_runs_once(self) -> None:
        assert count_words("one   two\n\tthree") == 3

    def test_ignores_surrounding_whitespace(self) -> None:
        assert count_words("  padded answer  ") == 2

    def test_empty_text_counts_as_one(self) -> None:
        """Naive splitting yields a single empty piece."""
        assert count_words("") == 1
        assert count_words("   ") == 1


class TestScoreComputation:
    """Tests for the additive score."""

    def test_easy_long_answer_with_term_and_comma(self, evaluator: AnswerEvaluator) -> None:
        """Length +20, technical +3, structure +10 on top of the baseline."""
        assert count_words(EASY_ANSWER) == 32

        result = evaluator.evaluate_answer(
            EASY_ANSWER, UNRELATED_QUESTION, "easy", "DSA"
        )

        assert result.score == 83
        assert result.feedback.startswith("Excellent answer!")
        assert "DSA question" in result.feedback

    def test_short_hard_answer_stays_at_baseline(self, evaluator: AnswerEvaluator) -> None:
        """No bonus applies, so the baseline lands in the 'covers the basics' band."""
        result = evaluator.evaluate_answer(
            "I don't know.",
            "Explain time complexity of quicksort",
            "hard",
            "DSA",
        )

        assert result.score == 50
        assert result.feedback == (
            "Your answer covers the basics but could be more detailed. "
            "Consider providing more details in your answer."
        )

    def test_empty_answer_scores_baseline(self, evaluator: AnswerEvaluator) -> None:
        result = evaluator.evaluate_answer("", "Explain recursion", "medium", "DSA")

        assert result.score == rules.BASELINE_SCORE

    def test_maximal_answer_is_clamped_to_100(self, evaluator: AnswerEvaluator) -> None:
        question = "Describe caching layers and database indexes"
        answer = (
            "caching layers database indexes describe: "
            + " ".join(rules.TECHNICAL_TERMS)
            + " filler" * 100
        )

        result = evaluator.evaluate_answer(answer, question, "hard", "System Design")

        assert result.score == 100

    @pytest.mark.parametrize(
        ("difficulty", "words", "expected"),
        [
            ("easy", 14, 0),
            ("easy", 15, 10),
            ("easy", 29, 10),
            ("easy", 30, 20),
            ("medium", 39, 0),
            ("medium", 40, 10),
            ("medium", 60, 20),
            ("hard", 69, 0),
            ("hard", 70, 10),
            ("hard", 100, 20),
        ],
    )
    def test_length_bonus_thresholds(
        self, evaluator: AnswerEvaluator, difficulty: str, words: int, expected: int
    ) -> None:
        assert evaluator.length_bonus(words, difficulty) == expected

    def test_unknown_difficulty_uses_hard_thresholds(
        self, evaluator: AnswerEvaluator
    ) -> None:
        assert evaluator.length_bonus(69, "expert") == 0
        assert evaluator.length_bonus(70, "expert") == 10

    def test_technical_bonus_counts_distinct_terms(
        self, evaluator: AnswerEvaluator
    ) -> None:
        text = "The database query uses an index. The database again."

        assert evaluator.count_technical_terms(text) == 3
        assert evaluator.technical_bonus(text) == 9

    def test_technical_bonus_is_case_insensitive(self, evaluator: AnswerEvaluator) -> None:
        assert evaluator.technical_bonus("CONCURRENCY and Design Pattern") == 6

    def test_technical_bonus_capped(self, evaluator: AnswerEvaluator) -> None:
        """Every known term present still contributes at most the cap."""
        text = " ".join(rules.TECHNICAL_TERMS)

        assert evaluator.count_technical_terms(text) == len(rules.TECHNICAL_TERMS)
        assert evaluator.technical_bonus(text) == rules.TECHNICAL_TERM_CAP

    @pytest.mark.parametrize("marker", ["\n", ":", ";", ","])
    def test_structure_bonus_markers(self, evaluator: AnswerEvaluator, marker: str) -> None:
        assert evaluator.structure_bonus(f"first{marker}second") == rules.STRUCTURE_BONUS

    def test_no_structure_bonus_without_markers(self, evaluator: AnswerEvaluator) -> None:
        assert evaluator.structure_bonus("plain sentence.") == 0

    def test_relevance_ignores_short_tokens(self, evaluator: AnswerEvaluator) -> None:
        """Tokens of three characters or fewer never count."""
        assert evaluator.relevance_bonus("the use of map", "Use the map") == 0

    def test_relevance_matches_substrings(self, evaluator: AnswerEvaluator) -> None:
        """A question term inside an unrelated longer word still counts."""
        bonus = evaluator.relevance_bonus(
            "Tail-recursions are neat", "Explain recursion basics"
        )

        assert bonus == rules.RELEVANCE_POINTS

    def test_relevance_capped(self, evaluator: AnswerEvaluator) -> None:
        question = " ".join(f"term{i:02d}" for i in range(40))
        answer = question.upper()

        assert evaluator.relevance_bonus(answer, question) == rules.RELEVANCE_CAP


class TestScoreProperties:
    """Property-style checks over many inputs."""

    SAMPLE_ANSWERS = (
        "",
        "a",
        "Because the algorithm is O(n log n), therefore it scales.",
        "```python\nprint('hi')\n```\nline\nline",
        " ".join(["word"] * 250),
        "api cache index query thread async promise callback, " * 10,
    )
    QUESTIONS = (
        "",
        "Explain time complexity of quicksort",
        "What is an index in a database query planner?",
    )

    @pytest.mark.parametrize("difficulty", ["easy", "medium", "hard", "unknown"])
    def test_score_within_bounds(self, evaluator: AnswerEvaluator, difficulty: str) -> None:
        for answer in self.SAMPLE_ANSWERS:
            for question in self.QUESTIONS:
                score = evaluator.calculate_score(answer, question, difficulty)
                assert 0 <= score <= 100

    @pytest.mark.parametrize("difficulty", ["easy", "medium", "hard"])
    def test_score_non_decreasing_in_word_count(
        self, evaluator: AnswerEvaluator, difficulty: str
    ) -> None:
        high = rules.LENGTH_THRESHOLDS[difficulty].high_words
        scores = [
            evaluator.calculate_score(" ".join(["word"] * n), "Explain this", difficulty)
            for n in range(1, high + 5)
        ]

        assert scores == sorted(scores)

    def test_evaluation_is_deterministic(self, evaluator: AnswerEvaluator) -> None:
        answer = "Because a hash map uses buckets, lookups are fast: O(1) on average."
        question = "Explain how a hash map handles collisions."

        first = evaluator.evaluate_answer(answer, question, "medium", "DSA")
        second = evaluator.evaluate_answer(answer, question, "medium", "DSA")

        assert first.score == second.score
        assert first.feedback == second.feedback
        assert first.strengths == second.strengths
        assert first.improvements == second.improvements
        assert first.suggestions == second.suggestions


class TestFeedback:
    """Tests for feedback band selection."""

    @pytest.mark.parametrize(
        ("score", "prefix"),
        [
            (100, "Excellent answer!"),
            (80, "Excellent answer!"),
            (79, "Good response!"),
            (60, "Good response!"),
            (59, "Your answer covers the basics"),
            (40, "Your answer covers the basics"),
            (39, "Your answer needs improvement."),
            (0, "Your answer needs improvement."),
        ],
    )
    def test_feedback_bands(self, evaluator: AnswerEvaluator, score: int, prefix: str) -> None:
        feedback = evaluator.generate_feedback(
            " ".join(["word"] * 25), score, "Java", "medium"
        )

        assert feedback.startswith(prefix)
        assert rules.SHORT_ANSWER_ADDENDUM not in feedback

    def test_short_answer_addendum_skipped_for_easy(self, evaluator: AnswerEvaluator) -> None:
        feedback = evaluator.generate_feedback("too short", 50, "HR", "easy")

        assert rules.SHORT_ANSWER_ADDENDUM not in feedback

    def test_short_answer_addendum_for_medium(self, evaluator: AnswerEvaluator) -> None:
        feedback = evaluator.generate_feedback("too short", 50, "HR", "medium")

        assert feedback.endswith(rules.SHORT_ANSWER_ADDENDUM)


class TestStrengthsAndImprovements:
    """Tests for the four structural checks."""

    def test_well_rounded_answer_gets_only_strengths(
        self, evaluator: AnswerEvaluator
    ) -> None:
        answer = (
            "The algorithm works like this:\n"
            "```\nsort(items)\n```\n"
            "It is fast because it splits the input."
        )

        strengths, improvements = evaluator.analyze_answer(answer, "hard")

        assert strengths == [
            rules.STRENGTH_CODE,
            rules.STRENGTH_STRUCTURE,
            rules.STRENGTH_TERMINOLOGY,
            rules.STRENGTH_REASONING,
        ]
        assert improvements == [rules.DEFAULT_IMPROVEMENT]

    def test_bare_answer_gets_default_strength(self, evaluator: AnswerEvaluator) -> None:
        strengths, improvements = evaluator.analyze_answer("no idea", "hard")

        assert strengths == [rules.DEFAULT_STRENGTH]
        assert improvements == [
            rules.IMPROVEMENT_CODE,
            rules.IMPROVEMENT_STRUCTURE,
            rules.IMPROVEMENT_TERMINOLOGY,
            rules.IMPROVEMENT_REASONING,
        ]

    def test_easy_answers_not_asked_for_code_or_terminology(
        self, evaluator: AnswerEvaluator
    ) -> None:
        _, improvements = evaluator.analyze_answer("no idea", "easy")

        assert improvements == [rules.IMPROVEMENT_STRUCTURE, rules.IMPROVEMENT_REASONING]

    def test_brackets_count_as_code(self, evaluator: AnswerEvaluator) -> None:
        strengths, _ = evaluator.analyze_answer("use arr[0]", "medium")

        assert rules.STRENGTH_CODE in strengths

    def test_exactly_three_lines_is_not_structured(self, evaluator: AnswerEvaluator) -> None:
        _, improvements = evaluator.analyze_answer("a\nb\nc", "easy")

        assert rules.IMPROVEMENT_STRUCTURE in improvements


class TestSuggestions:
    """Tests for practice tips."""

    def test_general_suggestions_are_templated(self, evaluator: AnswerEvaluator) -> None:
        suggestions = evaluator.generate_suggestions("Java", "medium")

        assert len(suggestions) == 4
        assert suggestions[0] == "Practice more medium level Java questions"

    def test_hard_questions_get_extra_tips(self, evaluator: AnswerEvaluator) -> None:
        suggestions = evaluator.generate_suggestions("DSA", "hard")

        assert len(suggestions) == 6
        assert suggestions[-2:] == list(rules.HARD_SUGGESTIONS)


class TestProgressReporting:
    """Tests for the optional progress observer."""

    def test_progress_reported_in_five_steps(self, evaluator: AnswerEvaluator) -> None:
        seen: list[int] = []

        result = evaluator.evaluate_answer(
            "answer", "question", "easy", "HR", on_progress=seen.append
        )

        assert seen == [20, 40, 60, 80, 100]
        assert result.evaluation_time_ms >= 0

    def test_progress_does_not_change_result(self, evaluator: AnswerEvaluator) -> None:
        silent = evaluator.evaluate_answer(EASY_ANSWER, UNRELATED_QUESTION, "easy", "DSA")
        observed = evaluator.evaluate_answer(
            EASY_ANSWER, UNRELATED_QUESTION, "easy", "DSA", on_progress=lambda _p: None
        )

        assert silent.score == observed.score
        assert silent.feedback == observed.feedback
