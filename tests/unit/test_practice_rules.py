"""
Unit Tests for the Practice Rules

Tests the performance tracker, difficulty selector and answer quality mapping.
"""

import itertools

import pytest

from core.practice import (
    Difficulty,
    SessionState,
    answer_quality,
    compute_performance_percent,
    is_failed_quality,
    next_difficulty,
    parse_difficulty,
    record_answer,
)


class TestPerformanceTracker:
    """Test suite for the rolling accuracy percentage."""

    def test_neutral_before_first_answer(self):
        assert compute_performance_percent(0, 0) == 0
        assert SessionState().performance_percent == 0

    def test_percent_matches_rounded_ratio_for_every_prefix(self):
        """Test performance after k answers equals round(100 * correct / k)."""
        outcomes = [True, False, True, True, False, False, True, True, True, False, True]
        state = SessionState()
        correct = 0
        for k, outcome in enumerate(outcomes, start=1):
            record_answer(state, outcome)
            correct += int(outcome)
            assert state.answered_count == k
            assert state.correct_count == correct
            assert state.performance_percent == int(100 * correct / k + 0.5)

    def test_rounds_half_up(self):
        # 1/8 = 12.5% and 5/8 = 62.5%; banker's rounding would give 12 and 62
        assert compute_performance_percent(1, 8) == 13
        assert compute_performance_percent(5, 8) == 63
        assert compute_performance_percent(2, 3) == 67
        assert compute_performance_percent(1, 3) == 33

    def test_record_answer_returns_same_state(self):
        state = SessionState()
        assert record_answer(state, True) is state
        assert state.performance_percent == 100


class TestDifficultySelector:
    """Test suite for next_difficulty."""

    def test_promote_medium_to_hard(self):
        assert next_difficulty(True, 80, Difficulty.MEDIUM) == Difficulty.HARD
        assert next_difficulty(True, 79, Difficulty.MEDIUM) == Difficulty.MEDIUM

    def test_promote_easy_to_medium(self):
        assert next_difficulty(True, 70, Difficulty.EASY) == Difficulty.MEDIUM
        assert next_difficulty(True, 69, Difficulty.EASY) == Difficulty.EASY

    def test_demote_medium_to_easy(self):
        assert next_difficulty(False, 49, Difficulty.MEDIUM) == Difficulty.EASY
        assert next_difficulty(False, 50, Difficulty.MEDIUM) == Difficulty.MEDIUM

    def test_demote_hard_to_medium(self):
        assert next_difficulty(False, 59, Difficulty.HARD) == Difficulty.MEDIUM
        assert next_difficulty(False, 60, Difficulty.HARD) == Difficulty.HARD

    def test_hard_stays_on_correct_and_easy_stays_on_wrong(self):
        assert next_difficulty(True, 100, Difficulty.HARD) == Difficulty.HARD
        assert next_difficulty(False, 0, Difficulty.EASY) == Difficulty.EASY

    def test_wrong_answer_never_promotes(self):
        assert next_difficulty(False, 100, Difficulty.EASY) == Difficulty.EASY
        assert next_difficulty(False, 100, Difficulty.MEDIUM) == Difficulty.MEDIUM

    @pytest.mark.parametrize("current", list(Difficulty))
    def test_moves_at_most_one_tier(self, current):
        for correct, percent in itertools.product([True, False], range(0, 101)):
            result = next_difficulty(correct, percent, current)
            assert abs(int(result) - int(current)) <= 1

    def test_three_correct_from_easy_reaches_medium_first(self):
        """Test Easy never jumps straight to Hard."""
        state = SessionState(current_difficulty=Difficulty.EASY)
        path = []
        for _ in range(3):
            record_answer(state, True)
            state.current_difficulty = next_difficulty(True, state.performance_percent, state.current_difficulty)
            path.append(state.current_difficulty)
        assert state.performance_percent == 100
        assert path == [Difficulty.MEDIUM, Difficulty.HARD, Difficulty.HARD]


class TestAnswerQuality:
    """Test suite for the 0-5 quality mapping."""

    @pytest.mark.parametrize("correct,difficulty,expected", [
        (True, Difficulty.HARD, 5),
        (True, Difficulty.MEDIUM, 4),
        (True, Difficulty.EASY, 3),
        (False, Difficulty.HARD, 2),
        (False, Difficulty.MEDIUM, 1),
        (False, Difficulty.EASY, 0),
    ])
    def test_quality_table(self, correct, difficulty, expected):
        assert answer_quality(correct, difficulty) == expected

    def test_failed_quality_boundary(self):
        assert is_failed_quality(0)
        assert is_failed_quality(2)
        assert not is_failed_quality(3)


class TestParseDifficulty:
    """Test suite for difficulty label parsing."""

    @pytest.mark.parametrize("value,expected", [
        ("Einfach", Difficulty.EASY),
        ("Mittel", Difficulty.MEDIUM),
        ("Schwer", Difficulty.HARD),
        ("easy", Difficulty.EASY),
        (" HARD ", Difficulty.HARD),
        (2, Difficulty.MEDIUM),
        (Difficulty.HARD, Difficulty.HARD),
    ])
    def test_accepts_known_labels(self, value, expected):
        assert parse_difficulty(value) == expected

    @pytest.mark.parametrize("value", ["Extrem", "", None, True, 4])
    def test_rejects_unknown_values(self, value):
        with pytest.raises(ValueError):
            parse_difficulty(value)

    def test_german_labels(self):
        assert Difficulty.EASY.label == "Einfach"
        assert Difficulty.HARD.label == "Schwer"
