"""
Difficulty Selector

Maps the latest answer outcome and the rolling accuracy to the next target
difficulty. Transitions only ever move one tier at a time.
"""

from __future__ import annotations

from core.practice.constants import (
    DEMOTE_TO_EASY_PERCENT,
    DEMOTE_TO_MEDIUM_PERCENT,
    PROMOTE_TO_HARD_PERCENT,
    PROMOTE_TO_MEDIUM_PERCENT,
    Difficulty,
)


def next_difficulty(
    was_correct: bool,
    performance_percent: float,
    current_difficulty: Difficulty
) -> Difficulty:
    """
    Compute the next target difficulty.

    Rules (first match wins, otherwise keep the current tier):
    1. Correct, >= 80%, at Medium -> Hard
    2. Correct, >= 70%, at Easy -> Medium
    3. Wrong, < 50%, at Medium -> Easy
    4. Wrong, < 60%, at Hard -> Medium

    Args:
        was_correct: Outcome of the latest answer
        performance_percent: Accuracy after recording that answer
        current_difficulty: Tier the latest item was selected for

    Returns:
        Next target difficulty
    """
    if was_correct:
        if performance_percent >= PROMOTE_TO_HARD_PERCENT and current_difficulty == Difficulty.MEDIUM:
            return Difficulty.HARD
        if performance_percent >= PROMOTE_TO_MEDIUM_PERCENT and current_difficulty == Difficulty.EASY:
            return Difficulty.MEDIUM
    else:
        if performance_percent < DEMOTE_TO_EASY_PERCENT and current_difficulty == Difficulty.MEDIUM:
            return Difficulty.EASY
        if performance_percent < DEMOTE_TO_MEDIUM_PERCENT and current_difficulty == Difficulty.HARD:
            return Difficulty.MEDIUM
    return current_difficulty
