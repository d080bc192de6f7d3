"""
Answer quality (0-5) for the downstream due-date scheduler.
"""

from __future__ import annotations

from core.practice.constants import MAX_FAILED_QUALITY, QUALITY_BY_OUTCOME, Difficulty


def answer_quality(correct: bool, item_difficulty: Difficulty) -> int:
    """
    Map an answer outcome on an item of the given difficulty to 0-5.

    Correct: Hard=5, Medium=4, Easy=3. Wrong: Hard=2, Medium=1, Easy=0.
    """
    return QUALITY_BY_OUTCOME[(bool(correct), Difficulty(item_difficulty))]


def is_failed_quality(quality: int) -> bool:
    return quality <= MAX_FAILED_QUALITY
