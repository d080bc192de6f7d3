"""
Performance Tracker

Keeps the answered/correct counts of a session and derives the rolling
accuracy percentage after each answer.
"""

from __future__ import annotations

import math

from core.practice.items import SessionState


def compute_performance_percent(correct_count: int, answered_count: int) -> int:
    """
    Accuracy in whole percent, rounded half up.

    Returns 0 when nothing has been answered yet.
    """
    if answered_count <= 0:
        return 0
    return int(math.floor(100 * correct_count / answered_count + 0.5))


def record_answer(state: SessionState, correct: bool) -> SessionState:
    """
    Record one answer on the session state (in place).

    Args:
        state: Session state to update
        correct: Whether the answer was correct

    Returns:
        The same state object, for chaining
    """
    state.answered_count += 1
    if correct:
        state.correct_count += 1
    state.performance_percent = compute_performance_percent(
        state.correct_count,
        state.answered_count
    )
    return state
