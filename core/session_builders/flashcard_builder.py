"""
Flashcard Session Builder.

Flashcard sessions take the whole deck (due cards first, everything shuffled)
and requeue rated cards inside the running session instead of fetching a new
batch:
- HARD: back in HARD_CARD_REQUEUE_OFFSET cards
- EASY: to the end of the queue
- MEDIUM: stays where it is, the session simply moves on
"""

from __future__ import annotations

import random
from typing import Optional, Sequence, TypeVar

from core.practice.constants import (
    DEFAULT_DIFFICULTY,
    HARD_CARD_REQUEUE_OFFSET,
    Difficulty,
)
from core.practice.items import PracticeItem
from core.session_builders.quiz_builder import build_session_queue


T = TypeVar("T")


def create_flashcard_session(
    cards: Sequence[PracticeItem],
    due_ids: frozenset[int] | set[int],
    target_difficulty: Difficulty = DEFAULT_DIFFICULTY,
    rng: Optional[random.Random] = None
) -> list[PracticeItem]:
    """
    Create a flashcard queue covering every card, due cards first.
    """
    return build_session_queue(cards, due_ids, target_difficulty, session_size=None, rng=rng)


def reinsert_rated_card(queue: Sequence[T], index: int, rating: Difficulty) -> list[T]:
    """
    Reposition the card at `index` according to its rating.

    Args:
        queue: Current session queue (not modified)
        index: Position of the card that was just rated
        rating: EASY, MEDIUM or HARD

    Returns:
        New queue list
    """
    result = list(queue)
    if rating == Difficulty.MEDIUM:
        return result

    card = result.pop(index)
    if rating == Difficulty.HARD:
        result.insert(min(index + HARD_CARD_REQUEUE_OFFSET, len(result)), card)
    else:
        result.append(card)
    return result
