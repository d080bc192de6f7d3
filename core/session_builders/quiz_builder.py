"""
Quiz Session Builder - Due-First Queue Creation

Creates practice queues from two pools:
1. Due pool: items the progress store flagged for review now
2. Not-due pool: everything else, split by difficulty tier

Session Logic:
- All due items first (shuffled), as long as they fit the session
- Fill the remaining slots from the target tier
- Backfill from the other tiers in the target's fallback order
- Shuffle the not-due portion on its own, then truncate to session size
"""

from __future__ import annotations

import random
from typing import Optional, Sequence

from core.practice.constants import FALLBACK_ORDER, QUIZ_SESSION_SIZE, Difficulty
from core.practice.items import PracticeItem
from core.session_builders.pool_types import PoolState
from core.session_builders.pool_utils import build_pool_state, fill_in_order, shuffled


def build_quiz_pool_state(
    bank: Sequence[PracticeItem],
    due_ids: frozenset[int] | set[int]
) -> PoolState:
    """
    Build launch-scoped pool state for a quiz module.
    """
    return build_pool_state(bank, due_ids)


def create_session_queue(
    pool_state: PoolState,
    target_difficulty: Difficulty,
    session_size: Optional[int] = QUIZ_SESSION_SIZE,
    rng: Optional[random.Random] = None
) -> list[PracticeItem]:
    """
    Create an ordered practice queue with due items first.

    Args:
        pool_state: Launch-scoped pool state (not modified)
        target_difficulty: Tier to prefer when filling non-due slots
        session_size: Maximum queue length, or None for every item
        rng: Optional random source (tests pass a seeded one)

    Returns:
        New list of practice items, due partition first
    """
    due_ids = shuffled(sorted(pool_state.due), rng)

    if session_size is None:
        open_slots = None
    else:
        open_slots = max(0, session_size - len(due_ids))

    # Shuffle within each tier so the pick inside a tier is random
    tier_pools = {
        tier: shuffled(sorted(ids), rng)
        for tier, ids in pool_state.not_due.items()
    }
    not_due_ids = fill_in_order(tier_pools, FALLBACK_ORDER[target_difficulty], open_slots)
    not_due_ids = shuffled(not_due_ids, rng)

    session_ids = due_ids + not_due_ids
    if session_size is not None:
        session_ids = session_ids[:session_size]

    return [pool_state.item_map[item_id] for item_id in session_ids]


def build_session_queue(
    bank: Sequence[PracticeItem],
    due_ids: frozenset[int] | set[int],
    target_difficulty: Difficulty,
    session_size: Optional[int] = QUIZ_SESSION_SIZE,
    rng: Optional[random.Random] = None
) -> list[PracticeItem]:
    """
    One-shot queue creation straight from a bank.
    """
    pool_state = build_quiz_pool_state(bank, due_ids)
    return create_session_queue(pool_state, target_difficulty, session_size, rng)
