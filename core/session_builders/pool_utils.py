"""
Pool utilities for session builders.

These helpers provide shared, minimal primitives for building and reasoning
about session pools without enforcing a single scheduling policy.
"""

from __future__ import annotations

import random
from typing import Hashable, Optional, Sequence, TypeVar

from core.practice.constants import Difficulty
from core.practice.items import PracticeItem
from core.session_builders.pool_types import PoolState


T = TypeVar("T", bound=Hashable)


def fill_in_order(
    pools: dict[Difficulty, list[T]],
    order: Sequence[Difficulty],
    target_size: Optional[int]
) -> list[T]:
    """
    Fill a session by walking pools in order until target_size is reached.

    Entries already taken from an earlier pool are skipped. A target_size
    of None takes everything.
    """
    session: list[T] = []
    seen: set[T] = set()
    for name in order:
        for entry in pools.get(name, []):
            if target_size is not None and len(session) >= target_size:
                return session
            if entry in seen:
                continue
            seen.add(entry)
            session.append(entry)
    return session


def shuffled(entries: Sequence[T], rng: Optional[random.Random] = None) -> list[T]:
    """
    Return a shuffled copy (the input is left untouched).
    """
    result = list(entries)
    (rng or random).shuffle(result)
    return result


def build_pool_state(
    bank: Sequence[PracticeItem],
    due_ids: frozenset[int] | set[int]
) -> PoolState:
    """
    Partition a bank into the due pool and per-tier not-due pools.

    Due ids that are not in the bank are ignored.
    """
    item_map = {item.id: item for item in bank}
    pool_state = PoolState(item_map=item_map, due=set())
    for item in bank:
        if item.id in due_ids:
            pool_state.due.add(item.id)
        else:
            pool_state.not_due[item.difficulty].add(item.id)
    return pool_state
