"""
Typed pool models shared across session builders.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from core.practice.constants import Difficulty
from core.practice.items import PracticeItem


@dataclass
class PoolState:
    """
    Launch-scoped pool state for one practice module.

    Every item id sits in exactly one pool: due, or the not-due pool of
    its own difficulty tier.
    """
    item_map: dict[int, PracticeItem]
    due: set[int]
    not_due: dict[Difficulty, set[int]] = field(
        default_factory=lambda: {tier: set() for tier in Difficulty}
    )

    def discard(self, item_id: int) -> None:
        """
        Remove an item from all pools (e.g. once it has been answered).
        """
        self.due.discard(item_id)
        for ids in self.not_due.values():
            ids.discard(item_id)

    def set_due(self, due_ids: Iterable[int]) -> None:
        """
        Re-partition the remaining items against a refreshed due set.
        """
        remaining = set(self.due)
        for ids in self.not_due.values():
            remaining.update(ids)

        due_ids = set(due_ids)
        self.due = {item_id for item_id in remaining if item_id in due_ids}
        self.not_due = {tier: set() for tier in Difficulty}
        for item_id in remaining - self.due:
            self.not_due[self.item_map[item_id].difficulty].add(item_id)

    @property
    def remaining_count(self) -> int:
        return len(self.due) + sum(len(ids) for ids in self.not_due.values())
