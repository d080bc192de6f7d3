"""
Unit Tests for the Session Builders

Tests due-first queue creation, tier backfill and flashcard requeueing.
"""

import pytest

from core.practice import Difficulty
from core.session_builders import (
    build_quiz_pool_state,
    build_session_queue,
    create_flashcard_session,
    create_session_queue,
    reinsert_rated_card,
)
from core.session_builders.pool_utils import fill_in_order, shuffled


def _ids(items):
    return [item.id for item in items]


class TestSessionQueue:
    """Test suite for the due-item prioritizer."""

    def test_due_items_first_then_target_tier(self, tiered_bank, rng):
        """Test the 5/5/5 bank with due {2, 7}, target Medium and N = 10."""
        queue = build_session_queue(tiered_bank, {2, 7}, Difficulty.MEDIUM, 10, rng)

        ids = _ids(queue)
        assert len(ids) == 10
        assert set(ids[:2]) == {2, 7}
        # Remaining Medium items first, then Easy backfill
        assert set(ids[2:]) == {5, 6, 8, 9, 0, 1, 3, 4}

    @pytest.mark.parametrize("target", list(Difficulty))
    @pytest.mark.parametrize("due", [set(), {0}, {3, 8, 13}, {1, 2, 6, 11, 12, 14}])
    def test_due_prefix_is_exactly_due_set(self, tiered_bank, rng, target, due):
        queue = build_session_queue(tiered_bank, due, target, 10, rng)
        ids = _ids(queue)
        assert set(ids[:len(due)]) == due
        assert not due.intersection(ids[len(due):])
        assert len(ids) == len(set(ids)) == 10

    def test_due_set_larger_than_session(self, tiered_bank, rng):
        due = set(range(12))
        queue = build_session_queue(tiered_bank, due, Difficulty.MEDIUM, 10, rng)
        assert len(queue) == 10
        assert set(_ids(queue)) <= due

    def test_hard_target_falls_back_to_medium(self, tiered_bank, rng):
        queue = build_session_queue(tiered_bank, set(), Difficulty.HARD, 6, rng)
        ids = set(_ids(queue))
        assert {10, 11, 12, 13, 14} <= ids
        assert len(ids - {10, 11, 12, 13, 14}) == 1
        assert (ids - {10, 11, 12, 13, 14}) <= {5, 6, 7, 8, 9}

    def test_easy_target_falls_back_to_medium_before_hard(self, tiered_bank, rng):
        queue = build_session_queue(tiered_bank, set(), Difficulty.EASY, 12, rng)
        ids = set(_ids(queue))
        assert set(range(10)) <= ids
        assert len(ids & {10, 11, 12, 13, 14}) == 2

    def test_medium_target_falls_back_to_easy_before_hard(self, tiered_bank, rng):
        queue = build_session_queue(tiered_bank, set(), Difficulty.MEDIUM, 10, rng)
        assert set(_ids(queue)) == set(range(10))

    def test_unbounded_session_takes_every_item(self, tiered_bank, rng):
        queue = build_session_queue(tiered_bank, {4, 9}, Difficulty.MEDIUM, None, rng)
        ids = _ids(queue)
        assert sorted(ids) == list(range(15))
        assert set(ids[:2]) == {4, 9}

    def test_unknown_due_ids_are_ignored(self, tiered_bank, rng):
        queue = build_session_queue(tiered_bank, {99, 3}, Difficulty.MEDIUM, 5, rng)
        ids = _ids(queue)
        assert ids[0] == 3
        assert 99 not in ids

    def test_bank_smaller_than_session(self, tiered_bank, rng):
        queue = build_session_queue(tiered_bank[:4], set(), Difficulty.HARD, 15, rng)
        assert sorted(_ids(queue)) == [0, 1, 2, 3]

    def test_empty_bank(self, rng):
        assert build_session_queue([], {1, 2}, Difficulty.MEDIUM, 15, rng) == []

    def test_pool_state_is_not_modified(self, tiered_bank, rng):
        pool_state = build_quiz_pool_state(tiered_bank, {2, 7})
        create_session_queue(pool_state, Difficulty.HARD, 10, rng)
        assert pool_state.due == {2, 7}
        assert pool_state.not_due[Difficulty.MEDIUM] == {5, 6, 8, 9}
        assert pool_state.remaining_count == 15


class TestPoolState:
    """Test suite for the launch-scoped pools."""

    def test_partition(self, tiered_bank):
        pool_state = build_quiz_pool_state(tiered_bank, {2, 7})
        assert pool_state.due == {2, 7}
        assert pool_state.not_due[Difficulty.EASY] == {0, 1, 3, 4}
        assert pool_state.not_due[Difficulty.HARD] == {10, 11, 12, 13, 14}

    def test_discard_removes_from_every_pool(self, tiered_bank):
        pool_state = build_quiz_pool_state(tiered_bank, {2})
        pool_state.discard(2)
        pool_state.discard(10)
        assert 2 not in pool_state.due
        assert 10 not in pool_state.not_due[Difficulty.HARD]
        assert pool_state.remaining_count == 13

    def test_set_due_repartitions_remaining_items(self, tiered_bank):
        pool_state = build_quiz_pool_state(tiered_bank, {2})
        pool_state.discard(5)
        pool_state.set_due({5, 6, 12})
        assert pool_state.due == {6, 12}
        assert 2 in pool_state.not_due[Difficulty.EASY]
        assert 5 not in pool_state.not_due[Difficulty.MEDIUM]
        assert pool_state.remaining_count == 14


class TestPoolUtils:
    """Test suite for shared pool helpers."""

    def test_fill_in_order_skips_duplicates(self):
        pools = {
            Difficulty.MEDIUM: [1, 2],
            Difficulty.EASY: [2, 3],
            Difficulty.HARD: [4],
        }
        order = (Difficulty.MEDIUM, Difficulty.EASY, Difficulty.HARD)
        assert fill_in_order(pools, order, 3) == [1, 2, 3]
        assert fill_in_order(pools, order, None) == [1, 2, 3, 4]
        assert fill_in_order(pools, order, 0) == []

    def test_shuffled_returns_copy(self, rng):
        entries = [1, 2, 3, 4, 5]
        result = shuffled(entries, rng)
        assert entries == [1, 2, 3, 4, 5]
        assert sorted(result) == entries


class TestFlashcardRequeue:
    """Test suite for in-session flashcard repositioning."""

    @pytest.fixture
    def queue(self):
        return ["a", "b", "c", "d", "e", "f"]

    def test_hard_comes_back_three_cards_later(self, queue):
        result = reinsert_rated_card(queue, 1, Difficulty.HARD)
        assert result.index("b") == 4
        assert result == ["a", "c", "d", "e", "b", "f"]

    def test_hard_near_end_is_clamped(self, queue):
        result = reinsert_rated_card(queue, 4, Difficulty.HARD)
        assert result[-1] == "e"
        assert len(result) == len(queue)

    def test_easy_moves_to_end(self, queue):
        result = reinsert_rated_card(queue, 0, Difficulty.EASY)
        assert result == ["b", "c", "d", "e", "f", "a"]

    def test_medium_keeps_order(self, queue):
        assert reinsert_rated_card(queue, 2, Difficulty.MEDIUM) == queue

    @pytest.mark.parametrize("rating", list(Difficulty))
    def test_other_cards_keep_relative_order(self, queue, rating):
        result = reinsert_rated_card(queue, 2, rating)
        others = [card for card in result if card != "c"]
        assert others == ["a", "b", "d", "e", "f"]

    def test_input_queue_untouched(self, queue):
        reinsert_rated_card(queue, 0, Difficulty.EASY)
        assert queue == ["a", "b", "c", "d", "e", "f"]

    def test_flashcard_session_covers_deck_due_first(self, deck, rng):
        queue = create_flashcard_session(deck, {2}, Difficulty.MEDIUM, rng)
        assert queue[0].id == 2
        assert sorted(_ids(queue)) == [0, 1, 2, 3]
