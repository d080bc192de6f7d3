"""
Practice Sessions - Quiz and Flashcard State Machines

Small session objects owned by the session controller. They hold the queue,
the cursor and the performance state, and apply the practice rules after every
answer. No I/O happens here: the caller fetches the due snapshot before
construction and forwards each outcome's AnswerRecord to the answer sink.

Quiz flow:
    session = QuizSession(module_id, bank, snapshot)
    outcome = session.answer(option_index)
    session.next()

Flashcard flow:
    session = FlashcardSession(module_id, cards, snapshot)
    outcome = session.rate(Difficulty.HARD)
"""

from __future__ import annotations

import logging
import random
import uuid
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from core.practice import (
    FLASHCARD_REVIEW_FACTOR,
    QUIZ_SESSION_SIZE,
    AnswerRecord,
    Difficulty,
    DueSnapshot,
    PracticeItem,
    PracticeSessionError,
    SessionState,
    answer_quality,
    default_snapshot,
    next_difficulty,
    record_answer,
)
from core.session_builders import (
    build_quiz_pool_state,
    create_flashcard_session,
    create_session_queue,
    reinsert_rated_card,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuizAnswerOutcome:
    """Result of answering the current quiz question."""
    item: PracticeItem
    option_index: int
    correct: bool
    quality: int
    previous_difficulty: Difficulty
    next_difficulty: Difficulty
    performance_percent: int
    record: AnswerRecord

    @property
    def difficulty_changed(self) -> bool:
        return self.previous_difficulty != self.next_difficulty


@dataclass(frozen=True)
class FlashcardRatingOutcome:
    """Result of rating the current flashcard."""
    card: PracticeItem
    rating: Difficulty
    new_index: Optional[int]  # Where the card now sits, None if it just advanced
    record: AnswerRecord


class QuizSession:
    """
    Adaptive quiz over a static question bank.

    The queue is built once at start (due questions first, then the target
    tier with fallback). Whenever the target difficulty changes, the part of
    the queue that has not been shown yet is re-planned for the new tier.
    """

    def __init__(
        self,
        module_id: str,
        bank: Sequence[PracticeItem],
        snapshot: Optional[DueSnapshot] = None,
        session_size: int = QUIZ_SESSION_SIZE,
        rng: Optional[random.Random] = None,
        session_id: Optional[str] = None,
    ):
        self.module_id = module_id
        self.session_id = session_id or str(uuid.uuid4())
        self.snapshot = snapshot or default_snapshot()
        self.session_size = session_size
        self._rng = rng or random.Random()

        self.state = SessionState(current_difficulty=self.snapshot.target_difficulty)
        self._pool = build_quiz_pool_state(bank, self.snapshot.due_ids)
        self.queue: list[PracticeItem] = create_session_queue(
            self._pool,
            self.state.current_difficulty,
            session_size,
            self._rng,
        )
        self.position = 0
        self.outcomes: list[QuizAnswerOutcome] = []
        self._current_answered = False

    # ---- Read-only views ----

    @property
    def is_empty(self) -> bool:
        return not self.queue

    @property
    def is_finished(self) -> bool:
        return self.position >= len(self.queue)

    @property
    def current_item(self) -> Optional[PracticeItem]:
        if self.is_finished:
            return None
        return self.queue[self.position]

    @property
    def awaiting_next(self) -> bool:
        """True once the current question is answered and next() is due."""
        return self._current_answered

    @property
    def score(self) -> int:
        return self.state.correct_count

    # ---- Transitions ----

    def answer(self, option_index: int) -> QuizAnswerOutcome:
        """
        Answer the current question.

        Raises:
            PracticeSessionError: If the session is finished, the question was
                already answered, or the option index is out of range
        """
        item = self.current_item
        if item is None:
            raise PracticeSessionError("Quiz session is finished")
        if self._current_answered:
            raise PracticeSessionError(f"Question {item.id} was already answered")
        if not 0 <= option_index < len(item.options):
            raise PracticeSessionError(
                f"Option {option_index} out of range for question {item.id} "
                f"({len(item.options)} options)"
            )

        correct = item.is_correct_option(option_index)
        previous = self.state.current_difficulty
        record_answer(self.state, correct)
        self.state.current_difficulty = next_difficulty(
            correct,
            self.state.performance_percent,
            previous,
        )
        quality = answer_quality(correct, item.difficulty)

        self._pool.discard(item.id)
        self._current_answered = True

        outcome = QuizAnswerOutcome(
            item=item,
            option_index=option_index,
            correct=correct,
            quality=quality,
            previous_difficulty=previous,
            next_difficulty=self.state.current_difficulty,
            performance_percent=self.state.performance_percent,
            record=AnswerRecord(
                module_id=self.module_id,
                question_id=item.id,
                correct=correct,
                quality=quality,
                session_id=self.session_id,
            ),
        )
        self.outcomes.append(outcome)

        if outcome.difficulty_changed:
            logger.info(
                "Quiz %s difficulty %s -> %s at %d%%",
                self.module_id,
                previous.name,
                self.state.current_difficulty.name,
                self.state.performance_percent,
            )
            self.replan()

        return outcome

    def next(self) -> Optional[PracticeItem]:
        """
        Move past the answered question.

        Returns:
            The new current question, or None when the quiz is over
        """
        if not self._current_answered:
            raise PracticeSessionError("Answer the current question before moving on")
        self.position += 1
        self._current_answered = False
        return self.current_item

    def replan(self, due_ids: Optional[Iterable[int]] = None) -> None:
        """
        Rebuild the not-yet-shown part of the queue for the current target.

        Args:
            due_ids: Optional refreshed due set from the progress service
        """
        if due_ids is not None:
            self._pool.set_due(due_ids)

        keep = self.position + (1 if self._current_answered else 0)
        open_slots = len(self.queue) - keep
        if open_slots <= 0:
            return

        upcoming = create_session_queue(
            self._pool,
            self.state.current_difficulty,
            open_slots,
            self._rng,
        )
        self.queue = self.queue[:keep] + upcoming


class FlashcardSession:
    """
    Flashcard run over the whole deck with in-session requeueing.

    The cursor only advances on MEDIUM ratings; HARD and EASY ratings move the
    card further back and the next card slides under the cursor. A card rated
    HARD or EASY while it is the last one left ends the run. Because EASY
    cards keep coming back at the end, a run also stops after max_reviews
    ratings.
    """

    def __init__(
        self,
        module_id: str,
        cards: Sequence[PracticeItem],
        snapshot: Optional[DueSnapshot] = None,
        max_reviews: Optional[int] = None,
        rng: Optional[random.Random] = None,
        session_id: Optional[str] = None,
    ):
        self.module_id = module_id
        self.session_id = session_id or str(uuid.uuid4())
        self.snapshot = snapshot or default_snapshot()
        self.state = SessionState(current_difficulty=self.snapshot.target_difficulty)
        self.queue: list[PracticeItem] = create_flashcard_session(
            cards,
            self.snapshot.due_ids,
            self.snapshot.target_difficulty,
            rng,
        )
        self.position = 0
        self.review_count = 0
        if max_reviews is None:
            max_reviews = FLASHCARD_REVIEW_FACTOR * len(self.queue)
        self.max_reviews = max_reviews
        self.deck_size = len(self.queue)

    @property
    def is_empty(self) -> bool:
        return not self.queue

    @property
    def is_finished(self) -> bool:
        return self.position >= len(self.queue) or self.review_count >= self.max_reviews

    @property
    def current_card(self) -> Optional[PracticeItem]:
        if self.is_finished:
            return None
        return self.queue[self.position]

    def rate(self, rating: Difficulty) -> FlashcardRatingOutcome:
        """
        Rate the current card and requeue it.

        Raises:
            PracticeSessionError: If the session is finished
        """
        card = self.current_card
        if card is None:
            raise PracticeSessionError("Flashcard session is finished")

        rating = Difficulty(rating)
        self.queue = reinsert_rated_card(self.queue, self.position, rating)
        self.review_count += 1

        if rating == Difficulty.MEDIUM:
            new_index = None
            self.position += 1
        else:
            new_index = self.queue.index(card, self.position)
            # Last card of the run has nowhere to move; the tail is done
            if new_index == self.position:
                self.position += 1

        correct = rating != Difficulty.HARD
        record_answer(self.state, correct)

        return FlashcardRatingOutcome(
            card=card,
            rating=rating,
            new_index=new_index,
            record=AnswerRecord(
                module_id=self.module_id,
                question_id=card.id,
                correct=correct,
                quality=answer_quality(correct, card.difficulty),
                session_id=self.session_id,
            ),
        )
