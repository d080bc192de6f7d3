"""
Practice Items and Session State

Defines the immutable practice item model and the mutable per-session
performance state.

Key concepts:
- PracticeItem: a quiz question or flashcard, identified by its bank index
- SessionState: answered/correct counts, rolling accuracy, target difficulty
- DueSnapshot: what the progress service told us at session start
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from core.practice.constants import DEFAULT_DIFFICULTY, Difficulty


@dataclass(frozen=True)
class AnswerOption:
    """One answer choice of a quiz question."""
    text: str
    is_correct: bool
    feedback: Optional[str] = None


@dataclass(frozen=True)
class PracticeItem:
    """
    A single quiz question or flashcard.

    Flashcards carry no options: prompt is the card front,
    explanation is the card back.
    """
    id: int  # Stable index into the static bank
    prompt: str
    difficulty: Difficulty
    options: tuple[AnswerOption, ...] = ()
    explanation: str = ""

    @property
    def is_flashcard(self) -> bool:
        return not self.options

    def is_correct_option(self, option_index: int) -> bool:
        return self.options[option_index].is_correct


@dataclass
class SessionState:
    """
    Performance state of one practice session.

    performance_percent is 0 (neutral) until the first answer.
    """
    answered_count: int = 0
    correct_count: int = 0
    current_difficulty: Difficulty = DEFAULT_DIFFICULTY
    performance_percent: int = 0


@dataclass(frozen=True)
class DueSnapshot:
    """
    Due items and target difficulty for one module, as supplied by the
    progress service at session start.
    """
    due_ids: frozenset[int] = field(default_factory=frozenset)
    target_difficulty: Difficulty = DEFAULT_DIFFICULTY
    from_fallback: bool = False


def default_snapshot() -> DueSnapshot:
    """Snapshot used whenever the progress service is missing or failing."""
    return DueSnapshot(from_fallback=True)


@dataclass(frozen=True)
class AnswerRecord:
    """Payload for the answer-recording sink."""
    module_id: str
    question_id: int
    correct: bool
    quality: int
    session_id: Optional[str] = None  # Practice run that produced the answer

    def to_payload(self) -> dict:
        return {
            "moduleId": self.module_id,
            "questionId": self.question_id,
            "correct": self.correct,
            "quality": self.quality,
        }
