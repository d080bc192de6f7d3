"""
Activity registry for Streamlit session handling.

Quiz activities come from the topics of the practice bank; the flashcard
deck is a single fixed activity.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Union

from core import bank, config
from core.practice import MODULE_FLASHCARDS, DueSnapshot
from core.practice_session import FlashcardSession, QuizSession
from core.schemas import PracticeBankFile


PracticeSession = Union[QuizSession, FlashcardSession]

# Menu copy for the packaged topics, other topics get a generic entry
QUIZ_COPY: dict[str, tuple[str, str]] = {
    "einwaende": ("Quiz: Einwände", "Adaptives Quiz zur Einwandbehandlung"),
    "fragen": ("Quiz: Fragetechniken", "Adaptives Quiz zu Fragetechniken"),
}


@dataclass(frozen=True)
class ActivitySpec:
    """
    Activity configuration and session factory.
    """
    mode: str
    label: str
    description: str
    module_id: str
    kind: str  # "quiz" or "flashcards"
    build_session: Callable[[DueSnapshot], PracticeSession]


def _quiz_factory(
    topic: str,
    module_id: str,
    bank_file: Optional[PracticeBankFile] = None,
) -> Callable[[DueSnapshot], QuizSession]:
    def _build(snapshot: DueSnapshot) -> QuizSession:
        return QuizSession(
            module_id,
            bank.get_quiz_bank(topic, bank_file),
            snapshot,
            session_size=config.get_quiz_session_size(),
        )
    return _build


def _flashcard_factory(
    bank_file: Optional[PracticeBankFile] = None,
) -> Callable[[DueSnapshot], FlashcardSession]:
    def _build(snapshot: DueSnapshot) -> FlashcardSession:
        return FlashcardSession(MODULE_FLASHCARDS, bank.get_flashcards(bank_file), snapshot)
    return _build


def build_activity_specs(bank_file: Optional[PracticeBankFile] = None) -> dict[str, ActivitySpec]:
    """
    Build one quiz activity per bank topic plus the flashcard activity.

    Args:
        bank_file: Bank to read topics from (default: the app bank)
    """
    specs: dict[str, ActivitySpec] = {}
    for topic, module_id in bank.get_quiz_topics(bank_file).items():
        mode = f"quiz-{topic}"
        label, description = QUIZ_COPY.get(topic, (f"Quiz: {topic}", "Adaptives Quiz"))
        specs[mode] = ActivitySpec(
            mode=mode,
            label=label,
            description=description,
            module_id=module_id,
            kind="quiz",
            build_session=_quiz_factory(topic, module_id, bank_file),
        )

    specs["flashcards"] = ActivitySpec(
        mode="flashcards",
        label="Karteikarten",
        description="Begriffe und Techniken wiederholen",
        module_id=MODULE_FLASHCARDS,
        kind="flashcards",
        build_session=_flashcard_factory(bank_file),
    )
    return specs


ACTIVITY_SPECS: dict[str, ActivitySpec] = build_activity_specs()


def get_activity_spec(mode: str) -> ActivitySpec:
    return ACTIVITY_SPECS[mode]
