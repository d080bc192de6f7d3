"""
Practice bank repository.

Provides functions to load the static quiz questions and flashcards and to
convert them into practice items.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from core.config import get_practice_bank_path
from core.practice.items import AnswerOption, PracticeItem
from core.schemas import PracticeBankFile, QuestionEntry, FlashcardEntry


logger = logging.getLogger(__name__)

DEFAULT_BANK_PATH = Path(__file__).parent / "data" / "practice_bank.json"


# ---- Loading ----

def load_bank(path: Optional[Path | str] = None) -> PracticeBankFile:
    """
    Load and validate a bank file.

    Args:
        path: Bank file to read (default: PRACTICE_BANK_PATH or the packaged bank)

    Returns:
        Validated bank document
    """
    if path is None:
        path = get_practice_bank_path() or DEFAULT_BANK_PATH
    path = Path(path)
    with path.open(encoding="utf-8") as fh:
        raw = json.load(fh)
    bank = PracticeBankFile.model_validate(raw)
    logger.debug(
        "Loaded practice bank %s (%d topics, %d flashcards)",
        path,
        len(bank.quiz_topics),
        len(bank.flashcards),
    )
    return bank


@lru_cache(maxsize=1)
def get_bank() -> PracticeBankFile:
    """Bank used by the app (loaded once per process)."""
    return load_bank()


# ---- Conversion ----

def question_to_item(index: int, entry: QuestionEntry) -> PracticeItem:
    return PracticeItem(
        id=index,
        prompt=entry.question,
        difficulty=entry.difficulty,
        options=tuple(
            AnswerOption(text=option.text, is_correct=option.correct, feedback=option.feedback)
            for option in entry.options
        ),
        explanation=entry.feedback,
    )


def flashcard_to_item(index: int, entry: FlashcardEntry) -> PracticeItem:
    return PracticeItem(
        id=index,
        prompt=entry.front,
        difficulty=entry.difficulty,
        explanation=entry.back,
    )


# ---- Query Functions ----

def get_quiz_topics(bank: Optional[PracticeBankFile] = None) -> dict[str, str]:
    """
    Get the available quiz topics.

    Returns:
        Mapping of topic key -> practice module id
    """
    bank = bank or get_bank()
    return {key: topic.module_id for key, topic in bank.quiz_topics.items()}


def get_quiz_bank(topic: str, bank: Optional[PracticeBankFile] = None) -> list[PracticeItem]:
    """
    Get all questions of a topic as practice items.

    Unknown topics yield an empty list.
    """
    bank = bank or get_bank()
    quiz_topic = bank.quiz_topics.get(topic)
    if quiz_topic is None:
        logger.warning("Unknown quiz topic %r", topic)
        return []
    return [question_to_item(index, entry) for index, entry in enumerate(quiz_topic.questions)]


def get_flashcards(bank: Optional[PracticeBankFile] = None) -> list[PracticeItem]:
    """Get the flashcard deck as practice items."""
    bank = bank or get_bank()
    return [flashcard_to_item(index, entry) for index, entry in enumerate(bank.flashcards)]
