"""
Shared fixtures for the practice engine tests.
"""

import random

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from core.practice import AnswerOption, Difficulty, PracticeItem
from core.progress import database


TIER_BY_BLOCK = [Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD]


def _make_question(item_id: int, difficulty: Difficulty, correct_index: int = 0) -> PracticeItem:
    """Quiz question with three options, one of them correct."""
    return PracticeItem(
        id=item_id,
        prompt=f"Frage {item_id}",
        difficulty=difficulty,
        options=tuple(
            AnswerOption(text=f"Option {index}", is_correct=index == correct_index)
            for index in range(3)
        ),
        explanation=f"Erklärung {item_id}",
    )


def _make_card(item_id: int, difficulty: Difficulty) -> PracticeItem:
    return PracticeItem(
        id=item_id,
        prompt=f"Vorderseite {item_id}",
        difficulty=difficulty,
        explanation=f"Rückseite {item_id}",
    )


@pytest.fixture
def rng():
    """Seeded random source so queue shuffles are reproducible."""
    return random.Random(42)


@pytest.fixture
def tiered_bank():
    """
    15 questions: ids 0-4 Easy, 5-9 Medium, 10-14 Hard.
    """
    return [_make_question(item_id, TIER_BY_BLOCK[item_id // 5]) for item_id in range(15)]


@pytest.fixture
def deck():
    """Four flashcards, one per tier plus an extra Medium card."""
    return [
        _make_card(0, Difficulty.EASY),
        _make_card(1, Difficulty.MEDIUM),
        _make_card(2, Difficulty.HARD),
        _make_card(3, Difficulty.MEDIUM),
    ]


@pytest.fixture
def sqlite_db():
    """
    In-memory SQLite progress store, swapped in for the Postgres engine.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    database.configure_engine(engine)
    database.init_db()
    yield engine
    database.configure_engine(None)
    engine.dispose()


@pytest.fixture
def make_question():
    return _make_question


@pytest.fixture
def make_card():
    return _make_card
