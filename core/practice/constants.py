"""
Practice Engine Constants

All thresholds and fixed mappings for the adaptive practice heuristic in one place.
These values define observable behaviour (difficulty transitions, quality scores,
flashcard requeue offsets) and are kept exactly as the trainer has always used them.
"""

from __future__ import annotations

from enum import IntEnum


# ---- Difficulty Tiers ----

class Difficulty(IntEnum):
    """Difficulty tier of a practice item (also used as flashcard rating)."""
    EASY = 1
    MEDIUM = 2
    HARD = 3

    @property
    def label(self) -> str:
        """German display label used in the trainer UI."""
        return DIFFICULTY_LABELS[self]


DIFFICULTY_LABELS = {
    Difficulty.EASY: "Einfach",
    Difficulty.MEDIUM: "Mittel",
    Difficulty.HARD: "Schwer",
}

_DIFFICULTY_ALIASES = {
    "easy": Difficulty.EASY,
    "einfach": Difficulty.EASY,
    "medium": Difficulty.MEDIUM,
    "mittel": Difficulty.MEDIUM,
    "hard": Difficulty.HARD,
    "schwer": Difficulty.HARD,
}


def parse_difficulty(value: object) -> Difficulty:
    """
    Parse a difficulty from an enum, tier number, or English/German label.

    Raises:
        ValueError: If the value does not name one of the three tiers
    """
    if isinstance(value, Difficulty):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Difficulty(value)
    if isinstance(value, str):
        key = value.strip().lower()
        if key in _DIFFICULTY_ALIASES:
            return _DIFFICULTY_ALIASES[key]
    raise ValueError(f"Unknown difficulty: {value!r}")


DEFAULT_DIFFICULTY = Difficulty.MEDIUM


# ---- Difficulty Selector Thresholds ----
# Promotion and demotion thresholds are intentionally asymmetric.

PROMOTE_TO_HARD_PERCENT = 80    # correct answer at Medium
PROMOTE_TO_MEDIUM_PERCENT = 70  # correct answer at Easy
DEMOTE_TO_EASY_PERCENT = 50     # wrong answer at Medium
DEMOTE_TO_MEDIUM_PERCENT = 60   # wrong answer at Hard


# ---- Backfill Order by Target Difficulty ----

FALLBACK_ORDER = {
    Difficulty.EASY: (Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD),
    Difficulty.MEDIUM: (Difficulty.MEDIUM, Difficulty.EASY, Difficulty.HARD),
    Difficulty.HARD: (Difficulty.HARD, Difficulty.MEDIUM, Difficulty.EASY),
}


# ---- Answer Quality (0-5) ----
# Consumed by the external due-date scheduler; must not change.

QUALITY_BY_OUTCOME = {
    (True, Difficulty.HARD): 5,
    (True, Difficulty.MEDIUM): 4,
    (True, Difficulty.EASY): 3,
    (False, Difficulty.HARD): 2,
    (False, Difficulty.MEDIUM): 1,
    (False, Difficulty.EASY): 0,
}

MAX_FAILED_QUALITY = 2  # quality <= this means the answer was wrong


# ---- Session Configuration ----

QUIZ_SESSION_SIZE = 15           # Questions per quiz session
HARD_CARD_REQUEUE_OFFSET = 3     # Hard-rated flashcards come back this many cards later
FLASHCARD_REVIEW_FACTOR = 2      # Max ratings per flashcard session = factor x deck size


# ---- Practice Modules ----

MODULE_QUIZ_OBJECTIONS = "practice-quiz-einwaende"
MODULE_QUIZ_QUESTIONS = "practice-quiz-fragen"
MODULE_FLASHCARDS = "practice-flashcards"
