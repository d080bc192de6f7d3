"""
Card style presets and constants.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.practice import Difficulty


# ---- Panel Layout ----

CARD_PADDING = "30px 24px"
CARD_MIN_HEIGHT = "190px"
PROMPT_BG = "#f0f2f6"
ANSWER_BG = "#e8f4f8"
TEXT_COLOR = "#1f1f1f"
MUTED_COLOR = "#666"
BADGE_FONT_SIZE = "0.85em"


# ---- Difficulty Badge Colors ----

DIFFICULTY_COLORS: dict[Difficulty, str] = {
    Difficulty.EASY: "#16a34a",
    Difficulty.MEDIUM: "#d97706",
    Difficulty.HARD: "#dc2626",
}


@dataclass(frozen=True)
class CardStyle:
    """
    Typography and background of a question or flashcard panel.
    """
    text_size: str = "1.6em"
    text_weight: str = "normal"
    caption_size: str = "1.0em"
    background: str = PROMPT_BG


DEFAULT_CARD_STYLE = CardStyle()

QUESTION_STYLE = CardStyle(text_size="1.35em", text_weight="600")
FLASHCARD_FRONT_STYLE = CardStyle(text_size="1.8em")
FLASHCARD_BACK_STYLE = CardStyle(text_size="1.4em", caption_size="1.1em", background=ANSWER_BG)
