"""
Practice - Adaptive Practice Rules

Main API for the rule-driven part of the sales trainer's practice mode.

This package implements the session-local heuristic with:
- Performance tracking (rolling accuracy in whole percent)
- One-tier-at-a-time difficulty adjustment
- Answer quality (0-5) for the external due-date scheduler

Quick start:
    from core import practice

    state = practice.SessionState()
    practice.record_answer(state, correct=True)
    state.current_difficulty = practice.next_difficulty(
        True, state.performance_percent, state.current_difficulty
    )
"""

# Constants and parameters
from core.practice.constants import (
    Difficulty,
    DIFFICULTY_LABELS,
    DEFAULT_DIFFICULTY,
    FALLBACK_ORDER,
    QUALITY_BY_OUTCOME,
    QUIZ_SESSION_SIZE,
    HARD_CARD_REQUEUE_OFFSET,
    FLASHCARD_REVIEW_FACTOR,
    MODULE_QUIZ_OBJECTIONS,
    MODULE_QUIZ_QUESTIONS,
    MODULE_FLASHCARDS,
    parse_difficulty,
)

# Item and state models
from core.practice.items import (
    AnswerOption,
    AnswerRecord,
    DueSnapshot,
    PracticeItem,
    SessionState,
    default_snapshot,
)

# Rules
from core.practice.performance import compute_performance_percent, record_answer
from core.practice.difficulty import next_difficulty
from core.practice.quality import answer_quality, is_failed_quality

from core.practice.errors import PracticeError, PracticeSessionError

__all__ = [
    "Difficulty",
    "DIFFICULTY_LABELS",
    "DEFAULT_DIFFICULTY",
    "FALLBACK_ORDER",
    "QUALITY_BY_OUTCOME",
    "QUIZ_SESSION_SIZE",
    "HARD_CARD_REQUEUE_OFFSET",
    "FLASHCARD_REVIEW_FACTOR",
    "MODULE_QUIZ_OBJECTIONS",
    "MODULE_QUIZ_QUESTIONS",
    "MODULE_FLASHCARDS",
    "parse_difficulty",
    "AnswerOption",
    "AnswerRecord",
    "DueSnapshot",
    "PracticeItem",
    "SessionState",
    "default_snapshot",
    "compute_performance_percent",
    "record_answer",
    "next_difficulty",
    "answer_quality",
    "is_failed_quality",
    "PracticeError",
    "PracticeSessionError",
]
