"""Session builder modules for quiz and flashcard practice."""

from core.session_builders.quiz_builder import (
    build_quiz_pool_state,
    build_session_queue,
    create_session_queue,
)
from core.session_builders.flashcard_builder import (
    create_flashcard_session,
    reinsert_rated_card,
)

__all__ = [
    "build_quiz_pool_state",
    "build_session_queue",
    "create_session_queue",
    "create_flashcard_session",
    "reinsert_rated_card",
]
