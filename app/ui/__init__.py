"""UI Components for the Sales Trainer"""

from app.ui.flashcard import render_card
from app.ui.session_stats import render_session_stats, render_session_complete, summarize_session
from app.ui.feedback_buttons import render_rating_buttons
from app.ui.details import render_answer_feedback, render_explanation

__all__ = [
    "render_card",
    "render_session_stats",
    "render_session_complete",
    "summarize_session",
    "render_rating_buttons",
    "render_answer_feedback",
    "render_explanation",
]
