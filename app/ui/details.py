"""
Answer Feedback UI

Renders per-option feedback and the explanation after a quiz answer.
"""

import streamlit as st

from core.practice import PracticeItem
from core.practice_session import QuizAnswerOutcome


def render_answer_feedback(outcome: QuizAnswerOutcome) -> None:
    """
    Render the result of the last quiz answer.

    Args:
        outcome: Outcome returned by QuizSession.answer()
    """
    item = outcome.item
    chosen = item.options[outcome.option_index]

    if outcome.correct:
        st.success("✅ Richtig!")
    else:
        correct_text = next((option.text for option in item.options if option.is_correct), "")
        st.error(f"❌ Leider falsch. Richtig wäre: {correct_text}")

    if chosen.feedback:
        st.caption(chosen.feedback)

    if outcome.difficulty_changed:
        st.info(
            f"Schwierigkeit angepasst: {outcome.previous_difficulty.label} → "
            f"{outcome.next_difficulty.label}"
        )

    render_explanation(item)


def render_explanation(item: PracticeItem) -> None:
    """Render the explanation expander for a question."""
    if not item.explanation:
        return
    with st.expander("📖 Erklärung", expanded=True):
        st.write(item.explanation)
