"""
Practice page rendering.
"""

from __future__ import annotations

import streamlit as st

from app.activity_registry import ACTIVITY_SPECS
from app.session_controller import (
    advance_quiz,
    end_session,
    rate_card,
    reveal_card,
    start_new_session,
    submit_answer,
)
from app.ui import (
    render_answer_feedback,
    render_card,
    render_rating_buttons,
    render_session_complete,
    render_session_stats,
)
from app.ui.flashcard_style import FLASHCARD_BACK_STYLE, FLASHCARD_FRONT_STYLE, QUESTION_STYLE
from core import config
from core.practice_session import QuizSession


def render_practice_page() -> None:
    """
    Render the practice flow (intro or active session).
    """
    if st.session_state.practice_session is None:
        _render_intro_screen()
        return

    if render_session_stats():
        end_session()
        st.rerun()

    if isinstance(st.session_state.practice_session, QuizSession):
        _render_quiz()
    else:
        _render_flashcards()


def _render_intro_screen() -> None:
    st.title("🎯 Vertriebstraining: Üben")
    if config.is_test_mode():
        st.warning("⚠️ **TEST MODE** - Using test database (set TEST_MODE=false in .env for production)")

    if st.session_state.session_message:
        st.error(st.session_state.session_message)
    render_session_complete()

    st.markdown("### Adaptives Quiz")
    st.markdown("Fällige Fragen zuerst, danach passend zu deinem Niveau:")

    quiz_specs = [spec for spec in ACTIVITY_SPECS.values() if spec.kind == "quiz"]
    columns = st.columns(len(quiz_specs))
    for column, spec in zip(columns, quiz_specs):
        with column:
            if st.button(spec.label, type="primary", use_container_width=True, help=spec.description):
                start_new_session(spec.mode)
                st.rerun()

    st.markdown("### Karteikarten")
    flashcard_spec = ACTIVITY_SPECS["flashcards"]
    if st.button(flashcard_spec.label, type="secondary", use_container_width=True, help=flashcard_spec.description):
        start_new_session(flashcard_spec.mode)
        st.rerun()


def _render_quiz() -> None:
    session = st.session_state.practice_session
    item = session.current_item
    outcome = st.session_state.last_outcome

    render_card(item.prompt, difficulty=item.difficulty, style=QUESTION_STYLE)
    st.markdown("<br>", unsafe_allow_html=True)

    if outcome is None:
        for index, option in enumerate(item.options):
            key = f"option_{session.position}_{index}"
            if st.button(option.text, key=key, use_container_width=True):
                submit_answer(index)
                st.rerun()
        return

    render_answer_feedback(outcome)
    is_last = session.position + 1 >= len(session.queue)
    if st.button("Ergebnis anzeigen" if is_last else "Nächste Frage", type="primary", use_container_width=True):
        advance_quiz()
        st.rerun()


def _render_flashcards() -> None:
    session = st.session_state.practice_session
    card = session.current_card

    if not st.session_state.show_answer:
        render_card(card.prompt, difficulty=card.difficulty, style=FLASHCARD_FRONT_STYLE)
        st.markdown("<br>", unsafe_allow_html=True)
        if st.button("Antwort zeigen", use_container_width=True, type="primary"):
            reveal_card()
            st.rerun()
        return

    render_card(card.explanation, subtitle=card.prompt, difficulty=card.difficulty, style=FLASHCARD_BACK_STYLE)
    st.markdown("<br>", unsafe_allow_html=True)

    rating = render_rating_buttons(key_suffix=str(session.review_count))
    if rating is not None:
        rate_card(rating)
        st.rerun()
