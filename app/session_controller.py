"""
Session lifecycle helpers for Streamlit app.
"""

from __future__ import annotations

import logging

import streamlit as st

from app.activity_registry import get_activity_spec
from app.state import get_progress_service
from app.ui import summarize_session
from core.practice import Difficulty, PracticeError
from core.progress import fetch_due_snapshot, record_answer_safely


logger = logging.getLogger(__name__)

NO_ITEMS_MESSAGE = "Keine Übungen verfügbar."


def start_new_session(mode: str) -> None:
    """
    Start a new practice session for the given activity mode.
    """
    spec = get_activity_spec(mode)
    service = get_progress_service()
    snapshot = fetch_due_snapshot(service, spec.module_id, st.session_state.user_id)

    try:
        session = spec.build_session(snapshot)
    except (PracticeError, ValueError) as exc:
        logger.exception("Failed to build %s session", mode)
        st.session_state.session_message = f"Fehler beim Starten der Sitzung: {exc}"
        return

    if session.is_empty:
        st.session_state.session_message = NO_ITEMS_MESSAGE
        return

    logger.info(
        "Started %s session: %d items, %d due, target %s%s",
        mode,
        len(session.queue),
        len(snapshot.due_ids),
        snapshot.target_difficulty.name,
        " (fallback)" if snapshot.from_fallback else "",
    )

    st.session_state.session_id = session.session_id
    st.session_state.learning_mode = mode
    st.session_state.practice_session = session
    st.session_state.last_outcome = None
    st.session_state.show_answer = False
    st.session_state.last_summary = None
    st.session_state.session_message = None


def submit_answer(option_index: int) -> None:
    """
    Answer the current quiz question and forward the result to the progress store.
    """
    session = st.session_state.practice_session
    outcome = session.answer(option_index)
    st.session_state.last_outcome = outcome
    record_answer_safely(get_progress_service(), st.session_state.user_id, outcome.record)


def advance_quiz() -> None:
    """
    Move to the next quiz question, or finish the session.
    """
    session = st.session_state.practice_session
    session.next()
    st.session_state.last_outcome = None
    if session.is_finished:
        end_session()


def reveal_card() -> None:
    st.session_state.show_answer = True


def rate_card(rating: Difficulty) -> None:
    """
    Rate the current flashcard, record it and show the next one.
    """
    session = st.session_state.practice_session
    outcome = session.rate(rating)
    record_answer_safely(get_progress_service(), st.session_state.user_id, outcome.record)
    st.session_state.show_answer = False
    if session.is_finished:
        end_session()


def end_session() -> None:
    """
    End the current session and keep its summary for the intro screen.
    """
    session = st.session_state.practice_session
    if session is not None and session.state.answered_count > 0:
        st.session_state.last_summary = summarize_session(session)
    st.session_state.practice_session = None
    st.session_state.learning_mode = None
    st.session_state.last_outcome = None
    st.session_state.show_answer = False
