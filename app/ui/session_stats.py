"""
Session Statistics UI

Renders progress metrics and controls.
"""

import streamlit as st

from core.practice_session import FlashcardSession, QuizSession


def render_session_stats() -> bool:
    """
    Render session progress metrics and exit button.

    Returns:
        True if quit button was clicked, False otherwise
    """
    session = st.session_state.practice_session
    if session is None:
        return False

    col1, col2, col3, col4 = st.columns([2, 2, 2, 1])

    with col1:
        if isinstance(session, QuizSession):
            st.metric("Frage", f"{min(session.position + 1, len(session.queue))}/{len(session.queue)}")
        else:
            st.metric("Karten", f"{session.review_count}/{session.max_reviews}")

    with col2:
        st.metric("Schwierigkeit", session.state.current_difficulty.label)

    with col3:
        if session.state.answered_count > 0:
            st.metric("Trefferquote", f"{session.state.performance_percent}%")

    with col4:
        st.markdown("<br>", unsafe_allow_html=True)  # Align with metrics
        if st.button("❌", help="Sitzung beenden", use_container_width=True):
            return True

    st.divider()
    return False


def render_session_complete() -> None:
    """Render the summary of the last finished session."""
    summary = st.session_state.last_summary
    if not summary:
        return
    st.success(f"🎉 Sitzung abgeschlossen! {summary['answered']} Antworten.")
    if summary["kind"] == "quiz":
        st.info(f"Punkte: {summary['correct']}/{summary['answered']} ({summary['percent']}%)")
    else:
        st.info(f"Sicher gewusst: {summary['correct']}/{summary['answered']} ({summary['percent']}%)")


def summarize_session(session: QuizSession | FlashcardSession) -> dict:
    """Build the summary dict shown after a session ends."""
    return {
        "kind": "quiz" if isinstance(session, QuizSession) else "flashcards",
        "answered": session.state.answered_count,
        "correct": session.state.correct_count,
        "percent": session.state.performance_percent,
    }
