"""
Streamlit session state and progress service helpers.
"""

from __future__ import annotations

import streamlit as st

from core import config
from core.progress import ProgressService, build_progress_service


def get_progress_service() -> ProgressService:
    """
    Return the process-wide progress service (cached across reruns).
    """
    @st.cache_resource
    def _progress_service() -> ProgressService:
        return build_progress_service()

    return _progress_service()


def ensure_session_state() -> None:
    """
    Populate Streamlit session_state with defaults.
    """
    if "user_id" not in st.session_state:
        st.session_state.user_id = config.get_default_user_id()
    if "session_id" not in st.session_state:
        st.session_state.session_id = None
    if "learning_mode" not in st.session_state:
        st.session_state.learning_mode = None
    if "practice_session" not in st.session_state:
        st.session_state.practice_session = None
    if "last_outcome" not in st.session_state:
        st.session_state.last_outcome = None
    if "show_answer" not in st.session_state:
        st.session_state.show_answer = False
    if "last_summary" not in st.session_state:
        st.session_state.last_summary = None
    if "session_message" not in st.session_state:
        st.session_state.session_message = None
