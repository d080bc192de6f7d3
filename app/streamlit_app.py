"""
Sales Trainer - Main App

Streamlit host for the adaptive quiz and flashcard practice.
"""

import streamlit as st

from app.router import PAGES
from app.state import ensure_session_state
from core.logger import setup_logging


# ---- Page Setup ----

st.set_page_config(
    page_title="Sales Trainer",
    page_icon="🎯",
    layout="centered"
)


@st.cache_resource
def _init_logging():
    """Configure logging once per server process."""
    setup_logging()


_init_logging()
ensure_session_state()


# ---- Main App ----

def main():
    """Main app entry point."""
    tabs = st.tabs([page.title for page in PAGES])
    for tab, page in zip(tabs, PAGES):
        with tab:
            page.render()


if __name__ == "__main__":
    main()
