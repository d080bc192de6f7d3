"""
Insights page rendering.
"""

from __future__ import annotations

import pandas as pd
import streamlit as st

from core import config
from core.analytics import MODULE_TITLES, build_insights, build_module_dashboard


@st.cache_data(show_spinner=False)
def _cached_insights(user_id: str):
    return build_insights(user_id)


@st.cache_data(show_spinner=False)
def _cached_dashboard(user_id: str, module_id: str):
    return build_module_dashboard(user_id, module_id)


def render_insights_page() -> None:
    st.subheader("Lern-Insights")
    st.caption(f"Benutzer: {st.session_state.user_id}")

    if not config.get_database_url():
        st.info("Insights benötigen eine Datenbank (DATABASE_URL ist nicht gesetzt).")
        return

    if st.button("Aktualisieren", use_container_width=False):
        _cached_insights.clear()
        _cached_dashboard.clear()
        st.rerun()

    insights = _cached_insights(st.session_state.user_id)
    if not insights:
        st.info("Noch keine Antworten gespeichert. Starte ein Quiz oder die Karteikarten.")
        return

    table = pd.DataFrame(
        {
            "Modul": [insight.title for insight in insights],
            "Richtig": [insight.correct_answers for insight in insights],
            "Gesamt": [insight.total_answers for insight in insights],
            "Quote (%)": [insight.percentage_correct for insight in insights],
            "Empfehlung": [insight.recommendation for insight in insights],
        }
    )
    st.dataframe(table, hide_index=True, use_container_width=True)

    module_ids = [insight.module_id for insight in insights]
    selected = st.selectbox(
        "Verlauf",
        module_ids,
        format_func=lambda module_id: MODULE_TITLES.get(module_id, module_id),
    )
    dashboard = _cached_dashboard(st.session_state.user_id, selected)

    if dashboard.answers_daily.empty:
        st.info("Keine Antworten für dieses Modul.")
        return

    col1, col2 = st.columns(2)
    with col1:
        st.caption("Antworten pro Tag")
        st.bar_chart(dashboard.answers_daily.rename("answers").to_frame())
    with col2:
        st.caption("Trefferquote pro Tag (%)")
        st.line_chart(dashboard.accuracy_daily.rename("accuracy").to_frame())
