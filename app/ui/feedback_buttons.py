"""
Rating Button UI

Renders the Schwer / Mittel / Einfach buttons for flashcards.
"""

from typing import Optional

import streamlit as st

from core.practice import Difficulty


RATING_BUTTONS = [
    (Difficulty.HARD, "😰 Schwer", "Karte kommt in Kürze wieder"),
    (Difficulty.MEDIUM, "👍 Mittel", "Weiter zur nächsten Karte"),
    (Difficulty.EASY, "✨ Einfach", "Karte ans Ende verschieben"),
]


def render_rating_buttons(key_suffix: str = "") -> Optional[Difficulty]:
    """
    Render flashcard rating buttons.

    Args:
        key_suffix: Suffix that keeps button keys unique per card view

    Returns:
        Difficulty selected by the user, or None if no button was clicked
    """
    st.markdown("**Wie gut kanntest du die Antwort?**")

    selected = None
    columns = st.columns(len(RATING_BUTTONS))
    for column, (rating, label, help_text) in zip(columns, RATING_BUTTONS):
        with column:
            if st.button(label, key=f"rate_{rating.name}_{key_suffix}", help=help_text, use_container_width=True):
                selected = rating
    return selected
