"""
Card UI Component

Renders question and flashcard panels with a difficulty badge.
"""

from __future__ import annotations

from html import escape

import streamlit as st

from app.ui.flashcard_style import (
    BADGE_FONT_SIZE,
    CARD_MIN_HEIGHT,
    CARD_PADDING,
    DEFAULT_CARD_STYLE,
    DIFFICULTY_COLORS,
    MUTED_COLOR,
    TEXT_COLOR,
    CardStyle,
)
from core.practice import Difficulty


def render_card(
    main_text: str,
    subtitle: str = "",
    difficulty: Difficulty | None = None,
    style: CardStyle | None = None,
) -> None:
    """
    Render a card panel.

    Args:
        main_text: Primary text (center)
        subtitle: Optional caption below the main text
        difficulty: Optional tier shown as a badge in the top-right corner
        style: Optional style preset
    """
    style = style or DEFAULT_CARD_STYLE

    badge = ""
    if difficulty is not None:
        badge = (
            f'<span style="position: absolute; top: 12px; right: 18px; '
            f'font-size: {BADGE_FONT_SIZE}; font-weight: 600; '
            f'color: {DIFFICULTY_COLORS[difficulty]};">{difficulty.label}</span>'
        )

    caption = ""
    if subtitle:
        caption = (
            f'<p style="font-size: {style.caption_size}; color: {MUTED_COLOR}; '
            f'margin-top: 14px;">{escape(subtitle)}</p>'
        )

    st.markdown(
        f'<div style="position: relative; background: {style.background}; '
        f'padding: {CARD_PADDING}; min-height: {CARD_MIN_HEIGHT}; border-radius: 15px; '
        'box-shadow: 0 4px 6px rgba(0, 0, 0, 0.1); display: flex; flex-direction: column; '
        'justify-content: center; text-align: center; overflow-wrap: anywhere;">'
        f"{badge}"
        f'<p style="font-size: {style.text_size}; font-weight: {style.text_weight}; '
        f'color: {TEXT_COLOR}; margin: 0; line-height: 1.4;">{escape(main_text)}</p>'
        f"{caption}</div>",
        unsafe_allow_html=True,
    )
