"""
Simple page router for Streamlit tabs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from app.pages.practice import render_practice_page
from app.pages.insights import render_insights_page


@dataclass(frozen=True)
class AppPage:
    title: str
    render: Callable[[], None]


PAGES = [
    AppPage(title="Üben", render=render_practice_page),
    AppPage(title="Insights", render=render_insights_page),
]
