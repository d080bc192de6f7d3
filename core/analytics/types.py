"""
Types for learning insights.
"""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd


@dataclass(frozen=True)
class ModuleInsight:
    """
    Accuracy summary and next-step recommendation for one practice module.
    """
    module_id: str
    title: str
    correct_answers: int
    total_answers: int
    percentage_correct: int
    recommendation: str


@dataclass(frozen=True)
class ModuleDashboardData:
    """
    Precomputed daily series for one module's insight chart.
    """
    module_id: str
    title: str
    answers_daily: pd.Series
    accuracy_daily: pd.Series
