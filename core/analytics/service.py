"""
Service layer to assemble learning insights.
"""

from __future__ import annotations

from core.analytics.constants import MODULE_TITLES
from core.analytics.metrics import (
    build_day_index,
    compute_accuracy_daily,
    compute_answers_daily,
    compute_module_insights,
)
from core.analytics.queries import load_answer_events_df, load_module_stats_df
from core.analytics.types import ModuleDashboardData, ModuleInsight


def build_insights(user_id: str) -> list[ModuleInsight]:
    """
    Accuracy and recommendation for every module the user has practised.
    """
    insights_df = compute_module_insights(load_module_stats_df(user_id))
    return [
        ModuleInsight(
            module_id=row.module_id,
            title=row.title,
            correct_answers=int(row.correct_answers),
            total_answers=int(row.total_answers),
            percentage_correct=int(row.percentage_correct),
            recommendation=row.recommendation,
        )
        for row in insights_df.itertuples(index=False)
    ]


def build_module_dashboard(user_id: str, module_id: str) -> ModuleDashboardData:
    """
    Daily answer counts and accuracy for one module.
    """
    events_df = load_answer_events_df(user_id, module_id=module_id)
    day_index = build_day_index(events_df)
    return ModuleDashboardData(
        module_id=module_id,
        title=MODULE_TITLES.get(module_id, module_id),
        answers_daily=compute_answers_daily(events_df, day_index),
        accuracy_daily=compute_accuracy_daily(events_df, day_index),
    )
