"""
Metric computations for learning insights.
"""

from __future__ import annotations

import pandas as pd

from core.analytics.constants import (
    DEFAULT_RECOMMENDATION,
    INSIGHT_COLUMNS,
    LOW_PERCENT_BELOW,
    MID_PERCENT_BELOW,
    MODULE_RECOMMENDATIONS,
    MODULE_TITLES,
)


def get_recommendation(module_id: str, percentage: float) -> str:
    """
    Recommendation text for a module at the given accuracy.
    """
    recommendation = MODULE_RECOMMENDATIONS.get(module_id)
    if not recommendation:
        return DEFAULT_RECOMMENDATION
    if percentage < LOW_PERCENT_BELOW:
        return recommendation["low"]
    if percentage < MID_PERCENT_BELOW:
        return recommendation["mid"]
    return recommendation["high"]


def compute_module_insights(stats_df: pd.DataFrame) -> pd.DataFrame:
    """
    Per-module accuracy table, weakest modules first.

    Rows without answers are dropped. Ties on accuracy are broken by the
    larger number of answers.
    """
    if stats_df.empty:
        return pd.DataFrame(columns=INSIGHT_COLUMNS)

    df = stats_df[stats_df["total_answers"] > 0].copy()
    if df.empty:
        return pd.DataFrame(columns=INSIGHT_COLUMNS)

    ratio = df["correct_answers"] / df["total_answers"]
    # Round half up
    df["percentage_correct"] = ((ratio * 100 + 0.5) // 1).astype("int64")
    df["_ratio"] = ratio
    df["title"] = df["module_id"].map(lambda module_id: MODULE_TITLES.get(module_id, module_id))
    df["recommendation"] = [
        get_recommendation(module_id, pct)
        for module_id, pct in zip(df["module_id"], df["percentage_correct"])
    ]

    df = df.sort_values(["_ratio", "total_answers"], ascending=[True, False], kind="mergesort")
    return df[INSIGHT_COLUMNS].reset_index(drop=True)


def build_day_index(events_df: pd.DataFrame) -> pd.DatetimeIndex:
    """
    Build a dense UTC day index spanning the event range.
    """
    if events_df.empty:
        return pd.DatetimeIndex([], tz="UTC")
    start = events_df["day_utc"].min()
    end = events_df["day_utc"].max()
    return pd.date_range(start=start, end=end, freq="D", tz="UTC")


def compute_answers_daily(events_df: pd.DataFrame, day_index: pd.DatetimeIndex) -> pd.Series:
    """
    Number of answers per day (zero on days without practice).
    """
    if events_df.empty or len(day_index) == 0:
        return pd.Series(dtype="int64")
    counts = events_df.groupby("day_utc").size()
    return counts.reindex(day_index, fill_value=0).astype("int64")


def compute_accuracy_daily(events_df: pd.DataFrame, day_index: pd.DatetimeIndex) -> pd.Series:
    """
    Share of correct answers per day in percent (NaN on days without practice).
    """
    if events_df.empty or len(day_index) == 0:
        return pd.Series(dtype="float64")
    daily = events_df.groupby("day_utc")["correct"].mean() * 100.0
    return daily.reindex(day_index).astype("float64")
