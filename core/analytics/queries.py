"""
Data-loading helpers for learning insights.
"""

from __future__ import annotations

from typing import Optional

import pandas as pd

from core.progress import database


STATS_COLUMNS = ["module_id", "correct_answers", "total_answers"]
EVENT_COLUMNS = ["module_id", "question_id", "correct", "quality", "timestamp", "day_utc"]


def load_module_stats_df(user_id: str) -> pd.DataFrame:
    """
    Load per-module correct/total counters for a user into a dataframe.
    """
    rows = database.get_module_stats(user_id)
    if not rows:
        return pd.DataFrame(columns=STATS_COLUMNS)
    return pd.DataFrame(rows)[STATS_COLUMNS].copy()


def load_answer_events_df(user_id: str, module_id: Optional[str] = None) -> pd.DataFrame:
    """
    Load answer events for a user (optionally one module) into a dataframe.
    """
    rows = database.get_answer_events(user_id, module_id=module_id)
    if not rows:
        return pd.DataFrame(columns=EVENT_COLUMNS)

    df = pd.DataFrame(rows)
    df = df[["module_id", "question_id", "correct", "quality", "timestamp"]].copy()
    df["timestamp"] = pd.to_datetime(df["timestamp"], utc=True, errors="coerce")
    df = df.dropna(subset=["timestamp"])
    df["correct"] = df["correct"].astype(bool)
    df["day_utc"] = df["timestamp"].dt.floor("D")
    df = df.sort_values("timestamp").reset_index(drop=True)
    return df
