"""
Data-loading helpers for analytics.
"""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from review_core.review_log import ReviewLogEntry
from review_core.srs.constants import ReviewAction


LOG_COLUMNS = [
    "id",
    "item_id",
    "group_id",
    "timestamp",
    "action",
    "is_review",
    "was_correct",
    "was_new",
    "failure_weight",
    "crossed_into_leech",
    "day_utc",
]

REVIEW_ACTION_VALUES = {action.value for action in ReviewAction}


def load_review_log_df(entries: Iterable[ReviewLogEntry]) -> pd.DataFrame:
    """
    Load review log entries into a dataframe, sorted by timestamp.
    """
    rows = [
        {
            "id": entry.id,
            "item_id": entry.item_id,
            "group_id": entry.group_id,
            "timestamp": entry.timestamp,
            "action": entry.action.value,
            "is_review": entry.action.value in REVIEW_ACTION_VALUES,
            "was_correct": entry.was_correct,
            "was_new": entry.was_new,
            "failure_weight": entry.failure_weight,
            "crossed_into_leech": entry.crossed_into_leech,
        }
        for entry in entries
    ]
    if not rows:
        return pd.DataFrame(columns=LOG_COLUMNS)

    df = pd.DataFrame(rows)
    df["timestamp"] = pd.to_datetime(df["timestamp"], utc=True)
    df["day_utc"] = df["timestamp"].dt.floor("D")
    df = df.sort_values("timestamp", kind="stable").reset_index(drop=True)
    return df[LOG_COLUMNS]
