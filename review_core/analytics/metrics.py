"""
Metric computations over the review log dataframe.
"""

from __future__ import annotations

import pandas as pd

from review_core.analytics.constants import USAGE_ACTIONS, USAGE_DECAY, USAGE_INCREMENT


def review_rows(events_df: pd.DataFrame) -> pd.DataFrame:
    """
    Only know / forgot / dont_know rows (leech actions excluded).
    """
    if events_df.empty:
        return events_df
    return events_df[events_df["is_review"].astype(bool)]


def build_day_index(events_df: pd.DataFrame) -> pd.DatetimeIndex:
    """
    Build a dense UTC day index spanning the event range.
    """
    if events_df.empty:
        return pd.DatetimeIndex([], tz="UTC")
    start = events_df["day_utc"].min()
    end = events_df["day_utc"].max()
    return pd.date_range(start=start, end=end, freq="D")


def compute_accuracy(reviews_df: pd.DataFrame) -> float:
    """
    Share of reviews answered with "know".
    """
    if reviews_df.empty:
        return 0.0
    return float(reviews_df["was_correct"].astype(bool).mean())


def compute_daily_reviews(
    reviews_df: pd.DataFrame,
    day_index: pd.DatetimeIndex
) -> pd.Series:
    """
    Review count per UTC day, zero-filled across the day index.
    """
    if reviews_df.empty or len(day_index) == 0:
        return pd.Series(dtype="int64")
    daily = reviews_df.groupby("day_utc").size()
    return daily.reindex(day_index, fill_value=0).astype("int64")


def compute_distinct_items(reviews_df: pd.DataFrame) -> int:
    """
    Count unique reviewed item ids.
    """
    if reviews_df.empty:
        return 0
    return int(reviews_df["item_id"].nunique())


def compute_new_items(reviews_df: pd.DataFrame) -> int:
    """
    Reviews that introduced a never-seen item.
    """
    if reviews_df.empty:
        return 0
    return int(reviews_df["was_new"].astype(bool).sum())


def compute_weighted_failures(reviews_df: pd.DataFrame) -> int:
    """
    Failure tally, dont_know counting double.
    """
    if reviews_df.empty:
        return 0
    return int(reviews_df["failure_weight"].astype("int64").sum())


def compute_leech_crossings(reviews_df: pd.DataFrame) -> int:
    if reviews_df.empty:
        return 0
    return int(reviews_df["crossed_into_leech"].astype(bool).sum())


def compute_action_usage(
    reviews_df: pd.DataFrame,
    decay: float = USAGE_DECAY,
    increment: float = USAGE_INCREMENT
) -> dict[str, float]:
    """
    Exponentially decayed press count per review action, oldest to newest.
    """
    usage = {action: 0.0 for action in USAGE_ACTIONS}
    if reviews_df.empty:
        return usage
    for action in reviews_df["action"]:
        for key in usage:
            usage[key] *= decay
        usage[action] += increment
    return usage
