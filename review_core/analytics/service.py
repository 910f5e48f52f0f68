"""
Service layer to assemble the practice analytics summary.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Optional

from review_core.config import EngineConfig
from review_core.review_log import ReviewLogEntry
from review_core.srs.leech import is_leech
from review_core.srs.mastery import GroupEnabled, is_mastered
from review_core.srs.review_item import ReviewItem
from review_core.analytics.metrics import (
    build_day_index,
    compute_action_usage,
    compute_accuracy,
    compute_daily_reviews,
    compute_distinct_items,
    compute_leech_crossings,
    compute_new_items,
    compute_weighted_failures,
    review_rows,
)
from review_core.analytics.queries import load_review_log_df
from review_core.analytics.types import PracticeSummary


def build_practice_summary(
    log: Iterable[ReviewLogEntry],
    items: Iterable[ReviewItem],
    group_enabled: GroupEnabled,
    config: Optional[EngineConfig] = None
) -> PracticeSummary:
    """
    Summarise practice history and the current state of the pool.

    Args:
        log: Review log entries (a ReviewLog or any iterable of entries)
        items: Current item records
        group_enabled: Predicate telling whether a group is enabled
        config: Engine configuration (default: DEFAULT_CONFIG)

    Returns:
        PracticeSummary
    """
    events_df = load_review_log_df(log)
    reviews_df = review_rows(events_df)
    day_index = build_day_index(reviews_df)
    daily = compute_daily_reviews(reviews_df, day_index)

    items = list(items)
    mastered = Counter(
        item.group_id for item in items if is_mastered(item, group_enabled, config)
    )

    total = int(len(reviews_df))
    correct = int(reviews_df["was_correct"].astype(bool).sum()) if total else 0

    return PracticeSummary(
        total_reviews=total,
        correct_reviews=correct,
        accuracy=compute_accuracy(reviews_df),
        distinct_items=compute_distinct_items(reviews_df),
        new_items_introduced=compute_new_items(reviews_df),
        weighted_failures=compute_weighted_failures(reviews_df),
        leech_crossings=compute_leech_crossings(reviews_df),
        leech_actions_taken=int(len(events_df) - total),
        reviews_per_day={day.date().isoformat(): int(count) for day, count in daily.items()},
        leech_item_ids=[item.id for item in items if is_leech(item, config)],
        mastered_by_group=dict(mastered),
        action_usage=compute_action_usage(reviews_df),
    )
