"""
Candidate selector for choosing the next phrase to review.

Deterministic ranking over the caller's working set (no randomness, no
I/O), so "why was this card shown" can always be replayed.

Priority order:
1. Due items - most overdue first, then lowest know_streak, then id
2. New items (never reviewed) - in pool order
3. Nothing due and nothing new - None, the caller decides what to do

The item shown last is skipped whenever another eligible item exists.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, Optional, Sequence

from review_core.config import EngineConfig
from review_core.srs.mastery import GroupEnabled, is_mastered
from review_core.srs.review_item import (
    ReviewItem,
    is_due,
    is_new,
    require_aware,
    validate_item,
)

logger = logging.getLogger(__name__)


def rank_candidates(pool: Sequence[ReviewItem], now: datetime) -> list[ReviewItem]:
    """
    Eligible items in presentation order.

    Due items come first (ranked), followed by new items that are not yet
    due, in pool order. Items that are neither due nor new are left out.
    """
    require_aware(now)
    for item in pool:
        validate_item(item)

    due = [item for item in pool if is_due(item, now)]
    due.sort(key=lambda item: (item.next_review_at, item.know_streak, item.id))

    new = [item for item in pool if is_new(item) and not is_due(item, now)]
    return due + new


def select_next(
    pool: Sequence[ReviewItem],
    last_shown_id: Optional[str],
    now: datetime
) -> Optional[ReviewItem]:
    """
    Select the next item to present.

    Args:
        pool: Working set, in the caller's order
        last_shown_id: Id of the item shown just before, if any
        now: Current time (timezone-aware)

    Returns:
        The chosen item, or None if nothing is due and nothing is new
    """
    candidates = rank_candidates(pool, now)
    if not candidates:
        logger.debug("No due or new items among %d", len(pool))
        return None

    for candidate in candidates:
        if candidate.id != last_shown_id:
            return candidate

    # Only the last shown item is eligible
    return candidates[0]


def upcoming(
    pool: Sequence[ReviewItem],
    last_shown_id: Optional[str],
    now: datetime,
    count: int = 2
) -> list[ReviewItem]:
    """
    Look ahead at the next `count` items the selector would present.

    Used by prefetching caches: each pick is treated as shown before
    choosing the following one. Stops early on None or on a repeat.
    """
    picks: list[ReviewItem] = []
    seen: set[str] = set()
    previous_id = last_shown_id

    for _ in range(count):
        item = select_next(pool, previous_id, now)
        if item is None or item.id in seen:
            break
        picks.append(item)
        seen.add(item.id)
        previous_id = item.id

    logger.debug("Upcoming after %r: %s", last_shown_id, [item.id for item in picks])
    return picks


def review_pool(
    items: Iterable[ReviewItem],
    group_enabled: GroupEnabled,
    config: Optional[EngineConfig] = None
) -> list[ReviewItem]:
    """
    Practice pool: items of enabled groups that are not mastered yet.

    Pool order is preserved.
    """
    return [
        item for item in items
        if group_enabled(item.group_id) and not is_mastered(item, group_enabled, config)
    ]
