"""
Review Item - the unit being scheduled

Defines the review record and the invariants every stored record must
satisfy before the engine will derive anything from it.

Key fields:
- mastery_level: memory-strength tier, controls review spacing
- know_streak: consecutive successes since the last failure
- know_count / lapses: lifetime success / failure counters
- next_review_at: item is due once now >= next_review_at
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from review_core.srs.errors import InvalidItemState


@dataclass(frozen=True)
class ReviewItem:
    """
    Scheduling state for a single phrase.

    Instances are immutable; the mastery state machine returns updated
    copies instead of editing in place.
    """
    id: str
    group_id: str

    # Memory strength
    mastery_level: int = 0
    know_streak: int = 0
    know_count: int = 0
    lapses: int = 0

    # Scheduling
    last_reviewed_at: Optional[datetime] = None  # None = never reviewed
    next_review_at: Optional[datetime] = None

    # Derived, recomputed on every transition (see mastery.is_mastered)
    is_mastered: bool = False


def require_aware(now: datetime) -> datetime:
    """Reject naive datetimes so due comparisons never mix clocks."""
    if now.tzinfo is None or now.utcoffset() is None:
        raise ValueError("now must be a timezone-aware datetime")
    return now


def new_item(item_id: str, group_id: str, now: datetime) -> ReviewItem:
    """
    Create a never-reviewed item, due immediately.

    Args:
        item_id: Stable identifier of the phrase
        group_id: Collection (category) the phrase belongs to
        now: Creation time

    Returns:
        ReviewItem with all counters at zero and next_review_at = now
    """
    return ReviewItem(
        id=item_id,
        group_id=group_id,
        next_review_at=require_aware(now),
    )


def validate_item(item: ReviewItem) -> ReviewItem:
    """
    Check the record invariants.

    Raises:
        InvalidItemState: On the first violated invariant

    Returns:
        The same item, for chaining
    """
    counters = {
        "mastery_level": item.mastery_level,
        "know_streak": item.know_streak,
        "know_count": item.know_count,
        "lapses": item.lapses,
    }
    for name, value in counters.items():
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidItemState(item.id, f"{name} must be an integer, got {value!r}")
        if value < 0:
            raise InvalidItemState(item.id, f"{name} must be >= 0, got {value}")

    if item.know_streak > item.know_count:
        raise InvalidItemState(
            item.id,
            f"know_streak ({item.know_streak}) exceeds know_count ({item.know_count})",
        )

    if item.next_review_at is None:
        raise InvalidItemState(item.id, "next_review_at is not set")

    for name, value in (("next_review_at", item.next_review_at), ("last_reviewed_at", item.last_reviewed_at)):
        if value is not None and (value.tzinfo is None or value.utcoffset() is None):
            raise InvalidItemState(item.id, f"{name} must be timezone-aware, got {value.isoformat()}")

    never_reviewed = item.know_count == 0 and item.lapses == 0
    if never_reviewed and item.last_reviewed_at is not None:
        raise InvalidItemState(item.id, "last_reviewed_at is set but no review was counted")
    if not never_reviewed and item.last_reviewed_at is None:
        raise InvalidItemState(item.id, "reviews were counted but last_reviewed_at is missing")

    return item


def is_new(item: ReviewItem) -> bool:
    """An item is new until its first review."""
    return item.last_reviewed_at is None


def is_due(item: ReviewItem, now: datetime) -> bool:
    """Due once the scheduled review time has passed."""
    return item.next_review_at is not None and item.next_review_at <= now
