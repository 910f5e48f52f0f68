"""
SRS - spaced repetition state engine

Pure, synchronous scheduling logic for phrase review:
- Mastery state machine (know / forgot / dont_know transitions)
- Interval policy (tier -> delay step table)
- Leech detection (chronically failed items)

Quick start:
    from review_core import srs

    item = srs.new_item("phrase-1", "greetings", now)
    item, crossed, entry = srs.apply_review(item, "know", enabled, now)
"""

from review_core.srs.constants import (
    FAILURE_WEIGHT,
    INTERVALS,
    LEECH_THRESHOLD,
    LOG_CAPACITY,
    MASTERY_TIER,
    MAX_TIER,
    POSTPONE_DELAY,
    PROMOTION_STREAK,
    RETRY_SHORT_DELAY,
    LeechAction,
    ReviewAction,
)
from review_core.srs.errors import InvalidAction, InvalidItemState, ReviewEngineError
from review_core.srs.review_item import ReviewItem, is_due, is_new, new_item, validate_item
from review_core.srs.intervals import interval, next_review_time
from review_core.srs.leech import crossed_into_leech, is_leech
from review_core.srs.mastery import (
    LeechActionOutcome,
    ReviewOutcome,
    apply_leech_action,
    apply_review,
    is_mastered,
    refresh_mastery,
)


__all__ = [
    # Transitions
    "apply_review",
    "apply_leech_action",
    "ReviewOutcome",
    "LeechActionOutcome",

    # Derived state
    "is_mastered",
    "refresh_mastery",
    "is_leech",
    "crossed_into_leech",
    "interval",
    "next_review_time",

    # Items
    "ReviewItem",
    "new_item",
    "validate_item",
    "is_due",
    "is_new",

    # Enums
    "ReviewAction",
    "LeechAction",

    # Errors
    "ReviewEngineError",
    "InvalidAction",
    "InvalidItemState",

    # Parameters
    "PROMOTION_STREAK",
    "MASTERY_TIER",
    "MAX_TIER",
    "LEECH_THRESHOLD",
    "FAILURE_WEIGHT",
    "INTERVALS",
    "RETRY_SHORT_DELAY",
    "POSTPONE_DELAY",
    "LOG_CAPACITY",
]
