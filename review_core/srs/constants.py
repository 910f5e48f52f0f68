"""
SRS Constants and Parameters

All tunable defaults for the review engine in one place.
Runtime overrides live in review_core.config.
"""

from datetime import timedelta
from enum import Enum


# ---- Review Actions ----

class ReviewAction(str, Enum):
    """Learner response to a presented phrase."""
    KNOW = "know"            # Recalled correctly
    FORGOT = "forgot"        # Knew it once, failed now
    DONT_KNOW = "dont_know"  # No idea at all


class LeechAction(str, Enum):
    """Manual actions offered when an item turns into a leech."""
    RETRY_SHORT = "retry_short"        # See it again shortly
    RESET_PROGRESS = "reset_progress"  # Start over from scratch
    POSTPONE = "postpone"              # Park it for a day


# ---- Mastery Tiers ----

PROMOTION_STREAK = 2  # Consecutive successes needed per tier promotion
MASTERY_TIER = 5      # Tier from which an item counts as mastered
MAX_TIER = 7          # Highest reachable tier


# ---- Leech Detection ----

LEECH_THRESHOLD = 4   # Lapses at which an item becomes a leech

# Weight each action contributes to the failure tally in the review log
FAILURE_WEIGHT = {
    ReviewAction.KNOW: 0,
    ReviewAction.FORGOT: 1,
    ReviewAction.DONT_KNOW: 2,
}


# ---- Interval Table ----
# Index = mastery tier, value = delay until the next review

INTERVALS = (
    timedelta(minutes=10),  # 0
    timedelta(hours=1),     # 1
    timedelta(hours=8),     # 2
    timedelta(days=1),      # 3
    timedelta(days=3),      # 4
    timedelta(days=7),      # 5
    timedelta(days=14),     # 6
    timedelta(days=30),     # 7
)


# ---- Leech Resolution Delays ----

RETRY_SHORT_DELAY = timedelta(minutes=10)
POSTPONE_DELAY = timedelta(hours=24)


# ---- Review Log ----

LOG_CAPACITY = 5000   # Entries kept before the oldest is evicted
