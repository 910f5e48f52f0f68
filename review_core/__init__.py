"""
Review core: spaced-repetition scheduling for a phrase trainer.

The engine takes all state as arguments and returns new state; storage,
sync and UI belong to the caller.
"""

# srs must load first: config and review_log both read srs.constants
from review_core.srs import (
    InvalidAction,
    InvalidItemState,
    LeechAction,
    ReviewAction,
    ReviewEngineError,
    ReviewItem,
    apply_leech_action,
    apply_review,
    interval,
    is_leech,
    is_mastered,
    new_item,
    refresh_mastery,
)
from review_core.config import DEFAULT_CONFIG, EngineConfig, load_config
from review_core.review_log import ReviewLog, ReviewLogEntry
from review_core.selector import rank_candidates, review_pool, select_next, upcoming

__all__ = [
    "DEFAULT_CONFIG",
    "EngineConfig",
    "load_config",
    "ReviewLog",
    "ReviewLogEntry",
    "rank_candidates",
    "review_pool",
    "select_next",
    "upcoming",
    "InvalidAction",
    "InvalidItemState",
    "LeechAction",
    "ReviewAction",
    "ReviewEngineError",
    "ReviewItem",
    "apply_leech_action",
    "apply_review",
    "interval",
    "is_leech",
    "is_mastered",
    "new_item",
    "refresh_mastery",
]
