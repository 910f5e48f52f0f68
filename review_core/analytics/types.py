"""
Typed containers for practice analytics.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from review_core.analytics.constants import USAGE_ACTIONS


def _empty_usage() -> dict[str, float]:
    return {action: 0.0 for action in USAGE_ACTIONS}


@dataclass
class PracticeSummary:
    """Aggregated view of the review log plus the current item pool."""
    total_reviews: int = 0
    correct_reviews: int = 0
    accuracy: float = 0.0
    distinct_items: int = 0
    new_items_introduced: int = 0
    weighted_failures: int = 0
    leech_crossings: int = 0
    leech_actions_taken: int = 0
    reviews_per_day: dict[str, int] = field(default_factory=dict)
    leech_item_ids: list[str] = field(default_factory=list)
    mastered_by_group: dict[str, int] = field(default_factory=dict)
    action_usage: dict[str, float] = field(default_factory=_empty_usage)
