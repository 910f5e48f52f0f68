"""
Interval Policy

Maps a mastery tier to the delay before the next review. The step table
in EngineConfig is the single source of pacing; every due date the
engine computes goes through here.
"""

from __future__ import annotations
from datetime import datetime, timedelta
from typing import Optional

from review_core.config import DEFAULT_CONFIG, EngineConfig


def interval(mastery_level: int, config: Optional[EngineConfig] = None) -> timedelta:
    """
    Delay until the next review for a given tier.

    Tiers above max_tier use the max-tier interval.

    Args:
        mastery_level: Tier (>= 0)
        config: Engine configuration (default: DEFAULT_CONFIG)

    Returns:
        Delay as a timedelta
    """
    config = config or DEFAULT_CONFIG
    if mastery_level < 0:
        raise ValueError(f"mastery_level must be >= 0, got {mastery_level}")
    tier = min(mastery_level, config.max_tier)
    return config.intervals[tier]


def next_review_time(
    mastery_level: int,
    now: datetime,
    config: Optional[EngineConfig] = None
) -> datetime:
    """Due date for an item reviewed at `now` and left at `mastery_level`."""
    return now + interval(mastery_level, config)
