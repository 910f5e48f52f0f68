"""
Engine configuration.

Defaults come from review_core.srs.constants. Overrides are read from
environment variables (a local .env file is honoured):

    SRS_PROMOTION_STREAK     successes per tier promotion
    SRS_MASTERY_TIER         tier from which an item is mastered
    SRS_MAX_TIER             highest reachable tier
    SRS_LEECH_THRESHOLD      lapses that flag a leech
    SRS_INTERVAL_MINUTES     comma separated interval table, one per tier
    SRS_RETRY_SHORT_MINUTES  delay for the leech "retry" action
    SRS_POSTPONE_HOURS       delay for the leech "postpone" action
    SRS_LOG_CAPACITY         review log size
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from dotenv import load_dotenv

from review_core.srs.constants import (
    INTERVALS,
    LEECH_THRESHOLD,
    LOG_CAPACITY,
    MASTERY_TIER,
    MAX_TIER,
    POSTPONE_DELAY,
    PROMOTION_STREAK,
    RETRY_SHORT_DELAY,
)


@dataclass(frozen=True)
class EngineConfig:
    """
    Every tunable of the scheduling engine.

    The interval table is indexed by mastery tier and must cover
    tiers 0..max_tier with strictly increasing delays.
    """
    promotion_streak: int = PROMOTION_STREAK
    mastery_tier: int = MASTERY_TIER
    max_tier: int = MAX_TIER
    leech_threshold: int = LEECH_THRESHOLD
    intervals: tuple[timedelta, ...] = INTERVALS
    retry_short_delay: timedelta = RETRY_SHORT_DELAY
    postpone_delay: timedelta = POSTPONE_DELAY
    log_capacity: int = LOG_CAPACITY

    def __post_init__(self):
        if self.promotion_streak < 1:
            raise ValueError("promotion_streak must be at least 1")
        if self.max_tier < 0:
            raise ValueError("max_tier must be >= 0")
        if not 0 <= self.mastery_tier <= self.max_tier:
            raise ValueError("mastery_tier must be between 0 and max_tier")
        if self.leech_threshold < 1:
            raise ValueError("leech_threshold must be at least 1")
        if self.log_capacity < 1:
            raise ValueError("log_capacity must be at least 1")
        if len(self.intervals) != self.max_tier + 1:
            raise ValueError(
                f"intervals must have {self.max_tier + 1} entries "
                f"(one per tier), got {len(self.intervals)}"
            )
        for shorter, longer in zip(self.intervals, self.intervals[1:]):
            if longer <= shorter:
                raise ValueError("intervals must be strictly increasing")
        if self.intervals[0] <= timedelta(0):
            raise ValueError("intervals must be positive")


DEFAULT_CONFIG = EngineConfig()


def _read_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _read_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def _read_intervals(name: str, default: tuple[timedelta, ...]) -> tuple[timedelta, ...]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return tuple(timedelta(minutes=float(part)) for part in raw.split(","))
    except ValueError:
        raise ValueError(
            f"{name} must be a comma separated list of minutes, got {raw!r}"
        ) from None


def load_config(dotenv_path: Optional[str] = None) -> EngineConfig:
    """
    Build an EngineConfig from environment variables.

    Args:
        dotenv_path: Optional .env file to load first (default: search cwd)

    Returns:
        EngineConfig with overrides applied

    Raises:
        ValueError: If a variable is malformed or the result is inconsistent
    """
    load_dotenv(dotenv_path)

    return EngineConfig(
        promotion_streak=_read_int("SRS_PROMOTION_STREAK", PROMOTION_STREAK),
        mastery_tier=_read_int("SRS_MASTERY_TIER", MASTERY_TIER),
        max_tier=_read_int("SRS_MAX_TIER", MAX_TIER),
        leech_threshold=_read_int("SRS_LEECH_THRESHOLD", LEECH_THRESHOLD),
        intervals=_read_intervals("SRS_INTERVAL_MINUTES", INTERVALS),
        retry_short_delay=timedelta(
            minutes=_read_float("SRS_RETRY_SHORT_MINUTES", RETRY_SHORT_DELAY.total_seconds() / 60)
        ),
        postpone_delay=timedelta(
            hours=_read_float("SRS_POSTPONE_HOURS", POSTPONE_DELAY.total_seconds() / 3600)
        ),
        log_capacity=_read_int("SRS_LOG_CAPACITY", LOG_CAPACITY),
    )
