"""
Review log for practice transitions.

Tracks every scheduling transition in an append-only, size-bounded log.
The engine produces entries; the caller owns and persists the log.
Metrics (accuracy, lapses per day, leech crossings) are computed later
by review_core.analytics and never feed back into scheduling.
"""

from __future__ import annotations

import logging
import uuid
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Iterable, Iterator, Optional, Union

from review_core.config import DEFAULT_CONFIG, EngineConfig
from review_core.srs.constants import LeechAction, ReviewAction

logger = logging.getLogger(__name__)


LoggedAction = Union[ReviewAction, LeechAction]


def _new_entry_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class ReviewLogEntry:
    """
    Immutable snapshot of one transition.

    Captures the counters before and after the action, the interval that
    was scheduled and whether the item crossed the leech threshold.
    """
    # Identity and context
    item_id: str
    group_id: str
    timestamp: datetime
    action: LoggedAction
    was_correct: bool
    was_new: bool

    # State before / after
    previous_mastery_level: int
    new_mastery_level: int
    previous_know_streak: int
    new_know_streak: int
    previous_know_count: int
    new_know_count: int
    previous_lapses: int
    new_lapses: int
    previous_next_review_at: Optional[datetime]
    next_review_at: datetime
    previous_is_mastered: bool
    new_is_mastered: bool

    # Scheduling outcome
    interval: timedelta
    failure_weight: int = 0
    crossed_into_leech: bool = False
    is_leech_after: bool = False

    id: str = field(default_factory=_new_entry_id)


class ReviewLog:
    """
    Bounded FIFO of ReviewLogEntry values (oldest first).

    Capacity defaults to the configured log_capacity. Appending beyond
    capacity evicts the oldest entry. Entries are frozen, so nothing read
    from the log can be changed in place.
    """

    def __init__(
        self,
        entries: Iterable[ReviewLogEntry] = (),
        capacity: Optional[int] = None,
        config: Optional[EngineConfig] = None
    ):
        if capacity is None:
            capacity = (config or DEFAULT_CONFIG).log_capacity
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._entries: deque[ReviewLogEntry] = deque(maxlen=capacity)
        self.extend(entries)

    @classmethod
    def from_config(
        cls,
        config: EngineConfig,
        entries: Iterable[ReviewLogEntry] = ()
    ) -> "ReviewLog":
        """Log sized by config.log_capacity, e.g. from load_config()."""
        return cls(entries, config=config)

    @property
    def capacity(self) -> int:
        return self._entries.maxlen

    def append(self, entry: ReviewLogEntry) -> None:
        """Add an entry, evicting the oldest one when full."""
        if not isinstance(entry, ReviewLogEntry):
            raise TypeError(f"expected ReviewLogEntry, got {type(entry).__name__}")
        if len(self._entries) == self.capacity:
            logger.debug(
                "Review log full (%d), evicting entry %s",
                self.capacity,
                self._entries[0].id,
            )
        self._entries.append(entry)

    def extend(self, entries: Iterable[ReviewLogEntry]) -> None:
        for entry in entries:
            self.append(entry)

    def latest(self, limit: int = 10) -> list[ReviewLogEntry]:
        """
        Most recent entries.

        Args:
            limit: Maximum number of entries

        Returns:
            List of entries (newest first)
        """
        if limit <= 0:
            return []
        result = []
        for entry in reversed(self._entries):
            if len(result) >= limit:
                break
            result.append(entry)
        return result

    def entries(self) -> tuple[ReviewLogEntry, ...]:
        """Snapshot of all entries, oldest first."""
        return tuple(self._entries)

    def __iter__(self) -> Iterator[ReviewLogEntry]:
        return iter(tuple(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self):
        return f"<ReviewLog({len(self)}/{self.capacity})>"
