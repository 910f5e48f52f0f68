"""
Pydantic models for the persisted review state.

The caller stores items and log entries in whatever backend it likes;
these records define the exact field layout and round-trip losslessly
to and from the engine types (including through JSON).
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional, Union

from pydantic import BaseModel, Field

from review_core.review_log import ReviewLogEntry
from review_core.srs.constants import LeechAction, ReviewAction
from review_core.srs.errors import InvalidAction
from review_core.srs.review_item import ReviewItem, validate_item


# ---- Review Item ----

class ReviewItemRecord(BaseModel):
    """Stored form of a ReviewItem."""
    id: str = Field(..., description="Stable phrase identifier")
    group_id: str = Field(..., description="Category the phrase belongs to")

    mastery_level: int = Field(default=0, description="Memory-strength tier")
    know_streak: int = Field(default=0, description="Consecutive successes since last failure")
    know_count: int = Field(default=0, description="Lifetime successes")
    lapses: int = Field(default=0, description="Lifetime failures")

    last_reviewed_at: Optional[datetime] = None  # None = never reviewed
    next_review_at: datetime
    is_mastered: bool = False

    @classmethod
    def from_item(cls, item: ReviewItem) -> "ReviewItemRecord":
        return cls(
            id=item.id,
            group_id=item.group_id,
            mastery_level=item.mastery_level,
            know_streak=item.know_streak,
            know_count=item.know_count,
            lapses=item.lapses,
            last_reviewed_at=item.last_reviewed_at,
            next_review_at=item.next_review_at,
            is_mastered=item.is_mastered,
        )

    def to_item(self) -> ReviewItem:
        """
        Rebuild the engine item.

        Raises:
            InvalidItemState: If the stored counters break the invariants
        """
        return validate_item(ReviewItem(
            id=self.id,
            group_id=self.group_id,
            mastery_level=self.mastery_level,
            know_streak=self.know_streak,
            know_count=self.know_count,
            lapses=self.lapses,
            last_reviewed_at=self.last_reviewed_at,
            next_review_at=self.next_review_at,
            is_mastered=self.is_mastered,
        ))


# ---- Review Log Entry ----

def parse_logged_action(value: str) -> Union[ReviewAction, LeechAction]:
    """Map a stored action string back to its enum."""
    for action_type in (ReviewAction, LeechAction):
        try:
            return action_type(value)
        except ValueError:
            continue
    allowed = [a.value for a in ReviewAction] + [a.value for a in LeechAction]
    raise InvalidAction(value, allowed)


class ReviewLogEntryRecord(BaseModel):
    """Stored form of a ReviewLogEntry."""
    id: str
    item_id: str
    group_id: str
    timestamp: datetime
    action: str = Field(..., description="know / forgot / dont_know or a leech action")
    was_correct: bool
    was_new: bool

    previous_mastery_level: int
    new_mastery_level: int
    previous_know_streak: int
    new_know_streak: int
    previous_know_count: int
    new_know_count: int
    previous_lapses: int
    new_lapses: int
    previous_next_review_at: Optional[datetime] = None
    next_review_at: datetime
    previous_is_mastered: bool
    new_is_mastered: bool

    interval: timedelta
    failure_weight: int = 0
    crossed_into_leech: bool = False
    is_leech_after: bool = False

    @classmethod
    def from_entry(cls, entry: ReviewLogEntry) -> "ReviewLogEntryRecord":
        return cls(
            id=entry.id,
            item_id=entry.item_id,
            group_id=entry.group_id,
            timestamp=entry.timestamp,
            action=entry.action.value,
            was_correct=entry.was_correct,
            was_new=entry.was_new,
            previous_mastery_level=entry.previous_mastery_level,
            new_mastery_level=entry.new_mastery_level,
            previous_know_streak=entry.previous_know_streak,
            new_know_streak=entry.new_know_streak,
            previous_know_count=entry.previous_know_count,
            new_know_count=entry.new_know_count,
            previous_lapses=entry.previous_lapses,
            new_lapses=entry.new_lapses,
            previous_next_review_at=entry.previous_next_review_at,
            next_review_at=entry.next_review_at,
            previous_is_mastered=entry.previous_is_mastered,
            new_is_mastered=entry.new_is_mastered,
            interval=entry.interval,
            failure_weight=entry.failure_weight,
            crossed_into_leech=entry.crossed_into_leech,
            is_leech_after=entry.is_leech_after,
        )

    def to_entry(self) -> ReviewLogEntry:
        data = self.model_dump()
        data["action"] = parse_logged_action(self.action)
        return ReviewLogEntry(**data)
