"""
Mastery State Machine - review transitions

Pure state updates (no I/O, no clock reads).

Main workflow:
1. Validate the item and the action (caller's input)
2. Apply the counter rules for the action
3. Schedule the next review through the interval policy
4. Re-derive is_mastered and check the leech edge
5. Return the updated item + a review log entry

The caller persists the item and appends the entry to its ReviewLog.
"""

from __future__ import annotations
from dataclasses import replace
from datetime import datetime, timedelta
from typing import Any, Callable, Iterable, NamedTuple, Optional

from review_core.config import DEFAULT_CONFIG, EngineConfig
from review_core.review_log import ReviewLogEntry
from review_core.srs import intervals, leech
from review_core.srs.constants import FAILURE_WEIGHT, LeechAction, ReviewAction
from review_core.srs.errors import InvalidAction
from review_core.srs.review_item import ReviewItem, require_aware, validate_item


GroupEnabled = Callable[[str], bool]


class ReviewOutcome(NamedTuple):
    """Result of apply_review."""
    item: ReviewItem
    crossed_into_leech: bool
    log_entry: ReviewLogEntry


class LeechActionOutcome(NamedTuple):
    """Result of apply_leech_action."""
    item: ReviewItem
    log_entry: ReviewLogEntry


def _coerce_action(action: Any, action_type: type) -> Any:
    """Accept an enum member or its string value; reject anything else."""
    allowed = [member.value for member in action_type]
    if isinstance(action, action_type):
        return action
    if isinstance(action, str) and not isinstance(action, (ReviewAction, LeechAction)):
        try:
            return action_type(action)
        except ValueError:
            raise InvalidAction(action, allowed) from None
    raise InvalidAction(action, allowed)


def is_mastered(
    item: ReviewItem,
    group_enabled: GroupEnabled,
    config: Optional[EngineConfig] = None
) -> bool:
    """
    Derive the mastered flag.

    Mastered = tier at or above the mastery tier AND the item's group is
    enabled. Items in a disabled group are never reported as mastered.
    """
    config = config or DEFAULT_CONFIG
    validate_item(item)
    return item.mastery_level >= config.mastery_tier and bool(group_enabled(item.group_id))


def refresh_mastery(
    items: Iterable[ReviewItem],
    group_enabled: GroupEnabled,
    config: Optional[EngineConfig] = None
) -> list[ReviewItem]:
    """
    Re-derive is_mastered for every item (e.g. after a group was toggled).

    Items whose flag is already correct are returned unchanged.
    """
    refreshed = []
    for item in items:
        mastered = is_mastered(item, group_enabled, config)
        refreshed.append(item if item.is_mastered == mastered else replace(item, is_mastered=mastered))
    return refreshed


def apply_review(
    item: ReviewItem,
    action: ReviewAction | str,
    group_enabled: GroupEnabled,
    now: datetime,
    config: Optional[EngineConfig] = None
) -> ReviewOutcome:
    """
    Apply a learner response and return the updated item.

    Rules:
    - know: know_count and know_streak +1; every `promotion_streak`
      consecutive successes promote one tier (capped at max_tier)
    - forgot: know_streak = 0, lapses +1, tier halved (floor)
    - dont_know: same as forgot, with double failure weight in the log

    The next review is scheduled from the resulting tier.

    Args:
        item: Current item state
        action: ReviewAction or its string value
        group_enabled: Predicate telling whether a group is enabled
        now: Review time (timezone-aware)
        config: Engine configuration (default: DEFAULT_CONFIG)

    Returns:
        ReviewOutcome(item, crossed_into_leech, log_entry)

    Raises:
        InvalidAction: Unknown action
        InvalidItemState: Item breaks the record invariants
    """
    config = config or DEFAULT_CONFIG
    action = _coerce_action(action, ReviewAction)
    validate_item(item)
    require_aware(now)

    if action == ReviewAction.KNOW:
        updated = _apply_success(item, config)
    else:
        updated = _apply_failure(item)

    next_review_at = intervals.next_review_time(updated.mastery_level, now, config)
    updated = replace(updated, last_reviewed_at=now, next_review_at=next_review_at)
    updated = replace(updated, is_mastered=is_mastered(updated, group_enabled, config))

    crossed = action != ReviewAction.KNOW and leech.crossed_into_leech(item, updated, config)

    entry = _build_entry(
        before=item,
        after=updated,
        action=action,
        now=now,
        failure_weight=FAILURE_WEIGHT[action],
        crossed=crossed,
        is_leech_after=leech.is_leech(updated, config),
    )
    return ReviewOutcome(updated, crossed, entry)


def _apply_success(item: ReviewItem, config: EngineConfig) -> ReviewItem:
    """Counter updates for a successful recall."""
    know_streak = item.know_streak + 1
    mastery_level = item.mastery_level
    if know_streak % config.promotion_streak == 0 and mastery_level < config.max_tier:
        mastery_level += 1

    return replace(
        item,
        know_count=item.know_count + 1,
        know_streak=know_streak,
        mastery_level=mastery_level,
    )


def _apply_failure(item: ReviewItem) -> ReviewItem:
    """
    Counter updates for forgot / dont_know.

    The tier is halved rather than zeroed: a failure means partial decay,
    starting over is reserved for the explicit reset action.
    """
    return replace(
        item,
        know_streak=0,
        lapses=item.lapses + 1,
        mastery_level=item.mastery_level // 2,
    )


def apply_leech_action(
    item: ReviewItem,
    action: LeechAction | str,
    now: datetime,
    config: Optional[EngineConfig] = None
) -> LeechActionOutcome:
    """
    Apply one of the leech-resolution actions.

    - retry_short: review again after retry_short_delay, counters untouched
    - reset_progress: every counter back to zero, due immediately
    - postpone: review again after postpone_delay, counters untouched

    Args:
        item: Current item state
        action: LeechAction or its string value
        now: Action time (timezone-aware)
        config: Engine configuration (default: DEFAULT_CONFIG)

    Returns:
        LeechActionOutcome(item, log_entry)
    """
    config = config or DEFAULT_CONFIG
    action = _coerce_action(action, LeechAction)
    validate_item(item)
    require_aware(now)

    if action == LeechAction.RETRY_SHORT:
        updated = replace(item, next_review_at=now + config.retry_short_delay)
    elif action == LeechAction.POSTPONE:
        updated = replace(item, next_review_at=now + config.postpone_delay)
    else:
        updated = replace(
            item,
            mastery_level=0,
            know_streak=0,
            know_count=0,
            lapses=0,
            is_mastered=False,
            last_reviewed_at=None,
            next_review_at=now,
        )

    entry = _build_entry(
        before=item,
        after=updated,
        action=action,
        now=now,
        failure_weight=0,
        crossed=False,
        is_leech_after=leech.is_leech(updated, config),
    )
    return LeechActionOutcome(updated, entry)


def _build_entry(
    before: ReviewItem,
    after: ReviewItem,
    action: ReviewAction | LeechAction,
    now: datetime,
    failure_weight: int,
    crossed: bool,
    is_leech_after: bool
) -> ReviewLogEntry:
    """Snapshot a transition for the review log."""
    return ReviewLogEntry(
        item_id=before.id,
        group_id=before.group_id,
        timestamp=now,
        action=action,
        was_correct=action == ReviewAction.KNOW,
        was_new=before.last_reviewed_at is None,
        previous_mastery_level=before.mastery_level,
        new_mastery_level=after.mastery_level,
        previous_know_streak=before.know_streak,
        new_know_streak=after.know_streak,
        previous_know_count=before.know_count,
        new_know_count=after.know_count,
        previous_lapses=before.lapses,
        new_lapses=after.lapses,
        previous_next_review_at=before.next_review_at,
        next_review_at=after.next_review_at,
        previous_is_mastered=before.is_mastered,
        new_is_mastered=after.is_mastered,
        interval=max(after.next_review_at - now, timedelta(0)),
        failure_weight=failure_weight,
        crossed_into_leech=crossed,
        is_leech_after=is_leech_after,
    )
