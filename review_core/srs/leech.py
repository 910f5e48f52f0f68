"""
Leech Detector

A leech is an item the learner keeps failing. The flag is re-derived
from the stored lapse counter every time and never persisted.
"""

from __future__ import annotations
from typing import Optional

from review_core.config import DEFAULT_CONFIG, EngineConfig
from review_core.srs.review_item import ReviewItem, validate_item


def is_leech(item: ReviewItem, config: Optional[EngineConfig] = None) -> bool:
    """True once lapses reach the leech threshold."""
    config = config or DEFAULT_CONFIG
    validate_item(item)
    return item.lapses >= config.leech_threshold


def crossed_into_leech(
    before: ReviewItem,
    after: ReviewItem,
    config: Optional[EngineConfig] = None
) -> bool:
    """
    Edge trigger: True only for the transition that creates the leech.

    An item that was already a leech never reports a crossing again
    until its progress is reset.
    """
    return not is_leech(before, config) and is_leech(after, config)
