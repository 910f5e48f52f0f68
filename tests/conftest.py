from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest

from review_core.srs.review_item import ReviewItem, new_item


NOW = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def make_item(item_id="p1", group_id="greetings", **fields):
    """
    Build an item with consistent counters.

    Reviewed items (any know_count or lapses) get last_reviewed_at one
    day before NOW unless given explicitly.
    """
    item = new_item(item_id, group_id, NOW)
    if fields.get("know_count") or fields.get("lapses"):
        fields.setdefault("last_reviewed_at", NOW - timedelta(days=1))
    return replace(item, **fields)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def enabled():
    return lambda group_id: True


@pytest.fixture
def disabled():
    return lambda group_id: False


@pytest.fixture
def fresh_item():
    return make_item()


@pytest.fixture
def leech_item() -> ReviewItem:
    return make_item(mastery_level=1, know_count=3, know_streak=0, lapses=4)
