"""Tests for the interval policy and leech detector."""

from datetime import timedelta

import pytest

from review_core.config import EngineConfig
from review_core.srs import crossed_into_leech, interval, is_leech, next_review_time
from tests.conftest import NOW, make_item


@pytest.mark.parametrize("tier, expected", [
    (0, timedelta(minutes=10)),
    (1, timedelta(hours=1)),
    (2, timedelta(hours=8)),
    (3, timedelta(days=1)),
    (4, timedelta(days=3)),
    (5, timedelta(days=7)),
    (6, timedelta(days=14)),
    (7, timedelta(days=30)),
])
def test_default_table(tier, expected):
    assert interval(tier) == expected


def test_table_is_increasing():
    steps = [interval(tier) for tier in range(8)]
    assert steps == sorted(steps)
    assert len(set(steps)) == len(steps)


def test_tiers_above_max_use_max_interval():
    assert interval(12) == timedelta(days=30)


def test_negative_tier_rejected():
    with pytest.raises(ValueError):
        interval(-1)


def test_custom_table():
    config = EngineConfig(
        max_tier=2,
        mastery_tier=2,
        intervals=(timedelta(minutes=1), timedelta(minutes=5), timedelta(hours=1)),
    )
    assert interval(1, config) == timedelta(minutes=5)
    assert next_review_time(2, NOW, config) == NOW + timedelta(hours=1)


def test_leech_threshold():
    assert is_leech(make_item(lapses=3, know_count=1)) is False
    assert is_leech(make_item(lapses=4, know_count=1)) is True


def test_leech_threshold_configurable():
    config = EngineConfig(leech_threshold=2)
    assert is_leech(make_item(lapses=2), config) is True


def test_crossing_is_edge():
    three = make_item(lapses=3)
    four = make_item(lapses=4)
    five = make_item(lapses=5)
    assert crossed_into_leech(three, four) is True
    assert crossed_into_leech(four, five) is False
