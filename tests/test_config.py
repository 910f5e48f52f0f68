"""Tests for engine configuration."""

from datetime import timedelta

import pytest

from review_core.config import DEFAULT_CONFIG, EngineConfig, load_config


ENV_VARS = [
    "SRS_PROMOTION_STREAK",
    "SRS_MASTERY_TIER",
    "SRS_MAX_TIER",
    "SRS_LEECH_THRESHOLD",
    "SRS_INTERVAL_MINUTES",
    "SRS_RETRY_SHORT_MINUTES",
    "SRS_POSTPONE_HOURS",
    "SRS_LOG_CAPACITY",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        # set then delete so values loaded from .env files are undone too
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


def test_defaults():
    assert DEFAULT_CONFIG.promotion_streak == 2
    assert DEFAULT_CONFIG.mastery_tier == 5
    assert DEFAULT_CONFIG.max_tier == 7
    assert DEFAULT_CONFIG.leech_threshold == 4
    assert DEFAULT_CONFIG.log_capacity == 5000
    assert DEFAULT_CONFIG.retry_short_delay == timedelta(minutes=10)
    assert DEFAULT_CONFIG.postpone_delay == timedelta(hours=24)


def test_load_without_overrides(clean_env):
    assert load_config() == DEFAULT_CONFIG


def test_load_overrides(clean_env):
    clean_env.setenv("SRS_LEECH_THRESHOLD", "6")
    clean_env.setenv("SRS_MAX_TIER", "3")
    clean_env.setenv("SRS_MASTERY_TIER", "2")
    clean_env.setenv("SRS_INTERVAL_MINUTES", "5, 60, 1440, 10080")
    clean_env.setenv("SRS_POSTPONE_HOURS", "12")

    config = load_config()
    assert config.leech_threshold == 6
    assert config.max_tier == 3
    assert config.intervals[1] == timedelta(hours=1)
    assert config.intervals[3] == timedelta(days=7)
    assert config.postpone_delay == timedelta(hours=12)


def test_load_from_dotenv_file(clean_env, tmp_path):
    env_file = tmp_path / "srs.env"
    env_file.write_text("SRS_LOG_CAPACITY=250\n")

    config = load_config(str(env_file))
    assert config.log_capacity == 250


def test_malformed_number(clean_env):
    clean_env.setenv("SRS_LEECH_THRESHOLD", "four")
    with pytest.raises(ValueError, match="SRS_LEECH_THRESHOLD"):
        load_config()


def test_malformed_intervals(clean_env):
    clean_env.setenv("SRS_INTERVAL_MINUTES", "10,abc")
    with pytest.raises(ValueError, match="SRS_INTERVAL_MINUTES"):
        load_config()


def test_interval_table_must_match_tiers():
    with pytest.raises(ValueError):
        EngineConfig(intervals=(timedelta(minutes=10), timedelta(hours=1)))


def test_interval_table_must_increase():
    table = tuple(timedelta(hours=1) for _ in range(8))
    with pytest.raises(ValueError):
        EngineConfig(intervals=table)


def test_mastery_tier_within_range():
    with pytest.raises(ValueError):
        EngineConfig(mastery_tier=9)
