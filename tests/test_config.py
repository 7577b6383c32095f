"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from meal_metrics.config import Settings
from meal_metrics.domain.meals import DailyGoals


def test_defaults_match_standard_goals(monkeypatch) -> None:
    for name in ("GOAL_CALORIES", "GOAL_PROTEIN", "GOAL_CARBS", "GOAL_FAT", "TIMEZONE"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.daily_goals() == DailyGoals()
    assert settings.timezone == "UTC"
    assert settings.cache_ttl_seconds == 300


def test_goals_loaded_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("GOAL_PROTEIN", "120")
    monkeypatch.setenv("GOAL_CALORIES", "2600")

    settings = Settings(_env_file=None)

    assert settings.daily_goals().protein == 120
    assert settings.daily_goals().calories == 2600


def test_non_positive_goal_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, goal_protein=0)


def test_unknown_timezone_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, timezone="Mars/Olympus_Mons")


def test_log_level_is_normalized() -> None:
    assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"


def test_unknown_log_level_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_level="verbose")
