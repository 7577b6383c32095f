"""Application configuration."""

import logging
import os
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from meal_metrics.domain.meals import DailyGoals

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    goal_calories: float = Field(default=2000, gt=0)
    goal_protein: float = Field(default=50, gt=0)
    goal_carbs: float = Field(default=250, gt=0)
    goal_fat: float = Field(default=65, gt=0)
    timezone: str = "UTC"
    cache_ttl_seconds: int = Field(default=300, ge=0)
    cache_max_entries: int = Field(default=256, gt=0)
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("timezone")
    @classmethod
    def check_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {value}") from exc
        return value

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level

    def daily_goals(self) -> DailyGoals:
        """Return the configured default goals."""
        return DailyGoals(
            calories=self.goal_calories,
            protein=self.goal_protein,
            carbs=self.goal_carbs,
            fat=self.goal_fat,
        )
