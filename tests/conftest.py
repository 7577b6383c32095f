"""Shared test fixtures."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, date, datetime, timedelta

import pytest

from meal_metrics.config import Settings
from meal_metrics.domain.meals import MealEntry, MealType
from meal_metrics.services.metrics import MealSource

# Wednesday, so the trailing two weeks hold two full weekends.
FIXED_NOW = datetime(2024, 6, 12, 9, 30, tzinfo=UTC)
TODAY = FIXED_NOW.date()


def day_ago(days: int) -> date:
    return TODAY - timedelta(days=days)


def meal(
    days: int = 0,
    meal_type: MealType = MealType.LUNCH,
    calories: float = 500,
    protein: float = 20,
    carbs: float = 60,
    fat: float = 15,
) -> MealEntry:
    """Build a meal logged ``days`` before the fixed test day."""
    return MealEntry(
        day=day_ago(days),
        meal_type=meal_type,
        calories=calories,
        protein=protein,
        carbs=carbs,
        fat=fat,
    )


def meals_on_days(*days: int) -> list[MealEntry]:
    return [meal(days=offset) for offset in days]


@dataclass
class InMemoryMealSource(MealSource):
    """In-memory meal documents keyed by user."""

    meals: dict[str, list[Mapping[str, object]]] = field(default_factory=dict)
    calls: int = 0

    def list_meals(self, user_id: str) -> list[Mapping[str, object]]:
        self.calls += 1
        return list(self.meals.get(user_id, []))


@dataclass
class MutableClock:
    """Clock whose current time tests can move."""

    now: datetime = FIXED_NOW

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def settings() -> Settings:
    return Settings(
        goal_calories=2000,
        goal_protein=50,
        goal_carbs=250,
        goal_fat=65,
        timezone="UTC",
    )


@pytest.fixture
def meal_source() -> InMemoryMealSource:
    return InMemoryMealSource()
