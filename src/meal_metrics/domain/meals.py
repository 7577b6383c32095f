"""Domain models for logged meals and nutrition goals."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class MealType(Enum):
    """Meal slot a log entry belongs to."""

    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACK = "Snack"

    @classmethod
    def parse(cls, value: object) -> "MealType":
        """Return the matching meal type, falling back to a snack."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            cleaned = value.strip().lower()
            for member in cls:
                if member.value.lower() == cleaned:
                    return member
        return cls.SNACK


@dataclass(frozen=True)
class MealEntry:
    """A single meal-log entry with its estimated macros."""

    day: date | None
    meal_type: MealType = MealType.SNACK
    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0
    time: str | None = None


@dataclass(frozen=True)
class DailyGoals:
    """Daily nutrition targets."""

    calories: float = 2000
    protein: float = 50
    carbs: float = 250
    fat: float = 65

    def __post_init__(self) -> None:
        for name in ("calories", "protein", "carbs", "fat"):
            if getattr(self, name) <= 0:
                raise ValueError(f"Daily goal '{name}' must be positive")


@dataclass(frozen=True)
class DailyTotals:
    """Summed macros for one calendar day."""

    day: date
    calories: float
    protein: float
    carbs: float
    fat: float
    meal_count: int
