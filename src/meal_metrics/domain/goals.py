"""Domain models for body profiles and calculated goal plans."""

from dataclasses import dataclass
from enum import Enum

from meal_metrics.domain.meals import DailyGoals


class Sex(Enum):
    MALE = "male"
    FEMALE = "female"


class ActivityLevel(Enum):
    """Activity level with its TDEE multiplier."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    VERY_ACTIVE = "very_active"

    @property
    def multiplier(self) -> float:
        return _ACTIVITY_MULTIPLIERS[self]


_ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
}


class FitnessGoal(Enum):
    LOSE_WEIGHT = "lose_weight"
    BUILD_MUSCLE = "build_muscle"
    MAINTAIN = "maintain"
    GENERAL_HEALTH = "general_health"


@dataclass(frozen=True)
class BodyProfile:
    """Body measurements and preferences used to plan daily targets."""

    weight_kg: float
    height_cm: float
    age: int
    sex: Sex
    activity_level: ActivityLevel
    fitness_goal: FitnessGoal

    def __post_init__(self) -> None:
        for name in ("weight_kg", "height_cm", "age"):
            if getattr(self, name) <= 0:
                raise ValueError(f"Body profile '{name}' must be positive")


@dataclass(frozen=True)
class GoalPlan:
    """Calculated energy expenditure and the daily goals derived from it."""

    bmr: int
    tdee: int
    goals: DailyGoals
    explanation: str
