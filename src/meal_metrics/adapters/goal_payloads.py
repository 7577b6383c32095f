"""Pydantic model for the stored goal-plan form."""

from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from meal_metrics.domain.goals import ActivityLevel, FitnessGoal, Sex


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        return value.strip() or None
    return value


def _member_or(enum: type[Enum], value: object, default: Enum) -> object:
    if value is None or isinstance(value, enum):
        return value
    try:
        return enum(value)
    except ValueError:
        return default


class GoalPlanPayload(BaseModel):
    """Goal-plan document; numbers may arrive as form strings.

    Blank fields count as missing. Unknown activity levels plan as sedentary
    and unknown fitness goals as general health.
    """

    model_config = ConfigDict(extra="ignore")

    weight: float = Field(gt=0)
    height: float = Field(gt=0)
    age: int = Field(gt=0)
    gender: Sex
    activity_level: ActivityLevel = Field(
        validation_alias=AliasChoices("activityLevel", "activity_level")
    )
    fitness_goal: FitnessGoal = Field(
        validation_alias=AliasChoices("fitnessGoal", "fitness_goal")
    )

    @field_validator("weight", "height", "age", "gender", mode="before")
    @classmethod
    def clean_required(cls, value: object) -> object:
        return _blank_to_none(value)

    @field_validator("activity_level", mode="before")
    @classmethod
    def clean_activity_level(cls, value: object) -> object:
        return _member_or(
            ActivityLevel, _blank_to_none(value), ActivityLevel.SEDENTARY
        )

    @field_validator("fitness_goal", mode="before")
    @classmethod
    def clean_fitness_goal(cls, value: object) -> object:
        return _member_or(
            FitnessGoal, _blank_to_none(value), FitnessGoal.GENERAL_HEALTH
        )
