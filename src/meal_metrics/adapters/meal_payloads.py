"""Pydantic models for raw meal documents from the persistence layer."""

import datetime as dt
import math

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def _clean_text(value: object) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


class MealPayload(BaseModel):
    """Meal document as stored by the app (camelCase or snake_case keys)."""

    model_config = ConfigDict(extra="ignore")

    date: str | None = None
    time: str | None = None
    meal_type: str | None = Field(
        default=None, validation_alias=AliasChoices("mealType", "meal_type")
    )
    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0

    @field_validator("date", mode="before")
    @classmethod
    def clean_date(cls, value: object) -> str | None:
        if isinstance(value, dt.date):
            return value.isoformat()
        return _clean_text(value)

    @field_validator("time", "meal_type", mode="before")
    @classmethod
    def clean_text(cls, value: object) -> str | None:
        return _clean_text(value)

    @field_validator("calories", "protein", "carbs", "fat", mode="before")
    @classmethod
    def clean_number(cls, value: object) -> float:
        if value is None or isinstance(value, bool):
            return 0.0
        try:
            number = float(value)
        except (TypeError, ValueError):
            return 0.0
        if math.isnan(number) or math.isinf(number) or number < 0:
            return 0.0
        return number
