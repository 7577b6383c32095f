"""Conversion and aggregation of meal-log entries."""

import logging
from collections.abc import Iterable, Mapping
from datetime import date, datetime

from pydantic import ValidationError

from meal_metrics.adapters.meal_payloads import MealPayload
from meal_metrics.domain.meals import DailyTotals, MealEntry, MealType
from meal_metrics.services.dates import parse_iso_date, resolve_today

_logger = logging.getLogger(__name__)


def meal_from_mapping(raw: Mapping[str, object]) -> MealEntry:
    """Build a meal entry from a stored document, tolerating bad fields."""
    payload = MealPayload.model_validate(dict(raw))
    day = parse_iso_date(payload.date)
    if day is None and payload.date is not None:
        _logger.debug("Meal date is not an ISO date: %r", payload.date)
    return MealEntry(
        day=day,
        meal_type=MealType.parse(payload.meal_type),
        calories=payload.calories,
        protein=payload.protein,
        carbs=payload.carbs,
        fat=payload.fat,
        time=payload.time,
    )


def meals_from_mappings(rows: Iterable[object]) -> list[MealEntry]:
    """Convert stored documents, skipping rows that are not documents."""
    meals = []
    for row in rows:
        if not isinstance(row, Mapping):
            _logger.debug("Skipping meal row of type %s", type(row).__name__)
            continue
        try:
            meals.append(meal_from_mapping(row))
        except ValidationError as exc:
            _logger.debug("Skipping invalid meal row: %s", exc)
    return meals


def active_days(meals: Iterable[MealEntry]) -> set[date]:
    """Return the distinct days with at least one dated meal."""
    return {meal.day for meal in meals if meal.day is not None}


def meals_on(meals: Iterable[MealEntry], day: date) -> list[MealEntry]:
    return [meal for meal in meals if meal.day == day]


def todays_meals(
    meals: Iterable[MealEntry], now: datetime | None = None
) -> list[MealEntry]:
    """Return the meals logged on the current day."""
    return meals_on(meals, resolve_today(now))


def total_meals(meals: Iterable[MealEntry], day: date) -> DailyTotals:
    """Sum the macros of ``meals``, labelled with ``day``."""
    calories = protein = carbs = fat = 0.0
    count = 0
    for meal in meals:
        calories += meal.calories
        protein += meal.protein
        carbs += meal.carbs
        fat += meal.fat
        count += 1
    return DailyTotals(
        day=day,
        calories=calories,
        protein=protein,
        carbs=carbs,
        fat=fat,
        meal_count=count,
    )
