"""Tests for meal document conversion and totals."""

from datetime import date, datetime

import pytest

from meal_metrics.domain.meals import DailyGoals, MealEntry, MealType
from meal_metrics.services.meals import (
    active_days,
    meal_from_mapping,
    meals_from_mappings,
    todays_meals,
    total_meals,
)
from tests.conftest import FIXED_NOW, TODAY, day_ago, meal


def test_meal_from_camel_case_document() -> None:
    raw = {
        "date": "2024-06-12",
        "time": "19:45",
        "mealType": "Dinner",
        "calories": "450",
        "protein": 30,
        "carbs": 40.5,
        "fat": 12,
        "foodName": "Salmon bowl",
    }

    entry = meal_from_mapping(raw)

    assert entry == MealEntry(
        day=date(2024, 6, 12),
        meal_type=MealType.DINNER,
        calories=450,
        protein=30,
        carbs=40.5,
        fat=12,
        time="19:45",
    )


def test_meal_from_snake_case_document() -> None:
    entry = meal_from_mapping({"date": "2024-06-11", "meal_type": "breakfast"})

    assert entry.meal_type is MealType.BREAKFAST
    assert entry.day == date(2024, 6, 11)


def test_missing_fields_fall_back_to_defaults() -> None:
    entry = meal_from_mapping({})

    assert entry.day is None
    assert entry.meal_type is MealType.SNACK
    assert entry.calories == 0
    assert entry.protein == 0
    assert entry.carbs == 0
    assert entry.fat == 0
    assert entry.time is None


@pytest.mark.parametrize("value", [None, "lots", -120, float("nan"), True, [1]])
def test_invalid_numbers_become_zero(value) -> None:
    assert meal_from_mapping({"calories": value}).calories == 0


@pytest.mark.parametrize("value", ["Brunch", "", 3, None])
def test_invalid_meal_type_becomes_snack(value) -> None:
    assert meal_from_mapping({"mealType": value}).meal_type is MealType.SNACK


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2024-06-12", date(2024, 6, 12)),
        ("2024-06-12T08:15:00Z", date(2024, 6, 12)),
        (date(2024, 6, 10), date(2024, 6, 10)),
        (datetime(2024, 6, 9, 22, 0), date(2024, 6, 9)),
        ("12/06/2024", None),
        ("2024-02-30", None),
        ("", None),
        (20240612, None),
    ],
)
def test_meal_dates(value, expected) -> None:
    assert meal_from_mapping({"date": value}).day == expected


def test_meal_from_mapping_does_not_mutate_document() -> None:
    raw = {"date": "2024-06-12", "calories": "300", "mealType": "lunch"}
    snapshot = dict(raw)

    meal_from_mapping(raw)

    assert raw == snapshot


def test_meals_from_mappings_skips_non_documents() -> None:
    rows = [{"date": "2024-06-12", "calories": 200}, None, "meal", 42]

    meals = meals_from_mappings(rows)

    assert len(meals) == 1
    assert meals[0].calories == 200


def test_active_days_ignore_undated_meals() -> None:
    meals = [meal(days=0), meal(days=0), meal(days=2), MealEntry(day=None)]

    assert active_days(meals) == {TODAY, day_ago(2)}


def test_todays_meals_and_totals() -> None:
    meals = [
        meal(days=0, calories=400, protein=20, carbs=50, fat=10),
        meal(days=0, calories=600, protein=35, carbs=70, fat=20),
        meal(days=1, calories=900, protein=40, carbs=90, fat=30),
    ]

    today = todays_meals(meals, FIXED_NOW)
    totals = total_meals(today, TODAY)

    assert len(today) == 2
    assert totals.day == TODAY
    assert totals.calories == 1000
    assert totals.protein == 55
    assert totals.carbs == 120
    assert totals.fat == 30
    assert totals.meal_count == 2


def test_daily_goals_defaults() -> None:
    goals = DailyGoals()

    assert (goals.calories, goals.protein) == (2000, 50)
    assert (goals.carbs, goals.fat) == (250, 65)


def test_daily_goals_must_be_positive() -> None:
    with pytest.raises(ValueError, match="protein"):
        DailyGoals(protein=0)
