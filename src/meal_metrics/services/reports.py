"""Period reports: daily series, nutrition suggestions and trend insights."""

import math
from collections.abc import Iterable
from datetime import date, datetime, timedelta

from meal_metrics.domain.meals import DailyGoals, DailyTotals, MealEntry, MealType
from meal_metrics.domain.reports import PeriodReport, Suggestion, SuggestionKind
from meal_metrics.services.dates import days_before, is_weekend, resolve_today
from meal_metrics.services.insights import day_stats
from meal_metrics.services.meals import meals_on, total_meals

MIN_MEALS = 3
MAX_SUGGESTIONS = 5

CALORIE_SURPLUS_RATIO = 1.15
CALORIE_LOW_RATIO = 0.7
CALORIE_ON_TRACK_RATIO = 0.85
PROTEIN_SHORT_RATIO = 0.7
FAT_HIGH_RATIO = 1.3
SNACK_SHARE = 0.4
BREAKFAST_DAY_SHARE = 0.3
CARB_CALORIE_SHARE = 0.6
CALORIES_PER_GRAM_CARB = 4

CALORIE_GOAL_DAY_SHARE = 0.7
PROTEIN_GOAL_DAY_SHARE = 0.8
PROTEIN_WEEKEND_GAP_RATIO = 0.3


def _round(value: float) -> int:
    return math.floor(value + 0.5)


def period_meals(
    meals: Iterable[MealEntry], days: int, now: datetime | None = None
) -> list[MealEntry]:
    """Return the dated meals logged within the last ``days`` days."""
    cutoff = days_before(resolve_today(now), days)
    return [meal for meal in meals if meal.day is not None and meal.day > cutoff]


def meals_between(
    meals: Iterable[MealEntry], start: date, end: date
) -> list[MealEntry]:
    """Return the meals dated from ``start`` to ``end`` inclusive."""
    return [
        meal for meal in meals if meal.day is not None and start <= meal.day <= end
    ]


def daily_series(
    meals: Iterable[MealEntry], start: date, end: date
) -> list[DailyTotals]:
    """Return one totals row per day from ``start`` to ``end`` inclusive."""
    if start > end:
        raise ValueError("Report start must not be after its end")
    meals = list(meals)
    series = []
    day = start
    while day <= end:
        series.append(total_meals(meals_on(meals, day), day))
        day += timedelta(days=1)
    return series


def nutrition_suggestions(
    meals: Iterable[MealEntry], goals: DailyGoals | None = None
) -> list[Suggestion]:
    """Return up to five suggestions from the per-day averages of ``meals``."""
    goals = goals or DailyGoals()
    meals = list(meals)
    if len(meals) < MIN_MEALS:
        return []

    stats = day_stats(meals)
    day_count = len(stats) or 1
    avg_calories = sum(meal.calories for meal in meals) / day_count
    avg_protein = sum(meal.protein for meal in meals) / day_count
    avg_carbs = sum(meal.carbs for meal in meals) / day_count
    avg_fat = sum(meal.fat for meal in meals) / day_count

    suggestions = []
    calorie_suggestion = _calorie_suggestion(avg_calories, goals)
    if calorie_suggestion is not None:
        suggestions.append(calorie_suggestion)
    protein_suggestion = _protein_suggestion(avg_protein, goals)
    if protein_suggestion is not None:
        suggestions.append(protein_suggestion)

    if avg_fat > goals.fat * FAT_HIGH_RATIO:
        suggestions.append(
            Suggestion(
                title="High Fat Intake",
                message=(
                    f"Your fat intake averages {_round(avg_fat)}g/day "
                    f"(goal: {goals.fat:g}g). Consider cooking methods like "
                    "grilling or steaming instead of frying."
                ),
                kind=SuggestionKind.SUGGESTION,
            )
        )

    snacks = sum(1 for meal in meals if meal.meal_type is MealType.SNACK)
    snack_share = snacks / len(meals)
    if snack_share > SNACK_SHARE:
        suggestions.append(
            Suggestion(
                title="Snack-Heavy Pattern",
                message=(
                    f"{_round(snack_share * 100)}% of your meals are snacks. "
                    "Try replacing some snacks with balanced meals that include "
                    "protein and vegetables."
                ),
                kind=SuggestionKind.SUGGESTION,
            )
        )

    breakfast_days = sum(1 for day in stats if day.has_breakfast)
    if breakfast_days < day_count * BREAKFAST_DAY_SHARE:
        suggestions.append(
            Suggestion(
                title="Breakfast Often Missed",
                message=(
                    "You're skipping breakfast on most days. A protein-rich "
                    "breakfast can help control hunger and improve energy "
                    "levels throughout the day."
                ),
                kind=SuggestionKind.SUGGESTION,
            )
        )

    carb_share = avg_carbs * CALORIES_PER_GRAM_CARB / (avg_calories or 1)
    if carb_share > CARB_CALORIE_SHARE:
        suggestions.append(
            Suggestion(
                title="Carb-Heavy Diet",
                message=(
                    f"About {_round(carb_share * 100)}% of your calories come "
                    "from carbs. Balancing with more protein and healthy fats "
                    "can help maintain steady energy."
                ),
                kind=SuggestionKind.SUGGESTION,
            )
        )

    return suggestions[:MAX_SUGGESTIONS]


def _calorie_suggestion(avg_calories: float, goals: DailyGoals) -> Suggestion | None:
    if avg_calories > goals.calories * CALORIE_SURPLUS_RATIO:
        excess = _round(avg_calories - goals.calories)
        return Suggestion(
            title="Calorie Surplus Detected",
            message=(
                f"You're averaging {_round(avg_calories)} cal/day, about "
                f"{excess} cal over your goal. Consider smaller portions or "
                "swapping one snack for a lower-calorie option."
            ),
            kind=SuggestionKind.WARNING,
        )
    if 0 < avg_calories < goals.calories * CALORIE_LOW_RATIO:
        return Suggestion(
            title="Low Calorie Intake",
            message=(
                f"Your average intake is {_round(avg_calories)} cal/day, which "
                "is significantly under your goal. Make sure you're eating "
                "enough to support your energy needs."
            ),
            kind=SuggestionKind.WARNING,
        )
    if avg_calories >= goals.calories * CALORIE_ON_TRACK_RATIO:
        return Suggestion(
            title="Calories On Track",
            message=(
                f"Great consistency! You're averaging {_round(avg_calories)} "
                f"cal/day, right around your goal of {goals.calories:g}."
            ),
            kind=SuggestionKind.SUCCESS,
        )
    return None


def _protein_suggestion(avg_protein: float, goals: DailyGoals) -> Suggestion | None:
    if avg_protein < goals.protein * PROTEIN_SHORT_RATIO:
        deficit = _round(goals.protein - avg_protein)
        return Suggestion(
            title="Increase Protein Intake",
            message=(
                f"You're about {deficit}g short of your protein goal daily. "
                "Try adding eggs, Greek yogurt, chicken, or legumes to your meals."
            ),
            kind=SuggestionKind.SUGGESTION,
        )
    if avg_protein >= goals.protein:
        return Suggestion(
            title="Protein Goal Met",
            message=(
                "Excellent! You're consistently meeting your protein target "
                f"of {goals.protein:g}g per day."
            ),
            kind=SuggestionKind.SUCCESS,
        )
    return None


def calorie_insight(series: Iterable[DailyTotals], goals: DailyGoals) -> str | None:
    """Summarize how many logged days stayed within the calorie goal."""
    logged = [day for day in series if day.calories > 0]
    if not logged:
        return None
    within = sum(1 for day in logged if day.calories <= goals.calories)
    if within == len(logged):
        return "You stayed within your calorie goal every day this period."
    if within >= len(logged) * CALORIE_GOAL_DAY_SHARE:
        return (
            f"You stayed under your calorie goal on {within} of {len(logged)} "
            "days logged."
        )
    return (
        f"You exceeded your calorie goal on {len(logged) - within} days. "
        "Small adjustments can help."
    )


def protein_insight(series: Iterable[DailyTotals], goals: DailyGoals) -> str | None:
    """Compare weekday and weekend protein, then goal consistency."""
    series = list(series)
    logged = [day for day in series if day.protein > 0]
    if not logged:
        return None

    weekdays = [day.protein for day in series if not is_weekend(day.day)]
    weekends = [day.protein for day in series if is_weekend(day.day)]
    weekday_avg = sum(weekdays) / len(weekdays) if weekdays else 0
    weekend_avg = sum(weekends) / len(weekends) if weekends else 0
    if abs(weekday_avg - weekend_avg) > goals.protein * PROTEIN_WEEKEND_GAP_RATIO:
        if weekday_avg < weekend_avg:
            return (
                "Protein intake is lower on weekdays. "
                "Try adding a protein-rich snack."
            )
        return "Protein intake is lower on weekends. Meal prep might help."

    met = sum(1 for day in series if day.protein >= goals.protein)
    if met >= len(logged) * PROTEIN_GOAL_DAY_SHARE:
        return "Great protein consistency! You're hitting your goals regularly."
    return "Protein intake is inconsistent. Try to include protein in every meal."


def meal_distribution_insight(meals: Iterable[MealEntry]) -> str | None:
    """Name the meal slot that contributes the most calories."""
    by_type = dict.fromkeys(MealType, 0.0)
    for meal in meals:
        by_type[meal.meal_type] += meal.calories
    total = sum(by_type.values())
    if total == 0:
        return None
    # Ties go to the later slot.
    top, top_calories = MealType.BREAKFAST, by_type[MealType.BREAKFAST]
    for meal_type, calories in by_type.items():
        if calories >= top_calories:
            top, top_calories = meal_type, calories
    share = _round(top_calories / total * 100)
    return f"Most of your calories come from {top.value} ({share}%)."


def _build_report(
    meals: list[MealEntry],
    selected: list[MealEntry],
    start: date,
    end: date,
    goals: DailyGoals,
) -> PeriodReport:
    series = daily_series(meals, start, end)
    return PeriodReport(
        start=start,
        end=end,
        days=tuple(series),
        suggestions=tuple(nutrition_suggestions(selected, goals)),
        calorie_insight=calorie_insight(series, goals),
        protein_insight=protein_insight(series, goals),
        meal_distribution_insight=meal_distribution_insight(selected),
    )


def report_for_period(
    meals: Iterable[MealEntry],
    days: int = 7,
    goals: DailyGoals | None = None,
    now: datetime | None = None,
) -> PeriodReport:
    """Build a report for the ``days`` days ending today."""
    if days <= 0:
        raise ValueError("Report period must be at least one day")
    meals = list(meals)
    today = resolve_today(now)
    return _build_report(
        meals,
        period_meals(meals, days, now),
        start=days_before(today, days - 1),
        end=today,
        goals=goals or DailyGoals(),
    )


def report_between(
    meals: Iterable[MealEntry],
    start: date,
    end: date,
    goals: DailyGoals | None = None,
) -> PeriodReport:
    """Build a report for a custom inclusive date range."""
    meals = list(meals)
    return _build_report(
        meals,
        meals_between(meals, start, end),
        start=start,
        end=end,
        goals=goals or DailyGoals(),
    )
