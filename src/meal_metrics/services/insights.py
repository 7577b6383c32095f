"""Rule-based pattern detection over the last two weeks of meals."""

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime

from meal_metrics.domain.insights import Insight
from meal_metrics.domain.meals import DailyGoals, MealEntry, MealType
from meal_metrics.services.dates import days_before, is_weekend, resolve_today

WINDOW_DAYS = 14
MIN_MEALS = 3
MAX_INSIGHTS = 3

WEEKEND_EXCESS_RATIO = 0.2
LOW_PROTEIN_RATIO = 0.7
PROTEIN_OPPORTUNITY_SHARE = 0.6
PROTEIN_CHAMPION_SHARE = 0.2
MIN_PROTEIN_DAYS = 3
DINNER_SHARE = 0.45

WEEKEND_PATTERN = Insight(
    title="Weekend Pattern",
    message="Calories tend to spike on weekends. This is common.",
)
PROTEIN_OPPORTUNITY = Insight(
    title="Protein Opportunity",
    message=(
        "Protein intake is consistently low. "
        "Adding protein-rich snacks could help."
    ),
)
PROTEIN_CHAMPION = Insight(
    title="Protein Champion",
    message="You're consistently hitting your protein goals.",
)
EVENING_EATER = Insight(
    title="Evening Eater",
    message=(
        "Most of your calories come from dinner. "
        "Spreading meals may help energy levels."
    ),
)


@dataclass(frozen=True)
class DayStats:
    """Per-day aggregates used by the pattern rules."""

    day: date
    calories: float
    protein: float
    meal_count: int
    is_weekend: bool
    has_breakfast: bool


def generate_insights(
    meals: Iterable[MealEntry],
    goals: DailyGoals | None = None,
    now: datetime | None = None,
) -> list[Insight]:
    """Return up to three insights about the trailing 14 days."""
    goals = goals or DailyGoals()
    meals = list(meals)
    if len(meals) < MIN_MEALS:
        return []

    cutoff = days_before(resolve_today(now), WINDOW_DAYS)
    recent = [meal for meal in meals if meal.day is not None and meal.day > cutoff]
    if len(recent) < MIN_MEALS:
        return []

    stats = day_stats(recent)
    candidates = (
        _weekend_pattern(stats),
        _protein_pattern(stats, goals),
        _evening_eater(recent),
    )
    insights = [insight for insight in candidates if insight is not None]
    return insights[:MAX_INSIGHTS]


def day_stats(meals: Iterable[MealEntry]) -> list[DayStats]:
    """Group dated meals by day, ordered by day."""
    by_day: dict[date, list[MealEntry]] = defaultdict(list)
    for meal in meals:
        if meal.day is not None:
            by_day[meal.day].append(meal)
    return [
        DayStats(
            day=day,
            calories=sum(meal.calories for meal in day_meals),
            protein=sum(meal.protein for meal in day_meals),
            meal_count=len(day_meals),
            is_weekend=is_weekend(day),
            has_breakfast=any(
                meal.meal_type is MealType.BREAKFAST for meal in day_meals
            ),
        )
        for day, day_meals in sorted(by_day.items())
    ]


def _weekend_pattern(stats: list[DayStats]) -> Insight | None:
    eating_days = [day for day in stats if day.calories > 0]
    weekdays = [day.calories for day in eating_days if not day.is_weekend]
    weekends = [day.calories for day in eating_days if day.is_weekend]
    if len(weekdays) < 2 or not weekends:
        return None
    weekday_avg = sum(weekdays) / len(weekdays)
    weekend_avg = sum(weekends) / len(weekends)
    if (weekend_avg - weekday_avg) / weekday_avg > WEEKEND_EXCESS_RATIO:
        return WEEKEND_PATTERN
    return None


def _protein_pattern(stats: list[DayStats], goals: DailyGoals) -> Insight | None:
    protein_days = [day for day in stats if day.protein > 0]
    if len(protein_days) < MIN_PROTEIN_DAYS:
        return None
    threshold = goals.protein * LOW_PROTEIN_RATIO
    low_days = sum(1 for day in protein_days if day.protein < threshold)
    if low_days >= len(protein_days) * PROTEIN_OPPORTUNITY_SHARE:
        return PROTEIN_OPPORTUNITY
    if low_days <= len(protein_days) * PROTEIN_CHAMPION_SHARE:
        return PROTEIN_CHAMPION
    return None


def _evening_eater(meals: list[MealEntry]) -> Insight | None:
    by_type: dict[MealType, float] = defaultdict(float)
    for meal in meals:
        by_type[meal.meal_type] += meal.calories
    total = sum(by_type.values())
    if total > 0 and by_type[MealType.DINNER] / total > DINNER_SHARE:
        return EVENING_EATER
    return None
