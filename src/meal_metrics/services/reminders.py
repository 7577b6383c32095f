"""Reminder trigger decisions for the notification scheduler."""

from collections.abc import Iterable
from datetime import datetime

from meal_metrics.domain.insights import (
    DAILY_LOGGING,
    LOW_PROTEIN,
    STREAK_PROTECTION,
    WEEKLY_SUMMARY,
    Reminder,
)
from meal_metrics.domain.meals import DailyGoals, MealEntry
from meal_metrics.services.meals import todays_meals

LOW_PROTEIN_RATIO = 0.5
WEEKLY_SUMMARY_WEEKDAY = 6  # Sunday
WEEKLY_SUMMARY_HOUR = 20


def select_reminders(
    meals: Iterable[MealEntry],
    goals: DailyGoals | None = None,
    current_streak: int = 0,
    now: datetime | None = None,
) -> list[Reminder]:
    """Return the reminders that apply right now."""
    goals = goals or DailyGoals()
    today = todays_meals(meals, now)
    if not today:
        return [STREAK_PROTECTION if current_streak > 0 else DAILY_LOGGING]
    protein = sum(meal.protein for meal in today)
    if protein < goals.protein * LOW_PROTEIN_RATIO:
        return [LOW_PROTEIN]
    return []


def weekly_summary_due(now: datetime | None = None) -> Reminder | None:
    """Return the weekly report reminder from Sunday 8 PM local time onwards."""
    if now is None:
        now = datetime.now().astimezone()
    if now.weekday() == WEEKLY_SUMMARY_WEEKDAY and now.hour >= WEEKLY_SUMMARY_HOUR:
        return WEEKLY_SUMMARY
    return None
