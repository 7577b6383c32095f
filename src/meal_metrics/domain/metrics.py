"""Combined metrics snapshot."""

from dataclasses import dataclass
from datetime import date

from meal_metrics.domain.insights import Insight, Reminder
from meal_metrics.domain.meals import DailyTotals
from meal_metrics.domain.scores import HealthScoreResult
from meal_metrics.domain.streaks import StreakResult


@dataclass(frozen=True)
class DashboardSnapshot:
    """All derived metrics for a user on one day."""

    today: date
    totals: DailyTotals
    streak: StreakResult
    health_score: HealthScoreResult
    insights: tuple[Insight, ...]
    reminders: tuple[Reminder, ...]
