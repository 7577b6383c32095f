"""Metrics service combining streak, score, insights and reminders."""

import hashlib
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol

from meal_metrics.domain.insights import Insight, Reminder
from meal_metrics.domain.meals import DailyGoals, MealEntry
from meal_metrics.domain.metrics import DashboardSnapshot
from meal_metrics.domain.reports import PeriodReport
from meal_metrics.domain.scores import HealthScoreResult
from meal_metrics.domain.streaks import StreakResult
from meal_metrics.services.cache import Cache
from meal_metrics.services.dates import resolve_today
from meal_metrics.services.health_score import calculate_health_score
from meal_metrics.services.insights import generate_insights
from meal_metrics.services.meals import meals_from_mappings, meals_on, total_meals
from meal_metrics.services.reminders import select_reminders
from meal_metrics.services.reports import report_for_period
from meal_metrics.services.streaks import calculate_streak

_logger = logging.getLogger(__name__)


class MealSource(Protocol):
    """Read interface over a user's stored meals."""

    def list_meals(self, user_id: str) -> list[Mapping[str, object]]:
        """Return the user's meal documents."""


def build_dashboard(
    meals: list[MealEntry], goals: DailyGoals, now: datetime
) -> DashboardSnapshot:
    """Compute every metric for ``meals`` as of ``now``."""
    today = resolve_today(now)
    todays = meals_on(meals, today)
    streak = calculate_streak(meals, now)
    health_score = calculate_health_score(todays, goals, streak.current_streak)
    return DashboardSnapshot(
        today=today,
        totals=total_meals(todays, today),
        streak=streak,
        health_score=health_score,
        insights=tuple(generate_insights(meals, goals, now)),
        reminders=tuple(select_reminders(meals, goals, streak.current_streak, now)),
    )


def _system_clock() -> datetime:
    return datetime.now().astimezone()


@dataclass
class MetricsService:
    """Service recomputing a user's metrics from their meal list."""

    source: MealSource
    goals: DailyGoals = field(default_factory=DailyGoals)
    clock: Callable[[], datetime] = _system_clock
    cache: Cache | None = None
    cache_ttl_seconds: int = 300

    def get_dashboard(self, user_id: str) -> DashboardSnapshot:
        """Return all metrics, reusing a snapshot while the inputs match."""
        now = self.clock()
        meals = meals_from_mappings(self.source.list_meals(user_id))
        if self.cache is None:
            return build_dashboard(meals, self.goals, now)

        key = _cache_key(user_id, now, self.goals, meals)
        cached = self.cache.get(key)
        if isinstance(cached, DashboardSnapshot):
            _logger.debug("Metrics cache hit: user=%s", user_id)
            return cached
        _logger.debug("Metrics cache miss: user=%s meals=%s", user_id, len(meals))
        snapshot = build_dashboard(meals, self.goals, now)
        self.cache.set(key, snapshot, ttl_seconds=self.cache_ttl_seconds)
        return snapshot

    def get_streak(self, user_id: str) -> StreakResult:
        return self.get_dashboard(user_id).streak

    def get_health_score(self, user_id: str) -> HealthScoreResult:
        return self.get_dashboard(user_id).health_score

    def get_insights(self, user_id: str) -> list[Insight]:
        return list(self.get_dashboard(user_id).insights)

    def get_reminders(self, user_id: str) -> list[Reminder]:
        return list(self.get_dashboard(user_id).reminders)

    def get_report(self, user_id: str, days: int = 7) -> PeriodReport:
        """Return the report for the last ``days`` days, computed fresh."""
        meals = meals_from_mappings(self.source.list_meals(user_id))
        return report_for_period(meals, days, self.goals, self.clock())


def _cache_key(
    user_id: str, now: datetime, goals: DailyGoals, meals: list[MealEntry]
) -> str:
    fingerprint = hashlib.sha256(repr((goals, meals)).encode()).hexdigest()
    return f"metrics:{user_id}:{resolve_today(now).isoformat()}:{fingerprint}"
