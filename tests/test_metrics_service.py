"""Tests for the metrics service."""

from datetime import timedelta

from meal_metrics.domain.insights import STREAK_PROTECTION
from meal_metrics.domain.meals import DailyGoals
from meal_metrics.domain.scores import GREAT
from meal_metrics.domain.streaks import STREAK_3, STREAK_7, StreakStatus
from meal_metrics.services.cache import InMemoryCache
from meal_metrics.services.meals import meals_from_mappings
from meal_metrics.services.metrics import MetricsService, build_dashboard
from tests.conftest import FIXED_NOW, TODAY, InMemoryMealSource, MutableClock, day_ago


def _document(days: int, meal_type: str, calories: float, protein: float) -> dict:
    return {
        "date": day_ago(days).isoformat(),
        "mealType": meal_type,
        "calories": calories,
        "protein": protein,
    }


def _week_of_meals() -> list[dict]:
    documents = []
    for offset in range(7):
        documents.append(_document(offset, "Breakfast", 500, 15))
        documents.append(_document(offset, "Lunch", 700, 15))
        documents.append(_document(offset, "Dinner", 800, 20))
    return documents


def test_dashboard_threads_streak_into_score(
    meal_source: InMemoryMealSource,
) -> None:
    meal_source.meals["user-1"] = _week_of_meals()
    service = MetricsService(source=meal_source, clock=lambda: FIXED_NOW)

    dashboard = service.get_dashboard("user-1")

    assert dashboard.today == TODAY
    assert dashboard.totals.calories == 2000
    assert dashboard.totals.meal_count == 3
    assert dashboard.streak.current_streak == 7
    assert dashboard.streak.badges == (STREAK_3, STREAK_7)
    assert dashboard.health_score.score == 100
    assert dashboard.health_score.label == GREAT
    assert dashboard.reminders == ()


def test_service_accessors(meal_source: InMemoryMealSource) -> None:
    meal_source.meals["user-1"] = [
        _document(1, "Lunch", 600, 30),
        _document(2, "Lunch", 600, 30),
    ]
    service = MetricsService(source=meal_source, clock=lambda: FIXED_NOW)

    assert service.get_streak("user-1").streak_status is StreakStatus.PAUSED
    assert service.get_health_score("user-1").has_data is False
    assert service.get_health_score("user-1").breakdown.consistency == 4
    assert service.get_insights("user-1") == []
    assert service.get_reminders("user-1") == [STREAK_PROTECTION]


def test_unknown_user_gets_empty_metrics(meal_source: InMemoryMealSource) -> None:
    service = MetricsService(source=meal_source, clock=lambda: FIXED_NOW)

    dashboard = service.get_dashboard("nobody")

    assert dashboard.streak.streak_status is StreakStatus.NO_DATA
    assert dashboard.health_score.score == 0
    assert dashboard.insights == ()


def test_service_uses_configured_goals(meal_source: InMemoryMealSource) -> None:
    meal_source.meals["user-1"] = [_document(0, "Lunch", 1000, 25)]
    service = MetricsService(
        source=meal_source,
        goals=DailyGoals(calories=1000, protein=25),
        clock=lambda: FIXED_NOW,
    )

    breakdown = service.get_health_score("user-1").breakdown

    assert breakdown.calories == 40
    assert breakdown.protein == 35


def test_cache_reuses_snapshot_while_meals_unchanged(
    meal_source: InMemoryMealSource,
) -> None:
    meal_source.meals["user-1"] = _week_of_meals()
    service = MetricsService(
        source=meal_source,
        clock=lambda: FIXED_NOW,
        cache=InMemoryCache(clock=lambda: FIXED_NOW),
    )

    first = service.get_dashboard("user-1")
    second = service.get_dashboard("user-1")

    assert second is first
    assert meal_source.calls == 2


def test_cache_recomputes_when_meals_change(meal_source: InMemoryMealSource) -> None:
    meal_source.meals["user-1"] = _week_of_meals()
    service = MetricsService(
        source=meal_source,
        clock=lambda: FIXED_NOW,
        cache=InMemoryCache(clock=lambda: FIXED_NOW),
    )

    first = service.get_dashboard("user-1")
    meal_source.meals["user-1"] = [
        *_week_of_meals(),
        _document(0, "Snack", 400, 5),
    ]
    second = service.get_dashboard("user-1")

    assert second is not first
    assert second.totals.calories == 2400


def test_cache_recomputes_on_a_new_day(meal_source: InMemoryMealSource) -> None:
    meal_source.meals["user-1"] = _week_of_meals()
    clock = MutableClock()
    service = MetricsService(
        source=meal_source,
        clock=clock,
        cache=InMemoryCache(clock=clock),
        cache_ttl_seconds=7 * 24 * 3600,
    )

    first = service.get_dashboard("user-1")
    clock.now = FIXED_NOW + timedelta(days=1)
    second = service.get_dashboard("user-1")

    assert first.streak.streak_status is StreakStatus.ACTIVE
    assert second.streak.streak_status is StreakStatus.PAUSED
    assert second.health_score.has_data is False


def test_build_dashboard_is_pure() -> None:
    entries = meals_from_mappings(_week_of_meals())
    snapshot = list(entries)
    goals = DailyGoals()

    first = build_dashboard(entries, goals, FIXED_NOW)
    second = build_dashboard(entries, goals, FIXED_NOW)

    assert first == second
    assert entries == snapshot


def test_service_builds_period_report(meal_source: InMemoryMealSource) -> None:
    meal_source.meals["user-1"] = _week_of_meals()
    service = MetricsService(source=meal_source, clock=lambda: FIXED_NOW)

    report = service.get_report("user-1", days=14)

    assert report.start == day_ago(13)
    assert report.end == TODAY
    assert len(report.days) == 14
    assert report.calorie_insight == (
        "You stayed within your calorie goal every day this period."
    )
    assert report.meal_distribution_insight == (
        "Most of your calories come from Dinner (40%)."
    )
