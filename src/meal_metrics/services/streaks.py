"""Logging streak and badge computation.

A day counts toward the streak when at least one meal is logged on it.
Missing a single day pauses the streak; missing two consecutive days
breaks it.
"""

from collections.abc import Iterable
from datetime import date, datetime

from meal_metrics.domain.meals import MealEntry
from meal_metrics.domain.streaks import (
    BOUNCE_BACK,
    STREAK_BADGES,
    Badge,
    StreakResult,
    StreakStatus,
)
from meal_metrics.services.dates import days_before, days_between, resolve_today
from meal_metrics.services.meals import active_days

MAX_SCAN_DAYS = 365
ALLOWED_MISSES = 1
# Largest gap between two active days that still continues a run.
MAX_RUN_GAP_DAYS = 2

_NO_DATA = StreakResult(
    current_streak=0,
    best_streak=0,
    badges=(),
    streak_status=StreakStatus.NO_DATA,
    last_logged_date=None,
    days_with_pause=0,
)


def calculate_streak(
    meals: Iterable[MealEntry], now: datetime | None = None
) -> StreakResult:
    """Return the current and best streak for ``meals`` as of ``now``."""
    dates = active_days(meals)
    if not dates:
        return _NO_DATA

    today = resolve_today(now)
    yesterday = days_before(today, 1)
    last_logged = max(dates)

    status = StreakStatus.ACTIVE
    days_with_pause = 0
    if today in dates:
        pass
    elif yesterday in dates:
        status = StreakStatus.PAUSED
        days_with_pause = 1
    elif days_before(today, 2) in dates:
        status = StreakStatus.BROKEN
    elif days_between(today, last_logged) >= MAX_RUN_GAP_DAYS:
        status = StreakStatus.BROKEN

    current = 0
    if status is not StreakStatus.BROKEN:
        start = today if today in dates else yesterday
        current = _scan_back(dates, start)

    best = max(_longest_run(sorted(dates)), current)
    return StreakResult(
        current_streak=current,
        best_streak=best,
        badges=_earned_badges(current, best, status),
        streak_status=status,
        last_logged_date=last_logged,
        days_with_pause=days_with_pause,
    )


def _scan_back(dates: set[date], start: date) -> int:
    # The miss allowance is shared by the whole scan, not granted per gap.
    count = 0
    misses_left = ALLOWED_MISSES
    for offset in range(MAX_SCAN_DAYS):
        if days_before(start, offset) in dates:
            count += 1
        elif misses_left > 0 and offset > 0:
            misses_left -= 1
        else:
            break
    return count


def _longest_run(sorted_dates: list[date]) -> int:
    best = 0
    run = 0
    previous: date | None = None
    for day in sorted_dates:
        if previous is not None and days_between(day, previous) <= MAX_RUN_GAP_DAYS:
            run += 1
        else:
            run = 1
        best = max(best, run)
        previous = day
    return best


def _earned_badges(
    current: int, best: int, status: StreakStatus
) -> tuple[Badge, ...]:
    badges = [
        badge
        for badge in STREAK_BADGES
        if current >= badge.requirement or best >= badge.requirement
    ]
    if status is StreakStatus.ACTIVE and current >= 1 and best > current:
        badges.append(BOUNCE_BACK)
    return tuple(badges)


def streak_status_message(result: StreakResult) -> str:
    """Return a short status line for the streak card."""
    streak = result.current_streak
    if result.streak_status is StreakStatus.ACTIVE:
        if streak >= 7:
            return f"{streak} day streak - keep it going!"
        if streak >= 3:
            return f"{streak} day streak - nice consistency!"
        if streak == 1:
            return "Day 1 - great start!"
        return f"{streak} day streak"
    if result.streak_status is StreakStatus.PAUSED:
        return "Streak paused - log a meal to continue"
    if result.streak_status is StreakStatus.BROKEN:
        return "Start a new streak today"
    return "Log your first meal to start a streak"


def has_logged_today(meals: Iterable[MealEntry], now: datetime | None = None) -> bool:
    today = resolve_today(now)
    return any(meal.day == today for meal in meals)


def days_since_last_log(
    meals: Iterable[MealEntry], now: datetime | None = None
) -> int | None:
    """Return whole days since the latest dated meal, or None without one."""
    dates = active_days(meals)
    if not dates:
        return None
    return days_between(resolve_today(now), max(dates))
