"""Daily health score (0-100).

The score combines three categories:

* calories: staying near the calorie goal (up to 40 points)
* protein: meeting the protein goal (up to 35 points)
* consistency: meals logged today plus the current streak (up to 25 points)
"""

import math
from collections import defaultdict
from collections.abc import Iterable
from datetime import date

from meal_metrics.domain.meals import DailyGoals, MealEntry
from meal_metrics.domain.scores import (
    GOOD,
    GREAT,
    IMPROVE,
    HealthScoreResult,
    ScoreBreakdown,
    ScoreLabel,
)

MAX_SCORE = 100
OVEREATING_RATIO = 1.3
OVEREATING_PENALTY = 10

# (max relative distance from the goal, points), checked in order.
_CALORIE_BANDS = (
    (0.05, 40),
    (0.10, 36),
    (0.15, 32),
    (0.20, 26),
    (0.30, 18),
    (0.50, 10),
)
_CALORIE_FLOOR_POINTS = 5

# (min share of the goal, points), checked in order.
_PROTEIN_BANDS = (
    (1.0, 35),
    (0.9, 32),
    (0.8, 28),
    (0.7, 22),
    (0.5, 15),
    (0.3, 8),
)
_PROTEIN_FLOOR_POINTS = 4

_STREAK_BONUS = (
    (7, 10),
    (3, 7),
    (1, 4),
)


def calculate_health_score(
    todays_meals: Iterable[MealEntry],
    goals: DailyGoals | None = None,
    current_streak: int = 0,
) -> HealthScoreResult:
    """Score today's meals against ``goals``."""
    goals = goals or DailyGoals()
    calories = 0.0
    protein = 0.0
    meal_count = 0
    for meal in todays_meals:
        calories += meal.calories
        protein += meal.protein
        meal_count += 1

    breakdown = ScoreBreakdown(
        calories=_calorie_points(calories, goals.calories),
        protein=_protein_points(protein, goals.protein),
        consistency=_meal_count_points(meal_count) + _streak_points(current_streak),
    )
    score = min(MAX_SCORE, breakdown.total)
    return HealthScoreResult(
        score=score,
        breakdown=breakdown,
        label=score_label(score),
        has_data=meal_count > 0,
    )


def _calorie_points(calories: float, goal: float) -> int:
    if calories <= 0:
        return 0
    percent_diff = abs(calories - goal) / goal
    points = _CALORIE_FLOOR_POINTS
    for limit, band_points in _CALORIE_BANDS:
        if percent_diff <= limit:
            points = band_points
            break
    if calories > goal * OVEREATING_RATIO:
        points = max(0, points - OVEREATING_PENALTY)
    return points


def _protein_points(protein: float, goal: float) -> int:
    if protein <= 0:
        return 0
    ratio = protein / goal
    for minimum, points in _PROTEIN_BANDS:
        if ratio >= minimum:
            return points
    return _PROTEIN_FLOOR_POINTS


def _meal_count_points(meal_count: int) -> int:
    if meal_count >= 3:
        return 15
    if meal_count == 2:
        return 12
    if meal_count == 1:
        return 8
    return 0


def _streak_points(current_streak: int) -> int:
    for minimum, points in _STREAK_BONUS:
        if current_streak >= minimum:
            return points
    return 0


def score_label(score: int) -> ScoreLabel:
    """Return the display band for ``score``."""
    if score >= GREAT.min:
        return GREAT
    if score >= GOOD.min:
        return GOOD
    return IMPROVE


def score_encouragement(result: HealthScoreResult) -> str:
    """Return the headline message for a score card."""
    if not result.has_data:
        return "Log your first meal to see your health score!"
    if result.score >= 90:
        return "Outstanding! You're crushing it today."
    if result.score >= 80:
        return "Amazing work! Keep up the great habits."
    if result.score >= 70:
        return "You're doing well! A little more and you'll be at your best."
    if result.score >= 50:
        return "Good start! Small improvements lead to big results."
    return "Every journey begins with a single step. You've got this."


def score_suggestion(result: HealthScoreResult) -> str | None:
    """Return a targeted improvement tip, if one applies."""
    breakdown = result.breakdown
    if breakdown.calories < 20 and breakdown.protein > 20:
        return "Try to balance your calorie intake closer to your goal."
    if breakdown.protein < 20 and breakdown.calories > 20:
        return "Add more protein to reach your target!"
    if breakdown.consistency < 15:
        return "Log more meals to improve your consistency score."
    return None


def weekly_average_score(
    meals: Iterable[MealEntry], goals: DailyGoals | None = None
) -> int:
    """Average the per-day scores of dated meals, ignoring streak length."""
    by_day: dict[date, list[MealEntry]] = defaultdict(list)
    for meal in meals:
        if meal.day is not None:
            by_day[meal.day].append(meal)
    if not by_day:
        return 0
    scores = [
        calculate_health_score(day_meals, goals, current_streak=1).score
        for day_meals in by_day.values()
    ]
    return math.floor(sum(scores) / len(scores) + 0.5)
