"""Daily goal planning from a body profile (Mifflin-St Jeor)."""

import logging
import math
from collections.abc import Mapping

from pydantic import ValidationError

from meal_metrics.adapters.goal_payloads import GoalPlanPayload
from meal_metrics.domain.goals import BodyProfile, FitnessGoal, GoalPlan, Sex
from meal_metrics.domain.meals import DailyGoals

_logger = logging.getLogger(__name__)

_SEX_OFFSET = {Sex.MALE: 5, Sex.FEMALE: -161}

# Calorie adjustment, protein grams per kg, explanation.
_GOAL_TARGETS = {
    FitnessGoal.LOSE_WEIGHT: (
        -500,
        2.0,
        "A 500 calorie deficit targets ~0.5 kg/week loss safely.",
    ),
    FitnessGoal.BUILD_MUSCLE: (
        300,
        2.2,
        "A 300 calorie surplus supports lean muscle growth.",
    ),
    FitnessGoal.MAINTAIN: (
        0,
        1.6,
        "Eating at maintenance keeps your weight stable.",
    ),
    FitnessGoal.GENERAL_HEALTH: (
        0,
        1.4,
        "Balanced nutrition for overall wellbeing.",
    ),
}

FAT_CALORIE_SHARE = 0.25
MIN_CALORIES = 1200
MIN_CARBS = 50
MIN_FAT = 30


def _round(value: float) -> int:
    return math.floor(value + 0.5)


def basal_metabolic_rate(profile: BodyProfile) -> float:
    """Mifflin-St Jeor resting energy expenditure in kcal/day."""
    return (
        10 * profile.weight_kg
        + 6.25 * profile.height_cm
        - 5 * profile.age
        + _SEX_OFFSET[profile.sex]
    )


def calculate_targets(profile: BodyProfile) -> GoalPlan:
    """Derive daily calorie and macro goals for ``profile``."""
    bmr = basal_metabolic_rate(profile)
    tdee = _round(bmr * profile.activity_level.multiplier)
    adjustment, protein_per_kg, explanation = _GOAL_TARGETS[profile.fitness_goal]
    calories = tdee + adjustment

    protein = _round(protein_per_kg * profile.weight_kg)
    fat_calories = _round(calories * FAT_CALORIE_SHARE)
    carb_calories = calories - protein * 4 - fat_calories
    goals = DailyGoals(
        calories=max(MIN_CALORIES, calories),
        protein=protein,
        carbs=max(MIN_CARBS, _round(carb_calories / 4)),
        fat=max(MIN_FAT, _round(fat_calories / 9)),
    )
    return GoalPlan(bmr=_round(bmr), tdee=tdee, goals=goals, explanation=explanation)


def profile_from_mapping(raw: Mapping[str, object]) -> BodyProfile | None:
    """Build a profile from a stored plan, or None while it is incomplete."""
    try:
        payload = GoalPlanPayload.model_validate(dict(raw))
    except ValidationError as exc:
        _logger.debug("Goal plan is incomplete: %s", exc)
        return None
    return BodyProfile(
        weight_kg=payload.weight,
        height_cm=payload.height,
        age=payload.age,
        sex=payload.gender,
        activity_level=payload.activity_level,
        fitness_goal=payload.fitness_goal,
    )


def plan_from_mapping(raw: Mapping[str, object]) -> GoalPlan | None:
    """Calculate targets for a stored plan, or None while it is incomplete."""
    profile = profile_from_mapping(raw)
    if profile is None:
        return None
    return calculate_targets(profile)
