"""Cálculo de BMR, calorías diarias, macros y rango de peso saludable."""

from __future__ import annotations

import logging
import math

from health_engine.errors import ActivityFactorError
from health_engine.model import (
    ActivityLevel,
    AdjustmentDirection,
    BiometricProfile,
    Goal,
    NutritionPlan,
    WeightAdjustment,
)

logger = logging.getLogger(__name__)

KCAL_PER_KG = 7700.0
HEALTHY_BMI_MIN = 18.5
HEALTHY_BMI_MAX = 24.9

# (share of calories, kcal per gram)
CARBS_SPLIT = (0.40, 4.0)
PROTEIN_SPLIT = (0.30, 4.0)
FAT_SPLIT = (0.30, 9.0)


def parse_activity_factor(value: float, strict: bool = False) -> float:
    """Map a raw activity factor to one of the supported levels.

    Args:
        value: Factor entered by the user.
        strict: Raise instead of snapping to the nearest level.

    Returns:
        The matching (or nearest) ``ActivityLevel`` factor.

    Raises:
        ActivityFactorError: If ``strict`` and the value is not a level.
    """
    levels = [level.value for level in ActivityLevel]
    for level in levels:
        if math.isclose(value, level):
            return level
    if strict:
        raise ActivityFactorError(value)
    if not math.isfinite(value) or value <= 0:
        nearest = ActivityLevel.SEDENTARY.value
    else:
        nearest = min(levels, key=lambda level: abs(level - value))
    logger.warning("Activity factor %r clamped to %s", value, nearest)
    return nearest


def calculate_bmr(weight_kg: float, height_cm: float, age: int, is_male: bool) -> float:
    """Basal metabolic rate (Mifflin-St Jeor), in kcal/day."""
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    return base + 5 if is_male else base - 161


def maintenance_calories(bmr: float, activity_factor: float) -> float:
    return bmr * activity_factor


def goal_adjustment(goal: Goal, target_delta_kg: float, weeks_to_target: int) -> float | None:
    """Signed daily kcal change for the goal, or None if it does not apply."""
    if goal is Goal.MAINTAIN:
        return None
    if target_delta_kg <= 0 or weeks_to_target <= 0:
        logger.warning(
            "Ignoring %s goal: delta=%r kg, weeks=%r",
            goal.value,
            target_delta_kg,
            weeks_to_target,
        )
        return None
    daily = target_delta_kg * KCAL_PER_KG / (weeks_to_target * 7)
    return -daily if goal is Goal.LOSE else daily


def daily_calories(
    bmr: float,
    activity_factor: float,
    goal: Goal = Goal.MAINTAIN,
    target_delta_kg: float = 0.0,
    weeks_to_target: int = 0,
) -> float:
    """Goal-adjusted calorie target; maintenance when the goal does not apply."""
    maintenance = maintenance_calories(bmr, activity_factor)
    adjustment = goal_adjustment(goal, target_delta_kg, weeks_to_target)
    return maintenance if adjustment is None else maintenance + adjustment


def macro_split(calories: float) -> tuple[int, int, int]:
    """Carbs, protein and fat grams (40/30/30 split), floored."""
    def grams(split: tuple[float, float]) -> int:
        share, kcal_per_gram = split
        return math.floor(calories * share / kcal_per_gram)

    return grams(CARBS_SPLIT), grams(PROTEIN_SPLIT), grams(FAT_SPLIT)


def plan_nutrition(profile: BiometricProfile) -> NutritionPlan:
    """Compute the full nutrition plan for a profile.

    Args:
        profile: User biometrics and goal.

    Returns:
        BMR, maintenance and target calories plus macro grams.
    """
    bmr = calculate_bmr(
        profile.weight_kg, profile.height_cm, profile.age_years, profile.is_male
    )
    maintenance = maintenance_calories(bmr, profile.activity_factor)
    adjustment = goal_adjustment(
        profile.goal, profile.target_delta_kg, profile.weeks_to_target
    )
    calories = maintenance if adjustment is None else maintenance + adjustment
    carbs, protein, fat = macro_split(calories)
    return NutritionPlan(
        bmr=bmr,
        maintenance=maintenance,
        daily_calories=calories,
        carbs_grams=carbs,
        protein_grams=protein,
        fat_grams=fat,
        goal_applied=adjustment is not None,
    )


def bmi(weight_kg: float, height_cm: float) -> float:
    height_m = height_cm / 100
    return weight_kg / (height_m * height_m)


def healthy_weight_range(height_cm: float) -> tuple[float, float]:
    """Weights (kg) with a BMI between 18.5 and 24.9 for this height."""
    height_m = height_cm / 100
    return HEALTHY_BMI_MIN * height_m**2, HEALTHY_BMI_MAX * height_m**2


def recommended_adjustment(weight_kg: float, height_cm: float) -> WeightAdjustment:
    """Distance from the current weight to the healthy range."""
    low, high = healthy_weight_range(height_cm)
    if weight_kg < low:
        return WeightAdjustment(AdjustmentDirection.GAIN, low - weight_kg)
    if weight_kg > high:
        return WeightAdjustment(AdjustmentDirection.LOSE, weight_kg - high)
    return WeightAdjustment(AdjustmentDirection.NONE, 0.0)
