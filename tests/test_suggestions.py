from __future__ import annotations

import pytest

from health_engine.suggestions import (
    EXERCISES,
    MEAL_TYPES,
    CalorieTier,
    calorie_tier,
    exercise_burns,
    meal_plan,
)


@pytest.mark.parametrize(
    ("calories", "tier"),
    [
        (1599.0, CalorieTier.LOW),
        (1600.0, CalorieTier.MID),
        (2200.0, CalorieTier.MID),
        (2200.5, CalorieTier.HIGH),
    ],
)
def test_calorie_tier_boundaries(calories: float, tier: CalorieTier) -> None:
    assert calorie_tier(calories) == tier


def test_meal_plan_vegetarian_mid() -> None:
    plan = meal_plan(2000.0, vegetarian=True)
    assert list(plan) == list(MEAL_TYPES)
    assert "1 cup oats + banana + nuts" in plan["breakfast"]


def test_meal_plan_non_vegetarian_low() -> None:
    plan = meal_plan(1500.0, vegetarian=False)
    assert plan["snack"] == ["Boiled egg", "4 almonds + 1/2 banana"]


def test_meal_plan_returns_copies() -> None:
    plan = meal_plan(2500.0, vegetarian=True)
    plan["lunch"].append("extra")
    assert "extra" not in meal_plan(2500.0, vegetarian=True)["lunch"]


def test_exercise_burns_floor_met_formula() -> None:
    burns = {b.exercise.name: b for b in exercise_burns(65.0)}
    assert len(burns) == len(EXERCISES)
    assert burns["Jump Rope"].kcal_by_minutes == {15: 162, 30: 325}
    assert burns["Yoga"].kcal_by_minutes[15] == 40
    assert burns["Jump Rope"].exercise.reps_per_100_kcal == 850
