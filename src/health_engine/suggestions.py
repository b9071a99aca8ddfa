"""Sugerencias de comidas y ejercicios según el objetivo calórico."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

MEAL_TYPES: tuple[str, ...] = ("breakfast", "lunch", "dinner", "snack")


class CalorieTier(str, Enum):
    LOW = "low"
    MID = "mid"
    HIGH = "high"


_VEG_MEALS: dict[CalorieTier, dict[str, list[str]]] = {
    CalorieTier.LOW: {
        "breakfast": ["1/2 cup oats + 1 small banana", "1 besan chilla + mint chutney"],
        "lunch": ["1 roti + 1/2 cup dal", "1/2 cup rice + stir-fried vegetables"],
        "dinner": ["1 bowl vegetable soup + 1 toast", "1 roti + 1/2 cup sabzi"],
        "snack": ["Fruit + 4 almonds", "1/2 cup buttermilk"],
    },
    CalorieTier.MID: {
        "breakfast": ["1 cup oats + banana + nuts", "2 besan chilla + chutney"],
        "lunch": ["2 rotis + 1 cup dal + salad", "1 cup rice + 1 cup paneer curry"],
        "dinner": ["1.5 cups soup + 2 toast + salad", "2 rotis + 1 cup sabzi + curd"],
        "snack": ["Fruit + 6 almonds + 1/2 protein bar", "1 glass buttermilk + peanuts"],
    },
    CalorieTier.HIGH: {
        "breakfast": [
            "1.5 cup oats + banana + nuts + honey",
            "3 chilla + peanut butter + smoothie",
        ],
        "lunch": [
            "3 rotis + 1.5 cup dal + 1 cup rice",
            "1.5 cup paneer curry + curd + salad",
        ],
        "dinner": [
            "2 cups soup + 2 rotis + sabzi + dessert",
            "2 cups rice + tofu curry + ghee",
        ],
        "snack": ["Banana shake + nuts + granola bar", "Protein smoothie + 2 dates"],
    },
}

_NON_VEG_MEALS: dict[CalorieTier, dict[str, list[str]]] = {
    CalorieTier.LOW: {
        "breakfast": ["1 boiled egg + toast", "1/2 omelette + spinach"],
        "lunch": ["1 roti + 1/2 cup egg curry", "1/2 cup rice + stir-fried chicken"],
        "dinner": ["1 bowl chicken soup + 1 toast", "1 egg bhurji + roti"],
        "snack": ["Boiled egg", "4 almonds + 1/2 banana"],
    },
    CalorieTier.MID: {
        "breakfast": ["2 boiled eggs + toast", "Omelette + smoothie"],
        "lunch": [
            "2 rotis + 1 cup egg curry + salad",
            "1 cup rice + 1 cup chicken curry",
        ],
        "dinner": [
            "1.5 cups soup + 2 toast + salad",
            "2 rotis + 1 cup chicken bhurji + curd",
        ],
        "snack": ["Boiled egg + fruit", "Yogurt + almonds"],
    },
    CalorieTier.HIGH: {
        "breakfast": ["3 eggs + toast + peanut butter", "Omelette + smoothie + banana"],
        "lunch": ["3 rotis + 1.5 cup chicken curry + rice", "2 cups biryani + curd"],
        "dinner": ["Grilled chicken + salad + 2 rotis", "Egg curry + rice + dessert"],
        "snack": ["Protein shake + nuts + granola", "Smoothie + 2 dates + banana"],
    },
}


@dataclass(frozen=True)
class Exercise:
    """Exercise with its MET value."""

    name: str
    met: float
    reps_per_100_kcal: int | None = None


EXERCISES: tuple[Exercise, ...] = (
    Exercise("Jump Rope", 10.0, 850),
    Exercise("Running (5 mph)", 7.0),
    Exercise("Cycling", 6.0),
    Exercise("Yoga", 2.5),
)


@dataclass(frozen=True)
class ExerciseBurn:
    exercise: Exercise
    kcal_by_minutes: dict[int, int]


def calorie_tier(calories: float) -> CalorieTier:
    if calories < 1600:
        return CalorieTier.LOW
    if calories <= 2200:
        return CalorieTier.MID
    return CalorieTier.HIGH


def meal_plan(calories: float, vegetarian: bool) -> dict[str, list[str]]:
    """Meal suggestions per meal type for a daily calorie target."""
    table = _VEG_MEALS if vegetarian else _NON_VEG_MEALS
    tier = table[calorie_tier(calories)]
    return {meal: list(tier[meal]) for meal in MEAL_TYPES}


def calories_burned(exercise: Exercise, weight_kg: float, minutes: int) -> int:
    return math.floor(exercise.met * weight_kg * minutes / 60)


def exercise_burns(
    weight_kg: float, minutes: Sequence[int] = (15, 30)
) -> tuple[ExerciseBurn, ...]:
    """Approximate kcal burned by each exercise for the given durations."""
    return tuple(
        ExerciseBurn(
            exercise=ex,
            kcal_by_minutes={m: calories_burned(ex, weight_kg, m) for m in minutes},
        )
        for ex in EXERCISES
    )
