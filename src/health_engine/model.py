"""Modelos tipados para muestras, series diarias y plan nutricional."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum, IntEnum
from typing import Generic, TypeVar

T = TypeVar("T")


class Metric(str, Enum):
    """Health metrics read from the device health store."""

    STEPS = "steps"
    WEIGHT = "weight"
    HEART_RATE = "heart_rate"
    SLEEP = "sleep"
    HEIGHT = "height"


class AggregationPolicy(str, Enum):
    """How several samples of the same day collapse into one value."""

    SUM = "sum"
    LATEST = "latest"
    MEAN = "mean"


class Weekday(IntEnum):
    """Day of week, numbered like ``date.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


# Orden fijo para graficar (domingo primero).
CANONICAL_WEEK: tuple[Weekday, ...] = (
    Weekday.SUNDAY,
    Weekday.MONDAY,
    Weekday.TUESDAY,
    Weekday.WEDNESDAY,
    Weekday.THURSDAY,
    Weekday.FRIDAY,
    Weekday.SATURDAY,
)


class Goal(str, Enum):
    """Body-weight goal."""

    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"


class ActivityLevel(float, Enum):
    """Activity multipliers applied to the BMR."""

    SEDENTARY = 1.2
    LIGHTLY_ACTIVE = 1.375
    MODERATELY_ACTIVE = 1.55
    VERY_ACTIVE = 1.725
    SUPER_ACTIVE = 1.9


class Trend(str, Enum):
    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"
    INSUFFICIENT_DATA = "insufficient_data"


class RangeCategory(str, Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    NO_DATA = "no_data"


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    FLAT = "flat"


class AdjustmentDirection(str, Enum):
    GAIN = "gain"
    LOSE = "lose"
    NONE = "none"


@dataclass(frozen=True)
class Sample:
    """One raw health observation (timestamped)."""

    timestamp: datetime
    value: float


@dataclass(frozen=True)
class DailyPoint:
    """One calendar day's aggregated value."""

    day: date
    value: float


@dataclass(frozen=True)
class WeekdayBucket:
    """Mean value of a metric for one day of week."""

    weekday: Weekday
    mean_value: float
    count: int = 0


@dataclass(frozen=True)
class AngularSlice(Generic[T]):
    """Contiguous span of a donut chart, in degrees."""

    item: T
    start_angle: float
    end_angle: float

    @property
    def span(self) -> float:
        return self.end_angle - self.start_angle


@dataclass(frozen=True)
class WindowStats:
    """Rolling statistics over the last N daily points.

    ``minimum`` and ``maximum`` are ``None`` when ``has_data`` is false.
    """

    count: int
    mean: float
    minimum: float | None
    maximum: float | None

    @property
    def has_data(self) -> bool:
        return self.count > 0


@dataclass(frozen=True)
class BiometricProfile:
    """User biometrics entered in the diet form."""

    height_cm: float
    weight_kg: float
    age_years: int
    is_male: bool
    activity_factor: float = ActivityLevel.LIGHTLY_ACTIVE.value
    goal: Goal = Goal.MAINTAIN
    target_delta_kg: float = 0.0
    weeks_to_target: int = 0
    vegetarian: bool = False


@dataclass(frozen=True)
class NutritionPlan:
    """Daily calorie target and macro grams derived from a profile.

    ``goal_applied`` is false when the goal adjustment was skipped
    (maintain goal or invalid delta/weeks) and calories equal maintenance.
    """

    bmr: float
    maintenance: float
    daily_calories: float
    carbs_grams: int
    protein_grams: int
    fat_grams: int
    goal_applied: bool

    @property
    def daily_adjustment(self) -> float:
        return abs(self.daily_calories - self.maintenance)


@dataclass(frozen=True)
class WeightAdjustment:
    """Signed distance to the nearest bound of the healthy weight range."""

    direction: AdjustmentDirection
    amount_kg: float
