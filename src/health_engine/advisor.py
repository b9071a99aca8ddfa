"""Clasificadores de tendencia y selección de consejos por umbral."""

from __future__ import annotations

from collections.abc import Sequence

from health_engine.aggregate import window, window_stats
from health_engine.config import EngineConfig
from health_engine.model import DailyPoint, Direction, RangeCategory, Trend

_INCHES_PER_METER = 39.3701

STEP_TIPS: dict[Trend, str] = {
    Trend.IMPROVING: "Great momentum! Keep going!",
    Trend.DECLINING: "Stay active daily!",
    Trend.STABLE: "Consistency is power!",
}

WEIGHT_TIPS: dict[Trend, str] = {
    Trend.IMPROVING: "Building strength!",
    Trend.DECLINING: "Fitness progress!",
    Trend.STABLE: "Stable and steady!",
}

HEART_RATE_TIPS: dict[RangeCategory, str] = {
    RangeCategory.HIGH: "High HR - Consider relaxation",
    RangeCategory.NORMAL: "Normal range",
    RangeCategory.LOW: "Excellent cardio health",
}

SLEEP_TIPS: dict[RangeCategory, str] = {
    RangeCategory.HIGH: "Great sleep habits!",
    RangeCategory.NORMAL: "Try to get a bit more rest.",
    RangeCategory.LOW: "Warning: Insufficient sleep!",
}

# (mean HR strictly above, advice), evaluated top-down.
HEALTH_ADVICE: tuple[tuple[float, str], ...] = (
    (100.0, "Relax and rest more!"),
    (85.0, "Stay hydrated!"),
    (70.0, "Great! Add light cardio!"),
)
HEALTH_ADVICE_DEFAULT = "Excellent cardiovascular health!"


def _scan_below(
    value: float,
    table: Sequence[tuple[float, RangeCategory]],
    default: RangeCategory,
) -> RangeCategory:
    for bound, category in table:
        if value < bound:
            return category
    return default


def classify_delta(first: float, last: float, threshold: float = 500.0) -> Trend:
    """Classify the change between two values against a fixed threshold."""
    diff = last - first
    if diff > threshold:
        return Trend.IMPROVING
    if diff < -threshold:
        return Trend.DECLINING
    return Trend.STABLE


def classify_range(
    value: float | None, low_threshold: float, high_threshold: float
) -> RangeCategory:
    """Classify ``value`` as below ``low``, at or above ``high``, or in between."""
    if value is None:
        return RangeCategory.NO_DATA
    table = (
        (low_threshold, RangeCategory.LOW),
        (high_threshold, RangeCategory.NORMAL),
    )
    return _scan_below(value, table, RangeCategory.HIGH)


def classify_series_trend(
    series: Sequence[DailyPoint], n: int, threshold: float
) -> Trend:
    """Compare the first and last of the last ``n`` points."""
    last = window(series, n)
    if len(last) < 2:
        return Trend.INSUFFICIENT_DATA
    return classify_delta(last[0].value, last[-1].value, threshold)


def classify_series_range(
    series: Sequence[DailyPoint], n: int, low: float, high: float
) -> RangeCategory:
    stats = window_stats(series, n)
    return classify_range(stats.mean if stats.has_data else None, low, high)


def step_tip(
    series: Sequence[DailyPoint], config: EngineConfig = EngineConfig()
) -> str | None:
    trend = classify_series_trend(
        series, config.window_days, config.step_delta_threshold
    )
    return STEP_TIPS.get(trend)


def weight_tip(
    series: Sequence[DailyPoint], config: EngineConfig = EngineConfig()
) -> str | None:
    trend = classify_series_trend(
        series, config.window_days, config.weight_delta_threshold
    )
    return WEIGHT_TIPS.get(trend)


def heart_rate_tip(
    series: Sequence[DailyPoint], config: EngineConfig = EngineConfig()
) -> str | None:
    category = classify_series_range(
        series, config.window_days, config.heart_rate_low, config.heart_rate_high
    )
    return HEART_RATE_TIPS.get(category)


def sleep_tip(
    series: Sequence[DailyPoint], config: EngineConfig = EngineConfig()
) -> str | None:
    category = classify_series_range(
        series, config.window_days, config.sleep_low_hours, config.sleep_high_hours
    )
    return SLEEP_TIPS.get(category)


def health_advice_tip(
    series: Sequence[DailyPoint], config: EngineConfig = EngineConfig()
) -> str | None:
    """General advice from the mean heart rate of the window."""
    stats = window_stats(series, config.window_days)
    if not stats.has_data:
        return None
    for bound, advice in HEALTH_ADVICE:
        if stats.mean > bound:
            return advice
    return HEALTH_ADVICE_DEFAULT


def height_stability_tip(
    series: Sequence[DailyPoint], config: EngineConfig = EngineConfig()
) -> str | None:
    stats = window_stats(series, config.window_days)
    if stats.minimum is None or stats.maximum is None:
        return None
    if stats.maximum - stats.minimum < config.height_tolerance_m:
        return "Stable height over the last month"
    return "Height data fluctuates slightly"


def heart_rate_goal_progress(mean_bpm: float | None, goal: float = 100.0) -> float | None:
    """Percentage towards keeping the average heart rate under ``goal``.

    Returns:
        Progress capped at 100, or None without a usable average.
    """
    if mean_bpm is None or mean_bpm <= 0:
        return None
    return min(100.0, goal / mean_bpm * 100.0)


def _direction(delta: float, tolerance: float) -> Direction:
    if delta > tolerance:
        return Direction.UP
    if delta < -tolerance:
        return Direction.DOWN
    return Direction.FLAT


def daily_directions(series: Sequence[DailyPoint]) -> tuple[Direction, ...]:
    """Day-over-day direction of each point; the first one is flat."""
    out: list[Direction] = []
    previous: DailyPoint | None = None
    for point in series:
        if previous is None:
            out.append(Direction.FLAT)
        else:
            out.append(_direction(point.value - previous.value, 0.0))
        previous = point
    return tuple(out)


def latest_change(
    series: Sequence[DailyPoint], tolerance: float = 0.01
) -> Direction | None:
    """Direction between the two most recent points."""
    if len(series) < 2:
        return None
    return _direction(series[-1].value - series[-2].value, tolerance)


def height_consistency_score(series: Sequence[DailyPoint], n: int = 28) -> int | None:
    """100 minus 5 points per distinct whole-inch height in the window."""
    last = window(series, n)
    if not last:
        return None
    distinct = {int(p.value * _INCHES_PER_METER) for p in last}
    return max(0, 100 - 5 * len(distinct))
