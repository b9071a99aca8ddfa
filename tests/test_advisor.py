from __future__ import annotations

from datetime import date, timedelta

import pytest

from health_engine import advisor
from health_engine.config import EngineConfig
from health_engine.model import DailyPoint, Direction, RangeCategory, Trend


def _series(*values: float) -> tuple[DailyPoint, ...]:
    start = date(2025, 1, 1)
    return tuple(
        DailyPoint(day=start + timedelta(days=i), value=v) for i, v in enumerate(values)
    )


@pytest.mark.parametrize(
    ("first", "last", "expected"),
    [
        (1000.0, 1600.0, Trend.IMPROVING),
        (1000.0, 1400.0, Trend.STABLE),
        (1000.0, 1500.0, Trend.STABLE),
        (1600.0, 1000.0, Trend.DECLINING),
        (1000.0, 500.0, Trend.STABLE),
    ],
)
def test_classify_delta(first: float, last: float, expected: Trend) -> None:
    assert advisor.classify_delta(first, last) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (59.9, RangeCategory.LOW),
        (60.0, RangeCategory.NORMAL),
        (99.9, RangeCategory.NORMAL),
        (100.0, RangeCategory.HIGH),
        (None, RangeCategory.NO_DATA),
    ],
)
def test_classify_range_boundaries(
    value: float | None, expected: RangeCategory
) -> None:
    assert advisor.classify_range(value, 60.0, 100.0) == expected


def test_series_trend_needs_two_points() -> None:
    assert advisor.classify_series_trend(_series(1000.0), 28, 500.0) == (
        Trend.INSUFFICIENT_DATA
    )
    assert advisor.classify_series_trend((), 28, 500.0) == Trend.INSUFFICIENT_DATA


def test_series_trend_uses_last_window_only() -> None:
    series = _series(0.0, 1000.0, 1100.0)
    assert advisor.classify_series_trend(series, 2, 500.0) == Trend.STABLE
    assert advisor.classify_series_trend(series, 3, 500.0) == Trend.IMPROVING


def test_step_tip() -> None:
    assert advisor.step_tip(_series(1000.0, 1600.0)) == "Great momentum! Keep going!"
    assert advisor.step_tip(_series(1000.0, 1400.0)) == "Consistency is power!"
    assert advisor.step_tip(_series(2000.0, 1000.0)) == "Stay active daily!"
    assert advisor.step_tip(_series(1000.0)) is None


def test_weight_tip() -> None:
    assert advisor.weight_tip(_series(70.0, 71.0)) == "Building strength!"
    assert advisor.weight_tip(_series(70.0, 69.0)) == "Fitness progress!"
    assert advisor.weight_tip(_series(70.0, 70.0)) == "Stable and steady!"
    assert advisor.weight_tip(()) is None


def test_heart_rate_tip() -> None:
    assert advisor.heart_rate_tip(_series(100.0, 110.0)) == (
        "High HR - Consider relaxation"
    )
    assert advisor.heart_rate_tip(_series(55.0, 58.0)) == "Excellent cardio health"
    assert advisor.heart_rate_tip(_series(72.0)) == "Normal range"
    assert advisor.heart_rate_tip(()) is None


@pytest.mark.parametrize(
    ("mean", "expected"),
    [
        (101.0, "Relax and rest more!"),
        (100.0, "Stay hydrated!"),
        (86.0, "Stay hydrated!"),
        (71.0, "Great! Add light cardio!"),
        (70.0, "Excellent cardiovascular health!"),
    ],
)
def test_health_advice_tip(mean: float, expected: str) -> None:
    assert advisor.health_advice_tip(_series(mean)) == expected


def test_health_advice_tip_without_data() -> None:
    assert advisor.health_advice_tip(()) is None


def test_sleep_tip() -> None:
    assert advisor.sleep_tip(_series(8.0, 9.0)) == "Great sleep habits!"
    assert advisor.sleep_tip(_series(7.0)) == "Try to get a bit more rest."
    assert advisor.sleep_tip(_series(5.0, 5.5)) == "Warning: Insufficient sleep!"
    assert advisor.sleep_tip(()) is None


def test_sleep_tip_respects_config_thresholds() -> None:
    config = EngineConfig(sleep_low_hours=7.0, sleep_high_hours=9.0)
    assert advisor.sleep_tip(_series(8.0), config) == "Try to get a bit more rest."


def test_height_stability_tip() -> None:
    assert advisor.height_stability_tip(_series(1.75, 1.755)) == (
        "Stable height over the last month"
    )
    assert advisor.height_stability_tip(_series(1.75, 1.80)) == (
        "Height data fluctuates slightly"
    )
    assert advisor.height_stability_tip(()) is None


def test_heart_rate_goal_progress() -> None:
    assert advisor.heart_rate_goal_progress(125.0) == pytest.approx(80.0)
    assert advisor.heart_rate_goal_progress(80.0) == 100.0
    assert advisor.heart_rate_goal_progress(None) is None
    assert advisor.heart_rate_goal_progress(0.0) is None


def test_daily_directions() -> None:
    assert advisor.daily_directions(_series(70.0, 69.0, 69.0, 71.0)) == (
        Direction.FLAT,
        Direction.DOWN,
        Direction.FLAT,
        Direction.UP,
    )
    assert advisor.daily_directions(()) == ()


def test_latest_change() -> None:
    assert advisor.latest_change(_series(1.75, 1.77)) == Direction.UP
    assert advisor.latest_change(_series(1.77, 1.75)) == Direction.DOWN
    assert advisor.latest_change(_series(1.75, 1.755)) == Direction.FLAT
    assert advisor.latest_change(_series(1.75)) is None


def test_height_consistency_score() -> None:
    assert advisor.height_consistency_score(_series(1.75, 1.75, 1.75)) == 95
    assert advisor.height_consistency_score(_series(1.75, 1.80)) == 90
    assert advisor.height_consistency_score(()) is None
