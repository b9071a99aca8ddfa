from __future__ import annotations

from datetime import date, timedelta

from health_engine.model import DailyPoint, Weekday
from health_engine.weekday import recent_days, weekday_averages, weekday_label


def _days(start: date, values: list[float]) -> tuple[DailyPoint, ...]:
    return tuple(
        DailyPoint(day=start + timedelta(days=i), value=v) for i, v in enumerate(values)
    )


def test_weekday_averages_empty() -> None:
    assert weekday_averages(()) == ()


def test_weekday_averages_canonical_order_sunday_first() -> None:
    # 2025-01-01 is a Wednesday.
    series = _days(date(2025, 1, 1), [float((i + 1) * 100) for i in range(14)])
    buckets = weekday_averages(series)
    assert [b.weekday for b in buckets] == [
        Weekday.SUNDAY,
        Weekday.MONDAY,
        Weekday.TUESDAY,
        Weekday.WEDNESDAY,
        Weekday.THURSDAY,
        Weekday.FRIDAY,
        Weekday.SATURDAY,
    ]
    # Sundays: Jan 5 (500) and Jan 12 (1200).
    assert buckets[0].mean_value == 850.0
    assert buckets[0].count == 2


def test_weekday_averages_omits_missing_weekdays() -> None:
    series = (
        DailyPoint(date(2025, 1, 8), 300.0),  # Wednesday
        DailyPoint(date(2025, 1, 6), 100.0),  # Monday
        DailyPoint(date(2025, 1, 5), 50.0),  # Sunday
    )
    buckets = weekday_averages(sorted(series, key=lambda p: p.day))
    assert [b.weekday for b in buckets] == [
        Weekday.SUNDAY,
        Weekday.MONDAY,
        Weekday.WEDNESDAY,
    ]
    assert all(b.mean_value != 0 for b in buckets)


def test_weekday_averages_limits_to_recent_window() -> None:
    series = (
        DailyPoint(date(2025, 1, 1), 9999.0),
        DailyPoint(date(2025, 2, 10), 4000.0),  # Monday
    )
    buckets = weekday_averages(series, window_days=28)
    assert len(buckets) == 1
    assert buckets[0].weekday == Weekday.MONDAY
    assert buckets[0].mean_value == 4000.0


def test_weekday_averages_is_stable_across_calls() -> None:
    series = _days(date(2025, 3, 1), [float(i % 5) + 1 for i in range(40)])
    assert weekday_averages(series) == weekday_averages(series)


def test_recent_days_window_boundary() -> None:
    series = _days(date(2025, 1, 1), [1.0] * 30)
    df = recent_days(series, 28)
    assert len(df) == 28
    assert min(df["date"]) == date(2025, 1, 3)


def test_weekday_label() -> None:
    assert weekday_label(Weekday.SUNDAY) == "Sunday"
    assert weekday_label(Weekday.WEDNESDAY, short=True) == "Wed"
