"""Promedios por día de la semana sobre una ventana reciente."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import timedelta

import pandas as pd

from health_engine.aggregate import series_to_frame
from health_engine.model import CANONICAL_WEEK, DailyPoint, Weekday, WeekdayBucket

_WEEKDAY_NAMES: dict[Weekday, str] = {
    Weekday.MONDAY: "Monday",
    Weekday.TUESDAY: "Tuesday",
    Weekday.WEDNESDAY: "Wednesday",
    Weekday.THURSDAY: "Thursday",
    Weekday.FRIDAY: "Friday",
    Weekday.SATURDAY: "Saturday",
    Weekday.SUNDAY: "Sunday",
}


def weekday_label(weekday: Weekday, short: bool = False) -> str:
    """Display name of a weekday ("Sunday" or "Sun")."""
    name = _WEEKDAY_NAMES[weekday]
    return name[:3] if short else name


def recent_days(series: Sequence[DailyPoint], window_days: int) -> pd.DataFrame:
    """Rows of the last ``window_days`` calendar days, ending at the newest point."""
    df = series_to_frame(series)
    if df.empty or window_days <= 0:
        return df.iloc[0:0]
    cutoff = max(df["date"]) - timedelta(days=window_days)
    return df.loc[df["date"] > cutoff].reset_index(drop=True)


def weekday_averages(
    series: Sequence[DailyPoint], window_days: int = 28
) -> tuple[WeekdayBucket, ...]:
    """Mean value per weekday over the most recent ``window_days`` days.

    Buckets come in Sunday..Saturday order; weekdays without points in
    the window are left out rather than reported as zero.

    Args:
        series: Daily points, ascending by date.
        window_days: Calendar days counted back from the newest point.

    Returns:
        Weekday buckets in canonical week order.
    """
    df = recent_days(series, window_days)
    if df.empty:
        return ()

    df = df.assign(weekday=pd.to_datetime(df["date"]).dt.weekday)
    grouped = df.groupby("weekday")["value"].agg(["mean", "count"])
    return tuple(
        WeekdayBucket(
            weekday=day,
            mean_value=float(grouped.loc[int(day), "mean"]),
            count=int(grouped.loc[int(day), "count"]),
        )
        for day in CANONICAL_WEEK
        if int(day) in grouped.index
    )
