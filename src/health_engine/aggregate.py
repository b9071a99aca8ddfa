"""Agregación diaria de muestras y estadísticas de ventana móvil."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from datetime import date, datetime, tzinfo

import pandas as pd
from dateutil import tz

from health_engine.model import AggregationPolicy, DailyPoint, Sample, WindowStats

logger = logging.getLogger(__name__)

_PANDAS_REDUCERS: dict[AggregationPolicy, str] = {
    AggregationPolicy.SUM: "sum",
    AggregationPolicy.LATEST: "last",
    AggregationPolicy.MEAN: "mean",
}

Series = tuple[DailyPoint, ...]


def _localize(ts: datetime, zone: tzinfo) -> datetime:
    """Naive timestamps are taken as already local."""
    if ts.tzinfo is None:
        return ts.replace(tzinfo=zone)
    return ts.astimezone(zone)


def samples_to_frame(
    samples: Sequence[Sample], zone: tzinfo | None = None
) -> pd.DataFrame:
    """Convert samples to a DataFrame (timestamp, date, value) in local time."""
    zone = zone or tz.tzlocal()
    finite = [s for s in samples if math.isfinite(s.value)]
    if len(finite) != len(samples):
        logger.warning("Dropped %d non-finite samples", len(samples) - len(finite))
    localized = sorted(
        ((_localize(s.timestamp, zone), float(s.value)) for s in finite),
        key=lambda pair: pair[0],
    )
    df = pd.DataFrame(
        [{"timestamp": ts, "date": ts.date(), "value": value} for ts, value in localized],
        columns=["timestamp", "date", "value"],
    )
    return df.reset_index(drop=True)


def aggregate(
    samples: Sequence[Sample],
    policy: AggregationPolicy = AggregationPolicy.SUM,
    zone: tzinfo | None = None,
) -> Series:
    """Group samples by calendar day and reduce each day per ``policy``.

    Args:
        samples: Raw observations, in any order.
        policy: Sum for cumulative metrics, latest or mean for the rest.
        zone: Calendar timezone; defaults to the local one.

    Returns:
        Daily points sorted ascending by date, one per day.
    """
    df = samples_to_frame(samples, zone)
    if df.empty:
        return ()

    reduced = df.groupby("date", sort=True)["value"].agg(_PANDAS_REDUCERS[policy])
    series = tuple(
        DailyPoint(day=day, value=float(value)) for day, value in reduced.items()
    )
    logger.debug(
        "Aggregated %d samples into %d days (%s)",
        len(df),
        len(series),
        policy.value,
    )
    return series


def series_to_frame(series: Sequence[DailyPoint]) -> pd.DataFrame:
    """Convert daily points to a DataFrame with date/value columns."""
    return pd.DataFrame(
        [{"date": p.day, "value": p.value} for p in series],
        columns=["date", "value"],
    )


def window(series: Sequence[DailyPoint], n: int) -> Series:
    """Return the last ``n`` points (all of them when the series is shorter)."""
    if n <= 0:
        return ()
    return tuple(series[-n:])


def window_mean(series: Sequence[DailyPoint], n: int) -> float:
    """Mean of the last ``n`` points; 0.0 for an empty window.

    Use :func:`window_stats` to tell an empty window from a real zero.
    """
    values = [p.value for p in window(series, n)]
    if not values:
        return 0.0
    return sum(values) / len(values)


def window_min(series: Sequence[DailyPoint], n: int) -> float | None:
    values = [p.value for p in window(series, n)]
    return min(values) if values else None


def window_max(series: Sequence[DailyPoint], n: int) -> float | None:
    values = [p.value for p in window(series, n)]
    return max(values) if values else None


def window_stats(series: Sequence[DailyPoint], n: int) -> WindowStats:
    """Mean/min/max over the last ``n`` points with an explicit data flag."""
    last = window(series, n)
    return WindowStats(
        count=len(last),
        mean=window_mean(last, len(last)),
        minimum=window_min(last, len(last)),
        maximum=window_max(last, len(last)),
    )


def point_for_day(
    series: Sequence[DailyPoint], selected: date | datetime | None
) -> DailyPoint | None:
    """Look up the point of the selected chart day, if any."""
    if selected is None:
        return None
    day = selected.date() if isinstance(selected, datetime) else selected
    return next((p for p in series if p.day == day), None)
