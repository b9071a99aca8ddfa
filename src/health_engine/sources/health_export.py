"""Lectura de muestras desde una exportación CSV del almacén de salud."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, tzinfo
from pathlib import Path
from typing import Any

import pandas as pd
from dateutil import parser, tz

from health_engine.errors import SourceFormatError
from health_engine.model import Metric, Sample
from health_engine.sources.base import DataSource, SourcePaths

logger = logging.getLogger(__name__)

_TIMESTAMP_PATTERNS = [r"timestamp", r"\bstart", r"\bdate", r"\btime", r"\bfecha"]
_VALUE_PATTERNS = [r"\bvalue\b", r"\bvalor\b", r"\bqty\b", r"\bquantity\b"]


@dataclass(frozen=True)
class HealthExportPaths(SourcePaths):
    """Paths for a health export directory."""

    # root: folder containing steps.csv, weight.csv, heart_rate.csv, ...


class HealthExportSource(DataSource):
    """Health export reader (one CSV per metric)."""

    def __init__(self, paths: SourcePaths, zone: tzinfo | None = None) -> None:
        super().__init__(paths)
        self._zone = zone or tz.tzlocal()

    def validate(self) -> None:
        """Validate that the export directory exists."""
        if not self._paths.root.exists():
            raise FileNotFoundError(str(self._paths.root))

    def metric_file(self, metric: Metric) -> Path | None:
        """Return the CSV for ``metric`` or None when it was not exported."""
        path = self._paths.root / f"{metric.value}.csv"
        return path if path.exists() else None

    def load_samples(self, metric: Metric) -> tuple[Sample, ...]:
        """Parse the metric CSV into typed samples.

        Args:
            metric: Metric to read.

        Returns:
            Samples sorted by timestamp; empty if the file is missing.

        Raises:
            SourceFormatError: If timestamp/value columns are not found.
        """
        path = self.metric_file(metric)
        if path is None:
            logger.info("No export for %s in %s", metric.value, self._paths.root)
            return ()
        df = pd.read_csv(path)
        samples = _frame_to_samples(df, metric, self._zone)
        logger.debug("Loaded %d %s samples from %s", len(samples), metric.value, path)
        return samples

    def load_all(self) -> dict[Metric, tuple[Sample, ...]]:
        return {metric: self.load_samples(metric) for metric in Metric}


def _find_col(columns: list[str], patterns: list[str]) -> str | None:
    for pat in patterns:
        rx = re.compile(pat, re.IGNORECASE)
        for c in columns:
            if rx.search(c):
                return c
    return None


def _frame_to_samples(
    df: pd.DataFrame, metric: Metric, zone: tzinfo
) -> tuple[Sample, ...]:
    if df.empty:
        return ()

    df = df.rename(columns={c: str(c).strip() for c in df.columns})
    cols = list(df.columns)
    ts_col = _find_col(cols, _TIMESTAMP_PATTERNS)
    value_col = _find_col(cols, _VALUE_PATTERNS + [rf"\b{metric.value}"])
    if ts_col is None or value_col is None:
        raise SourceFormatError(
            f"{metric.value}: expected timestamp and value columns, got {cols}"
        )

    timestamps = pd.Series(
        [_parse_timestamp(raw, zone) for raw in df[ts_col]], index=df.index, dtype=object
    )
    values = pd.to_numeric(df[value_col], errors="coerce")
    mask = timestamps.notna() & values.notna()
    skipped = int((~mask).sum())
    if skipped:
        logger.warning("Skipped %d unparseable %s rows", skipped, metric.value)

    out: list[Sample] = []
    for ts, value in zip(timestamps[mask], values[mask]):
        out.append(Sample(timestamp=ts, value=float(value)))
    out.sort(key=lambda s: s.timestamp)
    return tuple(out)


def _parse_timestamp(raw: Any, zone: tzinfo) -> datetime | None:
    """Parse one cell; offsets may change between rows (DST), naive is local."""
    if raw is None or (isinstance(raw, float) and pd.isna(raw)):
        return None
    try:
        dt = parser.parse(str(raw))
    except (ValueError, OverflowError):
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=zone)
    return dt.astimezone(zone)
