"""Configuración del motor (ventanas, umbrales y zona horaria)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo

from dateutil import tz

from health_engine.errors import ConfigError
from health_engine.model import AggregationPolicy, Metric

_DEFAULT_POLICIES: dict[Metric, AggregationPolicy] = {
    Metric.STEPS: AggregationPolicy.SUM,
    Metric.SLEEP: AggregationPolicy.SUM,
    Metric.HEART_RATE: AggregationPolicy.MEAN,
    Metric.WEIGHT: AggregationPolicy.LATEST,
    Metric.HEIGHT: AggregationPolicy.LATEST,
}


@dataclass(frozen=True)
class EngineConfig:
    """Windows and thresholds used by the dashboard computations."""

    window_days: int = 28
    step_delta_threshold: float = 500.0
    weight_delta_threshold: float = 0.0
    heart_rate_low: float = 60.0
    heart_rate_high: float = 100.0
    heart_rate_goal: float = 100.0
    sleep_low_hours: float = 6.0
    sleep_high_hours: float = 8.0
    height_tolerance_m: float = 0.01
    timezone: str | None = None

    def __post_init__(self) -> None:
        if self.window_days <= 0:
            raise ConfigError(f"window_days must be positive: {self.window_days}")
        if self.heart_rate_low > self.heart_rate_high:
            raise ConfigError("heart_rate_low must not exceed heart_rate_high")
        if self.sleep_low_hours > self.sleep_high_hours:
            raise ConfigError("sleep_low_hours must not exceed sleep_high_hours")

    def tzinfo(self) -> tzinfo:
        """Return the calendar timezone (local when not configured).

        Raises:
            ConfigError: If the timezone name is unknown.
        """
        if not self.timezone:
            return tz.tzlocal()
        zone = tz.gettz(self.timezone)
        if zone is None:
            raise ConfigError(f"Unknown timezone: {self.timezone}")
        return zone


def default_policy(metric: Metric) -> AggregationPolicy:
    """Per-day aggregation used for a metric unless the caller overrides it."""
    return _DEFAULT_POLICIES[metric]
