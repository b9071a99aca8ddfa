from __future__ import annotations

import pytest
from dateutil import tz

from health_engine.config import EngineConfig, default_policy
from health_engine.errors import ConfigError
from health_engine.model import AggregationPolicy, Metric


def test_defaults() -> None:
    config = EngineConfig()
    assert config.window_days == 28
    assert config.step_delta_threshold == 500.0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"window_days": 0},
        {"heart_rate_low": 120.0, "heart_rate_high": 100.0},
        {"sleep_low_hours": 9.0, "sleep_high_hours": 8.0},
    ],
)
def test_invalid_config_raises(kwargs: dict[str, float]) -> None:
    with pytest.raises(ConfigError):
        EngineConfig(**kwargs)  # type: ignore[arg-type]


def test_tzinfo_named_and_local() -> None:
    assert EngineConfig(timezone="UTC").tzinfo() == tz.gettz("UTC")
    assert EngineConfig().tzinfo() is not None


def test_tzinfo_unknown_raises() -> None:
    with pytest.raises(ConfigError, match="Unknown timezone"):
        EngineConfig(timezone="Mars/Olympus_Mons").tzinfo()


def test_default_policy() -> None:
    assert default_policy(Metric.STEPS) == AggregationPolicy.SUM
    assert default_policy(Metric.HEART_RATE) == AggregationPolicy.MEAN
    assert default_policy(Metric.WEIGHT) == AggregationPolicy.LATEST
