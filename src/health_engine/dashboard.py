"""Armado del resumen del dashboard a partir de muestras ya cargadas."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from health_engine import advisor
from health_engine.aggregate import Series, aggregate, window_stats
from health_engine.config import EngineConfig, default_policy
from health_engine.model import (
    AggregationPolicy,
    AngularSlice,
    BiometricProfile,
    Direction,
    Metric,
    NutritionPlan,
    Sample,
    WeekdayBucket,
    WeightAdjustment,
    WindowStats,
)
from health_engine.nutrition import (
    bmi,
    healthy_weight_range,
    plan_nutrition,
    recommended_adjustment,
)
from health_engine.partition import partition
from health_engine.weekday import weekday_averages

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MetricSummary:
    """Series plus rolling stats and tip for one metric."""

    metric: Metric
    series: Series
    stats: WindowStats
    tip: str | None = None
    change: Direction | None = None


@dataclass(frozen=True)
class NutritionSummary:
    profile: BiometricProfile
    plan: NutritionPlan
    bmi: float
    healthy_range: tuple[float, float]
    adjustment: WeightAdjustment


@dataclass(frozen=True)
class DashboardReport:
    """Immutable snapshot of everything the dashboard displays."""

    metrics: dict[Metric, MetricSummary]
    weekday_steps: tuple[WeekdayBucket, ...]
    weekday_slices: tuple[AngularSlice[WeekdayBucket], ...]
    health_advice: str | None = None
    heart_rate_progress: float | None = None
    height_consistency: int | None = None
    weight_directions: tuple[Direction, ...] = ()
    nutrition: NutritionSummary | None = None


_TIPS = {
    Metric.STEPS: advisor.step_tip,
    Metric.WEIGHT: advisor.weight_tip,
    Metric.HEART_RATE: advisor.heart_rate_tip,
    Metric.SLEEP: advisor.sleep_tip,
    Metric.HEIGHT: advisor.height_stability_tip,
}


def summarize_metric(
    metric: Metric,
    samples: Sequence[Sample],
    config: EngineConfig,
    policy: AggregationPolicy | None = None,
) -> MetricSummary:
    series = aggregate(samples, policy or default_policy(metric), config.tzinfo())
    return MetricSummary(
        metric=metric,
        series=series,
        stats=window_stats(series, config.window_days),
        tip=_TIPS[metric](series, config),
        change=advisor.latest_change(
            series, config.height_tolerance_m if metric is Metric.HEIGHT else 0.0
        ),
    )


def summarize_nutrition(profile: BiometricProfile) -> NutritionSummary:
    return NutritionSummary(
        profile=profile,
        plan=plan_nutrition(profile),
        bmi=bmi(profile.weight_kg, profile.height_cm),
        healthy_range=healthy_weight_range(profile.height_cm),
        adjustment=recommended_adjustment(profile.weight_kg, profile.height_cm),
    )


def build_dashboard(
    samples: Mapping[Metric, Sequence[Sample]],
    config: EngineConfig = EngineConfig(),
    profile: BiometricProfile | None = None,
    policies: Mapping[Metric, AggregationPolicy] | None = None,
) -> DashboardReport:
    """Compute the dashboard snapshot from raw samples per metric.

    Args:
        samples: Raw samples keyed by metric; missing metrics count as empty.
        config: Windows, thresholds and timezone.
        profile: Biometrics for the nutrition plan, if the user filled them.
        policies: Per-metric aggregation overrides.

    Returns:
        Dashboard snapshot. Inputs are not modified.
    """
    policies = policies or {}
    metrics = {
        metric: summarize_metric(
            metric, samples.get(metric, ()), config, policies.get(metric)
        )
        for metric in Metric
    }
    steps = metrics[Metric.STEPS].series
    weekday_steps = weekday_averages(steps, config.window_days)
    heart = metrics[Metric.HEART_RATE].stats

    report = DashboardReport(
        metrics=metrics,
        weekday_steps=weekday_steps,
        weekday_slices=partition(weekday_steps, weight=lambda b: b.mean_value),
        health_advice=advisor.health_advice_tip(
            metrics[Metric.HEART_RATE].series, config
        ),
        heart_rate_progress=advisor.heart_rate_goal_progress(
            heart.mean if heart.has_data else None, config.heart_rate_goal
        ),
        height_consistency=advisor.height_consistency_score(
            metrics[Metric.HEIGHT].series, config.window_days
        ),
        weight_directions=advisor.daily_directions(metrics[Metric.WEIGHT].series),
        nutrition=summarize_nutrition(profile) if profile is not None else None,
    )
    logger.info(
        "Dashboard built: %s",
        ", ".join(f"{m.value}={len(s.series)}d" for m, s in metrics.items()),
    )
    return report
