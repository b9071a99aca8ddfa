"""Partición proporcional de un círculo para gráficos de dona."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from health_engine.model import AngularSlice

T = TypeVar("T")

FULL_CIRCLE = 360.0


def _value_of(item: Any) -> float:
    return float(item.value)


def partition(
    items: Sequence[T],
    weight: Callable[[T], float] | None = None,
) -> tuple[AngularSlice[T], ...]:
    """Split 360 degrees among ``items`` proportionally to their weight.

    Slices keep input order and are contiguous, starting at 0. When the
    total weight is zero every slice has zero span.

    Args:
        items: Weighted items (``.value`` by default).
        weight: Optional accessor for the item weight.

    Returns:
        One slice per item.
    """
    weight = weight or _value_of
    weights = [weight(item) for item in items]
    total = sum(weights)

    current = 0.0
    out: list[AngularSlice[T]] = []
    for item, value in zip(items, weights):
        span = FULL_CIRCLE * value / total if total else 0.0
        out.append(AngularSlice(item=item, start_angle=current, end_angle=current + span))
        current += span
    return tuple(out)
