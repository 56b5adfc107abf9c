"""Utility helpers for summing weights and walking cumulative intervals."""

from __future__ import annotations

from typing import Any, Iterable, Sequence, TypeVar

T = TypeVar("T")

_MISSING: Any = object()


def total_weight(weights: Iterable[float]) -> float:
    """Sum weights in order.

    Accumulated exactly as :func:`weighted_pick` accumulates, so the final
    running sum of a walk equals this total.
    """

    total = 0.0
    for weight in weights:
        total += weight
    return total


def weighted_pick(items: Sequence[T], weights: Sequence[float], threshold: float) -> T:
    """Return the first item whose cumulative weight reaches ``threshold``.

    Zero-weight items are never returned, even for a threshold of zero. When
    rounding leaves the threshold past the final cumulative weight the last
    weighted item is returned.
    """

    if not items:
        raise ValueError("items must be non-empty")
    if len(weights) != len(items):
        raise ValueError("weights length must match items")
    cumulative = 0.0
    last = _MISSING
    for item, weight in zip(items, weights):
        if weight == 0:
            continue
        cumulative += weight
        if cumulative >= threshold:
            return item
        last = item
    if last is _MISSING:
        raise ValueError("no item carries a non-zero weight")
    return last


__all__ = ["total_weight", "weighted_pick"]
