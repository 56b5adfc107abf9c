"""Weighted random selection over a population of items."""

from __future__ import annotations

import logging
import math
import random
import threading
from typing import Callable, Generic, Iterable, Iterator, Optional, TypeVar

from .config import RandomizerConfig
from .errors import (
    EmptyPopulationError,
    InvalidCountError,
    InvalidWeightError,
    NegativeWeightError,
    WeightOverflowError,
)
from .telemetry import FailureReason, RandomizerEvent, TelemetryPublisher
from .types import RandomizedItem
from .utils import total_weight, weighted_pick

T = TypeVar("T")

LOGGER = logging.getLogger(__name__)


class Randomizer(Generic[T]):
    """Draw items with probability proportional to their weight.

    Each draw maps a uniform number from ``random_fn`` onto the cumulative
    weights of the population and returns the first item whose running sum
    reaches it. Draws are independent and made with replacement; selected
    items are the caller's own objects, never copies.

    The total weight is cached. It is recomputed lazily on the first draw
    after the population changes through :meth:`set_items` or
    :meth:`refresh`. Mutating an item's weight without calling
    :meth:`refresh` leaves the cache stale.
    """

    def __init__(
        self,
        items: Iterable[RandomizedItem[T]] = (),
        *,
        config: Optional[RandomizerConfig] = None,
        random_fn: Callable[[], float] = random.random,
        telemetry: Optional[TelemetryPublisher] = None,
    ) -> None:
        self.config = config or RandomizerConfig()
        self._random = random_fn
        self._telemetry = telemetry
        self._lock = threading.RLock()
        self._items: tuple[RandomizedItem[T], ...] = ()
        self._total = 0.0
        self._dirty = True
        self._recalculations = 0
        self.set_items(items)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def items(self) -> tuple[RandomizedItem[T], ...]:
        return self._items

    @property
    def is_dirty(self) -> bool:
        return self._dirty

    @property
    def recalculations(self) -> int:
        """How many times the total weight has been recomputed."""

        return self._recalculations

    @property
    def total_weight(self) -> float:
        with self._lock:
            return self._calc_totals()

    def set_items(self, items: Iterable[RandomizedItem[T]]) -> None:
        """Replace the population and mark the cached total dirty.

        Weights are checked before anything is replaced, so a rejected
        population leaves the previous one in place.
        """

        snapshot = tuple(items)
        if self.config.validate_weights:
            self._validate(snapshot)
        with self._lock:
            self._items = snapshot
            self._dirty = True

    def refresh(self) -> None:
        """Re-validate the current population, e.g., after editing weights."""

        self.set_items(self._items)

    def next(self, count: Optional[int] = None) -> list[RandomizedItem[T]]:
        """Draw ``count`` items, defaulting to ``config.default_count``."""

        if count is None:
            count = self.config.default_count
        if isinstance(count, bool) or not isinstance(count, int):
            raise TypeError("count must be an integer")
        if count < 0:
            raise InvalidCountError(count)
        if count == 0:
            return []

        with self._lock:
            items = self._items
            total = self._calc_totals()
            if math.isinf(total):
                self._emit(RandomizerEvent.DRAW_FAILED, reason=FailureReason.WEIGHT_OVERFLOW, total=total)
                raise WeightOverflowError(len(items))
            if not total > 0:
                self._emit(RandomizerEvent.DRAW_FAILED, reason=FailureReason.EMPTY_POPULATION, total=total)
                raise EmptyPopulationError(total, len(items))
            weights = [item.weight for item in items]
            results = [
                weighted_pick(items, weights, self._random() * total)
                for _ in range(count)
            ]

        self._emit(
            RandomizerEvent.DRAW_COMPLETED,
            count=count,
            total=total,
            values=[item.value for item in results],
        )
        return results

    def attach_telemetry(self, telemetry: Optional[TelemetryPublisher]) -> None:
        self._telemetry = telemetry

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[RandomizedItem[T]]:
        return iter(self._items)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _calc_totals(self) -> float:
        if self._dirty:
            self._total = total_weight(item.weight for item in self._items)
            self._dirty = False
            self._recalculations += 1
            LOGGER.debug(
                "Recalculated total weight %r across %d items",
                self._total,
                len(self._items),
            )
            self._emit(RandomizerEvent.TOTALS_RECALCULATED, total=self._total, items=len(self._items))
        return self._total

    @staticmethod
    def _validate(items: tuple[RandomizedItem[T], ...]) -> None:
        running = 0.0
        for index, item in enumerate(items):
            weight = item.weight
            if math.isnan(weight) or math.isinf(weight):
                raise InvalidWeightError(index, weight)
            if weight < 0:
                raise NegativeWeightError(index, weight)
            running += weight
            if math.isinf(running):
                raise WeightOverflowError(index + 1)

    def _emit(self, event: RandomizerEvent, **payload: object) -> None:
        if self._telemetry is None or not self.config.telemetry.enabled:
            return
        self._telemetry.publish(event, **payload)


__all__ = ["Randomizer"]
