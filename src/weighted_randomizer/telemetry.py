"""Telemetry for randomizer cache refreshes and draws."""

from __future__ import annotations

import logging
import random
import time
from collections import Counter
from enum import Enum
from typing import Callable, Hashable, List, Protocol

from pydantic import BaseModel, Field

from .config import TelemetryConfig

LOGGER = logging.getLogger(__name__)


class RandomizerEvent(str, Enum):
    """Observations a randomizer reports."""

    TOTALS_RECALCULATED = "totals.recalculated"
    DRAW_COMPLETED = "draw.completed"
    DRAW_FAILED = "draw.failed"


class FailureReason(str, Enum):
    """Why a draw produced no items."""

    EMPTY_POPULATION = "empty_population"
    WEIGHT_OVERFLOW = "weight_overflow"


class TelemetryEvent(BaseModel):
    """A single observation emitted by a randomizer.

    ``payload`` depends on ``event``:

    * ``totals.recalculated``: ``total`` and ``items`` (population size).
    * ``draw.completed``: ``count``, ``total`` and ``values`` drawn, in order.
    * ``draw.failed``: ``reason`` (a :class:`FailureReason`) and ``total``.
    """

    event: RandomizerEvent
    payload: dict[str, object] = Field(default_factory=dict)
    timestamp: float = Field(default_factory=time.time)


class TelemetrySink(Protocol):
    """Sink that handles telemetry events."""

    def handle(self, event: TelemetryEvent) -> None:  # pragma: no cover - protocol
        ...


class TelemetryPublisher:
    """Forward randomizer events to sinks, sampled by ``config.sample_rate``."""

    def __init__(
        self,
        config: TelemetryConfig,
        *,
        random_fn: Callable[[], float] = random.random,
    ) -> None:
        self.config = config
        self._random = random_fn
        self._sinks: List[TelemetrySink] = []

    def subscribe(self, sink: TelemetrySink) -> None:
        self._sinks.append(sink)

    def unsubscribe(self, sink: TelemetrySink) -> None:
        if sink in self._sinks:
            self._sinks.remove(sink)

    def publish(self, event: RandomizerEvent, **payload: object) -> None:
        if not self.config.enabled:
            return
        if self._random() > self.config.sample_rate:
            return
        message = TelemetryEvent(event=event, payload=payload)
        for sink in list(self._sinks):
            try:
                sink.handle(message)
            except Exception:
                LOGGER.exception("Telemetry sink %s failed on %s", sink, event.value)


class LoggingTelemetrySink:
    """Log randomizer events; failed draws are logged at WARNING."""

    def __init__(self, level: int = logging.DEBUG) -> None:
        self.level = level

    def handle(self, event: TelemetryEvent) -> None:
        payload = event.payload
        if event.event is RandomizerEvent.DRAW_FAILED:
            LOGGER.warning("Draw failed (%s) with total weight %r", payload.get("reason"), payload.get("total"))
        elif event.event is RandomizerEvent.DRAW_COMPLETED:
            LOGGER.log(self.level, "Drew %s items from total weight %r", payload.get("count"), payload.get("total"))
        else:
            LOGGER.log(self.level, "Total weight %r across %s items", payload.get("total"), payload.get("items"))


class InMemoryTelemetrySink:
    """Collects telemetry events in memory for diagnostics or testing."""

    def __init__(self) -> None:
        self.events: list[TelemetryEvent] = []

    def handle(self, event: TelemetryEvent) -> None:
        self.events.append(event)

    def names(self) -> list[str]:
        return [event.event.value for event in self.events]


class DrawTallySink:
    """Count how often each value has been drawn.

    Values must be hashable. Useful for checking that observed frequencies
    track the configured weights.
    """

    def __init__(self) -> None:
        self.counts: Counter[Hashable] = Counter()
        self.draws = 0
        self.failures = 0

    def handle(self, event: TelemetryEvent) -> None:
        if event.event is RandomizerEvent.DRAW_COMPLETED:
            values = event.payload.get("values") or []
            self.counts.update(values)
            self.draws += len(values)
        elif event.event is RandomizerEvent.DRAW_FAILED:
            self.failures += 1

    def frequencies(self) -> dict[Hashable, float]:
        if not self.draws:
            return {}
        return {value: count / self.draws for value, count in self.counts.items()}


__all__ = [
    "DrawTallySink",
    "FailureReason",
    "InMemoryTelemetrySink",
    "LoggingTelemetrySink",
    "RandomizerEvent",
    "TelemetryEvent",
    "TelemetryPublisher",
    "TelemetrySink",
]
