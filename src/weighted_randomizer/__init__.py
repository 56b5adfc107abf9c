"""Public package interface for weighted_randomizer."""

from .config import RandomizerConfig, TelemetryConfig
from .errors import (
    EmptyPopulationError,
    InvalidCountError,
    InvalidWeightError,
    ItemFileError,
    NegativeWeightError,
    RandomizerError,
    WeightOverflowError,
)
from .item_loader import items_from_mapping, load_items
from .randomizer import Randomizer
from .telemetry import (
    DrawTallySink,
    FailureReason,
    InMemoryTelemetrySink,
    LoggingTelemetrySink,
    RandomizerEvent,
    TelemetryEvent,
    TelemetryPublisher,
)
from .types import Item, ItemRecord, ItemWithProps, RandomizedItem, has_props

__all__ = [
    "DrawTallySink",
    "EmptyPopulationError",
    "FailureReason",
    "InMemoryTelemetrySink",
    "InvalidCountError",
    "InvalidWeightError",
    "Item",
    "ItemFileError",
    "ItemRecord",
    "ItemWithProps",
    "LoggingTelemetrySink",
    "NegativeWeightError",
    "RandomizedItem",
    "RandomizerEvent",
    "Randomizer",
    "RandomizerConfig",
    "RandomizerError",
    "TelemetryConfig",
    "TelemetryEvent",
    "TelemetryPublisher",
    "WeightOverflowError",
    "has_props",
    "items_from_mapping",
    "load_items",
]
