"""Exceptions raised by the weighted randomizer."""

from __future__ import annotations


class RandomizerError(Exception):
    """Base class for randomizer errors"""


class InvalidCountError(RandomizerError, ValueError):
    """A negative number of draws was requested"""

    def __init__(self, count: int) -> None:
        super().__init__(f"count must be non-negative, got {count}")
        self.count = count


class EmptyPopulationError(RandomizerError, RuntimeError):
    """No item can be selected because the total weight is not positive"""

    def __init__(self, total: float, size: int) -> None:
        if size == 0:
            message = "cannot draw from an empty population"
        else:
            message = f"cannot draw from {size} items with total weight {total!r}"
        super().__init__(message)
        self.total = total
        self.size = size


class NegativeWeightError(RandomizerError, ValueError):
    """An item carries a weight below zero"""

    def __init__(self, index: int, weight: float) -> None:
        super().__init__(f"item {index} has negative weight {weight!r}")
        self.index = index
        self.weight = weight


class InvalidWeightError(RandomizerError, ValueError):
    """An item carries a NaN or infinite weight"""

    def __init__(self, index: int, weight: float) -> None:
        super().__init__(f"item {index} has non-finite weight {weight!r}")
        self.index = index
        self.weight = weight


class WeightOverflowError(RandomizerError, OverflowError):
    """The weights are individually finite but their sum is not"""

    def __init__(self, count: int) -> None:
        super().__init__(f"weights of the first {count} items sum past the float range")
        self.count = count


class ItemFileError(RandomizerError, RuntimeError):
    """An item file could not be turned into a population"""


__all__ = [
    "EmptyPopulationError",
    "InvalidCountError",
    "InvalidWeightError",
    "ItemFileError",
    "NegativeWeightError",
    "RandomizerError",
    "WeightOverflowError",
]
