"""Common data types used across the weighted randomizer package."""

from __future__ import annotations

from typing import Annotated, Any, Generic, Literal, Protocol, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, SkipValidation

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")
T_co = TypeVar("T_co", covariant=True)

ITEM_KIND = "item"
ITEM_WITH_PROPS_KIND = "item_with_props"

# Marks positional constructor arguments the caller left out.
_UNSET: Any = object()


class RandomizedItem(Protocol[T_co]):
    """Anything carrying a value and a weight can be drawn by a randomizer."""

    @property
    def value(self) -> T_co:  # pragma: no cover - protocol definition
        ...

    @property
    def weight(self) -> float:  # pragma: no cover - protocol definition
        ...


class Item(BaseModel, Generic[T]):
    """A value paired with its relative selection weight.

    The weight is relative to the other items drawn alongside it: a larger
    weight makes the item proportionally more likely, zero makes it
    unreachable. ``value`` is stored as given, without coercion.
    """

    model_config = ConfigDict(validate_assignment=True)

    kind: Literal["item"] = ITEM_KIND
    value: SkipValidation[T]
    weight: float = Field(
        default=1.0,
        ge=0.0,
        allow_inf_nan=False,
        description="Relative likelihood of selection; must be finite and non-negative.",
    )

    def __init__(self, value: Any = _UNSET, weight: Any = _UNSET, **data: Any) -> None:
        if value is not _UNSET:
            data["value"] = value
        if weight is not _UNSET:
            data["weight"] = weight
        super().__init__(**data)


class ItemWithProps(Item[T], Generic[T, K, V]):
    """An item that also carries caller-side metadata.

    The randomizer never reads ``props``. The mapping is stored as given, not
    copied, and returned with the selected item.
    """

    kind: Literal["item_with_props"] = ITEM_WITH_PROPS_KIND
    props: SkipValidation[dict[K, V]] = Field(default_factory=dict)

    def __init__(
        self,
        value: Any = _UNSET,
        weight: Any = _UNSET,
        props: Any = _UNSET,
        **data: Any,
    ) -> None:
        if props is not _UNSET:
            data["props"] = props
        super().__init__(value, weight, **data)


ItemRecord = Annotated[Union[Item, ItemWithProps], Field(discriminator="kind")]


def has_props(item: object) -> bool:
    """Return True when ``item`` is the extended variant carrying ``props``."""

    return getattr(item, "kind", None) == ITEM_WITH_PROPS_KIND


__all__ = [
    "ITEM_KIND",
    "ITEM_WITH_PROPS_KIND",
    "Item",
    "ItemRecord",
    "ItemWithProps",
    "RandomizedItem",
    "has_props",
]
