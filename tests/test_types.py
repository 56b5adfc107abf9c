import pytest
from pydantic import TypeAdapter, ValidationError

from weighted_randomizer.types import Item, ItemRecord, ItemWithProps, has_props


def test_item_defaults_weight_to_one():
    item = Item("Cat")

    assert item.value == "Cat"
    assert item.weight == 1.0
    assert not has_props(item)


def test_item_accepts_keyword_construction():
    item = Item(value=3, weight=0.5)

    assert item.value == 3
    assert item.weight == 0.5


def test_item_requires_value():
    with pytest.raises(ValidationError):
        Item()


@pytest.mark.parametrize("weight", [-1.0, float("nan"), float("inf")])
def test_item_rejects_invalid_weight(weight):
    with pytest.raises(ValidationError):
        Item("bad", weight)


def test_item_weight_assignment_is_validated():
    item = Item("Dog", 2.5)

    item.weight = 0.0
    assert item.weight == 0.0

    with pytest.raises(ValidationError):
        item.weight = -2.0
    assert item.weight == 0.0


def test_item_with_props_defaults_to_empty_mapping():
    first = ItemWithProps("Zebra", 4.3)
    second = ItemWithProps("Horse")

    assert first.props == {}
    assert has_props(first)
    first.props["stripes"] = 5
    assert second.props == {}


def test_item_with_props_keeps_mapping():
    item = ItemWithProps("Zebra", 4.3, {"stripes": 5, "hooves": 4})

    assert item.value == "Zebra"
    assert item.weight == 4.3
    assert item.props == {"stripes": 5, "hooves": 4}


def test_item_record_discriminates_on_kind():
    adapter = TypeAdapter(ItemRecord)

    plain = adapter.validate_python({"kind": "item", "value": "Cat", "weight": 1.0})
    extended = adapter.validate_python(
        {"kind": "item_with_props", "value": "Zebra", "props": {"stripes": 5}}
    )

    assert isinstance(plain, Item)
    assert not isinstance(plain, ItemWithProps)
    assert isinstance(extended, ItemWithProps)
    assert extended.props == {"stripes": 5}


def test_item_dump_round_trips_through_record():
    original = ItemWithProps("Zebra", 4.3, {"stripes": 5, "hooves": 4})

    restored = TypeAdapter(ItemRecord).validate_python(original.model_dump())

    assert restored == original


def test_item_with_props_keeps_caller_mapping():
    props = {"stripes": 5}

    item = ItemWithProps("Zebra", 4.3, props)

    assert item.props is props


def test_item_value_is_not_coerced():
    assert Item[int]("3").value == "3"
    assert Item(value=[1, 2]).value == [1, 2]
