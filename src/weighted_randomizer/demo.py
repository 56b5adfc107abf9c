"""Small driver showing a randomizer drawing from a fixed population."""

from __future__ import annotations

import argparse
import logging
import random
from typing import Iterable, Iterator, Optional, Sequence

from .randomizer import Randomizer
from .types import Item, ItemWithProps, RandomizedItem, has_props


def example_items() -> list[Item[str]]:
    return [
        Item("Cat", 1.0),
        Item("Dog", 2.5),
        Item("Salamander", 0.5),
        ItemWithProps("Zebra", 4.3, {"stripes": 5, "hooves": 4}),
    ]


def render(results: Iterable[RandomizedItem[str]]) -> Iterator[str]:
    """Yield one line per value, followed by indented properties if any."""

    for item in results:
        yield f"{item.value}"
        if has_props(item):
            for key, value in item.props.items():
                yield f"  {key}: {value}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Draw weighted random animals.")
    parser.add_argument("-n", "--count", type=int, default=5, help="number of draws")
    parser.add_argument("--seed", type=int, default=None, help="seed for repeatable draws")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    random_fn = random.Random(args.seed).random if args.seed is not None else random.random
    randomizer = Randomizer(example_items(), random_fn=random_fn)

    for line in render(randomizer.next(args.count)):
        print(line)
    return 0


__all__ = ["example_items", "main", "render"]
