"""Utilities for loading weighted items from JSON or YAML files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Mapping

from pydantic import TypeAdapter

try:
    import yaml
except ImportError:  # pragma: no cover - optional dependency
    yaml = None

from .errors import ItemFileError
from .types import ITEM_KIND, ITEM_WITH_PROPS_KIND, Item, ItemRecord

_ITEMS_ADAPTER: TypeAdapter[list[Item]] = TypeAdapter(list[ItemRecord])


def load_items(path: str | Path) -> list[Item]:
    """Load items from a JSON or YAML file with a top-level ``items`` list."""

    data = _read_file(path)
    if not isinstance(data, Mapping):
        raise ItemFileError(f"{path}: expected a mapping with an 'items' list")
    entries = data.get("items")
    if entries is None:
        entries = []
    if not isinstance(entries, list):
        raise ItemFileError(f"{path}: 'items' must be a list, got {type(entries).__name__}")
    return items_from_mapping(entries)


def items_from_mapping(entries: Iterable[Mapping[str, Any]]) -> list[Item]:
    """Build items from plain mappings.

    Entries carrying ``props`` become :class:`ItemWithProps` unless an explicit
    ``kind`` says otherwise.
    """

    tagged = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            raise ItemFileError(f"item {index} must be a mapping, got {type(entry).__name__}")
        entry = dict(entry)
        entry.setdefault("kind", ITEM_WITH_PROPS_KIND if "props" in entry else ITEM_KIND)
        tagged.append(entry)
    if not tagged:
        raise ItemFileError("item file contains no items")
    return _ITEMS_ADAPTER.validate_python(tagged)


def _read_file(path: str | Path) -> Any:
    payload = Path(path).read_text(encoding="utf-8")
    suffix = Path(path).suffix.lower()
    if suffix in {".yaml", ".yml"}:
        if yaml is None:
            raise RuntimeError("PyYAML is required for YAML item files")
        try:
            return yaml.safe_load(payload) or {}
        except yaml.YAMLError as exc:
            raise ItemFileError(f"{path}: invalid YAML: {exc}") from exc
    try:
        return json.loads(payload)
    except json.JSONDecodeError as exc:
        raise ItemFileError(f"{path}: invalid JSON: {exc}") from exc


__all__ = ["items_from_mapping", "load_items"]
