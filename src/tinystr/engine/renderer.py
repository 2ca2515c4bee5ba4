"""Render a single value to text."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from tinystr.engine.kinds import display_name_of, is_collection, is_floating, is_text
from tinystr.engine.registry import config_for

NULL_TEXT = "null"


def render(
    value: Any,
    decimal_places: int,
    collection_separator: str,
    *,
    nested: Callable[[Any], str] | None = None,
) -> str:
    """Convert *value* to text.

    Checked in order: None, text, collections, floating point numbers,
    objects with a render config (handed to *nested*), values with a display
    name, then ``str()``. A collection whose type has a render config is
    still rendered as a collection.
    """
    if value is None:
        return NULL_TEXT
    if is_text(value):
        return value
    if is_collection(value):
        return _render_collection(value, decimal_places, collection_separator, nested)
    if is_floating(value):
        return format(value, f".{decimal_places}f")
    if config_for(type(value)) is not None:
        if nested is None:
            from tinystr.engine.stringifier import stringify

            nested = stringify
        return nested(value)
    name = display_name_of(value)
    if name is not None:
        return name
    return str(value)


def _render_collection(
    items: Any,
    decimal_places: int,
    separator: str,
    nested: Callable[[Any], str] | None,
) -> str:
    def one(item: Any) -> str:
        return render(item, decimal_places, separator, nested=nested)

    if isinstance(items, Mapping):
        parts = [f"{one(k)}: {one(v)}" for k, v in items.items()]
    else:
        parts = [one(item) for item in items]

    joined = separator.join(parts)
    if "\n" in separator:
        # Start multi-line collections on a fresh line after the key
        return separator + joined
    return joined
