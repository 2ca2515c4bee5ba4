"""Value-kind classifiers used by the renderer."""

from __future__ import annotations

from collections.abc import Collection
from decimal import Decimal
from enum import Enum
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DisplayNamed(Protocol):
    """A value that carries its own human-readable label."""

    @property
    def display_name(self) -> str: ...


def is_text(value: Any) -> bool:
    return isinstance(value, str)


def is_collection(value: Any) -> bool:
    """Sized, iterable containers other than text and raw bytes.

    Iterators and generators are not collections; rendering them would
    consume the caller's data.
    """
    return isinstance(value, Collection) and not isinstance(value, (str, bytes, bytearray))


def is_floating(value: Any) -> bool:
    return isinstance(value, (float, Decimal))


def display_name_of(value: Any) -> str | None:
    """Return the canonical display name of *value*, or None if it has none."""
    if isinstance(value, DisplayNamed):
        return str(value.display_name)
    if isinstance(value, Enum):
        return value.name
    return None
