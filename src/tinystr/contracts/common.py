"""Library exceptions."""

from __future__ import annotations


class StringifyError(Exception):
    """Base class for all tinystr errors."""


class CycleDetectedError(StringifyError):
    """Raised when an object is reached again while it is still being rendered."""

    def __init__(self, type_name: str, depth: int) -> None:
        self.type_name = type_name
        self.depth = depth
        super().__init__(f"Cycle detected while rendering '{type_name}' at depth {depth}")


class ConfigLoadError(StringifyError):
    """Raised when a render configuration file cannot be read or parsed."""
