"""Pydantic configuration models and library errors."""

from tinystr.contracts.common import (
    ConfigLoadError,
    CycleDetectedError,
    StringifyError,
)
from tinystr.contracts.config import (
    IGNORE,
    FieldConfig,
    Layout,
    NamingFormat,
    RenderConfig,
)

__all__ = [
    "ConfigLoadError",
    "CycleDetectedError",
    "FieldConfig",
    "IGNORE",
    "Layout",
    "NamingFormat",
    "RenderConfig",
    "StringifyError",
]
