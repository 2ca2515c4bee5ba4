"""Load default render settings from ``tinystr.yaml``."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from tinystr.contracts.common import ConfigLoadError
from tinystr.contracts.config import NamingFormat, RenderConfig
from tinystr.text.naming import convert

CONFIG_FILENAME = "tinystr.yaml"

_ENUM_SETTINGS = ("layout", "naming_format")


def load_defaults(path: str | Path) -> RenderConfig:
    """Load a RenderConfig from a YAML file.

    Settings may sit at the top level or under a ``defaults:`` key. Enum
    settings accept any spelling of the member name (``multi_line``,
    ``MULTI_LINE``, ``MultiLine``).
    """
    try:
        text = Path(path).read_text(encoding="utf-8-sig")
    except OSError as e:
        raise ConfigLoadError(f"Cannot read render config '{path}': {e}") from e
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML in '{path}': {e}") from e

    if isinstance(data, dict) and "defaults" in data:
        data = data["defaults"] or {}
    if not isinstance(data, dict):
        raise ConfigLoadError(f"Render config '{path}' must be a mapping, got {type(data).__name__}")

    try:
        return RenderConfig.model_validate(_normalize(data))
    except ValidationError as e:
        raise ConfigLoadError(f"Invalid render config '{path}': {e}") from e


def load_defaults_from_dir(directory: str | Path) -> RenderConfig | None:
    """Try to load tinystr.yaml from a directory. Returns None if not found."""
    path = Path(directory) / CONFIG_FILENAME
    if path.exists():
        return load_defaults(path)
    return None


def _normalize(data: dict[str, Any]) -> dict[str, Any]:
    out = dict(data)
    for key in _ENUM_SETTINGS:
        value = out.get(key)
        if isinstance(value, str):
            out[key] = value.lower() if value.isupper() else convert(value, NamingFormat.SNAKE)
    return out
