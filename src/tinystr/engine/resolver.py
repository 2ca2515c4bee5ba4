"""Effective settings per field: field override > type setting > defaults."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from tinystr.contracts.config import FieldConfig, NamingFormat, RenderConfig
from tinystr.engine.registry import FieldDescriptor
from tinystr.text.naming import convert

DEFAULT_CONFIG = RenderConfig()

# FieldConfig setting -> RenderConfig setting it overrides
OVERRIDABLE = {
    "template": "field_template",
    "collection_separator": "collection_separator",
    "decimal_places": "decimal_places",
    "naming_format": "naming_format",
}


class ResolvedField(BaseModel):
    """Settings a single field is rendered with."""

    name: str
    template: str
    collection_separator: str
    decimal_places: int
    naming_format: NamingFormat


def merge_config(defaults: RenderConfig, type_config: RenderConfig | None) -> RenderConfig:
    """Overlay the settings *type_config* was built with onto *defaults*."""
    if type_config is None:
        return defaults
    explicit = {name: getattr(type_config, name) for name in type_config.model_fields_set}
    return defaults.model_copy(update=explicit)


def resolve(type_config: RenderConfig, field_config: FieldConfig | None, setting: str) -> Any:
    if setting not in OVERRIDABLE:
        raise KeyError(f"Not an overridable setting: '{setting}'")
    if field_config is not None:
        value = getattr(field_config, setting)
        if value is not None:
            return value
    return getattr(type_config, OVERRIDABLE[setting])


def resolve_field(type_config: RenderConfig, descriptor: FieldDescriptor) -> ResolvedField | None:
    """Resolve every setting for *descriptor*, or None if the field is ignored."""
    field_config = descriptor.config
    if field_config is not None and field_config.ignored:
        return None

    settings = {s: resolve(type_config, field_config, s) for s in OVERRIDABLE}
    return ResolvedField(name=convert(descriptor.name, settings["naming_format"]), **settings)
