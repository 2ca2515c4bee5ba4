"""Type registration and field discovery.

A type opts in to rendering by carrying a ``RenderConfig`` in its
``__render_config__`` attribute, either set in the class body or attached
with the :func:`renderable` decorator. Field overrides come from, in
increasing priority:

- ``typing.Annotated[T, FieldConfig(...)]`` on dataclasses and plain classes
- dataclass ``field(metadata={"tinystr": FieldConfig(...)})``
- the ``fields=`` table passed to :func:`renderable`

Nothing here is cached: every lookup reads the live class attributes.
"""

from __future__ import annotations

import dataclasses
import types
import typing
from collections.abc import Callable, Mapping
from enum import Enum
from operator import attrgetter
from typing import Any

from pydantic import BaseModel, ConfigDict

from tinystr.contracts.config import FieldConfig, RenderConfig
from tinystr.engine.kinds import is_collection, is_text

RENDER_CONFIG_ATTR = "__render_config__"
RENDER_FIELDS_ATTR = "__render_fields__"
FIELD_METADATA_KEY = "tinystr"

_NOT_RECORDS = (
    Enum,
    type,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.ModuleType,
)


class FieldDescriptor(BaseModel):
    """One renderable field of an object: its name, how to read it, its overrides."""

    model_config = ConfigDict(frozen=True)

    name: str
    accessor: Callable[[Any], Any]
    config: FieldConfig | None = None


def renderable(
    config: RenderConfig | None = None,
    *,
    fields: Mapping[str, FieldConfig] | None = None,
    **settings: Any,
) -> Callable[[type], type]:
    """Class decorator attaching a render configuration.

    Pass either a ready ``RenderConfig`` or its settings as keywords::

        @renderable(decimal_places=2, field_template="{k} => {v}",
                    fields={"secret": IGNORE})
        @dataclass
        class Animal:
            ...
    """
    if config is not None and settings:
        raise TypeError("renderable() takes a RenderConfig or keyword settings, not both")
    resolved = config if config is not None else RenderConfig(**settings)
    table = dict(fields or {})

    def decorate(cls: type) -> type:
        setattr(cls, RENDER_CONFIG_ATTR, resolved)
        setattr(cls, RENDER_FIELDS_ATTR, table)
        return cls

    return decorate


def config_for(tp: type) -> RenderConfig | None:
    """Return the RenderConfig declared on *tp* (or inherited), else None."""
    config = getattr(tp, RENDER_CONFIG_ATTR, None)
    return config if isinstance(config, RenderConfig) else None


def field_configs(tp: type) -> dict[str, FieldConfig]:
    """Collect field-level overrides declared on *tp* and its bases."""
    configs: dict[str, FieldConfig] = {}
    if not issubclass(tp, BaseModel):
        configs.update(_annotated_configs(tp))
    if dataclasses.is_dataclass(tp):
        for f in dataclasses.fields(tp):
            meta = f.metadata.get(FIELD_METADATA_KEY)
            if isinstance(meta, FieldConfig):
                configs[f.name] = meta
    for cls in reversed(tp.__mro__):
        table = cls.__dict__.get(RENDER_FIELDS_ATTR)
        if table:
            configs.update(table)
    return configs


def describe_fields(obj: Any) -> list[FieldDescriptor] | None:
    """Build the field table for *obj* in declaration order.

    Returns None for values that are not records (text, collections, enums,
    builtin scalars, classes, functions), which are rendered as plain values.
    """
    if obj is None or isinstance(obj, _NOT_RECORDS) or is_text(obj) or is_collection(obj):
        return None

    tp = type(obj)
    if isinstance(obj, BaseModel):
        names = list(tp.model_fields) + list(tp.model_computed_fields)
    elif dataclasses.is_dataclass(obj):
        # init=False fields may never have been assigned
        names = [f.name for f in dataclasses.fields(obj) if hasattr(obj, f.name)] + _property_names(tp)
    else:
        slots = [n for n in _slot_names(tp) if hasattr(obj, n)]
        attrs = list(vars(obj)) if hasattr(obj, "__dict__") else []
        if not slots and not hasattr(obj, "__dict__"):
            return None
        names = slots + attrs + _property_names(tp)

    configs = field_configs(tp)
    descriptors: list[FieldDescriptor] = []
    seen: set[str] = set()
    for name in names:
        if name.startswith("_") or name in seen:
            continue
        seen.add(name)
        descriptors.append(
            FieldDescriptor(name=name, accessor=attrgetter(name), config=configs.get(name))
        )
    return descriptors


def _annotated_configs(tp: type) -> dict[str, FieldConfig]:
    try:
        hints = typing.get_type_hints(tp, include_extras=True)
    except (NameError, TypeError):
        # Forward references that cannot be resolved carry no metadata we can read
        return {}
    configs: dict[str, FieldConfig] = {}
    for name, hint in hints.items():
        if typing.get_origin(hint) is not typing.Annotated:
            continue
        for meta in hint.__metadata__:
            if isinstance(meta, FieldConfig):
                configs[name] = meta
    return configs


def _slot_names(tp: type) -> list[str]:
    names: list[str] = []
    for cls in reversed(tp.__mro__):
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(s for s in slots if s not in ("__dict__", "__weakref__"))
    return names


def _property_names(tp: type) -> list[str]:
    names: list[str] = []
    for cls in reversed(tp.__mro__):
        if cls is object:
            continue
        names.extend(
            name for name, attr in cls.__dict__.items()
            if isinstance(attr, property) and attr.fget is not None
        )
    return names
