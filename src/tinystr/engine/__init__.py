"""Rendering engine: registry, resolver, renderer and orchestrator."""

from tinystr.engine.kinds import DisplayNamed
from tinystr.engine.registry import FieldDescriptor, config_for, describe_fields, renderable
from tinystr.engine.renderer import render
from tinystr.engine.resolver import DEFAULT_CONFIG, merge_config, resolve, resolve_field
from tinystr.engine.stringifier import Stringifier, stringify

__all__ = [
    "DEFAULT_CONFIG",
    "DisplayNamed",
    "FieldDescriptor",
    "Stringifier",
    "config_for",
    "describe_fields",
    "merge_config",
    "render",
    "renderable",
    "resolve",
    "resolve_field",
    "stringify",
]
