"""Object-to-string orchestration: header, fields, layout."""

from __future__ import annotations

from functools import partial
from typing import Any

from tinystr.contracts.common import CycleDetectedError
from tinystr.contracts.config import Layout, RenderConfig
from tinystr.engine.kinds import is_collection
from tinystr.engine.registry import config_for, describe_fields
from tinystr.engine.renderer import render
from tinystr.engine.resolver import DEFAULT_CONFIG, merge_config, resolve_field
from tinystr.observe.events import EventEmitter, TraceRecorder
from tinystr.text.template import fill


class Stringifier:
    """Renders objects according to the configuration declared on their types.

    *defaults* is the base every type's explicit settings are merged over,
    and what undecorated types are rendered with. An instance holds no
    per-call state and can be shared.
    """

    def __init__(
        self,
        defaults: RenderConfig | None = None,
        *,
        emitter: EventEmitter | None = None,
        trace: TraceRecorder | None = None,
    ) -> None:
        self.defaults = defaults or DEFAULT_CONFIG
        self.emitter = emitter or EventEmitter()
        self.trace = trace

    def stringify(self, obj: Any) -> str:
        if obj is None:
            return ""
        return self._stringify(obj, [])

    __call__ = stringify

    def _stringify(self, obj: Any, active: list[int]) -> str:
        tp = type(obj)
        type_config = config_for(tp)
        config = merge_config(self.defaults, type_config)
        nested = partial(self._stringify, active=active)

        fields = describe_fields(obj)
        if fields is None:
            if type_config is None or is_collection(obj):
                return render(obj, config.decimal_places, config.collection_separator, nested=nested)
            fields = []
        if type_config is None:
            self.emitter.emit("render.default_config", {"type": tp.__name__})

        if id(obj) in active:
            self.emitter.emit("render.cycle_detected", {"type": tp.__name__, "depth": len(active)})
            raise CycleDetectedError(tp.__name__, len(active))

        active.append(id(obj))
        try:
            parts: list[str] = []
            for descriptor in fields:
                resolved = resolve_field(config, descriptor)
                if resolved is None:
                    self.emitter.emit("render.field_ignored", {"type": tp.__name__, "field": descriptor.name})
                    if self.trace is not None:
                        self.trace.record_ignored(tp.__name__, descriptor.name)
                    continue
                value = descriptor.accessor(obj)
                text = render(value, resolved.decimal_places, resolved.collection_separator, nested=nested)
                if self.trace is not None:
                    self.trace.record_field(tp.__name__, descriptor.name, resolved.model_dump())
                parts.append(fill(resolved.template, resolved.name, text))
        finally:
            active.pop()

        if config.layout is Layout.MULTI_LINE:
            body = "\n".join(parts)
        else:
            body = config.field_separator.join(parts)
        return (_header(tp, config) + body).rstrip()


def _header(tp: type, config: RenderConfig) -> str:
    if config.emoji:
        label = config.emoji
    elif config.show_type_name:
        label = tp.__name__
    else:
        return ""
    if config.layout is Layout.MULTI_LINE:
        return label + "\n"
    return label + config.header_separator


_default = Stringifier()


def stringify(obj: Any) -> str:
    """Render *obj* using the configuration declared on its type.

    Returns an empty string for None. Types without a configuration are
    rendered with the default settings.
    """
    return _default.stringify(obj)
