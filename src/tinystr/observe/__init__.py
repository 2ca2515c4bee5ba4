"""Render events and trace recording."""

from tinystr.observe.events import EventEmitter, TraceRecorder

__all__ = ["EventEmitter", "TraceRecorder"]
