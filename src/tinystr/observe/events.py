"""Structured render events and trace recording."""

from __future__ import annotations

import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, TextIO

import orjson


class EventEmitter:
    """Emits NDJSON render events, to stderr unless another stream is given."""

    def __init__(self, enabled: bool = False, stream: TextIO | None = None) -> None:
        self.enabled = enabled
        self.stream = stream

    def emit(self, event: str, data: dict[str, Any] | None = None) -> None:
        if not self.enabled:
            return
        payload = {
            "event": event,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "data": data or {},
        }
        out = self.stream or sys.stderr
        out.write(orjson.dumps(payload, default=str).decode() + "\n")
        out.flush()


class TraceRecorder:
    """Records, per type, which fields were rendered and with which settings."""

    def __init__(self) -> None:
        self.entries: list[dict[str, Any]] = []
        self._start = time.perf_counter()

    def _elapsed_us(self) -> int:
        return int((time.perf_counter() - self._start) * 1_000_000)

    def record_field(self, type_name: str, field: str, settings: dict[str, Any]) -> None:
        self.entries.append({"type": type_name, "field": field, "at_us": self._elapsed_us(), **settings})

    def record_ignored(self, type_name: str, field: str) -> None:
        self.entries.append({"type": type_name, "field": field, "at_us": self._elapsed_us(), "ignored": True})

    def fields(self, type_name: str | None = None) -> list[dict[str, Any]]:
        """Rendered field entries, optionally only those of one type."""
        return [
            e for e in self.entries
            if not e.get("ignored") and (type_name is None or e["type"] == type_name)
        ]

    def summary(self) -> dict[str, dict[str, Any]]:
        """Group entries by type: rendered fields, ignored fields, precision used."""
        types: dict[str, dict[str, Any]] = {}
        for e in self.entries:
            info = types.setdefault(e["type"], {"rendered": [], "ignored": [], "decimal_places": {}})
            if e.get("ignored"):
                if e["field"] not in info["ignored"]:
                    info["ignored"].append(e["field"])
                continue
            if e["field"] not in info["rendered"]:
                info["rendered"].append(e["field"])
            info["decimal_places"][e["field"]] = e["decimal_places"]
        return types

    def save(self, path: str | Path) -> str:
        """Write the per-type summary and raw entries as JSON. Returns the path."""
        trace_path = Path(path)
        payload = {
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "field_count": len(self.fields()),
            "types": self.summary(),
            "entries": self.entries,
        }
        trace_path.write_bytes(orjson.dumps(payload, option=orjson.OPT_INDENT_2, default=str))
        return str(trace_path)
