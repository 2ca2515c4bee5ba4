"""Shared test fixtures."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from tinystr.observe.events import EventEmitter


@pytest.fixture()
def event_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture()
def emitter(event_stream: io.StringIO) -> EventEmitter:
    """An enabled emitter writing NDJSON into ``event_stream``."""
    return EventEmitter(enabled=True, stream=event_stream)


@pytest.fixture()
def read_events(event_stream: io.StringIO):
    """Parse everything emitted so far into a list of dicts."""

    def _read() -> list[dict]:
        return [json.loads(line) for line in event_stream.getvalue().splitlines() if line]

    return _read


@pytest.fixture()
def write_config(tmp_path: Path):
    """Write a tinystr.yaml into tmp_path and return its path."""

    def _write(text: str, name: str = "tinystr.yaml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
