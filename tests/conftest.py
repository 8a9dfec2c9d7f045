"""Shared fixtures for the pgconf test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from pgconf.store import ConfigEntry


class RecordingHandler:
    """Item handler that keeps every entry it receives."""

    def __init__(self) -> None:
        self.entries: list[ConfigEntry] = []

    def __call__(self, entry: ConfigEntry) -> None:
        self.entries.append(entry)

    @property
    def pairs(self) -> list[tuple[str, str]]:
        return [(e.name, e.value) for e in self.entries]


@pytest.fixture
def write_conf(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a file under tmp_path, creating parent dirs, and return its path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def recorder() -> RecordingHandler:
    """A fresh recording item handler."""
    return RecordingHandler()
