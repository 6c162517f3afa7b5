"""Shared fixtures for the notes test-suite."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

from pocket_notes.storage import LocalStorage, NotePersistence
from pocket_notes.store import NoteStore


class FakeClock:
    """Deterministic clock that advances one second per call."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, tzinfo=UTC)) -> None:
        self.now = start

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


@pytest.fixture()
def storage_path(tmp_path: Path) -> Path:
    return tmp_path / "storage.json"


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(storage_path: Path, clock: FakeClock) -> NoteStore:
    """Return a NoteStore backed by a temp JSON file and a fake clock."""
    return NoteStore(NotePersistence(LocalStorage(storage_path)), clock=clock)
