"""Unit tests for pocket_notes.config — environment-driven settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from pocket_notes.config import Settings
from pocket_notes.storage import DEFAULT_STORAGE_KEY


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path: Path) -> None:
    """Run from an empty directory so no stray .env is picked up."""
    for name in ("NOTES_STORAGE_PATH", "NOTES_STORAGE_KEY", "NOTES_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


class TestSettings:
    def test_defaults(self) -> None:
        s = Settings()
        assert s.storage_key == DEFAULT_STORAGE_KEY
        assert s.storage_path.name == "storage.json"
        assert s.log_level == "INFO"

    def test_env_overrides(self, monkeypatch, tmp_path: Path) -> None:
        monkeypatch.setenv("NOTES_STORAGE_PATH", str(tmp_path / "x.json"))
        monkeypatch.setenv("NOTES_STORAGE_KEY", "other")
        monkeypatch.setenv("NOTES_LOG_LEVEL", "debug")
        s = Settings()
        assert s.storage_path == tmp_path / "x.json"
        assert s.storage_key == "other"
        assert s.log_level == "debug"

    def test_home_expanded(self, monkeypatch) -> None:
        monkeypatch.setenv("NOTES_STORAGE_PATH", "~/notes.json")
        assert Settings().storage_path == Path.home() / "notes.json"

    def test_env_file(self, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text("NOTES_STORAGE_KEY=from-file\n", encoding="utf-8")
        assert Settings().storage_key == "from-file"
