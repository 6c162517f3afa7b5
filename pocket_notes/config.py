"""Application configuration loaded from environment variables."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .storage import DEFAULT_STORAGE_KEY

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


class Settings(BaseSettings):
    """Application settings loaded from NOTES_* variables or a .env file."""

    model_config = SettingsConfigDict(
        env_prefix="NOTES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Storage
    storage_path: Path = Path.home() / ".pocket_notes" / "storage.json"
    storage_key: str = DEFAULT_STORAGE_KEY

    # Logging
    log_level: str = "INFO"

    @field_validator("storage_path")
    @classmethod
    def _expand_home(cls, value: Path) -> Path:
        return value.expanduser()

    def configure_logging(self) -> None:
        """Set up root logging for an entry point."""
        logging.basicConfig(level=self.log_level.upper(), format=LOG_FORMAT)


settings = Settings()
