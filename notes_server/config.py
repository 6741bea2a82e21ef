"""Notes service configuration loaded from environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service settings, read from ``NOTES_SERVER_*`` variables or .env."""

    model_config = SettingsConfigDict(
        env_prefix="NOTES_SERVER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = "0.0.0.0"
    port: int = 3001
    storage_path: Path = Path(__file__).parent / "notes_data.json"


settings = Settings()
