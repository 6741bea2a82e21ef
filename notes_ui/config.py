"""UI configuration loaded from environment variables."""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    # Notes service
    notes_api_url: str = "http://localhost:3001"
    request_timeout: float = 10.0  # seconds

    # Ask before deleting a note
    confirm_delete: bool = True

    log_level: str = "INFO"

    @field_validator("notes_api_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Paths are joined as ``{notes_api_url}/notes``."""
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure the level is a valid logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper


settings = Settings()
