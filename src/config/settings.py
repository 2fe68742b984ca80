"""Environment configuration and validation.

This module defines strongly-typed application settings loaded from environment variables
(optionally via a local `.env` file).
"""

from __future__ import annotations

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATASET_FALLBACK_PATHS: tuple[str, ...] = (
    "data.json",
    "data/data.json",
    "public/data.json",
)

LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    When `DATASET_PATH` is unset, the dataset is auto-loaded from the first existing file among
    `DATASET_FALLBACK_PATHS` (a JSON list in the environment).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    dataset_path: str | None = Field(default=None, alias="DATASET_PATH")
    dataset_fallback_paths: list[str] = Field(
        default_factory=lambda: list(DEFAULT_DATASET_FALLBACK_PATHS),
        alias="DATASET_FALLBACK_PATHS",
    )
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("dataset_path")
    @classmethod
    def blank_dataset_path_is_unset(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value

    @field_validator("dataset_fallback_paths")
    @classmethod
    def validate_fallback_paths(cls, value: list[str]) -> list[str]:
        """Reject blank candidates; an empty list is allowed and disables auto-loading."""

        if any(not path.strip() for path in value):
            raise ValueError("DATASET_FALLBACK_PATHS must not contain blank entries")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(LOG_LEVELS)}")
        return level


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        RuntimeError: If the environment configuration is invalid.
    """

    try:
        return Settings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
