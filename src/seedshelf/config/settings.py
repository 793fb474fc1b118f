"""Application settings loaded from environment variables.

Hey future me - every setting can be overridden via env vars with the SEEDSHELF_
prefix. Nested groups use a double underscore:

    SEEDSHELF_LOG_LEVEL=DEBUG
    SEEDSHELF_OBSERVABILITY__LOG_JSON_FORMAT=true
    SEEDSHELF_PATHS__SAVE_PATH=/data/complete
    SEEDSHELF_PATHS__DOWNLOAD_PATH_ENABLED=true
"""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from seedshelf.domain.value_objects.category_name import DEFAULT_NEW_CATEGORY_NAME


class ObservabilitySettings(BaseModel):
    """Logging output settings."""

    log_json_format: bool = Field(
        default=False,
        description="Emit JSON log lines (recommended for production)",
    )


class PathSettings(BaseModel):
    """Global storage defaults used by the in-memory category store.

    These are the paths category placeholders are derived from.
    """

    save_path: Path = Field(default=Path("/downloads"))
    download_path: Path = Field(default=Path("/downloads/incomplete"))
    download_path_enabled: bool = False


class CategorySettings(BaseModel):
    """Category editor behaviour."""

    new_category_name: str = Field(
        default=DEFAULT_NEW_CATEGORY_NAME,
        min_length=1,
        description="Leaf name proposed for newly created categories",
    )
    subcategories_enabled: bool = Field(
        default=True,
        description="Create missing parent categories when adding 'a/b/c'",
    )


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="SEEDSHELF_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    app_name: str = "SeedShelf"
    log_level: str = "INFO"

    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)
    paths: PathSettings = Field(default_factory=PathSettings)
    categories: CategorySettings = Field(default_factory=CategorySettings)

    # Yo, validate the level up front - configure_logging() would silently fall back
    # to INFO for a typo like "DEGUB", and nobody would notice the missing debug logs.
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize and validate the log level name."""
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Return the cached application settings."""
    return Settings()
