"""Application settings and configuration management."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library defaults with environment variable support."""

    # Matching
    default_mode: str = Field(default="strict")
    default_threshold: int = Field(default=1, ge=0)
    fuzzy_threshold: float = Field(default=0.8, ge=0.0, le=1.0)
    diacritics: bool = Field(default=True)

    # Highlighting
    highlight_open: str = Field(default="<mark>")
    highlight_close: str = Field(default="</mark>")

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")

    model_config = SettingsConfigDict(
        env_prefix="AUTOCOMPLETE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
