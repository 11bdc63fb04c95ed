"""Extractor configuration management."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Extractor settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="EXTRACTOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Flattening - joins loc parts into a field path
    path_separator: str = "."

    # Key for issues that apply to the whole input rather than a field
    root_issue_key: str = "__root__"

    # Log rejections at WARNING instead of DEBUG
    log_rejections: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
