"""
Configuration settings for the transaction manager.

Uses Pydantic Settings to load environment variables for logging, query
limits and the concurrency workload defaults.
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    json_logs: bool = Field(False, alias="JSON_LOGS")

    # Queries
    max_page_size: int = Field(1000, alias="MAX_PAGE_SIZE", ge=1)

    # Stress workload defaults
    stress_workers: int = Field(8, alias="STRESS_WORKERS", ge=1)
    stress_operations: int = Field(2_000, alias="STRESS_OPERATIONS", ge=1)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
