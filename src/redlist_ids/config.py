"""
Application settings.

Read from environment variables (``REDLIST_`` prefix) and an optional
``.env`` file. The Red List API token is also picked up from
``IUCN_REDLIST_KEY``, the variable other Red List clients use.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from redlist_ids.datasources.redlist.client import API_BASE


class Settings(BaseSettings):
    """Settings for the resolver, CLI, and batch flow."""

    model_config = SettingsConfigDict(
        env_prefix="REDLIST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    app_name: str = Field(default="redlist-ids", description="Application name")
    app_env: str = Field(default="development", description="Deployment environment")
    debug: bool = Field(default=False, description="Enable debug output")

    api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("REDLIST_API_KEY", "IUCN_REDLIST_KEY"),
        description="IUCN Red List API token",
    )
    api_base: str = Field(default=API_BASE, description="Red List API base URL")
    timeout: float = Field(default=30, gt=0, description="HTTP timeout in seconds")
    log_level: str = Field(default="INFO", description="Root log level")


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (cached)."""
    return Settings()
