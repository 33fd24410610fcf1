"""
Application settings.

Values come from environment variables prefixed with ``EARTH_ATLAS_`` or an
optional ``.env`` file in the working directory, e.g.::

    EARTH_ATLAS_EBIRD_API_KEY=abc123
    EARTH_ATLAS_MAPBOX_TOKEN=pk.xyz
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for clients and the CLI."""

    model_config = SettingsConfigDict(
        env_prefix="EARTH_ATLAS_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "earth-atlas"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Default search center (Portland, OR) when none is given on the command line
    lat: float = Field(default=45.5152, ge=-90, le=90)
    lon: float = Field(default=-122.6784, ge=-180, le=180)
    default_source: Literal["inaturalist", "ebird", "gbif"] = "inaturalist"

    ebird_api_key: str | None = None
    mapbox_token: str | None = None

    http_timeout: float = 30.0
    user_agent: str = "earth-atlas/0.1 (wildlife observation explorer)"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
