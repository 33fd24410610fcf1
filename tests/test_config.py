"""Tests for application settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from earth_atlas.config import Settings, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("EARTH_ATLAS_EBIRD_API_KEY", raising=False)
        s = Settings(_env_file=None)  # type: ignore[call-arg]
        assert s.app_name == "earth-atlas"
        assert s.default_source == "inaturalist"
        assert s.ebird_api_key is None
        assert s.http_timeout == 30.0

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EARTH_ATLAS_EBIRD_API_KEY", "abc123")
        monkeypatch.setenv("EARTH_ATLAS_DEFAULT_SOURCE", "ebird")
        monkeypatch.setenv("EARTH_ATLAS_LAT", "40.7")
        s = Settings(_env_file=None)  # type: ignore[call-arg]
        assert s.ebird_api_key == "abc123"
        assert s.default_source == "ebird"
        assert s.lat == 40.7

    def test_invalid_source(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EARTH_ATLAS_DEFAULT_SOURCE", "flickr")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)  # type: ignore[call-arg]

    def test_get_settings_cached(self) -> None:
        get_settings.cache_clear()
        assert get_settings() is get_settings()
