"""
eBird API client.

Requires an API key sent as the ``x-ebirdapitoken`` header
(get one at https://ebird.org/api/keygen).

API docs: https://documenter.getpostman.com/view/664302/S1ENwy59
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any

from earth_atlas.datasources.base import ApiClient
from earth_atlas.errors import ConfigurationError

if TYPE_CHECKING:
    import requests

# ---------------------------------------------------------------------------
# API configuration
# ---------------------------------------------------------------------------
API_BASE = "https://api.ebird.org/v2"
MAX_RADIUS_KM = 50  # hard API limit for geo queries
MAX_RESULTS = 10_000  # server-side maximum for maxResults
TOKEN_HEADER = "x-ebirdapitoken"


class EBirdClient(ApiClient):
    """One method per eBird endpoint; each returns the decoded JSON."""

    label = "eBird"
    base_url = API_BASE

    def __init__(self, api_key: str | None, session: requests.Session | None = None) -> None:
        super().__init__(session)
        self.api_key = api_key

    def _headers(self) -> dict[str, str]:
        if not self.api_key:
            raise ConfigurationError(
                "eBird API key not configured; set EARTH_ATLAS_EBIRD_API_KEY"
            )
        return {TOKEN_HEADER: self.api_key}

    def get_taxonomy(self) -> list[dict[str, Any]]:
        """GET /ref/taxonomy/ebird: the full taxonomy (all categories)."""
        data: list[dict[str, Any]] = self._get("ref/taxonomy/ebird", {"fmt": "json", "locale": "en"})
        return data

    def get_recent_observations(
        self, params: dict[str, Any], species_code: str | None = None
    ) -> list[dict[str, Any]]:
        """GET /data/obs/geo/recent[/{speciesCode}]: recent sightings near a point."""
        endpoint = "data/obs/geo/recent"
        if species_code:
            endpoint = f"{endpoint}/{species_code}"
        data: list[dict[str, Any]] = self._get(endpoint, params)
        return data

    def get_region_stats(self, region: str, day: date) -> dict[str, Any]:
        """GET /product/stats/{region}/{y}/{m}/{d}: daily checklist/species totals."""
        data: dict[str, Any] = self._get(
            f"product/stats/{region}/{day.year}/{day.month}/{day.day}"
        )
        return data
