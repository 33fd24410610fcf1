"""
iNaturalist API client.

Low-level HTTP client for the iNaturalist API v1.  Public, keyless, JSON.

API docs: https://api.inaturalist.org/v1/docs/
Rate limits: ~1 req/sec, 10k/day
Recommended practices: https://www.inaturalist.org/pages/api+recommended+practices
"""

from __future__ import annotations

from typing import Any

from earth_atlas.datasources.base import ApiClient

# ---------------------------------------------------------------------------
# API configuration
# ---------------------------------------------------------------------------
API_BASE = "https://api.inaturalist.org/v1"
MAX_PER_PAGE = 200  # API maximum for /observations
AUTOCOMPLETE_LIMIT = 8

OBSERVATION_URL = "https://www.inaturalist.org/observations/{id}"
TAXON_URL = "https://www.inaturalist.org/taxa/{id}"


class INatClient(ApiClient):
    """One method per iNaturalist endpoint; each returns the decoded JSON."""

    label = "iNaturalist"
    base_url = API_BASE

    def get_observations(self, params: dict[str, Any]) -> dict[str, Any]:
        """GET /observations: search observations."""
        data: dict[str, Any] = self._get("observations", params)
        return data

    def get_species_counts(self, params: dict[str, Any]) -> dict[str, Any]:
        """GET /observations/species_counts: species with observation counts."""
        data: dict[str, Any] = self._get("observations/species_counts", params)
        return data

    def get_taxa_autocomplete(self, params: dict[str, Any]) -> dict[str, Any]:
        """GET /taxa/autocomplete: taxa matching a name prefix."""
        data: dict[str, Any] = self._get("taxa/autocomplete", params)
        return data
