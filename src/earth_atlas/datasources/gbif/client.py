"""
GBIF API client.

Low-level HTTP client for the GBIF API v1.  No key is needed for read and
search operations.

API docs: https://www.gbif.org/developer/occurrence
Attribution: Data from GBIF.org, CC BY 4.0

GBIF ingests iNaturalist research-grade data, so records can overlap with the
iNaturalist source.
"""

from __future__ import annotations

from typing import Any

from earth_atlas.datasources.base import ApiClient

API_BASE = "https://api.gbif.org/v1"
MAX_LIMIT = 300  # API maximum for /occurrence/search
SUGGEST_LIMIT = 8

OCCURRENCE_URL = "https://www.gbif.org/occurrence/{key}"


class GBIFClient(ApiClient):
    """One method per GBIF endpoint; each returns the decoded JSON."""

    label = "GBIF"
    base_url = API_BASE

    def search_occurrences(self, params: dict[str, Any]) -> dict[str, Any]:
        """GET /occurrence/search"""
        data: dict[str, Any] = self._get("occurrence/search", params)
        return data

    def count_occurrences(self) -> int:
        """GET /occurrence/count (a bare integer)"""
        return int(self._get("occurrence/count") or 0)

    def count_occurrences_by_country(self) -> dict[str, int]:
        """GET /occurrence/counts/countries"""
        data: dict[str, int] = self._get("occurrence/counts/countries") or {}
        return data

    def search_species(self, params: dict[str, Any]) -> dict[str, Any]:
        """GET /species/search"""
        data: dict[str, Any] = self._get("species/search", params)
        return data

    def suggest_species(self, params: dict[str, Any]) -> list[dict[str, Any]]:
        """GET /species/suggest"""
        data: list[dict[str, Any]] = self._get("species/suggest", params) or []
        return data

    def search_datasets(self, params: dict[str, Any]) -> dict[str, Any]:
        """GET /dataset/search"""
        data: dict[str, Any] = self._get("dataset/search", params)
        return data
