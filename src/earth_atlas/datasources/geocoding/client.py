"""
Geocoding clients.

Reverse: Nominatim (OpenStreetMap), keyless.
    Usage policy: https://operations.osmfoundation.org/policies/nominatim/
Forward: Mapbox Geocoding v5, needs an access token.
    API docs: https://docs.mapbox.com/api/search/geocoding-v5/
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from earth_atlas.datasources.base import ApiClient

if TYPE_CHECKING:
    import requests

    from earth_atlas.schemas import Point

NOMINATIM_BASE = "https://nominatim.openstreetmap.org"
MAPBOX_BASE = "https://api.mapbox.com/geocoding/v5/mapbox.places"

PLACE_LIMIT = 5
PLACE_TYPES = "place,locality,neighborhood,address,poi"


class NominatimClient(ApiClient):
    label = "Nominatim"
    base_url = NOMINATIM_BASE

    def _headers(self) -> dict[str, str]:
        return {"Accept-Language": "en"}

    def reverse(self, point: Point) -> dict[str, Any]:
        """GET /reverse?format=json"""
        data: dict[str, Any] = self._get(
            "reverse", {"lat": point.latitude, "lon": point.longitude, "format": "json"}
        )
        return data


class MapboxClient(ApiClient):
    label = "Mapbox"
    base_url = MAPBOX_BASE

    def __init__(self, token: str | None, session: requests.Session | None = None) -> None:
        super().__init__(session)
        self.token = token

    def forward(self, text: str, limit: int = PLACE_LIMIT) -> dict[str, Any]:
        """GET /{text}.json with autocomplete on."""
        params = {
            "access_token": self.token or "",
            "autocomplete": "true",
            "limit": str(limit),
            "types": PLACE_TYPES,
        }
        data: dict[str, Any] = self._get(f"{quote(text, safe='')}.json", params)
        return data
