"""Coordinates → readable label, and free text → candidate places."""

from __future__ import annotations

import logging
from typing import Any

from earth_atlas.config import get_settings
from earth_atlas.datasources.geocoding.client import MapboxClient, NominatimClient
from earth_atlas.errors import SourceError
from earth_atlas.schemas import Place, Point

logger = logging.getLogger(__name__)


def format_address(address: dict[str, Any]) -> str:
    """Label as place, region, COUNTRY, skipping missing parts."""
    place = (
        address.get("city")
        or address.get("town")
        or address.get("village")
        or address.get("county")
        or ""
    )
    region = address.get("state") or ""
    country = (address.get("country_code") or "").upper()
    return ", ".join(part for part in (place, region, country) if part)


def reverse_geocode(point: Point, client: NominatimClient | None = None) -> str:
    """
    Human-readable label for a point.

    Never raises: any lookup failure, or an address with nothing usable,
    falls back to the coordinates themselves ("45.5152, -122.6784").
    """
    client = client or NominatimClient()
    try:
        data = client.reverse(point)
    except SourceError as exc:
        logger.warning("Reverse geocoding failed for %s: %s", point.label(), exc)
        return point.label()
    return format_address(data.get("address") or {}) or point.label()


def _parse_feature(feature: dict[str, Any]) -> Place | None:
    center = feature.get("center") or []
    if len(center) != 2:
        return None
    return Place(
        name=feature.get("place_name") or "",
        point=Point(longitude=center[0], latitude=center[1]),
    )


def search_places(text: str, client: MapboxClient | None = None) -> list[Place]:
    """
    Up to five places matching free text.

    Without a Mapbox token, or for blank text, no request is made.  A failed
    request also yields no candidates.
    """
    client = client or MapboxClient(get_settings().mapbox_token)
    if not client.token or not text.strip():
        return []
    try:
        data = client.forward(text)
    except SourceError as exc:
        logger.warning("Place search failed for %r: %s", text, exc)
        return []
    places = (_parse_feature(f) for f in data.get("features") or [])
    return [p for p in places if p is not None]
