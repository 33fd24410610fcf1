"""iNaturalist observation request building and parsing."""

from __future__ import annotations

from datetime import date
from typing import Any

from earth_atlas.datasources.base import parse_records
from earth_atlas.datasources.inaturalist import client
from earth_atlas.schemas import (
    DateRange,
    IconicCategory,
    Observation,
    Observer,
    Point,
    QualityGrade,
    Query,
    SearchResult,
    Source,
    Taxon,
)

# =============================================================================
# Request
# =============================================================================


def build_params(query: Query, dates: DateRange) -> dict[str, Any]:
    """
    Translate a query into ``/observations`` parameters.

    Both casual and vetted records are requested (``quality_grade=any``); the
    grade of each record is preserved on the normalized observation.
    """
    params: dict[str, Any] = {
        "lat": query.center.latitude,
        "lng": query.center.longitude,
        "radius": query.radius_km,
        "per_page": min(query.per_page, client.MAX_PER_PAGE),
        "order": "desc",
        "order_by": "created_at",
        "quality_grade": "any",
    }
    if query.taxon_id:
        params["taxon_id"] = query.taxon_id
    if query.iconic_category:
        params["iconic_taxa"] = query.iconic_category.value
    if dates.start is not None:
        params["d1"] = dates.start.isoformat()
        params["d2"] = (dates.end or date.today()).isoformat()
    return params


# =============================================================================
# Parsing
# =============================================================================


def _parse_point(obs: dict[str, Any]) -> Point | None:
    """Point from ``geojson`` if present, else the "lat,lng" ``location`` string."""
    geojson = obs.get("geojson") or {}
    coords = geojson.get("coordinates")
    if coords and len(coords) == 2:
        try:
            return Point(longitude=float(coords[0]), latitude=float(coords[1]))
        except (TypeError, ValueError):
            return None

    location = obs.get("location")
    if not location:
        return None
    parts = str(location).split(",")
    if len(parts) != 2:
        return None
    try:
        return Point(latitude=float(parts[0]), longitude=float(parts[1]))
    except ValueError:
        return None


def _parse_date(value: str | None) -> date | None:
    if not value:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


def _parse_quality(value: str | None) -> QualityGrade:
    try:
        return QualityGrade(value)
    except ValueError:
        return QualityGrade.CASUAL


def parse_taxon(taxon: dict[str, Any]) -> Taxon:
    """Normalize an iNaturalist taxon object."""
    taxon_id = taxon.get("id")
    return Taxon(
        scientific_name=taxon.get("name") or "Unknown",
        common_name=taxon.get("preferred_common_name"),
        iconic_category=IconicCategory.parse(taxon.get("iconic_taxon_name")),
        rank=taxon.get("rank"),
        wikipedia_url=taxon.get("wikipedia_url"),
        source_taxon_id=str(taxon_id) if taxon_id is not None else None,
    )


def parse_observation(obs: dict[str, Any]) -> Observation:
    """Normalize a single ``/observations`` result."""
    user = obs.get("user") or {}
    photos = obs.get("photos") or []

    return Observation(
        id=str(obs["id"]),
        source=Source.INATURALIST,
        taxon=parse_taxon(obs.get("taxon") or {}),
        photos=tuple(p["url"] for p in photos if p.get("url")),
        observed_on=_parse_date(obs.get("observed_on")),
        quality_grade=_parse_quality(obs.get("quality_grade")),
        place_guess=obs.get("place_guess"),
        location=_parse_point(obs),
        observer=Observer(
            display_name=user.get("login") or "Unknown",
            avatar_url=user.get("icon_url"),
        ),
        url=obs.get("uri") or client.OBSERVATION_URL.format(id=obs["id"]),
    )


def parse_search_response(data: dict[str, Any]) -> SearchResult:
    """Build a SearchResult from an ``/observations`` response body."""
    results: list[dict[str, Any]] = data.get("results") or []
    return SearchResult(
        total_results=data.get("total_results") or 0,
        observations=parse_records(client.INatClient.label, results, parse_observation, "id"),
    )
