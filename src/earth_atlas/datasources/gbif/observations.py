"""GBIF occurrence request building and parsing."""

from __future__ import annotations

from datetime import date
from typing import Any

from earth_atlas.datasources.base import parse_records
from earth_atlas.datasources.gbif.client import MAX_LIMIT, OCCURRENCE_URL, GBIFClient
from earth_atlas.datasources.gbif.taxa import ICONIC_QUERY_PARAMS, derive_iconic_category
from earth_atlas.geometry import bounding_box
from earth_atlas.schemas import (
    DateRange,
    Observation,
    Observer,
    Point,
    QualityGrade,
    Query,
    SearchResult,
    Source,
    Taxon,
)

MAX_PHOTOS = 3
DEFAULT_OBSERVER = "GBIF Contributor"

# =============================================================================
# Request
# =============================================================================


def build_params(query: Query, dates: DateRange) -> dict[str, Any]:
    """
    Translate a query into ``/occurrence/search`` parameters.

    GBIF has no radius search, so the circle becomes its bounding box.
    """
    box = bounding_box(query.center, query.radius_km)
    params: dict[str, Any] = {
        "hasCoordinate": "true",
        "occurrenceStatus": "PRESENT",
        "decimalLatitude": f"{box.south:.6f},{box.north:.6f}",
        "decimalLongitude": f"{box.west:.6f},{box.east:.6f}",
        "limit": min(query.per_page, MAX_LIMIT),
        "offset": 0,
    }
    if dates.start is not None:
        end = dates.end or date.today()
        params["eventDate"] = f"{dates.start.isoformat()},{end.isoformat()}"
    if query.taxon_id:
        params["taxonKey"] = query.taxon_id
    if query.iconic_category is not None:
        key, value = ICONIC_QUERY_PARAMS[query.iconic_category]
        params[key] = value
    return params


# =============================================================================
# Parsing
# =============================================================================


def _parse_event_date(value: str | None) -> date | None:
    """Date part of an ISO ``eventDate``; ranges keep their start."""
    if not value:
        return None
    try:
        return date.fromisoformat(value.split("T")[0].split("/")[0])
    except ValueError:
        return None


def _parse_quality(occ: dict[str, Any]) -> QualityGrade:
    # GBIF has no community vetting; clean coordinates plus a species-level
    # identification is the closest stand-in for "research"
    if occ.get("hasGeospatialIssues") is False and occ.get("taxonRank") == "SPECIES":
        return QualityGrade.RESEARCH
    return QualityGrade.CASUAL


def _parse_photos(occ: dict[str, Any]) -> tuple[str, ...]:
    urls = [
        m["identifier"]
        for m in occ.get("media") or []
        if m.get("type") == "StillImage" and m.get("identifier")
    ]
    return tuple(urls[:MAX_PHOTOS])


def parse_taxon(occ: dict[str, Any]) -> Taxon:
    rank = occ.get("taxonRank")
    taxon_key = occ.get("taxonKey")
    return Taxon(
        scientific_name=occ.get("species") or occ.get("genus") or occ.get("family") or "Unknown",
        common_name=occ.get("vernacularName"),
        iconic_category=derive_iconic_category(occ.get("class"), occ.get("kingdom")),
        rank=rank.lower() if rank else None,
        source_taxon_id=str(taxon_key) if taxon_key else None,
    )


def parse_observation(occ: dict[str, Any]) -> Observation:
    """Normalize one ``/occurrence/search`` result."""
    lat, lng = occ.get("decimalLatitude"), occ.get("decimalLongitude")
    place_parts = [occ.get(k) for k in ("locality", "stateProvince", "country")]
    observer = (
        occ.get("recordedBy") or occ.get("institutionCode") or occ.get("datasetName") or DEFAULT_OBSERVER
    )
    return Observation(
        id=str(occ["key"]),
        source=Source.GBIF,
        taxon=parse_taxon(occ),
        photos=_parse_photos(occ),
        observed_on=_parse_event_date(occ.get("eventDate")),
        quality_grade=_parse_quality(occ),
        place_guess=", ".join(p for p in place_parts if p) or None,
        location=Point(latitude=lat, longitude=lng) if lat is not None and lng is not None else None,
        observer=Observer(display_name=observer),
        url=OCCURRENCE_URL.format(key=occ["key"]),
    )


def parse_search_response(data: dict[str, Any]) -> SearchResult:
    results: list[dict[str, Any]] = data.get("results") or []
    return SearchResult(
        total_results=data.get("count") or 0,
        observations=parse_records(GBIFClient.label, results, parse_observation, "key"),
    )
