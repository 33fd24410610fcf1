"""eBird recent-observation request building and parsing."""

from __future__ import annotations

from datetime import date
from typing import Any

from earth_atlas.datasources.ebird.client import MAX_RADIUS_KM, MAX_RESULTS
from earth_atlas.schemas import (
    IconicCategory,
    Observation,
    Observer,
    Point,
    QualityGrade,
    Query,
    Source,
    Taxon,
    TimeWindow,
)

OBSERVER_NAME = "eBird Observer"
UNKNOWN_LOCATION = "Unknown location"
CHECKLIST_URL = "https://ebird.org/checklist/{sub_id}"

_DAYS_BACK = {
    TimeWindow.HOUR: 1,
    TimeWindow.DAY: 1,
    TimeWindow.WEEK: 7,
    TimeWindow.MONTH: 30,
}
DEFAULT_DAYS_BACK = 14


def time_window_to_days(window: TimeWindow | str) -> int:
    """eBird's ``back`` parameter: whole days, 30 at most."""
    try:
        return _DAYS_BACK.get(TimeWindow(window), DEFAULT_DAYS_BACK)
    except ValueError:
        return DEFAULT_DAYS_BACK


def clamp_radius(radius_km: float) -> float | int:
    """eBird rejects distances over 50 km; clamp rather than fail."""
    dist = min(radius_km, MAX_RADIUS_KM)
    return int(dist) if float(dist).is_integer() else dist


def build_params(query: Query) -> dict[str, Any]:
    """Translate a query into ``/data/obs/geo/recent`` parameters."""
    return {
        "lat": f"{query.center.latitude:.4f}",
        "lng": f"{query.center.longitude:.4f}",
        "dist": clamp_radius(query.radius_km),
        "back": time_window_to_days(query.time_window),
        "maxResults": min(query.per_page, MAX_RESULTS),
        "includeProvisional": "true",
    }


def _parse_date(obs_dt: str | None) -> date | None:
    if not obs_dt:
        return None
    try:
        return date.fromisoformat(obs_dt.split(" ")[0])
    except ValueError:
        return None


def parse_observation(obs: dict[str, Any], photo_url: str | None = None) -> Observation:
    """
    Normalize one eBird sighting.

    ``obsValid`` is the only vetting signal: true → research, anything else
    → needs_id.  eBird exposes no per-observer identity here.
    """
    lat, lng = obs.get("lat"), obs.get("lng")
    sub_id = obs.get("subId") or ""
    species_code = obs.get("speciesCode")
    # A checklist lists many species, so the checklist id alone is not unique
    record_id = f"{sub_id}-{species_code}" if species_code else str(sub_id)
    return Observation(
        id=record_id,
        source=Source.EBIRD,
        taxon=Taxon(
            scientific_name=obs.get("sciName") or "Unknown",
            common_name=obs.get("comName"),
            iconic_category=IconicCategory.AVES,
            rank="species",
            source_taxon_id=species_code,
        ),
        photos=(photo_url,) if photo_url else (),
        observed_on=_parse_date(obs.get("obsDt")),
        quality_grade=QualityGrade.RESEARCH if obs.get("obsValid") is True else QualityGrade.NEEDS_ID,
        place_guess=obs.get("locName") or UNKNOWN_LOCATION,
        location=Point(latitude=lat, longitude=lng) if lat is not None and lng is not None else None,
        observer=Observer(display_name=OBSERVER_NAME),
        url=CHECKLIST_URL.format(sub_id=sub_id) if sub_id else None,
        individual_count=obs.get("howMany") or None,
    )
