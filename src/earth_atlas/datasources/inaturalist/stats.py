"""Global iNaturalist aggregates: totals, most-observed species, top countries."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import TYPE_CHECKING, Any

from earth_atlas.datasources.inaturalist.client import TAXON_URL
from earth_atlas.reference.regions import INAT_COUNTRIES, INatPlace
from earth_atlas.schemas import DateRange, IconicCategory
from earth_atlas.services.concurrency import gather

if TYPE_CHECKING:
    from earth_atlas.datasources.inaturalist.client import INatClient

logger = logging.getLogger(__name__)

DASHBOARD_RANGES = ("all", "30d", "today")

# =============================================================================
# Data Models
# =============================================================================


@dataclass
class GlobalCounts:
    """Headline totals across all of iNaturalist."""

    total_observations: int
    total_species: int
    research_grade: int


@dataclass
class SpeciesRecord:
    """A species with its observation count for a query."""

    taxon_id: int
    scientific_name: str
    common_name: str | None
    rank: str
    observation_count: int
    iconic_category: IconicCategory | None = None
    photo_url: str | None = None
    taxon_url: str = ""

    @property
    def display_name(self) -> str:
        """Human-friendly name: common name if available, else scientific."""
        if self.common_name:
            return f"{self.common_name} ({self.scientific_name})"
        return self.scientific_name


@dataclass
class CountryCount:
    """Observation count for one tracked country."""

    place_id: int
    name: str
    flag: str
    count: int


# =============================================================================
# Helpers
# =============================================================================


def dashboard_range(key: str, today: date | None = None) -> DateRange:
    """Map a dashboard time toggle (``all``, ``30d``, ``today``) to date bounds."""
    today = today or date.today()
    if key == "today":
        return DateRange(start=today, end=today)
    if key == "30d":
        return DateRange(start=today - timedelta(days=30), end=today)
    return DateRange()


def _date_params(dates: DateRange) -> dict[str, str]:
    if dates.start is None:
        return {}
    return {"d1": dates.start.isoformat(), "d2": (dates.end or dates.start).isoformat()}


def _parse_species_record(result: dict[str, Any]) -> SpeciesRecord:
    """Parse a single species_counts result into a SpeciesRecord."""
    taxon = result.get("taxon") or {}
    photo = taxon.get("default_photo") or {}
    return SpeciesRecord(
        taxon_id=taxon.get("id", 0),
        scientific_name=taxon.get("name", "Unknown"),
        common_name=taxon.get("preferred_common_name"),
        rank=taxon.get("rank", "species"),
        observation_count=result.get("count", 0),
        iconic_category=IconicCategory.parse(taxon.get("iconic_taxon_name")),
        photo_url=photo.get("square_url") or photo.get("medium_url"),
        taxon_url=TAXON_URL.format(id=taxon.get("id", "")),
    )


# =============================================================================
# API Fetching Functions
# =============================================================================


def fetch_global_counts(inat: INatClient) -> GlobalCounts:
    """
    Total observations, species and research-grade observations.

    The three counts are fetched concurrently; any failure fails the panel.
    """
    outcomes = gather(
        [
            lambda: inat.get_observations({"per_page": 0}),
            lambda: inat.get_species_counts({"per_page": 0}),
            lambda: inat.get_observations({"per_page": 0, "quality_grade": "research"}),
        ]
    )
    for outcome in outcomes:
        if outcome.error is not None:
            raise outcome.error
    obs, species, research = (o.value or {} for o in outcomes)
    return GlobalCounts(
        total_observations=obs.get("total_results", 0),
        total_species=species.get("total_results", 0),
        research_grade=research.get("total_results", 0),
    )


def fetch_top_species(
    inat: INatClient,
    limit: int = 8,
    dates: DateRange | None = None,
) -> list[SpeciesRecord]:
    """Most-observed species worldwide, optionally within a date range."""
    params: dict[str, Any] = {"per_page": limit, **_date_params(dates or DateRange())}
    data = inat.get_species_counts(params)
    results: list[dict[str, Any]] = data.get("results", [])
    return [_parse_species_record(r) for r in results[:limit]]


def _fetch_country(inat: INatClient, place: INatPlace, dates: DateRange) -> CountryCount:
    params: dict[str, Any] = {"place_id": place.place_id, "per_page": 0, **_date_params(dates)}
    data = inat.get_observations(params)
    return CountryCount(
        place_id=place.place_id,
        name=place.name,
        flag=place.flag,
        count=data.get("total_results", 0),
    )


def fetch_top_countries(
    inat: INatClient,
    dates: DateRange | None = None,
    places: tuple[INatPlace, ...] = INAT_COUNTRIES,
) -> list[CountryCount]:
    """
    Observation counts for a fixed list of countries, largest first.

    Per-country requests run as one parallel batch; a country whose request
    fails is left out rather than reported.
    """
    dates = dates or DateRange()
    outcomes = gather([lambda p=p: _fetch_country(inat, p, dates) for p in places])  # type: ignore[misc]
    countries: list[CountryCount] = []
    for place, outcome in zip(places, outcomes, strict=True):
        if outcome.value is None:
            logger.debug("Dropping %s from top countries: %s", place.name, outcome.error)
            continue
        countries.append(outcome.value)
    return sorted(countries, key=lambda c: c.count, reverse=True)
