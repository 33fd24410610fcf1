"""
Domain models for Earth Atlas.

Pydantic models for data from external APIs and internal processing.
These define the canonical schema - source adapters normalize API responses
to these.
"""

from __future__ import annotations

from datetime import date
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# =============================================================================
# Enumerations
# =============================================================================


class Source(StrEnum):
    """External biodiversity data source."""

    INATURALIST = "inaturalist"
    EBIRD = "ebird"
    GBIF = "gbif"

    @property
    def label(self) -> str:
        return _SOURCE_LABELS[self]


_SOURCE_LABELS = {
    Source.INATURALIST: "iNaturalist",
    Source.EBIRD: "eBird",
    Source.GBIF: "GBIF",
}


class QualityGrade(StrEnum):
    """Observation verification level."""

    RESEARCH = "research"
    NEEDS_ID = "needs_id"
    CASUAL = "casual"


class IconicCategory(StrEnum):
    """Coarse taxonomic grouping used for display color and icon."""

    PLANTAE = "Plantae"
    AVES = "Aves"
    MAMMALIA = "Mammalia"
    INSECTA = "Insecta"
    REPTILIA = "Reptilia"
    AMPHIBIA = "Amphibia"
    FUNGI = "Fungi"
    ARACHNIDA = "Arachnida"
    ACTINOPTERYGII = "Actinopterygii"
    MOLLUSCA = "Mollusca"
    CHROMISTA = "Chromista"

    @classmethod
    def parse(cls, value: str | None) -> IconicCategory | None:
        """Return the matching category, or None for anything outside the set."""
        if not value:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


class TimeWindow(StrEnum):
    """How far back a search reaches."""

    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    ALL = "all"


# =============================================================================
# Geographic
# =============================================================================


class Point(BaseModel):
    """A WGS84 coordinate."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

    def label(self) -> str:
        """Coordinates formatted to 4 decimal places."""
        return f"{self.latitude:.4f}, {self.longitude:.4f}"


class BoundingBox(BaseModel):
    """Geographic bounding box for spatial queries."""

    model_config = ConfigDict(frozen=True)

    south: float
    west: float
    north: float
    east: float


class Place(BaseModel):
    """A forward-geocoding candidate."""

    model_config = ConfigDict(frozen=True)

    name: str
    point: Point


# =============================================================================
# Observations
# =============================================================================


class Taxon(BaseModel):
    """Taxon as attached to an observation."""

    model_config = ConfigDict(frozen=True)

    scientific_name: str
    common_name: str | None = None
    iconic_category: IconicCategory | None = None
    rank: str | None = None
    wikipedia_url: str | None = None
    source_taxon_id: str | None = Field(
        default=None, description="iNat taxon id, eBird species code or GBIF taxon key"
    )

    @property
    def display_name(self) -> str:
        """Human-friendly name: common name if available, else scientific."""
        return self.common_name or self.scientific_name


class Observer(BaseModel):
    """Who reported an observation."""

    model_config = ConfigDict(frozen=True)

    display_name: str
    avatar_url: str | None = None


class Observation(BaseModel):
    """A wildlife observation record, normalized across sources."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Source observation ID")
    source: Source
    taxon: Taxon
    photos: tuple[str, ...] = ()
    observed_on: date | None = None
    quality_grade: QualityGrade = QualityGrade.CASUAL
    place_guess: str | None = None
    location: Point | None = None
    observer: Observer
    url: str | None = None

    # Source-specific extensions
    individual_count: int | None = None

    @property
    def key(self) -> tuple[Source, str]:
        """Identity within a result set."""
        return (self.source, self.id)

    @property
    def iconic_category(self) -> IconicCategory | None:
        return self.taxon.iconic_category


class TaxonSuggestion(BaseModel):
    """An autocomplete candidate for the species filter."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    scientific_name: str
    source: Source
    rank: str | None = None
    iconic_category: IconicCategory | None = None
    photo_url: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str:
        return str(value)


# =============================================================================
# Query / Result
# =============================================================================


class Query(BaseModel):
    """One search action: where, how far, how long ago, how many, what."""

    model_config = ConfigDict(frozen=True)

    center: Point
    radius_km: float = Field(default=5, gt=0)
    time_window: TimeWindow = TimeWindow.DAY
    per_page: int = Field(default=50, gt=0)
    taxon_id: str | None = Field(
        default=None, description="Source-specific species filter (taxon id / species code / key)"
    )
    iconic_category: IconicCategory | None = None

    @field_validator("taxon_id", mode="before")
    @classmethod
    def _coerce_taxon_id(cls, value: Any) -> str | None:
        if value is None or value == "":
            return None
        return str(value)


class DateRange(BaseModel):
    """Inclusive observation-date bounds; both None means unbounded."""

    model_config = ConfigDict(frozen=True)

    start: date | None = None
    end: date | None = None

    @property
    def is_bounded(self) -> bool:
        return self.start is not None


class SearchResult(BaseModel):
    """Total hit count plus one page of normalized observations."""

    model_config = ConfigDict(frozen=True)

    total_results: int = 0
    observations: tuple[Observation, ...] = ()

    @classmethod
    def empty(cls) -> SearchResult:
        return cls(total_results=0, observations=())
