"""Tests for the canonical domain models."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

import pytest
from pydantic import ValidationError

from earth_atlas.schemas import (
    DateRange,
    IconicCategory,
    Observation,
    Point,
    Query,
    SearchResult,
    Source,
    TaxonSuggestion,
    TimeWindow,
)


class TestSource:
    def test_labels(self) -> None:
        assert Source.INATURALIST.label == "iNaturalist"
        assert Source.EBIRD.label == "eBird"
        assert Source.GBIF.label == "GBIF"

    def test_from_string(self) -> None:
        assert Source("gbif") is Source.GBIF


class TestIconicCategory:
    def test_parse_known(self) -> None:
        assert IconicCategory.parse("Aves") is IconicCategory.AVES

    def test_parse_outside_fixed_set(self) -> None:
        # iNaturalist also reports e.g. "Protozoa", which has no display category
        assert IconicCategory.parse("Protozoa") is None

    def test_parse_missing(self) -> None:
        assert IconicCategory.parse(None) is None
        assert IconicCategory.parse("") is None

    def test_fixed_set_size(self) -> None:
        assert len(IconicCategory) == 11


class TestPoint:
    def test_label_four_decimals(self) -> None:
        assert Point(latitude=45.51523, longitude=-122.678449).label() == "45.5152, -122.6784"

    def test_rejects_out_of_range(self) -> None:
        with pytest.raises(ValidationError):
            Point(latitude=91, longitude=0)


class TestQuery:
    def test_defaults(self) -> None:
        q = Query(center=Point(latitude=0, longitude=0))
        assert q.radius_km == 5
        assert q.time_window is TimeWindow.DAY
        assert q.per_page == 50
        assert q.taxon_id is None

    def test_taxon_id_coerced_to_string(self) -> None:
        q = Query(center=Point(latitude=0, longitude=0), taxon_id=48662)
        assert q.taxon_id == "48662"

    def test_blank_taxon_id_is_none(self) -> None:
        q = Query(center=Point(latitude=0, longitude=0), taxon_id="")
        assert q.taxon_id is None

    def test_radius_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Query(center=Point(latitude=0, longitude=0), radius_km=0)

    def test_frozen(self) -> None:
        q = Query(center=Point(latitude=0, longitude=0))
        with pytest.raises(ValidationError):
            q.radius_km = 10  # type: ignore[misc]


class TestObservation:
    def test_key_is_source_and_id(self, make_observation: Callable[..., Observation]) -> None:
        obs = make_observation(id="42", source=Source.GBIF)
        assert obs.key == (Source.GBIF, "42")

    def test_iconic_category_shortcut(self, make_observation: Callable[..., Observation]) -> None:
        obs = make_observation(category=IconicCategory.FUNGI)
        assert obs.iconic_category is IconicCategory.FUNGI

    def test_display_name_falls_back_to_scientific(self, make_observation: Callable[..., Observation]) -> None:
        obs = make_observation()
        assert obs.taxon.display_name == "Turdus migratorius"


class TestMisc:
    def test_suggestion_id_coerced(self) -> None:
        s = TaxonSuggestion(id=12, name="x", scientific_name="x", source=Source.INATURALIST)
        assert s.id == "12"

    def test_date_range_bounded(self) -> None:
        assert not DateRange().is_bounded
        assert DateRange(start=date(2025, 1, 1), end=date(2025, 1, 2)).is_bounded

    def test_empty_result(self) -> None:
        empty = SearchResult.empty()
        assert empty.total_results == 0
        assert empty.observations == ()
