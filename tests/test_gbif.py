"""
Tests for the GBIF data source.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from typing import Any
from unittest.mock import Mock

import pytest

from earth_atlas.datasources.gbif import (
    GBIFAdapter,
    GBIFClient,
    build_params,
    derive_iconic_category,
    fetch_global_stats,
    fetch_kingdom_counts,
    fetch_top_countries,
    parse_observation,
)
from earth_atlas.errors import SourceError
from earth_atlas.schemas import DateRange, IconicCategory, Point, QualityGrade, Query, Source

SessionFactory = Callable[[Any], Mock]

# =============================================================================
# Fixtures / Sample API Responses
# =============================================================================

SAMPLE_OCCURRENCE: dict[str, Any] = {
    "key": 4512345678,
    "species": "Ardea herodias",
    "genus": "Ardea",
    "family": "Ardeidae",
    "vernacularName": "Great Blue Heron",
    "kingdom": "Animalia",
    "class": "Aves",
    "taxonRank": "SPECIES",
    "taxonKey": 2480830,
    "hasGeospatialIssues": False,
    "eventDate": "2025-06-14T08:15:00",
    "decimalLatitude": 45.6,
    "decimalLongitude": -122.7,
    "locality": "Smith and Bybee Wetlands",
    "stateProvince": "Oregon",
    "country": "United States of America",
    "recordedBy": "J. Birder",
    "institutionCode": "CLO",
    "datasetName": "eBird Observation Dataset",
    "media": [
        {"type": "StillImage", "identifier": "https://example.org/1.jpg"},
        {"type": "Sound", "identifier": "https://example.org/1.mp3"},
        {"type": "StillImage"},
        {"type": "StillImage", "identifier": "https://example.org/2.jpg"},
        {"type": "StillImage", "identifier": "https://example.org/3.jpg"},
        {"type": "StillImage", "identifier": "https://example.org/4.jpg"},
    ],
}

QUERY = Query(center=Point(latitude=0, longitude=10), radius_km=111, per_page=500)
WEEK = DateRange(start=date(2025, 6, 8), end=date(2025, 6, 15))


# =============================================================================
# Iconic Category Tests
# =============================================================================


class TestDeriveIconicCategory:
    def test_class_first(self) -> None:
        assert derive_iconic_category("Aves", "Animalia") is IconicCategory.AVES

    def test_alternate_fish_class(self) -> None:
        assert derive_iconic_category("Actinopteri", "Animalia") is IconicCategory.ACTINOPTERYGII

    def test_kingdom_fallback(self) -> None:
        assert derive_iconic_category(None, "Fungi") is IconicCategory.FUNGI
        assert derive_iconic_category("Agaricomycetes", "Fungi") is IconicCategory.FUNGI

    def test_animalia_without_known_class(self) -> None:
        assert derive_iconic_category("Gastropoda", "Animalia") is None
        assert derive_iconic_category(None, "Animalia") is None

    def test_unresolvable(self) -> None:
        assert derive_iconic_category(None, "Bacteria") is None
        assert derive_iconic_category(None, None) is None

    def test_case_insensitive(self) -> None:
        assert derive_iconic_category("MAMMALIA", None) is IconicCategory.MAMMALIA


# =============================================================================
# Request Tests
# =============================================================================


class TestBuildParams:
    def test_bounding_box(self) -> None:
        params = build_params(QUERY, DateRange())
        assert params["decimalLatitude"] == "-1.000000,1.000000"
        assert params["decimalLongitude"] == "9.000000,11.000000"

    def test_fixed_filters(self) -> None:
        params = build_params(QUERY, DateRange())
        assert params["hasCoordinate"] == "true"
        assert params["occurrenceStatus"] == "PRESENT"
        assert params["offset"] == 0

    def test_limit_capped_at_300(self) -> None:
        assert build_params(QUERY, DateRange())["limit"] == 300

    def test_event_date(self) -> None:
        assert build_params(QUERY, WEEK)["eventDate"] == "2025-06-08,2025-06-15"

    def test_unbounded_has_no_event_date(self) -> None:
        assert "eventDate" not in build_params(QUERY, DateRange())

    def test_taxon_key(self) -> None:
        q = QUERY.model_copy(update={"taxon_id": "2480830"})
        assert build_params(q, DateRange())["taxonKey"] == "2480830"

    @pytest.mark.parametrize(
        ("category", "key", "value"),
        [
            (IconicCategory.AVES, "class", "Aves"),
            (IconicCategory.MOLLUSCA, "phylum", "Mollusca"),
            (IconicCategory.PLANTAE, "kingdom", "Plantae"),
        ],
    )
    def test_category_filter(self, category: IconicCategory, key: str, value: str) -> None:
        q = QUERY.model_copy(update={"iconic_category": category})
        assert build_params(q, DateRange())[key] == value


# =============================================================================
# Parsing Tests
# =============================================================================


class TestParseObservation:
    def test_full_record(self) -> None:
        obs = parse_observation(SAMPLE_OCCURRENCE)
        assert obs.id == "4512345678"
        assert obs.source is Source.GBIF
        assert obs.taxon.scientific_name == "Ardea herodias"
        assert obs.taxon.common_name == "Great Blue Heron"
        assert obs.taxon.iconic_category is IconicCategory.AVES
        assert obs.taxon.rank == "species"
        assert obs.taxon.source_taxon_id == "2480830"
        assert obs.observed_on == date(2025, 6, 14)
        assert obs.location == Point(latitude=45.6, longitude=-122.7)
        assert obs.url == "https://www.gbif.org/occurrence/4512345678"

    def test_place_joined(self) -> None:
        obs = parse_observation(SAMPLE_OCCURRENCE)
        assert obs.place_guess == "Smith and Bybee Wetlands, Oregon, United States of America"

    def test_place_skips_missing_parts(self) -> None:
        raw = {**SAMPLE_OCCURRENCE, "locality": None, "stateProvince": ""}
        assert parse_observation(raw).place_guess == "United States of America"

    def test_no_place(self) -> None:
        raw = {"key": 1}
        assert parse_observation(raw).place_guess is None

    def test_photos_still_images_max_three(self) -> None:
        assert parse_observation(SAMPLE_OCCURRENCE).photos == (
            "https://example.org/1.jpg",
            "https://example.org/2.jpg",
            "https://example.org/3.jpg",
        )

    def test_research_grade(self) -> None:
        assert parse_observation(SAMPLE_OCCURRENCE).quality_grade is QualityGrade.RESEARCH

    @pytest.mark.parametrize(
        "override",
        [
            {"hasGeospatialIssues": True},
            {"hasGeospatialIssues": None},
            {"taxonRank": "GENUS"},
        ],
    )
    def test_casual(self, override: dict[str, Any]) -> None:
        raw = {**SAMPLE_OCCURRENCE, **override}
        assert parse_observation(raw).quality_grade is QualityGrade.CASUAL

    @pytest.mark.parametrize(
        ("drop", "expected"),
        [
            ((), "J. Birder"),
            (("recordedBy",), "CLO"),
            (("recordedBy", "institutionCode"), "eBird Observation Dataset"),
            (("recordedBy", "institutionCode", "datasetName"), "GBIF Contributor"),
        ],
    )
    def test_observer_fallback(self, drop: tuple[str, ...], expected: str) -> None:
        raw = {k: v for k, v in SAMPLE_OCCURRENCE.items() if k not in drop}
        assert parse_observation(raw).observer.display_name == expected

    @pytest.mark.parametrize(
        ("drop", "expected"),
        [
            (("species",), "Ardea"),
            (("species", "genus"), "Ardeidae"),
            (("species", "genus", "family"), "Unknown"),
        ],
    )
    def test_name_fallback(self, drop: tuple[str, ...], expected: str) -> None:
        raw = {k: v for k, v in SAMPLE_OCCURRENCE.items() if k not in drop}
        assert parse_observation(raw).taxon.scientific_name == expected

    def test_event_date_range(self) -> None:
        raw = {**SAMPLE_OCCURRENCE, "eventDate": "2025-06-01/2025-06-03"}
        assert parse_observation(raw).observed_on == date(2025, 6, 1)


# =============================================================================
# Adapter Tests
# =============================================================================


class TestAdapter:
    def test_search(self, make_session: SessionFactory) -> None:
        session = make_session({"count": 9876, "results": [SAMPLE_OCCURRENCE]})
        result = GBIFAdapter(session=session).search(QUERY, WEEK)

        assert result.total_results == 9876
        assert len(result.observations) == 1
        assert session.get.call_args[0][0] == "https://api.gbif.org/v1/occurrence/search"

    def test_failure(self, make_session: SessionFactory, error_response: Callable[..., Mock]) -> None:
        adapter = GBIFAdapter(session=make_session(error_response(500, "Internal Server Error")))
        with pytest.raises(SourceError, match="GBIF API error: 500 Internal Server Error"):
            adapter.search(QUERY, WEEK)

    def test_record_without_key_skipped(self, make_session: SessionFactory) -> None:
        no_key = {k: v for k, v in SAMPLE_OCCURRENCE.items() if k != "key"}
        session = make_session({"count": 2, "results": [no_key, SAMPLE_OCCURRENCE]})
        result = GBIFAdapter(session=session).search(QUERY, WEEK)
        assert [o.id for o in result.observations] == ["4512345678"]

    def test_malformed_record_is_source_error(self, make_session: SessionFactory) -> None:
        session = make_session({"count": 1, "results": [{**SAMPLE_OCCURRENCE, "media": "photo.jpg"}]})
        with pytest.raises(SourceError, match="GBIF API error: invalid response"):
            GBIFAdapter(session=session).search(QUERY, WEEK)

    def test_search_taxa(self, make_session: SessionFactory) -> None:
        payload = [
            {
                "key": 2480830,
                "canonicalName": "Ardea herodias",
                "scientificName": "Ardea herodias Linnaeus, 1758",
                "rank": "SPECIES",
                "kingdom": "Animalia",
                "class": "Aves",
            }
        ]
        session = make_session(payload)
        suggestions = GBIFAdapter(session=session).search_taxa("ardea")

        assert len(suggestions) == 1
        s = suggestions[0]
        assert s.id == "2480830"
        assert s.name == "Ardea herodias"
        assert s.rank == "species"
        assert s.iconic_category is IconicCategory.AVES
        assert s.photo_url is None
        assert session.get.call_args.kwargs["params"] == {"q": "ardea", "limit": 8}

    def test_search_taxa_blank(self, make_session: SessionFactory) -> None:
        session = make_session([])
        assert GBIFAdapter(session=session).search_taxa("") == []
        session.get.assert_not_called()

    def test_search_taxa_failure(self, make_session: SessionFactory, error_response: Callable[..., Mock]) -> None:
        assert GBIFAdapter(session=make_session(error_response())).search_taxa("ardea") == []


# =============================================================================
# Dashboard Aggregate Tests
# =============================================================================


class TestGlobalStats:
    def test_three_counts(self, make_session: SessionFactory) -> None:
        def route(url: str, params: dict[str, Any]) -> Any:
            if url.endswith("occurrence/count"):
                return 2_900_000_000
            if url.endswith("species/search"):
                assert params == {"limit": 0, "rank": "SPECIES", "status": "ACCEPTED"}
                return {"count": 2_600_000}
            return {"count": 100_000}

        stats = fetch_global_stats(GBIFClient(make_session(route)))
        assert stats.total_occurrences == 2_900_000_000
        assert stats.total_species == 2_600_000
        assert stats.total_datasets == 100_000

    def test_failed_count_reads_zero(
        self, make_session: SessionFactory, error_response: Callable[..., Mock]
    ) -> None:
        def route(url: str, params: dict[str, Any]) -> Any:
            if url.endswith("dataset/search"):
                return error_response()
            if url.endswith("occurrence/count"):
                return 5
            return {"count": 7}

        stats = fetch_global_stats(GBIFClient(make_session(route)))
        assert stats.total_occurrences == 5
        assert stats.total_species == 7
        assert stats.total_datasets == 0


class TestKingdomCounts:
    def test_sorted_with_failures_as_zero(
        self, make_session: SessionFactory, error_response: Callable[..., Mock]
    ) -> None:
        counts = {1: 2_000, 6: 500, 5: 300, 4: 50}

        def route(url: str, params: dict[str, Any]) -> Any:
            if params["taxonKey"] == 3:
                return error_response()
            return {"count": counts[params["taxonKey"]]}

        kingdoms = fetch_kingdom_counts(GBIFClient(make_session(route)))

        assert [k.name for k in kingdoms] == ["Animalia", "Plantae", "Fungi", "Chromista", "Bacteria"]
        assert kingdoms[-1].count == 0


class TestTopCountries:
    def test_top_twelve_with_names_and_flags(self, make_session: SessionFactory) -> None:
        data = {f"COUNTRY_{i}": i for i in range(20)}
        data["UNITED_STATES"] = 1_000
        data["NEW_CALEDONIA"] = 500

        countries = fetch_top_countries(GBIFClient(make_session(data)))

        assert len(countries) == 12
        assert countries[0].name == "United States"
        assert countries[0].flag == "🇺🇸"
        assert countries[1].name == "New Caledonia"
        assert countries[1].flag == "🌍"
        assert [c.count for c in countries] == sorted((c.count for c in countries), reverse=True)

    def test_failure_raises(self, make_session: SessionFactory, error_response: Callable[..., Mock]) -> None:
        with pytest.raises(SourceError):
            fetch_top_countries(GBIFClient(make_session(error_response())))
