"""Tests for time windows and the query orchestrator."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from unittest.mock import Mock

import pytest

from earth_atlas.config import Settings
from earth_atlas.datasources.ebird import EBirdAdapter
from earth_atlas.datasources.gbif import GBIFAdapter
from earth_atlas.datasources.inaturalist import INaturalistAdapter
from earth_atlas.errors import ConfigurationError, SourceError
from earth_atlas.query import QueryOrchestrator, build_adapters, date_bounds, window_start
from earth_atlas.schemas import DateRange, Point, Query, SearchResult, Source, TimeWindow

NOW = datetime(2025, 6, 15, 12, 30)


class TestWindowStart:
    @pytest.mark.parametrize(
        ("window", "expected"),
        [
            (TimeWindow.HOUR, NOW - timedelta(hours=1)),
            (TimeWindow.DAY, NOW - timedelta(days=1)),
            (TimeWindow.WEEK, NOW - timedelta(days=7)),
            (TimeWindow.MONTH, datetime(2025, 5, 15, 12, 30)),
            (TimeWindow.YEAR, datetime(2024, 6, 15, 12, 30)),
        ],
    )
    def test_offsets(self, window: TimeWindow, expected: datetime) -> None:
        assert window_start(window, NOW) == expected

    def test_all_has_no_start(self) -> None:
        assert window_start(TimeWindow.ALL, NOW) is None

    def test_accepts_string(self) -> None:
        assert window_start("week", NOW) == NOW - timedelta(days=7)

    def test_month_clamps_to_last_day(self) -> None:
        assert window_start(TimeWindow.MONTH, datetime(2025, 3, 31)) == datetime(2025, 2, 28)

    def test_month_crosses_year(self) -> None:
        assert window_start(TimeWindow.MONTH, datetime(2025, 1, 10)) == datetime(2024, 12, 10)

    def test_year_from_leap_day(self) -> None:
        assert window_start(TimeWindow.YEAR, datetime(2024, 2, 29)) == datetime(2023, 2, 28)

    def test_unknown_window(self) -> None:
        with pytest.raises(ValueError):
            window_start("decade", NOW)


class TestDateBounds:
    def test_end_is_today_when_bounded(self) -> None:
        bounds = date_bounds(TimeWindow.WEEK, NOW)
        assert bounds == DateRange(start=date(2025, 6, 8), end=date(2025, 6, 15))

    def test_hour_may_stay_on_same_day(self) -> None:
        bounds = date_bounds(TimeWindow.HOUR, NOW)
        assert bounds.start == bounds.end == date(2025, 6, 15)

    def test_all_unbounded(self) -> None:
        bounds = date_bounds(TimeWindow.ALL, NOW)
        assert bounds.start is None
        assert bounds.end is None


def _adapter(source: Source, result: SearchResult | Exception) -> Mock:
    adapter = Mock()
    adapter.source = source
    if isinstance(result, Exception):
        adapter.search.side_effect = result
    else:
        adapter.search.return_value = result
    return adapter


class TestQueryOrchestrator:
    query = Query(center=Point(latitude=45.5, longitude=-122.6), time_window=TimeWindow.WEEK)

    def test_delegates_to_active_adapter(self) -> None:
        inat = _adapter(Source.INATURALIST, SearchResult(total_results=7))
        gbif = _adapter(Source.GBIF, SearchResult.empty())
        orch = QueryOrchestrator({Source.INATURALIST: inat, Source.GBIF: gbif}, Source.INATURALIST)

        result = orch.search(self.query, NOW)

        assert result.total_results == 7
        inat.search.assert_called_once_with(
            self.query, DateRange(start=date(2025, 6, 8), end=date(2025, 6, 15))
        )
        gbif.search.assert_not_called()

    def test_switch(self) -> None:
        inat = _adapter(Source.INATURALIST, SearchResult.empty())
        gbif = _adapter(Source.GBIF, SearchResult(total_results=3))
        orch = QueryOrchestrator({Source.INATURALIST: inat, Source.GBIF: gbif}, "inaturalist")

        orch.switch("gbif")

        assert orch.active is Source.GBIF
        assert orch.search(self.query, NOW).total_results == 3

    def test_switch_to_unconfigured_source(self) -> None:
        orch = QueryOrchestrator({Source.GBIF: _adapter(Source.GBIF, SearchResult.empty())}, Source.GBIF)
        with pytest.raises(ConfigurationError):
            orch.switch(Source.EBIRD)

    def test_requires_adapters(self) -> None:
        with pytest.raises(ConfigurationError):
            QueryOrchestrator({}, Source.GBIF)

    def test_adapter_failure_propagates(self) -> None:
        failing = _adapter(Source.GBIF, SourceError("GBIF", "GBIF API error: 503 Service Unavailable"))
        orch = QueryOrchestrator({Source.GBIF: failing}, Source.GBIF)
        with pytest.raises(SourceError, match="503"):
            orch.search(self.query, NOW)


class TestBuildAdapters:
    def test_one_per_source(self) -> None:
        adapters = build_adapters(Settings(ebird_api_key="k"), session=Mock())
        assert isinstance(adapters[Source.INATURALIST], INaturalistAdapter)
        assert isinstance(adapters[Source.EBIRD], EBirdAdapter)
        assert isinstance(adapters[Source.GBIF], GBIFAdapter)

    def test_ebird_key_passed_through(self) -> None:
        adapters = build_adapters(Settings(ebird_api_key="secret"), session=Mock())
        ebird = adapters[Source.EBIRD]
        assert isinstance(ebird, EBirdAdapter)
        assert ebird.client.api_key == "secret"
