"""
Query orchestration: time windows → date bounds, and dispatch to the active source.

The orchestrator holds no result state; see :mod:`earth_atlas.feed` for the
"only the latest search is current" bookkeeping.
"""

from __future__ import annotations

import calendar
import logging
from collections.abc import Mapping
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from earth_atlas.datasources.ebird import EBirdAdapter
from earth_atlas.datasources.gbif import GBIFAdapter
from earth_atlas.datasources.inaturalist import INaturalistAdapter
from earth_atlas.errors import ConfigurationError
from earth_atlas.schemas import DateRange, Query, SearchResult, Source, TimeWindow

if TYPE_CHECKING:
    import requests

    from earth_atlas.config import Settings
    from earth_atlas.datasources.base import SourceAdapter

logger = logging.getLogger(__name__)


def _shift_months(moment: datetime, months: int) -> datetime:
    """Move back ``months`` calendar months, clamping to the month's last day."""
    index = moment.year * 12 + (moment.month - 1) - months
    year, month = divmod(index, 12)
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def window_start(window: TimeWindow | str, now: datetime | None = None) -> datetime | None:
    """
    Earliest moment a time window reaches back to.

    ``all`` has no start.  Month and year are calendar steps, so March 31
    minus a month is the last day of February.
    """
    now = now or datetime.now()
    window = TimeWindow(window)
    if window is TimeWindow.HOUR:
        return now - timedelta(hours=1)
    if window is TimeWindow.DAY:
        return now - timedelta(days=1)
    if window is TimeWindow.WEEK:
        return now - timedelta(days=7)
    if window is TimeWindow.MONTH:
        return _shift_months(now, 1)
    if window is TimeWindow.YEAR:
        return _shift_months(now, 12)
    return None


def date_bounds(window: TimeWindow | str, now: datetime | None = None) -> DateRange:
    """ISO-date bounds for a window; the end is today whenever a start exists."""
    now = now or datetime.now()
    start = window_start(window, now)
    if start is None:
        return DateRange()
    return DateRange(start=start.date(), end=now.date())


class QueryOrchestrator:
    """
    Runs a :class:`Query` against whichever source is active.

    Adapter failures propagate as ``SourceError`` (or ``ConfigurationError``
    when a credential is missing); callers treat the result set as empty.
    """

    def __init__(self, adapters: Mapping[Source, SourceAdapter], active: Source | str) -> None:
        if not adapters:
            raise ConfigurationError("At least one source adapter is required")
        self.adapters = dict(adapters)
        self.active = self._check(Source(active))

    def _check(self, source: Source) -> Source:
        if source not in self.adapters:
            raise ConfigurationError(f"No adapter configured for {source.label}")
        return source

    @property
    def adapter(self) -> SourceAdapter:
        return self.adapters[self.active]

    def switch(self, source: Source | str) -> None:
        """Make another configured source the active one."""
        self.active = self._check(Source(source))
        logger.debug("Active source is now %s", self.active.label)

    def search(self, query: Query, now: datetime | None = None) -> SearchResult:
        dates = date_bounds(query.time_window, now)
        logger.info(
            "Searching %s: %s within %s km, window=%s",
            self.active.label,
            query.center.label(),
            query.radius_km,
            query.time_window.value,
        )
        result = self.adapter.search(query, dates)
        logger.info("%s returned %d of %d", self.active.label, len(result.observations), result.total_results)
        return result


def build_adapters(
    settings: Settings, session: requests.Session | None = None
) -> dict[Source, SourceAdapter]:
    """One adapter per source, configured from settings."""
    return {
        Source.INATURALIST: INaturalistAdapter(session=session),
        Source.EBIRD: EBirdAdapter(settings.ebird_api_key, session=session),
        Source.GBIF: GBIFAdapter(session=session),
    }
