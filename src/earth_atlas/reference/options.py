"""Search option sets offered per source."""

from __future__ import annotations

from earth_atlas.schemas import Source, TimeWindow

RADIUS_OPTIONS_KM: tuple[int, ...] = (1, 5, 10, 25, 50, 100)
EBIRD_MAX_RADIUS_KM = 50

RADIUS_OPTIONS_BY_SOURCE: dict[Source, tuple[int, ...]] = {
    Source.INATURALIST: RADIUS_OPTIONS_KM,
    Source.EBIRD: tuple(r for r in RADIUS_OPTIONS_KM if r <= EBIRD_MAX_RADIUS_KM),
    Source.GBIF: RADIUS_OPTIONS_KM,  # bbox search, no hard limit
}

TIME_WINDOW_LABELS: dict[TimeWindow, str] = {
    TimeWindow.HOUR: "past hour",
    TimeWindow.DAY: "past day",
    TimeWindow.WEEK: "past week",
    TimeWindow.MONTH: "past month",
    TimeWindow.YEAR: "past year",
    TimeWindow.ALL: "all time",
}

TIME_WINDOWS_BY_SOURCE: dict[Source, tuple[TimeWindow, ...]] = {
    Source.INATURALIST: tuple(TimeWindow),
    # eBird recent observations reach back 30 days at most
    Source.EBIRD: (TimeWindow.HOUR, TimeWindow.DAY, TimeWindow.WEEK, TimeWindow.MONTH),
    Source.GBIF: tuple(TimeWindow),
}

COUNT_OPTIONS: tuple[int, ...] = (20, 50, 100, 200)
