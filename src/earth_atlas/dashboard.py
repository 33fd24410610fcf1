"""
Per-source aggregate dashboards.

A dashboard is a handful of independent panels (global totals, top species,
regional activity, ...).  All panels of a dashboard load in parallel and each
succeeds or fails on its own: a failed panel keeps no value and renders as
:data:`PLACEHOLDER`, while its neighbours are unaffected.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from earth_atlas.datasources.ebird import EBirdAdapter
from earth_atlas.datasources.gbif import GBIFAdapter, fetch_global_stats, fetch_kingdom_counts
from earth_atlas.datasources.gbif import fetch_top_countries as fetch_gbif_top_countries
from earth_atlas.datasources.inaturalist import (
    INaturalistAdapter,
    dashboard_range,
    fetch_global_counts,
    fetch_top_countries,
    fetch_top_species,
)
from earth_atlas.schemas import Source
from earth_atlas.services.concurrency import gather

logger = logging.getLogger(__name__)

PLACEHOLDER = "—"


@dataclass
class Panel:
    """One dashboard panel: a loaded value, or the reason it has none."""

    name: str
    value: Any = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def display(self, fmt: Callable[[Any], str] = str) -> str:
        return fmt(self.value) if self.ok else PLACEHOLDER


@dataclass
class Dashboard:
    source: Source
    panels: dict[str, Panel] = field(default_factory=dict)

    def __getitem__(self, name: str) -> Panel:
        return self.panels[name]


def load_panels(source: Source, loaders: dict[str, Callable[[], Any]]) -> Dashboard:
    """Load every panel concurrently; failures are recorded, never raised."""
    names = list(loaders)
    outcomes = gather([loaders[n] for n in names])
    dashboard = Dashboard(source=source)
    for name, outcome in zip(names, outcomes, strict=True):
        if outcome.error is not None:
            logger.warning("%s dashboard panel %r failed: %s", source.label, name, outcome.error)
            dashboard.panels[name] = Panel(name, error=str(outcome.error))
        else:
            dashboard.panels[name] = Panel(name, value=outcome.value)
    return dashboard


def inaturalist_dashboard(
    adapter: INaturalistAdapter, range_key: str = "all", today: date | None = None
) -> Dashboard:
    """Global counts, plus top species and countries for ``all``, ``30d`` or ``today``."""
    dates = dashboard_range(range_key, today)
    inat = adapter.client
    return load_panels(
        Source.INATURALIST,
        {
            "global": lambda: fetch_global_counts(inat),
            "top_species": lambda: fetch_top_species(inat, dates=dates),
            "top_countries": lambda: fetch_top_countries(inat, dates),
        },
    )


def ebird_dashboard(adapter: EBirdAdapter, day: date | None = None) -> Dashboard:
    """Species in the taxonomy, plus one day's activity across tracked countries."""
    return load_panels(
        Source.EBIRD,
        {
            "species": lambda: len(adapter.load_taxonomy()),
            "regions": lambda: adapter.dashboard(day),
        },
    )


def gbif_dashboard(adapter: GBIFAdapter) -> Dashboard:
    gbif = adapter.client
    return load_panels(
        Source.GBIF,
        {
            "global": lambda: fetch_global_stats(gbif),
            "kingdoms": lambda: fetch_kingdom_counts(gbif),
            "top_countries": lambda: fetch_gbif_top_countries(gbif),
        },
    )
