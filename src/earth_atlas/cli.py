"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from dataclasses import asdict, is_dataclass
from datetime import date
from typing import Any

import requests

from earth_atlas import __version__
from earth_atlas.config import Settings, get_settings
from earth_atlas.dashboard import (
    Dashboard,
    ebird_dashboard,
    gbif_dashboard,
    inaturalist_dashboard,
)
from earth_atlas.datasources.ebird import EBirdAdapter, EBirdDashboard
from earth_atlas.datasources.gbif import GBIFAdapter
from earth_atlas.datasources.geocoding import MapboxClient, NominatimClient, reverse_geocode, search_places
from earth_atlas.datasources.inaturalist import INaturalistAdapter
from earth_atlas.errors import EarthAtlasError
from earth_atlas.filters import category_counts, filter_observations
from earth_atlas.query import QueryOrchestrator, build_adapters
from earth_atlas.reference.options import COUNT_OPTIONS, TIME_WINDOW_LABELS
from earth_atlas.reference.taxa import ALL, taxon_meta
from earth_atlas.schemas import IconicCategory, Observation, Point, Query, Source, TimeWindow
from earth_atlas.services.http import create_session

logger = logging.getLogger(__name__)

SOURCES = [s.value for s in Source]
CATEGORIES = [ALL, *(c.value for c in IconicCategory)]


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="earth-atlas",
        description="Explore recent wildlife observations from iNaturalist, eBird and GBIF",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'search' command - observations near a point
    search_parser = subparsers.add_parser("search", help="Search observations near a point")
    _add_point_args(search_parser)
    search_parser.add_argument("--radius", type=float, default=5, help="Radius in km (default: 5)")
    search_parser.add_argument(
        "--window",
        choices=[w.value for w in TimeWindow],
        default=TimeWindow.DAY.value,
        help="How far back to search (default: day)",
    )
    search_parser.add_argument(
        "--count",
        type=int,
        choices=COUNT_OPTIONS,
        default=50,
        help="Maximum results (default: 50)",
    )
    search_parser.add_argument("--source", choices=SOURCES, default=None, help="Data source")
    search_parser.add_argument("--taxon", default=None, help="Taxon id, eBird species code or GBIF key")
    search_parser.add_argument(
        "--category",
        choices=CATEGORIES,
        default=ALL,
        help="Show only one iconic category (filtered locally)",
    )

    # 'species' command - taxon autocomplete
    species_parser = subparsers.add_parser("species", help="Look up species by name")
    species_parser.add_argument("text", help="Name or partial name")
    species_parser.add_argument("--source", choices=SOURCES, default=None, help="Data source")

    # 'place' command - forward geocoding
    place_parser = subparsers.add_parser("place", help="Find places by name (needs a Mapbox token)")
    place_parser.add_argument("text", help="Place name")

    # 'where' command - reverse geocoding
    where_parser = subparsers.add_parser("where", help="Describe a coordinate")
    _add_point_args(where_parser)

    # 'stats' command - aggregate dashboard
    stats_parser = subparsers.add_parser("stats", help="Show a source's dashboard")
    stats_parser.add_argument("--source", choices=SOURCES, default=None, help="Data source")
    stats_parser.add_argument(
        "--range",
        choices=["all", "30d", "today"],
        default="all",
        help="iNaturalist: time range for top species/countries (default: all)",
    )
    stats_parser.add_argument(
        "--date",
        type=date.fromisoformat,
        default=None,
        help="eBird: day for regional activity, YYYY-MM-DD (default: today)",
    )

    # 'info' command
    subparsers.add_parser("info", help="Show application info")

    return parser


def _add_point_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--lat", type=float, default=None, help="Latitude (default from settings)")
    parser.add_argument("--lon", type=float, default=None, help="Longitude (default from settings)")


def _point(args: argparse.Namespace, settings: Settings) -> Point:
    lat = args.lat if args.lat is not None else settings.lat
    lon = args.lon if args.lon is not None else settings.lon
    return Point(latitude=lat, longitude=lon)


def _source(args: argparse.Namespace, settings: Settings) -> Source:
    return Source(args.source or settings.default_source)


def _session(settings: Settings) -> requests.Session:
    return create_session(timeout=settings.http_timeout, user_agent=settings.user_agent)


def format_observation(obs: Observation) -> str:
    """One line per observation: icon, name, date, place, grade."""
    meta = taxon_meta(obs.iconic_category)
    name = obs.taxon.display_name
    if obs.taxon.common_name:
        name = f"{name} ({obs.taxon.scientific_name})"
    observed = obs.observed_on.isoformat() if obs.observed_on else "date unknown"
    place = obs.place_guess or "location unknown"
    line = f"{meta.emoji} {name} | {observed} | {place} | {obs.quality_grade.value}"
    if obs.individual_count:
        line += f" | x{obs.individual_count}"
    return line


def cmd_search(args: argparse.Namespace) -> int:
    """Handle the 'search' command."""
    settings = get_settings()
    source = _source(args, settings)
    query = Query(
        center=_point(args, settings),
        radius_km=args.radius,
        time_window=TimeWindow(args.window),
        per_page=args.count,
        taxon_id=args.taxon,
    )
    orchestrator = QueryOrchestrator(build_adapters(settings, _session(settings)), source)
    result = orchestrator.search(query)

    shown = filter_observations(result.observations, args.category)
    print(
        f"{source.label}: {result.total_results} observations within {query.radius_km:g} km "
        f"of {query.center.label()}, {TIME_WINDOW_LABELS[query.time_window]}"
    )
    if not result.observations:
        print("No observations found.")
        return 0

    counts = ", ".join(f"{name} {n}" for name, n in category_counts(result.observations).items())
    print(f"Categories: {counts}")
    for obs in shown:
        print(f"  {format_observation(obs)}")
    return 0


def cmd_species(args: argparse.Namespace) -> int:
    """Handle the 'species' command."""
    settings = get_settings()
    adapter = build_adapters(settings, _session(settings))[_source(args, settings)]
    suggestions = adapter.search_taxa(args.text)
    if not suggestions:
        print("No matches.")
        return 0
    for s in suggestions:
        meta = taxon_meta(s.iconic_category)
        print(f"  {s.id:>12}  {meta.emoji} {s.name} ({s.scientific_name})")
    return 0


def cmd_place(args: argparse.Namespace) -> int:
    """Handle the 'place' command."""
    settings = get_settings()
    if not settings.mapbox_token:
        print("Place search needs EARTH_ATLAS_MAPBOX_TOKEN.", file=sys.stderr)
        return 1
    places = search_places(args.text, MapboxClient(settings.mapbox_token, _session(settings)))
    if not places:
        print("No matches.")
        return 0
    for p in places:
        print(f"  {p.point.label()}  {p.name}")
    return 0


def cmd_where(args: argparse.Namespace) -> int:
    """Handle the 'where' command."""
    settings = get_settings()
    print(reverse_geocode(_point(args, settings), NominatimClient(_session(settings))))
    return 0


_COUNT_FIELDS = ("count", "observation_count", "num_checklists")


def _describe(item: Any) -> str:
    """Ranked-list row: icon, name and its count."""
    icon = getattr(item, "flag", None) or getattr(item, "emoji", None) or ""
    name = getattr(item, "display_name", None) or getattr(item, "name", str(item))
    count = next((getattr(item, f) for f in _COUNT_FIELDS if hasattr(item, f)), None)
    text = f"{icon} {name}".strip()
    return f"{text}: {count:,}" if count is not None else text


def _print_dashboard(dashboard: Dashboard) -> None:
    print(f"{dashboard.source.label} dashboard")
    for panel in dashboard.panels.values():
        value = panel.value
        if not panel.ok or not (isinstance(value, list) or is_dataclass(value)):
            print(f"  {panel.name}: {panel.display(lambda v: f'{v:,}')}")
            continue
        print(f"  {panel.name}:")
        if isinstance(value, EBirdDashboard):
            print(
                f"    {value.day.isoformat()}: {value.total_checklists:,} checklists, "
                f"{value.total_species:,} species, {value.total_contributors:,} contributors"
            )
            value = value.regions
        if isinstance(value, list):
            for item in value:
                print(f"    {_describe(item)}")
        else:
            for key, number in asdict(value).items():
                print(f"    {key.replace('_', ' ')}: {number:,}")


def cmd_stats(args: argparse.Namespace) -> int:
    """Handle the 'stats' command."""
    settings = get_settings()
    session = _session(settings)
    source = _source(args, settings)
    if source is Source.EBIRD:
        dashboard = ebird_dashboard(EBirdAdapter(settings.ebird_api_key, session=session), args.date)
    elif source is Source.GBIF:
        dashboard = gbif_dashboard(GBIFAdapter(session=session))
    else:
        dashboard = inaturalist_dashboard(INaturalistAdapter(session=session), args.range)
    _print_dashboard(dashboard)
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Default source: {settings.default_source}")
    print(f"Default location: {settings.lat}, {settings.lon}")
    print(f"eBird key: {'set' if settings.ebird_api_key else 'not set'}")
    print(f"Mapbox token: {'set' if settings.mapbox_token else 'not set'}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    level = logging.DEBUG if args.debug or settings.debug else settings.log_level.upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "search": cmd_search,
        "species": cmd_species,
        "place": cmd_place,
        "where": cmd_where,
        "stats": cmd_stats,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 1
    try:
        return handler(args)
    except EarthAtlasError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
