"""GBIF data source (aggregated occurrence records, keyless).

Public API:
  - client: GBIFClient
  - taxa: derive_iconic_category, search_taxa
  - observations: build_params, parse_observation
  - stats: fetch_global_stats, fetch_kingdom_counts, fetch_top_countries
  - adapter: GBIFAdapter (the SourceAdapter for this source)
"""

from earth_atlas.datasources.gbif.adapter import GBIFAdapter
from earth_atlas.datasources.gbif.client import GBIFClient
from earth_atlas.datasources.gbif.observations import build_params, parse_observation
from earth_atlas.datasources.gbif.stats import (
    CountryCount,
    GlobalStats,
    KingdomCount,
    fetch_global_stats,
    fetch_kingdom_counts,
    fetch_top_countries,
)
from earth_atlas.datasources.gbif.taxa import derive_iconic_category, search_taxa

__all__ = [
    "CountryCount",
    "GBIFAdapter",
    "GBIFClient",
    "GlobalStats",
    "KingdomCount",
    "build_params",
    "derive_iconic_category",
    "fetch_global_stats",
    "fetch_kingdom_counts",
    "fetch_top_countries",
    "parse_observation",
    "search_taxa",
]
