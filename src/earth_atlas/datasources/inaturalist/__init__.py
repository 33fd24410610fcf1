"""iNaturalist data source.

Public API:
  - client: Low-level HTTP (one method per endpoint)
  - observations: build_params, parse_observation, parse_search_response
  - taxa: search_taxa (autocomplete, up to 8 candidates)
  - stats: GlobalCounts, SpeciesRecord, CountryCount and their fetch functions
  - adapter: INaturalistAdapter (the SourceAdapter for this source)
"""

from earth_atlas.datasources.inaturalist.adapter import INaturalistAdapter
from earth_atlas.datasources.inaturalist.client import INatClient
from earth_atlas.datasources.inaturalist.observations import parse_observation
from earth_atlas.datasources.inaturalist.stats import (
    CountryCount,
    GlobalCounts,
    SpeciesRecord,
    dashboard_range,
    fetch_global_counts,
    fetch_top_countries,
    fetch_top_species,
)

__all__ = [
    "CountryCount",
    "GlobalCounts",
    "INatClient",
    "INaturalistAdapter",
    "SpeciesRecord",
    "dashboard_range",
    "fetch_global_counts",
    "fetch_top_countries",
    "fetch_top_species",
    "parse_observation",
]
