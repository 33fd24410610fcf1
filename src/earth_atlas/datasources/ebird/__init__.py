"""eBird data source (birds only, API key required).

Public API:
  - client: EBirdClient (key header, one method per endpoint)
  - taxonomy: EBirdTaxonomy (species-level table, local autocomplete)
  - photos: PhotoCache (per-species photo lookup on iNaturalist)
  - observations: build_params, parse_observation, time_window_to_days
  - stats: RegionStats, EBirdDashboard, fetch_dashboard_stats
  - adapter: EBirdAdapter (the SourceAdapter for this source)
"""

from earth_atlas.datasources.ebird.adapter import EBirdAdapter
from earth_atlas.datasources.ebird.client import MAX_RADIUS_KM, EBirdClient
from earth_atlas.datasources.ebird.observations import parse_observation, time_window_to_days
from earth_atlas.datasources.ebird.photos import PhotoCache
from earth_atlas.datasources.ebird.stats import EBirdDashboard, RegionStats, fetch_dashboard_stats
from earth_atlas.datasources.ebird.taxonomy import EBirdTaxonomy, TaxonomyEntry

__all__ = [
    "MAX_RADIUS_KM",
    "EBirdAdapter",
    "EBirdClient",
    "EBirdDashboard",
    "EBirdTaxonomy",
    "PhotoCache",
    "RegionStats",
    "TaxonomyEntry",
    "fetch_dashboard_stats",
    "parse_observation",
    "time_window_to_days",
]
