"""Earth Atlas - discover wildlife observed near a location.

Architecture::

    datasources/   External APIs (iNaturalist, eBird, GBIF, geocoding)
    schemas.py     Canonical Observation / Query shapes every source normalizes to
    query.py       Time-window translation + orchestrator over the active source
    filters.py     Client-side narrowing by iconic category
    feed.py        Current result set, guarded against stale responses
    dashboard.py   Best-effort aggregate panels (global counts, top species, ...)
    autocomplete.py Debounced type-ahead for species and place boxes
    cli.py         earth-atlas command line
    reference/     Static tables (taxon colors/emoji, regions, option sets)
    services/      Shared utilities (HTTP session, staleness guard, debouncer)

Data flow: query → orchestrator → source adapter → external API →
normalized observations → filter → presentation.

Extension points, see each package's docstring for step-by-step guides:
  - New data source:   datasources/__init__.py
"""

__version__ = "0.1.0"

from earth_atlas.config import Settings
from earth_atlas.schemas import Observation, Query, SearchResult

__all__ = ["Observation", "Query", "SearchResult", "Settings", "__version__"]
