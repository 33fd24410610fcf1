"""Static reference data.

Tables that don't change with API calls: taxon display metadata, dashboard
region lists, per-source option sets.

Adding a new module:
1. Create ``reference/{name}.py`` with constants/dataclasses
2. Re-export from this ``__init__.py``
"""

from earth_atlas.reference.options import COUNT_OPTIONS as COUNT_OPTIONS
from earth_atlas.reference.options import RADIUS_OPTIONS_BY_SOURCE as RADIUS_OPTIONS_BY_SOURCE
from earth_atlas.reference.options import TIME_WINDOW_LABELS as TIME_WINDOW_LABELS
from earth_atlas.reference.options import TIME_WINDOWS_BY_SOURCE as TIME_WINDOWS_BY_SOURCE
from earth_atlas.reference.taxa import DEFAULT_META as DEFAULT_META
from earth_atlas.reference.taxa import TAXON_FILTER_OPTIONS as TAXON_FILTER_OPTIONS
from earth_atlas.reference.taxa import TAXON_META as TAXON_META
from earth_atlas.reference.taxa import TaxonMeta as TaxonMeta
from earth_atlas.reference.taxa import taxon_meta as taxon_meta
