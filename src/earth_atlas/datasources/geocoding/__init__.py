"""Geocoding: Nominatim reverse lookup and Mapbox place search.

Public API:
  - client: NominatimClient, MapboxClient
  - places: reverse_geocode (never raises), search_places
"""

from earth_atlas.datasources.geocoding.client import MapboxClient, NominatimClient
from earth_atlas.datasources.geocoding.places import format_address, reverse_geocode, search_places

__all__ = [
    "MapboxClient",
    "NominatimClient",
    "format_address",
    "reverse_geocode",
    "search_places",
]
