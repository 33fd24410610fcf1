"""
Species photos for eBird sightings.

eBird records carry no media, so each species is looked up once on
iNaturalist by scientific name.  Results stay cached for the lifetime of the
cache object, failures included (stored as "no photo").
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from typing import TYPE_CHECKING

from earth_atlas.errors import SourceError
from earth_atlas.services.concurrency import gather

if TYPE_CHECKING:
    from earth_atlas.datasources.inaturalist.client import INatClient

logger = logging.getLogger(__name__)


class PhotoCache:
    """Scientific name → photo URL (or None), never evicted."""

    def __init__(self, inat: INatClient) -> None:
        self.inat = inat
        self._photos: dict[str, str | None] = {}
        self._lock = threading.Lock()

    def __contains__(self, scientific_name: object) -> bool:
        with self._lock:
            return scientific_name in self._photos

    def get(self, scientific_name: str) -> str | None:
        with self._lock:
            return self._photos.get(scientific_name)

    def _lookup(self, scientific_name: str) -> str | None:
        try:
            data = self.inat.get_taxa_autocomplete({"q": scientific_name, "per_page": 1})
        except SourceError as exc:
            logger.debug("No photo for %s: %s", scientific_name, exc)
            return None
        results = data.get("results") or []
        if not results:
            return None
        photo = results[0].get("default_photo") or {}
        url: str | None = photo.get("square_url")
        return url

    def resolve(self, scientific_names: Iterable[str]) -> dict[str, str | None]:
        """
        Make sure every name in the batch has a cached entry.

        Names not yet cached are looked up in parallel, one request per unique
        name.  Returns the photo mapping for the requested names.
        """
        unique = list(dict.fromkeys(n for n in scientific_names if n))
        with self._lock:
            missing = [n for n in unique if n not in self._photos]

        outcomes = gather([lambda n=n: self._lookup(n) for n in missing])  # type: ignore[misc]
        with self._lock:
            for name, outcome in zip(missing, outcomes, strict=True):
                self._photos.setdefault(name, outcome.value)
            return {n: self._photos.get(n) for n in unique}
