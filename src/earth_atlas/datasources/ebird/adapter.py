"""eBird source adapter."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING

from earth_atlas.datasources.base import parse_records
from earth_atlas.datasources.ebird import observations
from earth_atlas.datasources.ebird.client import EBirdClient
from earth_atlas.datasources.ebird.photos import PhotoCache
from earth_atlas.datasources.ebird.stats import EBirdDashboard, fetch_dashboard_stats
from earth_atlas.datasources.ebird.taxonomy import EBirdTaxonomy, TaxonomyEntry
from earth_atlas.datasources.inaturalist.client import INatClient
from earth_atlas.errors import SourceError
from earth_atlas.schemas import DateRange, Query, SearchResult, Source, TaxonSuggestion

if TYPE_CHECKING:
    import requests

logger = logging.getLogger(__name__)


class EBirdAdapter:
    """
    Queries eBird recent observations near a point.

    Owns two caches for its whole lifetime: the species taxonomy (loaded on
    first use) and species photos looked up on iNaturalist.  Build a fresh
    adapter to start with empty caches.
    """

    source = Source.EBIRD

    def __init__(
        self,
        api_key: str | None = None,
        *,
        client: EBirdClient | None = None,
        photo_client: INatClient | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.client = client or EBirdClient(api_key, session)
        self.taxonomy = EBirdTaxonomy()
        self.photos = PhotoCache(photo_client or INatClient(session))

    def load_taxonomy(self) -> list[TaxonomyEntry]:
        return self.taxonomy.load(self.client)

    def resolve_species_code(self, taxon_id: str | None) -> str | None:
        """
        Map a species name to its code, loading the taxonomy on first use.

        Unknown names, and any name while the taxonomy is unreachable, are
        passed through as if they were already a code.
        """
        if not taxon_id:
            return None
        try:
            self.load_taxonomy()
        except SourceError as exc:
            logger.warning("eBird taxonomy unavailable, using %r as code: %s", taxon_id, exc)
            return taxon_id
        return self.taxonomy.species_code_for(taxon_id) or taxon_id

    def search(self, query: Query, dates: DateRange) -> SearchResult:
        # eBird works in "days back" from today, derived from the window itself
        species_code = self.resolve_species_code(query.taxon_id)
        raw = self.client.get_recent_observations(observations.build_params(query), species_code)

        photos = self.photos.resolve(r.get("sciName") or "" for r in raw if isinstance(r, dict))
        results = parse_records(
            self.client.label,
            raw,
            lambda r: observations.parse_observation(r, photos.get(r.get("sciName") or "")),
            "subId",
        )
        return SearchResult(total_results=len(raw), observations=results)

    def search_taxa(self, text: str) -> list[TaxonSuggestion]:
        if not text.strip():
            return []
        try:
            self.load_taxonomy()
        except SourceError as exc:
            logger.warning("eBird taxonomy unavailable: %s", exc)
            return []
        return self.taxonomy.search(text)

    def dashboard(self, day: date | None = None) -> EBirdDashboard:
        return fetch_dashboard_stats(self.client, day)
