"""iNaturalist source adapter."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from earth_atlas.datasources.inaturalist import observations, taxa
from earth_atlas.datasources.inaturalist.client import MAX_PER_PAGE, INatClient
from earth_atlas.schemas import DateRange, Query, SearchResult, Source, TaxonSuggestion

if TYPE_CHECKING:
    import requests


class INaturalistAdapter:
    """Queries iNaturalist; records already sit close to the shared shape."""

    source = Source.INATURALIST

    def __init__(
        self,
        client: INatClient | None = None,
        *,
        session: requests.Session | None = None,
    ) -> None:
        self.client = client or INatClient(session)

    def search(self, query: Query, dates: DateRange) -> SearchResult:
        params = observations.build_params(query, dates)
        data = self.client.get_observations(params)
        return observations.parse_search_response(data)

    def search_taxa(self, text: str) -> list[TaxonSuggestion]:
        return taxa.search_taxa(self.client, text)

    def fetch_species_observations(
        self,
        taxon_id: int | str,
        dates: DateRange | None = None,
        *,
        per_page: int = MAX_PER_PAGE,
    ) -> SearchResult:
        """Worldwide observations of one taxon, newest first (species map)."""
        params: dict[str, Any] = {
            "taxon_id": taxon_id,
            "per_page": min(per_page, MAX_PER_PAGE),
            "order": "desc",
            "order_by": "created_at",
            "quality_grade": "any",
        }
        if dates is not None and dates.start is not None:
            params["d1"] = dates.start.isoformat()
            params["d2"] = (dates.end or dates.start).isoformat()
        data = self.client.get_observations(params)
        return observations.parse_search_response(data)
