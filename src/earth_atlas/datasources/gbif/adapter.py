"""GBIF source adapter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from earth_atlas.datasources.gbif import observations, taxa
from earth_atlas.datasources.gbif.client import GBIFClient
from earth_atlas.schemas import DateRange, Query, SearchResult, Source, TaxonSuggestion

if TYPE_CHECKING:
    import requests


class GBIFAdapter:
    """Queries GBIF occurrences inside the bounding box of the search circle."""

    source = Source.GBIF

    def __init__(
        self,
        client: GBIFClient | None = None,
        *,
        session: requests.Session | None = None,
    ) -> None:
        self.client = client or GBIFClient(session)

    def search(self, query: Query, dates: DateRange) -> SearchResult:
        data = self.client.search_occurrences(observations.build_params(query, dates))
        return observations.parse_search_response(data)

    def search_taxa(self, text: str) -> list[TaxonSuggestion]:
        return taxa.search_taxa(self.client, text)
