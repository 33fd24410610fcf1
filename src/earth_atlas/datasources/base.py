"""Shared pieces every source builds on: HTTP client base and adapter contract."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, ClassVar, Protocol

import requests

from earth_atlas.errors import SourceError
from earth_atlas.services.http import session as default_session

if TYPE_CHECKING:
    from earth_atlas.schemas import (
        DateRange,
        Observation,
        Query,
        SearchResult,
        Source,
        TaxonSuggestion,
    )

logger = logging.getLogger(__name__)


class ApiClient:
    """
    Thin JSON-over-HTTP client for one external API.

    Subclasses set ``label`` and ``base_url`` and add one method per
    endpoint.  Every transport or HTTP failure becomes a :class:`SourceError`
    carrying a message fit for display.
    """

    label: ClassVar[str] = "API"
    base_url: ClassVar[str] = ""

    def __init__(self, session: requests.Session | None = None) -> None:
        self.session = session or default_session

    def _headers(self) -> dict[str, str]:
        return {}

    def _get(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        """GET ``{base_url}/{endpoint}`` and decode the JSON body."""
        url = f"{self.base_url}/{endpoint}"
        try:
            resp = self.session.get(url, params=params or {}, headers=self._headers())
        except requests.RequestException as exc:
            logger.warning("%s request to %s failed: %s", self.label, endpoint, exc)
            raise SourceError(self.label, f"{self.label} API error: {exc}") from exc

        try:
            resp.raise_for_status()
        except requests.HTTPError as exc:
            logger.warning("%s %s returned %s", self.label, endpoint, resp.status_code)
            raise SourceError(
                self.label, f"{self.label} API error: {resp.status_code} {resp.reason}"
            ) from exc

        try:
            return resp.json()
        except ValueError as exc:
            raise SourceError(self.label, f"{self.label} API error: invalid JSON response") from exc


class SourceAdapter(Protocol):
    """
    Contract every data source implements.

    ``search`` turns a :class:`Query` into the source's request, issues it and
    normalizes each record into :class:`Observation`.  ``search_taxa``
    returns species-filter candidates for free text.
    """

    source: Source

    def search(self, query: Query, dates: DateRange) -> SearchResult: ...

    def search_taxa(self, text: str) -> list[TaxonSuggestion]: ...


def parse_records(
    label: str,
    records: Iterable[Any],
    parse: Callable[[dict[str, Any]], Observation],
    id_field: str,
) -> tuple[Observation, ...]:
    """
    Normalize a page of raw records.

    Records without an id are skipped.  Any other record the parser cannot
    handle fails the whole page as a :class:`SourceError`, so callers see one
    readable message instead of a ``KeyError`` from deep inside a parser.
    """
    parsed: list[Observation] = []
    for record in records:
        if not isinstance(record, dict) or record.get(id_field) in (None, ""):
            logger.debug("Skipping %s record without %s", label, id_field)
            continue
        try:
            parsed.append(parse(record))
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            logger.warning("Unparseable %s record %s: %s", label, record.get(id_field), exc)
            raise SourceError(label, f"{label} API error: invalid response") from exc
    return tuple(parsed)
