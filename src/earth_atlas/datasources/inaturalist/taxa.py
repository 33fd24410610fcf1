"""Species autocomplete against iNaturalist taxa."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from earth_atlas.datasources.inaturalist.client import AUTOCOMPLETE_LIMIT
from earth_atlas.errors import SourceError
from earth_atlas.schemas import IconicCategory, Source, TaxonSuggestion

if TYPE_CHECKING:
    from earth_atlas.datasources.inaturalist.client import INatClient

logger = logging.getLogger(__name__)


def parse_suggestion(taxon: dict[str, Any]) -> TaxonSuggestion:
    """Parse one ``/taxa/autocomplete`` result."""
    photo = taxon.get("default_photo") or {}
    return TaxonSuggestion(
        id=taxon["id"],
        name=taxon.get("preferred_common_name") or taxon.get("name") or "Unknown",
        scientific_name=taxon.get("name") or "Unknown",
        source=Source.INATURALIST,
        rank=taxon.get("rank"),
        iconic_category=IconicCategory.parse(taxon.get("iconic_taxon_name")),
        photo_url=photo.get("square_url"),
    )


def search_taxa(inat: INatClient, text: str, *, limit: int = AUTOCOMPLETE_LIMIT) -> list[TaxonSuggestion]:
    """
    Up to ``limit`` taxa matching free text.

    Blank text short-circuits without a request; a failed request yields an
    empty list, since suggestions are non-critical.
    """
    if not text.strip():
        return []
    try:
        data = inat.get_taxa_autocomplete({"q": text, "per_page": limit})
    except SourceError as exc:
        logger.warning("Taxon autocomplete failed for %r: %s", text, exc)
        return []
    results: list[dict[str, Any]] = data.get("results") or []
    return [parse_suggestion(t) for t in results[:limit]]
