"""GBIF backbone classification → iconic category, and species suggestions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from earth_atlas.datasources.gbif.client import SUGGEST_LIMIT
from earth_atlas.errors import SourceError
from earth_atlas.schemas import IconicCategory, Source, TaxonSuggestion

if TYPE_CHECKING:
    from earth_atlas.datasources.gbif.client import GBIFClient

logger = logging.getLogger(__name__)

CLASS_TO_ICONIC: dict[str, IconicCategory] = {
    "aves": IconicCategory.AVES,
    "mammalia": IconicCategory.MAMMALIA,
    "reptilia": IconicCategory.REPTILIA,
    "amphibia": IconicCategory.AMPHIBIA,
    "insecta": IconicCategory.INSECTA,
    "arachnida": IconicCategory.ARACHNIDA,
    "actinopterygii": IconicCategory.ACTINOPTERYGII,
    "actinopteri": IconicCategory.ACTINOPTERYGII,  # alternate backbone name
    "mollusca": IconicCategory.MOLLUSCA,
}

# Animalia maps to nothing: the class has to be known to pick a category
KINGDOM_TO_ICONIC: dict[str, IconicCategory | None] = {
    "plantae": IconicCategory.PLANTAE,
    "fungi": IconicCategory.FUNGI,
    "chromista": IconicCategory.CHROMISTA,
    "animalia": None,
}

# Server-side category filter: (query parameter, value)
ICONIC_QUERY_PARAMS: dict[IconicCategory, tuple[str, str]] = {
    IconicCategory.AVES: ("class", "Aves"),
    IconicCategory.MAMMALIA: ("class", "Mammalia"),
    IconicCategory.REPTILIA: ("class", "Reptilia"),
    IconicCategory.AMPHIBIA: ("class", "Amphibia"),
    IconicCategory.INSECTA: ("class", "Insecta"),
    IconicCategory.ARACHNIDA: ("class", "Arachnida"),
    IconicCategory.ACTINOPTERYGII: ("class", "Actinopterygii"),
    IconicCategory.MOLLUSCA: ("phylum", "Mollusca"),
    IconicCategory.PLANTAE: ("kingdom", "Plantae"),
    IconicCategory.FUNGI: ("kingdom", "Fungi"),
    IconicCategory.CHROMISTA: ("kingdom", "Chromista"),
}


def derive_iconic_category(
    gbif_class: str | None, gbif_kingdom: str | None
) -> IconicCategory | None:
    """Class table first, then kingdom table."""
    if gbif_class:
        match = CLASS_TO_ICONIC.get(gbif_class.lower())
        if match is not None:
            return match
    if gbif_kingdom:
        return KINGDOM_TO_ICONIC.get(gbif_kingdom.lower())
    return None


def parse_suggestion(item: dict[str, Any]) -> TaxonSuggestion:
    scientific = item.get("canonicalName") or item.get("scientificName") or "Unknown"
    rank = item.get("rank")
    return TaxonSuggestion(
        id=item.get("key", ""),
        name=item.get("vernacularName") or scientific,
        scientific_name=scientific,
        source=Source.GBIF,
        rank=rank.lower() if rank else None,
        iconic_category=derive_iconic_category(item.get("class"), item.get("kingdom")),
    )


def search_taxa(gbif: GBIFClient, text: str, *, limit: int = SUGGEST_LIMIT) -> list[TaxonSuggestion]:
    """Backbone name suggestions; any failure yields no suggestions."""
    if not text.strip():
        return []
    try:
        items = gbif.suggest_species({"q": text, "limit": limit})
    except SourceError as exc:
        logger.warning("GBIF suggest failed for %r: %s", text, exc)
        return []
    return [parse_suggestion(item) for item in items]
