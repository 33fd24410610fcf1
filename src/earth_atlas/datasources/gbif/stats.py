"""GBIF dashboard aggregates: global totals, kingdoms, top countries."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from earth_atlas.reference.regions import (
    DEFAULT_FLAG,
    GBIF_COUNTRY_FLAGS,
    GBIF_KINGDOMS,
    Kingdom,
    gbif_country_name,
)
from earth_atlas.services.concurrency import gather

if TYPE_CHECKING:
    from earth_atlas.datasources.gbif.client import GBIFClient

logger = logging.getLogger(__name__)

TOP_COUNTRIES = 12


@dataclass
class GlobalStats:
    total_occurrences: int
    total_species: int
    total_datasets: int


@dataclass
class KingdomCount:
    key: int
    name: str
    emoji: str
    count: int


@dataclass
class CountryCount:
    code: str
    name: str
    flag: str
    count: int


def fetch_global_stats(gbif: GBIFClient) -> GlobalStats:
    """
    Occurrence, accepted-species and dataset totals.

    The three counts are fetched concurrently and each is independent: a
    failed count reads as 0.
    """
    outcomes = gather(
        [
            gbif.count_occurrences,
            lambda: gbif.search_species({"limit": 0, "rank": "SPECIES", "status": "ACCEPTED"})["count"],
            lambda: gbif.search_datasets({"limit": 0})["count"],
        ]
    )
    for outcome in outcomes:
        if not outcome.ok:
            logger.debug("GBIF global count failed: %s", outcome.error)
    occurrences, species, datasets = (o.value or 0 for o in outcomes)
    return GlobalStats(
        total_occurrences=occurrences,
        total_species=species,
        total_datasets=datasets,
    )


def _count_kingdom(gbif: GBIFClient, kingdom: Kingdom) -> int:
    data = gbif.search_occurrences({"limit": 0, "taxonKey": kingdom.key})
    return int(data.get("count") or 0)


def fetch_kingdom_counts(
    gbif: GBIFClient, kingdoms: tuple[Kingdom, ...] = GBIF_KINGDOMS
) -> list[KingdomCount]:
    """Occurrences per kingdom, largest first; a failed kingdom counts as 0."""
    outcomes = gather([lambda k=k: _count_kingdom(gbif, k) for k in kingdoms])  # type: ignore[misc]
    counts = []
    for kingdom, outcome in zip(kingdoms, outcomes, strict=True):
        if not outcome.ok:
            logger.debug("GBIF kingdom %s count failed: %s", kingdom.name, outcome.error)
        counts.append(
            KingdomCount(key=kingdom.key, name=kingdom.name, emoji=kingdom.emoji, count=outcome.value or 0)
        )
    return sorted(counts, key=lambda k: k.count, reverse=True)


def fetch_top_countries(gbif: GBIFClient, limit: int = TOP_COUNTRIES) -> list[CountryCount]:
    """Countries with the most occurrences, from one facet request."""
    data = gbif.count_occurrences_by_country()
    ranked = sorted(data.items(), key=lambda item: item[1], reverse=True)[:limit]
    return [
        CountryCount(
            code=code,
            name=gbif_country_name(code),
            flag=GBIF_COUNTRY_FLAGS.get(code, DEFAULT_FLAG),
            count=count,
        )
        for code, count in ranked
    ]
