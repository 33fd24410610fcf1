"""eBird species taxonomy: loaded once, searched locally."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from earth_atlas.schemas import IconicCategory, Source, TaxonSuggestion

if TYPE_CHECKING:
    from earth_atlas.datasources.ebird.client import EBirdClient

logger = logging.getLogger(__name__)

SUGGESTION_LIMIT = 8


@dataclass(frozen=True)
class TaxonomyEntry:
    """One species-level row of the eBird taxonomy."""

    species_code: str
    common_name: str
    scientific_name: str
    family_common_name: str = ""
    order: str = ""

    def matches(self, needle: str) -> bool:
        """Case-insensitive substring match on names or code; ``needle`` is lowercased."""
        return (
            needle in self.common_name.lower()
            or needle in self.scientific_name.lower()
            or needle in self.species_code.lower()
        )


def parse_taxonomy(rows: list[dict[str, Any]]) -> list[TaxonomyEntry]:
    """Keep species-level rows only (no subspecies, hybrids, spuhs, ...)."""
    return [
        TaxonomyEntry(
            species_code=row["speciesCode"],
            common_name=row.get("comName", ""),
            scientific_name=row.get("sciName", ""),
            family_common_name=row.get("familyComName") or "",
            order=row.get("order") or "",
        )
        for row in rows
        if row.get("category") == "species"
    ]


class EBirdTaxonomy:
    """
    Species table cached for the lifetime of this object.

    :meth:`load` hits the API at most once; concurrent callers wait for the
    first load instead of issuing their own.
    """

    def __init__(self) -> None:
        self._entries: list[TaxonomyEntry] | None = None
        self._lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        return self._entries is not None

    def __len__(self) -> int:
        return len(self._entries or [])

    def load(self, ebird: EBirdClient) -> list[TaxonomyEntry]:
        with self._lock:
            if self._entries is None:
                self._entries = parse_taxonomy(ebird.get_taxonomy())
                logger.info("Loaded %d eBird species", len(self._entries))
            return self._entries

    def search(self, text: str, limit: int = SUGGESTION_LIMIT) -> list[TaxonSuggestion]:
        """First ``limit`` species whose names or code contain ``text``."""
        if self._entries is None or not text.strip():
            return []
        needle = text.strip().lower()
        matches: list[TaxonSuggestion] = []
        for entry in self._entries:
            if not entry.matches(needle):
                continue
            matches.append(
                TaxonSuggestion(
                    id=entry.species_code,
                    name=entry.common_name,
                    scientific_name=entry.scientific_name,
                    source=Source.EBIRD,
                    rank="species",
                    iconic_category=IconicCategory.AVES,
                )
            )
            if len(matches) >= limit:
                break
        return matches

    def species_code_for(self, name: str) -> str | None:
        """Species code for an exact common/scientific name or code (case-insensitive)."""
        if self._entries is None:
            return None
        wanted = name.strip().lower()
        for entry in self._entries:
            if wanted in (
                entry.species_code.lower(),
                entry.common_name.lower(),
                entry.scientific_name.lower(),
            ):
                return entry.species_code
        return None
