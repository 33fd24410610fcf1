"""Display metadata for iconic taxon categories: color, emoji, label."""

from __future__ import annotations

from dataclasses import dataclass

from earth_atlas.schemas import IconicCategory


@dataclass(frozen=True)
class TaxonMeta:
    """Visual style for one iconic category."""

    color: str
    emoji: str
    label: str


TAXON_META: dict[IconicCategory, TaxonMeta] = {
    IconicCategory.PLANTAE: TaxonMeta("#3d5a3e", "🌿", "Plants"),
    IconicCategory.AVES: TaxonMeta("#4a6b8a", "🐦", "Birds"),
    IconicCategory.MAMMALIA: TaxonMeta("#7a5c3a", "🦌", "Mammals"),
    IconicCategory.INSECTA: TaxonMeta("#8a6a2a", "🦋", "Insects"),
    IconicCategory.REPTILIA: TaxonMeta("#5a7a3a", "🦎", "Reptiles"),
    IconicCategory.AMPHIBIA: TaxonMeta("#3a7a6a", "🐸", "Amphibians"),
    IconicCategory.FUNGI: TaxonMeta("#7a4a6a", "🍄", "Fungi"),
    IconicCategory.ARACHNIDA: TaxonMeta("#8a3a3a", "🕷", "Arachnids"),
    IconicCategory.ACTINOPTERYGII: TaxonMeta("#3a5a8a", "🐟", "Fish"),
    IconicCategory.MOLLUSCA: TaxonMeta("#6a5a8a", "🐚", "Mollusks"),
    IconicCategory.CHROMISTA: TaxonMeta("#4a7a6a", "🌊", "Chromista"),
}

DEFAULT_META = TaxonMeta("#6a6a6a", "🔬", "Other")

ALL = "all"

# Pills shown above the results, in display order
TAXON_FILTER_OPTIONS: list[tuple[str, str]] = [
    (ALL, "All Taxa"),
    *(
        (cat.value, f"{TAXON_META[cat].emoji} {TAXON_META[cat].label}")
        for cat in (
            IconicCategory.PLANTAE,
            IconicCategory.AVES,
            IconicCategory.MAMMALIA,
            IconicCategory.INSECTA,
            IconicCategory.REPTILIA,
            IconicCategory.AMPHIBIA,
            IconicCategory.FUNGI,
            IconicCategory.ARACHNIDA,
        )
    ),
]


def taxon_meta(category: IconicCategory | str | None) -> TaxonMeta:
    """Metadata for a category; anything unknown or missing is "Other"."""
    parsed = category if isinstance(category, IconicCategory) else IconicCategory.parse(category)
    if parsed is None:
        return DEFAULT_META
    return TAXON_META[parsed]
