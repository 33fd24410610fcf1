"""Narrow an already-fetched result set by iconic category, without the network."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from earth_atlas.reference.taxa import ALL, DEFAULT_META
from earth_atlas.schemas import IconicCategory, Observation

OTHER = DEFAULT_META.label


def filter_observations(
    observations: Sequence[Observation], category: IconicCategory | str
) -> Sequence[Observation]:
    """
    Keep observations of one iconic category.

    ``"all"`` returns the input object itself.  Any other value is an exact
    match, so records without a category never survive it.  The input is
    never modified.
    """
    if category == ALL:
        return observations
    return [o for o in observations if o.iconic_category is not None and o.iconic_category == category]


def category_counts(observations: Sequence[Observation]) -> dict[str, int]:
    """Tally per iconic category, uncategorised records under "Other"."""
    counts = Counter(o.iconic_category.value if o.iconic_category else OTHER for o in observations)
    return dict(counts.most_common())
