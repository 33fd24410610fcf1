"""Daily eBird activity across a fixed set of countries."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING

from earth_atlas.reference.regions import EBIRD_REGIONS, Region
from earth_atlas.services.concurrency import gather

if TYPE_CHECKING:
    from earth_atlas.datasources.ebird.client import EBirdClient

logger = logging.getLogger(__name__)


@dataclass
class RegionStats:
    """One region's checklist/species/contributor counts for a day."""

    code: str
    name: str
    flag: str
    num_checklists: int
    num_contributors: int
    num_species: int


@dataclass
class EBirdDashboard:
    """Regions sorted by checklists, with totals over the regions that loaded."""

    day: date
    regions: list[RegionStats] = field(default_factory=list)

    @property
    def total_checklists(self) -> int:
        return sum(r.num_checklists for r in self.regions)

    @property
    def total_contributors(self) -> int:
        return sum(r.num_contributors for r in self.regions)

    @property
    def total_species(self) -> int:
        return sum(r.num_species for r in self.regions)


def fetch_region_stats(ebird: EBirdClient, region: Region, day: date) -> RegionStats:
    data = ebird.get_region_stats(region.code, day)
    return RegionStats(
        code=region.code,
        name=region.name,
        flag=region.flag,
        num_checklists=data.get("numChecklists", 0),
        num_contributors=data.get("numContributors", 0),
        num_species=data.get("numSpecies", 0),
    )


def fetch_dashboard_stats(
    ebird: EBirdClient,
    day: date | None = None,
    regions: tuple[Region, ...] = EBIRD_REGIONS,
) -> EBirdDashboard:
    """
    Fetch every region in parallel and join.

    A region whose request fails is dropped from both the list and the
    totals; it is not retried or reported.
    """
    day = day or date.today()
    outcomes = gather([lambda r=r: fetch_region_stats(ebird, r, day) for r in regions])  # type: ignore[misc]
    loaded: list[RegionStats] = []
    for region, outcome in zip(regions, outcomes, strict=True):
        if outcome.value is None:
            logger.debug("Dropping eBird region %s: %s", region.code, outcome.error)
            continue
        loaded.append(outcome.value)
    loaded.sort(key=lambda r: r.num_checklists, reverse=True)
    return EBirdDashboard(day=day, regions=loaded)
