"""
The current observation result set.

A feed owns exactly one :class:`FeedState` and replaces it wholesale on every
transition.  Searches may overlap (a background ``submit`` followed by
another before the first returns); each takes a :class:`RequestGuard` token
and only the newest one is allowed to commit, whatever order the network
answers in.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, replace
from datetime import datetime
from enum import StrEnum

from earth_atlas.errors import EarthAtlasError
from earth_atlas.filters import filter_observations
from earth_atlas.query import QueryOrchestrator
from earth_atlas.reference.taxa import ALL
from earth_atlas.schemas import IconicCategory, Observation, Query
from earth_atlas.services.concurrency import RequestGuard

logger = logging.getLogger(__name__)


class FeedStatus(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True)
class FeedState:
    """Snapshot of the feed. ``ready`` with zero results is a normal, empty state."""

    status: FeedStatus = FeedStatus.IDLE
    query: Query | None = None
    total_results: int = 0
    observations: tuple[Observation, ...] = ()
    error: str | None = None
    category: IconicCategory | str = ALL

    @property
    def visible(self) -> list[Observation]:
        """Observations after the client-side category filter."""
        return list(filter_observations(self.observations, self.category))


class ObservationFeed:
    """Runs searches through an orchestrator and keeps the latest result."""

    def __init__(self, orchestrator: QueryOrchestrator, max_workers: int = 2) -> None:
        self.orchestrator = orchestrator
        self.guard = RequestGuard()
        self._state = FeedState()
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="feed")

    @property
    def state(self) -> FeedState:
        return self._state

    def _set(self, state: FeedState) -> None:
        self._state = state

    def search(self, query: Query, now: datetime | None = None) -> FeedState:
        """
        Run a search in the calling thread.

        Returns the state after the search; if a newer search started in the
        meantime, that newer state is what comes back.
        """
        return self._run(self.guard.begin(), query, now)

    def submit(self, query: Query, now: datetime | None = None) -> Future[FeedState]:
        """
        Run a search in the background; supersedes any search still running.

        The token is taken here, so submission order decides which search is
        newest even if the workers start out of order.
        """
        token = self.guard.begin()
        return self._executor.submit(self._run, token, query, now)

    def _run(self, token: int, query: Query, now: datetime | None) -> FeedState:
        category = self._state.category
        loading = FeedState(status=FeedStatus.LOADING, query=query, category=category)
        self.guard.commit(token, lambda: self._set(loading))
        try:
            result = self.orchestrator.search(query, now)
        except EarthAtlasError as exc:
            # Results are cleared on failure; the message is shown instead
            failed = FeedState(status=FeedStatus.ERROR, query=query, error=str(exc), category=category)
            if not self.guard.commit(token, lambda: self._set(failed)):
                logger.debug("Discarding stale error for %s", query.center.label())
            return self._state

        ready = FeedState(
            status=FeedStatus.READY,
            query=query,
            total_results=result.total_results,
            observations=result.observations,
            category=category,
        )
        if not self.guard.commit(token, lambda: self._set(ready)):
            logger.debug("Discarding stale results for %s", query.center.label())
        return self._state

    def set_category(self, category: IconicCategory | str) -> FeedState:
        """Change the client-side filter; never touches the network."""
        self._set(replace(self._state, category=category))
        return self._state

    def switch_source(self, source: str) -> None:
        """Change source and drop the current results, which belong to the old one."""
        self.orchestrator.switch(source)
        self.guard.cancel()
        self._set(FeedState(category=self._state.category))

    def close(self) -> None:
        self.guard.cancel()
        self._executor.shutdown(wait=False, cancel_futures=True)
