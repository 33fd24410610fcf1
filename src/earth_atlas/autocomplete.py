"""
Debounced type-ahead lookups (species filter, place search).

Keystrokes reset a short timer; only the last text typed during a quiet
period is looked up.  A lookup that returns after newer text was entered is
dropped, so results always belong to the latest input.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Generic, TypeVar

from earth_atlas.services.concurrency import Debouncer, RequestGuard

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_DELAY = 0.3  # seconds


class Autocomplete(Generic[T]):
    """
    Holds the suggestion list for one input box.

    ``lookup`` does the actual search (e.g. an adapter's ``search_taxa`` or
    :func:`~earth_atlas.datasources.geocoding.search_places`).  A lookup that
    raises is logged and treated as no suggestions.  ``on_results`` is called
    with each list that gets committed.
    """

    def __init__(
        self,
        lookup: Callable[[str], list[T]],
        on_results: Callable[[list[T]], None] | None = None,
        delay: float = DEFAULT_DELAY,
    ) -> None:
        self.lookup = lookup
        self.on_results = on_results
        self.guard = RequestGuard()
        self.debouncer = Debouncer(delay)
        self._results: list[T] = []
        self._done = threading.Event()

    @property
    def results(self) -> list[T]:
        return list(self._results)

    def _publish(self, results: list[T]) -> None:
        self._results = results
        if self.on_results is not None:
            self.on_results(results)
        self._done.set()

    def _run(self, token: int, text: str) -> None:
        try:
            results = self.lookup(text)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Lookup for %r failed: %s", text, exc)
            results = []
        if not self.guard.commit(token, lambda: self._publish(results)):
            logger.debug("Dropping stale suggestions for %r", text)

    def update(self, text: str) -> None:
        """New input text. Blank text clears the list at once, with no lookup."""
        token = self.guard.begin()
        self._done.clear()
        if not text.strip():
            self.debouncer.cancel()
            self.guard.commit(token, lambda: self._publish([]))
            return
        self.debouncer.call(self._run, token, text)

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the latest input's results are committed."""
        return self._done.wait(timeout)

    def clear(self) -> None:
        """Selection made or box cleared: forget pending work and results."""
        self.debouncer.cancel()
        self.guard.cancel()
        self._results = []
        self._done.set()
