"""
Concurrency helpers: parallel batches, staleness guard, debouncer.

Network calls are plain blocking ``requests`` calls.  Independent fetches are
fanned out to a thread pool with :func:`gather`; each call resolves on its
own and a failure in one never cancels the others.

Anything that writes a result into shared state checks a
:class:`RequestGuard` token first, so a slow response from a superseded
request can never overwrite a newer one (last-write-wins per invocation).
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_WORKERS = 12  # the fixed batches (regions, countries, kingdoms) stay under this


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of one call in a parallel batch: a value or the error it raised."""

    value: T | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _capture(call: Callable[[], T]) -> Outcome[T]:
    try:
        return Outcome(value=call())
    except Exception as exc:  # noqa: BLE001
        return Outcome(error=exc)


def gather(
    calls: Sequence[Callable[[], T]],
    *,
    max_workers: int = DEFAULT_WORKERS,
) -> list[Outcome[T]]:
    """
    Run independent calls concurrently and join them.

    Returns one :class:`Outcome` per call, in input order.  Exceptions are
    captured per call; what to do with them is the caller's decision.
    """
    if not calls:
        return []
    workers = max(1, min(max_workers, len(calls)))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(_capture, call) for call in calls]
        return [f.result() for f in futures]


class RequestGuard:
    """
    Request-generation counter.

    Each load calls :meth:`begin` and keeps the returned token; a later
    ``begin()`` (or :meth:`cancel`) supersedes every earlier token.  Check
    :meth:`is_current` right before committing results.
    """

    def __init__(self) -> None:
        self._generation = 0
        self._lock = threading.Lock()

    def begin(self) -> int:
        with self._lock:
            self._generation += 1
            return self._generation

    def cancel(self) -> None:
        """Invalidate all outstanding tokens (e.g. on teardown)."""
        with self._lock:
            self._generation += 1

    def is_current(self, token: int) -> bool:
        with self._lock:
            return token == self._generation

    def commit(self, token: int, apply: Callable[[], None]) -> bool:
        """Run ``apply`` only if ``token`` is still current. Returns whether it ran."""
        with self._lock:
            if token != self._generation:
                return False
            apply()
            return True


class Debouncer:
    """
    Delay a call until input has been quiet for ``delay`` seconds.

    Each :meth:`call` cancels the pending timer and schedules the newest
    arguments instead.
    """

    def __init__(self, delay: float = 0.3) -> None:
        self.delay = delay
        self._timer: threading.Timer | None = None
        self._lock = threading.Lock()

    def call(self, fn: Callable[..., Any], *args: Any) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self.delay, fn, args=args)
            self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None and self._timer.is_alive()
