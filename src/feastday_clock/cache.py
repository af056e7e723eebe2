"""In-memory cache entries with a fixed time-to-live.

One ``CacheEntry`` holds the last successful result of one upstream fetch
together with the time it was fetched. ``get_or_fetch`` is the only way
entries are read or written:

  - fresh entry (value present and younger than the TTL): returned as-is
  - stale or empty entry: the fetch coroutine runs and, on success, the entry
    is overwritten in full with the new value and timestamp
  - failed fetch: the entry keeps whatever it had and the exception propagates

Callers that find the same entry stale while a fetch is already running
await that fetch instead of starting another one.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Clock = Callable[[], float]


@dataclass
class CacheEntry(Generic[T]):
    """Cached value plus the epoch time (seconds) it was fetched."""

    name: str
    value: T | None = None
    fetched_at: float = 0.0
    _pending: asyncio.Task[T] | None = field(default=None, repr=False)

    def is_fresh(self, ttl: float, now: float) -> bool:
        """True if a value is present and was fetched less than ``ttl`` ago."""
        return self.value is not None and now - self.fetched_at < ttl


async def get_or_fetch(
    entry: CacheEntry[T],
    ttl: float,
    fetch: Callable[[], Awaitable[T]],
    clock: Clock = time.time,
) -> T:
    """Return the cached value, or fetch, store and return a new one.

    Args:
        entry: Cache entry to read and (on success) overwrite.
        ttl: Maximum age in seconds at which the cached value is still used.
        fetch: Zero-argument coroutine function doing the upstream call.
        clock: Source of the current epoch time, injectable for tests.
    """
    if entry.is_fresh(ttl, clock()):
        logger.debug("Cache hit for %s", entry.name)
        return entry.value  # type: ignore[return-value]

    if entry._pending is None:
        logger.debug("Cache miss for %s, fetching", entry.name)
        entry._pending = asyncio.ensure_future(_fetch_and_store(entry, fetch, clock))
        entry._pending.add_done_callback(_retrieve_failure)
    else:
        logger.debug("Joining in-flight fetch for %s", entry.name)

    return await asyncio.shield(entry._pending)


def _retrieve_failure(task: asyncio.Task[object]) -> None:
    """Mark a failed fetch as retrieved even when every waiter was cancelled."""
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.debug("Fetch failed: %r", exc)


async def _fetch_and_store(
    entry: CacheEntry[T],
    fetch: Callable[[], Awaitable[T]],
    clock: Clock,
) -> T:
    try:
        value = await fetch()
        entry.value = value
        entry.fetched_at = clock()
        return value
    finally:
        entry._pending = None
