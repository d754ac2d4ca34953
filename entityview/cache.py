"""
entityview.cache
================

Stale‑while‑revalidate query cache for entity listings.

Each :class:`~entityview.filters.QueryKey` owns one :class:`CacheEntry`.
Reading a key serves whatever the entry holds right now and, when the
entry is missing or older than the freshness window, schedules exactly
one background fetch for it.  Callers that ask for the same key while
that fetch is in flight attach to the same :class:`asyncio.Task`.

A fetch result is committed only when

* it belongs to the latest request issued for its key, and
* its key is still the active key when it resolves.

Everything runs on one event loop, so entry mutation needs no locking.
:class:`~entityview.client.FetchFailed` stops here: it is recorded on the
entry and never re‑raised to callers.  Any other exception from the
fetcher (e.g. ``asyncio.TimeoutError``) is recorded the same way.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Dict, List, Optional

from entityview.client import ErrorKind, FetchFailed
from entityview.filters import FilterState, QueryKey
from entityview.models import Entity
from entityview.settings import settings

logger = logging.getLogger(__name__)

Fetcher = Callable[[Dict[str, str]], Awaitable[List[Entity]]]


@dataclass
class QueryResult:
    """What a reader sees for one key at one moment."""
    data: List[Entity] = field(default_factory=list)
    is_loading: bool = False        # first load, nothing fetched yet
    is_fetching: bool = False       # any request in flight
    error: Optional[ErrorKind] = None
    fetched_at: Optional[float] = None


@dataclass
class CacheEntry:
    records: List[Entity] = field(default_factory=list)
    fetched_at: Optional[float] = None
    loading: bool = False
    error: Optional[ErrorKind] = None
    request_id: int = 0
    task: Optional["asyncio.Task[QueryResult]"] = field(default=None, repr=False)


class QueryCache:
    """
    Per‑key listing cache with request de‑duplication.

    Parameters
    ----------
    fetcher : async callable
        ``await fetcher(params) -> list[Entity]``; any exception it raises
        is recorded as ``FetchFailed`` on the entry.
    freshness : float, optional
        Seconds an entry stays fresh (defaults to settings, 30s).
    clock : callable, default=time.monotonic
        Time source, injectable for tests.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        freshness: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._fetcher = fetcher
        self.freshness = settings.freshness_seconds if freshness is None else freshness
        self._clock = clock
        self._entries: Dict[QueryKey, CacheEntry] = {}
        self.active_key: Optional[QueryKey] = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def fetch(self, filters: FilterState) -> QueryResult:
        """Derive the key from *filters*, then :meth:`read` it."""
        return self.read(filters.query_key())

    def read(self, key: QueryKey) -> QueryResult:
        """
        Make *key* active, schedule a fetch if it is missing or stale and
        return the current snapshot without waiting.

        Must be called from inside a running event loop.
        """
        self.active_key = key
        self._ensure(key)
        return self.snapshot(key)

    async def resolve(self, key: QueryKey) -> QueryResult:
        """
        Like :meth:`read`, but wait for the pending request (if any).

        All callers waiting on the same key receive the same result.  A
        cancelled caller does not cancel the shared request.
        """
        self.active_key = key
        task = self._ensure(key)
        if task is None:
            return self.snapshot(key)
        return await asyncio.shield(task)

    def snapshot(self, key: QueryKey) -> QueryResult:
        """Current state of *key*; no side effects."""
        entry = self._entries.get(key)
        if entry is None:
            return QueryResult()
        return QueryResult(
            data=list(entry.records),
            is_loading=entry.loading and entry.fetched_at is None,
            is_fetching=entry.loading,
            error=entry.error,
            fetched_at=entry.fetched_at,
        )

    def entry(self, key: QueryKey) -> Optional[CacheEntry]:
        return self._entries.get(key)

    def is_fresh(self, key: QueryKey) -> bool:
        entry = self._entries.get(key)
        return entry is not None and self._fresh(entry)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _fresh(self, entry: CacheEntry) -> bool:
        if entry.fetched_at is None or entry.error is not None:
            return False
        return self._clock() - entry.fetched_at < self.freshness

    def _ensure(self, key: QueryKey) -> Optional["asyncio.Task[QueryResult]"]:
        entry = self._entries.setdefault(key, CacheEntry())
        if entry.task is not None:
            return entry.task
        if self._fresh(entry):
            logger.debug(f"Serving fresh cache entry for {key}")
            return None

        loop = asyncio.get_running_loop()
        entry.request_id += 1
        entry.loading = True
        entry.task = loop.create_task(self._run(key, entry, entry.request_id))
        logger.debug(f"Fetching {key} (request {entry.request_id})")
        return entry.task

    def _is_current(self, key: QueryKey, entry: CacheEntry, request_id: int) -> bool:
        return (
            self._entries.get(key) is entry
            and entry.request_id == request_id
            and self.active_key == key
        )

    async def _run(self, key: QueryKey, entry: CacheEntry, request_id: int) -> QueryResult:
        records: Optional[List[Entity]] = None
        error: Optional[ErrorKind] = None
        try:
            records = await self._fetcher(key.params())
        except FetchFailed as e:
            error = e.kind
            logger.warning(f"Fetch failed for {key}: {e}")
        except Exception:
            # timeouts and other fetcher errors count as FetchFailed too
            error = ErrorKind.FETCH_FAILED
            logger.exception(f"Fetcher raised for {key}")
        finally:
            if entry.request_id == request_id:
                entry.task = None
                entry.loading = False

        if not self._is_current(key, entry, request_id):
            logger.debug(f"Discarding superseded response for {key}")
            return QueryResult(
                data=list(records) if records is not None else list(entry.records),
                error=error,
                fetched_at=entry.fetched_at,
            )

        if error is None:
            entry.records = list(records or [])
            entry.fetched_at = self._clock()
            entry.error = None
        else:
            entry.error = error
        return self.snapshot(key)

    # ------------------------------------------------------------------
    # Dunder helpers for convenience
    # ------------------------------------------------------------------
    def __contains__(self, key: QueryKey) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
