"""
In-memory response cache for world-state payloads.

Entries are keyed by (resource, platform, language) and expire after a
per-entry time-to-live. The table lives in a cachetools TLRUCache whose
expiry is read from each stored CacheEntry, guarded by a single lock that
is held only for the map read and the map write. The fetch itself always
runs outside the lock, so a slow request never stalls unrelated lookups.
"""

from __future__ import annotations

import inspect
import logging
import math
import threading
import time
from collections.abc import Awaitable, Callable
from copy import deepcopy
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, NamedTuple

from cachetools import TLRUCache

from .models import Language, Platform

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheKey:
    """
    Composite cache key.

    Selectors may be given as members, codes or names; they are normalized
    so equal tuples always hash to the same entry.
    """

    resource: str
    platform: Platform
    language: Language

    def __post_init__(self) -> None:
        object.__setattr__(self, "resource", str(self.resource))
        object.__setattr__(self, "platform", Platform.parse(self.platform))
        object.__setattr__(self, "language", Language.parse(self.language))

    def __str__(self) -> str:
        return f"{self.platform.code}/{self.resource}?language={self.language.code}"


class CacheEntry(NamedTuple):
    value: Any
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


def _entry_expiry(_key: CacheKey, entry: CacheEntry, _now: float) -> float:
    return entry.expires_at


def _ttl_seconds(ttl: float | timedelta) -> float:
    seconds = ttl.total_seconds() if isinstance(ttl, timedelta) else float(ttl)
    if seconds < 0:
        raise ValueError(f"ttl must not be negative, got {ttl!r}")
    return seconds


class ResponseCache:
    """
    Thread-safe TTL cache implementing the get-or-compute pattern.

    The lock is a threading.Lock that is never held across an await, so a
    single instance can be shared by asyncio tasks and by threads running
    their own event loops. Values are deep copied on the way in and out so
    callers cannot mutate a stored entry.

    Two concurrent misses on the same key may both run their fetch; the
    last store wins. Coalescing in-flight fetches would need a pending
    marker per key and is not done here.
    """

    def __init__(self, *, timer: Callable[[], float] = time.monotonic) -> None:
        self._cache: TLRUCache[CacheKey, CacheEntry] = TLRUCache(
            maxsize=math.inf,
            ttu=_entry_expiry,
            timer=timer,
        )
        self._lock = threading.Lock()

    def lookup(self, key: CacheKey) -> Any | None:
        """
        Return the cached value for key, or None when missing or expired.

        Args:
            key: Composite key of the cached response.
        """
        entry = self._live_entry(key)
        if entry is None:
            return None
        return deepcopy(entry.value)

    async def get_or_compute(
        self,
        key: CacheKey,
        ttl: float | timedelta,
        compute: Callable[[], Any | Awaitable[Any]],
    ) -> Any:
        """
        Return a live cached value or compute, store and return a fresh one.

        Args:
            key: Composite key of the cached response.
            ttl: Validity window in seconds or as a timedelta. Zero returns
                the computed value without storing it.
            compute: Zero-argument callable returning the value or an
                awaitable of it. Any exception it raises propagates
                unchanged and leaves the table untouched.
        """
        seconds = _ttl_seconds(ttl)

        entry = self._live_entry(key)
        if entry is not None:
            logger.debug("Cache hit for %s", key)
            return deepcopy(entry.value)

        logger.debug("Cache miss for %s", key)
        value = compute()
        if inspect.isawaitable(value):
            value = await value

        self._store(key, value, seconds)
        return value

    def _live_entry(self, key: CacheKey) -> CacheEntry | None:
        with self._lock:
            return self._cache.get(key)

    def _store(self, key: CacheKey, value: Any, ttl_seconds: float) -> None:
        stored = deepcopy(value)
        with self._lock:
            expires_at = self._cache.timer() + ttl_seconds
            # TLRUCache drops entries that are already expired on insert
            self._cache[key] = CacheEntry(stored, expires_at)


__all__ = ["CacheEntry", "CacheKey", "ResponseCache"]
