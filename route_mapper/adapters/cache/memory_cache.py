"""Thread-safe in-memory LRU cache.

Used by the geocoder so repeated lookups of the same city (and repeated
misses) never reach Nominatim twice. Entries can expire after a TTL.
"""

from __future__ import annotations

import logging
import math
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, NamedTuple, Optional, TypeVar

T = TypeVar("T")

_MISSING = object()


class _Entry(NamedTuple):
    value: Any
    expires_at: float


@dataclass
class InMemoryCache(Generic[T]):
    """LRU cache with optional TTL.

    Attributes:
        default_ttl_seconds: Lifetime of an entry (None = no expiry)
        max_size: Entry limit; the least recently used entry goes first
        name: Cache name, used as the logger suffix

    Example:
        cache = InMemoryCache[City](name="geocode", default_ttl_seconds=3600)
        city = cache.get_or_compute("pune:en", lambda: geocoder.geocode("Pune"))
    """

    default_ttl_seconds: Optional[float] = None
    max_size: Optional[int] = None
    name: str = "cache"

    _entries: "OrderedDict[str, _Entry]" = field(default_factory=OrderedDict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _hits: int = field(default=0, repr=False)
    _misses: int = field(default=0, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(f"route_mapper.cache.{self.name}")

    def _live(self, key: str) -> Any:
        # Caller holds the lock.
        entry = self._entries.get(key)
        if entry is None:
            return _MISSING
        if time.monotonic() >= entry.expires_at:
            del self._entries[key]
            self._logger.debug("Cache entry expired", extra={"key": key})
            return _MISSING
        self._entries.move_to_end(key)
        return entry.value

    def _record(self, value: Any) -> Any:
        if value is _MISSING:
            self._misses += 1
        else:
            self._hits += 1
        return value

    def get(self, key: str) -> Optional[T]:
        """Return the cached value, or None if absent or expired."""
        with self._lock:
            value = self._record(self._live(key))
            return None if value is _MISSING else value

    def contains(self, key: str) -> bool:
        """True if key holds a live entry, even one whose value is None."""
        with self._lock:
            return self._live(key) is not _MISSING

    def set(self, key: str, value: T, ttl: Optional[float] = None) -> None:
        lifetime = self.default_ttl_seconds if ttl is None else ttl
        expires_at = math.inf if lifetime is None else time.monotonic() + lifetime

        with self._lock:
            self._entries[key] = _Entry(value, expires_at)
            self._entries.move_to_end(key)
            if self.max_size is not None:
                while len(self._entries) > self.max_size:
                    evicted, _ = self._entries.popitem(last=False)
                    self._logger.debug("Cache entry evicted", extra={"key": evicted})

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        """Return the cached value or store the result of compute_fn.

        compute_fn runs without the lock held; None results are cached too.
        """
        with self._lock:
            value = self._record(self._live(key))
        if value is not _MISSING:
            return value

        computed = compute_fn()
        self.set(key, computed)
        return computed

    def invalidate(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> int:
        """Drop every entry and reset the statistics; return how many were dropped."""
        with self._lock:
            dropped = len(self._entries)
            self._entries.clear()
            self._hits = self._misses = 0
        self._logger.info("Cache cleared", extra={"entries_cleared": dropped})
        return dropped

    def size(self) -> int:
        with self._lock:
            return len(self._entries)

    def stats(self) -> Dict[str, Any]:
        with self._lock:
            lookups = self._hits + self._misses
            return {
                "size": len(self._entries),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate_percent": round(100.0 * self._hits / lookups, 1) if lookups else 0.0,
            }

