"""Cache port - Injectable caching abstraction.

Used by the geocoder so the same city is not requested from the remote
service twice during a run.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol, TypeVar

T = TypeVar("T")


class CachePort(Protocol[T]):
    """Port for caching.

    Implementations:
    - adapters/cache/memory_cache.py (InMemoryCache) - Production
    - adapters/cache/null_cache.py (NullCache) - Testing
    """

    def get(self, key: str) -> Optional[T]:
        """Return the cached value, or None if missing or expired."""
        ...

    def contains(self, key: str) -> bool:
        """Check whether a live entry exists, even one holding None."""
        ...

    def set(self, key: str, value: T) -> None:
        """Store a value under key."""
        ...

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        """Return the cached value or compute, cache and return it."""
        ...

    def clear(self) -> int:
        """Clear all entries and return how many were removed."""
        ...

    def invalidate(self, key: str) -> bool:
        """Remove one entry; True if it existed."""
        ...

    def size(self) -> int:
        """Return the number of entries in the cache."""
        ...
