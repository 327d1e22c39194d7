"""Bounded insertion-order cache shared by the classifier components.

Unlike an LRU cache, reads never refresh an entry's position: once the
cache is full, the entry that was inserted first is evicted, however
recently it was read.
"""

import logging
from collections import OrderedDict
from typing import Generic, Hashable, TypeVar

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

_MISSING = object()


class BoundedCache(Generic[K, V]):
    """Fixed-capacity FIFO cache.

    Overwriting an existing key keeps its original position in the
    eviction order. Not thread-safe; callers sharing an instance across
    threads must synchronize access themselves.
    """

    def __init__(self, max_size: int, name: str = "cache"):
        """Initialize the cache.

        Args:
            max_size: Maximum number of entries held at once.
            name: Label used in log messages and stats.

        Raises:
            ValueError: If max_size is not positive.
        """
        if max_size < 1:
            raise ValueError(f"max_size must be positive, got {max_size}")
        self.max_size = max_size
        self.name = name
        self._cache: OrderedDict[K, V] = OrderedDict()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def get(self, key: K, default: V | None = None) -> V | None:
        """Look up a key without changing its eviction position."""
        value = self._cache.get(key, _MISSING)
        if value is _MISSING:
            self._misses += 1
            return default
        self._hits += 1
        return value  # type: ignore[return-value]

    def put(self, key: K, value: V) -> None:
        """Store a value, evicting the oldest entry if the cache is full."""
        if key in self._cache:
            self._cache[key] = value
            return

        if len(self._cache) >= self.max_size:
            oldest, _ = self._cache.popitem(last=False)
            self._evictions += 1
            logger.debug(f"{self.name}: evicted oldest entry {oldest!r}")

        self._cache[key] = value

    def clear(self) -> None:
        """Remove every entry. Hit/miss counters are kept."""
        self._cache.clear()

    def keys(self) -> list[K]:
        """Keys in eviction order, oldest first."""
        return list(self._cache.keys())

    def __contains__(self, key: object) -> bool:
        return key in self._cache

    def __len__(self) -> int:
        return len(self._cache)

    def stats(self) -> dict:
        """Get cache statistics.

        Returns:
            Dict with size, capacity, hit/miss and eviction counts.
        """
        return {
            "name": self.name,
            "size": len(self._cache),
            "max_size": self.max_size,
            "hits": self._hits,
            "misses": self._misses,
            "evictions": self._evictions,
        }
