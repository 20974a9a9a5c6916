from __future__ import annotations

import logging
import math
import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import Generic, Hashable, List, TypeVar

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

DEFAULT_CAPACITY = 2000
DEFAULT_EVICTION_RATIO = 0.1


@dataclass(frozen=True, slots=True)
class CacheInfo:
    """Snapshot of cache counters."""

    hits: int
    misses: int
    evictions: int
    size: int
    capacity: int


class LineCache(Generic[K, V]):
    """
    Bounded mapping with first-in-first-out batch eviction.

    Lookups never reorder entries. When an insert finds the cache full, the
    oldest ``max(1, floor(eviction_ratio * capacity))`` entries are dropped
    before the new entry is stored.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        eviction_ratio: float = DEFAULT_EVICTION_RATIO,
    ) -> None:
        if capacity < 1:
            raise ValueError("Cache capacity must be at least 1.")
        if not 0.0 < eviction_ratio <= 1.0:
            raise ValueError("Cache eviction ratio must be in (0, 1].")
        self._capacity = capacity
        self._batch = max(1, math.floor(eviction_ratio * capacity))
        self._entries: OrderedDict[K, V] = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def eviction_batch(self) -> int:
        """Number of entries dropped each time the cache overflows."""
        return self._batch

    def get(self, key: K) -> V | None:
        with self._lock:
            value = self._entries.get(key)
            if value is None:
                self._misses += 1
            else:
                self._hits += 1
            return value

    def put(self, key: K, value: V) -> None:
        with self._lock:
            if key not in self._entries and len(self._entries) >= self._capacity:
                self._evict_oldest()
            self._entries[key] = value

    def _evict_oldest(self) -> None:
        count = min(self._batch, len(self._entries))
        for _ in range(count):
            self._entries.popitem(last=False)
        self._evictions += count
        logger.debug("Evicted %d cache entries (capacity %d)", count, self._capacity)

    def keys(self) -> List[K]:
        """Keys in insertion order, oldest first."""
        with self._lock:
            return list(self._entries.keys())

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def info(self) -> CacheInfo:
        with self._lock:
            return CacheInfo(
                hits=self._hits,
                misses=self._misses,
                evictions=self._evictions,
                size=len(self._entries),
                capacity=self._capacity,
            )

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries
