"""Fixed-capacity memoization cache with insertion-order eviction.

When full, the oldest inserted entry is dropped before a new key is
stored. Reads never refresh an entry's position.
"""

from __future__ import annotations

from collections import OrderedDict
import threading
from typing import Generic, Hashable, TypeVar

from core.errors import EnglishGateConfigError
from core.types import CacheStats

KeyT = TypeVar("KeyT", bound=Hashable)
ValueT = TypeVar("ValueT")


class BoundedCache(Generic[KeyT, ValueT]):
    """Thread-safe FIFO cache bounded by entry count."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise EnglishGateConfigError(
                f"Cache capacity must be a positive integer, got {capacity}."
            )
        self._capacity = capacity
        self._entries: OrderedDict[KeyT, ValueT] = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    @property
    def capacity(self) -> int:
        """Return the maximum number of stored entries."""
        return self._capacity

    def get(self, key: KeyT) -> ValueT | None:
        """Return the cached value, or None when the key is absent."""
        with self._lock:
            if key not in self._entries:
                self._misses += 1
                return None
            self._hits += 1
            return self._entries[key]

    def set(self, key: KeyT, value: ValueT) -> None:
        """Store a value, evicting the oldest entry when at capacity.

        Re-setting a present key replaces its value in place without
        eviction and without moving it to the newest position.
        """
        with self._lock:
            if key not in self._entries and len(self._entries) >= self._capacity:
                self._entries.popitem(last=False)
                self._evictions += 1
            self._entries[key] = value

    def clear(self) -> None:
        """Remove every entry. Counters are kept."""
        with self._lock:
            self._entries.clear()

    def stats(self) -> CacheStats:
        """Return a snapshot of size and counters."""
        with self._lock:
            return CacheStats(
                size=len(self._entries),
                capacity=self._capacity,
                hits=self._hits,
                misses=self._misses,
                evictions=self._evictions,
            )

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
