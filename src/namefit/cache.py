"""
Capacity-bounded key/value cache shared by the measurement and
truncation layers.
"""

import threading
from collections import OrderedDict
from collections.abc import Hashable
from enum import Enum
from typing import Any

from .config.constants import DEFAULT_EVICTION_POLICY


class EvictionPolicy(Enum):
    """Which entry leaves the cache when it is full."""

    FIFO = "fifo"  # oldest inserted, reads do not refresh
    LRU = "lru"  # least recently read or written


class BoundedCache:
    """
    Insertion-ordered map holding at most ``capacity`` entries.

    Entries are never updated in place: ``put`` on an existing key replaces
    the value and, for both policies, moves the key to the newest position.
    Reads and writes are serialized with a lock so one cache can be shared
    between a worker thread and the UI thread.
    """

    def __init__(
        self,
        capacity: int,
        policy: EvictionPolicy | str = DEFAULT_EVICTION_POLICY,
    ):
        if capacity < 1:
            raise ValueError("Cache capacity must be at least 1")
        self.capacity = capacity
        self.policy = EvictionPolicy(policy)
        self._data: OrderedDict[Hashable, Any] = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Return the cached value for key, or default."""
        with self._lock:
            try:
                value = self._data[key]
            except KeyError:
                self.misses += 1
                return default
            self.hits += 1
            if self.policy is EvictionPolicy.LRU:
                self._data.move_to_end(key)
            return value

    def put(self, key: Hashable, value: Any) -> None:
        """Store value, evicting the oldest entry once capacity is exceeded."""
        with self._lock:
            if key in self._data:
                del self._data[key]
            self._data[key] = value
            while len(self._data) > self.capacity:
                self._data.popitem(last=False)

    def clear(self) -> None:
        """Drop every entry and reset the hit counters."""
        with self._lock:
            self._data.clear()
            self.hits = 0
            self.misses = 0

    def keys(self) -> list[Hashable]:
        """Keys from oldest to newest."""
        with self._lock:
            return list(self._data.keys())

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)
