"""Bounded least-recently-used cache guarded by a lock."""

from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Any, Dict, Hashable, Optional

from .exceptions import ConfigError
from .logger import Logger, NoopLogger

DEFAULT_CAPACITY = 512


class LRUCache:
    """Fixed-capacity mapping that evicts the least recently used key.

    Both ``get`` hits and ``put`` refresh a key's recency. Every operation
    holds an internal lock, so one instance can be shared between threads.

    Args:
        capacity: Maximum number of entries (``> 0``).
        logger: Optional structured logger; evictions are logged at debug.

    Raises:
        ConfigError: If ``capacity`` is not positive.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY, logger: Optional[Logger] = None) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ConfigError("cache capacity must be a positive integer")
        self.capacity = capacity
        self.logger = logger or NoopLogger()
        self._data: "OrderedDict[Hashable, Any]" = OrderedDict()
        self._lock = threading.Lock()
        self._counters = {"hits": 0, "misses": 0, "evictions": 0}

    def get(self, key: Hashable, default: Any = None) -> Any:
        with self._lock:
            if key not in self._data:
                self._counters["misses"] += 1
                return default
            self._data.move_to_end(key)
            self._counters["hits"] += 1
            return self._data[key]

    def put(self, key: Hashable, value: Any) -> None:
        with self._lock:
            self._data[key] = value
            self._data.move_to_end(key)
            while len(self._data) > self.capacity:
                self._data.popitem(last=False)
                self._counters["evictions"] += 1
                self.logger.debug("cache_evict", size=len(self._data))

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def stats(self) -> Dict[str, int]:
        """Return a copy of the hit/miss/eviction counters."""
        with self._lock:
            return dict(self._counters)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)


__all__ = ["DEFAULT_CAPACITY", "LRUCache"]
