"""
Memoization for IndexEngine.
Scenarios are pure functions of their input, so a result can be reused for
the same exact input tuple while the cache entry is alive.
"""

import threading
import time
from collections import OrderedDict
from typing import Dict, Hashable, Optional

from indexengine.models import ScenarioResult


class ScenarioCache:
    """
    Bounded in-memory cache with TTL support.

    Entries are evicted oldest-first once max_entries is reached. One cache
    belongs to one engine instance; access is guarded by a lock so the engine
    can be shared across threads.
    """

    def __init__(self, default_ttl: int = 300, max_entries: int = 512):
        """
        Initialize cache.

        Args:
            default_ttl: Time-to-live in seconds (default 5 minutes)
            max_entries: Maximum number of cached scenarios
        """
        self._cache: "OrderedDict[Hashable, tuple]" = OrderedDict()  # key -> (result, expiry_time)
        self._lock = threading.Lock()
        self.default_ttl = default_ttl
        self.max_entries = max_entries
        self.hits = 0
        self.misses = 0

    def get(self, key: Hashable) -> Optional[ScenarioResult]:
        """Get a cached result, or None if missing/expired."""
        with self._lock:
            entry = self._cache.get(key)
            if entry is None:
                self.misses += 1
                return None

            result, expiry = entry
            if time.monotonic() > expiry:
                del self._cache[key]
                self.misses += 1
                return None

            self._cache.move_to_end(key)
            self.hits += 1
            return result

    def set(self, key: Hashable, result: ScenarioResult, ttl: Optional[int] = None) -> None:
        if ttl is None:
            ttl = self.default_ttl

        with self._lock:
            self._cache[key] = (result, time.monotonic() + ttl)
            self._cache.move_to_end(key)
            while len(self._cache) > self.max_entries:
                self._cache.popitem(last=False)

    def clear(self) -> None:
        """Clear all cached results."""
        with self._lock:
            self._cache.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        return len(self._cache)

    def stats(self) -> Dict[str, int]:
        """Get cache statistics."""
        with self._lock:
            return {
                "total_entries": len(self._cache),
                "hits": self.hits,
                "misses": self.misses,
            }
