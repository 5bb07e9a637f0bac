"""
Process-local snapshot cache with sliding expiration.
"""

import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from shared.logging import get_logger
from ..domain.models import Snapshot


SNAPSHOT_CACHE_KEY = "EventData"
DEFAULT_SLIDING_EXPIRATION = 600.0  # 10 minutes


@dataclass
class _CacheEntry:
    value: Any
    sliding_expiration: float
    last_access: float


class MemoryCache:
    """Thread-safe in-memory key/value store.

    Each entry expires once ``sliding_expiration`` seconds pass without a
    ``set`` or ``get`` touching it. Expired entries are evicted lazily.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entries: Dict[str, _CacheEntry] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self, key: str) -> Optional[Any]:
        """Return the value and restart its sliding window, or None."""
        with self._lock:
            entry = self._live_entry(key)
            if entry is None:
                self._misses += 1
                return None
            entry.last_access = self._clock()
            self._hits += 1
            return entry.value

    def peek(self, key: str) -> Optional[Any]:
        """Return the value without restarting its sliding window."""
        with self._lock:
            entry = self._live_entry(key)
            return entry.value if entry is not None else None

    def set(self, key: str, value: Any, sliding_expiration: float = DEFAULT_SLIDING_EXPIRATION) -> None:
        """Insert or replace ``key``."""
        with self._lock:
            self._entries[key] = _CacheEntry(
                value=value,
                sliding_expiration=sliding_expiration,
                last_access=self._clock()
            )

    def stats(self) -> Dict[str, int]:
        """Hit and miss counts since start, and the number of stored entries."""
        with self._lock:
            return {"hits": self._hits, "misses": self._misses, "entries": len(self._entries)}

    def _live_entry(self, key: str) -> Optional[_CacheEntry]:
        # Caller holds the lock
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.last_access >= entry.sliding_expiration:
            del self._entries[key]
            return None
        return entry


class SnapshotCache:
    """Last good snapshot, kept under a single fixed key."""

    def __init__(
        self,
        cache: Optional[MemoryCache] = None,
        sliding_expiration_seconds: float = DEFAULT_SLIDING_EXPIRATION,
    ):
        self.cache = cache if cache is not None else MemoryCache()
        self.sliding_expiration_seconds = sliding_expiration_seconds
        self.logger = get_logger("events.snapshot_cache")

    def store(self, snapshot: Snapshot) -> None:
        """Overwrite the cached snapshot and restart its sliding window."""
        self.cache.set(SNAPSHOT_CACHE_KEY, snapshot, self.sliding_expiration_seconds)
        self.logger.debug(
            "Cached event data",
            key=SNAPSHOT_CACHE_KEY,
            events=len(snapshot.events),
            venues=len(snapshot.venues),
            sliding_expiration_seconds=self.sliding_expiration_seconds
        )

    def load(self) -> Optional[Snapshot]:
        """Cached snapshot, or None when absent or expired."""
        snapshot = self.cache.get(SNAPSHOT_CACHE_KEY)
        if snapshot is None:
            self.logger.debug("Cache miss for event data", key=SNAPSHOT_CACHE_KEY)
        return snapshot

    def is_warm(self) -> bool:
        return self.cache.peek(SNAPSHOT_CACHE_KEY) is not None

    def stats(self) -> Dict[str, Any]:
        """Backing cache counters plus the snapshot entry's state."""
        return {
            "key": SNAPSHOT_CACHE_KEY,
            "warm": self.is_warm(),
            "sliding_expiration_seconds": self.sliding_expiration_seconds,
            **self.cache.stats()
        }
