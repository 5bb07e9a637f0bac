"""
Cache package for the Events Service.

Provides a process-local, thread-safe key/value store with sliding
expiration and a typed wrapper that keeps the last good snapshot under a
single fixed key.
"""

from .snapshot_cache import MemoryCache, SnapshotCache, SNAPSHOT_CACHE_KEY

__all__ = ["MemoryCache", "SnapshotCache", "SNAPSHOT_CACHE_KEY"]
