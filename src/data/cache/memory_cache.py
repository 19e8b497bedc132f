"""In-memory cache with TTL support."""

import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from src.core.constants import DEFAULT_CACHE_TTL_SECONDS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    """A cached payload and the time it was stored."""

    key: str
    value: Any
    created_at: float


class MemoryCache:
    """
    Key -> (value, timestamp) store with a fixed time-to-live.

    Expired entries are not swept; they are treated as misses on read and
    replaced on the next set. All access goes through a single lock.
    """

    def __init__(
        self,
        ttl_seconds: int = DEFAULT_CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Any]:
        """
        Get a value from the cache.

        Args:
            key: Cache key

        Returns:
            Cached value, or None if never set or expired
        """
        with self._lock:
            entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.created_at >= self.ttl_seconds:
            logger.debug(f"Cache entry expired for key {key}")
            return None
        return entry.value

    def set(self, key: str, value: Any) -> None:
        """
        Store a value, replacing any previous entry for the key.

        Args:
            key: Cache key
            value: Value to cache
        """
        entry = CacheEntry(key=key, value=value, created_at=self._clock())
        with self._lock:
            self._entries[key] = entry

    def delete(self, key: str) -> bool:
        """
        Delete a value from the cache.

        Returns:
            True if key existed and was deleted
        """
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> int:
        """
        Clear all values from the cache.

        Returns:
            Number of items cleared
        """
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        logger.debug(f"Cleared {count} cache entries")
        return count

    def stats(self) -> dict:
        """Get cache statistics."""
        now = self._clock()
        with self._lock:
            entries = list(self._entries.values())
        live = sum(1 for e in entries if now - e.created_at < self.ttl_seconds)
        return {
            "size": len(entries),
            "live": live,
            "expired": len(entries) - live,
            "ttl_seconds": self.ttl_seconds,
        }

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class CacheKeys:
    """Standard cache key patterns."""

    @staticmethod
    def positions(source: str, user_address: str) -> str:
        return f"{source}_{user_address}"

    @staticmethod
    def pools() -> str:
        return "defillama_pools"
