"""In-memory caching for source payloads."""

from src.data.cache.memory_cache import CacheEntry, CacheKeys, MemoryCache

__all__ = ["CacheEntry", "CacheKeys", "MemoryCache"]
