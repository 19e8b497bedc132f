"""Unit tests for MemoryCache."""

import threading

from src.data.cache.memory_cache import CacheKeys, MemoryCache


class TestMemoryCache:
    """Tests for MemoryCache get/set/expiry."""

    def test_set_then_get_returns_value(self, cache):
        """A value is readable immediately after being set."""
        payload = {"userReserves": [], "reserves": [{"symbol": "USDC"}]}
        cache.set("aave_0xabc", payload)

        assert cache.get("aave_0xabc") is payload

    def test_get_missing_key(self, cache):
        assert cache.get("never-set") is None

    def test_entry_valid_before_ttl(self, cache, clock):
        cache.set("k", "v")
        clock.advance(299)

        assert cache.get("k") == "v"

    def test_entry_expires_at_ttl(self, cache, clock):
        """Entries are misses once now - created_at >= ttl."""
        cache.set("k", "v")
        clock.advance(300)

        assert cache.get("k") is None

    def test_entry_expires_after_ttl(self, cache, clock):
        cache.set("k", "v")
        clock.advance(301)

        assert cache.get("k") is None

    def test_expired_entry_is_not_swept(self, cache, clock):
        """Expiry is lazy; the entry stays until replaced or cleared."""
        cache.set("k", "v")
        clock.advance(500)

        assert cache.get("k") is None
        assert len(cache) == 1

    def test_set_replaces_and_refreshes_timestamp(self, cache, clock):
        cache.set("k", "old")
        clock.advance(200)
        cache.set("k", "new")
        clock.advance(200)

        assert cache.get("k") == "new"

    def test_falsy_values_are_cached(self, cache):
        cache.set("defillama_pools", [])

        assert cache.get("defillama_pools") == []

    def test_clear(self, cache):
        """Clear drops all entries and reports how many."""
        cache.set("a", 1)
        cache.set("b", 2)

        assert cache.clear() == 2
        assert cache.get("a") is None
        assert cache.get("b") is None
        assert len(cache) == 0

    def test_delete(self, cache):
        cache.set("a", 1)

        assert cache.delete("a") is True
        assert cache.delete("a") is False
        assert cache.get("a") is None

    def test_stats(self, cache, clock):
        cache.set("a", 1)
        clock.advance(400)
        cache.set("b", 2)

        stats = cache.stats()

        assert stats["size"] == 2
        assert stats["live"] == 1
        assert stats["expired"] == 1
        assert stats["ttl_seconds"] == 300

    def test_concurrent_writers_to_distinct_keys(self):
        """Writes from many threads to different keys are all visible."""
        cache = MemoryCache()

        def writer(n: int) -> None:
            for i in range(100):
                cache.set(f"{n}_{i}", i)

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(cache) == 800
        assert cache.get("7_99") == 99


class TestCacheKeys:
    """Tests for standard key patterns."""

    def test_positions_key(self):
        assert CacheKeys.positions("aave", "0xAbC") == "aave_0xAbC"

    def test_pools_key(self):
        assert CacheKeys.pools() == "defillama_pools"
