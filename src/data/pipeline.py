"""Position aggregation across yield sources.

Runs every source adapter concurrently, merges their normalized output in
declaration order, substitutes the sample dataset when nothing real was
found, and attaches yield alerts.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from config.settings import Settings, get_settings
from src.analytics.alerts import generate_alerts
from src.core.exceptions import FallbackError, InvalidAddressError
from src.core.models import AggregationResult, NormalizedData, PoolRate
from src.data.cache.memory_cache import MemoryCache
from src.data.clients.base import SourceAdapter
from src.data.clients.defillama.client import DefiLlamaClient
from src.data.clients.registry import create_default_adapters
from src.data.fallback import baseline_protocol_health, build_sample_positions

logger = logging.getLogger(__name__)


class PositionAggregator:
    """Orchestrates position fetching from all yield sources.

    The cache is shared by every adapter and owned by the caller; pass a
    fresh ``MemoryCache`` for an isolated aggregator.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        cache: Optional[MemoryCache] = None,
        adapters: Optional[Sequence[SourceAdapter]] = None,
        pool_index: Optional[DefiLlamaClient] = None,
    ):
        """Initialize the aggregator.

        Args:
            settings: Application settings
            cache: Shared cache (a new one with the configured TTL if None)
            adapters: Position adapters in declaration order (defaults: Aave, Compound, Maker)
            pool_index: Pool rate index used to seed the sample dataset
        """
        self.settings = settings or get_settings()
        if cache is None:
            cache = MemoryCache(ttl_seconds=self.settings.cache_ttl_seconds)
        self.cache = cache

        if adapters is None:
            adapters = create_default_adapters(self.cache, self.settings)
        self._adapters: List[SourceAdapter] = list(adapters)
        self._pool_index = pool_index or DefiLlamaClient(self.cache, self.settings)

    @property
    def adapters(self) -> List[SourceAdapter]:
        return list(self._adapters)

    async def fetch_user_positions(
        self,
        user_address: str,
        force_refresh: bool = False,
    ) -> AggregationResult:
        """Fetch and merge positions for a wallet.

        Args:
            user_address: Wallet address
            force_refresh: Clear the whole cache before fetching

        Returns:
            AggregationResult with positions, protocol health and alerts

        Raises:
            InvalidAddressError: If the address is missing or blank
            FallbackError: If the sample dataset cannot be built
        """
        if not user_address or not str(user_address).strip():
            raise InvalidAddressError("User address is required")

        if force_refresh:
            cleared = self.cache.clear()
            logger.info(f"Force refresh: cleared {cleared} cached entries")

        outcomes = await asyncio.gather(
            *(self._run_adapter(adapter, user_address) for adapter in self._adapters),
            self._run_pool_index(),
        )
        normalized: List[NormalizedData] = list(outcomes[:-1])
        pool_rates: List[PoolRate] = outcomes[-1]

        positions = [p for data in normalized for p in data.positions]
        health = [h for data in normalized for h in data.health]

        if positions:
            logger.info(f"Aggregated {len(positions)} positions for {user_address}")
            result = AggregationResult(positions=positions, protocol_health=health)
        else:
            result = self._build_fallback(user_address, pool_rates)

        result.alerts = generate_alerts(result.positions)
        return result

    async def _run_adapter(self, adapter: SourceAdapter, user_address: str) -> NormalizedData:
        """Fetch and normalize one source; any escaping error counts as empty."""
        try:
            payload = await adapter.fetch_raw(user_address)
            return adapter.normalize(payload, user_address)
        except Exception as e:
            logger.error(f"Unexpected error from {adapter.source_name} adapter: {e}")
            return NormalizedData.empty()

    async def _run_pool_index(self) -> List[PoolRate]:
        try:
            return await self._pool_index.fetch_pools()
        except Exception as e:
            logger.error(f"Unexpected error from {self._pool_index.source_name} adapter: {e}")
            return []

    def _build_fallback(self, user_address: str, pool_rates: List[PoolRate]) -> AggregationResult:
        """Sample dataset used when no source returned a real position."""
        logger.info(
            f"No live positions for {user_address}; using sample dataset "
            f"seeded from {len(pool_rates)} pool rates"
        )
        try:
            positions = build_sample_positions(
                pool_rates,
                window_factor=self.settings.earnings_window_factor,
                fetched_at=datetime.now(tz=timezone.utc),
            )
            health = baseline_protocol_health()
        except Exception as e:
            raise FallbackError(f"Failed to build sample dataset: {e}") from e
        return AggregationResult(positions=positions, protocol_health=health)

    def clear_cache(self) -> int:
        """Drop every cached payload.

        Returns:
            Number of items cleared
        """
        return self.cache.clear()

    async def close(self) -> None:
        """Close all adapter connections."""
        for adapter in [*self._adapters, self._pool_index]:
            try:
                await adapter.close()
            except Exception as e:
                logger.warning(f"Error closing adapter {adapter.source_name}: {e}")

