"""DeFiLlama yields index adapter.

Not user-scoped: the pool list supplies realistic default rates for the
sample dataset and contributes no positions of its own.
"""

import logging
from typing import Any, Dict, List, Optional

import aiohttp
from aiolimiter import AsyncLimiter

from config.settings import Settings
from src.core.models import NormalizedData, PoolRate
from src.data.cache.memory_cache import CacheKeys, MemoryCache
from src.data.clients.base import SourceAdapter
from src.data.clients.defillama.parser import DefiLlamaParser
from src.protocols.defillama.config import (
    DEFILLAMA_API_RATE_LIMIT,
    DEFILLAMA_API_RATE_WINDOW,
    DEFILLAMA_BASE_URL,
    DEFILLAMA_POOLS_PATH,
)

logger = logging.getLogger(__name__)


class DefiLlamaClient(SourceAdapter):
    """REST adapter for the DeFiLlama yields pool index."""

    def __init__(self, cache: MemoryCache, settings: Optional[Settings] = None):
        super().__init__(cache, settings)
        self._rate_limiter = AsyncLimiter(DEFILLAMA_API_RATE_LIMIT, DEFILLAMA_API_RATE_WINDOW)
        self._parser = DefiLlamaParser()
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def source_name(self) -> str:
        return "defillama"

    def _get_pools_url(self) -> str:
        base = getattr(self.settings, "defillama_base_url", None) or DEFILLAMA_BASE_URL
        return f"{base.rstrip('/')}{DEFILLAMA_POOLS_PATH}"

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.settings.request_timeout_seconds)
            )
        return self._session

    async def close(self) -> None:
        """Close the session."""
        if self._session and not self._session.closed:
            await self._session.close()

    def cache_key(self, user_address: str) -> str:
        return CacheKeys.pools()

    def empty_payload(self) -> List[Dict[str, Any]]:
        return []

    async def _get_json(self, url: str) -> Any:
        """GET a URL and decode its JSON body; non-2xx raises."""
        session = await self._get_session()
        async with self._rate_limiter:
            async with session.get(url) as resp:
                resp.raise_for_status()
                return await resp.json()

    async def _fetch(self, user_address: str) -> List[Dict[str, Any]]:
        body = await self._get_json(self._get_pools_url())
        pools = body.get("data") if isinstance(body, dict) else None
        if not isinstance(pools, list):
            raise ValueError("Malformed DeFiLlama response: missing pool list")

        supported = self._parser.filter_pools(pools)
        logger.info(f"Fetched {len(supported)} supported pools out of {len(pools)} from DeFiLlama")
        return supported

    def normalize(self, payload: List[Dict[str, Any]], user_address: str) -> NormalizedData:
        """The pool index holds no user positions."""
        return NormalizedData.empty()

    def parse_pools(self, payload: List[Dict[str, Any]]) -> List[PoolRate]:
        return self._parser.parse_pools(payload)

    async def fetch_pools(self) -> List[PoolRate]:
        """Fetch (or read from cache) the filtered pool rates."""
        return self.parse_pools(await self.fetch_raw(""))
