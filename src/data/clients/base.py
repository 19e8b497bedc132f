"""Base source adapter interface.

Defines the contract every yield source implements so the aggregator can
treat them uniformly: a cached, never-raising ``fetch_raw`` and a pure
``normalize`` that maps the source payload onto the common models.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple

from aiolimiter import AsyncLimiter
from gql import Client, gql
from gql.transport.aiohttp import AIOHTTPTransport

from config.settings import Settings, get_settings
from src.core.models import NormalizedData, ProtocolType
from src.data.cache.memory_cache import CacheKeys, MemoryCache

logger = logging.getLogger(__name__)


class SourceAdapter(ABC):
    """Abstract base class for yield source adapters.

    ``fetch_raw`` consults the shared cache first. On a miss it performs one
    network request; successful payloads are cached as-is, failures are
    logged and replaced by ``empty_payload()`` without being cached.
    """

    def __init__(self, cache: MemoryCache, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.cache = cache

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Short source identifier, used as the cache key prefix."""
        ...

    @property
    def protocol_type(self) -> Optional[ProtocolType]:
        """Protocol whose positions this adapter produces, if any."""
        return None

    @abstractmethod
    def empty_payload(self) -> Any:
        """Return the payload shape used when the source is unavailable."""
        ...

    @abstractmethod
    async def _fetch(self, user_address: str) -> Any:
        """Perform the network request and return the unparsed payload.

        May raise; ``fetch_raw`` turns any failure into ``empty_payload()``.
        """
        ...

    @abstractmethod
    def normalize(self, payload: Any, user_address: str) -> NormalizedData:
        """Convert a source payload into positions and health records."""
        ...

    def cache_key(self, user_address: str) -> str:
        return CacheKeys.positions(self.source_name, user_address)

    def validate_payload(self, payload: Any) -> None:
        """Raise ValueError if a fetched payload does not have the expected shape."""
        pass

    async def fetch_raw(self, user_address: str) -> Any:
        """Fetch the source payload for a user, using the cache when fresh.

        Args:
            user_address: Wallet address

        Returns:
            Cached or freshly fetched payload, or ``empty_payload()`` on failure
        """
        key = self.cache_key(user_address)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug(f"Cache hit for {key}")
            return cached

        try:
            payload = await self._fetch(user_address)
            self.validate_payload(payload)
        except Exception as e:
            logger.warning(f"Failed to fetch {self.source_name} data: {e}")
            return self.empty_payload()

        self.cache.set(key, payload)
        return payload

    async def close(self) -> None:
        """Close any open connections and clean up resources."""
        pass


class GraphQLSourceAdapter(SourceAdapter):
    """Source adapter backed by a GraphQL endpoint.

    Subclasses provide the endpoint, the query and the rate limit; the query
    is always sent with ``{"user": <lowercased address>}`` as variables.
    """

    query: str = ""
    # Top-level fields that must be lists of objects when present
    list_fields: Tuple[str, ...] = ()

    def __init__(
        self,
        cache: MemoryCache,
        settings: Optional[Settings] = None,
        rate_limit: float = 100,
        rate_window: float = 60,
    ):
        super().__init__(cache, settings)
        self._rate_limiter = AsyncLimiter(rate_limit, rate_window)

    @abstractmethod
    def _get_api_url(self) -> str:
        """Get the GraphQL endpoint URL."""
        ...

    async def _execute(self, query: str, variables: Dict[str, Any]) -> Dict[str, Any]:
        """Execute a GraphQL query with rate limiting and a bounded timeout."""
        timeout = self.settings.request_timeout_seconds
        async with self._rate_limiter:
            transport = AIOHTTPTransport(url=self._get_api_url(), timeout=timeout)
            client = Client(
                transport=transport,
                fetch_schema_from_transport=False,
                execute_timeout=timeout,
            )
            async with client as session:
                result = await session.execute(gql(query), variable_values=variables)
                return result

    async def _fetch(self, user_address: str) -> Dict[str, Any]:
        result = await self._execute(self.query, {"user": user_address.lower()})
        if not isinstance(result, dict):
            raise ValueError(f"Malformed {self.source_name} response: {type(result).__name__}")
        return result

    def validate_payload(self, payload: Dict[str, Any]) -> None:
        """Check that every list field holds only objects.

        A missing or null field is treated as empty.
        """
        for name in self.list_fields:
            items = payload.get(name)
            if items is None:
                continue
            if not isinstance(items, list) or not all(isinstance(i, dict) for i in items):
                raise ValueError(f"Malformed {self.source_name} response: bad {name!r}")
