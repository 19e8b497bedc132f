"""Compound subgraph adapter implementing the SourceAdapter interface."""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from config.settings import Settings
from src.core.models import NormalizedData, ProtocolType
from src.data.cache.memory_cache import MemoryCache
from src.data.clients.base import GraphQLSourceAdapter
from src.data.clients.compound.parser import CompoundParser
from src.protocols.compound.config import (
    COMPOUND_API_RATE_LIMIT,
    COMPOUND_API_RATE_WINDOW,
    COMPOUND_SUBGRAPH_URL,
)
from src.protocols.compound.queries import CompoundQueries

logger = logging.getLogger(__name__)


class CompoundClient(GraphQLSourceAdapter):
    """GraphQL adapter for the Compound subgraph."""

    query = CompoundQueries.ACCOUNT_CTOKENS_QUERY
    list_fields = ("accountCTokens", "markets")

    def __init__(self, cache: MemoryCache, settings: Optional[Settings] = None):
        super().__init__(
            cache,
            settings,
            rate_limit=COMPOUND_API_RATE_LIMIT,
            rate_window=COMPOUND_API_RATE_WINDOW,
        )
        self._parser = CompoundParser()

    @property
    def source_name(self) -> str:
        return "compound"

    @property
    def protocol_type(self) -> ProtocolType:
        return ProtocolType.COMPOUND

    def _get_api_url(self) -> str:
        return getattr(self.settings, "compound_subgraph_url", None) or COMPOUND_SUBGRAPH_URL

    def empty_payload(self) -> Dict[str, Any]:
        return {"accountCTokens": [], "markets": []}

    def normalize(self, payload: Dict[str, Any], user_address: str) -> NormalizedData:
        """Convert account cTokens to positions and markets to a health record."""
        fetched_at = datetime.now(tz=timezone.utc)
        positions = self._parser.parse_positions(
            payload, self.settings.earnings_window_factor, fetched_at
        )

        health = []
        protocol_health = self._parser.parse_markets_to_health(payload.get("markets") or [])
        if protocol_health:
            health.append(protocol_health)

        logger.info(f"Parsed {len(positions)} Compound positions for {user_address}")
        return NormalizedData(positions=positions, health=health)
