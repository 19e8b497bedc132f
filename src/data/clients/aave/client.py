"""Aave V3 subgraph adapter implementing the SourceAdapter interface."""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from config.settings import Settings
from src.core.models import NormalizedData, ProtocolType
from src.data.cache.memory_cache import MemoryCache
from src.data.clients.aave.parser import AaveParser
from src.data.clients.base import GraphQLSourceAdapter
from src.protocols.aave.config import (
    AAVE_API_RATE_LIMIT,
    AAVE_API_RATE_WINDOW,
    AAVE_V3_SUBGRAPH_URL,
)
from src.protocols.aave.queries import AaveQueries

logger = logging.getLogger(__name__)


class AaveClient(GraphQLSourceAdapter):
    """GraphQL adapter for the Aave V3 subgraph."""

    query = AaveQueries.USER_RESERVES_QUERY
    list_fields = ("userReserves", "reserves")

    def __init__(self, cache: MemoryCache, settings: Optional[Settings] = None):
        super().__init__(
            cache,
            settings,
            rate_limit=AAVE_API_RATE_LIMIT,
            rate_window=AAVE_API_RATE_WINDOW,
        )
        self._parser = AaveParser()

    @property
    def source_name(self) -> str:
        return "aave"

    @property
    def protocol_type(self) -> ProtocolType:
        return ProtocolType.AAVE

    def _get_api_url(self) -> str:
        return getattr(self.settings, "aave_subgraph_url", None) or AAVE_V3_SUBGRAPH_URL

    def empty_payload(self) -> Dict[str, Any]:
        return {"userReserves": [], "reserves": []}

    def normalize(self, payload: Dict[str, Any], user_address: str) -> NormalizedData:
        """Convert user reserves to positions and reserves to a health record."""
        fetched_at = datetime.now(tz=timezone.utc)
        positions = self._parser.parse_positions(
            payload, self.settings.earnings_window_factor, fetched_at
        )

        health = []
        protocol_health = self._parser.parse_reserves_to_health(payload.get("reserves") or [])
        if protocol_health:
            health.append(protocol_health)

        logger.info(f"Parsed {len(positions)} Aave positions for {user_address}")
        return NormalizedData(positions=positions, health=health)
