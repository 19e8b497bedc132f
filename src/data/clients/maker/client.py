"""Maker DSR subgraph adapter implementing the SourceAdapter interface."""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from config.settings import Settings
from src.core.models import NormalizedData, ProtocolType
from src.data.cache.memory_cache import MemoryCache
from src.data.clients.base import GraphQLSourceAdapter
from src.data.clients.maker.parser import MakerParser
from src.protocols.maker.config import (
    MAKER_API_RATE_LIMIT,
    MAKER_API_RATE_WINDOW,
    MAKER_SUBGRAPH_URL,
)
from src.protocols.maker.queries import MakerQueries

logger = logging.getLogger(__name__)


class MakerClient(GraphQLSourceAdapter):
    """GraphQL adapter for the Maker protocol subgraph."""

    query = MakerQueries.SAVINGS_QUERY
    list_fields = ("potDsrUpdates",)

    def __init__(self, cache: MemoryCache, settings: Optional[Settings] = None):
        super().__init__(
            cache,
            settings,
            rate_limit=MAKER_API_RATE_LIMIT,
            rate_window=MAKER_API_RATE_WINDOW,
        )
        self._parser = MakerParser()

    @property
    def source_name(self) -> str:
        return "maker"

    @property
    def protocol_type(self) -> ProtocolType:
        return ProtocolType.MAKER

    def _get_api_url(self) -> str:
        return getattr(self.settings, "maker_subgraph_url", None) or MAKER_SUBGRAPH_URL

    def empty_payload(self) -> Dict[str, Any]:
        return {"user": None, "potDsrUpdates": []}

    def validate_payload(self, payload: Dict[str, Any]) -> None:
        super().validate_payload(payload)
        user = payload.get("user")
        if user is not None and not isinstance(user, dict):
            raise ValueError("Malformed maker response: bad 'user'")

    def normalize(self, payload: Dict[str, Any], user_address: str) -> NormalizedData:
        """Convert the DSR balance to a position plus the fixed health record."""
        position = self._parser.parse_savings_to_position(
            payload,
            self.settings.earnings_window_factor,
            datetime.now(tz=timezone.utc),
        )
        positions = [position] if position else []
        health = [self._parser.protocol_health()] if self._parser.has_data(payload) else []

        logger.info(f"Parsed {len(positions)} Maker positions for {user_address}")
        return NormalizedData(positions=positions, health=health)
