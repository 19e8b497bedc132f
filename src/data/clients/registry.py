"""Source adapter registry.

Provides a factory pattern for building the set of position adapters the
aggregator runs. Registration order is the adapter declaration order, which
fixes the order of the merged output.
"""

import logging
from typing import Callable, Dict, List, Optional

from config.settings import Settings, get_settings
from src.data.cache.memory_cache import MemoryCache
from src.data.clients.base import SourceAdapter

logger = logging.getLogger(__name__)

AdapterFactory = Callable[[MemoryCache, Settings], SourceAdapter]


class SourceAdapterRegistry:
    """Ordered registry of adapter factories keyed by source name."""

    def __init__(self):
        self._factories: Dict[str, AdapterFactory] = {}

    def register(self, source_name: str, factory: AdapterFactory) -> None:
        """Register a factory for a source.

        Re-registering a name replaces the factory but keeps its position.

        Args:
            source_name: Short source identifier, e.g. "aave"
            factory: Callable taking (cache, settings) and returning an adapter
        """
        self._factories[source_name] = factory
        logger.debug(f"Registered adapter factory for {source_name}")

    @property
    def available_sources(self) -> List[str]:
        return list(self._factories.keys())

    def create_all(
        self,
        cache: MemoryCache,
        settings: Optional[Settings] = None,
    ) -> List[SourceAdapter]:
        """Instantiate every registered adapter, sharing one cache.

        Returns:
            Adapters in registration order
        """
        settings = settings or get_settings()
        return [factory(cache, settings) for factory in self._factories.values()]


def default_registry() -> SourceAdapterRegistry:
    """Build a registry with the default lending adapters (Aave, Compound, Maker)."""
    # Import here to avoid circular imports
    from src.data.clients.aave.client import AaveClient
    from src.data.clients.compound.client import CompoundClient
    from src.data.clients.maker.client import MakerClient

    registry = SourceAdapterRegistry()
    registry.register("aave", lambda cache, settings: AaveClient(cache, settings))
    registry.register("compound", lambda cache, settings: CompoundClient(cache, settings))
    registry.register("maker", lambda cache, settings: MakerClient(cache, settings))
    return registry


def create_default_adapters(
    cache: MemoryCache,
    settings: Optional[Settings] = None,
) -> List[SourceAdapter]:
    """Create the default lending adapters in declaration order."""
    return default_registry().create_all(cache, settings)
