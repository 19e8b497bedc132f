"""Data layer for the yield position aggregator."""

from .pipeline import PositionAggregator
from .cache.memory_cache import MemoryCache, CacheKeys
from .clients.base import GraphQLSourceAdapter, SourceAdapter
from .clients.registry import SourceAdapterRegistry, create_default_adapters
from .clients.aave import AaveClient
from .clients.compound import CompoundClient
from .clients.maker import MakerClient
from .clients.defillama import DefiLlamaClient
from .fallback import baseline_protocol_health, build_sample_positions

__all__ = [
    # Core
    "PositionAggregator",
    "MemoryCache",
    "CacheKeys",
    # Adapters
    "GraphQLSourceAdapter",
    "SourceAdapter",
    "SourceAdapterRegistry",
    "create_default_adapters",
    "AaveClient",
    "CompoundClient",
    "MakerClient",
    "DefiLlamaClient",
    # Fallback
    "baseline_protocol_health",
    "build_sample_positions",
]
