"""Source adapters module.

Provides a unified interface over the lending protocol subgraphs and the
DeFiLlama pool index.
"""

from src.data.clients.base import GraphQLSourceAdapter, SourceAdapter
from src.data.clients.registry import (
    SourceAdapterRegistry,
    create_default_adapters,
    default_registry,
)

__all__ = [
    "GraphQLSourceAdapter",
    "SourceAdapter",
    "SourceAdapterRegistry",
    "create_default_adapters",
    "default_registry",
]
