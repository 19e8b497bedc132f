"""Compound protocol configuration."""

from src.protocols.compound.config import (
    COMPOUND_API_RATE_LIMIT,
    COMPOUND_API_RATE_WINDOW,
    COMPOUND_SUBGRAPH_URL,
    CTOKEN_PREFIX,
)
from src.protocols.compound.queries import CompoundQueries

__all__ = [
    "COMPOUND_API_RATE_LIMIT",
    "COMPOUND_API_RATE_WINDOW",
    "COMPOUND_SUBGRAPH_URL",
    "CTOKEN_PREFIX",
    "CompoundQueries",
]
