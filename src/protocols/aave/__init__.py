"""Aave V3 protocol configuration."""

from src.protocols.aave.config import (
    AAVE_API_RATE_LIMIT,
    AAVE_API_RATE_WINDOW,
    AAVE_V3_SUBGRAPH_URL,
)
from src.protocols.aave.queries import AaveQueries

__all__ = [
    "AAVE_API_RATE_LIMIT",
    "AAVE_API_RATE_WINDOW",
    "AAVE_V3_SUBGRAPH_URL",
    "AaveQueries",
]
