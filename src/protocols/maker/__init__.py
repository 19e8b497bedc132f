"""MakerDAO protocol configuration."""

from src.protocols.maker.config import (
    MAKER_API_RATE_LIMIT,
    MAKER_API_RATE_WINDOW,
    MAKER_SUBGRAPH_URL,
)
from src.protocols.maker.queries import MakerQueries

__all__ = [
    "MAKER_API_RATE_LIMIT",
    "MAKER_API_RATE_WINDOW",
    "MAKER_SUBGRAPH_URL",
    "MakerQueries",
]
