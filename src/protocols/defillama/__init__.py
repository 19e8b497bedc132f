"""DeFiLlama yields API configuration."""

from src.protocols.defillama.config import (
    DEFILLAMA_API_RATE_LIMIT,
    DEFILLAMA_API_RATE_WINDOW,
    DEFILLAMA_BASE_URL,
    DEFILLAMA_POOLS_PATH,
    STABLECOIN_SYMBOLS,
    SUPPORTED_PROJECTS,
)

__all__ = [
    "DEFILLAMA_API_RATE_LIMIT",
    "DEFILLAMA_API_RATE_WINDOW",
    "DEFILLAMA_BASE_URL",
    "DEFILLAMA_POOLS_PATH",
    "STABLECOIN_SYMBOLS",
    "SUPPORTED_PROJECTS",
]
