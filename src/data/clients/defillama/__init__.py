"""DeFiLlama yields index adapter."""

from src.data.clients.defillama.client import DefiLlamaClient
from src.data.clients.defillama.parser import DefiLlamaParser

__all__ = [
    "DefiLlamaClient",
    "DefiLlamaParser",
]
