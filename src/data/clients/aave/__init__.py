"""Aave V3 subgraph adapter."""

from src.data.clients.aave.client import AaveClient
from src.data.clients.aave.parser import AaveParser

__all__ = [
    "AaveClient",
    "AaveParser",
]
