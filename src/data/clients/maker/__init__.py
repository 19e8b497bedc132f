"""Maker DSR subgraph adapter."""

from src.data.clients.maker.client import MakerClient
from src.data.clients.maker.parser import MakerParser

__all__ = [
    "MakerClient",
    "MakerParser",
]
