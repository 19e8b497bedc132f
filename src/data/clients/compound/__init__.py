"""Compound subgraph adapter."""

from src.data.clients.compound.client import CompoundClient
from src.data.clients.compound.parser import CompoundParser

__all__ = [
    "CompoundClient",
    "CompoundParser",
]
