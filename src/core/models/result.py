"""Aggregation output models."""

from dataclasses import dataclass, field
from typing import List

from .alert import Alert
from .health import ProtocolHealth
from .position import Position


@dataclass
class NormalizedData:
    """Positions and health records produced by one source adapter."""

    positions: List[Position] = field(default_factory=list)
    health: List[ProtocolHealth] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "NormalizedData":
        return cls()


@dataclass
class AggregationResult:
    """Merged view across all sources.

    Positions keep adapter declaration order, then per-adapter order.
    """

    positions: List[Position] = field(default_factory=list)
    protocol_health: List[ProtocolHealth] = field(default_factory=list)
    alerts: List[Alert] = field(default_factory=list)

    @property
    def is_sample(self) -> bool:
        """True when every position came from the fallback dataset."""
        return bool(self.positions) and all(p.is_sample for p in self.positions)
