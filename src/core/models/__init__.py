"""Core data models for the yield position aggregator."""

from .protocol import ProtocolType
from .position import Freshness, Position
from .health import ProtocolHealth, RiskLevel, format_tvl, round_percent
from .alert import Alert, AlertType
from .pool import PoolRate
from .result import AggregationResult, NormalizedData

__all__ = [
    "ProtocolType",
    "Freshness",
    "Position",
    "ProtocolHealth",
    "RiskLevel",
    "format_tvl",
    "round_percent",
    "Alert",
    "AlertType",
    "PoolRate",
    "AggregationResult",
    "NormalizedData",
]
