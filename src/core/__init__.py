"""Core module - models, constants and rate encodings."""

from .models import (
    AggregationResult,
    Alert,
    AlertType,
    Freshness,
    NormalizedData,
    PoolRate,
    Position,
    ProtocolHealth,
    ProtocolType,
    RiskLevel,
)
from .constants import SECONDS_PER_YEAR, WAD, RAY
from .exceptions import AggregatorError, FallbackError, InvalidAddressError
from .rates import RateEncoding, decode_rate

__all__ = [
    "AggregationResult",
    "Alert",
    "AlertType",
    "Freshness",
    "NormalizedData",
    "PoolRate",
    "Position",
    "ProtocolHealth",
    "ProtocolType",
    "RiskLevel",
    "SECONDS_PER_YEAR",
    "WAD",
    "RAY",
    "AggregatorError",
    "FallbackError",
    "InvalidAddressError",
    "RateEncoding",
    "decode_rate",
]
