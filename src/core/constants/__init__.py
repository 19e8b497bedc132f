"""Core constants module.

Re-exports all constants for convenience.
"""

from src.core.constants.generic import (
    SECONDS_PER_YEAR,
    WAD,
    RAY,
    RAY_PERCENT_DIVISOR,
    DEFAULT_EARNINGS_WINDOW_FACTOR,
    DEFAULT_CACHE_TTL_SECONDS,
    ELEVATED_UTILIZATION,
    HIGH_UTILIZATION,
    MIN_HEALTH_SCORE,
)

__all__ = [
    "SECONDS_PER_YEAR",
    "WAD",
    "RAY",
    "RAY_PERCENT_DIVISOR",
    "DEFAULT_EARNINGS_WINDOW_FACTOR",
    "DEFAULT_CACHE_TTL_SECONDS",
    "ELEVATED_UTILIZATION",
    "HIGH_UTILIZATION",
    "MIN_HEALTH_SCORE",
]
