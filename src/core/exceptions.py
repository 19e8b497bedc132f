"""Exceptions raised by the aggregation engine."""


class AggregatorError(Exception):
    """Base class for errors surfaced to callers of the aggregator."""


class InvalidAddressError(AggregatorError, ValueError):
    """Raised when a wallet address is missing or blank."""


class FallbackError(AggregatorError, RuntimeError):
    """Raised when the sample-data fallback itself cannot be built."""
