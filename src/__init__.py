"""Yield position aggregator: cross-protocol lending positions, health and alerts."""

__version__ = "0.1.0"
