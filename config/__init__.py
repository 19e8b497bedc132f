"""Configuration module for the yield position aggregator."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
