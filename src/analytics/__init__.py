"""Analytics derived from aggregated positions."""

from src.analytics.alerts import generate_alerts

__all__ = ["generate_alerts"]
