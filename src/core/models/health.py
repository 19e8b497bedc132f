"""Protocol health snapshot model."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from src.core.constants import ELEVATED_UTILIZATION, HIGH_UTILIZATION

from .protocol import ProtocolType


class RiskLevel(Enum):
    """Risk level derived from protocol utilization."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @classmethod
    def from_utilization(cls, utilization: Decimal) -> "RiskLevel":
        """Classify a utilization percentage (0-100)."""
        if utilization >= HIGH_UTILIZATION:
            return cls.HIGH
        if utilization >= ELEVATED_UTILIZATION:
            return cls.MEDIUM
        return cls.LOW


@dataclass(frozen=True)
class ProtocolHealth:
    """Aggregate risk/liquidity snapshot for a protocol."""

    protocol: ProtocolType
    health_score: Decimal  # 0-100, higher is better
    tvl: str  # Formatted, e.g. "$12.4B"
    utilization: int  # Percent, 0-100
    risk_level: RiskLevel

    @property
    def name(self) -> str:
        return self.protocol.health_name


def round_percent(value: Decimal) -> int:
    """Round a percentage to the nearest whole number, halves up."""
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_tvl(amount_usd: Decimal) -> str:
    """Format a USD amount in billions, e.g. 12_400_000_000 -> "$12.4B"."""
    return f"${amount_usd / Decimal(10**9):.1f}B"
