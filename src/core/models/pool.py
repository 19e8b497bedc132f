"""Pool index rate model."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class PoolRate:
    """A single pool from the yield index, filtered to supported protocols."""

    project: str  # DeFiLlama project slug, e.g. "aave-v3"
    symbol: str
    chain: str
    apy: Decimal  # Annual percentage
    tvl_usd: Decimal = Decimal("0")

    def matches(self, project: str, token: str) -> bool:
        """Check if this pool belongs to a project and quotes a token."""
        return self.project == project and token in self.symbol
