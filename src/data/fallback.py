"""Sample dataset shown when no real holdings can be retrieved.

Rates are seeded from the pool index when it has a matching pool, so the
sample looks current; every position is tagged ``Freshness.SAMPLE``.
"""

import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from src.core.constants import DEFAULT_EARNINGS_WINDOW_FACTOR
from src.core.models import (
    Freshness,
    PoolRate,
    Position,
    ProtocolHealth,
    ProtocolType,
    RiskLevel,
)
from src.core.rates import estimate_earnings

logger = logging.getLogger(__name__)

# (protocol, token, principal), in adapter declaration order
SAMPLE_HOLDINGS = (
    (ProtocolType.AAVE, "USDC", Decimal("5000")),
    (ProtocolType.COMPOUND, "USDT", Decimal("3000")),
    (ProtocolType.MAKER, "DAI", Decimal("2500")),
)

DEFAULT_SAMPLE_APYS: Dict[ProtocolType, Decimal] = {
    ProtocolType.AAVE: Decimal("4.2"),
    ProtocolType.COMPOUND: Decimal("3.8"),
    ProtocolType.MAKER: Decimal("5.1"),
}

BASELINE_HEALTH = (
    ProtocolHealth(
        protocol=ProtocolType.AAVE,
        health_score=Decimal("87"),
        tvl="$12.4B",
        utilization=68,
        risk_level=RiskLevel.LOW,
    ),
    ProtocolHealth(
        protocol=ProtocolType.COMPOUND,
        health_score=Decimal("79"),
        tvl="$8.2B",
        utilization=72,
        risk_level=RiskLevel.LOW,
    ),
    ProtocolHealth(
        protocol=ProtocolType.MAKER,
        health_score=Decimal("91"),
        tvl="$15.8B",
        utilization=45,
        risk_level=RiskLevel.LOW,
    ),
)


def seed_sample_rates(pool_rates: Optional[Iterable[PoolRate]]) -> Dict[ProtocolType, Decimal]:
    """Pick a sample APY per protocol from the pool index.

    A pool is used when its project matches the protocol and its symbol
    contains the sample token. Later matches win; a zero APY is ignored.
    """
    rates = dict(DEFAULT_SAMPLE_APYS)
    for pool in pool_rates or []:
        for protocol, token, _ in SAMPLE_HOLDINGS:
            if pool.matches(protocol.llama_project, token) and pool.apy:
                rates[protocol] = pool.apy
    return rates


def build_sample_positions(
    pool_rates: Optional[Iterable[PoolRate]] = None,
    window_factor: Decimal = DEFAULT_EARNINGS_WINDOW_FACTOR,
    fetched_at: Optional[datetime] = None,
) -> List[Position]:
    """Build the three-entry sample dataset.

    earnings = principal * (apy / 100) * window_factor
    balance  = principal + earnings
    """
    rates = seed_sample_rates(pool_rates)
    fetched_at = fetched_at or datetime.now(tz=timezone.utc)

    positions = []
    for protocol, token, principal in SAMPLE_HOLDINGS:
        apy = rates[protocol]
        earnings = estimate_earnings(principal, apy, window_factor)
        positions.append(
            Position(
                protocol=protocol,
                token=token,
                principal=principal,
                balance=principal + earnings,
                apy=apy,
                earnings=earnings,
                freshness=Freshness.SAMPLE,
                fetched_at=fetched_at,
            )
        )
    return positions


def baseline_protocol_health() -> List[ProtocolHealth]:
    """Fixed per-protocol health records that accompany the sample dataset."""
    return list(BASELINE_HEALTH)
