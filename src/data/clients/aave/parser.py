"""Aave V3 subgraph response parser.

Contains all parsing logic for converting Aave subgraph payloads into
domain models.

Balances are raw aToken amounts scaled by the reserve decimals; liquidity
and utilization rates are ray-scaled (1e27) fractions.
"""

import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List, Optional

from src.core.constants import MIN_HEALTH_SCORE, WAD
from src.core.models import (
    Freshness,
    Position,
    ProtocolHealth,
    ProtocolType,
    RiskLevel,
    format_tvl,
    round_percent,
)
from src.core.rates import (
    RateEncoding,
    decode_rate,
    estimate_earnings,
    scale_balance,
    to_decimal,
)

logger = logging.getLogger(__name__)


class AaveParser:
    """Parser for Aave V3 subgraph responses."""

    parse_decimal = staticmethod(to_decimal)

    @classmethod
    def parse_user_reserve_to_position(
        cls,
        user_reserve: Dict[str, Any],
        window_factor: Decimal,
        fetched_at: Optional[datetime] = None,
    ) -> Optional[Position]:
        """Parse an Aave user reserve to a Position.

        Args:
            user_reserve: userReserves item from the subgraph
            window_factor: Earnings window fraction
            fetched_at: Time the payload was produced

        Returns:
            Position, or None if the user holds no aTokens
        """
        raw_balance = cls.parse_decimal(user_reserve.get("currentATokenBalance"))
        if raw_balance <= 0:
            return None

        reserve = user_reserve.get("reserve") or {}
        balance = scale_balance(raw_balance, reserve.get("decimals", 18))
        apy = decode_rate(reserve.get("liquidityRate"), RateEncoding.RAY_ANNUAL)

        return Position(
            protocol=ProtocolType.AAVE,
            token=reserve.get("symbol", "???"),
            # The subgraph has no cost basis, deposited amount == balance
            principal=balance,
            balance=balance,
            apy=apy,
            earnings=estimate_earnings(balance, apy, window_factor),
            freshness=Freshness.LIVE,
            fetched_at=fetched_at or datetime.now(tz=timezone.utc),
        )

    @classmethod
    def parse_positions(
        cls,
        payload: Dict[str, Any],
        window_factor: Decimal,
        fetched_at: Optional[datetime] = None,
    ) -> List[Position]:
        """Parse all user reserves, skipping malformed entries."""
        positions = []
        for user_reserve in payload.get("userReserves") or []:
            try:
                position = cls.parse_user_reserve_to_position(
                    user_reserve, window_factor, fetched_at
                )
            except Exception as e:
                logger.warning(f"Failed to parse Aave user reserve: {e}")
                continue
            if position:
                positions.append(position)
        return positions

    @classmethod
    def parse_reserves_to_health(
        cls,
        reserves: List[Dict[str, Any]],
    ) -> Optional[ProtocolHealth]:
        """Derive protocol health from the reserve list.

        utilization = mean reserve utilizationRate (ray -> percent)
        health      = max(60, 100 - utilization)
        tvl         = sum(totalLiquidity) / 1e18, in billions
        """
        reserves = [r for r in reserves if isinstance(r, dict)]
        if not reserves:
            return None

        total_liquidity = sum(
            (cls.parse_decimal(r.get("totalLiquidity")) for r in reserves),
            Decimal("0"),
        )
        utilization = sum(
            (decode_rate(r.get("utilizationRate"), RateEncoding.RAY_ANNUAL) for r in reserves),
            Decimal("0"),
        ) / len(reserves)

        return ProtocolHealth(
            protocol=ProtocolType.AAVE,
            health_score=max(MIN_HEALTH_SCORE, Decimal("100") - utilization),
            tvl=format_tvl(total_liquidity / Decimal(WAD)),
            utilization=round_percent(utilization),
            risk_level=RiskLevel.from_utilization(utilization),
        )
