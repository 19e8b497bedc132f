"""Compound subgraph response parser.

Supply balances are raw underlying amounts scaled by the market's
underlying decimals; supply rates are per-second WAD-scaled fractions.
"""

import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List, Optional

from src.core.constants import MIN_HEALTH_SCORE
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
from src.protocols.compound.config import CTOKEN_PREFIX

logger = logging.getLogger(__name__)


class CompoundParser:
    """Parser for Compound subgraph responses."""

    parse_decimal = staticmethod(to_decimal)

    @staticmethod
    def underlying_symbol(ctoken_symbol: str) -> str:
        """Strip the cToken prefix, e.g. "cUSDC" -> "USDC"."""
        if ctoken_symbol.startswith(CTOKEN_PREFIX):
            return ctoken_symbol[len(CTOKEN_PREFIX):]
        return ctoken_symbol

    @classmethod
    def parse_account_ctoken_to_position(
        cls,
        account_ctoken: Dict[str, Any],
        window_factor: Decimal,
        fetched_at: Optional[datetime] = None,
    ) -> Optional[Position]:
        """Parse a Compound accountCToken to a Position.

        Returns:
            Position, or None if nothing is supplied
        """
        raw_balance = cls.parse_decimal(account_ctoken.get("supplyBalanceUnderlying"))
        if raw_balance <= 0:
            return None

        market = account_ctoken.get("market") or {}
        balance = scale_balance(raw_balance, market.get("underlyingDecimals", 18))
        apy = decode_rate(market.get("supplyRate"), RateEncoding.WAD_PER_SECOND)

        return Position(
            protocol=ProtocolType.COMPOUND,
            token=cls.underlying_symbol(market.get("symbol") or account_ctoken.get("symbol", "???")),
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
        """Parse all account cTokens, skipping malformed entries."""
        positions = []
        for account_ctoken in payload.get("accountCTokens") or []:
            try:
                position = cls.parse_account_ctoken_to_position(
                    account_ctoken, window_factor, fetched_at
                )
            except Exception as e:
                logger.warning(f"Failed to parse Compound account cToken: {e}")
                continue
            if position:
                positions.append(position)
        return positions

    @classmethod
    def parse_markets_to_health(
        cls,
        markets: List[Dict[str, Any]],
    ) -> Optional[ProtocolHealth]:
        """Derive protocol health from market totals.

        utilization = sum(totalBorrows) / sum(totalSupply) * 100
        health      = max(60, 100 - utilization)
        tvl         = sum(totalSupply), in billions
        """
        markets = [m for m in markets if isinstance(m, dict)]
        if not markets:
            return None

        total_supply = sum(
            (cls.parse_decimal(m.get("totalSupply")) for m in markets), Decimal("0")
        )
        total_borrows = sum(
            (cls.parse_decimal(m.get("totalBorrows")) for m in markets), Decimal("0")
        )
        utilization = (
            total_borrows / total_supply * Decimal("100")
            if total_supply > 0
            else Decimal("0")
        )

        return ProtocolHealth(
            protocol=ProtocolType.COMPOUND,
            health_score=max(MIN_HEALTH_SCORE, Decimal("100") - utilization),
            tvl=format_tvl(total_supply),
            utilization=round_percent(utilization),
            risk_level=RiskLevel.from_utilization(utilization),
        )
