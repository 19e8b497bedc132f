"""Maker protocol subgraph response parser.

The user's DSR balance is a raw 18-decimal DAI amount; the DSR itself is a
ray-scaled per-second growth factor.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, Optional

from src.core.models import (
    Freshness,
    Position,
    ProtocolHealth,
    ProtocolType,
    RiskLevel,
)
from src.core.rates import (
    RateEncoding,
    decode_rate,
    estimate_earnings,
    scale_balance,
    to_decimal,
)
from src.protocols.maker.config import (
    DAI_DECIMALS,
    MAKER_HEALTH_SCORE,
    MAKER_TVL,
    MAKER_UTILIZATION,
)


class MakerParser:
    """Parser for Maker protocol subgraph responses."""

    parse_decimal = staticmethod(to_decimal)

    @classmethod
    def parse_dsr_apy(cls, payload: Dict[str, Any]) -> Decimal:
        """APY of the most recent DSR update, 0 if none was reported."""
        updates = payload.get("potDsrUpdates") or []
        if not updates:
            return Decimal("0")
        return decode_rate(updates[0].get("dsr"), RateEncoding.RAY_PER_SECOND_FACTOR)

    @classmethod
    def parse_savings_to_position(
        cls,
        payload: Dict[str, Any],
        window_factor: Decimal,
        fetched_at: Optional[datetime] = None,
    ) -> Optional[Position]:
        """Parse the user's DSR balance to a DAI Position.

        Returns:
            Position, or None if the user has no savings balance
        """
        user = payload.get("user")
        if not user:
            return None

        raw_balance = cls.parse_decimal(user.get("savingsBalance"))
        if raw_balance <= 0:
            return None

        balance = scale_balance(raw_balance, DAI_DECIMALS)
        apy = cls.parse_dsr_apy(payload)

        return Position(
            protocol=ProtocolType.MAKER,
            token="DAI",
            principal=balance,
            balance=balance,
            apy=apy,
            earnings=estimate_earnings(balance, apy, window_factor),
            freshness=Freshness.LIVE,
            fetched_at=fetched_at or datetime.now(tz=timezone.utc),
        )

    @staticmethod
    def has_data(payload: Dict[str, Any]) -> bool:
        """Check if the subgraph reported anything at all."""
        return bool(payload.get("user")) or bool(payload.get("potDsrUpdates"))

    @staticmethod
    def protocol_health() -> ProtocolHealth:
        """Fixed health record; the subgraph carries no utilization data."""
        return ProtocolHealth(
            protocol=ProtocolType.MAKER,
            health_score=MAKER_HEALTH_SCORE,
            tvl=MAKER_TVL,
            utilization=MAKER_UTILIZATION,
            risk_level=RiskLevel.LOW,
        )
