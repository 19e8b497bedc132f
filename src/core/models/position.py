"""Normalized yield position model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from .protocol import ProtocolType


class Freshness(Enum):
    """Where a position's numbers came from."""

    LIVE = "live"
    SAMPLE = "sample"


@dataclass(frozen=True)
class Position:
    """One user holding in one protocol/token, normalized across sources."""

    protocol: ProtocolType
    token: str

    principal: Decimal  # Deposited amount in token units
    balance: Decimal  # Current balance in token units
    apy: Decimal  # Annual percentage, 4.2 == 4.2%
    earnings: Decimal  # Estimated, see src.core.rates.estimate_earnings

    freshness: Freshness = Freshness.LIVE
    fetched_at: Optional[datetime] = None

    @property
    def protocol_name(self) -> str:
        return self.protocol.display_name

    @property
    def is_sample(self) -> bool:
        return self.freshness == Freshness.SAMPLE
