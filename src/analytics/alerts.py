"""Yield-optimization alert generation.

Pure functions over a set of normalized positions: no I/O, no caching, and
the same input (in any order) always yields the same alerts.
"""

import hashlib
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List, Optional

from src.core.models import Alert, AlertType, Position

# Minimum APY spread (percentage points) between best and worst position
YIELD_SPREAD_THRESHOLD = Decimal("1.0")

OPPORTUNITY_TITLE = "Yield Optimization Opportunity"


def _ranking_key(position: Position):
    # Total order so ties resolve the same way regardless of input order
    return (
        -position.apy,
        position.protocol.value,
        position.token,
        position.principal,
        position.balance,
    )


def _fixed(value: Decimal, places: int) -> str:
    """Format with a fixed number of decimals, halves rounded away from zero."""
    return format(value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP), "f")


def _alert_id(alert_type: AlertType, title: str, message: str) -> str:
    digest = hashlib.sha1(f"{alert_type.value}|{title}|{message}".encode("utf-8"))
    return digest.hexdigest()[:16]


def generate_alerts(positions: Optional[Iterable[Position]]) -> List[Alert]:
    """Derive yield alerts from positions.

    Emits at most one alert: when the best and worst APY differ by more than
    one percentage point, a success alert suggests moving funds from the
    lowest-yielding protocol to the highest-yielding one.

    Args:
        positions: Normalized positions (real or sample)

    Returns:
        List with zero or one Alert
    """
    ranked = sorted(positions or [], key=_ranking_key)
    if not ranked:
        return []

    highest = ranked[0]
    lowest = ranked[-1]
    spread = highest.apy - lowest.apy
    if spread <= YIELD_SPREAD_THRESHOLD:
        return []

    message = (
        f"{highest.token} APY on {highest.protocol_name} is {_fixed(highest.apy, 2)}% "
        f"(+{_fixed(spread, 1)}% vs {lowest.protocol_name}). "
        f"Consider reallocating funds for better returns."
    )
    stamps = [p.fetched_at for p in ranked if p.fetched_at is not None]

    return [
        Alert(
            id=_alert_id(AlertType.SUCCESS, OPPORTUNITY_TITLE, message),
            type=AlertType.SUCCESS,
            title=OPPORTUNITY_TITLE,
            message=message,
            timestamp=max(stamps) if stamps else None,
        )
    ]
