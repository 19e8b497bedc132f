"""Rate encodings used by the supported yield sources.

Every source reports its supply rate in a different fixed-point form. Each
encoding is a variant of :class:`RateEncoding` and has exactly one decoder
that converts it to an annual percentage (``4.2`` means 4.2% per year).
"""

from decimal import Decimal, localcontext
from enum import Enum
from typing import Any, Callable, Dict

from src.core.constants import RAY, RAY_PERCENT_DIVISOR, SECONDS_PER_YEAR, WAD


class RateEncoding(Enum):
    """Supported numeric encodings for supply rates."""

    PERCENT = "percent"  # Already an annual percentage (DeFiLlama)
    RAY_ANNUAL = "ray_annual"  # Annual rate as a 1e27-scaled fraction (Aave liquidityRate)
    WAD_PER_SECOND = "wad_per_second"  # Per-second rate as a 1e18-scaled fraction (Compound)
    RAY_PER_SECOND_FACTOR = "ray_per_second_factor"  # Per-second growth factor, 1e27-scaled (Maker DSR)


def to_decimal(value: Any) -> Decimal:
    """Safely parse a value to Decimal."""
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except Exception:
        return Decimal("0")


def compound_per_second(rate: Decimal, seconds: int = SECONDS_PER_YEAR) -> Decimal:
    """Annual percentage yield of a per-second rate compounded every second.

    apy = ((1 + rate) ^ seconds - 1) * 100
    """
    if rate == 0:
        return Decimal("0")
    with localcontext() as ctx:
        ctx.prec = 40
        growth = (Decimal("1") + rate) ** seconds
    return (growth - Decimal("1")) * Decimal("100")


def _decode_percent(value: Decimal) -> Decimal:
    return value


def _decode_ray_annual(value: Decimal) -> Decimal:
    return value / Decimal(RAY_PERCENT_DIVISOR)


def _decode_wad_per_second(value: Decimal) -> Decimal:
    return compound_per_second(value / Decimal(WAD))


def _decode_ray_per_second_factor(value: Decimal) -> Decimal:
    # A factor of exactly 1 ray (or an unset 0) accrues nothing
    if value <= 0:
        return Decimal("0")
    return compound_per_second(value / Decimal(RAY) - Decimal("1"))


_DECODERS: Dict[RateEncoding, Callable[[Decimal], Decimal]] = {
    RateEncoding.PERCENT: _decode_percent,
    RateEncoding.RAY_ANNUAL: _decode_ray_annual,
    RateEncoding.WAD_PER_SECOND: _decode_wad_per_second,
    RateEncoding.RAY_PER_SECOND_FACTOR: _decode_ray_per_second_factor,
}


def decode_rate(value: Any, encoding: RateEncoding) -> Decimal:
    """Decode a raw rate into an annual percentage.

    Args:
        value: Raw rate as returned by the source (string, int or Decimal)
        encoding: How the source encodes the rate

    Returns:
        Annual percentage yield as Decimal
    """
    return _DECODERS[encoding](to_decimal(value))


def scale_balance(raw_amount: Any, decimals: Any) -> Decimal:
    """Convert a raw integer token amount to whole units."""
    try:
        places = int(decimals)
    except (TypeError, ValueError):
        places = 18
    return to_decimal(raw_amount) / (Decimal(10) ** places)


def estimate_earnings(balance: Decimal, apy: Decimal, window_factor: Decimal) -> Decimal:
    """Rough earnings estimate: balance * (apy / 100) * window_factor.

    The window factor is a placeholder fraction of a year, not a real accrual
    period, so the result is an approximation rather than ledger-exact
    interest.
    """
    return balance * (apy / Decimal("100")) * window_factor
