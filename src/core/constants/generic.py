"""Generic constants for DeFi rate and balance calculations.

These constants are protocol-agnostic and can be used across different protocols.
"""

from decimal import Decimal

# Time constants
SECONDS_PER_YEAR = 365 * 24 * 3600  # 31,536,000

# Precision constants
WAD = 10**18  # Standard 18 decimal precision (Compound rates, DAI balances)
RAY = 10**27  # 27 decimal precision (Aave rates, Maker DSR)

# Ray-scaled fraction -> percent
RAY_PERCENT_DIVISOR = 10**25

# Earnings estimate: fraction of a year applied to balance * apy
DEFAULT_EARNINGS_WINDOW_FACTOR = Decimal("0.1")

# Cache
DEFAULT_CACHE_TTL_SECONDS = 300

# Utilization thresholds (percent) for risk classification
ELEVATED_UTILIZATION = Decimal("80")
HIGH_UTILIZATION = Decimal("95")

# Health score floor for utilization-derived scores
MIN_HEALTH_SCORE = Decimal("60")
