"""Aave V3 protocol-specific configuration and constants."""

# Subgraph rate limits
AAVE_API_RATE_LIMIT = 100  # requests per minute
AAVE_API_RATE_WINDOW = 60  # seconds

# Aave V3 subgraph (The Graph)
AAVE_V3_SUBGRAPH_URL = "https://api.thegraph.com/subgraphs/name/aave/protocol-v3"
