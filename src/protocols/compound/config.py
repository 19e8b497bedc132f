"""Compound protocol-specific configuration and constants."""

# Subgraph rate limits
COMPOUND_API_RATE_LIMIT = 100  # requests per minute
COMPOUND_API_RATE_WINDOW = 60  # seconds

COMPOUND_SUBGRAPH_URL = "https://api.thegraph.com/subgraphs/name/graphprotocol/compound-v2"

# cToken symbols carry this prefix in front of the underlying symbol
CTOKEN_PREFIX = "c"
