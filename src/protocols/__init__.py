"""Protocol-specific implementations.

This module contains per-source endpoints, rate limits, contract addresses
and GraphQL queries.

Currently supported:
- Aave V3 (src.protocols.aave)
- Compound (src.protocols.compound)
- MakerDAO DSR (src.protocols.maker)
- DeFiLlama yields index (src.protocols.defillama)
"""
