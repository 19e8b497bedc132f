"""DeFiLlama yields API response parser."""

import logging
from typing import Any, Dict, List

from src.core.models import PoolRate
from src.core.rates import RateEncoding, decode_rate, to_decimal
from src.protocols.defillama.config import STABLECOIN_SYMBOLS, SUPPORTED_PROJECTS

logger = logging.getLogger(__name__)


class DefiLlamaParser:
    """Parser for DeFiLlama ``/pools`` responses."""

    @staticmethod
    def is_supported_pool(pool: Dict[str, Any]) -> bool:
        """Keep stablecoin pools of the supported lending protocols."""
        symbol = pool.get("symbol") or ""
        if not symbol:
            return False
        if pool.get("project") not in SUPPORTED_PROJECTS:
            return False
        return any(token in symbol for token in STABLECOIN_SYMBOLS)

    @classmethod
    def filter_pools(cls, pools: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return [pool for pool in pools if isinstance(pool, dict) and cls.is_supported_pool(pool)]

    @staticmethod
    def parse_pools(pools: List[Dict[str, Any]]) -> List[PoolRate]:
        """Convert filtered pool dicts to PoolRate records, skipping bad entries."""
        rates = []
        for pool in pools or []:
            try:
                rates.append(
                    PoolRate(
                        project=pool["project"],
                        symbol=pool["symbol"],
                        chain=pool.get("chain") or "",
                        apy=decode_rate(pool.get("apy"), RateEncoding.PERCENT),
                        tvl_usd=to_decimal(pool.get("tvlUsd")),
                    )
                )
            except (KeyError, TypeError) as e:
                logger.warning(f"Failed to parse DeFiLlama pool: {e}")
        return rates
