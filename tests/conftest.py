"""Pytest configuration and fixtures."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from config.settings import Settings
from src.core.models import Freshness, Position, ProtocolType
from src.data.cache.memory_cache import MemoryCache


class FakeClock:
    """Manually advanced monotonic clock for cache tests."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults only, ignoring any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock) -> MemoryCache:
    """Fresh, isolated cache per test."""
    return MemoryCache(ttl_seconds=300, clock=clock)


@pytest.fixture
def aave_payload() -> dict:
    """Sample Aave subgraph response."""
    return {
        "userReserves": [
            {
                "id": "0xuser-usdc",
                "currentATokenBalance": "5000000000",  # 5,000 USDC (6 decimals)
                "reserve": {
                    "symbol": "USDC",
                    "name": "USD Coin",
                    "decimals": 6,
                    "liquidityRate": "42000000000000000000000000",  # 4.2% in ray
                },
            },
            {
                "id": "0xuser-dai",
                "currentATokenBalance": "0",
                "reserve": {
                    "symbol": "DAI",
                    "name": "Dai Stablecoin",
                    "decimals": 18,
                    "liquidityRate": "31000000000000000000000000",
                },
            },
        ],
        "reserves": [
            {
                "symbol": "USDC",
                "utilizationRate": "700000000000000000000000000",  # 70%
                "totalLiquidity": "5000000000000000000000000000",  # 5e9 * 1e18
            },
            {
                "symbol": "DAI",
                "utilizationRate": "900000000000000000000000000",  # 90%
                "totalLiquidity": "3000000000000000000000000000",  # 3e9 * 1e18
            },
        ],
    }


@pytest.fixture
def compound_payload() -> dict:
    """Sample Compound subgraph response."""
    return {
        "accountCTokens": [
            {
                "id": "0xctoken-0xuser",
                "symbol": "cUSDT",
                "supplyBalanceUnderlying": "3000000000",  # 3,000 USDT (6 decimals)
                "market": {
                    "symbol": "cUSDT",
                    "name": "Compound USDT",
                    "supplyRate": "1500000000",  # 1.5e-9 per second, WAD
                    "underlyingDecimals": 6,
                },
            },
        ],
        "markets": [
            {"symbol": "cUSDT", "totalSupply": "6000000000", "totalBorrows": "2000000000"},
            {"symbol": "cDAI", "totalSupply": "4000000000", "totalBorrows": "1000000000"},
        ],
    }


@pytest.fixture
def maker_payload() -> dict:
    """Sample Maker subgraph response (DSR ~5%)."""
    return {
        "user": {
            "id": "0xuser",
            "savingsBalance": "2500000000000000000000",  # 2,500 DAI
        },
        "potDsrUpdates": [
            {"dsr": "1000000001547125957863212448", "timestamp": "1700000000"},
        ],
    }


@pytest.fixture
def defillama_body() -> dict:
    """Sample DeFiLlama /pools response."""
    return {
        "status": "success",
        "data": [
            {"project": "aave-v3", "symbol": "USDC", "chain": "Ethereum", "apy": 5.5, "tvlUsd": 1000000000},
            {"project": "compound-v3", "symbol": "USDT", "chain": "Ethereum", "apy": 4.4, "tvlUsd": 500000000},
            {"project": "makerdao", "symbol": "DAI", "chain": "Ethereum", "apy": 0, "tvlUsd": 800000000},
            {"project": "lido", "symbol": "STETH", "chain": "Ethereum", "apy": 3.1, "tvlUsd": 9000000000},
            {"project": "aave-v3", "symbol": "WETH", "chain": "Ethereum", "apy": 1.9, "tvlUsd": 2000000000},
        ],
    }


@pytest.fixture
def make_position():
    """Factory for live positions."""

    def _make(
        protocol: ProtocolType = ProtocolType.AAVE,
        token: str = "USDC",
        apy: str = "4.0",
        balance: str = "1000",
    ) -> Position:
        amount = Decimal(balance)
        return Position(
            protocol=protocol,
            token=token,
            principal=amount,
            balance=amount,
            apy=Decimal(apy),
            earnings=Decimal("0"),
            freshness=Freshness.LIVE,
            fetched_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        )

    return _make
