"""Unit tests for the sample dataset."""

from decimal import Decimal

from src.core.models import Freshness, PoolRate, ProtocolType, RiskLevel
from src.data.clients.defillama.parser import DefiLlamaParser
from src.data.fallback import (
    baseline_protocol_health,
    build_sample_positions,
    seed_sample_rates,
)


def _pool(project: str, symbol: str, apy: str) -> PoolRate:
    return PoolRate(project=project, symbol=symbol, chain="Ethereum", apy=Decimal(apy))


class TestSeedSampleRates:
    """Tests for seed_sample_rates."""

    def test_defaults_without_pools(self):
        rates = seed_sample_rates([])

        assert rates == {
            ProtocolType.AAVE: Decimal("4.2"),
            ProtocolType.COMPOUND: Decimal("3.8"),
            ProtocolType.MAKER: Decimal("5.1"),
        }

    def test_seeded_from_index(self, defillama_body):
        pools = DefiLlamaParser.parse_pools(DefiLlamaParser.filter_pools(defillama_body["data"]))

        rates = seed_sample_rates(pools)

        assert rates[ProtocolType.AAVE] == Decimal("5.5")
        assert rates[ProtocolType.COMPOUND] == Decimal("4.4")
        # Zero APY keeps the default
        assert rates[ProtocolType.MAKER] == Decimal("5.1")

    def test_later_match_wins(self):
        rates = seed_sample_rates(
            [_pool("aave-v3", "USDC", "3.0"), _pool("aave-v3", "USDC.E", "6.0")]
        )

        assert rates[ProtocolType.AAVE] == Decimal("6.0")

    def test_other_token_ignored(self):
        rates = seed_sample_rates([_pool("aave-v3", "DAI", "9.0")])

        assert rates[ProtocolType.AAVE] == Decimal("4.2")


class TestBuildSamplePositions:
    """Tests for build_sample_positions."""

    def test_three_sample_positions(self):
        positions = build_sample_positions()

        assert [(p.protocol, p.token) for p in positions] == [
            (ProtocolType.AAVE, "USDC"),
            (ProtocolType.COMPOUND, "USDT"),
            (ProtocolType.MAKER, "DAI"),
        ]
        assert all(p.freshness == Freshness.SAMPLE for p in positions)
        assert all(p.is_sample for p in positions)

    def test_earnings_and_balance(self):
        aave = build_sample_positions()[0]

        assert aave.principal == Decimal("5000")
        assert aave.apy == Decimal("4.2")
        assert aave.earnings == Decimal("21")
        assert aave.balance == Decimal("5021")

    def test_seeded_rates_flow_through(self):
        aave = build_sample_positions([_pool("aave-v3", "USDC", "5.5")])[0]

        assert aave.apy == Decimal("5.5")
        assert aave.balance == Decimal("5027.5")


class TestBaselineHealth:
    """Tests for baseline_protocol_health."""

    def test_baseline(self):
        health = baseline_protocol_health()

        assert [h.name for h in health] == ["Aave V3", "Compound V3", "MakerDAO"]
        assert [h.health_score for h in health] == [87, 79, 91]
        assert [h.tvl for h in health] == ["$12.4B", "$8.2B", "$15.8B"]
        assert [h.utilization for h in health] == [68, 72, 45]
        assert all(h.risk_level == RiskLevel.LOW for h in health)

    def test_returns_new_list(self):
        first = baseline_protocol_health()
        first.clear()

        assert len(baseline_protocol_health()) == 3
