"""Unit tests for DeFiLlama pool index client and parser."""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, patch

from src.data.clients.defillama.client import DefiLlamaClient
from src.data.clients.defillama.parser import DefiLlamaParser


class TestDefiLlamaParser:
    """Tests for DefiLlamaParser."""

    def test_is_supported_pool(self):
        assert DefiLlamaParser.is_supported_pool({"project": "aave-v3", "symbol": "USDC"})
        assert DefiLlamaParser.is_supported_pool({"project": "makerdao", "symbol": "DAI"})

    def test_unsupported_project(self):
        assert not DefiLlamaParser.is_supported_pool({"project": "lido", "symbol": "USDC"})

    def test_non_stablecoin(self):
        assert not DefiLlamaParser.is_supported_pool({"project": "aave-v3", "symbol": "WETH"})

    def test_missing_symbol(self):
        assert not DefiLlamaParser.is_supported_pool({"project": "aave-v3"})

    def test_filter_pools(self, defillama_body):
        pools = DefiLlamaParser.filter_pools(defillama_body["data"])

        assert [p["project"] for p in pools] == ["aave-v3", "compound-v3", "makerdao"]

    def test_parse_pools(self, defillama_body):
        rates = DefiLlamaParser.parse_pools(DefiLlamaParser.filter_pools(defillama_body["data"]))

        assert rates[0].project == "aave-v3"
        assert rates[0].apy == Decimal("5.5")
        assert rates[0].tvl_usd == Decimal("1000000000")
        assert rates[2].apy == Decimal("0")

    def test_parse_pools_skips_bad_entries(self):
        rates = DefiLlamaParser.parse_pools([{"symbol": "USDC"}])

        assert rates == []


class TestDefiLlamaClient:
    """Tests for DefiLlamaClient."""

    @pytest.fixture
    def client(self, cache, settings):
        return DefiLlamaClient(cache, settings)

    def test_cache_key_is_not_user_scoped(self, client):
        assert client.cache_key("0xabc") == "defillama_pools"
        assert client.cache_key("") == "defillama_pools"

    def test_pools_url(self, client):
        assert client._get_pools_url() == "https://yields.llama.fi/pools"

    def test_normalize_has_no_positions(self, client, defillama_body):
        data = client.normalize(defillama_body["data"], "0xabc")

        assert data.positions == []
        assert data.health == []

    @pytest.mark.asyncio
    async def test_fetch_pools_filters_and_caches(self, client, cache, defillama_body):
        """Only the filtered pool list is cached."""
        with patch.object(client, "_get_json", new_callable=AsyncMock) as mock_get:
            mock_get.return_value = defillama_body

            rates = await client.fetch_pools()
            again = await client.fetch_pools()

            assert mock_get.call_count == 1
            assert len(rates) == 3
            assert rates == again
            assert len(cache.get("defillama_pools")) == 3

    @pytest.mark.asyncio
    async def test_malformed_body(self, client, cache):
        with patch.object(client, "_get_json", new_callable=AsyncMock) as mock_get:
            mock_get.return_value = {"status": "error"}

            rates = await client.fetch_pools()

            assert rates == []
            assert cache.get("defillama_pools") is None

    @pytest.mark.asyncio
    async def test_http_error(self, client):
        with patch.object(client, "_get_json", new_callable=AsyncMock) as mock_get:
            mock_get.side_effect = Exception("503 Service Unavailable")

            assert await client.fetch_pools() == []

    @pytest.mark.asyncio
    async def test_close_without_session(self, client):
        await client.close()
