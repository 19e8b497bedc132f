"""Unit tests for the source adapter registry."""

from src.data.clients.aave.client import AaveClient
from src.data.clients.compound.client import CompoundClient
from src.data.clients.maker.client import MakerClient
from src.data.clients.registry import (
    SourceAdapterRegistry,
    create_default_adapters,
    default_registry,
)


class TestSourceAdapterRegistry:
    """Tests for SourceAdapterRegistry."""

    def test_default_order(self):
        assert default_registry().available_sources == ["aave", "compound", "maker"]

    def test_create_default_adapters_share_cache(self, cache, settings):
        adapters = create_default_adapters(cache, settings)

        assert [type(a) for a in adapters] == [AaveClient, CompoundClient, MakerClient]
        assert all(a.cache is cache for a in adapters)
        assert all(a.settings is settings for a in adapters)

    def test_reregister_keeps_position(self, cache, settings):
        registry = SourceAdapterRegistry()
        registry.register("aave", AaveClient)
        registry.register("maker", MakerClient)
        registry.register("aave", CompoundClient)

        adapters = registry.create_all(cache, settings)

        assert registry.available_sources == ["aave", "maker"]
        assert [type(a) for a in adapters] == [CompoundClient, MakerClient]

    def test_empty_registry(self, cache, settings):
        assert SourceAdapterRegistry().create_all(cache, settings) == []
