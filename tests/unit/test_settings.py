"""Unit tests for application settings."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from config.settings import Settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, settings):
        assert settings.wallet_addresses == []
        assert settings.cache_ttl_seconds == 300
        assert settings.request_timeout_seconds == 10
        assert settings.earnings_window_factor == Decimal("0.1")
        assert settings.defillama_base_url == "https://yields.llama.fi"
        assert settings.log_level == "WARNING"

    def test_wallet_addresses_comma_separated(self):
        settings = Settings(_env_file=None, wallet_addresses="0xabc, 0xdef,")

        assert settings.wallet_addresses == ["0xabc", "0xdef"]

    def test_wallet_addresses_from_env(self, monkeypatch):
        monkeypatch.setenv("WALLET_ADDRESSES", "0xabc,0xdef")

        assert Settings(_env_file=None).wallet_addresses == ["0xabc", "0xdef"]

    def test_blank_wallet_addresses(self):
        assert Settings(_env_file=None, wallet_addresses="  ").wallet_addresses == []

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("CACHE_TTL_SECONDS", "60")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.cache_ttl_seconds == 60
        assert settings.log_level == "DEBUG"

    def test_unknown_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "loud")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_ttl_bounds(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, cache_ttl_seconds=0)
