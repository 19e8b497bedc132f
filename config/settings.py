"""Pydantic settings for the yield position aggregator."""

from decimal import Decimal
from functools import lru_cache
from typing import Annotated, List, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Wallet addresses used by the CLI when none is given
    wallet_addresses: Annotated[List[str], NoDecode] = Field(default_factory=list, description="Wallet addresses to aggregate")

    # Source endpoints
    aave_subgraph_url: str = Field(
        default="https://api.thegraph.com/subgraphs/name/aave/protocol-v3",
        description="Aave V3 subgraph URL",
    )
    compound_subgraph_url: str = Field(
        default="https://api.thegraph.com/subgraphs/name/graphprotocol/compound-v2",
        description="Compound subgraph URL",
    )
    maker_subgraph_url: str = Field(
        default="https://api.thegraph.com/subgraphs/name/protofire/maker-protocol",
        description="Maker protocol subgraph URL",
    )
    defillama_base_url: str = Field(
        default="https://yields.llama.fi",
        description="DeFiLlama yields API base URL",
    )

    # Cache / network
    cache_ttl_seconds: int = Field(default=300, ge=1, le=3600, description="Cache TTL in seconds")
    request_timeout_seconds: int = Field(default=10, ge=1, le=120, description="Per-request timeout in seconds")

    # Earnings estimate
    earnings_window_factor: Decimal = Field(
        default=Decimal("0.1"),
        ge=0,
        le=1,
        description="Fraction of a year used for the earnings estimate",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Root log level for the CLI",
    )

    @field_validator("wallet_addresses", mode="before")
    @classmethod
    def parse_wallet_addresses(cls, v):
        """Parse comma-separated wallet addresses."""
        if isinstance(v, str):
            if not v.strip():
                return []
            return [addr.strip() for addr in v.split(",") if addr.strip()]
        return v or []

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Upper-case the configured log level."""
        if isinstance(v, str):
            return v.strip().upper() or "WARNING"
        return v


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
