"""Supported lending protocols."""

from enum import Enum


class ProtocolType(Enum):
    """Lending protocols whose positions are aggregated."""

    AAVE = "aave"
    COMPOUND = "compound"
    MAKER = "maker"

    @property
    def display_name(self) -> str:
        """Name shown on positions."""
        return _DISPLAY_NAMES[self]

    @property
    def health_name(self) -> str:
        """Name shown on the protocol health card."""
        return _HEALTH_NAMES[self]

    @property
    def llama_project(self) -> str:
        """DeFiLlama project slug for this protocol."""
        return _LLAMA_PROJECTS[self]


_DISPLAY_NAMES = {
    ProtocolType.AAVE: "Aave V3",
    ProtocolType.COMPOUND: "Compound V3",
    ProtocolType.MAKER: "MakerDAO DSR",
}

_HEALTH_NAMES = {
    ProtocolType.AAVE: "Aave V3",
    ProtocolType.COMPOUND: "Compound V3",
    ProtocolType.MAKER: "MakerDAO",
}

_LLAMA_PROJECTS = {
    ProtocolType.AAVE: "aave-v3",
    ProtocolType.COMPOUND: "compound-v3",
    ProtocolType.MAKER: "makerdao",
}
