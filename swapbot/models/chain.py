"""Typed chain/network models and default swap chain registry."""

from __future__ import annotations

import re
from typing import Final
from urllib.parse import urlparse

from pydantic import BaseModel, field_validator

ADDRESS_REGEX: Final[re.Pattern[str]] = re.compile(r"^0x[a-fA-F0-9]{40}$")


class ChainConfig(BaseModel):
    """Runtime chain configuration for Uniswap V2-style router swaps."""

    name: str
    chain_id: int
    router: str
    bridge_asset: str
    link_token: str | None = None
    explorer_base_url: str | None = None

    model_config = {
        "frozen": True,
    }

    @field_validator("router", "bridge_asset", "link_token")
    @classmethod
    def validate_address(cls, value: str | None) -> str | None:
        if value is None:
            return value
        if not ADDRESS_REGEX.match(value):
            raise ValueError(f"Invalid Ethereum address: {value}")
        return value

    @field_validator("explorer_base_url")
    @classmethod
    def validate_explorer_base_url(cls, value: str | None) -> str | None:
        if value is None:
            return value
        parsed = urlparse(value)
        if parsed.scheme not in {"http", "https"} or not parsed.netloc:
            raise ValueError(f"Invalid explorer URL: {value}")
        return value.rstrip("/")

    def explorer_tx_url(self, tx_hash: str) -> str | None:
        if not self.explorer_base_url:
            return None
        return f"{self.explorer_base_url}/tx/{tx_hash}"


SWAP_CHAIN_CONFIGS: dict[str, ChainConfig] = {
    "sepolia": ChainConfig(
        name="sepolia",
        chain_id=11155111,
        router="0xeE567Fe1712Faf6149d80dA1E6934E354124CfE3",
        bridge_asset="0xfFf9976782d46CC05630D1f6eBAb18b2324d6B14",
        link_token="0x779877A7B0D9E8603169DdbD7836e478b4624789",
        explorer_base_url="https://sepolia.etherscan.io",
    ),
    "ethereum": ChainConfig(
        name="ethereum",
        chain_id=1,
        router="0x7a250d5630B4cF539739dF2C5dAcb4c659F2488D",
        bridge_asset="0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2",
        link_token="0x514910771AF9Ca656af840dff83E8264EcF986CA",
        explorer_base_url="https://etherscan.io",
    ),
}

CHAIN_KEY_BY_ID: dict[int, str] = {config.chain_id: key for key, config in SWAP_CHAIN_CONFIGS.items()}
