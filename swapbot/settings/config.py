"""
Configuration management for the swap bot.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from swapbot.models.chain import CHAIN_KEY_BY_ID, SWAP_CHAIN_CONFIGS, ChainConfig

PROJECT_ROOT = Path(__file__).resolve().parents[2]


# Load .env from the working directory first, then from the project root
env_file = Path(".env")
if env_file.exists():
    load_dotenv(env_file, override=False)
else:
    load_dotenv(PROJECT_ROOT / ".env", override=False)

CHAIN_CONFIGS: dict[str, ChainConfig] = SWAP_CHAIN_CONFIGS
CHAIN_BY_ID: dict[int, str] = dict(CHAIN_KEY_BY_ID)


def get_chain_config(chain: str | int | None) -> ChainConfig | None:
    """Return chain configuration by chain name or chain id."""
    if chain is None:
        return None
    if isinstance(chain, int):
        chain_key = CHAIN_BY_ID.get(chain)
        return CHAIN_CONFIGS.get(chain_key) if chain_key else None
    return CHAIN_CONFIGS.get(chain.strip().lower())


def _address_input(name: str) -> dict[str, Any]:
    return {"internalType": "address", "name": name, "type": "address"}


def _uint_input(name: str) -> dict[str, Any]:
    return {"internalType": "uint256", "name": name, "type": "uint256"}


_PATH_INPUT: dict[str, Any] = {"internalType": "address[]", "name": "path", "type": "address[]"}
_AMOUNTS_OUTPUT: list[dict[str, Any]] = [
    {"internalType": "uint256[]", "name": "amounts", "type": "uint256[]"}
]

ROUTER_V2_ABI: list[dict[str, Any]] = [
    {
        "inputs": [_uint_input("amountOutMin"), _PATH_INPUT, _address_input("to"), _uint_input("deadline")],
        "name": "swapExactETHForTokens",
        "outputs": _AMOUNTS_OUTPUT,
        "stateMutability": "payable",
        "type": "function",
    },
    {
        "inputs": [
            _uint_input("amountIn"),
            _uint_input("amountOutMin"),
            _PATH_INPUT,
            _address_input("to"),
            _uint_input("deadline"),
        ],
        "name": "swapExactTokensForETH",
        "outputs": _AMOUNTS_OUTPUT,
        "stateMutability": "nonpayable",
        "type": "function",
    },
    {
        "inputs": [
            _uint_input("amountIn"),
            _uint_input("amountOutMin"),
            _PATH_INPUT,
            _address_input("to"),
            _uint_input("deadline"),
        ],
        "name": "swapExactTokensForTokens",
        "outputs": _AMOUNTS_OUTPUT,
        "stateMutability": "nonpayable",
        "type": "function",
    },
]

ERC20_ABI: list[dict[str, Any]] = [
    {
        "inputs": [_address_input("spender"), _uint_input("amount")],
        "name": "approve",
        "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
        "stateMutability": "nonpayable",
        "type": "function",
    },
    {
        "inputs": [_address_input("owner"), _address_input("spender")],
        "name": "allowance",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
]

PRICE_FEED_ABI: list[dict[str, Any]] = [
    {
        "inputs": [],
        "name": "latestAnswer",
        "outputs": [{"internalType": "int256", "name": "", "type": "int256"}],
        "stateMutability": "view",
        "type": "function",
    },
]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        extra="ignore",
        env_ignore_empty=True,
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
    )

    app_name: str = "Price and Swap Bot"
    environment: str = Field(default="development", validation_alias="ENVIRONMENT")

    # Chain / wallet
    rpc_url: Optional[str] = Field(default=None, validation_alias="RPC_URL")
    private_key: Optional[str] = Field(default=None, validation_alias="PRIVATE_KEY")
    chain: str = Field(default="sepolia", validation_alias="CHAIN")

    # Overrides for the registry defaults of the selected chain
    router_address: Optional[str] = Field(default=None, validation_alias="ROUTER_ADDRESS")
    bridge_asset_address: Optional[str] = Field(default=None, validation_alias="BRIDGE_ASSET_ADDRESS")
    link_token_address: Optional[str] = Field(default=None, validation_alias="LINK_TOKEN_ADDRESS")

    # Chainlink price feeds
    link_eth_price_feed: Optional[str] = Field(default=None, validation_alias="LINK_ETH_PRICE_FEED")
    eth_usd_price_feed: Optional[str] = Field(default=None, validation_alias="ETH_USD_PRICE_FEED")

    # Swap policy
    deadline_horizon_seconds: int = Field(default=300, gt=0, validation_alias="DEADLINE_HORIZON_SECONDS")
    gas_multiplier_bps: int = Field(default=20_000, ge=0, validation_alias="GAS_MULTIPLIER_BPS")

    # Logging
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str = Field(default="logs/swapbot.log", validation_alias="LOG_FILE")

    @property
    def chain_config(self) -> ChainConfig | None:
        return get_chain_config(self.chain)

    @property
    def chain_id(self) -> int | None:
        config = self.chain_config
        return config.chain_id if config else None

    @property
    def resolved_router_address(self) -> str | None:
        config = self.chain_config
        return self.router_address or (config.router if config else None)

    @property
    def resolved_bridge_asset(self) -> str | None:
        config = self.chain_config
        return self.bridge_asset_address or (config.bridge_asset if config else None)

    @property
    def resolved_link_token(self) -> str | None:
        config = self.chain_config
        return self.link_token_address or (config.link_token if config else None)

    def price_feed_address(self, env_var: str) -> str | None:
        return {
            "LINK_ETH_PRICE_FEED": self.link_eth_price_feed,
            "ETH_USD_PRICE_FEED": self.eth_usd_price_feed,
        }.get(env_var)


settings = Settings()
