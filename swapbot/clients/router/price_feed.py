"""Chainlink aggregator reads used for the pre-swap price display."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from swapbot.clients.router.errors import InvalidInput
from swapbot.clients.router.rpc import ChainClient
from swapbot.logging import log
from swapbot.settings.config import PRICE_FEED_ABI, Settings


@dataclass(frozen=True)
class PriceFeed:
    name: str
    env_var: str
    decimals: int

    def address(self, settings: Settings) -> str:
        address = settings.price_feed_address(self.env_var)
        if not address:
            raise InvalidInput(f"Missing price feed address: set {self.env_var} in .env")
        return address


LINK_ETH = PriceFeed(name="LINK/ETH", env_var="LINK_ETH_PRICE_FEED", decimals=18)
ETH_USD = PriceFeed(name="ETH/USD", env_var="ETH_USD_PRICE_FEED", decimals=8)

PRICE_FEEDS: dict[str, PriceFeed] = {
    "1": LINK_ETH,
    "2": ETH_USD,
}


def scale_price(raw: int, decimals: int) -> Decimal:
    return Decimal(int(raw)).scaleb(-int(decimals))


class PriceFeedReader:
    def __init__(self, chain: ChainClient, settings: Settings) -> None:
        self.chain = chain
        self.settings = settings

    async def latest_price(self, feed: PriceFeed) -> int:
        contract = self.chain.contract(feed.address(self.settings), PRICE_FEED_ABI)
        raw = int(await self.chain.call(f"read {feed.name} price", contract.functions.latestAnswer()))
        log.info(f"Latest {feed.name} price raw={raw} scaled={scale_price(raw, feed.decimals):.5f}")
        return raw
