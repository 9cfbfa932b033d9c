"""Interactive prompts that turn console answers into a validated SwapSettings."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Callable

from pydantic import ValidationError

from swapbot.clients.router.errors import InvalidInput
from swapbot.clients.router.price_feed import PRICE_FEEDS, PriceFeed
from swapbot.logging import log
from swapbot.models.swap import SwapDirection, SwapSettings

InputFn = Callable[[str], str]

NATIVE_DECIMALS = 18

DIRECTION_CHOICES: dict[str, SwapDirection] = {
    "1": SwapDirection.ETH_TO_LINK,
    "2": SwapDirection.LINK_TO_ETH,
}


def parse_feed_choice(raw: str) -> PriceFeed:
    feed = PRICE_FEEDS.get(raw.strip())
    if feed is None:
        raise InvalidInput(f"Invalid price feed choice: {raw!r}")
    return feed


def parse_direction(raw: str) -> SwapDirection:
    direction = DIRECTION_CHOICES.get(raw.strip())
    if direction is None:
        log.warning(f"Invalid direction choice {raw.strip()!r}, defaulting to ETH → LINK")
        return SwapDirection.ETH_TO_LINK
    return direction


def _decimal(raw: str, what: str) -> Decimal:
    try:
        value = Decimal(raw.strip())
    except InvalidOperation as exc:
        raise InvalidInput(f"Invalid {what}: {raw!r}") from exc
    if not value.is_finite():
        raise InvalidInput(f"Invalid {what}: {raw!r}")
    return value


def parse_amount(raw: str, decimals: int = NATIVE_DECIMALS) -> int:
    """Convert a human amount ("0.01") to integer base units, truncating dust."""
    amount = int(_decimal(raw, "amount").scaleb(decimals))
    if amount <= 0:
        raise InvalidInput(f"Amount must be greater than zero: {raw!r}")
    return amount


def parse_slippage(raw: str) -> int:
    """Convert a slippage percentage ("1" or "0.5") to basis points."""
    percent = _decimal(raw, "slippage")
    if percent < 0 or percent > 100:
        raise InvalidInput(f"Slippage must be between 0 and 100 percent: {raw!r}")
    return int(percent * 100)


def build_swap_settings(direction: SwapDirection, amount_in: int, slippage_bps: int) -> SwapSettings:
    try:
        return SwapSettings(swap_direction=direction, amount_in=amount_in, slippage_bps=slippage_bps)
    except ValidationError as exc:
        raise InvalidInput(f"Invalid swap settings: {exc}") from exc


def prompt_price_feed(input_fn: InputFn = input) -> PriceFeed:
    answer = input_fn("Select the Price Feed to Fetch:\n1: LINK/ETH\n2: ETH/USD\nEnter Your Choice (1 or 2): ")
    return parse_feed_choice(answer)


def collect_swap_settings(
    input_fn: InputFn = input,
    direction: str | None = None,
    amount: str | None = None,
    slippage: str | None = None,
) -> SwapSettings:
    """Build swap settings from pre-supplied answers, prompting only for the missing ones."""
    if direction is None:
        direction = input_fn("Choose Swap Direction:\n1: ETH → LINK\n2: LINK → ETH\n> ")
    if amount is None:
        amount = input_fn("Enter the amount to swap (e.g., 0.01 for ETH): ")
    if slippage is None:
        slippage = input_fn("Enter the slippage percentage (e.g., 1 for 1%): ")
    return build_swap_settings(parse_direction(direction), parse_amount(amount), parse_slippage(slippage))


def swap_legs(direction: SwapDirection, link_token: str) -> tuple[str | None, str | None]:
    """Return (token_in, token_out) for a direction; the native side is ``None``."""
    if direction is SwapDirection.ETH_TO_LINK:
        return None, link_token
    return link_token, None
