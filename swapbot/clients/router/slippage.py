"""Slippage utilities."""

from __future__ import annotations

from swapbot.clients.router.errors import InvalidInput
from swapbot.clients.router.uint256 import IntLike, as_uint256
from swapbot.models.swap import MAX_BPS


def validate_slippage_bps(slippage_bps: int) -> int:
    if isinstance(slippage_bps, bool) or not isinstance(slippage_bps, int):
        raise InvalidInput(f"slippage_bps must be an int, got {slippage_bps!r}")
    if slippage_bps < 0 or slippage_bps > MAX_BPS:
        raise InvalidInput(f"slippage_bps must be in [0, {MAX_BPS}], got {slippage_bps}")
    return slippage_bps


def compute_min_out(amount_in: IntLike, slippage_bps: int) -> int:
    """Return floor(amount_in * (10000 - slippage_bps) / 10000) without wrapping."""
    validate_slippage_bps(slippage_bps)
    min_out = as_uint256(amount_in, "amount_in").checked_mul(MAX_BPS - slippage_bps).checked_div(MAX_BPS)
    return int(min_out)
