"""Gas price escalation policy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from swapbot.clients.router.errors import InvalidInput
from swapbot.clients.router.uint256 import IntLike, as_uint256
from swapbot.models.swap import MAX_BPS, SwapVariant

DEFAULT_MULTIPLIER_BPS: Final[int] = 20_000

# Only the token -> native leg is escalated.
ESCALATED_VARIANTS: Final[dict[SwapVariant, bool]] = {
    SwapVariant.NATIVE_TO_TOKEN: False,
    SwapVariant.TOKEN_TO_NATIVE: True,
    SwapVariant.TOKEN_TO_TOKEN: False,
}

if set(ESCALATED_VARIANTS) != set(SwapVariant):
    raise RuntimeError("ESCALATED_VARIANTS must cover every SwapVariant")


@dataclass(frozen=True)
class GasOverride:
    gas_price: int
    nonce: int


def requires_escalation(variant: SwapVariant) -> bool:
    try:
        return ESCALATED_VARIANTS[variant]
    except KeyError as exc:
        raise InvalidInput(f"Unsupported swap variant: {variant!r}") from exc


def compute_adjusted_price(base_price: IntLike, multiplier_bps: int = DEFAULT_MULTIPLIER_BPS) -> int:
    """Return base_price * multiplier_bps / 10000 (20000 bps doubles the price)."""
    if isinstance(multiplier_bps, bool) or not isinstance(multiplier_bps, int) or multiplier_bps < 0:
        raise InvalidInput(f"multiplier_bps must be a non-negative int, got {multiplier_bps!r}")
    adjusted = as_uint256(base_price, "base_price").checked_mul(multiplier_bps).checked_div(MAX_BPS)
    return int(adjusted)
