"""Route resolution for the three router call shapes.

Routes are always a single hop. Native legs go through the bridge asset
(the chain's wrapped native token); token-to-token swaps go direct.
"""

from __future__ import annotations

from web3 import Web3

from swapbot.clients.router.errors import InvalidInput
from swapbot.models.swap import SwapVariant

SwapPath = list[str]


def _checksum(address: str | None, role: str) -> str:
    if not address:
        raise InvalidInput(f"Missing {role} address")
    try:
        return Web3.to_checksum_address(address)
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f"Invalid {role} address: {address}") from exc


def resolve(variant: SwapVariant, token_in: str | None, token_out: str | None, bridge_asset: str) -> SwapPath:
    bridge = _checksum(bridge_asset, "bridge asset")
    if variant is SwapVariant.NATIVE_TO_TOKEN:
        return [bridge, _checksum(token_out, "token_out")]
    if variant is SwapVariant.TOKEN_TO_NATIVE:
        return [_checksum(token_in, "token_in"), bridge]
    if variant is SwapVariant.TOKEN_TO_TOKEN:
        return [_checksum(token_in, "token_in"), _checksum(token_out, "token_out")]
    raise InvalidInput(f"Unsupported swap variant: {variant!r}")
