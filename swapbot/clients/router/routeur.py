"""Uniswap V2-style router binding: turns swap parameters into bound calls."""

from __future__ import annotations

from swapbot.models.swap import SwapCall


class RouterBinding:
    """Builds the three router call shapes against a web3 contract object."""

    SWAP_EXACT_ETH_FOR_TOKENS = "swapExactETHForTokens"
    SWAP_EXACT_TOKENS_FOR_ETH = "swapExactTokensForETH"
    SWAP_EXACT_TOKENS_FOR_TOKENS = "swapExactTokensForTokens"

    def __init__(self, contract) -> None:
        self.contract = contract

    @property
    def address(self) -> str:
        return str(self.contract.address)

    def _bind(self, method: str, args: tuple, **overrides) -> SwapCall:
        function = getattr(self.contract.functions, method)(*args)
        return SwapCall(method=method, args=args, function=function, **overrides)

    def swap_native_for_token(
        self, min_out: int, path: list[str], recipient: str, deadline: int, *, value: int
    ) -> SwapCall:
        return self._bind(
            self.SWAP_EXACT_ETH_FOR_TOKENS,
            (int(min_out), list(path), recipient, int(deadline)),
            value=int(value),
        )

    def swap_token_for_native(
        self,
        amount_in: int,
        min_out: int,
        path: list[str],
        recipient: str,
        deadline: int,
        *,
        fee_override: int,
        nonce: int,
    ) -> SwapCall:
        return self._bind(
            self.SWAP_EXACT_TOKENS_FOR_ETH,
            (int(amount_in), int(min_out), list(path), recipient, int(deadline)),
            gas_price=int(fee_override),
            nonce=int(nonce),
        )

    def swap_token_for_token(
        self, amount_in: int, min_out: int, path: list[str], recipient: str, deadline: int, *, value: int
    ) -> SwapCall:
        return self._bind(
            self.SWAP_EXACT_TOKENS_FOR_TOKENS,
            (int(amount_in), int(min_out), list(path), recipient, int(deadline)),
            value=int(value),
        )
