"""ERC20 approval helpers for letting the router pull input tokens."""

from __future__ import annotations

from web3 import Web3

from swapbot.clients.router.errors import ChainCommunicationError
from swapbot.clients.router.rpc import ChainClient
from swapbot.clients.router.uint256 import UINT256_MAX
from swapbot.logging import log
from swapbot.models.swap import SwapCall, TransactionId
from swapbot.settings.config import ERC20_ABI


class TokenApprover:
    """Reads allowances and submits ``approve`` through the shared chain client."""

    def __init__(self, chain: ChainClient) -> None:
        self.chain = chain

    async def allowance(self, token: str, owner: str, spender: str) -> int:
        contract = self.chain.contract(token, ERC20_ABI)
        value = await self.chain.call(
            f"read allowance token={token}",
            contract.functions.allowance(
                Web3.to_checksum_address(owner),
                Web3.to_checksum_address(spender),
            ),
        )
        return int(value)

    async def needs_approval(self, token: str, owner: str, spender: str, amount: int) -> bool:
        return await self.allowance(token, owner, spender) < int(amount)

    async def approve(self, token: str, spender: str, amount: int = UINT256_MAX) -> TransactionId:
        contract = self.chain.contract(token, ERC20_ABI)
        args = (Web3.to_checksum_address(spender), int(amount))
        call = SwapCall(method="approve", args=args, function=contract.functions.approve(*args))
        tx_id = await self.chain.submit(call)
        log.info(f"Broadcasted ERC20 approval tx hash={tx_id} token={token} spender={spender}")
        return tx_id

    async def ensure_allowance(self, token: str, spender: str, amount: int) -> TransactionId | None:
        """Approve ``spender`` for the maximum amount unless it can already pull ``amount``."""
        owner = await self.chain.get_address()
        try:
            if not await self.needs_approval(token, owner, spender, amount):
                log.info(f"Allowance sufficient token={token} spender={spender}")
                return None
        except ChainCommunicationError as exc:
            log.warning(f"Allowance check failed, approving anyway: {exc}")
        return await self.approve(token, spender)
