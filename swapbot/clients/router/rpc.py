"""Chain client: the single shared handle for reads, signing and broadcast."""

from __future__ import annotations

import asyncio
from typing import Any, Callable

from eth_account import Account
from web3 import Web3
from web3.exceptions import ContractLogicError

from swapbot.clients.router.errors import (
    ChainCommunicationError,
    ContractRevert,
    InvalidInput,
    SubmissionError,
)
from swapbot.logging import log
from swapbot.models.swap import SwapCall, TransactionId


class ChainClient:
    """Thin async wrapper around a web3 provider and a local signing account.

    Create one per process with :func:`create_chain_client` and pass it to
    every component that needs chain access. Blocking web3 calls are pushed
    to a worker thread so the event loop is never stalled.
    """

    def __init__(self, w3: Web3, account, chain_id: int | None = None) -> None:
        self.w3 = w3
        self.account = account
        self.address = Web3.to_checksum_address(account.address)
        self.chain_id = chain_id

    # ---------- internal helpers ----------

    async def _read(self, label: str, fn: Callable[..., Any], *args: Any) -> Any:
        try:
            return await asyncio.to_thread(fn, *args)
        except Exception as exc:
            raise ChainCommunicationError(f"Failed to {label}: {exc}") from exc

    def _pending_nonce(self) -> int:
        return int(self.w3.eth.get_transaction_count(self.address, "pending"))

    def _build(self, call: SwapCall) -> dict[str, Any]:
        tx_params: dict[str, Any] = {"from": self.address, **call.tx_overrides()}
        if "nonce" not in tx_params:
            try:
                tx_params["nonce"] = self._pending_nonce()
            except Exception as exc:
                raise ChainCommunicationError(f"Failed to fetch nonce for {self.address}: {exc}") from exc
        if self.chain_id is not None:
            tx_params["chainId"] = int(self.chain_id)
        try:
            return call.function.build_transaction(tx_params)
        except ContractLogicError as exc:
            raise ContractRevert(f"{call.method} reverted during gas estimation: {exc}") from exc
        except Exception as exc:
            raise SubmissionError(f"Failed to build {call.method} transaction: {exc}") from exc

    def _sign_and_send(self, call: SwapCall) -> TransactionId:
        tx = self._build(call)
        try:
            signed = self.account.sign_transaction(tx)
        except Exception as exc:
            raise SubmissionError(f"Failed to sign {call.method} transaction: {exc}") from exc
        raw_tx = getattr(signed, "raw_transaction", None) or getattr(signed, "rawTransaction", None)
        if raw_tx is None:
            raise SubmissionError("Signed transaction has no raw payload")
        try:
            tx_hash = self.w3.eth.send_raw_transaction(raw_tx)
        except ContractLogicError as exc:
            raise ContractRevert(f"{call.method} rejected by the node: {exc}") from exc
        except Exception as exc:
            raise SubmissionError(f"Failed to broadcast {call.method} transaction: {exc}") from exc
        return Web3.to_hex(tx_hash)

    # ---------- public API ----------

    async def get_address(self) -> str:
        return self.address

    async def get_balance(self, address: str) -> int:
        return int(await self._read(f"fetch balance for {address}", self.w3.eth.get_balance, address))

    async def get_gas_price(self) -> int:
        return int(await self._read("fetch gas price", lambda: self.w3.eth.gas_price))

    async def get_nonce(self, address: str) -> int:
        return int(
            await self._read(f"fetch nonce for {address}", self.w3.eth.get_transaction_count, address, "pending")
        )

    async def call(self, label: str, fn) -> Any:
        """Run a read-only bound contract function (``fn.call()``)."""
        return await self._read(label, fn.call)

    def contract(self, address: str, abi: list[dict[str, Any]]):
        return self.w3.eth.contract(address=Web3.to_checksum_address(address), abi=abi)

    async def submit(self, call: SwapCall) -> TransactionId:
        """Sign and broadcast ``call``; returns once the node accepts the raw tx."""
        tx_id = await asyncio.to_thread(self._sign_and_send, call)
        log.info(f"Broadcasted tx hash={tx_id} method={call.method} value={call.value}")
        return tx_id


def create_chain_client(rpc_url: str | None, private_key: str | None, chain_id: int | None = None) -> ChainClient:
    if not rpc_url:
        raise InvalidInput("Missing RPC URL: set RPC_URL in .env")
    if not private_key:
        raise InvalidInput("Missing private key: set PRIVATE_KEY in .env")

    try:
        account = Account.from_key(private_key)
    except Exception as exc:
        raise InvalidInput(f"Invalid private key format: {exc}") from exc

    w3 = Web3(Web3.HTTPProvider(rpc_url))
    if not w3.is_connected():
        raise ChainCommunicationError(f"RPC connection failed for url={rpc_url}")

    client = ChainClient(w3, account, chain_id=chain_id)
    log.info(f"Chain client ready wallet={client.address} chain_id={chain_id}")
    return client
