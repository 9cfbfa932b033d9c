"""Swap executor: validates a request, prices it and submits the router call.

One ``execute`` call is one strictly sequential run::

    IDLE -> PATH_RESOLVED -> AMOUNTS_COMPUTED -> SUBMITTED -> CONFIRMED
                                                          \\-> FAILED

``CONFIRMED`` means the node accepted the broadcast, not on-chain finality.
Nothing is retried; any failure is raised as a :class:`SwapError` whose
``failed_at`` names the last state reached.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable

from swapbot.clients.router.deadline import DEFAULT_HORIZON_SECONDS, Clock, compute_deadline, current_timestamp
from swapbot.clients.router.errors import ChainCommunicationError, InvalidInput, SubmissionError, SwapError
from swapbot.clients.router.gas import DEFAULT_MULTIPLIER_BPS, GasOverride, compute_adjusted_price, requires_escalation
from swapbot.clients.router.path import SwapPath, resolve
from swapbot.clients.router.routeur import RouterBinding
from swapbot.clients.router.rpc import ChainClient
from swapbot.clients.router.slippage import compute_min_out, validate_slippage_bps
from swapbot.logging import log, swap_event
from swapbot.models.swap import SwapCall, SwapState, SwapVariant, TransactionId


@dataclass
class SwapRun:
    """Per-call bookkeeping; never shared between ``execute`` calls."""

    variant: SwapVariant
    amount_in: int
    state: SwapState = SwapState.IDLE
    path: SwapPath = field(default_factory=list)
    min_out: int | None = None
    deadline: int | None = None
    gas_override: GasOverride | None = None
    tx_id: TransactionId | None = None

    def advance(self, state: SwapState, **fields: Any) -> None:
        self.state = state
        swap_event(f"swap {state.value}", variant=self.variant.value, **fields)


class SwapExecutor:
    """Orchestrates one swap against a router through a shared chain client."""

    def __init__(
        self,
        chain: ChainClient,
        router: RouterBinding,
        bridge_asset: str,
        recipient: str | None = None,
        deadline_horizon_seconds: int = DEFAULT_HORIZON_SECONDS,
        gas_multiplier_bps: int = DEFAULT_MULTIPLIER_BPS,
        clock: Clock = time.time,
    ) -> None:
        self.chain = chain
        self.router = router
        self.bridge_asset = bridge_asset
        self.recipient = recipient
        self.deadline_horizon_seconds = deadline_horizon_seconds
        self.gas_multiplier_bps = gas_multiplier_bps
        self.clock = clock

    async def execute(
        self,
        variant: SwapVariant | str,
        token_in: str | None,
        token_out: str | None,
        amount_in: int,
        slippage_bps: int,
    ) -> TransactionId:
        variant = _coerce_variant(variant)
        run = SwapRun(variant=variant, amount_in=amount_in)
        try:
            _validate_amount(amount_in)
            validate_slippage_bps(slippage_bps)

            run.path = resolve(variant, token_in, token_out, self.bridge_asset)
            run.advance(SwapState.PATH_RESOLVED, path=run.path)

            run.min_out = compute_min_out(amount_in, slippage_bps)
            run.deadline = compute_deadline(current_timestamp(self.clock), self.deadline_horizon_seconds)
            run.advance(SwapState.AMOUNTS_COMPUTED, min_out=run.min_out, deadline=run.deadline)

            recipient = self.recipient or await _guard(
                ChainCommunicationError, "fetch signer address", self.chain.get_address
            )
            if requires_escalation(variant):
                run.gas_override = await self._escalated_fee()

            call = _BUILDERS[variant](self, run, recipient)
            run.tx_id = await _guard(SubmissionError, f"submit {call.method}", self.chain.submit, call)
            run.advance(SwapState.SUBMITTED, tx_id=run.tx_id, method=call.method)
        except SwapError as exc:
            exc.failed_at = run.state
            run.advance(SwapState.FAILED, failed_at=run.state.value, error=type(exc).__name__)
            log.error(f"Swap failed variant={variant.value} at={exc.failed_at.value}: {exc}")
            raise

        run.advance(SwapState.CONFIRMED, tx_id=run.tx_id)
        log.info(
            f"Swap broadcast variant={variant.value} amount_in={amount_in} "
            f"min_out={run.min_out} deadline={run.deadline} tx={run.tx_id}"
        )
        return run.tx_id

    async def _escalated_fee(self) -> GasOverride:
        address = await _guard(ChainCommunicationError, "fetch signer address", self.chain.get_address)
        nonce = await _guard(ChainCommunicationError, "fetch nonce", self.chain.get_nonce, address)
        base_gas_price = await _guard(ChainCommunicationError, "fetch gas price", self.chain.get_gas_price)
        gas_price = compute_adjusted_price(base_gas_price, self.gas_multiplier_bps)
        log.debug(f"Escalated gas price base={base_gas_price} adjusted={gas_price} nonce={nonce}")
        return GasOverride(gas_price=gas_price, nonce=nonce)

    # ---------- variant-specific calls ----------

    def _native_to_token(self, run: SwapRun, recipient: str) -> SwapCall:
        return self.router.swap_native_for_token(
            run.min_out, run.path, recipient, run.deadline, value=run.amount_in
        )

    def _token_to_native(self, run: SwapRun, recipient: str) -> SwapCall:
        return self.router.swap_token_for_native(
            run.amount_in,
            run.min_out,
            run.path,
            recipient,
            run.deadline,
            fee_override=run.gas_override.gas_price,
            nonce=run.gas_override.nonce,
        )

    def _token_to_token(self, run: SwapRun, recipient: str) -> SwapCall:
        # amount_in goes out both as the swap argument and as attached native value
        return self.router.swap_token_for_token(
            run.amount_in, run.min_out, run.path, recipient, run.deadline, value=run.amount_in
        )


_BUILDERS: dict[SwapVariant, Callable[[SwapExecutor, SwapRun, str], SwapCall]] = {
    SwapVariant.NATIVE_TO_TOKEN: SwapExecutor._native_to_token,
    SwapVariant.TOKEN_TO_NATIVE: SwapExecutor._token_to_native,
    SwapVariant.TOKEN_TO_TOKEN: SwapExecutor._token_to_token,
}

if set(_BUILDERS) != set(SwapVariant):
    raise RuntimeError("_BUILDERS must cover every SwapVariant")


def _coerce_variant(variant: SwapVariant | str) -> SwapVariant:
    try:
        return SwapVariant(variant)
    except ValueError as exc:
        raise InvalidInput(f"Unsupported swap variant: {variant!r}", failed_at=SwapState.IDLE) from exc


def _validate_amount(amount_in: int) -> None:
    if isinstance(amount_in, bool) or not isinstance(amount_in, int):
        raise InvalidInput(f"amount_in must be an int, got {amount_in!r}")
    if amount_in <= 0:
        raise InvalidInput(f"amount_in must be > 0, got {amount_in}")


async def _guard(error_cls: type[SwapError], label: str, fn: Callable[..., Awaitable[Any]], *args: Any) -> Any:
    """Await a chain collaborator call, surfacing untyped failures as ``error_cls``."""
    try:
        return await fn(*args)
    except SwapError:
        raise
    except Exception as exc:
        raise error_cls(f"Failed to {label}: {exc}") from exc
