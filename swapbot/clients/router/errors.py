"""Error taxonomy for swap routing and execution."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from swapbot.models.swap import SwapState


class SwapError(Exception):
    """Base class for every failure surfaced by the swap engine.

    ``failed_at`` is filled in by the executor with the last state the swap
    reached before the failure; it stays ``None`` when a helper is called
    directly.
    """

    def __init__(self, message: str, failed_at: "SwapState | None" = None) -> None:
        super().__init__(message)
        self.message = message
        self.failed_at = failed_at


class InvalidInput(SwapError, ValueError):
    """Raised for a bad amount, slippage, variant or configuration value."""


class ArithmeticOverflow(SwapError):
    """Raised when checked 256-bit arithmetic would wrap or divide by zero."""


class ClockError(SwapError):
    """Raised when the wall clock is unavailable or precedes the epoch."""


class ChainCommunicationError(SwapError):
    """Raised when a read against the RPC node fails."""


class ContractRevert(SwapError):
    """Raised when the router rejects the call (deadline, slippage, allowance...)."""


class SubmissionError(SwapError):
    """Raised when signing or broadcasting the transaction fails."""
