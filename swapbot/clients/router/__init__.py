"""Router swap engine package."""

from swapbot.clients.router.errors import (
    ArithmeticOverflow,
    ChainCommunicationError,
    ClockError,
    ContractRevert,
    InvalidInput,
    SubmissionError,
    SwapError,
)
from swapbot.clients.router.uint256 import UINT256_MAX, Uint256
from swapbot.clients.router.slippage import compute_min_out
from swapbot.clients.router.path import SwapPath, resolve
from swapbot.clients.router.deadline import compute_deadline, current_timestamp
from swapbot.clients.router.gas import compute_adjusted_price, requires_escalation
from swapbot.clients.router.routeur import RouterBinding
from swapbot.clients.router.rpc import ChainClient, create_chain_client
from swapbot.clients.router.executor import SwapExecutor

__all__ = [
    "ArithmeticOverflow",
    "ChainClient",
    "ChainCommunicationError",
    "ClockError",
    "ContractRevert",
    "InvalidInput",
    "RouterBinding",
    "SubmissionError",
    "SwapError",
    "SwapExecutor",
    "SwapPath",
    "UINT256_MAX",
    "Uint256",
    "compute_adjusted_price",
    "compute_deadline",
    "compute_min_out",
    "create_chain_client",
    "current_timestamp",
    "requires_escalation",
    "resolve",
]
