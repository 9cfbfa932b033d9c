"""Typed swap request models shared by the router engine and the CLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field

MAX_BPS: Final[int] = 10_000

TransactionId = str


class SwapVariant(str, Enum):
    """Closed set of router call shapes."""

    NATIVE_TO_TOKEN = "native_to_token"
    TOKEN_TO_NATIVE = "token_to_native"
    TOKEN_TO_TOKEN = "token_to_token"


class SwapState(str, Enum):
    IDLE = "idle"
    PATH_RESOLVED = "path_resolved"
    AMOUNTS_COMPUTED = "amounts_computed"
    SUBMITTED = "submitted"
    CONFIRMED = "confirmed"
    FAILED = "failed"


class SwapDirection(str, Enum):
    """Direction choices offered by the interactive prompt."""

    ETH_TO_LINK = "eth_to_link"
    LINK_TO_ETH = "link_to_eth"

    @property
    def variant(self) -> SwapVariant:
        if self is SwapDirection.ETH_TO_LINK:
            return SwapVariant.NATIVE_TO_TOKEN
        return SwapVariant.TOKEN_TO_NATIVE

    @property
    def label(self) -> str:
        return "ETH → LINK" if self is SwapDirection.ETH_TO_LINK else "LINK → ETH"


class SwapSettings(BaseModel):
    """Validated swap parameters gathered from the user in one piece."""

    model_config = ConfigDict(frozen=True)

    swap_direction: SwapDirection
    amount_in: int = Field(gt=0, description="Amount in smallest units (wei)")
    slippage_bps: int = Field(ge=0, le=MAX_BPS)

    @property
    def slippage_percent(self) -> float:
        return self.slippage_bps / 100


@dataclass(frozen=True)
class SwapCall:
    """A bound router call plus the transaction overrides it must be sent with."""

    method: str
    args: tuple[Any, ...]
    function: Any = field(repr=False, compare=False)
    value: int = 0
    gas_price: int | None = None
    nonce: int | None = None

    def tx_overrides(self) -> dict[str, int]:
        overrides: dict[str, int] = {"value": int(self.value)}
        if self.gas_price is not None:
            overrides["gasPrice"] = int(self.gas_price)
        if self.nonce is not None:
            overrides["nonce"] = int(self.nonce)
        return overrides
