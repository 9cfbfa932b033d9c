"""Checked unsigned 256-bit integer arithmetic."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Union

from swapbot.clients.router.errors import ArithmeticOverflow, InvalidInput

UINT256_MAX: Final[int] = (1 << 256) - 1


@dataclass(frozen=True, order=True)
class Uint256:
    """Immutable uint256 value; every operation fails loudly instead of wrapping."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ArithmeticOverflow(f"uint256 requires an int, got {type(self.value).__name__}")
        if self.value < 0:
            raise ArithmeticOverflow(f"uint256 underflow: {self.value} < 0")
        if self.value > UINT256_MAX:
            raise ArithmeticOverflow(f"uint256 overflow: {self.value} exceeds 2**256 - 1")

    @classmethod
    def max_value(cls) -> "Uint256":
        return cls(UINT256_MAX)

    def checked_add(self, other: "IntLike") -> "Uint256":
        return Uint256._wrap(self.value + _raw(other), "add")

    def checked_mul(self, other: "IntLike") -> "Uint256":
        return Uint256._wrap(self.value * _raw(other), "mul")

    def checked_div(self, other: "IntLike") -> "Uint256":
        divisor = _raw(other)
        if divisor == 0:
            raise ArithmeticOverflow("uint256 division by zero")
        return Uint256(self.value // divisor)

    @staticmethod
    def _wrap(result: int, op: str) -> "Uint256":
        if result > UINT256_MAX:
            raise ArithmeticOverflow(f"uint256 {op} overflow")
        return Uint256(result)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value


IntLike = Union[int, Uint256]


def _raw(other: IntLike) -> int:
    if isinstance(other, Uint256):
        return other.value
    return Uint256(other).value


def as_uint256(value: IntLike, name: str) -> Uint256:
    """Wrap a caller-supplied amount, rejecting floats and bools instead of truncating them."""
    if isinstance(value, Uint256):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(f"{name} must be an int, got {value!r}")
    return Uint256(value)
