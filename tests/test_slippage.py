from __future__ import annotations

import pytest

from swapbot.clients.router.errors import ArithmeticOverflow, InvalidInput
from swapbot.clients.router.slippage import compute_min_out, validate_slippage_bps
from swapbot.clients.router.uint256 import UINT256_MAX, Uint256


def test_min_out_for_one_percent_of_one_ether():
    assert compute_min_out(1_000_000_000_000_000_000, 100) == 990_000_000_000_000_000


@pytest.mark.parametrize(
    "amount_in, slippage_bps, expected",
    [
        (12345, 0, 12345),
        (12345, 10_000, 0),
        (1, 1, 0),
        (10_000, 1, 9_999),
        (999, 5_000, 499),
    ],
)
def test_min_out_rounds_down(amount_in, slippage_bps, expected):
    assert compute_min_out(amount_in, slippage_bps) == expected


def test_min_out_never_exceeds_amount_in_and_is_repeatable():
    amount_in = 7 * 10**17 + 3
    previous = amount_in
    for bps in (0, 1, 50, 100, 2_500, 9_999, 10_000):
        min_out = compute_min_out(amount_in, bps)
        assert 0 <= min_out <= amount_in
        assert min_out <= previous
        assert compute_min_out(amount_in, bps) == min_out
        previous = min_out


def test_min_out_accepts_uint256_amount():
    assert compute_min_out(Uint256(10_000), 250) == 9_750


def test_min_out_overflows_near_uint256_max():
    # multiplication happens before the division, so even 0 bps overflows
    with pytest.raises(ArithmeticOverflow):
        compute_min_out(UINT256_MAX, 0)


@pytest.mark.parametrize("amount_in", [1.9, 1e18, True, False, "1000"])
def test_non_integer_amount_is_rejected_not_truncated(amount_in):
    with pytest.raises(InvalidInput):
        compute_min_out(amount_in, 0)


@pytest.mark.parametrize("slippage_bps", [-1, 10_001, 1.5, True, "100"])
def test_invalid_slippage_is_rejected(slippage_bps):
    with pytest.raises(InvalidInput):
        validate_slippage_bps(slippage_bps)
    with pytest.raises(InvalidInput):
        compute_min_out(1_000, slippage_bps)
