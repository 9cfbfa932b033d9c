from __future__ import annotations

import pytest

from swapbot.clients.router.errors import InvalidInput
from swapbot.clients.router.price_feed import ETH_USD, LINK_ETH
from swapbot.interactive import (
    collect_swap_settings,
    parse_amount,
    parse_direction,
    parse_feed_choice,
    parse_slippage,
    prompt_price_feed,
    swap_legs,
)
from swapbot.models.swap import SwapDirection, SwapVariant

LINK = "0x779877A7B0D9E8603169DdbD7836e478b4624789"


def _answers(*values):
    it = iter(values)
    return lambda _prompt: next(it)


def test_feed_choice():
    assert parse_feed_choice("1") is LINK_ETH
    assert parse_feed_choice(" 2 ") is ETH_USD
    with pytest.raises(InvalidInput):
        parse_feed_choice("3")
    assert prompt_price_feed(_answers("2")) is ETH_USD


def test_direction_defaults_to_eth_to_link():
    assert parse_direction("1") is SwapDirection.ETH_TO_LINK
    assert parse_direction("2") is SwapDirection.LINK_TO_ETH
    assert parse_direction("sell") is SwapDirection.ETH_TO_LINK


def test_amount_converts_to_wei():
    assert parse_amount("0.01") == 10**16
    assert parse_amount("5") == 5 * 10**18
    assert parse_amount("1.5", decimals=6) == 1_500_000
    for raw in ("0", "-1", "abc", "nan", "0.0000000000000000001"):
        with pytest.raises(InvalidInput):
            parse_amount(raw)


def test_slippage_percent_to_bps():
    assert parse_slippage("1") == 100
    assert parse_slippage("0.5") == 50
    assert parse_slippage("100") == 10_000
    for raw in ("-0.1", "100.01", "lots"):
        with pytest.raises(InvalidInput):
            parse_slippage(raw)


def test_collect_swap_settings_from_prompts():
    settings = collect_swap_settings(_answers("2", "3.25", "1"))

    assert settings.swap_direction is SwapDirection.LINK_TO_ETH
    assert settings.swap_direction.variant is SwapVariant.TOKEN_TO_NATIVE
    assert settings.amount_in == 3_250_000_000_000_000_000
    assert settings.slippage_bps == 100
    assert settings.slippage_percent == 1.0


def test_collect_swap_settings_prompts_only_for_missing_values():
    prompts: list[str] = []

    def _input(prompt):
        prompts.append(prompt)
        return "0.5"

    settings = collect_swap_settings(_input, direction="2", amount="1")

    assert len(prompts) == 1
    assert "slippage" in prompts[0]
    assert settings.swap_direction is SwapDirection.LINK_TO_ETH
    assert settings.amount_in == 10**18
    assert settings.slippage_bps == 50


def test_collect_swap_settings_with_all_values_never_prompts():
    def _no_input(prompt):
        raise AssertionError(f"unexpected prompt: {prompt}")

    settings = collect_swap_settings(_no_input, direction="1", amount="0.01", slippage="1")

    assert settings.swap_direction is SwapDirection.ETH_TO_LINK
    assert settings.amount_in == 10**16
    assert settings.slippage_bps == 100


def test_swap_legs_put_native_side_as_none():
    assert swap_legs(SwapDirection.ETH_TO_LINK, LINK) == (None, LINK)
    assert swap_legs(SwapDirection.LINK_TO_ETH, LINK) == (LINK, None)
