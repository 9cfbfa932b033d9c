from __future__ import annotations

import pytest

from swapbot.clients.router.errors import InvalidInput
from swapbot.clients.router.path import resolve
from swapbot.models.swap import SwapVariant

WETH = "0xfFf9976782d46CC05630D1f6eBAb18b2324d6B14"
LINK = "0x779877A7B0D9E8603169DdbD7836e478b4624789"
OTHER = "0x1c7D4B196Cb0C7B01d743Fbc6116a902379C7238"


def test_native_to_token_routes_through_bridge():
    assert resolve(SwapVariant.NATIVE_TO_TOKEN, None, LINK, WETH) == [WETH, LINK]


def test_token_to_native_routes_into_bridge():
    assert resolve(SwapVariant.TOKEN_TO_NATIVE, LINK, None, WETH) == [LINK, WETH]


def test_token_to_token_is_direct():
    assert resolve(SwapVariant.TOKEN_TO_TOKEN, LINK, OTHER, WETH) == [LINK, OTHER]


def test_resolve_checksums_and_is_repeatable():
    first = resolve(SwapVariant.NATIVE_TO_TOKEN, None, LINK.lower(), WETH.lower())
    second = resolve(SwapVariant.NATIVE_TO_TOKEN, None, LINK.lower(), WETH.lower())

    assert first == second == [WETH, LINK]
    assert len(first) == 2


@pytest.mark.parametrize(
    "variant, token_in, token_out",
    [
        (SwapVariant.NATIVE_TO_TOKEN, None, None),
        (SwapVariant.TOKEN_TO_NATIVE, None, None),
        (SwapVariant.TOKEN_TO_TOKEN, LINK, None),
        (SwapVariant.TOKEN_TO_TOKEN, "not-an-address", OTHER),
    ],
)
def test_missing_or_malformed_tokens_are_invalid(variant, token_in, token_out):
    with pytest.raises(InvalidInput):
        resolve(variant, token_in, token_out, WETH)


def test_unknown_variant_is_invalid():
    with pytest.raises(InvalidInput):
        resolve("native_to_token", None, LINK, WETH)
