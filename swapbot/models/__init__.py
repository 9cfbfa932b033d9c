"""
Typed models shared across the swap bot.
"""
from swapbot.models.chain import ChainConfig
from swapbot.models.swap import MAX_BPS, SwapCall, SwapDirection, SwapSettings, SwapState, SwapVariant

__all__ = [
    "MAX_BPS",
    "ChainConfig",
    "SwapCall",
    "SwapDirection",
    "SwapSettings",
    "SwapState",
    "SwapVariant",
]
