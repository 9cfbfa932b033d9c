"""Price and swap bot CLI (one swap per invocation).

Usage examples:
  python scripts/swap_bot.py
  python scripts/swap_bot.py --feed 2 --direction 1 --amount 0.01 --slippage 1
  python scripts/swap_bot.py --skip-price --direction 2 --amount 5 --slippage 0.5 --dry-run
"""

import argparse
import asyncio
from decimal import Decimal

from swapbot.clients.router import (
    ChainClient,
    RouterBinding,
    SwapError,
    SwapExecutor,
    create_chain_client,
)
from swapbot.clients.router.approval import TokenApprover
from swapbot.clients.router.price_feed import PriceFeedReader, scale_price
from swapbot.interactive import collect_swap_settings, parse_feed_choice, prompt_price_feed, swap_legs
from swapbot.logging import log
from swapbot.settings.config import ROUTER_V2_ABI, settings


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fetch a Chainlink price and execute one router swap")
    parser.add_argument("--feed", choices=["1", "2"], help="Price feed: 1=LINK/ETH, 2=ETH/USD")
    parser.add_argument("--skip-price", action="store_true", help="Do not read a price feed")
    parser.add_argument("--direction", choices=["1", "2"], help="Swap direction: 1=ETH→LINK, 2=LINK→ETH")
    parser.add_argument("--amount", help="Amount to swap in whole units (e.g. 0.01)")
    parser.add_argument("--slippage", help="Slippage tolerance in percent (e.g. 1 for 1%%)")
    parser.add_argument("--dry-run", action="store_true", help="Print the swap plan without submitting")
    return parser.parse_args()


async def _show_price(client: ChainClient, args: argparse.Namespace) -> None:
    feed = parse_feed_choice(args.feed) if args.feed else prompt_price_feed()
    raw = await PriceFeedReader(client, settings).latest_price(feed)
    print(f"Latest {feed.name} Price: {scale_price(raw, feed.decimals):.5f}")


async def main() -> int:
    args = _parse_args()

    router_address = settings.resolved_router_address
    bridge_asset = settings.resolved_bridge_asset
    link_token = settings.resolved_link_token
    if not (router_address and bridge_asset and link_token):
        raise SystemExit(f"Chain '{settings.chain}' has no router/bridge/LINK defaults; set them in .env")

    try:
        client = create_chain_client(settings.rpc_url, settings.private_key, settings.chain_id)
        address = await client.get_address()
        balance = await client.get_balance(address)
        print(f"Client Address: {address}")
        print(f"Wallet ETH Balance: {scale_price(balance, 18)}")

        if not args.skip_price:
            await _show_price(client, args)

        swap_settings = collect_swap_settings(direction=args.direction, amount=args.amount, slippage=args.slippage)
        print(
            f"Swap Settings - Direction: {swap_settings.swap_direction.label}, "
            f"Amount: {Decimal(swap_settings.amount_in).scaleb(-18)}, "
            f"Slippage: {swap_settings.slippage_percent}%"
        )
        token_in, token_out = swap_legs(swap_settings.swap_direction, link_token)
        variant = swap_settings.swap_direction.variant

        if args.dry_run:
            print(f"Dry run: variant={variant.value} token_in={token_in} token_out={token_out}")
            return 0

        router = RouterBinding(client.contract(router_address, ROUTER_V2_ABI))
        if token_in is not None:
            approval_tx = await TokenApprover(client).ensure_allowance(token_in, router.address, swap_settings.amount_in)
            if approval_tx:
                print(f"Approval transaction hash: {approval_tx}")

        executor = SwapExecutor(
            client,
            router,
            bridge_asset,
            deadline_horizon_seconds=settings.deadline_horizon_seconds,
            gas_multiplier_bps=settings.gas_multiplier_bps,
        )
        tx_id = await executor.execute(
            variant,
            token_in,
            token_out,
            swap_settings.amount_in,
            swap_settings.slippage_bps,
        )
    except SwapError as exc:
        log.error(f"Swap bot aborted: {type(exc).__name__}: {exc}")
        print(f"Swap failed: {exc}")
        return 1

    print(f"Trade executed. Transaction hash: {tx_id}")
    explorer_url = settings.chain_config.explorer_tx_url(tx_id) if settings.chain_config else None
    if explorer_url:
        print(f"Explorer: {explorer_url}")
    return 0


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))
