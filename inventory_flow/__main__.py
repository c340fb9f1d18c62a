#!/usr/bin/env python3
"""
InventoryFlow command line

Usage:
    python -m inventory_flow show
    python -m inventory_flow pull
    python -m inventory_flow push
    python -m inventory_flow add-product "Shirt" --category tops
    python -m inventory_flow add-variant <product_id> "Blue"
    python -m inventory_flow insights "Which colors need restocking?"
"""

import argparse
import asyncio
import sys
from typing import List, Optional

from core.config import get_settings
from core.logger import setup_service_logger

from . import commands
from .factory import create_insight_client, create_sync_engine
from .models import EntryStatus
from .protocols import InventoryNotFoundError
from .sync_engine import SyncEngine


def print_inventory(engine: SyncEngine):
    view = engine.view()
    totals = commands.inventory_totals(view.snapshot)
    print(f"Status: {view.sync_status.value} ({'local+remote' if view.remote_enabled else 'local only'})")
    print(f"{totals['products']} products, {totals['variants']} variants, {totals['entries']} entries")
    for product in view.snapshot.products:
        category = f" [{product.category}]" if product.category else ""
        print(f"- {product.name}{category} ({product.id}) updated {product.updated_at}")
        for variant in product.variants:
            counts = ", ".join(f"{status.value}={variant.count(status)}" for status in EntryStatus)
            print(f"    {variant.name} ({variant.id}): {counts}")


async def cmd_show(engine: SyncEngine, args) -> int:
    print_inventory(engine)
    return 0


async def cmd_pull(engine: SyncEngine, args) -> int:
    print(f"Loaded {len(engine.snapshot.products)} products from {engine.loaded_from} storage")
    return 0


async def cmd_push(engine: SyncEngine, args) -> int:
    engine.replace(engine.snapshot)
    ok = await engine.flush()
    print(f"Push {'succeeded' if ok else 'failed'} (status: {engine.status.value})")
    return 0 if ok else 1


async def cmd_add_product(engine: SyncEngine, args) -> int:
    engine.replace(commands.add_product(engine.snapshot, args.name, category=args.category))
    ok = await engine.flush()
    print(f"Added product {engine.snapshot.products[0].id}")
    return 0 if ok else 1


async def cmd_add_variant(engine: SyncEngine, args) -> int:
    engine.replace(commands.add_variant(engine.snapshot, args.product_id, args.name, entry_count=args.entries))
    ok = await engine.flush()
    print(f"Added variant {args.name} to {args.product_id}")
    return 0 if ok else 1


async def cmd_insights(engine: SyncEngine, args) -> int:
    async with create_insight_client() as client:
        print(await client.summarize(engine.snapshot, args.query))
    return 0


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="inventory_flow", description="InventoryFlow sync tool")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("show", help="Print the current inventory")
    subparsers.add_parser("pull", help="Load inventory (remote first) and mirror it locally")
    subparsers.add_parser("push", help="Save the current inventory to every configured store")

    add_product_parser = subparsers.add_parser("add-product", help="Create a product")
    add_product_parser.add_argument("name", help="Product name")
    add_product_parser.add_argument("--category", default=None, help="Product category")

    add_variant_parser = subparsers.add_parser("add-variant", help="Add a color variant to a product")
    add_variant_parser.add_argument("product_id", help="Product ID")
    add_variant_parser.add_argument("name", help="Color name")
    add_variant_parser.add_argument(
        "--entries", type=int, default=settings.sync.default_variant_entries, help="Initial empty slots"
    )

    insights_parser = subparsers.add_parser("insights", help="Ask the insight assistant")
    insights_parser.add_argument("query", help="Question about the inventory")

    return parser


HANDLERS = {
    "show": cmd_show,
    "pull": cmd_pull,
    "push": cmd_push,
    "add-product": cmd_add_product,
    "add-variant": cmd_add_variant,
    "insights": cmd_insights,
}


async def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    level = args.log_level or ("DEBUG" if settings.debug else settings.log_level)
    setup_service_logger(level=level, config=settings.logging)

    engine = create_sync_engine()
    async with engine:
        try:
            return await HANDLERS[args.command](engine, args)
        except (ValueError, InventoryNotFoundError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2


def run():
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
