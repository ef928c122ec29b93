#!/usr/bin/env python3
"""
Inspect and edit the items data file.

Usage:
    python manage_items.py list                     # First page (10 items)
    python manage_items.py list 2 --limit 5         # Page 2, 5 per page
    python manage_items.py list --q laptop          # Search name/category
    python manage_items.py show 1                   # One item by id
    python manage_items.py add "Desk" Furniture 120 # Create an item
    python manage_items.py stats                    # Cached statistics
    python manage_items.py watch                    # Serve stats until Ctrl-C
"""

import asyncio
import json
import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from app.container import Container
from settings import WATCH_INTERVAL
from settings.logging import setup_logging
from web.api.errors import error_response
from web.api.items import create_item, get_item, get_statistics, list_items

logger = setup_logging(to_file=False)


def _option(args: list[str], name: str) -> str | None:
    """Pop `--name value` from args."""
    if name not in args:
        return None
    i = args.index(name)
    value = args[i + 1] if i + 1 < len(args) else None
    del args[i : i + 2]
    return value


def _price(value: str) -> int | float | str:
    try:
        return int(value)
    except ValueError:
        try:
            return float(value)
        except ValueError:
            return value


async def _watch(container: Container) -> None:
    """Print statistics on every change until interrupted."""
    last = None
    while True:
        stats = await get_statistics(container)
        if stats != last:
            print(stats.model_dump_json(by_alias=True), flush=True)
            last = stats
        await asyncio.sleep(WATCH_INTERVAL)


async def run(args: list[str]) -> int:
    command, rest = args[0], args[1:]

    async with Container() as container:
        try:
            if command == "list":
                limit = _option(rest, "--limit")
                query = _option(rest, "--q")
                result = await list_items(container, page=rest[0] if rest else None, limit=limit, q=query)
            elif command == "show" and len(rest) == 1:
                result = await get_item(container, rest[0])
            elif command == "add" and len(rest) == 3:
                payload = {"name": rest[0], "category": rest[1], "price": _price(rest[2])}
                result = await create_item(container, payload)
            elif command == "stats":
                result = await get_statistics(container)
            elif command == "watch":
                await _watch(container)
                return 0
            else:
                print(__doc__)
                return 1
        except Exception as e:
            status, body = error_response(e)
            if status >= 500:
                logger.exception("Command {} failed", command)
            print(body.model_dump_json(exclude_none=True), file=sys.stderr)
            return 1

    print(json.dumps(result.model_dump(by_alias=True), indent=2))
    return 0


def main():
    args = sys.argv[1:]
    if not args:
        print(__doc__)
        sys.exit(1)

    try:
        code = asyncio.run(run(args))
    except KeyboardInterrupt:
        code = 0
    sys.exit(code)


if __name__ == "__main__":
    main()
