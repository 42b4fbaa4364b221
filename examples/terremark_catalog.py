#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from stratus.cloud.connectors.terremark import TerremarkCatalogAsyncClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Show the items of a Terremark vCloud catalog")
    p.add_argument("user")
    p.add_argument("password")
    p.add_argument("catalog_href")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    async with TerremarkCatalogAsyncClient(args.user, args.password) as client:
        orgs = await client.login()
        print(f"Organizations: {', '.join(orgs)}")
        catalog = await client.get_catalog(args.catalog_href)
        if catalog is None:
            raise SystemExit(f"No catalog at {args.catalog_href}")
        print(f"Catalog {catalog.name}: {len(catalog.items)} items")
        for name, ref in catalog.items.items():
            item = await client.get_catalog_item(ref.href)
            compute = item.compute_options.href if item and item.compute_options else "-"
            print(f"  {name:40} compute options: {compute}")


if __name__ == "__main__":
    asyncio.run(main())
