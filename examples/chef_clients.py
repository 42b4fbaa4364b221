#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
from pathlib import Path

from stratus.cloud.connectors.chef import ChefAsyncClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List the API clients of a Chef organization")
    p.add_argument("user_id")
    p.add_argument("key_path", type=Path, help="PEM file holding the user's private key")
    p.add_argument("orgname")
    p.add_argument("--endpoint", default="https://api.opscode.com")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    client = ChefAsyncClient(args.user_id, args.key_path.read_text(), endpoint=args.endpoint)
    try:
        clients = await client.list_clients_in_org(args.orgname)
        print(f"Clients in {args.orgname} ({len(clients)}):")
        for name in sorted(clients):
            print(f"  {name}")
    finally:
        await client.close()


if __name__ == "__main__":
    asyncio.run(main())
