#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import os

from stratus.cloud.connectors.glesys import ServerAsyncClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List GleSYS servers with their live status")
    p.add_argument("--account", default=os.environ.get("GLESYS_ACCOUNT"))
    p.add_argument("--api-key", default=os.environ.get("GLESYS_API_KEY"))
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    if not args.account or not args.api_key:
        raise SystemExit("Set --account/--api-key or GLESYS_ACCOUNT/GLESYS_API_KEY")

    async with ServerAsyncClient(args.account, args.api_key) as client:
        servers = await client.list_servers()
        print(f"{len(servers)} servers:")
        print(f"{'Server':12} | {'Hostname':30} | {'Datacenter':12} | {'State':10}")
        print("-" * 74)
        for server in sorted(servers, key=lambda s: s.hostname):
            status = await client.get_server_status(server.id)
            state = str(status.state) if status is not None else "missing"
            datacenter = server.datacenter or ""
            print(f"{server.id:12} | {server.hostname:30} | {datacenter:12} | {state:10}")


if __name__ == "__main__":
    asyncio.run(main())
