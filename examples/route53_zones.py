#!/usr/bin/env python3
from __future__ import annotations

import argparse
import os

from stratus.cloud.connectors.route53 import ZoneClient, name_equals


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List Route 53 hosted zones (blocking client)")
    p.add_argument("name", nargs="?", help="only show the zone with this name, e.g. example.com.")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    with ZoneClient(
        os.environ["AWS_ACCESS_KEY_ID"], os.environ["AWS_SECRET_ACCESS_KEY"]
    ) as client:
        zones = client.list_all_zones()
        if args.name:
            zones = list(filter(name_equals(args.name), zones))
        for zone in zones:
            print(f"{zone.id:16} {zone.name:40} {zone.resource_record_set_count:>5} records")


if __name__ == "__main__":
    main()
