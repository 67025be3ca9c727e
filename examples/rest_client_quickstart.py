#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging
from typing import Any

from basekit.rest import RestClient, TransportConfig


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Issue one JSON request and print the outcome")
    p.add_argument("base_url", nargs="?", default="https://httpbin.org/")
    p.add_argument("endpoint", nargs="?", default="anything/users/42")
    p.add_argument("--method", default="GET", choices=["GET", "POST", "PUT", "DELETE"])
    p.add_argument("--param", action="append", default=[], help="key=value query item")
    p.add_argument("--timeout", type=float, default=10.0)
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args()


def print_outcome(value: Any, response: Any, error: Any) -> None:
    print("=" * 65)
    print(f"Status     : {response.status if response else '-'}")
    print(f"Error      : {f'{type(error).__name__}: {error}' if error else '-'}")
    print("=" * 65)
    if value is not None:
        for key, item in value.items():
            print(f"{key:12}: {item}")


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    params = dict(p.split("=", 1) for p in args.param)

    async with RestClient(args.base_url, config=TransportConfig(timeout=args.timeout)) as client:
        if args.method in ("POST", "PUT"):
            send = client.post if args.method == "POST" else client.put
            task = send(
                dict[str, Any],
                args.endpoint,
                params,
                {"sent_by": "quickstart"},
                callback=print_outcome,
            )
        else:
            send = client.get if args.method == "GET" else client.delete
            task = send(dict[str, Any], args.endpoint, params, callback=print_outcome)
        await task


if __name__ == "__main__":
    asyncio.run(main())
