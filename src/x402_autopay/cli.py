"""Command line entry point: collect the session, then run the menu."""

from __future__ import annotations

import argparse
import asyncio
import functools
import logging

import httpx
from dotenv import load_dotenv

from .client import with_payment_interceptor
from .config import collect_config, default_interval_ms, default_timeout, describe_config
from .console import configure_logging
from .menu import run_menu


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="x402-autopay",
        description="Call an x402 paid endpoint, paying challenges with a wallet signature.",
    )
    parser.add_argument(
        "--interval-ms",
        type=int,
        default=default_interval_ms(),
        help="Concurrent fire period in milliseconds (env FIRE_INTERVAL_MS, default: %(default)s)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=default_timeout(),
        help="HTTP timeout in seconds (env HTTP_TIMEOUT, default: %(default)s)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )
    return parser


async def run(args: argparse.Namespace) -> None:
    config = await collect_config()
    describe_config(config)

    client_factory = functools.partial(with_payment_interceptor, timeout=args.timeout)
    runner = await run_menu(
        config,
        interval_ms=args.interval_ms,
        client_factory=client_factory,
    )
    await runner.join()


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.interval_ms <= 0:
        parser.error("--interval-ms must be positive")

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        asyncio.run(run(args))
    except KeyboardInterrupt:
        print("\n👋 Interrupted.")
        raise SystemExit(130)
    except httpx.HTTPError as err:
        raise SystemExit(f"HTTP error: {err}") from err
    except ValueError as err:
        raise SystemExit(f"error: {err}") from err


if __name__ == "__main__":
    main()
