#!/usr/bin/env python3

# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from netgenealogy.adapters.jsonrpc import JsonRpcChainClient
from netgenealogy.app import load_network_genealogies
from netgenealogy.config import ConfigurationError, configure_logging, get_chain_config
from netgenealogy.config.genealogy import DEFAULT_NETWORK_NAME

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Load network genealogies for deployment artifacts"
    )
    parser.add_argument(
        "artifacts",
        nargs="+",
        help="Artifact JSON files or directories containing them",
    )
    parser.add_argument(
        "--network-id",
        required=True,
        help="Chain identifier the artifacts were deployed to",
    )
    parser.add_argument(
        "--network-name",
        default=DEFAULT_NETWORK_NAME,
        help="Name recorded for newly registered networks (default: %(default)s)",
    )
    parser.add_argument(
        "--rpc-url",
        help="JSON-RPC endpoint of the connected chain (overrides CHAIN_RPC_URL)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log resolution details",
    )
    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    try:
        parsed_args = _parse_args(argv if argv is not None else sys.argv[1:])
        chain_config = get_chain_config(rpc_url=parsed_args.rpc_url)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)

    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        result = load_network_genealogies(
            parsed_args.artifacts,
            network_id=parsed_args.network_id,
            network_name=parsed_args.network_name,
            chain_client=JsonRpcChainClient(config=chain_config),
        )
    except Exception as e:  # noqa: BLE001
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(
        f"Loaded {len(result.genealogy_ids)} genealogies "
        f"across {len(result.networks)} networks from {result.artifacts} artifacts"
    )


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    print("\nClosed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console-script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
