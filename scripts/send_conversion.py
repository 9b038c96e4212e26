#!/usr/bin/env python3
"""
Submit one order to the Zbozi.cz conversion API.

The order is read from a JSON file (snake_case or the API's camelCase keys):

    {"id": "2024-0001", "email": "buyer@example.com",
     "cart": [{"itemId": "A1", "productName": "Widget", "unitPrice": 9.99, "quantity": 2}]}

Use --dry-run to print the request that would be sent.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

load_dotenv()

from zbozi_konverze import ConversionError, Order, get_conversion_client, load_conversion_config


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def main() -> int:
    parser = argparse.ArgumentParser(description="Send an order conversion to Zbozi.cz")
    parser.add_argument("order_json", type=Path, help="Path to the order JSON file")
    parser.add_argument("--config", type=Path, default=None, help="Path to conversion_config.yml")
    parser.add_argument("--sandbox", action="store_true", help="Force the sandbox endpoint")
    parser.add_argument("--dry-run", action="store_true", help="Print the request instead of sending it")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    setup_logging(args.verbose)

    cfg = load_conversion_config(args.config)
    if args.sandbox:
        cfg = cfg.model_copy(update={"sandbox": True})

    with open(args.order_json, "r", encoding="utf-8") as f:
        order = Order.from_dict(json.load(f))

    try:
        client = get_conversion_client(cfg)
        if args.dry_run:
            request = client.build_request(order)
            print(f"{request.method} {request.url}")
            print(json.dumps(request.redacted_payload(), indent=2, ensure_ascii=False))
            return 0
        client.send(order)
    except ConversionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Order {order.id} accepted")
    return 0


if __name__ == "__main__":
    sys.exit(main())
