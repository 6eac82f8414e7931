"""Utility script to print one generated dashboard bundle as JSON."""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict
from datetime import datetime
from typing import Any

from crypto_dashboard import synth


def _default_serializer(obj: Any) -> Any:
    if isinstance(obj, datetime):
        return obj.isoformat()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serialisable")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", type=int, default=None, help="Pin the random generator")
    parser.add_argument(
        "--transactions",
        type=int,
        default=synth.DEFAULT_TRANSACTION_COUNT,
        help="Number of mock trades to generate",
    )
    args = parser.parse_args()
    if args.seed is not None and args.seed < 0:
        parser.error("--seed must be non-negative")
    if args.transactions < 0:
        parser.error("--transactions must be non-negative")

    data = synth.generate_dashboard(args.seed, transaction_count=args.transactions)
    print(json.dumps(asdict(data), indent=2, default=_default_serializer))


if __name__ == "__main__":
    main()
