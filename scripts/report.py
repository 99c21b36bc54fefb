#!/usr/bin/env python3
"""Print the deterministic demonstration report for a seeded generator.

Usage (from the repository root):
    python scripts/report.py                      # PCG32, seed 42, sequence 54
    python scripts/report.py --bits 64            # PCG64 seeded (42, 42, 54, 54)
    python scripts/report.py --seed 0x1234 -r 2   # two rounds from another seed
"""

import argparse
import sys
from pathlib import Path

# Add the repository root to path
SCRIPT_DIR = Path(__file__).resolve().parent
ROOT_DIR = SCRIPT_DIR.parent
sys.path.insert(0, str(ROOT_DIR))

from pcgrng.report import ReportParams, format_report  # noqa: E402


def main():
    parser = argparse.ArgumentParser(
        description="Print words, coin tosses, dice rolls and a card deal"
    )
    parser.add_argument(
        "--bits",
        type=int,
        choices=(32, 64),
        default=32,
        help="Generator width (default: 32)",
    )
    parser.add_argument(
        "--seed",
        type=lambda value: int(value, 0),
        default=42,
        help="State seed, decimal or 0x-prefixed hex (default: 42)",
    )
    parser.add_argument(
        "--sequence",
        type=lambda value: int(value, 0),
        default=54,
        help="Stream selector (default: 54)",
    )
    parser.add_argument(
        "-r",
        "--rounds",
        type=int,
        default=5,
        help="Number of rounds (default: 5)",
    )
    args = parser.parse_args()

    try:
        params = ReportParams(
            bits=args.bits,
            seed=args.seed,
            sequence=args.sequence,
            rounds=args.rounds,
        )
    except ValueError as exc:
        parser.error(str(exc))

    sys.stdout.write(format_report(params))


if __name__ == "__main__":
    main()
