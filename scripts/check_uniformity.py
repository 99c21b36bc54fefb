#!/usr/bin/env python3
"""Chi-square check of bounded output against the uniform distribution.

Usage (from the repository root):
    python scripts/check_uniformity.py                    # PCG32, bounds 2 6 52 365
    python scripts/check_uniformity.py --bits 64 -b 10    # PCG64, bound 10
    python scripts/check_uniformity.py -s 1000            # 1000 samples per bin
"""

import argparse
import sys
from pathlib import Path

# Add the repository root to path
SCRIPT_DIR = Path(__file__).resolve().parent
ROOT_DIR = SCRIPT_DIR.parent
sys.path.insert(0, str(ROOT_DIR))

from pcgrng import PCG32, PCG64  # noqa: E402
from pcgrng.stats import chi_square_uniform, draw_bounded  # noqa: E402


def main():
    parser = argparse.ArgumentParser(
        description="Chi-square uniformity check of bounded draws"
    )
    parser.add_argument("--bits", type=int, choices=(32, 64), default=32)
    parser.add_argument(
        "--seed",
        type=lambda value: int(value, 0),
        default=42,
        help="State seed (default: 42)",
    )
    parser.add_argument(
        "--sequence",
        type=lambda value: int(value, 0),
        default=54,
        help="Stream selector (default: 54)",
    )
    parser.add_argument(
        "-b",
        "--bound",
        type=int,
        action="append",
        help="Bound to test; repeatable (default: 2 6 52 365)",
    )
    parser.add_argument(
        "-s",
        "--samples-per-bin",
        type=int,
        default=200,
        help="Expected samples per bin (default: 200)",
    )
    args = parser.parse_args()
    bounds = args.bound or [2, 6, 52, 365]

    if args.bits == 32:
        rng = PCG32().seed(args.seed, args.sequence)
    else:
        rng = PCG64().seed(args.seed, args.seed, args.sequence, args.sequence)

    failures = 0
    for bound in bounds:
        n = bound * args.samples_per_bin
        try:
            result = chi_square_uniform(draw_bounded(rng, bound, n), bound)
        except ValueError as exc:
            parser.error(f"bound {bound}: {exc}")
        verdict = "ok" if result.uniform else "FAIL"
        if not result.uniform:
            failures += 1
        print(
            f"  bound {bound:>6}: chi2 {result.statistic:10.2f}, p={result.pvalue:.6f}"
            f"  (dof {result.dof}, critical {result.critical:.2f})  {verdict}"
        )

    sys.exit(1 if failures else 0)


if __name__ == "__main__":
    main()
