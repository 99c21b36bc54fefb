#!/usr/bin/env python3
"""Benchmark generator construction, raw draws and bounded draws.

Usage (from the repository root):
    python scripts/bench_pcg.py                 # both widths, 3 iterations, 100000 draws
    python scripts/bench_pcg.py --bits 32       # PCG32 only
    python scripts/bench_pcg.py -n 5 -d 10000   # 5 iterations of 10000 draws
"""

import argparse
import statistics
import sys
import time
from pathlib import Path

# Add the repository root to path
SCRIPT_DIR = Path(__file__).resolve().parent
ROOT_DIR = SCRIPT_DIR.parent
sys.path.insert(0, str(ROOT_DIR))

from pcgrng import PCG32, PCG64  # noqa: E402


def _workloads(bits):
    if bits == 32:

        def new():
            return PCG32().seed(1, 1)

        def draw(rng):
            return rng.next_u32()

    else:

        def new():
            return PCG64().seed(1, 1, 1, 2)

        def draw(rng):
            return rng.next_u64()

    def bench_new(n):
        for _ in range(n):
            new()

    def bench_random(n):
        rng = new()
        for _ in range(n):
            draw(rng)

    def bench_bounded(n):
        # Bounds 0..255, as in the reference benchmarks.
        rng = new()
        for i in range(n):
            rng.bounded(i & 0xFF)

    def bench_advance(n):
        rng = new()
        for i in range(n):
            rng.advance(i)

    return [
        ("new", bench_new),
        ("random", bench_random),
        ("bounded", bench_bounded),
        ("advance", bench_advance),
    ]


def _run(name, fn, draws, iterations):
    times_ns = []
    for _ in range(iterations):
        start = time.perf_counter()
        fn(draws)
        elapsed = time.perf_counter() - start
        times_ns.append(elapsed * 1e9 / draws)

    median = statistics.median(times_ns)
    line = f"  {name:<8} median {median:8.1f} ns/op"
    if len(times_ns) > 1:
        line += f"  stdev {statistics.stdev(times_ns):6.1f}"
    print(line)


def main():
    parser = argparse.ArgumentParser(description="Benchmark PCG generators")
    parser.add_argument(
        "--bits",
        type=int,
        choices=(32, 64),
        help="Only benchmark one width (default: both)",
    )
    parser.add_argument(
        "-n",
        "--iterations",
        type=int,
        default=3,
        help="Number of iterations (default: 3)",
    )
    parser.add_argument(
        "-d",
        "--draws",
        type=int,
        default=100000,
        help="Operations per iteration (default: 100000)",
    )
    args = parser.parse_args()
    if args.draws <= 0 or args.iterations <= 0:
        parser.error("--draws and --iterations must be positive")

    widths = [args.bits] if args.bits else [32, 64]
    print(f"Iterations: {args.iterations}, operations: {args.draws}")
    for bits in widths:
        print()
        print(f"PCG{bits}:")
        for name, fn in _workloads(bits):
            _run(name, fn, args.draws, args.iterations)


if __name__ == "__main__":
    main()
