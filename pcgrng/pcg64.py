"""PCG64: two PCG32 streams concatenated into 64-bit output.

The composite owns a "lo" and a "hi" ``PCG32``. Every operation is applied
to both halves in lockstep, so they are always the same number of steps
into their respective streams.
"""

from __future__ import annotations

from typing import MutableSequence

from .lcg import MASK64
from .pcg32 import PCG32, fisher_yates

_LOW63 = MASK64 >> 1


class PCG64:
    def __init__(self) -> None:
        self._lo = PCG32()
        self._hi = PCG32()

    @property
    def lo(self) -> PCG32:
        return self._lo

    @property
    def hi(self) -> PCG32:
        return self._hi

    def seed(
        self, state1: int, state2: int, sequence1: int, sequence2: int
    ) -> PCG64:
        """Seed lo with (state1, sequence1) and hi with (state2, sequence2).

        ``seed`` drops the top bit of a sequence, so selectors that agree
        in their low 63 bits would give both halves the same stream. In
        that case ``sequence2`` is complemented first.
        """
        if sequence1 & _LOW63 == sequence2 & _LOW63:
            sequence2 = ~sequence2 & MASK64
        self._lo.seed(state1, sequence1)
        self._hi.seed(state2, sequence2)
        return self

    def next_u64(self) -> int:
        hi = self._hi.next_u32()
        lo = self._lo.next_u32()
        return (hi << 32) | lo

    def bounded(self, bound: int) -> int:
        """Uniform integer in [0, bound); ``bounded(0)`` returns 0."""
        bound &= MASK64
        if bound == 0:
            return 0
        threshold = (-bound & MASK64) % bound
        while True:
            r = self.next_u64()
            if r >= threshold:
                return r % bound

    def advance(self, delta: int) -> PCG64:
        self._lo.advance(delta)
        self._hi.advance(delta)
        return self

    def retreat(self, delta: int) -> PCG64:
        return self.advance(-delta & MASK64)

    def next_float(self) -> float:
        """Uniform float in [0, 1) with 53 random bits."""
        return (self.next_u64() >> 11) * (1.0 / (1 << 53))

    def next_int(self, lo: int, hi: int) -> int:
        """Uniform integer in [lo, hi] inclusive."""
        span = hi - lo + 1
        if span <= 0:
            raise ValueError(f"empty range [{lo}, {hi}]")
        if span > MASK64 + 1:
            raise ValueError(f"range [{lo}, {hi}] wider than 2**64")
        if span == MASK64 + 1:
            return lo + self.next_u64()
        return lo + self.bounded(span)

    def shuffle(self, items: MutableSequence) -> None:
        fisher_yates(self.bounded, items)

    def clone(self) -> PCG64:
        other = PCG64()
        other._lo = self._lo.clone()
        other._hi = self._hi.clone()
        return other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PCG64):
            return NotImplemented
        return self._lo == other._lo and self._hi == other._hi

    def __repr__(self) -> str:
        return f"PCG64(lo={self._lo!r}, hi={self._hi!r})"
