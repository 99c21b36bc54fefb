"""PCG32 pseudorandom number generator.

Implements the PCG-XSH-RR variant (32-bit output, 64-bit state).
Reference: https://www.pcg-random.org/
"""

from __future__ import annotations

from typing import Callable, MutableSequence

from .lcg import MASK32, MASK64, jump, step


def fisher_yates(bounded: Callable[[int], int], items: MutableSequence) -> None:
    """Shuffle in place, drawing ``bounded(i)`` for i = len(items) down to 2."""
    for i in range(len(items), 1, -1):
        chosen = bounded(i)
        items[chosen], items[i - 1] = items[i - 1], items[chosen]


class PCG32:
    """One PCG-XSH-RR stream.

    A new instance is unseeded (zero state, zero increment) and must be
    seeded before use::

        rng = PCG32().seed(42, 54)
        rng.next_u32()

    ``seed``, ``advance`` and ``retreat`` return ``self`` so calls chain.
    """

    def __init__(self) -> None:
        self._state: int = 0
        self._inc: int = 0

    @property
    def state(self) -> int:
        return self._state

    @property
    def increment(self) -> int:
        return self._inc

    def seed(self, state: int, sequence: int = 0) -> PCG32:
        """Start the stream selected by ``sequence`` at ``state``.

        The increment is forced odd so every stream has period 2**64. The
        seed is injected between two steps so nearby seeds do not produce
        correlated early output.
        """
        self._inc = ((sequence << 1) | 1) & MASK64
        self._state = 0
        self._step()
        self._state = (self._state + state) & MASK64
        self._step()
        return self

    def _step(self) -> None:
        self._state = step(self._state, self._inc)

    def next_u32(self) -> int:
        old = self._state
        self._step()
        xorshifted = (((old >> 18) ^ old) >> 27) & MASK32
        rot = (old >> 59) & 31
        return ((xorshifted >> rot) | (xorshifted << ((-rot) & 31))) & MASK32

    def bounded(self, bound: int) -> int:
        """Uniform integer in [0, bound), free of modulo bias.

        ``bounded(0)`` returns 0. Draws below ``2**32 % bound`` are rejected
        so the accepted range is an exact multiple of ``bound``.
        """
        bound &= MASK32
        if bound == 0:
            return 0
        threshold = (-bound & MASK32) % bound
        while True:
            r = self.next_u32()
            if r >= threshold:
                return r % bound

    def advance(self, delta: int) -> PCG32:
        """Skip ``delta`` steps ahead in O(log delta)."""
        self._state = jump(self._state, self._inc, delta)
        return self

    def retreat(self, delta: int) -> PCG32:
        """Step back ``delta`` steps; the inverse of ``advance(delta)``."""
        return self.advance(-delta & MASK64)

    def next_float(self) -> float:
        """Uniform float in [0, 1)."""
        return self.next_u32() / (MASK32 + 1)

    def next_int(self, lo: int, hi: int) -> int:
        """Uniform integer in [lo, hi] inclusive."""
        span = hi - lo + 1
        if span <= 0:
            raise ValueError(f"empty range [{lo}, {hi}]")
        if span > MASK32 + 1:
            raise ValueError(f"range [{lo}, {hi}] wider than 2**32")
        if span == MASK32 + 1:
            return lo + self.next_u32()
        return lo + self.bounded(span)

    def shuffle(self, items: MutableSequence) -> None:
        """Fisher-Yates shuffle in place, drawing from the top down."""
        fisher_yates(self.bounded, items)

    def clone(self) -> PCG32:
        other = PCG32()
        other._state = self._state
        other._inc = self._inc
        return other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PCG32):
            return NotImplemented
        return self._state == other._state and self._inc == other._inc

    def __repr__(self) -> str:
        return f"PCG32(state=0x{self._state:016x}, inc=0x{self._inc:016x})"
