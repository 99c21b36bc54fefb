"""64-bit linear congruential arithmetic shared by the PCG generators.

Every PCG32 stream is the recurrence ``state = state * MULTIPLIER + inc``
modulo 2**64. Python integers never overflow, so each multiply and add here
is masked back to 64 bits; the full-period guarantee depends on exact
wraparound.

``jump`` composes ``delta`` steps of the recurrence into a single affine map
by repeated squaring (Brown, "Random Number Generation with Arbitrary
Stride", 1994). Negative deltas are reduced mod 2**64, which moves the state
backwards because the recurrence has period exactly 2**64 for odd ``inc``.
"""

from __future__ import annotations

MULTIPLIER = 6364136223846793005

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF


def step(state: int, inc: int) -> int:
    """One raw LCG step."""
    return (state * MULTIPLIER + inc) & MASK64


def jump(state: int, inc: int, delta: int) -> int:
    """Return the state ``delta`` steps after ``state``.

    Always runs 64 iterations. The doubling of ``(cur_mult, cur_plus)``
    happens on every bit, set or not; only the accumulate is conditional.
    """
    delta &= MASK64
    acc_mult = 1
    acc_plus = 0
    cur_mult = MULTIPLIER
    cur_plus = inc & MASK64
    for _ in range(64):
        if delta & 1:
            acc_mult = (acc_mult * cur_mult) & MASK64
            acc_plus = (acc_plus * cur_mult + cur_plus) & MASK64
        cur_plus = (cur_plus * (cur_mult + 1)) & MASK64
        cur_mult = (cur_mult * cur_mult) & MASK64
        delta >>= 1
    return (state * acc_mult + acc_plus) & MASK64
