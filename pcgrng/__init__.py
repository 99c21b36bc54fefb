"""Permuted congruential generators: PCG32 (XSH-RR) and the two-stream PCG64."""

from .lcg import MASK32, MASK64, MULTIPLIER
from .pcg32 import PCG32
from .pcg64 import PCG64

__all__ = ["MASK32", "MASK64", "MULTIPLIER", "PCG32", "PCG64"]
