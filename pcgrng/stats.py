"""Bulk sampling and a chi-square uniformity check.

Draws are still produced one at a time by the scalar generators; numpy only
holds the samples and does the counting, and scipy supplies the Pearson
statistic and the chi-square quantile.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from scipy import stats

from .pcg32 import PCG32
from .pcg64 import PCG64

DEFAULT_ALPHA = 0.001


@dataclass
class ChiSquareResult:
    statistic: float
    pvalue: float
    dof: int
    critical: float

    @property
    def uniform(self) -> bool:
        return self.statistic <= self.critical


def draw_u32(rng: PCG32, n: int) -> np.ndarray:
    out = np.empty(n, dtype=np.uint32)
    for i in range(n):
        out[i] = rng.next_u32()
    return out


def draw_u64(rng: PCG64, n: int) -> np.ndarray:
    out = np.empty(n, dtype=np.uint64)
    for i in range(n):
        out[i] = rng.next_u64()
    return out


def draw_bounded(rng: PCG32 | PCG64, bound: int, n: int) -> np.ndarray:
    """``n`` draws of ``rng.bounded(bound)``."""
    dtype = np.int64 if bound <= (1 << 63) else np.uint64
    out = np.empty(n, dtype=dtype)
    for i in range(n):
        out[i] = rng.bounded(bound)
    return out


def chi_square_critical(dof: int, alpha: float = DEFAULT_ALPHA) -> float:
    """Upper critical value of the chi-square distribution."""
    if dof <= 0:
        raise ValueError(f"dof must be positive, got {dof}")
    return float(stats.chi2.ppf(1.0 - alpha, dof))


def chi_square_uniform(
    samples: np.ndarray, bound: int, alpha: float = DEFAULT_ALPHA
) -> ChiSquareResult:
    """Pearson chi-square of integer ``samples`` against uniform on [0, bound)."""
    if bound < 2:
        raise ValueError(f"bound must be at least 2, got {bound}")
    samples = np.asarray(samples)
    if samples.size == 0:
        raise ValueError("no samples")
    if not np.issubdtype(samples.dtype, np.integer):
        raise ValueError(f"samples must be integers, got {samples.dtype}")
    if samples.min() < 0 or samples.max() >= bound:
        raise ValueError(f"samples outside [0, {bound})")

    counts = np.bincount(samples.astype(np.int64), minlength=bound)
    statistic, pvalue = stats.chisquare(counts)
    dof = bound - 1
    return ChiSquareResult(
        float(statistic), float(pvalue), dof, chi_square_critical(dof, alpha)
    )


def is_uniform(
    samples: np.ndarray, bound: int, alpha: float = DEFAULT_ALPHA
) -> bool:
    return chi_square_uniform(samples, bound, alpha).uniform
