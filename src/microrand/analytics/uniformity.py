"""Uniformity statistics over generator output."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from microrand.core.generator import RandomGenerator


@dataclass(frozen=True)
class UniformityReport:
    """Bucketed frequency check of ``next_f64`` draws.

    Attributes:
        n_draws: Number of values drawn.
        counts: (n_buckets,) number of draws falling in each equal-width bucket.
        expected: Expected count per bucket under a uniform distribution.
        chi_square: Pearson chi-square statistic of ``counts`` against ``expected``.
        degrees_of_freedom: ``n_buckets - 1``.
        max_relative_deviation: Largest ``|count - expected| / expected``.
    """

    n_draws: int
    counts: NDArray[np.int64]
    expected: float
    chi_square: float
    degrees_of_freedom: int
    max_relative_deviation: float

    @property
    def n_buckets(self) -> int:
        return int(self.counts.shape[0])

    def passes(self, z: float = 4.0) -> bool:
        """Whether chi-square lies within ``z`` standard deviations of its mean.

        Uses the normal approximation: mean ``k``, variance ``2k`` for ``k``
        degrees of freedom.
        """
        k = self.degrees_of_freedom
        return bool(abs(self.chi_square - k) <= z * np.sqrt(2.0 * k))


def bucket_counts(rng: RandomGenerator, n_draws: int, n_buckets: int) -> NDArray[np.int64]:
    """Count ``n_draws`` float draws into ``n_buckets`` equal-width buckets of [0, 1)."""
    if n_draws <= 0:
        raise ValueError(f"n_draws must be positive, got {n_draws}")
    if n_buckets < 2:
        raise ValueError(f"n_buckets must be at least 2, got {n_buckets}")
    draws = rng.fill_f64(n_draws)
    index = np.minimum((draws * n_buckets).astype(np.int64), n_buckets - 1)
    counts: NDArray[np.int64] = np.bincount(index, minlength=n_buckets).astype(np.int64)
    return counts


def uniformity_report(rng: RandomGenerator, n_draws: int, n_buckets: int = 100) -> UniformityReport:
    """Draw from ``rng`` and summarise how evenly the values spread over [0, 1).

    Args:
        rng: Generator to draw from; it is advanced ``n_draws`` times.
        n_draws: Number of values to draw.
        n_buckets: Number of equal-width buckets.

    Returns:
        UniformityReport with counts and chi-square statistic.
    """
    counts = bucket_counts(rng, n_draws, n_buckets)
    expected = n_draws / n_buckets
    deviation = counts - expected
    return UniformityReport(
        n_draws=n_draws,
        counts=counts,
        expected=expected,
        chi_square=float((deviation**2 / expected).sum()),
        degrees_of_freedom=n_buckets - 1,
        max_relative_deviation=float(np.abs(deviation).max() / expected),
    )
