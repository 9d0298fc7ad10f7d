"""Tests for uniformity analytics."""

from __future__ import annotations

import numpy as np
import pytest

from microrand.analytics.uniformity import bucket_counts, uniformity_report
from microrand.core.rng import make_rng


class TestBucketCounts:
    def test_counts_sum_to_draws(self) -> None:
        counts = bucket_counts(make_rng(7), 5000, 10)
        assert counts.shape == (10,)
        assert int(counts.sum()) == 5000

    def test_deterministic(self) -> None:
        np.testing.assert_array_equal(
            bucket_counts(make_rng(7), 2000, 20),
            bucket_counts(make_rng(7), 2000, 20),
        )

    def test_fixed_point_fills_first_bucket(self) -> None:
        counts = bucket_counts(make_rng(0, preset="park_miller"), 100, 4)
        np.testing.assert_array_equal(counts, [100, 0, 0, 0])

    def test_invalid_arguments(self) -> None:
        with pytest.raises(ValueError):
            bucket_counts(make_rng(1), 0, 10)
        with pytest.raises(ValueError):
            bucket_counts(make_rng(1), 10, 1)


class TestUniformityReport:
    @pytest.mark.parametrize("preset", ["mmix", "park_miller", "minstd"])
    def test_presets_look_uniform(self, preset: str) -> None:
        report = uniformity_report(make_rng(20240101, preset=preset), 50_000, 50)
        assert report.n_buckets == 50
        assert report.degrees_of_freedom == 49
        assert report.expected == 1000.0
        assert report.max_relative_deviation < 0.2
        assert report.passes()

    def test_degenerate_stream_fails(self) -> None:
        report = uniformity_report(make_rng(0, preset="park_miller"), 1000, 10)
        assert report.chi_square == pytest.approx(9000.0)
        assert not report.passes()
