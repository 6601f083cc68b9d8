"""
Tests for histogram summaries of the sample log.
Run with: pytest tests/test_histograms.py -v
"""

import numpy as np
import pytest

from vizmcmc.distributions import BimodalDistribution, StandardGaussian
from vizmcmc.histograms import (
    apply_burn_in,
    density_grid,
    marginal_curve,
    marginal_histograms,
    sample_heatmap,
    shared_range,
)
from vizmcmc.types import Bounds, Point


BOUNDS = Bounds(-5.0, 5.0, -4.0, 4.0)


class TestBurnIn:

    def test_burn_in_dropped_once_passed(self):
        samples = [Point(float(i), 0.0) for i in range(10)]
        history = apply_burn_in(samples, burn_in=4)
        assert history.shape == (6, 2)
        assert history[0, 0] == 4.0

    def test_all_samples_kept_during_burn_in(self):
        samples = [Point(float(i), 0.0) for i in range(3)]
        assert apply_burn_in(samples, burn_in=10).shape == (3, 2)

    def test_empty(self):
        assert apply_burn_in([], burn_in=5).shape == (0, 2)


class TestMarginalHistograms:

    def test_shared_range(self):
        assert shared_range(BOUNDS) == (-5.0, 5.0)

    def test_counts(self):
        samples = [Point(0.1, -0.1), Point(0.2, 3.9), Point(-4.9, 0.0), Point(9.0, 0.0)]
        hist = marginal_histograms(samples, BOUNDS, bins=10)
        assert len(hist.edges) == 11
        # x = 9.0 lies outside the shared range
        assert hist.x_counts.sum() == 3
        assert hist.y_counts.sum() == 4
        assert hist.x_counts[5] == 2
        assert hist.x_counts[0] == 1
        assert hist.max_count == 2

    def test_burn_in_applied(self):
        samples = [Point(-4.5, 0.0)] * 5 + [Point(4.5, 0.0)] * 5
        hist = marginal_histograms(samples, BOUNDS, bins=10, burn_in=5)
        assert hist.x_counts[0] == 0
        assert hist.x_counts[-1] == 5

    def test_empty_samples(self):
        hist = marginal_histograms([], BOUNDS, bins=8)
        assert hist.max_count == 0


class TestHeatmap:

    def test_counts_indexed_x_then_y(self):
        samples = [Point(-4.9, 3.9), Point(-4.9, 3.9), Point(4.9, -3.9)]
        counts, x_edges, y_edges = sample_heatmap(samples, BOUNDS, bins=4)
        assert counts.shape == (4, 4)
        assert counts[0, 3] == 2
        assert counts[3, 0] == 1
        assert x_edges[0] == -5.0 and y_edges[-1] == 4.0


class TestDensityCurves:

    def test_density_grid_shape_and_peak(self):
        xs, ys, grid = density_grid(StandardGaussian(), resolution=8)
        assert grid.shape == (9, 9)
        assert xs[0] == -4.0 and xs[-1] == 4.0
        assert np.unravel_index(np.argmax(grid), grid.shape) == (4, 4)

    def test_marginal_curve_bimodal(self):
        dist = BimodalDistribution()
        values, densities = marginal_curve(dist, axis='x', n_points=100)
        assert len(values) == 101
        peak = values[np.argmax(densities)]
        assert abs(abs(peak) - 1.5) < 0.11
        assert densities[50] < densities.max()

    def test_marginal_curve_bad_axis(self):
        with pytest.raises(ValueError, match="axis"):
            marginal_curve(StandardGaussian(), axis='z')
