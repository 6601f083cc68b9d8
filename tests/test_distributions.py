"""
Tests for Target Distributions

Density, log density, gradients and marginals of the distribution catalogue.
Run with: pytest tests/test_distributions.py -v
"""

import math

import numpy as np
import jax.numpy as jnp
import pytest

from vizmcmc.distributions import (
    AckleyDistribution,
    BananaDistribution,
    BimodalDistribution,
    DonutDistribution,
    LOG_EPS,
    MultimodalDistribution,
    QuarticGaussian,
    RastriginDistribution,
    RosenbrockDistribution,
    SquiggleDistribution,
    StandardGaussian,
)
from vizmcmc.types import Bounds, Point

from .conftest import ZeroDensity


ALL_DISTRIBUTIONS = [
    StandardGaussian,
    QuarticGaussian,
    BimodalDistribution,
    MultimodalDistribution,
    BananaDistribution,
    DonutDistribution,
    SquiggleDistribution,
    RosenbrockDistribution,
    RastriginDistribution,
    AckleyDistribution,
]

ANALYTIC_GRADIENTS = [
    StandardGaussian,
    QuarticGaussian,
    MultimodalDistribution,
    DonutDistribution,
    SquiggleDistribution,
]

TEST_POINTS = [Point(0.3, -0.4), Point(-1.1, 0.7), Point(1.5, 1.0)]


# ============================================================================
# DENSITY TESTS
# ============================================================================

class TestDensity:
    """Density and log density over the whole catalogue."""

    @pytest.mark.parametrize("cls", ALL_DISTRIBUTIONS)
    def test_density_non_negative_and_finite(self, cls):
        dist = cls()
        b = dist.bounds
        xs = np.linspace(b.x_min, b.x_max, 25)
        ys = np.linspace(b.y_min, b.y_max, 25)
        grid = np.asarray(dist.density_grid(xs[:, None], ys[None, :]))
        assert grid.shape == (25, 25)
        assert np.all(np.isfinite(grid))
        assert np.all(grid >= 0)

    @pytest.mark.parametrize("cls", ALL_DISTRIBUTIONS)
    def test_log_density_matches_density(self, cls):
        dist = cls()
        for point in TEST_POINTS:
            expected = math.log(dist.density(point) + LOG_EPS)
            assert dist.log_density(point) == pytest.approx(expected, rel=1e-9, abs=1e-9)

    def test_standard_gaussian_values(self, gaussian):
        assert gaussian.density(Point(0.0, 0.0)) == pytest.approx(1.0)
        assert gaussian.density(Point(1.0, 1.0)) == pytest.approx(math.exp(-1.0))
        assert gaussian.log_density(Point(2.0, 0.0)) == pytest.approx(-2.0)

    def test_zero_density_log_is_finite(self):
        """log(0 + eps) is large and negative but finite."""
        dist = ZeroDensity()
        value = dist.log_density(Point(0.5, 0.5))
        assert math.isfinite(value)
        assert value == pytest.approx(math.log(LOG_EPS))

    def test_bimodal_peaks_symmetric(self):
        dist = BimodalDistribution(separation=3.0, sigma=0.8)
        assert dist.density(Point(1.5, 0.0)) == pytest.approx(dist.density(Point(-1.5, 0.0)))
        assert dist.density(Point(1.5, 0.0)) > dist.density(Point(0.0, 0.0))

    def test_donut_peaks_on_ring(self):
        dist = DonutDistribution(radius=2.0, width=0.4)
        assert dist.density(Point(2.0, 0.0)) == pytest.approx(1.0)
        assert dist.density(Point(0.0, 0.0)) < 1e-5

    def test_banana_mode(self):
        dist = BananaDistribution(a=1.0, b=1.0)
        assert dist.density(Point(1.0, 1.0)) == pytest.approx(1.0)

    def test_rosenbrock_mode(self):
        dist = RosenbrockDistribution()
        assert dist.density(Point(1.0, 1.0)) == pytest.approx(1.0)

    def test_landscapes_peak_at_origin(self):
        for dist in (RastriginDistribution(), AckleyDistribution()):
            at_origin = dist.density(Point(0.0, 0.0))
            assert at_origin >= dist.density(Point(0.5, 0.5))
            assert at_origin >= dist.density(Point(-2.0, 1.0))

    def test_density_grid_broadcasts_scalar(self, gaussian):
        values = np.asarray(gaussian.density_grid(jnp.array([0.0, 1.0]), 0.0))
        np.testing.assert_allclose(values, [1.0, math.exp(-0.5)])


# ============================================================================
# GRADIENT TESTS
# ============================================================================

class TestGradients:
    """Analytic gradients against autodiff and finite differences."""

    @pytest.mark.parametrize("cls", ANALYTIC_GRADIENTS)
    def test_analytic_matches_autodiff(self, cls):
        dist = cls()
        assert dist.has_analytic_gradient
        for point in TEST_POINTS:
            analytic = dist.gradient(point)
            reference = dist.autodiff_gradient(point)
            np.testing.assert_allclose(analytic, reference, rtol=1e-6, atol=1e-8)

    @pytest.mark.parametrize("cls", ANALYTIC_GRADIENTS)
    def test_analytic_matches_finite_difference(self, cls):
        dist = cls()
        for point in TEST_POINTS:
            analytic = dist.gradient(point)
            numeric = dist.finite_difference_gradient(point)
            np.testing.assert_allclose(analytic, numeric, atol=1e-3)

    def test_finite_difference_error_is_second_order(self):
        """Halving h cuts the error by about 4."""
        dist = SquiggleDistribution()
        point = Point(0.1, -0.2)
        exact = np.array(dist.gradient(point))
        err_h = np.abs(np.array(dist.finite_difference_gradient(point, h=2e-2)) - exact)[0]
        err_half = np.abs(np.array(dist.finite_difference_gradient(point, h=1e-2)) - exact)[0]
        assert 3.0 < err_h / err_half < 5.0

    def test_default_gradient_is_finite_difference(self):
        dist = BananaDistribution()
        assert not dist.has_analytic_gradient
        point = Point(0.4, 0.9)
        np.testing.assert_allclose(dist.gradient(point), dist.finite_difference_gradient(point), rtol=1e-9)
        np.testing.assert_allclose(dist.gradient(point), dist.autodiff_gradient(point), atol=1e-4)

    def test_standard_gaussian_gradient(self, gaussian):
        assert tuple(gaussian.gradient(Point(1.5, -2.0))) == pytest.approx((-1.5, 2.0))

    def test_multimodal_gradient_zero_far_away(self):
        """All components underflow; gradient is defined as zero, not NaN."""
        dist = MultimodalDistribution()
        grad = dist.gradient(Point(1e3, -1e3))
        assert grad == Point(0.0, 0.0)

    def test_donut_gradient_finite_at_origin(self):
        grad = DonutDistribution().gradient(Point(0.0, 0.0))
        assert all(math.isfinite(g) for g in grad)

    def test_zero_density_gradient_is_zero(self):
        grad = ZeroDensity().gradient(Point(0.3, 0.3))
        assert tuple(grad) == pytest.approx((0.0, 0.0))

    def test_grad_log_prob_array_api(self, gaussian):
        grad = gaussian.grad_log_prob(jnp.array([0.5, -0.25]))
        np.testing.assert_allclose(grad, [-0.5, 0.25])


# ============================================================================
# MARGINAL TESTS
# ============================================================================

class TestMarginals:
    """Midpoint-rule marginals over the distribution bounds."""

    def test_standard_gaussian_marginal_at_zero(self, gaussian):
        # ∫ exp(-y²/2) dy over [-4, 4]
        expected = math.sqrt(2 * math.pi) * math.erf(4 / math.sqrt(2))
        assert gaussian.marginal_x(0.0) == pytest.approx(expected, rel=1e-3)
        assert gaussian.marginal_y(0.0) == pytest.approx(expected, rel=1e-3)

    def test_marginal_scales_with_other_coordinate(self, gaussian):
        ratio = gaussian.marginal_x(1.0) / gaussian.marginal_x(0.0)
        assert ratio == pytest.approx(math.exp(-0.5), rel=1e-6)

    def test_zero_density_marginals(self):
        dist = ZeroDensity()
        assert dist.marginal_x(0.0) == 0.0
        assert dist.marginal_y(1.0) == 0.0

    def test_marginal_step_count(self, gaussian):
        coarse = gaussian.marginal_x(0.5, n_steps=10)
        fine = gaussian.marginal_x(0.5, n_steps=400)
        assert coarse == pytest.approx(fine, rel=5e-2)


# ============================================================================
# BOUNDS TESTS
# ============================================================================

class TestBounds:

    def test_invalid_bounds_raise(self):
        with pytest.raises(ValueError, match="x_max"):
            Bounds(1.0, 1.0, 0.0, 1.0)
        with pytest.raises(ValueError, match="y_max"):
            Bounds(0.0, 1.0, 2.0, 1.0)

    def test_bounds_properties(self):
        b = Bounds(-3.0, 3.0, -2.0, 8.0)
        assert b.width == 6.0
        assert b.height == 10.0
        assert b.contains(Point(0.0, 7.5))
        assert not b.contains(Point(3.5, 0.0))

    def test_point_array_conversion(self):
        p = Point(1.25, -0.5)
        assert Point.from_array(p.to_array()) == p
