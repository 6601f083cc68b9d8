"""
Gaussian-family Targets

StandardGaussian and QuarticGaussian are unimodal, isotropic and have
closed-form gradients, which makes them the reference targets for sampler
tests: the standard Gaussian's log density is a pure quadratic, so HMC
trajectories are exact ellipses up to integrator error.
"""

import jax.numpy as jnp

from ..types import Bounds
from .base import Distribution


class StandardGaussian(Distribution):
    """
    2-D standard normal: p(x, y) ∝ exp(-(x² + y²) / 2)

    Analytic gradient: ∇ log p = -(x, y)
    """
    name = 'Standard Gaussian'
    bounds = Bounds(-4.0, 4.0, -4.0, 4.0)
    has_analytic_gradient = True

    def density_fn(self, x, y):
        return jnp.exp(-0.5 * (x * x + y * y))

    def gradient_fn(self, x, y):
        return -x, -y


class QuarticGaussian(Distribution):
    """
    p(x, y) ∝ exp(-(x² + y²)²)

    Flatter top and sharper falloff than a Gaussian; gradients vanish near the
    mode and grow cubically in the tails.

    Analytic gradient: ∇ log p = -4(x² + y²)(x, y)
    """
    name = 'Quartic Gaussian'
    bounds = Bounds(-2.5, 2.5, -2.5, 2.5)
    has_analytic_gradient = True

    def density_fn(self, x, y):
        r2 = x * x + y * y
        return jnp.exp(-r2 * r2)

    def gradient_fn(self, x, y):
        scale = -4.0 * (x * x + y * y)
        return scale * x, scale * y
