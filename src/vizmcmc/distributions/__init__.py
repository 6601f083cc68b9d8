"""
Target Distributions for MCMC Sampling

This package implements the 2-D targets the samplers draw from.

To add a new distribution:
1. Create a Distribution subclass (any module in this package)
2. Set `name` and `bounds`, implement `density_fn(x, y)` with jax.numpy
3. Optionally set `has_analytic_gradient = True` and implement `gradient_fn`
4. Register it in registry.py (DISTRIBUTION_FACTORIES) and export it here

Samplers only call density, log_density / log_prob, gradient / grad_log_prob
and bounds, so a new target works with every algorithm unmodified.
"""

from .base import Distribution, LOG_EPS, FD_STEP, MARGINAL_STEPS
from .gaussians import StandardGaussian, QuarticGaussian
from .mixtures import BimodalDistribution, MultimodalDistribution, GaussianComponent
from .shapes import BananaDistribution, DonutDistribution, SquiggleDistribution
from .landscapes import RosenbrockDistribution, RastriginDistribution, AckleyDistribution

__all__ = [
    'Distribution',
    'LOG_EPS',
    'FD_STEP',
    'MARGINAL_STEPS',
    'StandardGaussian',
    'QuarticGaussian',
    'BimodalDistribution',
    'MultimodalDistribution',
    'GaussianComponent',
    'BananaDistribution',
    'DonutDistribution',
    'SquiggleDistribution',
    'RosenbrockDistribution',
    'RastriginDistribution',
    'AckleyDistribution',
]
