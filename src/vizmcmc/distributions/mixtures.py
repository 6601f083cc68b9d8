"""
Mixture Targets

Sums of isotropic Gaussian bumps. These are the targets on which local
samplers (RWMH with small sigma, MALA) visibly get trapped in one mode.
"""

from typing import NamedTuple, Tuple

import jax.numpy as jnp

from ..types import Bounds, Point
from .base import Distribution


class GaussianComponent(NamedTuple):
    """Isotropic Gaussian bump: exp(-|q - mean|² / (2 variance))."""
    mean: Point
    variance: float


class BimodalDistribution(Distribution):
    """Two equal peaks at (±separation/2, 0) with common width sigma."""
    name = 'Bimodal'
    bounds = Bounds(-5.0, 5.0, -4.0, 4.0)

    def __init__(self, separation: float = 3.0, sigma: float = 0.8):
        self.separation = separation
        self.sigma = sigma
        super().__init__()

    def density_fn(self, x, y):
        s2 = self.sigma * self.sigma
        half = self.separation / 2
        peak1 = jnp.exp(-((x + half) ** 2 + y ** 2) / (2 * s2))
        peak2 = jnp.exp(-((x - half) ** 2 + y ** 2) / (2 * s2))
        return peak1 + peak2


DEFAULT_COMPONENTS = (
    GaussianComponent(Point(-1.5, -1.5), 0.8),
    GaussianComponent(Point(1.5, 1.5), 0.8),
    GaussianComponent(Point(-2.0, 2.0), 0.5),
)


class MultimodalDistribution(Distribution):
    """
    Unweighted mixture of isotropic Gaussian components.

    Analytic gradient of log(Σ p_i):
        ∇ log p = Σ w_i ∇ log p_i,  w_i = p_i / Σ p_j,  ∇ log p_i = -(q - μ_i) / σ_i²
    Far from every component all p_i underflow to 0; the gradient is then
    defined as (0, 0) rather than 0/0.
    """
    name = 'Multimodal'
    bounds = Bounds(-6.0, 6.0, -6.0, 6.0)
    has_analytic_gradient = True

    def __init__(self, components: Tuple[GaussianComponent, ...] = DEFAULT_COMPONENTS):
        self.components = tuple(components)
        super().__init__()

    def _component_densities(self, x, y):
        return [
            jnp.exp(-((x - c.mean.x) ** 2 + (y - c.mean.y) ** 2) / (2 * c.variance))
            for c in self.components
        ]

    def density_fn(self, x, y):
        return sum(self._component_densities(x, y))

    def gradient_fn(self, x, y):
        densities = self._component_densities(x, y)
        total = sum(densities)
        gx = sum(-p * (x - c.mean.x) / c.variance for p, c in zip(densities, self.components))
        gy = sum(-p * (y - c.mean.y) / c.variance for p, c in zip(densities, self.components))
        safe_total = jnp.where(total > 0, total, 1.0)
        return (jnp.where(total > 0, gx / safe_total, 0.0),
                jnp.where(total > 0, gy / safe_total, 0.0))
