"""
Curved and Ring-shaped Targets

Banana, Donut and Squiggle have strongly non-linear level sets. They are the
targets where gradient-based samplers (HMC, NUTS, MALA) visibly outperform a
random walk.
"""

import jax.numpy as jnp

from ..types import Bounds
from .base import Distribution


class BananaDistribution(Distribution):
    """
    Banana-shaped transformed Gaussian:
        p(x, y) ∝ exp(-((a - x)² + b (y - x²)²) / 2)
    """
    name = 'Banana'
    bounds = Bounds(-3.0, 3.0, -3.0, 4.0)

    def __init__(self, a: float = 1.0, b: float = 1.0):
        self.a = a
        self.b = b
        super().__init__()

    def density_fn(self, x, y):
        term1 = (self.a - x) ** 2
        term2 = self.b * (y - x * x) ** 2
        return jnp.exp(-(term1 + term2) / 2)


class DonutDistribution(Distribution):
    """
    Gaussian ring of given radius and width:
        p(x, y) ∝ exp(-(r - radius)² / (2 width²)),  r = √(x² + y²)

    Analytic gradient: ∇ log p = -(r - radius) / (width² r) · (x, y), with r
    offset by 1e-10 so the origin is not a 0/0.
    """
    name = 'Donut'
    bounds = Bounds(-4.0, 4.0, -4.0, 4.0)
    has_analytic_gradient = True

    def __init__(self, radius: float = 2.0, width: float = 0.4):
        self.radius = radius
        self.width = width
        super().__init__()

    def density_fn(self, x, y):
        r = jnp.sqrt(x * x + y * y)
        diff = r - self.radius
        return jnp.exp(-diff * diff / (2 * self.width * self.width))

    def gradient_fn(self, x, y):
        r = jnp.sqrt(x * x + y * y) + 1e-10
        factor = -(r - self.radius) / (self.width * self.width * r)
        return factor * x, factor * y


# Covariance [[2, 0.25], [0.25, 0.5]], det = 0.9375
_SQUIGGLE_DET = 2.0 * 0.5 - 0.25 * 0.25
_SQUIGGLE_INV_00 = 0.5 / _SQUIGGLE_DET
_SQUIGGLE_INV_01 = -0.25 / _SQUIGGLE_DET
_SQUIGGLE_INV_11 = 2.0 / _SQUIGGLE_DET


class SquiggleDistribution(Distribution):
    """
    Correlated Gaussian in warped coordinates (u, v) = (x, y + sin(f x)):
        p(x, y) ∝ exp(-½ [u v] Σ⁻¹ [u v]ᵀ)

    Analytic gradient by the chain rule, dv/dx = f cos(f x).
    """
    name = 'Squiggle'
    bounds = Bounds(-6.0, 6.0, -4.0, 4.0)
    has_analytic_gradient = True

    def __init__(self, frequency: float = 5.0):
        self.frequency = frequency
        super().__init__()

    def density_fn(self, x, y):
        u = x
        v = y + jnp.sin(self.frequency * x)
        quad = (_SQUIGGLE_INV_00 * u * u
                + 2 * _SQUIGGLE_INV_01 * u * v
                + _SQUIGGLE_INV_11 * v * v)
        return jnp.exp(-0.5 * quad)

    def gradient_fn(self, x, y):
        u = x
        v = y + jnp.sin(self.frequency * x)
        grad_u = -(_SQUIGGLE_INV_00 * u + _SQUIGGLE_INV_01 * v)
        grad_v = -(_SQUIGGLE_INV_01 * u + _SQUIGGLE_INV_11 * v)
        dv_dx = self.frequency * jnp.cos(self.frequency * x)
        return grad_u + grad_v * dv_dx, grad_v
