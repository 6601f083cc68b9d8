"""
Optimization-benchmark Landscapes

Classic test functions f(x, y) turned into densities p ∝ exp(-scale · f).
`scale` acts as an inverse temperature: small values flatten the landscape,
large values sharpen every local optimum into a trap.
"""

import math

import jax.numpy as jnp

from ..types import Bounds
from .base import Distribution


class RosenbrockDistribution(Distribution):
    """f(x, y) = (a - x)² + b (y - x²)², global minimum at (a, a²)."""
    name = 'Rosenbrock'
    bounds = Bounds(-3.0, 3.0, -2.0, 8.0)

    def __init__(self, a: float = 1.0, b: float = 100.0, scale: float = 0.02):
        self.a = a
        self.b = b
        self.scale = scale
        super().__init__()

    def density_fn(self, x, y):
        f = (self.a - x) ** 2 + self.b * (y - x * x) ** 2
        return jnp.exp(-self.scale * f)


class RastriginDistribution(Distribution):
    """f(x, y) = 2A + (x² - A cos 2πx) + (y² - A cos 2πy): a grid of local modes."""
    name = 'Rastrigin'
    bounds = Bounds(-5.0, 5.0, -5.0, 5.0)

    def __init__(self, A: float = 10.0, scale: float = 0.1):
        self.A = A
        self.scale = scale
        super().__init__()

    def density_fn(self, x, y):
        f = (2 * self.A
             + (x * x - self.A * jnp.cos(2 * jnp.pi * x))
             + (y * y - self.A * jnp.cos(2 * jnp.pi * y)))
        return jnp.exp(-self.scale * f)


class AckleyDistribution(Distribution):
    """
    f(x, y) = -a exp(-b √(½(x² + y²))) - exp(½(cos cx + cos cy)) + a + e

    Global minimum f(0, 0) = 0.
    """
    name = 'Ackley'
    bounds = Bounds(-5.0, 5.0, -5.0, 5.0)

    def __init__(self, a: float = 20.0, b: float = 0.2, c: float = 2 * math.pi,
                 scale: float = 0.3):
        self.a = a
        self.b = b
        self.c = c
        self.scale = scale
        super().__init__()

    def density_fn(self, x, y):
        sum_sq = x * x + y * y
        sum_cos = jnp.cos(self.c * x) + jnp.cos(self.c * y)
        f = (-self.a * jnp.exp(-self.b * jnp.sqrt(0.5 * sum_sq))
             - jnp.exp(0.5 * sum_cos)
             + self.a + math.e)
        return jnp.exp(-self.scale * f)
