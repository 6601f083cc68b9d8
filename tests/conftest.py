"""
Pytest configuration and shared fixtures for vizmcmc tests.
"""

import pytest
import jax.numpy as jnp

import vizmcmc  # noqa: F401  (configures JAX before anything else loads it)
from vizmcmc.distributions import Distribution, StandardGaussian
from vizmcmc.event_sink import EventSink
from vizmcmc.types import Bounds


@pytest.fixture
def rng_seed():
    """Default RNG seed for reproducible tests."""
    return 42


@pytest.fixture
def gaussian():
    """Standard 2-D Gaussian target."""
    return StandardGaussian()


@pytest.fixture
def sink():
    """Fresh event sink with the default trail capacity."""
    return EventSink()


class ZeroDensity(Distribution):
    """Degenerate target whose density is zero everywhere."""
    name = 'Zero'
    bounds = Bounds(-2.0, 2.0, -1.0, 3.0)

    def density_fn(self, x, y):
        return jnp.zeros_like(x * y)


class ProductDensity(Distribution):
    """
    Independent coordinates: a Laplace-like x factor and a Gaussian y factor.

    Used to check that Gibbs draws have no cross-coordinate dependence.
    """
    name = 'Product'
    bounds = Bounds(-4.0, 4.0, -4.0, 4.0)

    def density_fn(self, x, y):
        return jnp.exp(-jnp.abs(x)) * jnp.exp(-0.5 * y ** 2)


class CollectingSink:
    """Minimal sink that records pushed events without folding them."""

    def __init__(self):
        self.events = []

    def push(self, event):
        self.events.append(event)

    @property
    def kinds(self):
        return [event.event_type for event in self.events]


def step_n(sampler, n_steps, sink=None):
    """Step a sampler n_steps times against one sink and return the sink."""
    if sink is None:
        sink = CollectingSink()
    for _ in range(n_steps):
        sampler.step(sink)
    return sink
