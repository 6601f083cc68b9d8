"""
Coordinate-wise Gibbs Sampler

One sweep draws each coordinate from its full conditional in turn:

    x' ~ p(x | y)
    y' ~ p(y | x')

Conditionals are sampled by gridded inverse CDF over the distribution bounds:
the density is evaluated at the centres of grid_resolution equal bins, the
cumulative sum is searched for u ~ Uniform(0, total], and the draw is placed
uniformly at random inside the chosen bin. If the conditional has zero or
non-finite total mass, the draw falls back to the midpoint of the range.

Every conditional draw is accepted, so there is no acceptance rate.

Events per sweep: PROPOSAL + ACCEPT for the x update, then PROPOSAL + ACCEPT
for the y update. The chain grows by one point per sweep.

Parameters:
    grid_resolution - bins per conditional (default 200)
"""

from typing import Optional

import jax
import jax.numpy as jnp
import jax.random as random

from ..events import AcceptEvent, ProposalEvent
from ..settings import AlgorithmType
from ..types import Point
from .base import Sampler


@jax.jit
def select_bin(weights, fraction):
    """
    Index of the bin holding cumulative mass fraction * total.

    fraction must lie in (0, 1]. Bins with zero mass are never selected
    while the total is positive.
    """
    cumulative = jnp.cumsum(weights)
    index = jnp.searchsorted(cumulative, fraction * cumulative[-1], side='left')
    return jnp.minimum(index, weights.shape[0] - 1)


@jax.jit
def inverse_cdf_draw(key, weights, lo, hi):
    """
    Draw from the piecewise-constant density given by bin weights on [lo, hi].

    Args:
        key: JAX random key
        weights: Unnormalized non-negative bin masses, shape (n_bins,)
        lo, hi: Range covered by the bins

    Returns:
        Scalar draw; (lo + hi) / 2 when the total mass is zero or non-finite
    """
    n_bins = weights.shape[0]
    width = (hi - lo) / n_bins
    total = jnp.sum(weights)

    u_key, jitter_key = random.split(key)
    # 1 - U lies in (0, 1], so a leading zero-mass bin cannot be hit
    index = select_bin(weights, 1.0 - random.uniform(u_key, dtype=weights.dtype))
    draw = lo + (index + random.uniform(jitter_key, dtype=weights.dtype)) * width

    has_mass = jnp.isfinite(total) & (total > 0)
    return jnp.where(has_mass, draw, 0.5 * (lo + hi))


class GibbsSampler(Sampler):
    algorithm = AlgorithmType.GIBBS
    name = 'Gibbs Sampling'
    description = 'Alternating exact draws from each coordinate conditional'

    def sample_conditional_x(self, y: float, key) -> float:
        """Draw x ~ p(x | y) on the grid."""
        bounds = self.distribution.bounds
        xs = _bin_centres(bounds.x_min, bounds.x_max, int(self.grid_resolution))
        weights = self.distribution.density_grid(xs, y)
        return float(inverse_cdf_draw(key, weights, bounds.x_min, bounds.x_max))

    def sample_conditional_y(self, x: float, key) -> float:
        """Draw y ~ p(y | x) on the grid."""
        bounds = self.distribution.bounds
        ys = _bin_centres(bounds.y_min, bounds.y_max, int(self.grid_resolution))
        weights = self.distribution.density_grid(x, ys)
        return float(inverse_cdf_draw(key, weights, bounds.y_min, bounds.y_max))

    def step(self, sink) -> None:
        self._require_distribution()
        current = self.current
        x_key, y_key = self._split(2)

        x_new = self.sample_conditional_x(current.y, x_key)
        half_step = Point(x_new, current.y)
        sink.push(ProposalEvent(from_point=current, to_point=half_step))
        sink.push(AcceptEvent(position=half_step))

        y_new = self.sample_conditional_y(x_new, y_key)
        full_step = Point(x_new, y_new)
        sink.push(ProposalEvent(from_point=half_step, to_point=full_step))
        sink.push(AcceptEvent(position=full_step))

        self.chain.append(full_step)
        self.accept_count += 1
        self.total_steps += 1

    def get_acceptance_rate(self) -> Optional[float]:
        return None


def _bin_centres(lo, hi, n_bins):
    width = (hi - lo) / n_bins
    return lo + (jnp.arange(n_bins) + 0.5) * width
