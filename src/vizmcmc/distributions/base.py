"""
Target Distribution Base Class

Every sampler consumes a target through this interface only. A new target
plugs into every sampler unmodified by subclassing Distribution and
implementing density_fn (and, optionally, an analytic gradient_fn).

Density:
    density_fn(x, y) -> unnormalized density >= 0. Must be written with
    jax.numpy operations that act elementwise, so the same function serves
    scalar evaluation, Gibbs/marginal grids (arrays of x and y), jax.jit
    and jax.grad.

Log density:
    log p(q) = ln(density(q) + LOG_EPS)
    LOG_EPS keeps exact zeros at a large-but-finite negative value instead
    of -inf, so energy differences stay well defined.

Gradient of log density:
    Default: centered finite difference with step FD_STEP,
        d/dx log p ~ (log p(x+h, y) - log p(x-h, y)) / 2h
    Subclasses with a closed form set has_analytic_gradient = True and
    implement gradient_fn(x, y) -> (gx, gy). The two agree to O(h^2).

Marginals:
    marginal_x(x) = sum_i density(x, y_i) * dy over MARGINAL_STEPS midpoints
    of [y_min, y_max] (and symmetrically for marginal_y). Unnormalized, but
    comparable across calls on the same instance.

Density parameters (means, widths, scales) are baked into the jitted
functions at construction; build a new instance to change them.
"""

from abc import ABC, abstractmethod

import jax
import jax.numpy as jnp

from ..types import Bounds, Point


# Added inside the log so that zero density maps to ~ -690.8, not -inf
LOG_EPS = 1e-300

# Finite-difference step for the default gradient
FD_STEP = 1e-3

# Quadrature steps for marginal integration
MARGINAL_STEPS = 100


class Distribution(ABC):
    """
    Abstract 2-D target distribution.

    Subclasses must define `name`, `bounds` and `density_fn`.
    """
    name = 'Distribution'
    bounds = Bounds(-4.0, 4.0, -4.0, 4.0)
    has_analytic_gradient = False

    def __init__(self):
        self._density_jit = jax.jit(self.density_fn)
        self._log_prob_jit = jax.jit(self.log_prob)
        self._grad_jit = jax.jit(self.grad_log_prob)
        self._fd_grad_jit = jax.jit(self.finite_difference_grad)
        self._autodiff_grad_jit = jax.jit(jax.grad(self.log_prob))

    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r}, bounds={self.bounds})"

    # ------------------------------------------------------------------
    # Functions of (x, y) - implemented by subclasses
    # ------------------------------------------------------------------

    @abstractmethod
    def density_fn(self, x, y):
        """Unnormalized density, elementwise over x and y."""

    def gradient_fn(self, x, y):
        """Analytic gradient of log density as (gx, gy)."""
        raise NotImplementedError(
            f"{type(self).__name__} has no analytic gradient"
        )

    # ------------------------------------------------------------------
    # Array-level API (pure JAX, traceable)
    # ------------------------------------------------------------------

    def log_prob(self, q):
        """Log density of a length-2 array."""
        return jnp.log(self.density_fn(q[0], q[1]) + LOG_EPS)

    def grad_log_prob(self, q):
        """Gradient of log density of a length-2 array."""
        if self.has_analytic_gradient:
            gx, gy = self.gradient_fn(q[0], q[1])
            return jnp.stack([jnp.asarray(gx, dtype=q.dtype), jnp.asarray(gy, dtype=q.dtype)])
        return self.finite_difference_grad(q)

    def finite_difference_grad(self, q, h=FD_STEP):
        """Centered finite-difference gradient of log density."""
        ex = jnp.array([h, 0.0], dtype=q.dtype)
        ey = jnp.array([0.0, h], dtype=q.dtype)
        gx = (self.log_prob(q + ex) - self.log_prob(q - ex)) / (2 * h)
        gy = (self.log_prob(q + ey) - self.log_prob(q - ey)) / (2 * h)
        return jnp.stack([gx, gy])

    def density_grid(self, xs, ys):
        """Density evaluated elementwise on broadcast arrays xs, ys."""
        xs, ys = jnp.broadcast_arrays(jnp.asarray(xs, dtype=float), jnp.asarray(ys, dtype=float))
        return self._density_jit(xs, ys)

    # ------------------------------------------------------------------
    # Point-level API
    # ------------------------------------------------------------------

    def density(self, point) -> float:
        x, y = point
        return float(self._density_jit(float(x), float(y)))

    def log_density(self, point) -> float:
        return float(self._log_prob_jit(_as_array(point)))

    def gradient(self, point) -> Point:
        """Gradient of log density (analytic when available)."""
        return Point.from_array(self._grad_jit(_as_array(point)))

    def finite_difference_gradient(self, point, h: float = FD_STEP) -> Point:
        return Point.from_array(self._fd_grad_jit(_as_array(point), h))

    def autodiff_gradient(self, point) -> Point:
        """jax.grad of the log density; reference for analytic forms."""
        return Point.from_array(self._autodiff_grad_jit(_as_array(point)))

    def marginal_x(self, x: float, n_steps: int = MARGINAL_STEPS) -> float:
        """Density integrated over y across the bound, at fixed x."""
        ys, dy = _midpoints(self.bounds.y_min, self.bounds.y_max, n_steps)
        return float(jnp.sum(self.density_grid(x, ys)) * dy)

    def marginal_y(self, y: float, n_steps: int = MARGINAL_STEPS) -> float:
        """Density integrated over x across the bound, at fixed y."""
        xs, dx = _midpoints(self.bounds.x_min, self.bounds.x_max, n_steps)
        return float(jnp.sum(self.density_grid(xs, y)) * dx)


def _as_array(point):
    return jnp.asarray(point, dtype=float)


def _midpoints(lo, hi, n):
    """Bin centres and width of n equal bins over [lo, hi]."""
    width = (hi - lo) / n
    return lo + (jnp.arange(n) + 0.5) * width, width
