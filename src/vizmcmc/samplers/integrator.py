"""
Leapfrog Integrator for Hamiltonian Dynamics

Unit mass matrix, potential U(q) = -log p(q):

    H(q, p) = U(q) + |p|^2 / 2

One leapfrog step of size ε (momentum first):

    p_half = p + (ε/2) ∇log p(q)
    q'     = q + ε p_half
    p'     = p_half + (ε/2) ∇log p(q')

The step is symplectic and time-reversible: integrating L steps, negating p,
and integrating L more steps returns the start up to rounding.

`grad_fn` and `log_prob_fn` are passed as static arguments, so each
distribution instance (its bound methods) gets its own compiled kernel.
"""

from functools import partial
from typing import List, Tuple

import jax
import jax.numpy as jnp

from ..types import Point


@jax.jit
def kinetic_energy(p):
    """K(p) = |p|^2 / 2 for unit mass."""
    return 0.5 * jnp.dot(p, p)


@partial(jax.jit, static_argnames=['log_prob_fn'])
def hamiltonian(q, p, log_prob_fn):
    """Total energy H(q, p) = -log p(q) + K(p)."""
    return -log_prob_fn(q) + kinetic_energy(p)


@partial(jax.jit, static_argnames=['grad_fn'])
def leapfrog_step(q, p, grad_fn, step_size):
    """
    One leapfrog step. A negative step_size integrates backward in time.

    Args:
        q: Position, shape (2,)
        p: Momentum, shape (2,)
        grad_fn: Gradient of log density, q -> (2,)
        step_size: ε (signed)

    Returns:
        (q_new, p_new)
    """
    p_half = p + 0.5 * step_size * grad_fn(q)
    q_new = q + step_size * p_half
    p_new = p_half + 0.5 * step_size * grad_fn(q_new)
    return q_new, p_new


def leapfrog_integrate(q, p, grad_fn, step_size, n_steps: int) -> Tuple[jnp.ndarray, jnp.ndarray, List[Point]]:
    """
    Run n_steps leapfrog steps, recording every position visited.

    Returns:
        q_final: Position after n_steps
        p_final: Momentum after n_steps (not negated)
        path: n_steps + 1 Points, start included
    """
    path = [Point.from_array(q)]
    for _ in range(n_steps):
        q, p = leapfrog_step(q, p, grad_fn, step_size)
        path.append(Point.from_array(q))
    return q, p, path
