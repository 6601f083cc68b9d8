"""
MALA (Metropolis-Adjusted Langevin Algorithm)

Langevin proposal: drift half a step up the log-density gradient, then add
Gaussian noise of variance epsilon:

    mu(q) = q + (epsilon/2) ∇log p(q)
    q'    ~ N(mu(q), epsilon I)

The proposal is not symmetric, so the acceptance test carries the Hastings
correction:

    log alpha = log p(q') - log p(q) + log Q(q | q') - log Q(q' | q)
    log Q(to | from) = -|to - mu(from)|^2 / (2 epsilon)

Swapping q and q' negates log alpha exactly. A proposal with non-finite log
density is always rejected.

Events per step: LANGEVIN (∇log p(q), mu(q), sqrt(epsilon)), PROPOSAL, then
ACCEPT or REJECT.

Parameters:
    epsilon - proposal variance; the drift uses epsilon/2 (default 0.3)
"""

import math
from functools import partial

import jax
import jax.numpy as jnp

from ..events import LangevinEvent, ProposalEvent
from ..settings import AlgorithmType
from ..types import Point
from .base import Sampler


@partial(jax.jit, static_argnames=['grad_fn'])
def proposal_mean(q, grad_fn, epsilon):
    """Langevin drift target mu(q) = q + (epsilon/2) ∇log p(q)."""
    return q + 0.5 * epsilon * grad_fn(q)


@partial(jax.jit, static_argnames=['grad_fn'])
def log_proposal_density(to, frm, grad_fn, epsilon):
    """Unnormalized log Q(to | frm); the normalizer cancels in the ratio."""
    diff = to - proposal_mean(frm, grad_fn, epsilon)
    return -jnp.dot(diff, diff) / (2.0 * epsilon)


@partial(jax.jit, static_argnames=['log_prob_fn', 'grad_fn'])
def mala_log_ratio(current, proposal, log_prob_fn, grad_fn, epsilon):
    """
    Log Metropolis-Hastings ratio for moving current -> proposal.

    Args:
        current: Current position, shape (2,)
        proposal: Proposed position, shape (2,)
        log_prob_fn: Log density, q -> scalar
        grad_fn: Gradient of log density, q -> (2,)
        epsilon: Proposal variance

    Returns:
        log alpha (scalar)
    """
    log_target = log_prob_fn(proposal) - log_prob_fn(current)
    log_hastings = (log_proposal_density(current, proposal, grad_fn, epsilon)
                    - log_proposal_density(proposal, current, grad_fn, epsilon))
    return log_target + log_hastings


class MALASampler(Sampler):
    algorithm = AlgorithmType.MALA
    name = 'Metropolis-Adjusted Langevin'
    description = 'Gradient-drift proposals with a Hastings-corrected accept/reject test'

    def step(self, sink) -> None:
        distribution = self._require_distribution()
        epsilon = float(self.epsilon)
        current = self.current
        noise_key, accept_key = self._split(2)

        q = current.to_array()
        mean = proposal_mean(q, distribution.grad_log_prob, epsilon)
        noise_radius = math.sqrt(epsilon)
        q_prop = mean + noise_radius * self._standard_normal(noise_key)
        proposal = Point.from_array(q_prop)

        sink.push(LangevinEvent(
            gradient=distribution.gradient(current),
            drift_point=Point.from_array(mean),
            noise_radius=noise_radius,
        ))
        sink.push(ProposalEvent(from_point=current, to_point=proposal))

        log_alpha = float(mala_log_ratio(q, q_prop, distribution.log_prob,
                                         distribution.grad_log_prob, epsilon))
        accepted = (
            math.isfinite(distribution.log_density(proposal))
            and self._log_uniform(accept_key) < log_alpha
        )
        self._accept_or_reject(accepted, current, proposal, sink)
