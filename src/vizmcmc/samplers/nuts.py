"""
No-U-Turn Sampler (Hoffman & Gelman 2014, slice-sampling version)

HMC without a fixed trajectory length. The trajectory is grown by repeated
doubling, in a randomly chosen time direction each time, until either end
starts to turn back on the other (a U-turn) or max_tree_depth is reached.

Slice variable:
    u ~ Uniform(0, exp(-H0)), held in log space as
        log_u = -H0 + ln U
    so it cannot underflow. A leaf (q', p') is a valid sample iff
        log_u <= -H(q', p')

Leaf stopping:
    A leaf whose energy error reaches delta_max, or whose energy is NaN, stops
    the tree and is counted as divergent.

U-turn criterion (continue while True):
    (q+ - q-) . p- >= 0  and  (q+ - q-) . p+ >= 0

Tree doubling:
    The second half's candidate replaces the first's with probability
    n2 / (n1 + n2). In the outer loop a new subtree's candidate replaces the
    running sample with probability n_new / (n_old + n_new).

Events per step: PROPOSAL (q0 -> q), then ACCEPT when q moved, REJECT
otherwise. No TRAJECTORY event is emitted.

Parameters:
    epsilon        - leapfrog step size (default 0.1)
    max_tree_depth - at most 2^depth leapfrog steps per transition (default 10)
    delta_max      - divergence threshold on the energy error (default 1000)
"""

import logging
import math
from functools import partial
from typing import NamedTuple

import jax
import jax.numpy as jnp

from ..events import ProposalEvent
from ..settings import AlgorithmType
from ..types import Point
from .base import Sampler
from .integrator import hamiltonian, leapfrog_step

logger = logging.getLogger('vizmcmc')


class TreeState(NamedTuple):
    """
    Result of build_tree.

    Fields:
        q_minus, p_minus: Backward-most boundary state
        q_plus, p_plus:   Forward-most boundary state
        q_candidate:      Sample chosen uniformly among valid leaves
        n_valid:          Number of leaves inside the slice
        keep_going:       False once a U-turn or divergence was seen
        alpha_sum:        Sum of min(1, exp(H0 - H')) over leaves
        n_alpha:          Number of leaves (leapfrog steps)
        divergent:        Any leaf exceeded delta_max or went non-finite
    """
    q_minus: jnp.ndarray
    p_minus: jnp.ndarray
    q_plus: jnp.ndarray
    p_plus: jnp.ndarray
    q_candidate: jnp.ndarray
    n_valid: int
    keep_going: bool
    alpha_sum: float
    n_alpha: int
    divergent: bool


@partial(jax.jit, static_argnames=['log_prob_fn', 'grad_fn'])
def _leaf(q, p, step_size, log_prob_fn, grad_fn):
    """One leapfrog step and the energy of the state it lands on."""
    q_new, p_new = leapfrog_step(q, p, grad_fn, step_size)
    return q_new, p_new, hamiltonian(q_new, p_new, log_prob_fn)


def check_no_u_turn(q_minus, q_plus, p_minus, p_plus) -> bool:
    """True while neither end of the trajectory has turned back on the other."""
    dq = jnp.asarray(q_plus, dtype=float) - jnp.asarray(q_minus, dtype=float)
    forward_minus = float(jnp.dot(dq, jnp.asarray(p_minus, dtype=float)))
    forward_plus = float(jnp.dot(dq, jnp.asarray(p_plus, dtype=float)))
    return forward_minus >= 0 and forward_plus >= 0


class NUTSSampler(Sampler):
    algorithm = AlgorithmType.NUTS
    name = 'No-U-Turn Sampler'
    description = 'HMC with trajectories doubled until they make a U-turn'

    def reset(self, start=None) -> None:
        super().reset(start)
        self.last_tree_depth = 0
        self.last_n_leapfrog = 0
        self.last_accept_stat = 0.0
        self.last_divergent = False

    def step(self, sink) -> None:
        distribution = self._require_distribution()
        epsilon = float(self.epsilon)
        max_tree_depth = int(self.max_tree_depth)
        delta_max = float(self.delta_max)
        current = self.current

        q0 = current.to_array()
        p0 = self._standard_normal(self._next_key())
        h0 = float(hamiltonian(q0, p0, distribution.log_prob))
        log_u = -h0 + self._log_uniform(self._next_key())

        q_minus, p_minus = q0, p0
        q_plus, p_plus = q0, p0
        q = q0
        n = 1
        keep_going = True
        depth = 0
        alpha_sum = 0.0
        n_alpha = 0
        divergent = False

        while keep_going and depth < max_tree_depth:
            direction = 1 if self._uniform(self._next_key()) < 0.5 else -1
            if direction == -1:
                tree = self.build_tree(q_minus, p_minus, log_u, direction, depth,
                                       epsilon, h0, delta_max)
                q_minus, p_minus = tree.q_minus, tree.p_minus
            else:
                tree = self.build_tree(q_plus, p_plus, log_u, direction, depth,
                                       epsilon, h0, delta_max)
                q_plus, p_plus = tree.q_plus, tree.p_plus

            if tree.keep_going and tree.n_valid > 0:
                if self._uniform(self._next_key()) < tree.n_valid / (n + tree.n_valid):
                    q = tree.q_candidate
            n += tree.n_valid
            alpha_sum += tree.alpha_sum
            n_alpha += tree.n_alpha
            divergent = divergent or tree.divergent
            keep_going = tree.keep_going and check_no_u_turn(q_minus, q_plus, p_minus, p_plus)
            depth += 1

        self.last_tree_depth = depth
        self.last_n_leapfrog = n_alpha
        self.last_accept_stat = alpha_sum / n_alpha if n_alpha > 0 else 0.0
        self.last_divergent = divergent
        if divergent:
            logger.debug(f"NUTS: divergent transition at {current}")

        proposal = Point.from_array(q)
        sink.push(ProposalEvent(from_point=current, to_point=proposal))
        self._accept_or_reject(proposal != current, current, proposal, sink)

    def build_tree(self, q, p, log_u, direction, depth, epsilon, h0, delta_max) -> TreeState:
        """
        Build a balanced subtree of 2^depth leapfrog steps from (q, p).

        Args:
            q, p: Boundary state to extend from
            log_u: Log slice variable
            direction: +1 (forward in time) or -1 (backward)
            depth: Subtree height
            epsilon: Leapfrog step size
            h0: Energy at the start of the transition
            delta_max: Divergence threshold

        Returns:
            TreeState for the new subtree
        """
        if depth == 0:
            distribution = self.distribution
            q1, p1, h1 = _leaf(q, p, direction * epsilon, distribution.log_prob,
                               distribution.grad_log_prob)
            h1 = float(h1)
            n_valid = 1 if log_u <= -h1 else 0
            # NaN energies compare False on both tests
            keep_going = (h1 - h0) < delta_max
            alpha = math.exp(min(0.0, h0 - h1)) if math.isfinite(h1) else 0.0
            return TreeState(q1, p1, q1, p1, q1, n_valid, keep_going, alpha, 1,
                             not keep_going)

        first = self.build_tree(q, p, log_u, direction, depth - 1, epsilon, h0, delta_max)
        if not first.keep_going:
            return first

        if direction == -1:
            second = self.build_tree(first.q_minus, first.p_minus, log_u, direction,
                                     depth - 1, epsilon, h0, delta_max)
            q_minus, p_minus = second.q_minus, second.p_minus
            q_plus, p_plus = first.q_plus, first.p_plus
        else:
            second = self.build_tree(first.q_plus, first.p_plus, log_u, direction,
                                     depth - 1, epsilon, h0, delta_max)
            q_minus, p_minus = first.q_minus, first.p_minus
            q_plus, p_plus = second.q_plus, second.p_plus

        n_valid = first.n_valid + second.n_valid
        q_candidate = first.q_candidate
        if n_valid > 0 and self._uniform(self._next_key()) < second.n_valid / n_valid:
            q_candidate = second.q_candidate

        keep_going = second.keep_going and check_no_u_turn(q_minus, q_plus, p_minus, p_plus)
        return TreeState(
            q_minus=q_minus, p_minus=p_minus,
            q_plus=q_plus, p_plus=p_plus,
            q_candidate=q_candidate,
            n_valid=n_valid,
            keep_going=keep_going,
            alpha_sum=first.alpha_sum + second.alpha_sum,
            n_alpha=first.n_alpha + second.n_alpha,
            divergent=first.divergent or second.divergent,
        )
