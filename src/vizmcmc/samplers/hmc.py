"""
Hamiltonian Monte Carlo

Each step draws a fresh momentum p ~ N(0, I), integrates Hamiltonian dynamics
for n_leapfrog leapfrog steps of size epsilon, negates the final momentum (so
the proposal is its own reverse), and applies a Metropolis test on the energy:

    accept iff ln U < H(q0, p0) - H(q_L, -p_L)

A trajectory that blows up (non-finite energy) is always rejected.

Events per step: TRAJECTORY (all L+1 positions and -p_L), PROPOSAL, then
ACCEPT or REJECT.

Parameters:
    epsilon    - leapfrog step size (default 0.1)
    n_leapfrog - leapfrog steps per proposal (default 20)
"""

import math

from ..events import ProposalEvent, TrajectoryEvent
from ..settings import AlgorithmType
from ..types import Point
from .base import Sampler
from .integrator import hamiltonian, leapfrog_integrate


class HMCSampler(Sampler):
    algorithm = AlgorithmType.HMC
    name = 'Hamiltonian Monte Carlo'
    description = 'Leapfrog trajectories driven by the log-density gradient'

    def step(self, sink) -> None:
        distribution = self._require_distribution()
        epsilon = float(self.epsilon)
        n_leapfrog = int(self.n_leapfrog)
        current = self.current
        momentum_key, accept_key = self._split(2)

        q0 = current.to_array()
        p0 = self._standard_normal(momentum_key)
        h0 = float(hamiltonian(q0, p0, distribution.log_prob))

        q, p, path = leapfrog_integrate(q0, p0, distribution.grad_log_prob, epsilon, n_leapfrog)
        p = -p
        h_new = float(hamiltonian(q, p, distribution.log_prob))

        proposal = Point.from_array(q)
        sink.push(TrajectoryEvent(path=tuple(path), momentum=Point.from_array(p)))
        sink.push(ProposalEvent(from_point=current, to_point=proposal))

        accepted = (
            math.isfinite(h_new)
            and self._log_uniform(accept_key) < h0 - h_new
        )
        self._accept_or_reject(accepted, current, proposal, sink)
