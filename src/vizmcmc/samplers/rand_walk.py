"""
Random-Walk Metropolis-Hastings

Isotropic Gaussian proposal centred on the current state:

    x' ~ N(x, sigma^2 I)

The proposal is symmetric (q(x'|x) = q(x|x')), so the Hastings correction
vanishes and the test is on the density ratio alone:

    accept iff ln U < log p(x') - log p(x)

Events per step: PROPOSAL (radius = sigma), then ACCEPT or REJECT.

Parameters:
    sigma - proposal standard deviation per coordinate (default 0.5)
"""

from ..events import ProposalEvent
from ..settings import AlgorithmType
from ..types import Point
from .base import Sampler


class RandomWalkSampler(Sampler):
    algorithm = AlgorithmType.RWMH
    name = 'Random Walk Metropolis-Hastings'
    description = 'Gaussian random-walk proposals with a Metropolis accept/reject test'

    def step(self, sink) -> None:
        distribution = self._require_distribution()
        sigma = float(self.sigma)
        current = self.current
        proposal_key, accept_key = self._split(2)

        q_prop = current.to_array() + sigma * self._standard_normal(proposal_key)
        proposal = Point.from_array(q_prop)
        sink.push(ProposalEvent(from_point=current, to_point=proposal, radius=sigma))

        log_alpha = distribution.log_density(proposal) - distribution.log_density(current)
        accepted = self._log_uniform(accept_key) < log_alpha
        self._accept_or_reject(accepted, current, proposal, sink)
