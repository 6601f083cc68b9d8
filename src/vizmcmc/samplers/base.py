"""
Sampler Base Class

Every algorithm shares this interface, so the Simulation driver never needs to
know which one it is stepping:

    set_distribution(d)   - bind the target
    init()                - restore default parameters
    reset(start=None)     - chain <- [start or origin], statistics cleared
    step(sink)            - one unit of work; pushes events onto the sink
    get_chain()           - accepted states so far (read-only copy)
    get_acceptance_rate() - accepts / steps, or None where not meaningful

Randomness:
    Each sampler owns a JAX PRNG key seeded by seed(). Every draw consumes a
    fresh subkey split off the sampler's key, so two samplers built with the
    same seed and stepped the same way produce identical chains and events.
    With no seed, one is taken from the clock and logged so a run can still
    be replayed.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple

import jax.numpy as jnp
import jax.random as random

from ..error_handling import validate_sampler_params
from ..events import AcceptEvent, RejectEvent
from ..settings import AlgorithmType, PARAMETER_SPECS, parameter_defaults
from ..types import ORIGIN, Point

logger = logging.getLogger('vizmcmc')


class Sampler(ABC):
    """
    Abstract MCMC sampler over 2-D points.

    Args:
        distribution: Optional target to bind immediately
        seed: PRNG seed; None draws one from the clock
    """
    algorithm: AlgorithmType
    name = 'Sampler'
    description = ''

    def __init__(self, distribution=None, seed: Optional[int] = None):
        self.distribution = None
        self.chain: List[Point] = []
        self.accept_count = 0
        self.total_steps = 0
        self.seed(seed)
        self.init()
        if distribution is not None:
            self.set_distribution(distribution)
        self.reset()

    def __repr__(self):
        return f"{type(self).__name__}({self.params})"

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def seed(self, seed: Optional[int] = None) -> None:
        """Re-seed this sampler's PRNG key."""
        if seed is None:
            seed = time.time_ns() % (2 ** 31)
            logger.info(f"{self.name}: no rng_seed given, using {seed}")
        self.rng_seed = int(seed)
        self._key = random.PRNGKey(self.rng_seed)

    def set_distribution(self, distribution) -> None:
        self.distribution = distribution

    def init(self) -> None:
        """Restore every parameter to its default."""
        for name, value in parameter_defaults(self.algorithm).items():
            setattr(self, name, value)

    def set_params(self, **params) -> None:
        """
        Validate and assign parameters; they take effect on the next step.

        Raises:
            ValueError: If a name is unknown or a value out of range
        """
        validate_sampler_params(self.algorithm, params)
        for name, value in params.items():
            if PARAMETER_SPECS[self.algorithm][name].integer:
                value = int(value)
            setattr(self, name, value)

    @property
    def params(self) -> Dict[str, float]:
        return {name: getattr(self, name) for name in PARAMETER_SPECS[self.algorithm]}

    # ------------------------------------------------------------------
    # Chain
    # ------------------------------------------------------------------

    def reset(self, start=None) -> None:
        """Replace the chain with [start] (origin by default) and clear statistics."""
        if start is None:
            start = ORIGIN
        else:
            x, y = start
            start = Point(float(x), float(y))
        self.chain = [start]
        self.accept_count = 0
        self.total_steps = 0

    @property
    def current(self) -> Point:
        return self.chain[-1]

    def get_chain(self) -> Tuple[Point, ...]:
        return tuple(self.chain)

    def get_acceptance_rate(self) -> Optional[float]:
        if self.total_steps == 0:
            return 0.0
        return self.accept_count / self.total_steps

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------

    @abstractmethod
    def step(self, sink) -> None:
        """Advance the chain by one state, pushing events onto `sink`."""

    def _require_distribution(self):
        if self.distribution is None:
            raise RuntimeError(f"{self.name}: no distribution set; call set_distribution() first")
        return self.distribution

    def _accept_or_reject(self, accepted: bool, current: Point, proposal: Point, sink) -> None:
        """
        Shared Metropolis bookkeeping: the chain grows by one entry either way.
        """
        if accepted:
            self.chain.append(proposal)
            self.accept_count += 1
            sink.push(AcceptEvent(position=proposal))
        else:
            self.chain.append(current)
            sink.push(RejectEvent(position=proposal))
        self.total_steps += 1

    # ------------------------------------------------------------------
    # Randomness
    # ------------------------------------------------------------------

    def _split(self, num: int):
        """Split off `num` fresh subkeys, advancing the sampler key."""
        keys = random.split(self._key, num + 1)
        self._key = keys[0]
        return keys[1:]

    def _next_key(self):
        self._key, subkey = random.split(self._key)
        return subkey

    @staticmethod
    def _standard_normal(key) -> jnp.ndarray:
        return random.normal(key, shape=(2,), dtype=float)

    @staticmethod
    def _uniform(key) -> float:
        return float(random.uniform(key, dtype=float))

    @staticmethod
    def _log_uniform(key) -> float:
        """ln U, U ~ Uniform[0, 1); -inf when U == 0."""
        return float(jnp.log(random.uniform(key, dtype=float)))
