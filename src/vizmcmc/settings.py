"""
Sampler settings configuration.

This module defines the algorithm keys and the canonical parameters of each
sampler, with their defaults and allowed ranges.

Parameters live as plain attributes on each Sampler instance. Sampler.init()
copies the defaults below onto the instance, and set_params() validates
overrides against PARAMETER_SPECS before assigning them. A sampler reads its
parameters once at the start of step(), so a change made between steps
applies to the next step and never to one in flight.

To add a new parameter:
1. Add a ParamSpec to the algorithm's entry in PARAMETER_SPECS
2. Read it in the sampler's step(): self.<name>
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Optional


class AlgorithmType(IntEnum):
    """
    Enumeration of available sampling algorithms.
    """
    RWMH = 0    # Random-walk Metropolis-Hastings
    HMC = 1     # Hamiltonian Monte Carlo (fixed leapfrog count)
    NUTS = 2    # No-U-Turn Sampler
    MALA = 3    # Metropolis-adjusted Langevin
    GIBBS = 4   # Coordinate-wise gridded Gibbs

    def __str__(self):
        return self.name

    @property
    def key(self) -> str:
        """Lowercase lookup key, e.g. 'rwmh'."""
        return self.name.lower()

    @classmethod
    def from_key(cls, key) -> 'AlgorithmType':
        """
        Resolve 'rwmh' / 'RWMH' / AlgorithmType.RWMH / 0 to an AlgorithmType.

        Raises:
            KeyError: If the key names no algorithm
        """
        if isinstance(key, cls):
            return key
        if isinstance(key, int):
            try:
                return cls(key)
            except ValueError:
                pass
        elif isinstance(key, str) and key.upper() in cls.__members__:
            return cls[key.upper()]
        available = [a.key for a in cls]
        raise KeyError(f"Unknown algorithm '{key}'. Available: {available}")


@dataclass(frozen=True)
class ParamSpec:
    """
    Definition of one sampler parameter.

    Fields:
        default: Value restored by Sampler.init()
        minimum: Lower bound
        exclusive_min: If True the bound itself is invalid (value > minimum)
        integer: Value must be a whole number
        maximum: Optional upper bound (inclusive)
    """
    default: float
    minimum: float = 0.0
    exclusive_min: bool = True
    integer: bool = False
    maximum: Optional[float] = None


PARAMETER_SPECS: Dict[AlgorithmType, Dict[str, ParamSpec]] = {
    AlgorithmType.RWMH: {
        'sigma': ParamSpec(default=0.5),                 # Proposal std per coordinate
    },
    AlgorithmType.HMC: {
        'epsilon': ParamSpec(default=0.1),               # Leapfrog step size
        'n_leapfrog': ParamSpec(default=20, minimum=1,   # Leapfrog steps per proposal (L)
                                exclusive_min=False, integer=True),
    },
    AlgorithmType.NUTS: {
        'epsilon': ParamSpec(default=0.1),               # Leapfrog step size
        'max_tree_depth': ParamSpec(default=10, minimum=1,  # Tree size <= 2^depth
                                    exclusive_min=False, integer=True),
        'delta_max': ParamSpec(default=1000.0),          # Energy divergence threshold
    },
    AlgorithmType.MALA: {
        'epsilon': ParamSpec(default=0.3),               # Proposal variance; drift uses ε/2
    },
    AlgorithmType.GIBBS: {
        'grid_resolution': ParamSpec(default=200, minimum=2,  # Bins per conditional
                                     exclusive_min=False, integer=True),
    },
}


def parameter_defaults(algorithm) -> Dict[str, float]:
    """Default parameter values for an algorithm key."""
    algorithm = AlgorithmType.from_key(algorithm)
    return {name: spec.default for name, spec in PARAMETER_SPECS[algorithm].items()}
