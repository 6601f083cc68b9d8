"""
MCMC Samplers

One Sampler subclass per algorithm. AlgorithmType is defined in settings.py.

To add a new sampler:
1. Add enum value to AlgorithmType in settings.py
2. Add its parameters to PARAMETER_SPECS in settings.py
3. Create new file in samplers/ with a Sampler subclass implementing step(sink)
4. Register the class in registry.py (ALGORITHM_FACTORIES)
5. Export from this __init__.py

Every step(sink) appends exactly one point to the chain and pushes its events
onto the sink; Metropolis-style samplers share the accept/reject bookkeeping
in Sampler._accept_or_reject.
"""

from .base import Sampler
from .rand_walk import RandomWalkSampler
from .hmc import HMCSampler
from .nuts import NUTSSampler, check_no_u_turn
from .mala import MALASampler, mala_log_ratio
from .gibbs import GibbsSampler
from .integrator import leapfrog_step, leapfrog_integrate, hamiltonian, kinetic_energy

__all__ = [
    'Sampler',
    'RandomWalkSampler',
    'HMCSampler',
    'NUTSSampler',
    'MALASampler',
    'GibbsSampler',
    'check_no_u_turn',
    'mala_log_ratio',
    'leapfrog_step',
    'leapfrog_integrate',
    'hamiltonian',
    'kinetic_energy',
]
