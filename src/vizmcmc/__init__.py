"""
vizmcmc - Step-by-step 2-D MCMC Sampling for Visualization

Public API:
    Simulation:
        Simulation - Driver binding a sampler and a distribution; step/run/play
        configure_simulation - Build a Simulation from a config dict
        clean_config - Fill config defaults

    Samplers:
        Sampler - Abstract base (set_distribution, init, reset, step, get_chain)
        RandomWalkSampler, HMCSampler, NUTSSampler, MALASampler, GibbsSampler
        AlgorithmType - Enum of algorithm keys (RWMH, HMC, NUTS, MALA, GIBBS)
        PARAMETER_SPECS - Per-algorithm parameter defaults and ranges

    Distributions:
        Distribution - Abstract base (density, log_density, gradient, marginals)
        StandardGaussian, QuarticGaussian, BimodalDistribution,
        MultimodalDistribution, BananaDistribution, DonutDistribution,
        SquiggleDistribution, RosenbrockDistribution, RastriginDistribution,
        AckleyDistribution

    Registry:
        create_algorithm / list_algorithms / register_algorithm
        create_distribution / list_distributions / register_distribution

    Events:
        EventSink - Event queue and reducer; snapshot() for consumers
        EventType and the event records (ProposalEvent, AcceptEvent, ...)

    Diagnostics:
        diagnose_chain - Check a chain for non-finite values and stuck sampling
        print_diagnostics - Log the result through the 'vizmcmc' logger

Example:
    from vizmcmc import configure_simulation

    sim = configure_simulation({'algorithm': 'mala', 'distribution': 'banana', 'rng_seed': 0})
    sim.run(200)
    print(sim.acceptance_rate, sim.sink.snapshot().current_position)
"""
# CRITICAL: Import jax_config FIRST to set environment variables before JAX loads
from . import jax_config  # noqa: F401

from .types import Point, Bounds, ORIGIN
from .settings import AlgorithmType, ParamSpec, PARAMETER_SPECS, parameter_defaults
from .events import (
    EventType,
    ProposalEvent,
    AcceptEvent,
    RejectEvent,
    TrajectoryEvent,
    GradientEvent,
    LangevinEvent,
)
from .event_sink import EventSink, SinkSnapshot
from .distributions import (
    Distribution,
    StandardGaussian,
    QuarticGaussian,
    BimodalDistribution,
    MultimodalDistribution,
    BananaDistribution,
    DonutDistribution,
    SquiggleDistribution,
    RosenbrockDistribution,
    RastriginDistribution,
    AckleyDistribution,
)
from .samplers import (
    Sampler,
    RandomWalkSampler,
    HMCSampler,
    NUTSSampler,
    MALASampler,
    GibbsSampler,
)
from .registry import (
    create_algorithm,
    list_algorithms,
    register_algorithm,
    create_distribution,
    list_distributions,
    register_distribution,
)
from .simulation import Simulation
from .config import clean_config, configure_simulation
from .error_handling import diagnose_chain, print_diagnostics

__version__ = "0.1.0"

__all__ = [
    # Core types
    'Point',
    'Bounds',
    'ORIGIN',
    # Settings
    'AlgorithmType',
    'ParamSpec',
    'PARAMETER_SPECS',
    'parameter_defaults',
    # Events
    'EventType',
    'ProposalEvent',
    'AcceptEvent',
    'RejectEvent',
    'TrajectoryEvent',
    'GradientEvent',
    'LangevinEvent',
    'EventSink',
    'SinkSnapshot',
    # Distributions
    'Distribution',
    'StandardGaussian',
    'QuarticGaussian',
    'BimodalDistribution',
    'MultimodalDistribution',
    'BananaDistribution',
    'DonutDistribution',
    'SquiggleDistribution',
    'RosenbrockDistribution',
    'RastriginDistribution',
    'AckleyDistribution',
    # Samplers
    'Sampler',
    'RandomWalkSampler',
    'HMCSampler',
    'NUTSSampler',
    'MALASampler',
    'GibbsSampler',
    # Registry
    'create_algorithm',
    'list_algorithms',
    'register_algorithm',
    'create_distribution',
    'list_distributions',
    'register_distribution',
    # Simulation
    'Simulation',
    'clean_config',
    'configure_simulation',
    # Diagnostics
    'diagnose_chain',
    'print_diagnostics',
]
