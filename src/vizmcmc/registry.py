"""
Algorithm and Distribution Registration System

This module maps lookup keys to constructors for samplers and target
distributions. The Simulation builder (config.py) resolves the 'algorithm'
and 'distribution' config entries through these tables.

Example usage:
    from vizmcmc import create_algorithm, create_distribution

    target = create_distribution('banana', b=2.0)
    sampler = create_algorithm('hmc', distribution=target, seed=0, epsilon=0.05)

    register_distribution('my_target', MyTarget)

Keys are case-insensitive; AlgorithmType members are accepted for algorithms.
"""

from typing import Callable, Dict, List

from .distributions import (
    AckleyDistribution,
    BananaDistribution,
    BimodalDistribution,
    DonutDistribution,
    MultimodalDistribution,
    QuarticGaussian,
    RastriginDistribution,
    RosenbrockDistribution,
    SquiggleDistribution,
    StandardGaussian,
)
from .samplers import (
    GibbsSampler,
    HMCSampler,
    MALASampler,
    NUTSSampler,
    RandomWalkSampler,
)
from .settings import AlgorithmType

ALGORITHM_FACTORIES: Dict[str, Callable] = {
    AlgorithmType.RWMH.key: RandomWalkSampler,
    AlgorithmType.HMC.key: HMCSampler,
    AlgorithmType.NUTS.key: NUTSSampler,
    AlgorithmType.MALA.key: MALASampler,
    AlgorithmType.GIBBS.key: GibbsSampler,
}

DISTRIBUTION_FACTORIES: Dict[str, Callable] = {
    'standard_gaussian': StandardGaussian,
    'quartic_gaussian': QuarticGaussian,
    'bimodal': BimodalDistribution,
    'multimodal': MultimodalDistribution,
    'banana': BananaDistribution,
    'donut': DonutDistribution,
    'squiggle': SquiggleDistribution,
    'rosenbrock': RosenbrockDistribution,
    'rastrigin': RastriginDistribution,
    'ackley': AckleyDistribution,
}


def _normalize(key) -> str:
    if isinstance(key, AlgorithmType):
        return key.key
    return str(key).lower()


# ---------------------------------------------------------------------
# Algorithms
# ---------------------------------------------------------------------

def register_algorithm(key, factory: Callable) -> None:
    """
    Register a sampler constructor.

    Args:
        key: Unique lookup key (e.g., 'slice')
        factory: Callable (distribution=None, seed=None) -> Sampler

    Raises:
        ValueError: If the key is already registered
    """
    key = _normalize(key)
    if key in ALGORITHM_FACTORIES:
        raise ValueError(f"Algorithm '{key}' is already registered")
    ALGORITHM_FACTORIES[key] = factory


def unregister_algorithm(key) -> None:
    """Remove a registered algorithm. Primarily for testing."""
    ALGORITHM_FACTORIES.pop(_normalize(key), None)


def create_algorithm(key, distribution=None, seed=None, **params):
    """
    Build a sampler by key.

    Args:
        key: Algorithm key ('rwmh', 'hmc', 'nuts', 'mala', 'gibbs') or AlgorithmType
        distribution: Optional target to bind
        seed: PRNG seed (None draws one from the clock)
        **params: Parameter overrides, validated by set_params

    Raises:
        KeyError: If the key is not registered
        ValueError: If a parameter override is invalid
    """
    name = _normalize(key)
    if name not in ALGORITHM_FACTORIES:
        available = list_algorithms()
        raise KeyError(f"Unknown algorithm '{key}'. Available: {available}")
    sampler = ALGORITHM_FACTORIES[name](distribution=distribution, seed=seed)
    if params:
        sampler.set_params(**params)
    return sampler


def list_algorithms() -> List[str]:
    return list(ALGORITHM_FACTORIES.keys())


# ---------------------------------------------------------------------
# Distributions
# ---------------------------------------------------------------------

def register_distribution(key, factory: Callable) -> None:
    """
    Register a target distribution constructor.

    Raises:
        ValueError: If the key is already registered
    """
    key = _normalize(key)
    if key in DISTRIBUTION_FACTORIES:
        raise ValueError(f"Distribution '{key}' is already registered")
    DISTRIBUTION_FACTORIES[key] = factory


def unregister_distribution(key) -> None:
    """Remove a registered distribution. Primarily for testing."""
    DISTRIBUTION_FACTORIES.pop(_normalize(key), None)


def create_distribution(key, **params):
    """
    Build a target distribution by key, passing shape parameters through.

    Raises:
        KeyError: If the key is not registered
    """
    name = _normalize(key)
    if name not in DISTRIBUTION_FACTORIES:
        available = list_distributions()
        raise KeyError(f"Unknown distribution '{key}'. Available: {available}")
    return DISTRIBUTION_FACTORIES[name](**params)


def list_distributions() -> List[str]:
    return list(DISTRIBUTION_FACTORIES.keys())
