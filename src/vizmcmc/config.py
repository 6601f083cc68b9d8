"""
Simulation Configuration

A simulation is described by a plain dict; clean_config() fills defaults and
configure_simulation() validates it and builds a ready-to-step Simulation.

Config keys (all lowercase):
    algorithm            - registry key ('rwmh', 'hmc', 'nuts', 'mala', 'gibbs')
    distribution         - registry key ('standard_gaussian', 'banana', ...)
    params               - sampler parameter overrides, e.g. {'sigma': 0.3}
    distribution_params  - constructor arguments for the distribution
    rng_seed             - sampler PRNG seed; None draws one from the clock
    delay                - seconds between steps in Simulation.play()
    max_trail_length     - capacity of the accepted-sample trail
    start_position       - (x, y) chain start; None means the origin

Example:
    sim = configure_simulation({'algorithm': 'nuts', 'distribution': 'donut',
                                'rng_seed': 7, 'params': {'epsilon': 0.05}})
    sim.run(100)
"""

from typing import Any, Dict

from .error_handling import validate_simulation_config
from .registry import create_algorithm, create_distribution
from .simulation import Simulation

import logging
logger = logging.getLogger('vizmcmc')


def clean_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Sets defaults on a simulation config, in place.
    All config keys use lowercase with underscores.
    """
    config.setdefault('algorithm', 'rwmh')
    config.setdefault('distribution', 'standard_gaussian')
    config.setdefault('params', {})
    config.setdefault('distribution_params', {})
    config.setdefault('rng_seed', None)
    config.setdefault('delay', 0.1)
    config.setdefault('max_trail_length', 500)
    config.setdefault('start_position', None)
    return config


def configure_simulation(config: Dict[str, Any]) -> Simulation:
    """
    Build a Simulation from a config dict.

    Args:
        config: Configuration dict (see module docstring); defaults are filled in

    Returns:
        Initialized Simulation with parameters and start position applied

    Raises:
        KeyError: If the algorithm or distribution key is unknown
        ValueError: If any config entry or parameter override is invalid
    """
    config = clean_config(dict(config))
    validate_simulation_config(config)

    distribution = create_distribution(config['distribution'], **config['distribution_params'])
    sampler = create_algorithm(config['algorithm'], seed=config['rng_seed'])

    sim = Simulation(
        sampler=sampler,
        distribution=distribution,
        delay=config['delay'],
        max_trail_length=config['max_trail_length'],
    )
    # initialize() restored defaults, so overrides go on afterwards
    if config['params']:
        sampler.set_params(**config['params'])
    if config['start_position'] is not None:
        sim.set_start_position(config['start_position'])

    logger.info(
        f"Configured {sampler.name} on {distribution.name} "
        f"(seed={sampler.rng_seed}, params={sampler.params})"
    )
    return sim
