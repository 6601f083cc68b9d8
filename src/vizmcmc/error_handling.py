"""
Error Handling and Validation Utilities

This module provides validation functions for sampler parameters and
simulation configuration, and diagnostic checks on a finished chain.

Validation collects every problem before raising, so a caller fixing a
configuration sees all of them at once.
"""

import math
from typing import Any, Dict, Optional, Sequence

import numpy as np

from .settings import AlgorithmType, PARAMETER_SPECS

import logging
logger = logging.getLogger('vizmcmc')


def validate_sampler_params(algorithm, params: Dict[str, Any]) -> None:
    """
    Validates parameter overrides for one algorithm.

    Args:
        algorithm: Algorithm key ('rwmh', AlgorithmType.HMC, ...)
        params: Mapping of parameter name to new value

    Raises:
        KeyError: If the algorithm is unknown
        ValueError: If any name is unknown or any value is out of range
    """
    algorithm = AlgorithmType.from_key(algorithm)
    specs = PARAMETER_SPECS[algorithm]
    errors = []

    for name, value in params.items():
        if name not in specs:
            errors.append(
                f"Unknown parameter '{name}' for {algorithm.name}. Available: {list(specs)}"
            )
            continue
        spec = specs[name]

        if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
            errors.append(f"{name} must be a number, got {type(value).__name__}")
            continue
        if not math.isfinite(value):
            errors.append(f"{name} must be finite, got {value}")
            continue
        if spec.integer and int(value) != value:
            errors.append(f"{name} must be an integer, got {value}")
        if spec.exclusive_min and value <= spec.minimum:
            errors.append(f"{name} must be > {spec.minimum}, got {value}")
        elif not spec.exclusive_min and value < spec.minimum:
            errors.append(f"{name} must be >= {spec.minimum}, got {value}")
        if spec.maximum is not None and value > spec.maximum:
            errors.append(f"{name} must be <= {spec.maximum}, got {value}")

    if errors:
        raise ValueError(f"Invalid {algorithm.name} parameters:\n  " + "\n  ".join(errors))


def validate_simulation_config(config: Dict[str, Any]) -> None:
    """
    Validates that a simulation configuration is sensible.

    Args:
        config: Configuration dictionary (after clean_config)

    Raises:
        ValueError: If configuration is invalid
    """
    errors = []

    required_keys = ['algorithm', 'distribution']
    for key in required_keys:
        if key not in config:
            errors.append(f"Missing required config key: '{key}'")

    if 'delay' in config:
        delay = config['delay']
        if isinstance(delay, bool) or not isinstance(delay, (int, float, np.integer, np.floating)):
            errors.append(f"delay must be a number, got {delay!r}")
        elif not delay >= 0:
            errors.append(f"delay must be >= 0, got {delay}")

    if 'max_trail_length' in config:
        length = config['max_trail_length']
        if isinstance(length, bool) or not isinstance(length, (int, np.integer)):
            errors.append(f"max_trail_length must be an integer, got {length!r}")
        elif length < 1:
            errors.append(f"max_trail_length must be >= 1, got {length}")

    seed = config.get('rng_seed')
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, (int, np.integer))):
        errors.append(f"rng_seed must be an integer or None, got {seed!r}")

    start = config.get('start_position')
    if start is not None:
        try:
            x, y = start
            if not (math.isfinite(float(x)) and math.isfinite(float(y))):
                errors.append(f"start_position must be finite, got {start!r}")
        except (TypeError, ValueError):
            errors.append(f"start_position must be an (x, y) pair, got {start!r}")

    if errors:
        raise ValueError("Invalid simulation configuration:\n  " + "\n  ".join(errors))


def diagnose_chain(chain: Sequence, acceptance_rate: Optional[float] = None,
                   diagnostics: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Analyzes a chain to identify common sampler problems.

    Args:
        chain: Sequence of (x, y) points
        acceptance_rate: Sampler acceptance rate, or None if not applicable
        diagnostics: Existing diagnostics dict to extend

    Returns:
        diagnostics: Dictionary with issues, warnings, and info
    """
    diagnostics = (diagnostics or {}) | {
        'issues': [],
        'warnings': [],
        'info': []
    }

    history = np.asarray(chain, dtype=float).reshape(-1, 2)
    n_steps = history.shape[0] - 1

    if not np.all(np.isfinite(history)):
        diagnostics['issues'].append(
            "Chain contains NaN or Inf values - sampler became unstable"
        )

    if n_steps > 1 and np.all(np.var(history, axis=0) < 1e-20):
        diagnostics['warnings'].append(
            f"Chain never moved in {n_steps} steps - step size may be far too large"
        )

    if acceptance_rate is not None and n_steps >= 100:
        if acceptance_rate < 0.05:
            diagnostics['warnings'].append(
                f"Acceptance rate {acceptance_rate:.1%} is very low - consider a smaller step size"
            )
        elif acceptance_rate > 0.99:
            diagnostics['warnings'].append(
                f"Acceptance rate {acceptance_rate:.1%} is very high - consider a larger step size"
            )

    diagnostics['info'].append(f"Chain length: {history.shape[0]}")
    if acceptance_rate is not None:
        diagnostics['info'].append(f"Acceptance rate: {acceptance_rate:.1%}")

    return diagnostics


def print_diagnostics(diagnostics: Dict[str, Any]) -> None:
    """Pretty-print diagnostics from diagnose_chain."""
    if diagnostics['issues']:
        logger.error("\n[ERROR] ISSUES:")
        for issue in diagnostics['issues']:
            logger.error(f"  - {issue}")

    if diagnostics['warnings']:
        logger.warning("\n[WARN] WARNINGS:")
        for warning in diagnostics['warnings']:
            logger.warning(f"  - {warning}")

    if diagnostics['info']:
        logger.info("\n[INFO] INFO:")
        for info in diagnostics['info']:
            logger.info(f"  - {info}")

    if not diagnostics['issues'] and not diagnostics['warnings']:
        logger.info("\n[OK] No issues detected")
