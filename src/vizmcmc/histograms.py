"""
Histogram Summaries of the Sample Log

Host-side (numpy) summaries that consumers draw next to the chain:

    marginal_histograms - per-coordinate counts on one shared range, so the
                          x and y histograms are directly comparable
    sample_heatmap      - 2-D counts over the distribution bounds
    density_grid        - the target density on a regular grid (contours)
    marginal_curve      - the numerically integrated marginal density

Burn-in:
    burn_in drops the first burn_in samples, but only once the log has grown
    past burn_in. While the chain is still inside its burn-in period every
    sample is shown, so a short run never renders empty.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from .types import Bounds


@dataclass(frozen=True)
class MarginalHistograms:
    """Marginal counts on shared bin edges (len(edges) == bins + 1)."""
    edges: np.ndarray
    x_counts: np.ndarray
    y_counts: np.ndarray

    @property
    def max_count(self) -> int:
        return int(max(self.x_counts.max(initial=0), self.y_counts.max(initial=0)))


def apply_burn_in(samples: Sequence, burn_in: int = 0) -> np.ndarray:
    """Samples as an (n, 2) array, with burn-in removed once it has passed."""
    history = np.asarray(samples, dtype=float).reshape(-1, 2)
    if burn_in > 0 and history.shape[0] >= burn_in:
        history = history[burn_in:]
    return history


def shared_range(bounds: Bounds) -> Tuple[float, float]:
    """Smallest range covering both axes of the bound."""
    return min(bounds.x_min, bounds.y_min), max(bounds.x_max, bounds.y_max)


def marginal_histograms(samples: Sequence, bounds: Bounds, bins: int = 40,
                        burn_in: int = 0) -> MarginalHistograms:
    """
    Histogram each coordinate of the samples over the shared axis range.

    Samples outside the range are not counted.
    """
    history = apply_burn_in(samples, burn_in)
    edges = np.linspace(*shared_range(bounds), bins + 1)
    x_counts, _ = np.histogram(history[:, 0], bins=edges)
    y_counts, _ = np.histogram(history[:, 1], bins=edges)
    return MarginalHistograms(edges=edges, x_counts=x_counts, y_counts=y_counts)


def sample_heatmap(samples: Sequence, bounds: Bounds, bins: int = 40,
                   burn_in: int = 0) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Joint histogram of the samples over the bound.

    Returns:
        counts: (bins, bins) array indexed [x_bin, y_bin]
        x_edges, y_edges: Bin edges
    """
    history = apply_burn_in(samples, burn_in)
    counts, x_edges, y_edges = np.histogram2d(
        history[:, 0], history[:, 1], bins=bins,
        range=[bounds.x_range, bounds.y_range],
    )
    return counts, x_edges, y_edges


def density_grid(distribution, resolution: int = 50) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Density on a (resolution + 1)^2 grid spanning the bound, ends included.

    Returns:
        xs, ys: Grid coordinates
        grid: Densities indexed [i, j] = density(xs[i], ys[j])
    """
    bounds = distribution.bounds
    xs = np.linspace(bounds.x_min, bounds.x_max, resolution + 1)
    ys = np.linspace(bounds.y_min, bounds.y_max, resolution + 1)
    grid = distribution.density_grid(xs[:, None], ys[None, :])
    return xs, ys, np.asarray(grid)


def marginal_curve(distribution, axis: str = 'x', n_points: int = 100) -> Tuple[np.ndarray, np.ndarray]:
    """
    Marginal density along one axis, sampled on the shared range.

    Args:
        distribution: Target distribution
        axis: 'x' or 'y'
        n_points: Number of intervals; n_points + 1 values are returned

    Raises:
        ValueError: If axis is not 'x' or 'y'
    """
    if axis == 'x':
        marginal = distribution.marginal_x
    elif axis == 'y':
        marginal = distribution.marginal_y
    else:
        raise ValueError(f"axis must be 'x' or 'y', got {axis!r}")
    values = np.linspace(*shared_range(distribution.bounds), n_points + 1)
    return values, np.array([marginal(float(v)) for v in values])
