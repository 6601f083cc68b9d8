"""
Core Data Structures.

This module contains the value types shared by every other module:
- Point: Immutable 2-D coordinate (the sampled variable)
- Bounds: Rectangular coordinate bound of a target distribution
- ORIGIN: Default chain start position

Samplers work on length-2 JAX arrays internally and convert to Point at the
chain boundary, so chains, events and snapshots only ever hold plain floats.
"""

from dataclasses import dataclass
from typing import NamedTuple, Tuple

import jax.numpy as jnp


class Point(NamedTuple):
    """Immutable 2-D coordinate (x, y)."""
    x: float
    y: float

    def to_array(self) -> jnp.ndarray:
        """Convert to a length-2 array [x, y]."""
        return jnp.array([self.x, self.y])

    @classmethod
    def from_array(cls, arr) -> 'Point':
        """Convert from a length-2 array [x, y]."""
        return cls(x=float(arr[0]), y=float(arr[1]))


ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True)
class Bounds:
    """
    Rectangular coordinate bound of a distribution.

    Used to scale Gibbs grids, integrate marginals and bin histograms.
    """
    x_min: float
    x_max: float
    y_min: float
    y_max: float

    def __post_init__(self):
        if self.x_max <= self.x_min:
            raise ValueError(f"Bounds x_max ({self.x_max}) must be > x_min ({self.x_min})")
        if self.y_max <= self.y_min:
            raise ValueError(f"Bounds y_max ({self.y_max}) must be > y_min ({self.y_min})")

    @property
    def x_range(self) -> Tuple[float, float]:
        return (self.x_min, self.x_max)

    @property
    def y_range(self) -> Tuple[float, float]:
        return (self.y_min, self.y_max)

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    def contains(self, point: Point) -> bool:
        """True if the point lies inside the closed rectangle."""
        return (self.x_min <= point.x <= self.x_max
                and self.y_min <= point.y <= self.y_max)
