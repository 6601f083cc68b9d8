"""
Visualization Events

A sampler never touches display state directly. During step() it pushes a
sequence of these immutable events onto an EventSink, and the sink folds them
into its snapshot (see event_sink.py).

Event kinds (EventType):
    PROPOSAL   - a candidate move from -> to, with an optional proposal radius
    ACCEPT     - the candidate was accepted at `position`
    REJECT     - the candidate at `position` was rejected
    TRAJECTORY - an integrator path (HMC), with the final (negated) momentum
    GRADIENT   - a gradient arrow at a position (declared; the sink ignores it)
    LANGEVIN   - MALA's drift/noise decomposition

Typical sequences per step:
    RWMH:   PROPOSAL, ACCEPT|REJECT
    HMC:    TRAJECTORY, PROPOSAL, ACCEPT|REJECT
    NUTS:   PROPOSAL, ACCEPT|REJECT
    MALA:   LANGEVIN, PROPOSAL, ACCEPT|REJECT
    Gibbs:  PROPOSAL, ACCEPT, PROPOSAL, ACCEPT
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Optional, Tuple, Union

from .types import Point


class EventType(IntEnum):
    """Tag of a visualization event."""
    PROPOSAL = 0
    ACCEPT = 1
    REJECT = 2
    TRAJECTORY = 3
    GRADIENT = 4
    LANGEVIN = 5

    def __str__(self):
        return self.name.title()


@dataclass(frozen=True)
class ProposalEvent:
    from_point: Point
    to_point: Point
    radius: Optional[float] = None
    event_type: ClassVar[EventType] = EventType.PROPOSAL


@dataclass(frozen=True)
class AcceptEvent:
    position: Point
    event_type: ClassVar[EventType] = EventType.ACCEPT


@dataclass(frozen=True)
class RejectEvent:
    position: Point
    event_type: ClassVar[EventType] = EventType.REJECT


@dataclass(frozen=True)
class TrajectoryEvent:
    """Integrator path; `path` holds the L+1 positions from start to end."""
    path: Tuple[Point, ...]
    momentum: Optional[Point] = None
    event_type: ClassVar[EventType] = EventType.TRAJECTORY


@dataclass(frozen=True)
class GradientEvent:
    position: Point
    direction: Point
    event_type: ClassVar[EventType] = EventType.GRADIENT


@dataclass(frozen=True)
class LangevinEvent:
    """MALA decomposition: gradient at q, drift point μ(q), noise radius √ε."""
    gradient: Point
    drift_point: Point
    noise_radius: float
    event_type: ClassVar[EventType] = EventType.LANGEVIN


VisualizationEvent = Union[
    ProposalEvent,
    AcceptEvent,
    RejectEvent,
    TrajectoryEvent,
    GradientEvent,
    LangevinEvent,
]
