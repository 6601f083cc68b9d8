"""
Event Sink - Queue and Reducer for Visualization Events.

Samplers push events onto `EventSink.queue` during a step; `fold_all()` drains
the queue in FIFO order and folds each event into the snapshot fields below.
This is the only channel through which a sampler's intermediate state
(proposals, decisions, trajectories, Langevin drift) reaches consumers.

Snapshot fields:
    current_position     - walker position (moves one fold after an accept)
    proposal_position    - last proposed point
    proposal_radius      - proposal scale (0 when the sampler gives none)
    proposal_accepted    - None = pending, True = accepted, False = rejected
    flash_accept/reject  - set by the decision of the current fold only
    accepted_samples     - bounded trail, at most max_trail_length, oldest evicted
    all_samples          - unbounded log of every accepted sample
    trajectory_path      - last integrator path and its momentum
    langevin_*           - last MALA gradient, drift point and noise radius

Deferred position update:
    An ACCEPT does not move `current_position` or extend the trail at once.
    It is stored as pending and applied at the start of the *next* fold_all(),
    so a consumer sees the accepted proposal next to the old position for one
    frame before the walker moves. `all_samples` is updated immediately.
    With Gibbs' two accepts per step only the final sweep point is pending.
"""

from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional, Tuple

from .events import EventType, VisualizationEvent
from .types import Point

DEFAULT_MAX_TRAIL_LENGTH = 500


@dataclass(frozen=True)
class SinkSnapshot:
    """Immutable copy of the folded EventSink state."""
    current_position: Optional[Point]
    proposal_position: Optional[Point]
    proposal_radius: float
    proposal_accepted: Optional[bool]
    flash_accept: bool
    flash_reject: bool
    accepted_samples: Tuple[Point, ...]
    all_samples: Tuple[Point, ...]
    trajectory_path: Optional[Tuple[Point, ...]]
    momentum: Optional[Point]
    langevin_gradient: Optional[Point]
    langevin_drift_point: Optional[Point]
    langevin_noise_radius: float


class EventSink:
    """
    FIFO event queue plus the reducer that folds it into display state.

    Args:
        max_trail_length: Capacity of the accepted-sample trail (>= 1)
    """

    def __init__(self, max_trail_length: int = DEFAULT_MAX_TRAIL_LENGTH):
        if max_trail_length < 1:
            raise ValueError(f"max_trail_length must be >= 1, got {max_trail_length}")
        self._max_trail_length = int(max_trail_length)
        self.queue: Deque[VisualizationEvent] = deque()
        self.accepted_samples: Deque[Point] = deque()
        self.all_samples: List[Point] = []
        self._handlers = {
            EventType.PROPOSAL: self._fold_proposal,
            EventType.ACCEPT: self._fold_accept,
            EventType.REJECT: self._fold_reject,
            EventType.TRAJECTORY: self._fold_trajectory,
            EventType.GRADIENT: self._fold_gradient,
            EventType.LANGEVIN: self._fold_langevin,
        }
        self.reset()

    # ------------------------------------------------------------------
    # Trail capacity
    # ------------------------------------------------------------------

    @property
    def max_trail_length(self) -> int:
        return self._max_trail_length

    @max_trail_length.setter
    def max_trail_length(self, value: int) -> None:
        if value < 1:
            raise ValueError(f"max_trail_length must be >= 1, got {value}")
        self._max_trail_length = int(value)
        self._trim_trail()

    def _trim_trail(self) -> None:
        while len(self.accepted_samples) > self._max_trail_length:
            self.accepted_samples.popleft()

    # ------------------------------------------------------------------
    # Queue operations
    # ------------------------------------------------------------------

    def push(self, event: VisualizationEvent) -> None:
        self.queue.append(event)

    def fold_one(self) -> None:
        """Fold the oldest queued event, if any."""
        if not self.queue:
            return
        self._fold(self.queue.popleft())

    def fold_all(self) -> None:
        """
        Apply the pending update left by the previous fold, then drain the queue.
        """
        self.flash_accept = False
        self.flash_reject = False

        if self._pending_position is not None:
            self.current_position = self._pending_position
            self._pending_position = None
        if self._pending_sample is not None:
            self.accepted_samples.append(self._pending_sample)
            self._trim_trail()
            self._pending_sample = None

        while self.queue:
            self._fold(self.queue.popleft())

    def _fold(self, event: VisualizationEvent) -> None:
        try:
            handler = self._handlers[event.event_type]
        except (KeyError, AttributeError):
            raise TypeError(f"Not a visualization event: {event!r}") from None
        handler(event)

    # ------------------------------------------------------------------
    # Reducer
    # ------------------------------------------------------------------

    def _fold_proposal(self, event) -> None:
        self.proposal_position = event.to_point
        self.proposal_radius = event.radius or 0.0
        self.proposal_accepted = None

    def _fold_accept(self, event) -> None:
        self._pending_position = event.position
        self._pending_sample = event.position
        self.all_samples.append(event.position)
        self.proposal_accepted = True
        self.flash_accept = True

    def _fold_reject(self, event) -> None:
        self.proposal_accepted = False
        self.flash_reject = True

    def _fold_trajectory(self, event) -> None:
        self.trajectory_path = tuple(event.path)
        self.momentum = event.momentum

    def _fold_gradient(self, event) -> None:
        # Declared for generic gradient arrows; nothing consumes it yet
        pass

    def _fold_langevin(self, event) -> None:
        self.langevin_gradient = event.gradient
        self.langevin_drift_point = event.drift_point
        self.langevin_noise_radius = event.noise_radius

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def seed(self, start: Point) -> None:
        """Place the walker at `start` with a one-point trail."""
        self.current_position = start
        self.accepted_samples.clear()
        self.accepted_samples.append(start)

    def reset(self) -> None:
        """Clear the queue and every snapshot field."""
        self.queue.clear()
        self.current_position: Optional[Point] = None
        self.proposal_position: Optional[Point] = None
        self.proposal_radius = 0.0
        self.proposal_accepted: Optional[bool] = None
        self.flash_accept = False
        self.flash_reject = False
        self.accepted_samples.clear()
        self.all_samples.clear()
        self.trajectory_path: Optional[Tuple[Point, ...]] = None
        self.momentum: Optional[Point] = None
        self.langevin_gradient: Optional[Point] = None
        self.langevin_drift_point: Optional[Point] = None
        self.langevin_noise_radius = 0.0
        self._pending_position: Optional[Point] = None
        self._pending_sample: Optional[Point] = None

    def snapshot(self) -> SinkSnapshot:
        return SinkSnapshot(
            current_position=self.current_position,
            proposal_position=self.proposal_position,
            proposal_radius=self.proposal_radius,
            proposal_accepted=self.proposal_accepted,
            flash_accept=self.flash_accept,
            flash_reject=self.flash_reject,
            accepted_samples=tuple(self.accepted_samples),
            all_samples=tuple(self.all_samples),
            trajectory_path=self.trajectory_path,
            momentum=self.momentum,
            langevin_gradient=self.langevin_gradient,
            langevin_drift_point=self.langevin_drift_point,
            langevin_noise_radius=self.langevin_noise_radius,
        )
