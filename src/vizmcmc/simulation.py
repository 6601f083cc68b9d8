"""
Simulation Driver

Binds one Distribution and one Sampler, steps the sampler, and folds the
events of each step into an EventSink that consumers read between steps.

Lifecycle:
    set_algorithm / set_distribution -> initialize() once both are bound
    initialize(): sampler defaults restored, chain and sink reset, sink seeded
                  with the first chain point
    step():       sampler.step(sink), sink.fold_all(), sample counter += 1
    play():       paced loop of step() with `delay` seconds between steps,
                  until pause() or max_steps
    reset():      pause + initialize

Changing the sampler, the distribution or the start position resets the chain
and the sink together, so the sink never shows points from another chain.
"""

import logging
import time
from typing import Callable, Optional

from .error_handling import diagnose_chain
from .event_sink import DEFAULT_MAX_TRAIL_LENGTH, EventSink
from .types import Point

logger = logging.getLogger('vizmcmc')


class Simulation:
    """
    Driver stepping one sampler against one distribution.

    Args:
        sampler: Optional Sampler to bind
        distribution: Optional Distribution to bind
        delay: Seconds slept between steps in play()
        max_trail_length: Capacity of the sink's accepted-sample trail
    """

    def __init__(self, sampler=None, distribution=None, delay: float = 0.1,
                 max_trail_length: int = DEFAULT_MAX_TRAIL_LENGTH):
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        self.sampler = None
        self.distribution = None
        self.delay = delay
        self.sink = EventSink(max_trail_length)
        self.is_running = False
        self.total_samples = 0
        if sampler is not None:
            self.set_algorithm(sampler)
        if distribution is not None:
            self.set_distribution(distribution)

    @property
    def is_bound(self) -> bool:
        return self.sampler is not None and self.distribution is not None

    # ------------------------------------------------------------------
    # Binding
    # ------------------------------------------------------------------

    def set_algorithm(self, sampler) -> None:
        self.sampler = sampler
        if self.distribution is not None:
            self.sampler.set_distribution(self.distribution)
            self.initialize()

    def set_distribution(self, distribution) -> None:
        self.distribution = distribution
        if self.sampler is not None:
            self.sampler.set_distribution(distribution)
            self.initialize()

    def initialize(self) -> None:
        """Restore sampler defaults and start a fresh chain at the origin."""
        if not self.is_bound:
            logger.warning("initialize() called without both a sampler and a distribution")
            return
        self.sampler.init()
        self.sampler.reset()
        self._restart_sink()
        logger.info(f"Initialized {self.sampler.name} on {self.distribution.name}")

    def set_start_position(self, point) -> None:
        """Restart the chain at `point`, keeping current parameters."""
        if self.sampler is None:
            logger.warning("set_start_position() called without a sampler")
            return
        self.sampler.reset(point)
        self._restart_sink()

    def _restart_sink(self) -> None:
        self.sink.reset()
        self.sink.seed(self.sampler.current)
        self.total_samples = 0

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------

    def step(self) -> None:
        """Run one sampler step and fold its events."""
        if not self.is_bound:
            logger.warning("step() called without both a sampler and a distribution; ignoring")
            return
        self.sampler.step(self.sink)
        self.sink.fold_all()
        self.total_samples += 1
        logger.debug(f"Step {self.total_samples}: at {self.sampler.current}")

    def run(self, n_steps: int) -> None:
        """Run n_steps steps back to back, without pacing."""
        for _ in range(n_steps):
            self.step()

    def play(self, max_steps: Optional[int] = None,
             on_step: Optional[Callable[['Simulation'], None]] = None) -> int:
        """
        Step repeatedly, sleeping `delay` seconds between steps.

        Blocks until pause() is called (typically from `on_step`) or
        max_steps steps have run.

        Returns:
            Number of steps taken
        """
        if not self.is_bound:
            logger.warning("play() called without both a sampler and a distribution; ignoring")
            return 0
        self.is_running = True
        steps = 0
        while self.is_running and (max_steps is None or steps < max_steps):
            self.step()
            steps += 1
            if on_step is not None:
                on_step(self)
            if self.is_running and self.delay > 0:
                time.sleep(self.delay)
        self.is_running = False
        return steps

    def pause(self) -> None:
        self.is_running = False

    def toggle(self, max_steps: Optional[int] = None,
               on_step: Optional[Callable[['Simulation'], None]] = None) -> int:
        """Pause if running, otherwise play(); returns steps taken."""
        if self.is_running:
            self.pause()
            return 0
        return self.play(max_steps=max_steps, on_step=on_step)

    def reset(self) -> None:
        self.pause()
        self.initialize()

    # ------------------------------------------------------------------
    # Read-outs
    # ------------------------------------------------------------------

    @property
    def acceptance_rate(self) -> Optional[float]:
        if self.sampler is None:
            return None
        return self.sampler.get_acceptance_rate()

    @property
    def current_position(self) -> Optional[Point]:
        return self.sink.current_position

    def get_chain(self):
        return self.sampler.get_chain() if self.sampler is not None else ()

    def diagnose(self):
        """diagnose_chain() on the current chain and acceptance rate."""
        return diagnose_chain(self.get_chain(), self.acceptance_rate)
