"""Real-time driver mapping wall-clock seconds to simulated days."""

import logging
import time
from typing import Callable, Optional

from .model import ForestFireModel

logger = logging.getLogger(__name__)


class DayScheduler:
    """Runs whole simulated days as real time passes.

    Elapsed seconds are multiplied by the current days-per-second speed and
    accumulated. Every whole day in the accumulator runs one model step; the
    fractional remainder carries over to the next tick.

    Attributes:
        model: The model advanced by this scheduler
        paused: Whether simulated time is frozen
        accumulator: Simulated days owed but not yet run
    """

    def __init__(self, model: ForestFireModel, clock: Callable[[], float] = time.monotonic):
        """
        Initialize a paused scheduler.

        Args:
            model: Model to advance
            clock: Returns the current wall-clock time in seconds
        """
        self.model = model
        self.clock = clock
        self.paused = True
        self.accumulator = 0.0
        self._last_time: Optional[float] = None

    def play(self) -> None:
        if self.paused:
            self.paused = False
            # The time spent paused must not turn into a burst of days
            self._last_time = None
            logger.info("Simulation running")

    def pause(self) -> None:
        if not self.paused:
            self.paused = True
            logger.info("Simulation paused")

    def toggle(self) -> bool:
        """Switch between running and paused, returning the new paused flag."""
        if self.paused:
            self.play()
        else:
            self.pause()
        return self.paused

    def tick(self, now: Optional[float] = None) -> int:
        """
        Advance by the wall-clock time since the previous tick.

        Args:
            now: Current time in seconds, read from the clock if omitted

        Returns:
            Number of simulated days run
        """
        if now is None:
            now = self.clock()
        if self._last_time is None:
            self._last_time = now
        elapsed = now - self._last_time
        self._last_time = now

        if self.paused:
            return 0
        return self.advance(elapsed)

    def advance(self, seconds: float) -> int:
        """Add `seconds` of real time and run every whole day that accrued."""
        self.accumulator += max(0.0, seconds) * self.model.params.days_per_second

        days = 0
        while self.accumulator >= 1:
            self.model.step()
            self.accumulator -= 1
            days += 1
        return days

    def reset(self) -> None:
        """Pause and return both the scheduler and the model to the initial state."""
        self.paused = True
        self.accumulator = 0.0
        self._last_time = None
        self.model.reset()
