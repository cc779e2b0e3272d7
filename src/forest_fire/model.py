"""Forest fire model: tree growth, lightning and fire spread on a fixed grid."""

from __future__ import annotations

import logging
from datetime import date, timedelta

from mesa import Model
from mesa.datacollection import DataCollector

from .adjustments import ParameterSchedule
from .cell import Cell, CellType
from .config import RateParams
from .engine import run_day
from .grid import ForestGrid
from .spawner import daily_count, spawn_lightnings, spawn_trees, strike
from .stats import FireStats

logger = logging.getLogger(__name__)


class ForestFireModel(Model):
    """Main model for the forest fire cellular automaton.

    One call to `step()` advances the simulation by one day. The model is the
    single owner of the grid, the statistics and the simulated calendar.
    """

    def __init__(
        self,
        width: int,
        height: int,
        params: RateParams | None = None,
        start_date: date | None = None,
        schedule: ParameterSchedule | None = None,
        seed: int | None = None,
    ):
        """
        Initialize the forest fire model.

        Args:
            width: Width of the grid (number of cells)
            height: Height of the grid (number of cells)
            params: Rate parameters, read again on every day. Defaults to
                no trees and no lightning at 1 day per second.
            start_date: First day of the simulated calendar, defaults to today
            schedule: Optional date-triggered parameter changes
            seed: Seed for the model's random number generator
        """
        super().__init__(seed=seed)
        self.grid = ForestGrid(width, height)
        self.params = params if params is not None else RateParams()
        self.parameter_schedule = schedule
        self.stats = FireStats()
        self.start_date = start_date if start_date is not None else date.today()
        self.current_date = self.start_date
        self.notice = ""
        self.datacollector = self._make_datacollector()

    @staticmethod
    def _make_datacollector() -> DataCollector:
        return DataCollector(
            model_reporters={
                "Date": lambda m: m.current_date,
                "Lightnings": lambda m: m.stats.lightnings,
                "Spawned": lambda m: m.stats.spawned,
                "Burnt": lambda m: m.stats.burnt,
                "Trees": lambda m: m.grid.count(CellType.TREE),
                "Burning": lambda m: m.grid.count(CellType.BURNING),
            }
        )

    @property
    def days_elapsed(self) -> int:
        return (self.current_date - self.start_date).days

    def step(self):
        """
        Simulate one day.

        Order: advance the calendar, apply scheduled parameter changes, plant
        trees, strike lightning, then spread and burn out fires based on the
        grid as it was before that last phase started.
        """
        self.current_date += timedelta(days=1)

        if self.parameter_schedule is not None:
            for adjustment in self.parameter_schedule.apply(self.params, self.current_date):
                if adjustment.notice:
                    self.notice = adjustment.notice
                elif adjustment.clears_notice:
                    self.notice = ""

        trees = daily_count(self.params.trees_per_month, self.random)
        spawned = spawn_trees(self.grid, self.stats, trees, self.random)

        lightnings = daily_count(self.params.lightnings_per_month, self.random)
        spawn_lightnings(self.grid, self.stats, lightnings, self.random)

        burnt = run_day(self.grid, self.stats)

        self.datacollector.collect(self)
        logger.debug(
            f"{self.current_date}: {spawned}/{trees} trees planted, {lightnings} lightnings, "
            f"{burnt} trees caught fire ({self.stats})"
        )

    def ignite(self, index: int) -> bool:
        """
        Strike lightning on a chosen cell outside the daily cadence.

        Args:
            index: Linear cell index

        Returns:
            False if the index is outside the grid and nothing happened
        """
        if not self.grid.contains(index):
            logger.warning(f"Ignoring lightning outside the grid at index {index}")
            return False
        strike(self.grid, self.stats, index)
        return True

    def ignite_xy(self, x: int, y: int) -> bool:
        if not self.grid.in_bounds(x, y):
            logger.warning(f"Ignoring lightning outside the grid at ({x}, {y})")
            return False
        return self.ignite(self.grid.index(x, y))

    def reset(self) -> None:
        """Clear the grid, statistics and calendar back to the initial state."""
        self.grid.clear()
        self.stats.reset()
        self.current_date = self.start_date
        self.steps = 0
        self.notice = ""
        self.datacollector = self._make_datacollector()
        logger.info(f"Simulation reset to {self.start_date}")

    def cell(self, index: int) -> Cell:
        return self.grid.get(index)

    def cell_xy(self, x: int, y: int) -> Cell:
        return self.grid.get_xy(x, y)

    def __str__(self):
        return f"Day {self.days_elapsed} ({self.current_date}): {self.stats}"
