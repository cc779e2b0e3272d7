"""Stochastic placement of new trees and lightning strikes."""

import logging
import math
from typing import Protocol

from .cell import FIRE_LIFETIME, CellType
from .config import DAYS_PER_MONTH, coerce_rate
from .grid import ForestGrid
from .stats import FireStats

logger = logging.getLogger(__name__)

# Random cells tried per tree before the spawn is dropped
PLACEMENT_ATTEMPTS = 10


class RandomSource(Protocol):
    def random(self) -> float: ...

    def randrange(self, stop: int) -> int: ...


def daily_count(rate_per_month, rng: RandomSource) -> int:
    """
    Number of events for one simulated day.

    The expected daily count ``R / 30`` is split into a guaranteed integer
    part and a fractional part that adds one extra event with that
    probability. A single uniform draw per day keeps the expectation exact,
    but this is not a Poisson draw: the variance is lower than the real
    process.

    Args:
        rate_per_month: Monthly rate; invalid or negative values count as 0
        rng: Source of uniform random numbers

    Returns:
        Number of events to place today
    """
    expected = coerce_rate(rate_per_month) / DAYS_PER_MONTH
    guaranteed = math.floor(expected)
    extra = 1 if rng.random() < expected % 1 else 0
    return guaranteed + extra


def spawn_tree(grid: ForestGrid, stats: FireStats, rng: RandomSource) -> bool:
    """
    Try to plant one tree at a random cell.

    Empty ground gets a tree. A burning cell has its fire topped off to the
    full lifetime instead, which ends the attempt without counting a spawn.
    Other cells are skipped and another random cell is tried, up to
    PLACEMENT_ATTEMPTS times.

    Returns:
        True if a tree was planted
    """
    for _ in range(PLACEMENT_ATTEMPTS):
        index = rng.randrange(grid.size)
        cell_type = grid.type_at(index)
        if cell_type == CellType.EMPTY:
            grid.set(index, CellType.TREE)
            stats.spawned += 1
            return True
        if cell_type == CellType.BURNING:
            grid.set(index, CellType.BURNING, FIRE_LIFETIME)
            return False
    logger.debug(f"No empty cell found in {PLACEMENT_ATTEMPTS} attempts, tree dropped")
    return False


def spawn_trees(grid: ForestGrid, stats: FireStats, count: int, rng: RandomSource) -> int:
    return sum(spawn_tree(grid, stats, rng) for _ in range(count))


def strike(grid: ForestGrid, stats: FireStats, index: int) -> CellType:
    """
    Resolve a lightning strike on one cell.

    Every strike is counted, whatever it hits. A tree becomes an ignited cell
    that turns into fire on the next day and counts as burnt right away.
    Empty ground flashes for one day. Cells already on fire are unchanged.

    Returns:
        The type the cell had before the strike
    """
    previous = grid.type_at(index)
    stats.lightnings += 1
    if previous == CellType.TREE:
        grid.set(index, CellType.IGNITED, will_burn=True)
        stats.burnt += 1
    elif previous == CellType.EMPTY:
        grid.set(index, CellType.IGNITED, will_burn=False)
    return previous


def spawn_lightnings(grid: ForestGrid, stats: FireStats, count: int, rng: RandomSource) -> int:
    """Strike `count` random cells, returning how many of them hit a tree."""
    hits = 0
    for _ in range(count):
        if strike(grid, stats, rng.randrange(grid.size)) == CellType.TREE:
            hits += 1
    return hits
