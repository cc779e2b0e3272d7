"""Day-step engine: fire spread, decay and resolution of lightning strikes.

A day is computed in two phases. `plan_day` reads the grid as it was at the
start of the day and lists every transition; `commit` then writes them. Trees
that catch fire during a day therefore only spread fire from the next day on.
"""

import logging
from typing import Iterable, NamedTuple

from .cell import FIRE_LIFETIME, CellType
from .grid import ForestGrid
from .stats import FireStats

logger = logging.getLogger(__name__)


class Transition(NamedTuple):
    """Pending change of one cell.

    Attributes:
        index: Linear cell index
        type: New cell type
        timer: New timer value
        ignition: True for a tree catching fire from a burning neighbour
    """
    index: int
    type: CellType
    timer: int = 0
    ignition: bool = False


def plan_day(grid: ForestGrid) -> list[Transition]:
    """
    Scan the unmodified grid and list the transitions for one day.

    Only ignited and burning cells produce entries; they are visited in
    ascending index order. A tree next to several fires is listed once per
    burning neighbour.
    """
    transitions: list[Transition] = []

    for index in grid.indices_of(CellType.IGNITED, CellType.BURNING):
        index = int(index)
        cell = grid.get(index)

        if cell.type == CellType.IGNITED:
            if cell.will_burn:
                transitions.append(Transition(index, CellType.BURNING, FIRE_LIFETIME))
            else:
                transitions.append(Transition(index, CellType.EMPTY))
            continue

        # Spread to trees that existed at the start of the day
        for neighbor in grid.neighbors(index):
            if grid.type_at(neighbor) == CellType.TREE:
                transitions.append(Transition(neighbor, CellType.BURNING, FIRE_LIFETIME, ignition=True))

        days_left = cell.timer - 1
        if days_left <= 0:
            transitions.append(Transition(index, CellType.EMPTY))
        else:
            transitions.append(Transition(index, CellType.BURNING, days_left))

    return transitions


def merge_transitions(transitions: Iterable[Transition]) -> dict[int, Transition]:
    """
    Collapse the pending list to one transition per cell.

    Cells keep the position of their first entry. A later entry replaces an
    earlier one, except that an ignition is never replaced by a plain write.
    """
    pending: dict[int, Transition] = {}
    for transition in transitions:
        current = pending.get(transition.index)
        if current is not None and current.ignition and not transition.ignition:
            continue
        pending[transition.index] = transition
    return pending


def commit(grid: ForestGrid, stats: FireStats, pending: dict[int, Transition]) -> int:
    """
    Apply merged transitions to the grid.

    An ignition only takes effect, and only counts as a burnt tree, if the
    cell is still a tree when it is applied. Other transitions are written
    unconditionally.

    Returns:
        Number of trees that caught fire
    """
    burnt = 0
    for transition in pending.values():
        if transition.ignition:
            if grid.type_at(transition.index) != CellType.TREE:
                continue
            burnt += 1
        grid.set(transition.index, transition.type, transition.timer)
    stats.burnt += burnt
    return burnt


def run_day(grid: ForestGrid, stats: FireStats) -> int:
    """Plan and commit one day of fire activity, returning the trees burnt."""
    transitions = plan_day(grid)
    pending = merge_transitions(transitions)
    burnt = commit(grid, stats, pending)
    logger.debug(f"{len(transitions)} planned transitions, {len(pending)} cells changed, {burnt} trees caught fire")
    return burnt
