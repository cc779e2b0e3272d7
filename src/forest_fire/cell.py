"""Cell types and per-cell constants for the forest fire automaton."""

from enum import IntEnum
from typing import NamedTuple


# Sustained fire lifetime in simulated days
FIRE_LIFETIME = 15

# Burning cells with at least this many days left are drawn as sparks
SPARK_THRESHOLD = 10


class CellType(IntEnum):
    """Possible states of a forest cell."""
    EMPTY = 0
    TREE = 1
    BURNING = 2
    IGNITED = 3


class Cell(NamedTuple):
    """Snapshot of a single cell.

    Attributes:
        type: Current CellType of the cell
        timer: Days left in the current state (always 0 for EMPTY)
        will_burn: For IGNITED cells, whether the strike hit a tree and the
            cell turns into fire on the next day
    """
    type: CellType
    timer: int = 0
    will_burn: bool = False

    @property
    def is_spark(self) -> bool:
        """Fresh fire, still in the upper part of its lifetime."""
        return self.type == CellType.BURNING and self.timer >= SPARK_THRESHOLD

    def __str__(self) -> str:
        if self.type == CellType.IGNITED:
            return f"{self.type.name} (will burn: {self.will_burn})"
        return f"{self.type.name}, timer: {self.timer}"
