"""Flat grid storage for cell types, timers and ignition flags."""

from typing import Iterator

import numpy as np

from .cell import Cell, CellType


class ForestGrid:
    """Fixed-size rectangular grid addressed by linear index ``y * width + x``.

    The grid only stores state. All transition rules live in the spawner and
    the day-step engine.

    Attributes:
        width: Number of columns
        height: Number of rows
        size: Total number of cells
    """

    def __init__(self, width: int, height: int):
        """
        Initialize an all-empty grid.

        Args:
            width: Grid width in cells, at least 1
            height: Grid height in cells, at least 1
        """
        if width < 1 or height < 1:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.size = self.width * self.height
        self._types = np.zeros(self.size, dtype=np.uint8)
        self._timers = np.zeros(self.size, dtype=np.int16)
        self._will_burn = np.zeros(self.size, dtype=bool)

    def index(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) outside {self.width}x{self.height} grid")
        return y * self.width + x

    def coords(self, index: int) -> tuple[int, int]:
        self._check_index(index)
        return index % self.width, index // self.width

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def contains(self, index: int) -> bool:
        return 0 <= index < self.size

    def _check_index(self, index: int) -> None:
        if not self.contains(index):
            raise IndexError(f"Cell index {index} outside grid of {self.size} cells")

    def get(self, index: int) -> Cell:
        self._check_index(index)
        return Cell(
            CellType(int(self._types[index])),
            int(self._timers[index]),
            bool(self._will_burn[index]),
        )

    def get_xy(self, x: int, y: int) -> Cell:
        return self.get(self.index(x, y))

    def type_at(self, index: int) -> CellType:
        self._check_index(index)
        return CellType(int(self._types[index]))

    def set(self, index: int, cell_type: CellType, timer: int = 0, will_burn: bool = False) -> None:
        """
        Overwrite one cell.

        Empty cells never keep a timer or an ignition flag, and only ignited
        cells may carry the flag.
        """
        self._check_index(index)
        if timer < 0:
            raise ValueError(f"Timer must be non-negative, got {timer}")
        if cell_type == CellType.EMPTY:
            timer = 0
        self._types[index] = int(cell_type)
        self._timers[index] = timer
        self._will_burn[index] = bool(will_burn) and cell_type == CellType.IGNITED

    def set_xy(self, x: int, y: int, cell_type: CellType, timer: int = 0, will_burn: bool = False) -> None:
        self.set(self.index(x, y), cell_type, timer, will_burn)

    def clear(self) -> None:
        """Reset every cell to EMPTY."""
        self._types.fill(int(CellType.EMPTY))
        self._timers.fill(0)
        self._will_burn.fill(False)

    def neighbors(self, index: int) -> Iterator[int]:
        """Yield the indices of the (up to) eight surrounding cells.

        The grid does not wrap around, so edge cells have fewer neighbours.
        """
        x, y = self.coords(index)
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                nx, ny = x + dx, y + dy
                if self.in_bounds(nx, ny):
                    yield ny * self.width + nx

    def count(self, cell_type: CellType) -> int:
        return int(np.count_nonzero(self._types == int(cell_type)))

    def indices_of(self, *cell_types: CellType) -> np.ndarray:
        """Ascending linear indices of all cells whose type is one of ``cell_types``."""
        return np.flatnonzero(np.isin(self._types, [int(t) for t in cell_types]))

    @property
    def types(self) -> np.ndarray:
        """Read-only (height, width) view of the cell types."""
        view = self._types.reshape(self.height, self.width)
        view.flags.writeable = False
        return view

    @property
    def timers(self) -> np.ndarray:
        """Read-only (height, width) view of the cell timers."""
        view = self._timers.reshape(self.height, self.width)
        view.flags.writeable = False
        return view

    def __iter__(self) -> Iterator[Cell]:
        for index in range(self.size):
            yield self.get(index)

    def __len__(self) -> int:
        return self.size
