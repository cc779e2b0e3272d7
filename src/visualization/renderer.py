"""Grid rendering functionality for the forest fire simulation.

This module turns the grid's type and timer arrays into an RGB image and
provides the GridRenderer class which draws that image with Pygame.
"""

from typing import TYPE_CHECKING, Optional

import numpy as np
import pygame

from forest_fire.cell import SPARK_THRESHOLD, CellType
from forest_fire.grid import ForestGrid
from .colors import DEFAULT_PALETTE, Palette

if TYPE_CHECKING:
    from forest_fire.model import ForestFireModel


def cell_colors(grid: ForestGrid, palette: Palette = DEFAULT_PALETTE) -> np.ndarray:
    """Compute the color of every cell.

    Burning cells are split by their remaining days: fresh fires (timer at
    or above SPARK_THRESHOLD) use the spark color, older ones the fire color.

    Args:
        grid: Grid to read, which is not modified.
        palette: Colors to use.

    Returns:
        Array of shape (height, width, 3) with uint8 RGB values.
    """
    types = grid.types
    timers = grid.timers

    image = np.empty((grid.height, grid.width, 3), dtype=np.uint8)
    image[:] = palette.empty
    image[types == int(CellType.TREE)] = palette.tree
    image[types == int(CellType.IGNITED)] = palette.lightning

    burning = types == int(CellType.BURNING)
    image[burning & (timers >= SPARK_THRESHOLD)] = palette.spark
    image[burning & (timers < SPARK_THRESHOLD)] = palette.fire
    return image


class GridRenderer:
    """Renders the forest grid onto a Pygame surface.

    Attributes:
        cell_size: Size of each cell in pixels.
        palette: Colors used for each kind of cell.
    """

    def __init__(self, cell_size: int, palette: Palette = DEFAULT_PALETTE) -> None:
        """Initialize the grid renderer.

        Args:
            cell_size: Size of each cell in pixels.
            palette: Colors used for each kind of cell.
        """
        self.cell_size = cell_size
        self.palette = palette

    def draw_base(self, screen: pygame.Surface, model: "ForestFireModel", offset_x: int = 0, offset_y: int = 0):
        """Draw the grid with its top-left corner at the given offset."""
        image = cell_colors(model.grid, self.palette)
        # surfarray expects (width, height, 3)
        surface = pygame.surfarray.make_surface(image.transpose(1, 0, 2))
        if self.cell_size != 1:
            surface = pygame.transform.scale(
                surface,
                (model.grid.width * self.cell_size, model.grid.height * self.cell_size),
            )
        screen.blit(surface, (offset_x, offset_y))

    def screen_to_cell(
        self,
        pos: tuple[int, int],
        model: "ForestFireModel",
        offset_x: int = 0,
        offset_y: int = 0,
    ) -> Optional[tuple[int, int]]:
        """Convert a mouse position into grid coordinates.

        Returns:
            (x, y) of the cell under the pointer, or None outside the grid.
        """
        px, py = pos
        x = (px - offset_x) // self.cell_size
        y = (py - offset_y) // self.cell_size
        if not model.grid.in_bounds(x, y):
            return None
        return x, y
