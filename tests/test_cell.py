"""Unit tests for cell types and the ForestGrid store."""

import numpy as np
import pytest

from forest_fire.cell import FIRE_LIFETIME, SPARK_THRESHOLD, Cell, CellType
from forest_fire.grid import ForestGrid


class TestCellType:
    """Test cases for CellType enum."""

    def test_cell_types_exist(self):
        """Test that all expected cell types exist."""
        assert CellType.EMPTY is not None
        assert CellType.TREE
        assert CellType.BURNING
        assert CellType.IGNITED

    def test_cell_type_values(self):
        """Test cell type values."""
        assert CellType.EMPTY.value == 0
        assert CellType.TREE.value == 1
        assert CellType.BURNING.value == 2
        assert CellType.IGNITED.value == 3


class TestCell:
    """Test cases for the Cell snapshot."""

    def test_defaults(self):
        cell = Cell(CellType.TREE)
        assert cell.timer == 0
        assert cell.will_burn is False

    def test_spark_split(self):
        """Fresh fires are sparks, older fires are not."""
        assert Cell(CellType.BURNING, FIRE_LIFETIME).is_spark
        assert Cell(CellType.BURNING, SPARK_THRESHOLD).is_spark
        assert not Cell(CellType.BURNING, SPARK_THRESHOLD - 1).is_spark
        assert not Cell(CellType.TREE, FIRE_LIFETIME).is_spark

    def test_str(self):
        assert str(Cell(CellType.BURNING, 7)) == "BURNING, timer: 7"
        assert str(Cell(CellType.IGNITED, 0, True)) == "IGNITED (will burn: True)"


class TestForestGrid:
    """Test cases for ForestGrid."""

    @pytest.fixture
    def grid(self):
        return ForestGrid(width=4, height=3)

    def test_grid_creation(self, grid):
        assert grid.width == 4
        assert grid.height == 3
        assert grid.size == 12
        assert len(grid) == 12
        assert all(cell == Cell(CellType.EMPTY) for cell in grid)

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3)])
    def test_invalid_dimensions(self, width, height):
        with pytest.raises(ValueError):
            ForestGrid(width, height)

    def test_index_and_coords(self, grid):
        """Linear index is row-major: y * width + x."""
        assert grid.index(0, 0) == 0
        assert grid.index(3, 0) == 3
        assert grid.index(1, 2) == 9
        assert grid.coords(9) == (1, 2)
        assert grid.coords(11) == (3, 2)

    def test_out_of_bounds_access(self, grid):
        with pytest.raises(IndexError):
            grid.get(12)
        with pytest.raises(IndexError):
            grid.get(-1)
        with pytest.raises(IndexError):
            grid.get_xy(4, 0)
        with pytest.raises(IndexError):
            grid.set_xy(0, 3, CellType.TREE)

    def test_set_and_get(self, grid):
        grid.set(5, CellType.BURNING, 12)
        assert grid.get(5) == Cell(CellType.BURNING, 12, False)
        grid.set_xy(2, 2, CellType.IGNITED, will_burn=True)
        assert grid.get_xy(2, 2) == Cell(CellType.IGNITED, 0, True)
        assert grid.type_at(10) == CellType.IGNITED

    def test_empty_cells_have_no_timer(self, grid):
        """Writing EMPTY always drops timer and ignition flag."""
        grid.set(1, CellType.EMPTY, 9, will_burn=True)
        assert grid.get(1) == Cell(CellType.EMPTY, 0, False)

    def test_only_ignited_cells_keep_flag(self, grid):
        grid.set(1, CellType.TREE, will_burn=True)
        assert grid.get(1).will_burn is False

    def test_negative_timer_rejected(self, grid):
        with pytest.raises(ValueError):
            grid.set(0, CellType.BURNING, -1)

    def test_clear(self, grid):
        grid.set(0, CellType.TREE)
        grid.set(3, CellType.BURNING, 4)
        grid.set(7, CellType.IGNITED, will_burn=True)
        grid.clear()
        assert grid.count(CellType.EMPTY) == grid.size
        assert not grid.timers.any()

    def test_neighbors_inside(self, grid):
        """An inner cell has all eight neighbours."""
        assert sorted(grid.neighbors(grid.index(1, 1))) == [0, 1, 2, 4, 6, 8, 9, 10]

    def test_neighbors_corner(self, grid):
        """The grid does not wrap, corners only have three neighbours."""
        assert sorted(grid.neighbors(0)) == [1, 4, 5]
        assert sorted(grid.neighbors(11)) == [6, 7, 10]

    def test_count_and_indices(self, grid):
        grid.set(2, CellType.TREE)
        grid.set(8, CellType.TREE)
        grid.set(4, CellType.BURNING, 3)
        assert grid.count(CellType.TREE) == 2
        assert grid.indices_of(CellType.TREE).tolist() == [2, 8]
        assert grid.indices_of(CellType.BURNING, CellType.TREE).tolist() == [2, 4, 8]

    def test_views_are_read_only(self, grid):
        grid.set_xy(3, 1, CellType.BURNING, 6)
        assert grid.types.shape == (3, 4)
        assert grid.types[1, 3] == CellType.BURNING
        assert grid.timers[1, 3] == 6
        with pytest.raises(ValueError):
            grid.types[0, 0] = CellType.TREE
        assert np.count_nonzero(grid.types) == 1
