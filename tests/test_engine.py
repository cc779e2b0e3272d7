"""Unit tests for the two-phase day-step engine."""

import random

import pytest

from forest_fire.cell import FIRE_LIFETIME, Cell, CellType
from forest_fire.engine import Transition, commit, merge_transitions, plan_day, run_day
from forest_fire.grid import ForestGrid
from forest_fire.stats import FireStats


@pytest.fixture
def stats():
    return FireStats()


def random_grid(width, height, seed):
    """Grid with a random mix of every cell type."""
    rng = random.Random(seed)
    grid = ForestGrid(width, height)
    for index in range(grid.size):
        roll = rng.random()
        if roll < 0.5:
            grid.set(index, CellType.TREE)
        elif roll < 0.6:
            grid.set(index, CellType.BURNING, rng.randint(1, FIRE_LIFETIME))
        elif roll < 0.65:
            grid.set(index, CellType.IGNITED, will_burn=rng.random() < 0.5)
    return grid


class TestPlanDay:
    """Test cases for the scan phase."""

    def test_empty_and_trees_plan_nothing(self):
        grid = ForestGrid(3, 3)
        grid.set(0, CellType.TREE)
        assert plan_day(grid) == []

    def test_ignited_cells_resolve(self):
        grid = ForestGrid(3, 1)
        grid.set(0, CellType.IGNITED, will_burn=True)
        grid.set(2, CellType.IGNITED, will_burn=False)
        assert plan_day(grid) == [
            Transition(0, CellType.BURNING, FIRE_LIFETIME),
            Transition(2, CellType.EMPTY),
        ]

    def test_burning_cell_spreads_and_decays(self):
        grid = ForestGrid(3, 1)
        grid.set(0, CellType.TREE)
        grid.set(1, CellType.BURNING, 5)
        assert plan_day(grid) == [
            Transition(0, CellType.BURNING, FIRE_LIFETIME, ignition=True),
            Transition(1, CellType.BURNING, 4),
        ]

    def test_shared_tree_is_listed_per_fire(self):
        grid = ForestGrid(3, 1)
        grid.set(0, CellType.BURNING, 5)
        grid.set(1, CellType.TREE)
        grid.set(2, CellType.BURNING, 5)
        ignitions = [t for t in plan_day(grid) if t.ignition]
        assert [t.index for t in ignitions] == [1, 1]

    def test_ignited_cell_does_not_spread(self):
        """A fresh strike only becomes fire; it does not ignite neighbours yet."""
        grid = ForestGrid(3, 1)
        grid.set(0, CellType.TREE)
        grid.set(1, CellType.IGNITED, will_burn=True)
        assert not any(t.ignition for t in plan_day(grid))

    def test_plan_does_not_modify_grid(self):
        grid = random_grid(6, 6, seed=3)
        before = list(grid)
        plan_day(grid)
        assert list(grid) == before


class TestMergeTransitions:
    """Test cases for collapsing duplicate entries."""

    def test_duplicates_collapse_in_first_seen_order(self):
        ignition = Transition(4, CellType.BURNING, FIRE_LIFETIME, ignition=True)
        pending = merge_transitions([ignition, Transition(1, CellType.EMPTY), ignition])
        assert list(pending) == [4, 1]
        assert pending[4] == ignition

    def test_ignition_wins_over_plain_write(self):
        ignition = Transition(4, CellType.BURNING, FIRE_LIFETIME, ignition=True)
        plain = Transition(4, CellType.EMPTY)
        assert merge_transitions([ignition, plain])[4] == ignition
        assert merge_transitions([plain, ignition])[4] == ignition

    def test_later_plain_write_wins(self):
        pending = merge_transitions([Transition(2, CellType.BURNING, 3), Transition(2, CellType.EMPTY)])
        assert pending[2] == Transition(2, CellType.EMPTY)


class TestCommit:
    """Test cases for the apply phase."""

    def test_ignition_counts_once(self, stats):
        grid = ForestGrid(3, 1)
        grid.set(1, CellType.TREE)
        pending = merge_transitions([Transition(1, CellType.BURNING, FIRE_LIFETIME, ignition=True)] * 3)
        assert commit(grid, stats, pending) == 1
        assert stats.burnt == 1
        assert grid.get(1) == Cell(CellType.BURNING, FIRE_LIFETIME)

    def test_ignition_of_non_tree_is_skipped(self, stats):
        grid = ForestGrid(3, 1)
        grid.set(1, CellType.BURNING, 2)
        pending = {1: Transition(1, CellType.BURNING, FIRE_LIFETIME, ignition=True)}
        assert commit(grid, stats, pending) == 0
        assert grid.get(1) == Cell(CellType.BURNING, 2)
        assert stats.burnt == 0

    def test_plain_writes_are_unconditional(self, stats):
        grid = ForestGrid(3, 1)
        grid.set(0, CellType.IGNITED, will_burn=True)
        commit(grid, stats, {0: Transition(0, CellType.BURNING, FIRE_LIFETIME)})
        assert grid.get(0) == Cell(CellType.BURNING, FIRE_LIFETIME)
        assert stats.burnt == 0


class TestRunDay:
    """Properties of a full day."""

    def test_decay_to_empty(self, stats):
        """Timer drops by one per day and the cell empties when it reaches zero."""
        grid = ForestGrid(1, 1)
        grid.set(0, CellType.BURNING, 3)
        timers = []
        for _ in range(3):
            run_day(grid, stats)
            timers.append(grid.get(0))
        assert timers == [Cell(CellType.BURNING, 2), Cell(CellType.BURNING, 1), Cell(CellType.EMPTY)]

    def test_new_fire_does_not_spread_same_day(self, stats):
        grid = ForestGrid(4, 1)
        grid.set(0, CellType.BURNING, FIRE_LIFETIME)
        for index in (1, 2, 3):
            grid.set(index, CellType.TREE)

        run_day(grid, stats)
        assert [c.type for c in grid] == [CellType.BURNING, CellType.BURNING, CellType.TREE, CellType.TREE]

        run_day(grid, stats)
        assert [c.type for c in grid] == [CellType.BURNING, CellType.BURNING, CellType.BURNING, CellType.TREE]
        assert stats.burnt == 2

    @pytest.mark.parametrize("seed", [1, 2, 3, 4])
    def test_burnt_matches_new_fires(self, stats, seed):
        """Every tree turned to fire is counted exactly once."""
        grid = random_grid(12, 9, seed)
        for _ in range(5):
            trees_before = set(grid.indices_of(CellType.TREE).tolist())
            burnt_before = stats.burnt
            returned = run_day(grid, stats)
            new_fires = trees_before & set(grid.indices_of(CellType.BURNING).tolist())
            assert returned == len(new_fires) == stats.burnt - burnt_before

    @pytest.mark.parametrize("seed", [5, 6])
    def test_empty_cells_never_have_timers(self, stats, seed):
        grid = random_grid(10, 10, seed)
        for _ in range(FIRE_LIFETIME + 2):
            run_day(grid, stats)
            empty = grid.types == CellType.EMPTY
            assert not grid.timers[empty].any()
