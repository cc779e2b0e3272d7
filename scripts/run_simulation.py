#!/usr/bin/env python3
"""Headless runner for the forest fire simulation.

Runs a fixed number of simulated days, printing the grid for small forests
and the daily statistics, and optionally saves a history plot.

Usage:
    python scripts/run_simulation.py --days 365 --trees 300 --lightnings 2
"""

import argparse
import logging
import sys
from pathlib import Path

import matplotlib

# No window is ever opened by this script
matplotlib.use("Agg")

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from forest_fire import CellType, ForestFireModel, RateParams
from forest_fire.history import plot_stats_history, stats_history

logger = logging.getLogger(__name__)

SYMBOLS = {
    CellType.EMPTY: "⬛",
    CellType.TREE: "🌲",
    CellType.BURNING: "🔥",
    CellType.IGNITED: "⚡",
}

# Larger grids are not printed
MAX_PRINTED_WIDTH = 60


def print_grid(model: ForestFireModel) -> None:
    """
    Print a simple representation of the grid to console.

    Args:
        model: The ForestFireModel instance to visualize
    """
    grid_str = ""
    for y in range(model.grid.height):
        for x in range(model.grid.width):
            grid_str += SYMBOLS[model.cell_xy(x, y).type]
        grid_str += "\n"
    print(grid_str)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the forest fire automaton without a window.")
    parser.add_argument("--width", type=int, default=20, help="grid width in cells")
    parser.add_argument("--height", type=int, default=10, help="grid height in cells")
    parser.add_argument("--days", type=int, default=120, help="number of simulated days")
    parser.add_argument("--trees", default=300, help="trees per month")
    parser.add_argument("--lightnings", default=3, help="lightnings per month")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--plot", type=Path, default=None, help="save a history plot to this PNG file")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every simulated day")
    return parser.parse_args(argv)


def main(argv=None):
    """Run the forest fire simulation."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    params = RateParams(trees_per_month=args.trees, lightnings_per_month=args.lightnings)
    model = ForestFireModel(args.width, args.height, params=params, seed=args.seed)
    show_grid = model.grid.width <= MAX_PRINTED_WIDTH

    for _ in range(args.days):
        model.step()
        if show_grid:
            print(f"\n--- {model} ---")
            print_grid(model)

    logger.info(f"Finished after {model.days_elapsed} days: {model.stats}")

    if args.plot is not None:
        fig = plot_stats_history(stats_history(model))
        fig.savefig(args.plot, dpi=150, bbox_inches="tight")
        logger.info(f"History plot saved to {args.plot}")


if __name__ == "__main__":
    main()
