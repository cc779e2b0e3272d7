"""
Forest Fire Simulation using Cellular Automata.

Trees grow at random, lightning sets them on fire and the fire spreads to
neighbouring trees day by day until it burns out.
"""

from .adjustments import Adjustment, ParameterSchedule
from .cell import FIRE_LIFETIME, SPARK_THRESHOLD, Cell, CellType
from .config import RateParams
from .grid import ForestGrid
from .model import ForestFireModel
from .scheduler import DayScheduler
from .stats import FireStats

__version__ = "0.1.0"

__all__ = [
    "Adjustment",
    "Cell",
    "CellType",
    "DayScheduler",
    "FIRE_LIFETIME",
    "FireStats",
    "ForestFireModel",
    "ForestGrid",
    "ParameterSchedule",
    "RateParams",
    "SPARK_THRESHOLD",
]
