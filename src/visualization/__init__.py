"""Visualization package for the forest fire simulation using Pygame."""

from .colors import *
from .renderer import GridRenderer, cell_colors
from .ui import InfoPanel, ValueSlider, PANEL_HEIGHT
from .menu import SetupMenu, SimulationParams

__all__ = [
    # Renderer and UI components
    'GridRenderer',
    'cell_colors',
    'InfoPanel',
    'ValueSlider',
    'PANEL_HEIGHT',
    'SetupMenu',
    'SimulationParams',

    # Cell colors
    'Palette',
    'DEFAULT_PALETTE',
    'hex_to_rgb',
    'TREE_HEX',
    'FIRE_HEX',
    'LIGHTNING_HEX',
    'SPARK_HEX',

    # UI colors
    'BLACK',
    'WHITE',

    # Default parameters
    'DEFAULT_WIDTH',
    'DEFAULT_HEIGHT',
    'DEFAULT_CELL_SIZE',
    'DEFAULT_FPS',
    'DEFAULT_TREES_PER_MONTH',
    'DEFAULT_LIGHTNINGS_PER_MONTH',
    'DEFAULT_DAYS_PER_SECOND',

    # Slider limits
    'MIN_DAYS_PER_SECOND',
    'MAX_DAYS_PER_SECOND',
    'MAX_TREES_PER_MONTH',
    'MAX_LIGHTNINGS_PER_MONTH',
]
