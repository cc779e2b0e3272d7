"""Color definitions and constants for the forest fire visualization.

This module contains all RGB color tuples, the hex color parser and the
default configuration values used throughout the Pygame visualization.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

# Type alias for RGB color tuples
Color = Tuple[int, int, int]

_HEX_COLOR = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)


def hex_to_rgb(value, default: Optional[Color] = (0, 0, 0)) -> Optional[Color]:
    """Parse ``#rrggbb`` (the ``#`` is optional) into an RGB tuple.

    Anything that does not match returns `default` instead of failing.
    """
    match = _HEX_COLOR.match(value) if isinstance(value, str) else None
    if match is None:
        return default
    return tuple(int(group, 16) for group in match.groups())


# ============================================================================
# CELL COLORS (defaults for the palette)
# ============================================================================

TREE_HEX: str = "#228b22"                           # forestgreen
LIGHTNING_HEX: str = "#ffffff"                      # white flash
FIRE_HEX: str = "#ff4500"                           # orangered
SPARK_HEX: str = "#ffd700"                          # gold (fresh fire)

EMPTY_COLOR: Color = (0, 0, 0)                      # black ground


@dataclass(frozen=True)
class Palette:
    """Colors used to draw each kind of cell."""

    tree: Color = hex_to_rgb(TREE_HEX)
    lightning: Color = hex_to_rgb(LIGHTNING_HEX)
    fire: Color = hex_to_rgb(FIRE_HEX)
    spark: Color = hex_to_rgb(SPARK_HEX)
    empty: Color = EMPTY_COLOR

    @classmethod
    def from_hex(
        cls,
        tree: str = TREE_HEX,
        lightning: str = LIGHTNING_HEX,
        fire: str = FIRE_HEX,
        spark: str = SPARK_HEX,
    ) -> "Palette":
        """Build a palette from user-supplied hex strings.

        Malformed values fall back to black, like the ground.
        """
        values = {"tree": tree, "lightning": lightning, "fire": fire, "spark": spark}
        colors = {}
        for name, value in values.items():
            rgb = hex_to_rgb(value, default=None)
            if rgb is None:
                logger.warning(f"Invalid {name} color {value!r}, using {EMPTY_COLOR}")
                rgb = EMPTY_COLOR
            colors[name] = rgb
        return cls(**colors)


DEFAULT_PALETTE = Palette()

# ============================================================================
# UI COLORS
# ============================================================================

BLACK: Color = (0, 0, 0)                            # Grid lines, text
WHITE: Color = (255, 255, 255)                      # Background
PANEL_COLOR: Color = (20, 60, 20)                   # Dark green panels
BUTTON_COLOR: Color = (180, 0, 0)                   # Buttons

# ============================================================================
# DEFAULT SIMULATION PARAMETERS
# ============================================================================

DEFAULT_WIDTH: int = 400                            # Grid width in cells
DEFAULT_HEIGHT: int = 250                           # Grid height in cells
DEFAULT_CELL_SIZE: int = 3                          # Cell size in pixels
DEFAULT_FPS: int = 60                               # Frames per second
DEFAULT_TREES_PER_MONTH: int = 100
DEFAULT_LIGHTNINGS_PER_MONTH: int = 1
DEFAULT_DAYS_PER_SECOND: int = 1000

# ============================================================================
# SLIDER LIMITS
# ============================================================================

MIN_DAYS_PER_SECOND: int = 1
MAX_DAYS_PER_SECOND: int = 1000
MAX_TREES_PER_MONTH: int = 2000
MAX_LIGHTNINGS_PER_MONTH: int = 30
