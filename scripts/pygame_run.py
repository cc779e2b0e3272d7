#!/usr/bin/env python3
"""Pygame visualization launcher for the forest fire simulation.

This script provides an interactive Pygame-based visualization of the
cellular automaton. It includes a configuration menu, real-time rendering
driven by simulated days per second, rate sliders and click-to-strike
lightning.

Usage:
    python scripts/pygame_run.py
    python scripts/pygame_run.py --tree-color "#00aa00" --fire-color ff0000
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

import pygame

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from forest_fire import DayScheduler, ForestFireModel, ParameterSchedule, RateParams

from visualization import (
    GridRenderer,
    Palette,
    InfoPanel,
    ValueSlider,
    SetupMenu,
    PANEL_HEIGHT,
    BLACK,
    DEFAULT_FPS,
    TREE_HEX,
    FIRE_HEX,
    LIGHTNING_HEX,
    SPARK_HEX,
    MIN_DAYS_PER_SECOND,
    MAX_DAYS_PER_SECOND,
    MAX_TREES_PER_MONTH,
    MAX_LIGHTNINGS_PER_MONTH,
)

logger = logging.getLogger(__name__)


class SimulationRunner:
    """Main simulation runner with Pygame visualization.

    Handles the main loop, event processing, and coordination between the
    model, its real-time scheduler and the visualization components.

    Attributes:
        model: The forest fire model.
        scheduler: Converts elapsed real time into simulated days.
        screen: Pygame display surface.
        clock: Pygame clock for FPS control.
        renderer: Grid renderer for drawing cells.
        info_panel: UI panel for displaying date, stats and buttons.
        sliders: Rate sliders keyed by RateParams field name.
        dragging: Field name of the slider being dragged, if any.
    """

    def __init__(
        self,
        width: int,
        height: int,
        cell_size: int,
        params: RateParams,
        palette: Optional[Palette] = None,
    ) -> None:
        """Initialize the simulation runner.

        Args:
            width: Grid width in cells.
            height: Grid height in cells.
            cell_size: Size of each cell in pixels.
            params: Initial rates, shared with the sliders.
            palette: Cell colors, the default palette if omitted.
        """
        self.window_width = max(width * cell_size, 700)
        self.grid_pixel_height = height * cell_size
        self.window_height = self.grid_pixel_height + PANEL_HEIGHT

        pygame.init()
        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption("Forest Fire")
        self.clock = pygame.time.Clock()

        self.model = ForestFireModel(
            width=width,
            height=height,
            params=params,
            schedule=ParameterSchedule.default(),
        )
        self.scheduler = DayScheduler(self.model, clock=lambda: pygame.time.get_ticks() / 1000)

        self.renderer = GridRenderer(cell_size, palette or Palette())
        self.info_panel = InfoPanel()

        slider_width = (self.window_width - 80) // 3
        slider_y = self.grid_pixel_height + 105
        self.sliders = {
            "days_per_second": ValueSlider(
                "Days / second", 20, slider_y, slider_width, 14,
                MIN_DAYS_PER_SECOND, MAX_DAYS_PER_SECOND,
            ),
            "trees_per_month": ValueSlider(
                "Trees / month", 40 + slider_width, slider_y, slider_width, 14,
                0, MAX_TREES_PER_MONTH,
            ),
            "lightnings_per_month": ValueSlider(
                "Lightnings / month", 60 + 2 * slider_width, slider_y, slider_width, 14,
                0, MAX_LIGHTNINGS_PER_MONTH,
            ),
        }
        self.dragging: Optional[str] = None

    def _handle_keyboard_events(self, event: pygame.event.Event) -> bool:
        """Handle keyboard input events.

        Returns:
            False if the simulation should quit, True otherwise.
        """
        if event.key == pygame.K_ESCAPE:
            return False
        elif event.key == pygame.K_SPACE:
            self.scheduler.toggle()
        elif event.key == pygame.K_r:
            self.scheduler.reset()
        return True

    def _update_slider(self, name: str, pos: tuple[int, int]) -> bool:
        value = self.sliders[name].handle_click(*pos)
        if value is None:
            return False
        self.model.params.set(name, value)
        return True

    def _handle_mouse_down(self, pos: tuple[int, int]) -> Optional[str]:
        """Dispatch a left click to the buttons, sliders or the grid."""
        if self.info_panel.back_button_rect.collidepoint(pos):
            return "BACK_TO_MENU"
        if self.info_panel.reset_button_rect.collidepoint(pos):
            self.scheduler.reset()
            return None
        if self.info_panel.pause_button_rect.collidepoint(pos):
            self.scheduler.toggle()
            return None

        for name in self.sliders:
            if self._update_slider(name, pos):
                self.dragging = name
                return None

        cell = self.renderer.screen_to_cell(pos, self.model)
        if cell is not None:
            self.model.ignite_xy(*cell)
        return None

    def _render(self) -> None:
        """Render all visual components to the screen."""
        self.screen.fill(BLACK)
        self.renderer.draw_base(self.screen, self.model)
        self.info_panel.draw(
            self.screen,
            self.model,
            self.scheduler.paused,
            self.grid_pixel_height,
            self.window_width,
        )
        for name, slider in self.sliders.items():
            slider.draw(self.screen, getattr(self.model.params, name))
        pygame.display.flip()

    def run(self) -> Optional[str]:
        """Run the main loop until the user quits or goes back to the menu."""
        running = True

        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

                elif event.type == pygame.KEYDOWN:
                    if not self._handle_keyboard_events(event):
                        running = False

                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    if self._handle_mouse_down(event.pos) == "BACK_TO_MENU":
                        return "BACK_TO_MENU"

                elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    self.dragging = None

                elif event.type == pygame.MOUSEMOTION and self.dragging:
                    self._update_slider(self.dragging, event.pos)

            # Whole simulated days first, then draw the committed grid
            self.scheduler.tick()
            self._render()
            self.clock.tick(DEFAULT_FPS)

        pygame.quit()
        return None


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Interactive forest fire simulation.")
    parser.add_argument("--tree-color", default=TREE_HEX, help="tree color as #rrggbb")
    parser.add_argument("--fire-color", default=FIRE_HEX, help="color of older fires as #rrggbb")
    parser.add_argument("--lightning-color", default=LIGHTNING_HEX, help="lightning flash color as #rrggbb")
    parser.add_argument("--spark-color", default=SPARK_HEX, help="color of fresh fires as #rrggbb")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every simulated day")
    return parser.parse_args(argv)


def palette_from_args(args: argparse.Namespace) -> Palette:
    return Palette.from_hex(
        tree=args.tree_color,
        lightning=args.lightning_color,
        fire=args.fire_color,
        spark=args.spark_color,
    )


def main(argv=None) -> None:
    """Main entry point for the Pygame visualization.

    Shows the setup menu, then runs the simulation with the
    configured parameters and colors.
    """
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
    palette = palette_from_args(args)

    while True:
        menu = SetupMenu()
        params = menu.run()

        rates = RateParams(
            trees_per_month=params['trees_per_month'],
            lightnings_per_month=params['lightnings_per_month'],
            days_per_second=params['days_per_second'],
        )
        runner = SimulationRunner(
            params['width'], params['height'], params['cell_size'], rates, palette=palette
        )
        result = runner.run()

        if result != "BACK_TO_MENU":
            break


if __name__ == "__main__":
    main()
