"""Setup menu for configuring simulation parameters.

This module provides an interactive menu where users can configure the grid
size and the starting rates before the simulation window opens.
"""

from typing import TypedDict, Optional
import logging
import sys

import pygame

from .colors import WHITE, PANEL_COLOR
from .colors import (
    DEFAULT_WIDTH,
    DEFAULT_HEIGHT,
    DEFAULT_CELL_SIZE,
    DEFAULT_TREES_PER_MONTH,
    DEFAULT_LIGHTNINGS_PER_MONTH,
    DEFAULT_DAYS_PER_SECOND,
)


logger = logging.getLogger(__name__)


class SimulationParams(TypedDict):
    """Type definition for simulation parameters.

    Attributes:
        width: Grid width in cells.
        height: Grid height in cells.
        cell_size: Size of each cell in pixels.
        trees_per_month: Initial tree spawn rate.
        lightnings_per_month: Initial lightning rate.
        days_per_second: Initial simulation speed.
    """
    width: int
    height: int
    cell_size: int
    trees_per_month: int
    lightnings_per_month: int
    days_per_second: int


FIELDS = [
    ("Grid width:", "width"),
    ("Grid height:", "height"),
    ("Cell size (px):", "cell_size"),
    ("Trees / month:", "trees_per_month"),
    ("Lightnings / month:", "lightnings_per_month"),
    ("Days / second:", "days_per_second"),
]

# Fields that make no sense at zero
POSITIVE_FIELDS = {"width", "height", "cell_size", "days_per_second"}


def default_params() -> SimulationParams:
    return {
        'width': DEFAULT_WIDTH,
        'height': DEFAULT_HEIGHT,
        'cell_size': DEFAULT_CELL_SIZE,
        'trees_per_month': DEFAULT_TREES_PER_MONTH,
        'lightnings_per_month': DEFAULT_LIGHTNINGS_PER_MONTH,
        'days_per_second': DEFAULT_DAYS_PER_SECOND,
    }


def parse_field_value(key: str, text: str) -> Optional[int]:
    """Parse the text typed into a field.

    Returns:
        The new value, or None if the input is not acceptable for that field.
    """
    try:
        value = int(text)
    except ValueError:
        return None
    if value < 0 or (value == 0 and key in POSITIVE_FIELDS):
        return None
    return value


class SetupMenu:
    """Interactive setup menu for simulation configuration.

    Displays a window where users can click on parameter values to edit them.
    ENTER or the START button launches the simulation.

    Attributes:
        screen: Pygame surface for the menu.
        title_font: Large font for title.
        font: Regular font for labels and values.
        params: Dictionary of current parameter values.
        active_field: Currently selected field for editing (if any).
        input_text: Text being entered by the user.
    """

    def __init__(self) -> None:
        """Initialize the setup menu with default parameters."""
        pygame.init()
        self.screen = pygame.display.set_mode((800, 600))
        pygame.display.set_caption("Forest Fire Setup")

        self.title_font = pygame.font.Font(None, 48)
        self.font = pygame.font.Font(None, 32)

        self.params: SimulationParams = default_params()

        self.active_field: Optional[str] = None
        self.input_text: str = ""

        self.start_button_rect = pygame.Rect(300, 500, 200, 50)

        self.cursor_timer = 0
        self.cursor_visible = True
        self.clock = pygame.time.Clock()
        self.mouse_pos = (0, 0)

    def _draw_fields(self, start_y: int) -> list[tuple[str, pygame.Rect]]:
        """Draw labels and value boxes, returning their click areas."""
        hitboxes = []
        y = start_y
        label_x = 200
        value_x = 500

        for label, key in FIELDS:
            label_surf = self.font.render(label, True, WHITE)
            self.screen.blit(label_surf, (label_x, y))

            display_value = self.input_text if self.active_field == key else str(self.params[key])
            value_color = (255, 0, 0) if self.active_field == key else WHITE
            value_surf = self.font.render(display_value, True, value_color)

            box_rect = pygame.Rect(value_x - 10, y - 2, max(120, value_surf.get_width() + 20), 34)
            fill = (0, 150, 0) if box_rect.collidepoint(self.mouse_pos) else (0, 80, 0)
            pygame.draw.rect(self.screen, fill, box_rect, border_radius=6)
            pygame.draw.rect(self.screen, (0, 0, 0), box_rect, width=2, border_radius=6)

            self.screen.blit(value_surf, (value_x, y + 5))
            if self.active_field == key and self.cursor_visible:
                cursor_surf = self.font.render("|", True, (255, 0, 0))
                self.screen.blit(cursor_surf, (value_x + value_surf.get_width() + 5, y + 5))

            row_rect = pygame.Rect(label_x, y, box_rect.right - label_x, 30)
            hitboxes.append((key, row_rect))
            y += 45

        return hitboxes

    def _draw_screen(self) -> list[tuple[str, pygame.Rect]]:
        """Draw the entire menu screen."""
        self.screen.fill(PANEL_COLOR)

        title_surface = self.title_font.render("FOREST FIRE SETUP", True, WHITE)
        self.screen.blit(title_surface, (400 - title_surface.get_width() // 2, 40))

        hint = self.font.render("Click a value to change it", True, WHITE)
        self.screen.blit(hint, (400 - hint.get_width() // 2, 110))

        hitboxes = self._draw_fields(170)

        fill = (255, 255, 255) if self.start_button_rect.collidepoint(self.mouse_pos) else (230, 230, 230)
        pygame.draw.rect(self.screen, fill, self.start_button_rect, border_radius=12)
        pygame.draw.rect(self.screen, (0, 0, 0), self.start_button_rect, 2, border_radius=12)
        start_surf = self.title_font.render("START", True, (0, 0, 0))
        self.screen.blit(start_surf, start_surf.get_rect(center=self.start_button_rect.center))

        pygame.display.flip()
        return hitboxes

    def _handle_text_input(self, event: pygame.event.Event) -> None:
        if event.key == pygame.K_BACKSPACE:
            self.input_text = self.input_text[:-1]
        elif event.unicode.isdigit():
            self.input_text += event.unicode

    def _save_field_value(self) -> None:
        """Save the current input text to the active field's parameter."""
        if self.active_field and self.input_text:
            value = parse_field_value(self.active_field, self.input_text)
            if value is not None:
                self.params[self.active_field] = value  # type: ignore
        self.input_text = ""
        self.active_field = None

    def _handle_mouse_click(self, pos, hitboxes) -> None:
        for key, rect in hitboxes:
            if rect.collidepoint(pos):
                if self.active_field and self.active_field != key:
                    self._save_field_value()
                self.active_field = key
                self.input_text = ""
                return

        # Clicked outside every field
        if self.active_field:
            self._save_field_value()

    def _handle_key(self, event: pygame.event.Event) -> bool:
        """Process a key press. Returns True when the menu should close."""
        if event.key == pygame.K_RETURN:
            if not self.active_field:
                return True
            self._save_field_value()
        elif event.key == pygame.K_ESCAPE:
            if not self.active_field:
                pygame.quit()
                sys.exit()
            # Drop the edit without saving
            self.active_field = None
            self.input_text = ""
        elif self.active_field:
            self._handle_text_input(event)
        return False

    def run(self) -> SimulationParams:
        """Run the setup menu and return configured parameters.

        Returns when the user presses ENTER with no field being edited or
        clicks START.
        """
        done = False
        while not done:
            self.cursor_timer += self.clock.get_time()
            if self.cursor_timer > 500:
                self.cursor_timer = 0
                self.cursor_visible = not self.cursor_visible

            self.mouse_pos = pygame.mouse.get_pos()
            hitboxes = self._draw_screen()

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    pygame.quit()
                    sys.exit()
                if event.type == pygame.KEYDOWN:
                    done = self._handle_key(event)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    if self.start_button_rect.collidepoint(event.pos):
                        self._save_field_value()
                        done = True
                    else:
                        self._handle_mouse_click(event.pos, hitboxes)
                if done:
                    break

            self.clock.tick(60)

        logger.info(f"Setup finished: {dict(self.params)}")
        return self.params
