"""UI components for the forest fire visualization.

This module contains interactive UI elements like the info panel showing the
simulated date and statistics, and the sliders controlling the rates.
"""

from typing import TYPE_CHECKING, Optional

import pygame

from .colors import BUTTON_COLOR, PANEL_COLOR, WHITE

if TYPE_CHECKING:
    from forest_fire.model import ForestFireModel


PANEL_HEIGHT = 220


class ValueSlider:
    """Interactive horizontal slider for one integer parameter.

    Attributes:
        label: Text drawn above the bar.
        x: X coordinate of the slider's left edge.
        y: Y coordinate of the slider's top edge.
        width: Width of the slider bar in pixels.
        height: Height of the slider bar in pixels.
        min_val: Minimum value.
        max_val: Maximum value.
    """

    def __init__(
        self,
        label: str,
        x: int,
        y: int,
        width: int,
        height: int,
        min_val: int,
        max_val: int
    ) -> None:
        self.label = label
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.min_val = min_val
        self.max_val = max_val
        self.font = pygame.font.Font(None, 22)

    def draw(self, screen: pygame.Surface, current_val: float) -> None:
        """Draw the bar, the label with the current value and the handle."""
        label = self.font.render(f"{self.label}: {current_val:g}", True, WHITE)
        screen.blit(label, (self.x, self.y - 20))

        bar_rect = pygame.Rect(self.x, self.y, self.width, self.height)
        pygame.draw.rect(screen, (20, 20, 20), bar_rect, border_radius=6)
        pygame.draw.rect(screen, (70, 70, 70), bar_rect, 2, border_radius=6)

        clamped = max(self.min_val, min(self.max_val, current_val))
        ratio = (clamped - self.min_val) / (self.max_val - self.min_val)
        handle_x = self.x + int(ratio * self.width)
        handle_y = self.y + self.height // 2
        pygame.draw.circle(screen, (255, 140, 0), (handle_x, handle_y), self.height // 2 + 4)
        pygame.draw.circle(screen, WHITE, (handle_x, handle_y), self.height // 2 + 4, 2)

    def handle_click(self, mouse_x: int, mouse_y: int) -> Optional[int]:
        """Value under the mouse, used for both click and drag.

        Returns None when the pointer is not over the slider.
        """
        grab_margin = 10
        if not (self.x - grab_margin <= mouse_x <= self.x + self.width + grab_margin):
            return None
        if not (self.y - grab_margin <= mouse_y <= self.y + self.height + grab_margin):
            return None

        ratio = (mouse_x - self.x) / self.width
        new_val = self.min_val + ratio * (self.max_val - self.min_val)
        return max(self.min_val, min(self.max_val, int(round(new_val))))


class InfoPanel:
    """Displays the date, statistics and controls below the grid.

    Attributes:
        font: Main font for primary information.
        small_font: Smaller font for secondary information.
        reset_button_rect: Click area of the RESET button.
        pause_button_rect: Click area of the PLAY/PAUSE button.
        back_button_rect: Click area of the BACK button.
    """

    BUTTON_W = 130
    BUTTON_H = 36
    SPACING = 20

    def __init__(self) -> None:
        self.font = pygame.font.Font(None, 30)
        self.small_font = pygame.font.Font(None, 22)
        self.reset_button_rect = pygame.Rect(0, 0, self.BUTTON_W, self.BUTTON_H)
        self.pause_button_rect = pygame.Rect(0, 0, self.BUTTON_W, self.BUTTON_H)
        self.back_button_rect = pygame.Rect(0, 0, self.BUTTON_W, self.BUTTON_H)

    def _draw_button(self, screen: pygame.Surface, rect: pygame.Rect, label: str) -> None:
        pygame.draw.rect(screen, BUTTON_COLOR, rect, border_radius=10)
        pygame.draw.rect(screen, WHITE, rect, 2, border_radius=10)
        text = self.small_font.render(label, True, WHITE)
        screen.blit(text, text.get_rect(center=rect.center))

    def draw(
        self,
        screen: pygame.Surface,
        model: "ForestFireModel",
        paused: bool,
        panel_y: int,
        window_width: int,
    ) -> None:
        """Draw the panel block starting at `panel_y`."""
        panel = pygame.Surface((window_width, PANEL_HEIGHT))
        panel.fill(PANEL_COLOR)
        screen.blit(panel, (0, panel_y))

        date_text = self.font.render(
            f"{model.current_date:%Y-%m-%d}  (day {model.days_elapsed})", True, WHITE
        )
        screen.blit(date_text, (15, panel_y + 10))

        status = "PAUSED" if paused else "RUNNING"
        status_text = self.font.render(status, True, WHITE)
        screen.blit(status_text, (window_width - status_text.get_width() - 15, panel_y + 10))

        stats = model.stats
        stats_text = self.small_font.render(
            f"Lightnings: {stats.lightnings}   Trees spawned: {stats.spawned}   Trees burnt: {stats.burnt}",
            True,
            WHITE,
        )
        screen.blit(stats_text, (15, panel_y + 40))

        if model.notice:
            notice_text = self.small_font.render(model.notice, True, (255, 215, 0))
            screen.blit(notice_text, (15, panel_y + 62))

        help_text = self.small_font.render(
            "SPACE = Play / Pause   R = Reset   Click grid = Lightning   ESC = Quit", True, WHITE
        )
        screen.blit(help_text, (15, panel_y + PANEL_HEIGHT - 25))

        # RESET - PLAY/PAUSE - BACK, centered above the help line
        total_width = self.BUTTON_W * 3 + self.SPACING * 2
        button_x = window_width // 2 - total_width // 2
        button_y = panel_y + PANEL_HEIGHT - 75
        for rect in (self.reset_button_rect, self.pause_button_rect, self.back_button_rect):
            rect.topleft = (button_x, button_y)
            button_x += self.BUTTON_W + self.SPACING

        self._draw_button(screen, self.reset_button_rect, "RESET")
        self._draw_button(screen, self.pause_button_rect, "PLAY" if paused else "PAUSE")
        self._draw_button(screen, self.back_button_rect, "BACK")
