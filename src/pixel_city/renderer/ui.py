"""UI widgets for the town renderer."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable

import pygame


class SimulationMode(Enum):
    """Simulation state modes."""

    RUNNING = auto()
    PAUSED = auto()


@dataclass
class UIColors:
    """Color scheme for UI elements."""

    # Background
    bg: tuple[int, int, int] = (30, 32, 40)
    bg_hover: tuple[int, int, int] = (45, 48, 58)
    bg_active: tuple[int, int, int] = (55, 58, 70)

    # Accents
    accent: tuple[int, int, int] = (100, 180, 255)
    accent_dim: tuple[int, int, int] = (60, 100, 140)

    # Text
    text: tuple[int, int, int] = (220, 225, 235)
    text_dim: tuple[int, int, int] = (140, 145, 155)

    # Chart colors
    chart_population: tuple[int, int, int] = (80, 200, 220)
    chart_wood: tuple[int, int, int] = (190, 140, 90)
    chart_food: tuple[int, int, int] = (120, 200, 100)
    chart_houses: tuple[int, int, int] = (200, 170, 255)
    chart_bg: tuple[int, int, int] = (25, 27, 35)


UI_COLORS = UIColors()


class Sparkline:
    """A mini line chart for displaying time-series data."""

    def __init__(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        color: tuple[int, int, int] = UI_COLORS.chart_population,
        bg_color: tuple[int, int, int] = UI_COLORS.chart_bg,
    ):
        """
        Initialize a sparkline chart.

        Args:
            x: X position
            y: Y position
            width: Chart width
            height: Chart height
            color: Line color
            bg_color: Background color
        """
        self.rect = pygame.Rect(x, y, width, height)
        self.color = color
        self.bg_color = bg_color

    def render(
        self,
        surface: pygame.Surface,
        data: Sequence[float | int],
        min_val: float | None = None,
        max_val: float | None = None,
    ) -> None:
        """
        Render the sparkline chart.

        Args:
            surface: Surface to render on
            data: Sequence of values to plot
            min_val: Optional minimum value for scaling (auto if None)
            max_val: Optional maximum value for scaling (auto if None)
        """
        # Draw background
        pygame.draw.rect(surface, self.bg_color, self.rect, border_radius=3)

        if len(data) < 2:
            return

        # Calculate value range
        data_min = min(data) if min_val is None else min_val
        data_max = max(data) if max_val is None else max_val
        value_range = data_max - data_min if data_max > data_min else 1.0

        # Calculate points
        padding = 2
        chart_width = self.rect.width - padding * 2
        chart_height = self.rect.height - padding * 2

        points: list[tuple[int, int]] = []
        for i, value in enumerate(data):
            x = self.rect.x + padding + int(i * chart_width / (len(data) - 1))
            normalized = (value - data_min) / value_range
            y = self.rect.y + padding + int((1 - normalized) * chart_height)
            points.append((x, y))

        # Draw line
        pygame.draw.lines(surface, self.color, False, points, 2)


class Button:
    """A clickable button."""

    def __init__(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        text: str,
        on_click: Callable[[], None] | None = None,
        toggle: bool = False,
        active: bool = False,
    ):
        """
        Initialize a button.

        Args:
            x: X position
            y: Y position
            width: Button width
            height: Button height
            text: Button text
            on_click: Callback when clicked
            toggle: Whether this is a toggle button
            active: Initial active state (for toggle buttons)
        """
        self.rect = pygame.Rect(x, y, width, height)
        self.text = text
        self.on_click = on_click
        self.toggle = toggle
        self.active = active
        # Disabled buttons render dimmed and ignore input
        self.enabled = True
        self.hovered = False
        self.pressed = False

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle pygame events.

        Returns:
            True if event was consumed
        """
        if not self.enabled:
            return False

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.pressed = True
                return True

        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            if self.pressed and self.rect.collidepoint(event.pos):
                if self.toggle:
                    self.active = not self.active
                if self.on_click:
                    self.on_click()
                self.pressed = False
                return True
            self.pressed = False

        elif event.type == pygame.MOUSEMOTION:
            self.hovered = self.rect.collidepoint(event.pos)

        return False

    def render(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        """Render the button."""
        # Disabled buttons ignore hover and press state
        if not self.enabled:
            bg_color = (40, 42, 50)
        elif self.active:
            bg_color = UI_COLORS.accent
        elif self.pressed:
            bg_color = UI_COLORS.bg_active
        elif self.hovered:
            bg_color = UI_COLORS.bg_hover
        else:
            bg_color = UI_COLORS.bg

        # Draw background
        pygame.draw.rect(surface, bg_color, self.rect, border_radius=4)

        # Draw border
        border_color = UI_COLORS.accent if self.active else UI_COLORS.accent_dim
        pygame.draw.rect(surface, border_color, self.rect, width=1, border_radius=4)

        # Draw text
        if not self.enabled:
            text_color = UI_COLORS.text_dim
        else:
            text_color = UI_COLORS.bg if self.active else UI_COLORS.text
        text_surface = font.render(self.text, True, text_color)
        text_x = self.rect.x + (self.rect.width - text_surface.get_width()) // 2
        text_y = self.rect.y + (self.rect.height - text_surface.get_height()) // 2
        surface.blit(text_surface, (text_x, text_y))


class SpeedSelector:
    """A button group for selecting how many minutes pass per clock update."""

    SPEEDS = [1, 2]
    LABELS = ["1x", "2x"]

    def __init__(
        self,
        x: int,
        y: int,
        button_width: int = 40,
        button_height: int = 24,
        on_change: Callable[[int], None] | None = None,
    ):
        """
        Initialize speed selector.

        Args:
            x: X position
            y: Y position
            button_width: Width of each button
            button_height: Height of each button
            on_change: Callback with the new minutes per clock update
        """
        self.buttons: list[Button] = []
        self.on_change = on_change
        self._speed = 1

        for i, (speed, label) in enumerate(zip(self.SPEEDS, self.LABELS)):
            btn = Button(
                x + i * (button_width + 4),
                y,
                button_width,
                button_height,
                label,
                on_click=lambda s=speed: self._set_speed(s),
                toggle=True,
                active=(speed == 1),
            )
            self.buttons.append(btn)

    @property
    def speed(self) -> int:
        """Get current speed multiplier."""
        return self._speed

    def _set_speed(self, speed: int) -> None:
        """Set speed and update button states."""
        self._speed = speed
        for btn, spd in zip(self.buttons, self.SPEEDS):
            btn.active = (spd == speed)
        if self.on_change:
            self.on_change(speed)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Handle pygame events."""
        for btn in self.buttons:
            if btn.handle_event(event):
                return True
        return False

    def render(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        """Render speed selector."""
        for btn in self.buttons:
            btn.render(surface, font)
