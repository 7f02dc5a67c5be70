"""Pygame-CE renderer for visualizing the town."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from ..config import RendererConfig
from ..simulation.tilemap import TileKind
from . import colors
from .ui import UI_COLORS, Button, SimulationMode, Sparkline, SpeedSelector

if TYPE_CHECKING:
    from ..simulation.agent import Agent
    from ..simulation.town import Town


class PygameRenderer:
    """
    Pygame-based renderer for the town simulation.

    Renders:
    - The tile map, houses and agents
    - Sidebar with clock, resource stats, charts and controls
    - Agent panel below the map with status, needs and last memory
    """

    def __init__(self, config: RendererConfig, map_width: int, map_height: int):
        """
        Initialize the renderer.

        Args:
            config: Renderer configuration
            map_width: Map width in tiles
            map_height: Map height in tiles
        """
        self.config = config
        self.tile_size = config.tile_size
        self.sidebar_width = config.sidebar_width
        self.world_width = map_width * config.tile_size
        self.world_height = map_height * config.tile_size
        self.panel_height = config.agent_panel_height
        self.window_width = self.sidebar_width + self.world_width
        self.window_height = self.world_height + self.panel_height

        # Initialize Pygame
        pygame.init()
        pygame.display.set_caption("Pixel City")

        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        self.clock = pygame.time.Clock()

        # Fonts
        self.font_large = pygame.font.Font(None, 28)
        self.font_medium = pygame.font.Font(None, 22)
        self.font_small = pygame.font.Font(None, 18)

        # Pre-render some surfaces
        self._world_surface = pygame.Surface((self.world_width, self.world_height))
        self._panel_surface = pygame.Surface((self.world_width, self.panel_height))
        self._sidebar_surface = pygame.Surface((self.sidebar_width, self.window_height))

        # FPS tracking
        self._fps_history: list[float] = []

        self.mode = SimulationMode.RUNNING
        self._town: Town | None = None

        self._init_ui()

    def _init_ui(self) -> None:
        """Initialize UI elements."""
        padding = 15
        chart_width = 90
        chart_height = 24

        # Mode buttons
        btn_width = 60
        btn_height = 26
        btn_y = 10
        self.btn_run = Button(
            padding, btn_y, btn_width, btn_height, "Run",
            on_click=lambda: self._set_mode(SimulationMode.RUNNING),
            toggle=True, active=True
        )
        self.btn_pause = Button(
            padding + btn_width + 4, btn_y, btn_width, btn_height, "Pause",
            on_click=lambda: self._set_mode(SimulationMode.PAUSED),
            toggle=True, active=False
        )
        self.btn_add_agent = Button(
            padding + (btn_width + 4) * 2, btn_y, btn_width + 40, btn_height, "Add Agent",
            on_click=self._on_add_agent,
        )
        self.buttons = [self.btn_run, self.btn_pause, self.btn_add_agent]

        # Sparkline charts - positions are set during render
        self.chart_population = Sparkline(
            padding, 0, chart_width, chart_height, color=UI_COLORS.chart_population
        )
        self.chart_wood = Sparkline(padding, 0, chart_width, chart_height, color=UI_COLORS.chart_wood)
        self.chart_food = Sparkline(padding, 0, chart_width, chart_height, color=UI_COLORS.chart_food)
        self.chart_houses = Sparkline(
            padding, 0, chart_width, chart_height, color=UI_COLORS.chart_houses
        )

        self.speed_selector = SpeedSelector(
            padding, 0, button_width=50, button_height=24,
            on_change=self._on_speed_change
        )

    def set_town(self, town: Town) -> None:
        """Set the town the controls act on."""
        self._town = town
        self._set_mode(SimulationMode.PAUSED if town.paused else SimulationMode.RUNNING)

    def _set_mode(self, mode: SimulationMode) -> None:
        """Set simulation mode, pausing or resuming the town to match."""
        self.mode = mode
        self.btn_run.active = (mode == SimulationMode.RUNNING)
        self.btn_pause.active = (mode == SimulationMode.PAUSED)

        if self._town is not None and self._town.paused != (mode == SimulationMode.PAUSED):
            self._town.toggle_pause()

    def _on_speed_change(self, speed: int) -> None:
        if self._town is not None:
            self._town.set_speed(speed)

    def _on_add_agent(self) -> None:
        if self._town is not None:
            self._town.add_agent()

    def handle_events(self) -> bool:
        """
        Handle Pygame events.

        Returns:
            False if the window should close, True otherwise.
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                if event.key == pygame.K_SPACE:
                    if self.mode == SimulationMode.RUNNING:
                        self._set_mode(SimulationMode.PAUSED)
                    else:
                        self._set_mode(SimulationMode.RUNNING)

            consumed = False
            for btn in self.buttons:
                if btn.handle_event(event):
                    consumed = True
                    break

            if not consumed:
                self.speed_selector.handle_event(event)

        return True

    def render(self, town: Town) -> None:
        """
        Render the current state of the town.

        Args:
            town: The simulation to render
        """
        self.screen.fill(colors.BG_DARK)

        self._render_world(town)
        self._render_agent_panel(town)
        self._render_sidebar(town)

        self.screen.blit(self._world_surface, (self.sidebar_width, 0))
        self.screen.blit(self._panel_surface, (self.sidebar_width, self.world_height))
        self.screen.blit(self._sidebar_surface, (0, 0))

        pygame.display.flip()

        # Track FPS
        self._fps_history.append(self.clock.get_fps())
        if len(self._fps_history) > 60:
            self._fps_history.pop(0)

    def _render_world(self, town: Town) -> None:
        """Render the tiles, houses and agents."""
        self._render_tiles(town)
        self._render_houses(town.pool.houses)
        for agent in town.agents:
            self._render_agent(agent)

    def _render_tiles(self, town: Town) -> None:
        size = self.tile_size
        tile_map = town.tile_map
        max_wood = town.config.tree_wood

        for y in range(tile_map.height):
            for x in range(tile_map.width):
                kind = TileKind(int(tile_map.kinds[y, x]))
                color = colors.get_tile_color(kind, int(tile_map.wood[y, x]), max_wood)
                pygame.draw.rect(self._world_surface, color, (x * size, y * size, size, size))

                # Tree trunk
                if kind == TileKind.TREE:
                    pygame.draw.rect(
                        self._world_surface, colors.TREE_TRUNK,
                        (x * size + size // 4, y * size + 2, size // 2, size - 4),
                    )
                # Water ripple
                elif kind == TileKind.WATER:
                    pygame.draw.rect(
                        self._world_surface, colors.WATER_RIPPLE,
                        (x * size + 2, y * size + 2, size // 4, size // 4),
                    )

    def _render_houses(self, houses: int) -> None:
        """Houses are laid out in rows of three from tile (5, 5)."""
        size = self.tile_size
        for i in range(houses):
            x = 5 + (i % 3) * 4
            y = 5 + (i // 3) * 4

            pygame.draw.rect(
                self._world_surface, colors.HOUSE_WALL,
                (x * size, y * size, size * 2, size * 2),
            )
            pygame.draw.polygon(
                self._world_surface, colors.HOUSE_ROOF,
                [(x * size, y * size), ((x + 1) * size, (y - 1) * size), ((x + 2) * size, y * size)],
            )
            pygame.draw.rect(
                self._world_surface, colors.HOUSE_DOOR,
                (int((x + 0.7) * size), int((y + 1.2) * size), 6, 10),
            )

    def _render_agent(self, agent: Agent) -> None:
        size = self.tile_size
        screen_x = int(agent.x * size)
        screen_y = int(agent.y * size)

        # Body
        pygame.draw.rect(self._world_surface, agent.color, (screen_x, screen_y, size, size))

        # Eyes
        eye = max(2, size // 5)
        pygame.draw.rect(self._world_surface, colors.AGENT_EYES, (screen_x + 3, screen_y + 3, eye, eye))
        pygame.draw.rect(
            self._world_surface, colors.AGENT_EYES, (screen_x + size - 3 - eye, screen_y + 3, eye, eye)
        )

        # Hunger indicator
        if agent.hunger > 70:
            pygame.draw.rect(
                self._world_surface, colors.HUNGER_MARK,
                (screen_x + size // 2 - 2, screen_y - 3, 4, 2),
            )

    def _render_agent_panel(self, town: Town) -> None:
        """Render the list of agents in two columns below the map."""
        self._panel_surface.fill(colors.BG_PANEL)
        pygame.draw.line(self._panel_surface, colors.DIVIDER, (0, 0), (self.world_width, 0), 2)

        padding = 12
        column_width = self.world_width // 2
        row_height = 60
        rows_per_column = max(1, (self.panel_height - padding) // row_height)

        for i, agent in enumerate(town.agents):
            column, row = divmod(i, rows_per_column)
            x = padding + column * column_width
            y = padding + row * row_height

            name = self.font_medium.render(f"{agent.name} ({agent.job.value})", True, colors.TEXT_PRIMARY)
            self._panel_surface.blit(name, (x, y))

            needs = f"{agent.status} | Hunger {int(agent.hunger)}% | Energy {int(agent.energy)}%"
            needs_color = colors.get_need_color(agent.hunger, 30, 80)
            self._panel_surface.blit(self.font_small.render(needs, True, needs_color), (x, y + 18))

            memory = agent.last_memory
            if memory is not None:
                line = self.font_small.render(memory.describe(), True, colors.TEXT_SECONDARY)
                self._panel_surface.blit(line, (x, y + 34))

    def _render_sidebar(self, town: Town) -> None:
        """Render the sidebar with clock, statistics and controls."""
        self._sidebar_surface.fill(colors.BG_SIDEBAR)

        # Draw divider line on right edge
        pygame.draw.line(
            self._sidebar_surface,
            colors.DIVIDER,
            (self.sidebar_width - 1, 0),
            (self.sidebar_width - 1, self.window_height),
            2,
        )

        padding = 12
        y = 10

        self.btn_add_agent.enabled = len(town.agents) < town.config.max_agents
        for btn in self.buttons:
            btn.render(self._sidebar_surface, self.font_small)
        y += 36

        # Clock
        clock_text = f"Day {town.clock.day}   {town.clock.time_string}"
        clock_surface = self.font_large.render(clock_text, True, colors.TEXT_PRIMARY)
        self._sidebar_surface.blit(clock_surface, (padding, y))
        y += 28

        avg_fps = sum(self._fps_history) / len(self._fps_history) if self._fps_history else 0
        status_text = f"Tick: {town.tick:,}   FPS: {avg_fps:.0f}"
        status_surface = self.font_small.render(status_text, True, colors.TEXT_SECONDARY)
        self._sidebar_surface.blit(status_surface, (padding, y))
        y += 18

        if town.seed is not None:
            seed_surface = self.font_small.render(f"Seed: {town.seed}", True, colors.TEXT_SECONDARY)
            self._sidebar_surface.blit(seed_surface, (padding, y))
            y += 18

        pygame.draw.line(
            self._sidebar_surface, colors.DIVIDER,
            (padding, y), (self.sidebar_width - padding, y)
        )
        y += 8

        y = self._render_stats_section(town, y, padding)

        # === SPEED SECTION ===
        pygame.draw.line(
            self._sidebar_surface, colors.DIVIDER,
            (padding, y), (self.sidebar_width - padding, y)
        )
        y += 8

        y = self._render_section_header("SPEED", y, padding)
        for btn in self.speed_selector.buttons:
            btn.rect.y = y
        self.speed_selector.render(self._sidebar_surface, self.font_small)
        y += 35

        # === HELP ===
        pygame.draw.line(
            self._sidebar_surface, colors.DIVIDER,
            (padding, y), (self.sidebar_width - padding, y)
        )
        y += 10

        hints = ["SPACE pause/resume", "ESC quit"]
        for hint in hints:
            hint_surface = self.font_small.render(hint, True, colors.TEXT_SECONDARY)
            self._sidebar_surface.blit(hint_surface, (padding, y))
            y += 16

    def _render_section_header(self, title: str, y: int, padding: int) -> int:
        """Render a section header and return new y position."""
        header_surface = self.font_small.render(title, True, UI_COLORS.accent)
        self._sidebar_surface.blit(header_surface, (padding, y))
        return y + 20

    def _render_stat_row(
        self, label: str, chart: Sparkline, data: list[float], y: int, padding: int
    ) -> int:
        label_surface = self.font_small.render(label, True, colors.TEXT_PRIMARY)
        self._sidebar_surface.blit(label_surface, (padding, y + 4))
        chart.rect.x = self.sidebar_width - padding - chart.rect.width
        chart.rect.y = y
        chart.render(self._sidebar_surface, data, min_val=0)
        return y + 30

    def _render_stats_section(self, town: Town, y: int, padding: int) -> int:
        """Render the stats section with charts."""
        y = self._render_section_header("TOWN", y, padding)

        history = town.stats_history
        y = self._render_stat_row(
            f"Population: {len(town.agents)}/{town.config.max_agents}",
            self.chart_population, list(history.population), y, padding,
        )
        y = self._render_stat_row(f"Wood: {int(town.pool.wood)}", self.chart_wood, list(history.wood), y, padding)
        y = self._render_stat_row(f"Food: {int(town.pool.food)}", self.chart_food, list(history.food), y, padding)
        y = self._render_stat_row(f"Houses: {town.pool.houses}", self.chart_houses, list(history.houses), y, padding)
        return y

    def tick(self) -> float:
        """
        Advance the renderer clock and return delta time.

        Returns:
            Time elapsed since last tick in seconds.
        """
        return self.clock.tick(self.config.target_fps) / 1000.0

    def cleanup(self) -> None:
        """Clean up Pygame resources."""
        pygame.quit()
