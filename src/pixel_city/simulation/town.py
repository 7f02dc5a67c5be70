"""Town simulation - owns the map, the resource pool, the clock and the agents."""

from __future__ import annotations

import logging
import random
from collections import deque
from dataclasses import dataclass

from ..config import AgentConfig, ConversationConfig, TownConfig
from .agent import WORKING_JOBS, Agent, Job, MemoryRecord
from .behavior import update_agent
from .clock import Clock, EventQueue
from .conversation import ConversationEngine
from .resources import ResourcePool
from .tilemap import TileMap

logger = logging.getLogger(__name__)

AGENT_PALETTE: list[tuple[int, int, int]] = [
    (247, 37, 133),
    (114, 9, 183),
    (58, 12, 163),
    (67, 97, 238),
    (76, 201, 240),
    (255, 158, 0),
    (255, 84, 0),
]


@dataclass
class TownStats:
    """Statistics about the current town state."""

    frame: int = 0
    tick: int = 0
    day: int = 1
    population: int = 0
    wood: float = 0.0
    food: float = 0.0
    houses: int = 0
    # Averages across all agents
    avg_energy: float = 0.0
    avg_hunger: float = 0.0


class StatsHistory:
    """Tracks statistics over time for charting."""

    def __init__(self, max_length: int = 300):
        """
        Initialize stats history.

        Args:
            max_length: Maximum number of ticks to keep in history
        """
        self.max_length = max_length
        self.population: deque[int] = deque(maxlen=max_length)
        self.wood: deque[float] = deque(maxlen=max_length)
        self.food: deque[float] = deque(maxlen=max_length)
        self.houses: deque[int] = deque(maxlen=max_length)
        self.avg_energy: deque[float] = deque(maxlen=max_length)
        self.avg_hunger: deque[float] = deque(maxlen=max_length)

    def record(self, stats: TownStats) -> None:
        """Record current stats to history."""
        self.population.append(stats.population)
        self.wood.append(stats.wood)
        self.food.append(stats.food)
        self.houses.append(stats.houses)
        self.avg_energy.append(stats.avg_energy)
        self.avg_hunger.append(stats.avg_hunger)


class Town:
    """
    The simulation context shared by every subsystem.

    Manages:
    - The tile map and the shared resource pool
    - The in-game clock and the deferred event queue
    - The agent registry (updated in insertion order)
    - A single random source used by all behavior
    """

    def __init__(
        self,
        town_config: TownConfig | None = None,
        agent_config: AgentConfig | None = None,
        conversation_config: ConversationConfig | None = None,
        rng: random.Random | None = None,
        tile_map: TileMap | None = None,
    ):
        """
        Initialize the town.

        Args:
            town_config: Map, economy, clock and population settings
            agent_config: Agent needs and job constants
            conversation_config: Conversation constants
            rng: Random source; defaults to one seeded from the config.
                ``seed`` is None when a source is injected
            tile_map: Pre-built map; ``initialize`` generates one if omitted
        """
        self.config = town_config or TownConfig()
        self.agent_config = agent_config or AgentConfig()
        self.conversation_config = conversation_config or ConversationConfig()

        if self.config.terrain_style not in ("scatter", "noise"):
            raise ValueError(f"unknown terrain style: {self.config.terrain_style!r}")

        # Seeded random number generator for reproducibility. An injected
        # source has no seed we know of.
        self.seed: int | None
        if rng is not None:
            self.seed = None
            self.rng = rng
        else:
            self.seed = self.config.seed if self.config.seed is not None else random.randint(0, 2**31 - 1)
            self.rng = random.Random(self.seed)

        self._generate_map = tile_map is None
        if tile_map is None:
            tile_map = TileMap(
                self.config.map_width, self.config.map_height, tree_search=self.config.tree_search
            )
        self.tile_map = tile_map
        self.pool = ResourcePool(
            wood=self.config.initial_wood,
            food=self.config.initial_food,
            houses=self.config.initial_houses,
        )
        self.clock = Clock(
            day=self.config.start_day,
            time=self.config.start_time,
            minutes_per_day=self.config.minutes_per_day,
        )
        self.events = EventQueue()
        self.conversations = ConversationEngine(self.conversation_config)

        self.agents: list[Agent] = []
        self.paused = False
        self.frame = 0
        self.tick = 0

        # Statistics
        self.stats = TownStats()
        self.stats_history = StatsHistory()

    @property
    def population(self) -> int:
        return len(self.agents)

    @property
    def speed(self) -> int:
        return self.clock.speed

    def initialize(self) -> None:
        """Generate terrain and the founding roster."""
        if self._generate_map:
            self.tile_map.generate(
                self.rng,
                style=self.config.terrain_style,
                tree_wood=self.config.tree_wood,
                water_share=self.config.water_share,
                tree_share=self.config.tree_share,
            )

        names = self.config.founder_names
        for i in range(min(self.config.initial_population, self.config.max_agents)):
            self.spawn_agent(name=names[i % len(names)])

        self._update_stats()
        self.stats_history.record(self.stats)

    def spawn_agent(
        self,
        name: str,
        job: Job | None = None,
        x: float | None = None,
        y: float | None = None,
        status: str = "Exploring",
    ) -> Agent:
        """
        Add an agent to the registry.

        Job and position are drawn at random when not given. Returns the agent.
        """
        if job is None:
            job = self.rng.choice(WORKING_JOBS)
        if x is None:
            x = self.rng.randrange(self.tile_map.width)
        if y is None:
            y = self.rng.randrange(self.tile_map.height)

        agent = Agent(
            id=len(self.agents),
            name=name,
            job=job,
            x=x,
            y=y,
            color=self.rng.choice(AGENT_PALETTE),
            energy=self.agent_config.initial_energy,
            hunger=self.agent_config.initial_hunger,
            status=status,
        )
        agent.clamp_to(self.tile_map.width, self.tile_map.height)
        self.agents.append(agent)
        return agent

    def add_agent(self) -> Agent | None:
        """
        Welcome a newcomer to town.

        Returns the new agent, or None when the town is full.
        """
        if len(self.agents) >= self.config.max_agents:
            logger.debug("Town is full (%d agents), newcomer turned away", len(self.agents))
            return None

        agent = self.spawn_agent(name=self.rng.choice(self.config.newcomer_names), status="Arriving")
        logger.info("Day %d: %s the %s arrived", self.clock.day, agent.name, agent.job.value)
        return agent

    def toggle_pause(self) -> bool:
        """Pause or resume. Returns the new paused state."""
        self.paused = not self.paused
        return self.paused

    def set_speed(self, speed: int) -> None:
        """Set the number of in-game minutes that pass per clock update."""
        if speed < 1:
            raise ValueError(f"speed must be at least 1, got {speed}")
        self.clock.speed = speed

    def memory_record(self, result: str, **details: str) -> MemoryRecord:
        """Build a memory stamped with the current day and time."""
        return MemoryRecord(day=self.clock.day, time=self.clock.time_string, result=result, **details)

    def step(self) -> None:
        """
        Advance the simulation by one frame.

        This:
        1. Fires due deferred events (even while paused)
        2. Advances the clock on its cadence, feeding the town at each new day
        3. Updates every agent on the agent cadence
        """
        self.frame += 1
        self.stats.frame = self.frame
        self.events.process(self.frame)

        if self.paused:
            return

        if self.frame % self.config.time_update_interval == 0:
            if self.clock.advance():
                self._start_new_day()

        if self.frame % self.config.agent_update_interval == 0:
            self.update_agents()

    def _start_new_day(self) -> None:
        eaten = self.pool.apply_daily_food_consumption(
            self.population, self.config.food_per_agent_per_day
        )
        logger.info(
            "Day %d begins: %d agents ate %.0f food, %.0f left",
            self.clock.day, self.population, eaten, self.pool.food,
        )

    def update_agents(self) -> None:
        """Run one update for every agent in registry order."""
        self.tick += 1
        for agent in self.agents:
            update_agent(agent, self)

        self._update_stats()
        self.stats_history.record(self.stats)

    def _update_stats(self) -> None:
        self.stats.tick = self.tick
        self.stats.day = self.clock.day
        self.stats.population = len(self.agents)
        self.stats.wood = self.pool.wood
        self.stats.food = self.pool.food
        self.stats.houses = self.pool.houses

        # Compute averages across agents
        if self.agents:
            self.stats.avg_energy = sum(a.energy for a in self.agents) / len(self.agents)
            self.stats.avg_hunger = sum(a.hunger for a in self.agents) / len(self.agents)
        else:
            self.stats.avg_energy = 0.0
            self.stats.avg_hunger = 0.0
