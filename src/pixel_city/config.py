"""Centralized configuration for the simulation."""

from dataclasses import dataclass, field


@dataclass
class TownConfig:
    """Configuration for the town simulation."""

    map_width: int = 50
    map_height: int = 25
    # Wood units in a freshly generated tree
    tree_wood: int = 5
    # "scatter" (independent draw per tile) or "noise" (clustered forests and lakes)
    terrain_style: str = "scatter"
    water_share: float = 0.1
    tree_share: float = 0.2
    # "scan" (first tree in row-major order) or "nearest" (closest tree)
    tree_search: str = "scan"

    # Starting resources
    initial_wood: float = 100.0
    initial_food: float = 150.0
    initial_houses: int = 0
    food_per_agent_per_day: float = 2.0

    # Clock
    start_day: int = 1
    start_time: int = 480  # minutes after midnight (08:00)
    minutes_per_day: int = 1440

    # Cadences in frames
    agent_update_interval: int = 4
    time_update_interval: int = 6

    # Population
    initial_population: int = 5
    max_agents: int = 10
    founder_names: list[str] = field(default_factory=lambda: [
        "Alex", "Sam", "Taylor", "Jordan", "Casey",
        "Riley", "Quinn", "Morgan", "Drew", "Blake",
    ])
    newcomer_names: list[str] = field(default_factory=lambda: [
        "Avery", "Cameron", "Emerson", "Finley", "Harley",
        "Peyton", "Rowan", "Sawyer", "Skyler",
    ])

    # Random seed for reproducibility (None = random seed)
    seed: int | None = None


@dataclass
class AgentConfig:
    """Configuration for agent needs and job behavior."""

    # Needs
    initial_energy: float = 100.0
    initial_hunger: float = 30.0
    hunger_rate: float = 0.015
    energy_decay: float = 0.008
    hungry_threshold: float = 80.0  # above this, agent is "Hungry"
    tired_threshold: float = 30.0  # below this, agent is "Tired"
    rest_gain: float = 0.5
    rested_level: float = 80.0

    # Movement
    wander_chance: float = 0.3
    move_step: float = 0.5
    arrival_epsilon: float = 0.5

    # Builder
    wood_to_build: float = 20.0
    build_cost: int = 15  # wood-ticks per house
    build_energy: float = 0.03
    maintenance_energy: float = 0.01
    self_gather_chance: float = 0.7

    # Gatherer watermarks
    wood_watermark: float = 50.0
    food_watermark: float = 100.0

    # Farmer
    farm_energy: float = 0.02
    harvest_chance: float = 0.08
    harvest_min_energy: float = 40.0
    harvest_min_yield: int = 3
    harvest_max_yield: int = 6


@dataclass
class ConversationConfig:
    """Configuration for agent conversations."""

    chance: float = 0.05
    # Partners must be closer than this on both axes
    radius: float = 3.0
    # Frames before "Talking to X" reverts (2 seconds at 20 FPS)
    revert_delay_frames: int = 40

    peckish_threshold: float = 50.0
    ask_food_min_pool: float = 10.0
    share_food_min_pool: float = 5.0
    share_food_amount: float = 2.0
    share_hunger_relief: float = 15.0
    ask_wood_below: float = 30.0
    wood_available_above: float = 10.0
    complain_energy: float = 5.0


@dataclass
class RendererConfig:
    """Configuration for the Pygame renderer."""

    tile_size: int = 16
    sidebar_width: int = 280
    agent_panel_height: int = 320
    target_fps: int = 20


@dataclass
class Config:
    """Main configuration container."""

    town: TownConfig
    agent: AgentConfig
    conversation: ConversationConfig
    renderer: RendererConfig

    @classmethod
    def default(cls) -> "Config":
        """Create default configuration."""
        return cls(
            town=TownConfig(),
            agent=AgentConfig(),
            conversation=ConversationConfig(),
            renderer=RendererConfig(),
        )
