"""Agent behavior - needs, job handlers and the per-tick update."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Callable

from .agent import Agent, Job, MemoryRecord
from .resources import ResourceKind
from .tilemap import TileKind

if TYPE_CHECKING:
    from .town import Town

logger = logging.getLogger(__name__)


def is_hungry(agent: Agent, town: Town) -> bool:
    return agent.hunger > town.agent_config.hungry_threshold


def is_tired(agent: Agent, town: Town) -> bool:
    return agent.energy < town.agent_config.tired_threshold


def update_agent(agent: Agent, town: Town) -> None:
    """
    Run one think-and-move step for an agent.

    Needs are checked before work: a hungry agent looks for food, a tired one
    rests, and only otherwise does the job handler run (followed by a chance
    to chat with a neighbour). Movement comes last.
    """
    cfg = town.agent_config

    agent.hunger += cfg.hunger_rate
    agent.energy -= cfg.energy_decay

    if is_hungry(agent, town):
        agent.status = "Hungry"
        find_food(agent, town)
    elif is_tired(agent, town):
        agent.status = "Tired"
        rest(agent, town)
    else:
        JOB_BEHAVIORS.get(agent.job, explore_behavior)(agent, town)

        if town.rng.random() < town.conversation_config.chance:
            town.conversations.converse(agent, town)

    if agent.target is None:
        wander(agent, town)
    else:
        agent.step_toward_target(cfg.move_step, cfg.arrival_epsilon)

    agent.clamp_to(town.tile_map.width, town.tile_map.height)


def wander(agent: Agent, town: Town) -> None:
    """Take a random step with the configured probability."""
    if town.rng.random() < town.agent_config.wander_chance:
        agent.random_step(town.rng)


def find_food(agent: Agent, town: Town) -> None:
    """Head for a random grass tile. A target that is still grass is kept."""
    tile_map = town.tile_map
    if agent.target is not None and tile_map.in_bounds(*agent.target):
        if tile_map.cell_at(*agent.target).kind == TileKind.GRASS:
            return

    grass = tile_map.all_cells_of_kind(TileKind.GRASS)
    if grass:
        agent.target = town.rng.choice(grass)


def rest(agent: Agent, town: Town) -> None:
    cfg = town.agent_config
    agent.energy += cfg.rest_gain
    if agent.energy >= cfg.rested_level:
        agent.status = "Rested"
        agent.target = None


def gather_wood(agent: Agent, town: Town) -> None:
    """Chop the tree underfoot, or walk to one if there is nothing to chop."""
    x, y = agent.tile
    if town.tile_map.harvest_wood(x, y):
        town.pool.add(ResourceKind.WOOD, 1)
        logger.debug("%s chopped wood at (%d, %d)", agent.name, x, y)
        return

    tree = town.tile_map.find_nearest_tree_from((agent.x, agent.y))
    if tree is not None:
        agent.target = tree
        agent.status = "Going to tree"


def builder_behavior(agent: Agent, town: Town) -> None:
    """
    Build houses until there is one for every two townspeople.

    Each building tick costs one wood and adds one unit of progress; a house
    is finished once progress reaches ``build_cost``. Builders only start
    while the pool holds at least ``wood_to_build`` wood.
    """
    cfg = town.agent_config
    pool = town.pool
    houses_needed = max(0, math.ceil(town.population / 2) - pool.houses)

    if houses_needed > 0 and pool.wood >= cfg.wood_to_build:
        agent.energy -= cfg.build_energy
        agent.status = f"Building house ({houses_needed} needed)"

        if pool.try_consume(ResourceKind.WOOD, 1):
            agent.building_progress = (agent.building_progress or 0) + 1

        if agent.building_progress is not None and agent.building_progress >= cfg.build_cost:
            pool.add_house()
            agent.status = "Built a new house!"
            agent.building_progress = 0
            agent.remember(town.memory_record("Completed a house", action="building"))
            logger.info("Day %d: %s completed house #%d", town.clock.day, agent.name, pool.houses)

        if is_tired(agent, town):
            agent.status = "Too tired to build"
            rest(agent, town)

    elif pool.wood < cfg.wood_to_build:
        agent.status = "Need more wood to build"
        if town.rng.random() < cfg.self_gather_chance:
            gather_wood(agent, town)
        else:
            agent.status = "Coordinating with gatherers"

    else:
        agent.status = "Maintaining buildings"
        agent.energy -= cfg.maintenance_energy


def gatherer_behavior(agent: Agent, town: Town) -> None:
    """Replenish whichever stockpile is below its watermark, wood first."""
    cfg = town.agent_config
    if town.pool.wood < cfg.wood_watermark:
        agent.status = "Gathering wood"
        gather_wood(agent, town)
    elif town.pool.food < cfg.food_watermark:
        agent.status = "Looking for food"
        find_food(agent, town)
    else:
        explore_behavior(agent, town, status="Exploring for new resources")


def farmer_behavior(agent: Agent, town: Town) -> None:
    cfg = town.agent_config
    agent.status = "Farming"
    agent.energy -= cfg.farm_energy

    if town.rng.random() < cfg.harvest_chance and agent.energy > cfg.harvest_min_energy:
        produced = town.rng.randint(cfg.harvest_min_yield, cfg.harvest_max_yield)
        town.pool.add(ResourceKind.FOOD, produced)
        agent.status = f"Harvested {produced} food"
        agent.remember(town.memory_record(f"Produced {produced} food", action="farming"))
        logger.debug("%s harvested %d food", agent.name, produced)

    if is_tired(agent, town):
        agent.status = "Too tired to farm"
        rest(agent, town)


def explore_behavior(agent: Agent, town: Town, status: str = "Exploring") -> None:
    agent.status = status
    if agent.target is None:
        agent.random_step(town.rng)


JOB_BEHAVIORS: dict[Job, Callable[[Agent, Town], None]] = {
    Job.BUILDER: builder_behavior,
    Job.GATHERER: gatherer_behavior,
    Job.FARMER: farmer_behavior,
    Job.EXPLORER: explore_behavior,
}
