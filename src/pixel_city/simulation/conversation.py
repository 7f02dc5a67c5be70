"""Conversations - short exchanges between neighbouring agents."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from ..config import ConversationConfig
from .agent import Agent, Job
from .resources import ResourceKind

if TYPE_CHECKING:
    from .town import Town

logger = logging.getLogger(__name__)


class Topic(Enum):
    """Things agents talk about."""

    ASK_FOR_FOOD = "ask_for_food"
    ASK_FOR_WOOD = "ask_for_wood"
    COMPLAIN = "complain"
    DISCUSS_HOUSING = "discuss_housing"
    GREETING = "greeting"
    DISCUSS_WEATHER = "discuss_weather"
    SHARE_STORY = "share_story"


SMALL_TALK = (Topic.GREETING, Topic.DISCUSS_WEATHER, Topic.SHARE_STORY)


class ConversationEngine:
    """
    Picks a partner and a topic for an agent and resolves the exchange.

    Only the speaking agent changes: its needs may shift, the exchange is
    written to its memory and its status reads "Talking to X" until a revert
    scheduled on the town's event queue restores the previous status.
    """

    def __init__(self, config: ConversationConfig):
        self.config = config

    def find_partners(self, agent: Agent, agents: list[Agent]) -> list[Agent]:
        """Agents closer than ``radius`` tiles on both axes, in registry order."""
        radius = self.config.radius
        return [
            other for other in agents
            if other.id != agent.id
            and abs(other.x - agent.x) < radius
            and abs(other.y - agent.y) < radius
        ]

    def candidate_topics(self, agent: Agent, town: Town) -> list[Topic]:
        """Topics that fit the agent's situation, or small talk if none do."""
        cfg = self.config
        pool = town.pool
        topics: list[Topic] = []

        if agent.hunger > cfg.peckish_threshold and pool.food > cfg.ask_food_min_pool:
            topics.append(Topic.ASK_FOR_FOOD)
        if agent.job == Job.BUILDER and pool.wood < cfg.ask_wood_below:
            topics.append(Topic.ASK_FOR_WOOD)
        if (agent.hunger > town.agent_config.hungry_threshold
                or agent.energy < town.agent_config.tired_threshold):
            topics.append(Topic.COMPLAIN)
        if pool.houses > 0:
            topics.append(Topic.DISCUSS_HOUSING)

        return topics or list(SMALL_TALK)

    def resolve(self, topic: Topic, agent: Agent, other: Agent, town: Town) -> str:
        """Apply the topic's effect and describe the outcome."""
        cfg = self.config
        pool = town.pool

        if topic == Topic.ASK_FOR_FOOD:
            if pool.food > cfg.share_food_min_pool and pool.try_consume(ResourceKind.FOOD, cfg.share_food_amount):
                agent.hunger = max(0.0, agent.hunger - cfg.share_hunger_relief)
                return f"{other.name} shared food. Hunger -{cfg.share_hunger_relief:g}"
            return f"{other.name} has no food to share"

        if topic == Topic.ASK_FOR_WOOD:
            if pool.wood > cfg.wood_available_above:
                return f"{other.name} will gather more wood"
            return "No wood available"

        if topic == Topic.COMPLAIN:
            agent.energy += cfg.complain_energy
            return "Felt better after complaining"

        if topic == Topic.DISCUSS_HOUSING:
            if other.job == Job.BUILDER:
                return "Discussed new house designs"
            return "Talked about living conditions"

        if topic == Topic.DISCUSS_WEATHER:
            return "Discussed the weather"

        if topic == Topic.SHARE_STORY:
            return f"Shared a story from day {town.rng.randint(1, town.clock.day)}"

        return "Said hello"

    def converse(self, agent: Agent, town: Town) -> Topic | None:
        """
        Have ``agent`` talk to a random neighbour.

        Returns:
            The topic discussed, or None if nobody was close enough
        """
        partners = self.find_partners(agent, town.agents)
        if not partners:
            return None

        other = town.rng.choice(partners)
        topic = town.rng.choice(self.candidate_topics(agent, town))

        previous_status = agent.status
        talking_status = f"Talking to {other.name}"
        agent.status = talking_status

        result = self.resolve(topic, agent, other, town)
        agent.remember(town.memory_record(result, with_whom=other.name, topic=topic.value))
        logger.debug("%s talked to %s (%s): %s", agent.name, other.name, topic.value, result)

        def revert_status() -> None:
            if agent.status == talking_status:
                agent.status = previous_status

        town.events.schedule(self.config.revert_delay_frames, revert_status)
        return topic
