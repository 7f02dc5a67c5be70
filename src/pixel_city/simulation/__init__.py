"""Simulation module - pure logic, no rendering."""

from .agent import Agent, Job, MemoryRecord
from .clock import Clock, EventQueue, ScheduledEvent
from .conversation import ConversationEngine, Topic
from .resources import ResourceKind, ResourcePool
from .tilemap import OutOfBoundsError, TileCell, TileKind, TileMap
from .town import StatsHistory, Town, TownStats

__all__ = [
    "Agent",
    "Clock",
    "ConversationEngine",
    "EventQueue",
    "Job",
    "MemoryRecord",
    "OutOfBoundsError",
    "ResourceKind",
    "ResourcePool",
    "ScheduledEvent",
    "StatsHistory",
    "TileCell",
    "TileKind",
    "TileMap",
    "Topic",
    "Town",
    "TownStats",
]
