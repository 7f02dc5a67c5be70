"""Agent entity - a townsperson with a job and needs."""

from __future__ import annotations

import math
import random
from collections import deque
from dataclasses import dataclass, field
from enum import Enum

MEMORY_SIZE = 5


class Job(Enum):
    """Jobs an agent can hold. EXPLORER is the default with no work to do."""

    BUILDER = "Builder"
    GATHERER = "Gatherer"
    FARMER = "Farmer"
    EXPLORER = "Explorer"


WORKING_JOBS = (Job.BUILDER, Job.GATHERER, Job.FARMER)


@dataclass(frozen=True)
class MemoryRecord:
    """Something an agent did or talked about."""

    day: int
    time: str
    result: str
    with_whom: str | None = None
    topic: str | None = None
    action: str | None = None

    def describe(self) -> str:
        """One-line summary for display."""
        if self.with_whom:
            return f"{self.with_whom}: {self.result}"
        return self.result


@dataclass
class Agent:
    """
    A townsperson.

    Agents have:
    - A tile-space position (fractional while walking toward a target)
    - Needs: hunger rises and energy falls every update
    - A job that decides how they work the shared resources
    - A short memory of recent events (oldest forgotten first)
    """

    id: int
    name: str
    job: Job
    x: float
    y: float
    color: tuple[int, int, int] = (247, 37, 133)

    energy: float = 100.0
    hunger: float = 30.0
    status: str = "Exploring"
    target: tuple[int, int] | None = None
    building_progress: float | None = None
    memory: deque[MemoryRecord] = field(default_factory=lambda: deque(maxlen=MEMORY_SIZE))

    def __hash__(self) -> int:
        """Hash based on unique ID."""
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        """Equality based on unique ID."""
        if not isinstance(other, Agent):
            return NotImplemented
        return self.id == other.id

    @property
    def tile(self) -> tuple[int, int]:
        """The tile the agent is standing on."""
        return (math.floor(self.x), math.floor(self.y))

    @property
    def last_memory(self) -> MemoryRecord | None:
        """The most recent memory, if any."""
        return self.memory[-1] if self.memory else None

    def remember(self, record: MemoryRecord) -> None:
        """Store a memory, forgetting the oldest when full."""
        self.memory.append(record)

    def random_step(self, rng: random.Random) -> None:
        """Move up to one tile in a random direction on each axis."""
        self.x += rng.randint(-1, 1)
        self.y += rng.randint(-1, 1)

    def step_toward_target(self, step: float = 0.5, epsilon: float = 0.5) -> None:
        """
        Walk toward the current target.

        Each axis moves by ``step`` in the direction of the target
        independently. The target is cleared once both axes are within
        ``epsilon``.
        """
        if self.target is None:
            return

        dx = self.target[0] - self.x
        dy = self.target[1] - self.y

        if abs(dx) < epsilon and abs(dy) < epsilon:
            self.target = None
            return

        self.x += math.copysign(step, dx) if dx else 0.0
        self.y += math.copysign(step, dy) if dy else 0.0

    def clamp_to(self, width: int, height: int) -> None:
        """Keep the agent on the map."""
        self.x = max(0.0, min(width - 1, self.x))
        self.y = max(0.0, min(height - 1, self.y))
