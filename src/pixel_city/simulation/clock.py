"""In-game clock and the frame-based event queue."""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable


@dataclass
class Clock:
    """Time of day in minutes plus a day counter."""

    day: int = 1
    time: int = 480
    speed: int = 1
    minutes_per_day: int = 1440

    def advance(self) -> bool:
        """
        Move time forward by ``speed`` minutes.

        Returns:
            True if a new day started
        """
        self.time += self.speed
        if self.time >= self.minutes_per_day:
            self.time = 0
            self.day += 1
            return True
        return False

    @property
    def time_string(self) -> str:
        """Time of day as HH:MM."""
        hours, minutes = divmod(self.time, 60)
        return f"{hours:02d}:{minutes:02d}"


@dataclass(order=True)
class ScheduledEvent:
    """A callback due at a given frame."""

    fire_at: int
    seq: int
    callback: Callable[[], None] = field(compare=False)
    cancelled: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        """Prevent the callback from running."""
        self.cancelled = True


class EventQueue:
    """Deferred callbacks ordered by due frame, then by scheduling order."""

    def __init__(self) -> None:
        self._heap: list[ScheduledEvent] = []
        self._counter = itertools.count()
        self.now = 0

    def schedule(self, delay: int, callback: Callable[[], None]) -> ScheduledEvent:
        """Run ``callback`` ``delay`` frames from now."""
        event = ScheduledEvent(self.now + max(0, delay), next(self._counter), callback)
        heapq.heappush(self._heap, event)
        return event

    def process(self, now: int) -> int:
        """
        Fire every event due at or before ``now``.

        Returns:
            Number of callbacks run
        """
        self.now = now
        fired = 0
        while self._heap and self._heap[0].fire_at <= now:
            event = heapq.heappop(self._heap)
            if event.cancelled:
                continue
            event.callback()
            fired += 1
        return fired

    def __len__(self) -> int:
        """Number of pending (not cancelled) events."""
        return sum(1 for event in self._heap if not event.cancelled)
