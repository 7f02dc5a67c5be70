"""Shared resource pool - the town's wood, food and houses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ResourceKind(Enum):
    """Consumable stockpiles in the pool."""

    WOOD = "wood"
    FOOD = "food"


@dataclass
class ResourcePool:
    """
    Counters shared by every agent in the town.

    Increments are unguarded; decrements go through ``try_consume`` so the
    stockpiles never go negative.
    """

    wood: float = 0.0
    food: float = 0.0
    houses: int = 0

    def amount(self, kind: ResourceKind) -> float:
        """Get the current stock of a resource."""
        return getattr(self, kind.value)

    def add(self, kind: ResourceKind, amount: float) -> None:
        """Add to a stockpile."""
        setattr(self, kind.value, self.amount(kind) + amount)

    def try_consume(self, kind: ResourceKind, amount: float) -> bool:
        """
        Remove ``amount`` from a stockpile if there is enough.

        Returns:
            True if consumed, False (and no change) if the stock is insufficient

        Raises:
            ValueError: If ``amount`` is negative
        """
        if amount < 0:
            raise ValueError(f"cannot consume a negative amount of {kind.value}: {amount}")
        current = self.amount(kind)
        if amount > current:
            return False
        setattr(self, kind.value, current - amount)
        return True

    def add_house(self) -> None:
        """Record a completed house."""
        self.houses += 1

    def apply_daily_food_consumption(self, population: int, per_agent: float = 2.0) -> float:
        """
        Feed the population for one day.

        Returns:
            The food actually eaten (less than the demand when stocks run out)
        """
        demand = population * per_agent
        eaten = min(demand, self.food)
        self.food = max(0.0, self.food - demand)
        return eaten

    def snapshot(self) -> dict[str, float]:
        """Get a read-only copy of the counters."""
        return {"wood": self.wood, "food": self.food, "houses": self.houses}
