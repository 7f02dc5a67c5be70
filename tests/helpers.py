from __future__ import annotations

import random

from pixel_city.config import TownConfig
from pixel_city.simulation import TileMap, Town


class StubRandom(random.Random):
    """Random source whose ``random()`` always returns the same draw."""

    def __init__(self, value: float, seed: int = 0) -> None:
        super().__init__(seed)
        self.value = value

    def random(self) -> float:
        return self.value


def make_town(
    tile_map: TileMap,
    rng: random.Random | None = None,
    **overrides,
) -> Town:
    """Town on a hand-built map, with no founders spawned."""
    overrides.setdefault("seed", 7)
    config = TownConfig(map_width=tile_map.width, map_height=tile_map.height, **overrides)
    return Town(config, rng=rng, tile_map=tile_map)
