import pytest

from helpers import make_town
from pixel_city.config import TownConfig
from pixel_city.simulation import TileKind, TileMap, Town


@pytest.fixture
def grass_map() -> TileMap:
    return TileMap.filled(10, 10, TileKind.GRASS)


@pytest.fixture
def town(grass_map: TileMap) -> Town:
    return make_town(grass_map)


@pytest.fixture
def seeded_town() -> Town:
    town = Town(TownConfig(seed=1234))
    town.initialize()
    return town
