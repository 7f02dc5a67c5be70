"""Tile map - the terrain grid agents walk on and harvest from."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum

import numpy as np
from noise import snoise2


class OutOfBoundsError(IndexError):
    """Raised when a tile coordinate lies outside the map."""

    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(f"tile ({x}, {y}) is outside the {width}x{height} map")
        self.x = x
        self.y = y


class TileKind(IntEnum):
    """Terrain types. Values are the codes stored in the kind grid."""

    GRASS = 0
    TREE = 1
    WATER = 2


@dataclass(frozen=True)
class TileCell:
    """Snapshot of a single map cell."""

    kind: TileKind
    wood_remaining: int = 0


class TileMap:
    """
    Fixed-size grid of terrain cells.

    Cells are stored as two numpy arrays indexed ``[y, x]``: the tile kind code
    and the wood left in each tree. Only trees carry wood; a tree whose wood
    runs out turns into grass.
    """

    def __init__(self, width: int, height: int, tree_search: str = "scan"):
        """
        Initialize an all-grass map.

        Args:
            width: Map width in tiles
            height: Map height in tiles
            tree_search: "scan" returns the first tree in row-major order,
                "nearest" returns the tree closest to the searching agent
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"map dimensions must be positive, got {width}x{height}")
        if tree_search not in ("scan", "nearest"):
            raise ValueError(f"unknown tree search mode: {tree_search!r}")

        self.width = width
        self.height = height
        self.tree_search = tree_search
        self.kinds = np.full((height, width), TileKind.GRASS, dtype=np.int8)
        self.wood = np.zeros((height, width), dtype=np.int16)

    @classmethod
    def filled(cls, width: int, height: int, kind: TileKind = TileKind.GRASS,
               wood: int = 0, tree_search: str = "scan") -> TileMap:
        """Create a map where every cell has the same kind."""
        tile_map = cls(width, height, tree_search=tree_search)
        tile_map.kinds[:, :] = kind
        if kind == TileKind.TREE:
            tile_map.wood[:, :] = wood
        return tile_map

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if a tile coordinate lies on the map."""
        return 0 <= x < self.width and 0 <= y < self.height

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)

    def cell_at(self, x: int, y: int) -> TileCell:
        """Get the cell at a tile coordinate."""
        self._check_bounds(x, y)
        return TileCell(TileKind(int(self.kinds[y, x])), int(self.wood[y, x]))

    def set_cell(self, x: int, y: int, kind: TileKind, wood: int = 0) -> None:
        """
        Overwrite a cell.

        A tree set with no wood is stored as grass, and wood on non-tree cells
        is dropped.
        """
        self._check_bounds(x, y)
        if kind == TileKind.TREE and wood <= 0:
            kind = TileKind.GRASS
        self.kinds[y, x] = kind
        self.wood[y, x] = wood if kind == TileKind.TREE else 0

    def harvest_wood(self, x: int, y: int) -> int:
        """
        Take one unit of wood from a tree.

        Returns:
            1 if wood was harvested, 0 if the cell has no wood to give
        """
        self._check_bounds(x, y)
        if self.kinds[y, x] != TileKind.TREE or self.wood[y, x] <= 0:
            return 0

        self.wood[y, x] -= 1
        if self.wood[y, x] == 0:
            self.kinds[y, x] = TileKind.GRASS
        return 1

    def all_cells_of_kind(self, kind: TileKind) -> list[tuple[int, int]]:
        """Get every (x, y) of the given kind in row-major order."""
        return [(int(x), int(y)) for y, x in np.argwhere(self.kinds == kind)]

    def count(self, kind: TileKind) -> int:
        """Count cells of the given kind."""
        return int(np.count_nonzero(self.kinds == kind))

    def find_nearest_tree_from(self, origin: tuple[float, float]) -> tuple[int, int] | None:
        """
        Find a tree for an agent standing at ``origin``.

        In "scan" mode the first tree in row-major order wins regardless of
        origin. In "nearest" mode the closest tree wins, ties going to the
        earlier tree in scan order.
        """
        trees = np.argwhere(self.kinds == TileKind.TREE)
        if len(trees) == 0:
            return None

        if self.tree_search == "scan":
            y, x = trees[0]
            return (int(x), int(y))

        dx = trees[:, 1] - origin[0]
        dy = trees[:, 0] - origin[1]
        y, x = trees[int(np.argmin(dx * dx + dy * dy))]
        return (int(x), int(y))

    def generate(
        self,
        rng: random.Random,
        style: str = "scatter",
        tree_wood: int = 5,
        water_share: float = 0.1,
        tree_share: float = 0.2,
    ) -> None:
        """
        Fill the map with terrain.

        Args:
            rng: Random source used for every draw
            style: "scatter" draws each tile independently, "noise" clusters
                water and trees using simplex noise
            tree_wood: Wood in each generated tree
            water_share: Fraction of tiles that become water
            tree_share: Fraction of tiles that become trees
        """
        if style == "scatter":
            self._generate_scatter(rng, water_share, tree_share)
        elif style == "noise":
            self._generate_noise(rng, water_share, tree_share)
        else:
            raise ValueError(f"unknown terrain style: {style!r}")

        self.wood[:, :] = np.where(self.kinds == TileKind.TREE, tree_wood, 0)

    def _generate_scatter(self, rng: random.Random, water_share: float, tree_share: float) -> None:
        """Weighted draw per tile in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                roll = rng.random()
                if roll < water_share:
                    self.kinds[y, x] = TileKind.WATER
                elif roll < water_share + tree_share:
                    self.kinds[y, x] = TileKind.TREE
                else:
                    self.kinds[y, x] = TileKind.GRASS

    def _generate_noise(self, rng: random.Random, water_share: float, tree_share: float) -> None:
        """Clustered lakes and forests from two simplex noise layers."""
        scale = 0.12
        water_offset = rng.uniform(0, 1000)
        forest_offset = rng.uniform(0, 1000)

        wetness = np.zeros((self.height, self.width), dtype=np.float32)
        forest = np.zeros((self.height, self.width), dtype=np.float32)
        for y in range(self.height):
            for x in range(self.width):
                wetness[y, x] = snoise2(x * scale + water_offset, y * scale + water_offset, octaves=2)
                forest[y, x] = snoise2(x * scale + forest_offset, y * scale + forest_offset, octaves=2)

        self.kinds[:, :] = TileKind.GRASS

        # Lowest-lying share of tiles becomes water
        water_mask = wetness <= np.quantile(wetness, water_share) if water_share > 0 else np.zeros_like(wetness, dtype=bool)
        self.kinds[water_mask] = TileKind.WATER

        # Densest share of the remaining land becomes forest
        land = ~water_mask
        land_share = 1.0 - water_share
        if tree_share > 0 and land.any() and land_share > 0:
            cutoff = np.quantile(forest[land], 1.0 - min(1.0, tree_share / land_share))
            self.kinds[land & (forest >= cutoff)] = TileKind.TREE
