import random

import numpy as np
import pytest

from pixel_city.simulation import OutOfBoundsError, TileCell, TileKind, TileMap


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (10, 0), (0, 5)])
def test_cell_at_rejects_out_of_bounds(x: int, y: int) -> None:
    tile_map = TileMap(10, 5)

    with pytest.raises(OutOfBoundsError):
        tile_map.cell_at(x, y)


def test_out_of_bounds_is_an_index_error() -> None:
    tile_map = TileMap(3, 3)

    with pytest.raises(IndexError):
        tile_map.harvest_wood(3, 3)


def test_invalid_dimensions_rejected() -> None:
    with pytest.raises(ValueError):
        TileMap(0, 5)


def test_harvest_counts_down_then_turns_to_grass() -> None:
    tile_map = TileMap(4, 4)
    tile_map.set_cell(2, 1, TileKind.TREE, wood=3)

    remaining = []
    for _ in range(3):
        assert tile_map.harvest_wood(2, 1) == 1
        remaining.append(tile_map.cell_at(2, 1).wood_remaining)

    assert remaining == [2, 1, 0]
    assert tile_map.cell_at(2, 1) == TileCell(TileKind.GRASS, 0)

    # Depleted tree is plain grass now
    assert tile_map.harvest_wood(2, 1) == 0
    assert tile_map.cell_at(2, 1) == TileCell(TileKind.GRASS, 0)


@pytest.mark.parametrize("kind", [TileKind.GRASS, TileKind.WATER])
def test_harvest_non_tree_is_noop(kind: TileKind) -> None:
    tile_map = TileMap.filled(3, 3, kind)

    assert tile_map.harvest_wood(1, 1) == 0
    assert tile_map.cell_at(1, 1).kind == kind


def test_set_cell_keeps_wood_only_on_trees() -> None:
    tile_map = TileMap(3, 3)

    tile_map.set_cell(0, 0, TileKind.TREE, wood=0)
    tile_map.set_cell(1, 0, TileKind.WATER, wood=4)

    assert tile_map.cell_at(0, 0) == TileCell(TileKind.GRASS, 0)
    assert tile_map.cell_at(1, 0) == TileCell(TileKind.WATER, 0)


def test_tree_search_scan_order_ignores_origin() -> None:
    tile_map = TileMap(8, 8)
    tile_map.set_cell(5, 0, TileKind.TREE, wood=5)
    tile_map.set_cell(1, 1, TileKind.TREE, wood=5)

    assert tile_map.find_nearest_tree_from((1.0, 2.0)) == (5, 0)


def test_tree_search_nearest_picks_closest() -> None:
    tile_map = TileMap(8, 8, tree_search="nearest")
    tile_map.set_cell(5, 0, TileKind.TREE, wood=5)
    tile_map.set_cell(1, 1, TileKind.TREE, wood=5)

    assert tile_map.find_nearest_tree_from((1.0, 2.0)) == (1, 1)


def test_tree_search_nearest_breaks_ties_in_scan_order() -> None:
    tile_map = TileMap(5, 5, tree_search="nearest")
    tile_map.set_cell(2, 0, TileKind.TREE, wood=1)
    tile_map.set_cell(0, 0, TileKind.TREE, wood=1)

    assert tile_map.find_nearest_tree_from((1.0, 0.0)) == (0, 0)


def test_tree_search_without_trees() -> None:
    assert TileMap(4, 4).find_nearest_tree_from((0.0, 0.0)) is None


def test_unknown_tree_search_rejected() -> None:
    with pytest.raises(ValueError):
        TileMap(4, 4, tree_search="closest")


def test_all_cells_of_kind_row_major() -> None:
    tile_map = TileMap.filled(3, 2, TileKind.WATER)
    tile_map.set_cell(2, 0, TileKind.GRASS)
    tile_map.set_cell(0, 1, TileKind.GRASS)
    tile_map.set_cell(1, 1, TileKind.GRASS)

    assert tile_map.all_cells_of_kind(TileKind.GRASS) == [(2, 0), (0, 1), (1, 1)]
    assert tile_map.count(TileKind.WATER) == 3


def test_scatter_generation_is_seeded() -> None:
    first = TileMap(30, 20)
    second = TileMap(30, 20)

    first.generate(random.Random(42))
    second.generate(random.Random(42))

    assert np.array_equal(first.kinds, second.kinds)
    assert np.array_equal(first.wood, second.wood)


def test_scatter_generation_proportions_and_wood() -> None:
    tile_map = TileMap(100, 100)
    tile_map.generate(random.Random(3), tree_wood=5)

    assert 800 <= tile_map.count(TileKind.WATER) <= 1200
    assert 1700 <= tile_map.count(TileKind.TREE) <= 2300

    trees = tile_map.kinds == TileKind.TREE
    assert (tile_map.wood[trees] == 5).all()
    assert (tile_map.wood[~trees] == 0).all()


def test_noise_generation_clusters_same_shares() -> None:
    tile_map = TileMap(50, 25)
    tile_map.generate(random.Random(11), style="noise")

    assert 100 <= tile_map.count(TileKind.WATER) <= 150
    assert 200 <= tile_map.count(TileKind.TREE) <= 300


def test_unknown_terrain_style_rejected() -> None:
    with pytest.raises(ValueError):
        TileMap(5, 5).generate(random.Random(0), style="islands")
