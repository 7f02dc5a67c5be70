from pixel_city.renderer import colors
from pixel_city.simulation import TileKind


def test_tile_colors_by_kind() -> None:
    assert colors.get_tile_color(TileKind.GRASS) == colors.GRASS_COLOR
    assert colors.get_tile_color(TileKind.WATER) == colors.WATER_COLOR
    assert colors.get_tile_color(TileKind.TREE, wood=5, max_wood=5) == colors.TREE_COLOR


def test_chopped_tree_fades_toward_grass() -> None:
    full = colors.get_tile_color(TileKind.TREE, wood=5, max_wood=5)
    chopped = colors.get_tile_color(TileKind.TREE, wood=1, max_wood=5)

    assert chopped != full
    assert chopped[1] > full[1]


def test_need_color_runs_green_to_red() -> None:
    assert colors.get_need_color(30, 30, 80) == (120, 200, 100)
    assert colors.get_need_color(80, 30, 80) == (220, 20, 60)
    assert colors.get_need_color(200, 30, 80) == (220, 20, 60)
