"""Color definitions for the renderer."""

from ..simulation.tilemap import TileKind

# Background
BG_DARK = (28, 28, 32)
BG_SIDEBAR = (38, 38, 45)
BG_PANEL = (32, 33, 40)

# Terrain
GRASS_COLOR = (74, 222, 128)
TREE_COLOR = (45, 106, 79)
TREE_TRUNK = (27, 67, 50)
WATER_COLOR = (67, 97, 238)
WATER_RIPPLE = (72, 149, 239)

TILE_COLORS = {
    TileKind.GRASS: GRASS_COLOR,
    TileKind.TREE: TREE_COLOR,
    TileKind.WATER: WATER_COLOR,
}

# Houses
HOUSE_WALL = (141, 153, 174)
HOUSE_ROOF = (108, 117, 125)
HOUSE_DOOR = (90, 24, 154)

# Agents
AGENT_EYES = (255, 255, 255)
HUNGER_MARK = (255, 0, 0)

# UI
TEXT_PRIMARY = (240, 240, 245)
TEXT_SECONDARY = (160, 160, 170)
TEXT_ACCENT = (100, 200, 255)
DIVIDER = (60, 60, 70)


def lerp_color(
    color1: tuple[int, int, int],
    color2: tuple[int, int, int],
    t: float,
) -> tuple[int, int, int]:
    """Linearly interpolate between two colors."""
    t = max(0.0, min(1.0, t))
    return (
        int(color1[0] + (color2[0] - color1[0]) * t),
        int(color1[1] + (color2[1] - color1[1]) * t),
        int(color1[2] + (color2[2] - color1[2]) * t),
    )


def get_tile_color(kind: TileKind, wood: int = 0, max_wood: int = 5) -> tuple[int, int, int]:
    """
    Get the color for a tile.

    Trees fade toward grass as they are chopped down.
    """
    if kind == TileKind.TREE and max_wood > 0:
        return lerp_color(GRASS_COLOR, TREE_COLOR, 0.5 + 0.5 * wood / max_wood)
    return TILE_COLORS[kind]


def get_need_color(value: float, low: float, high: float) -> tuple[int, int, int]:
    """Green when ``value`` is at ``low``, red at ``high``."""
    t = (value - low) / (high - low) if high != low else 0.0
    return lerp_color((120, 200, 100), (220, 20, 60), t)
