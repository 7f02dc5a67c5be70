"""Main entry point for the Pixel City simulation."""

import logging

from .config import Config
from .renderer import PygameRenderer
from .simulation import TileKind, Town


def main() -> None:
    """Run the town simulation."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    # Load configuration
    config = Config.default()

    # Create town
    town = Town(config.town, config.agent, config.conversation)
    town.initialize()

    # Create renderer
    renderer = PygameRenderer(config.renderer, town.tile_map.width, town.tile_map.height)
    renderer.set_town(town)

    print("Starting Pixel City simulation...")
    print(f"  Seed: {town.seed}")
    print(f"  Population: {town.population}")
    print(f"  Map: {town.tile_map.width}x{town.tile_map.height} ({config.town.terrain_style})")
    print(f"  Trees: {town.tile_map.count(TileKind.TREE)}, water tiles: {town.tile_map.count(TileKind.WATER)}")
    print(f"  Wood: {town.pool.wood:.0f}, food: {town.pool.food:.0f}")
    print()
    print("Controls:")
    print("  - Click 'Pause'/'Run' or press SPACE to pause and resume")
    print("  - Use 1x/2x to change how fast the day passes")
    print(f"  - Click 'Add Agent' to welcome a newcomer (up to {config.town.max_agents})")
    print("  - ESC to quit")
    print()

    # Main loop
    running = True
    while running:
        running = renderer.handle_events()
        town.step()
        renderer.render(town)
        renderer.tick()

    renderer.cleanup()
    print(f"Simulation ended on day {town.clock.day} with {town.pool.houses} houses.")


if __name__ == "__main__":
    main()
