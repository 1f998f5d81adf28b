#!/usr/bin/env python3
"""
Example usage of the cellworld package.
"""

from cellworld import EcosystemConfig, create_ecosystem, create_life


def main():
    """Demonstrate programmatic usage of the cellworld package."""
    # A small seeded ecosystem, run headless
    world = create_ecosystem(30, 12, 20, 4, config=EcosystemConfig(), seed=42)

    print("Initial state:")
    print(world.grid)
    print(f"Sheep: {world.sheep}, wolves: {world.wolves}")
    print()

    for _ in range(10):
        world.step()
        if not world.is_alive():
            print(f"Extinct at generation {world.generation}")
            break

    print(f"Generation {world.generation}:")
    print(world.grid)
    print(f"Sheep: {world.sheep}, wolves: {world.wolves}")
    print()

    # A glider in the Game of Life, run until it settles or leaves the grid
    game = create_life(12, 12, pattern="Glider")
    final_generation, reason = game.run(max_generations=200)
    print(f"Glider finished after {final_generation} generations ({reason})")

    stats = game.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
