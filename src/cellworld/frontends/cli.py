"""Command-line frontends that animate an automaton in the terminal."""

import argparse
import sys
import time
from typing import Callable, List, Optional, TextIO

from ..core.automaton import Automaton, create_ecosystem, create_life
from ..core.config import COLLISION_POLICIES, LAST_WRITER_WINS, EcosystemConfig, LifeConfig
from ..core.patterns import PatternLibrary

CLEAR_SCREEN = "\033[2J\033[H"
EXTINCTION_MESSAGE = "The universe is dead."

# width height sheep wolves steps delay_ms
ECOSYSTEM_DEFAULTS = (20, 10, 10, 5, 100, 100)
LIFE_DEFAULT_SIZE = 20
DEFAULT_STEPS = 100
DEFAULT_DELAY_MS = 100


def run_loop(
    automaton: Automaton,
    steps: int,
    delay_ms: int,
    stream: Optional[TextIO] = None,
    sleep: Callable[[float], None] = time.sleep,
    clear: bool = True,
) -> int:
    """Draw, step and wait, ``steps`` times.

    Automata that halt on extinction stop early and print a notice instead
    of the frame.

    Args:
        automaton: Simulation to animate
        steps: Maximum number of frames
        delay_ms: Pause after every frame in milliseconds
        stream: Output stream (stdout by default)
        sleep: Sleep function, taking seconds
        clear: Clear the terminal before every frame

    Returns:
        Number of frames drawn
    """
    stream = stream or sys.stdout
    frames = 0
    for _ in range(steps):
        if clear:
            stream.write(CLEAR_SCREEN)
        if automaton.halts_on_extinction and not automaton.is_alive():
            print(EXTINCTION_MESSAGE, file=stream)
            break
        stream.write(automaton.grid.render())
        stream.flush()
        automaton.step()
        frames += 1
        sleep(max(delay_ms, 0) / 1000.0)
        print(file=stream)
    return frames


def parse_ecosystem_values(values: List[str]) -> tuple:
    """Turn positional arguments into (width, height, sheep, wolves, steps, delay_ms).

    Anything other than exactly six integers silently yields the defaults.
    """
    if len(values) != len(ECOSYSTEM_DEFAULTS):
        return ECOSYSTEM_DEFAULTS
    try:
        return tuple(int(value) for value in values)
    except ValueError:
        return ECOSYSTEM_DEFAULTS


def create_ecosystem_parser() -> argparse.ArgumentParser:
    """Create the predator/prey argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="cellworld-ecosystem",
        description="Animate a sheep/wolf/grass ecosystem in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Positional arguments are all-or-nothing: give all six or none.

Examples:
  # Default 20x10 world with 10 sheep and 5 wolves
  cellworld-ecosystem

  # 40x20 world, 30 sheep, 8 wolves, 200 steps, 50 ms per frame
  cellworld-ecosystem 40 20 30 8 200 50

  # Reproducible run where collisions keep the first arrival
  cellworld-ecosystem --seed 7 --collision first-come
        """,
    )

    parser.add_argument(
        "values",
        nargs="*",
        metavar="N",
        help="width height num_sheep num_wolves steps delay_ms",
    )

    parser.add_argument("--seed", type=int, help="Random seed for a reproducible run")

    parser.add_argument(
        "--collision",
        choices=COLLISION_POLICIES,
        default=LAST_WRITER_WINS,
        help="How two animals moving onto one cell are resolved (default: last-writer-wins)",
    )

    parser.add_argument("--no-clear", action="store_true", help="Do not clear the terminal between frames")

    parser.add_argument("-v", "--verbose", action="store_true", help="Print a summary when the run ends")

    return parser


def create_life_parser() -> argparse.ArgumentParser:
    """Create the Game of Life argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="cellworld-life",
        description="Animate Conway's Game of Life in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 20x20 random grid
  cellworld-life

  # 30x30 grid
  cellworld-life 30

  # 60x25 grid seeded with a glider
  cellworld-life 60 25 --pattern Glider
        """,
    )

    parser.add_argument("size", nargs="*", type=int, metavar="N", help="[size] or [width height]")

    parser.add_argument("--pattern", type=str, help="Start from a named pattern instead of random cells")

    parser.add_argument(
        "--density",
        type=float,
        default=LifeConfig.density,
        help=f"Initial random population rate 0.0-1.0 (default: {LifeConfig.density})",
    )

    parser.add_argument(
        "--steps",
        type=int,
        default=DEFAULT_STEPS,
        help=f"Number of generations to show (default: {DEFAULT_STEPS})",
    )

    parser.add_argument(
        "--delay",
        type=int,
        default=DEFAULT_DELAY_MS,
        help=f"Milliseconds between frames (default: {DEFAULT_DELAY_MS})",
    )

    parser.add_argument("--seed", type=int, help="Random seed for a reproducible run")

    parser.add_argument("--no-clear", action="store_true", help="Do not clear the terminal between frames")

    parser.add_argument("--list-patterns", action="store_true", help="List available patterns and exit")

    parser.add_argument("-v", "--verbose", action="store_true", help="Print a summary when the run ends")

    return parser


def validate_life_args(args: argparse.Namespace) -> bool:
    """Validate Game of Life arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if any(value <= 0 for value in args.size):
        errors.append("Grid size must be positive")

    if not 0.0 <= args.density <= 1.0:
        errors.append("Density must be between 0.0 and 1.0")

    if args.steps < 0:
        errors.append("Steps must be non-negative")

    if args.delay < 0:
        errors.append("Delay must be non-negative")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def list_patterns() -> None:
    """List built-in Game of Life patterns."""
    library = PatternLibrary()
    print("Available patterns:")
    for name in library.list_patterns():
        pattern = library.get_pattern(name)
        width, height = pattern.get_size()
        print(f"  {name}: {width}x{height}, {len(pattern.cells)} cells")
        if pattern.description:
            print(f"    {pattern.description}")


def print_summary(automaton: Automaton) -> None:
    """Print end-of-run statistics."""
    stats = automaton.get_statistics()
    print(f"Generation: {stats['generation']}")
    print(f"Population: {stats['population']} ({stats['population_density']:.1%} of cells)")
    for kind, count in stats["census"].items():
        print(f"  {kind}: {count}")
    if stats.get("cycle_detected"):
        print(f"Cycle detected: length {stats['cycle_length']} from generation {stats['cycle_start_generation']}")


def ecosystem_main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the predator/prey ecosystem.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_ecosystem_parser()
    args = parser.parse_args(argv)

    width, height, num_sheep, num_wolves, steps, delay_ms = parse_ecosystem_values(args.values)

    try:
        config = EcosystemConfig(collision=args.collision)
        automaton = create_ecosystem(width, height, num_sheep, num_wolves, config=config, seed=args.seed)
        run_loop(automaton, steps, delay_ms, clear=not args.no_clear)
        if args.verbose:
            print_summary(automaton)
        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


def life_main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the Game of Life.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_life_parser()
    args = parser.parse_args(argv)

    if args.list_patterns:
        list_patterns()
        return 0

    if len(args.size) > 2:
        parser.print_usage()
        return 1

    if not validate_life_args(args):
        return 1

    if len(args.size) == 2:
        width, height = args.size
    elif len(args.size) == 1:
        width = height = args.size[0]
    else:
        width = height = LIFE_DEFAULT_SIZE

    try:
        automaton = create_life(
            width,
            height,
            config=LifeConfig(density=args.density),
            pattern=args.pattern,
            seed=args.seed,
        )
        if args.verbose:
            source = f"pattern '{args.pattern}'" if args.pattern else f"random cells (rate: {args.density:.2%})"
            print(f"Initializing {width}x{height} grid from {source}")
        run_loop(automaton, args.steps, args.delay, clear=not args.no_clear)
        if args.verbose:
            print_summary(automaton)
        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(ecosystem_main())
