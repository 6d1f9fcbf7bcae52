"""Command-line interface for Conway's Game of Life."""

import argparse
import sys
import time
from typing import Dict, Tuple

from ..core.grid import Grid
from ..core.game import Simulation, DEFAULT_ALIVE_PROBABILITY
from ..core.config import SimulationConfig
from ..core.entropy import EntropyError, generate_random


class CLIGameOfLife:
    """Command-line interface for running Game of Life simulations."""

    def run_simulation(self, config: SimulationConfig, verbose: bool = False) -> Tuple[str, Dict]:
        """Run a simulation and collect its transcript.

        Args:
            config: Simulation parameters
            verbose: Print progress updates

        Returns:
            Tuple of (transcript, statistics)
        """
        if verbose:
            print(f"Initializing {config.width}x{config.height} grid")
            print(f"Generating random population (rate: {config.alive_probability:.2%})")
            if config.seed is not None:
                print(f"Using seed {config.seed}")

        grid = Grid.new_random(config.width, config.height, config.alive_probability, seed=config.seed)
        simulation = Simulation(grid, vectorized=config.vectorized)
        initial_population = simulation.population

        if verbose:
            print(f"Initial population: {initial_population} cells")
            print(f"Running {config.generations} generations...")

        start_time = time.time()
        transcript = simulation.run(config.generations)
        duration = time.time() - start_time

        stats = simulation.get_statistics()
        stats["initial_population"] = initial_population
        stats["duration_seconds"] = duration
        stats["generations_per_second"] = config.generations / duration if duration > 0 else 0

        return transcript, stats

    def print_random_bytes(self) -> None:
        """Print 32 secure random bytes as hex."""
        print(generate_random().hex())


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Print the generations of a randomly seeded Game of Life grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run a 10x10 grid for 10 generations
  gridlife-cli

  # Run a 40x20 grid for 100 generations with 25% population
  gridlife-cli -W 40 -H 20 -n 100 -p 0.25

  # Reproducible run with statistics
  gridlife-cli --seed 42 --stats

  # Print 32 secure random bytes
  gridlife-cli --random-bytes
        """,
    )

    # Grid configuration
    parser.add_argument("-W", "--width", type=int, default=10, help="Grid width (default: 10)")

    parser.add_argument("-H", "--height", type=int, default=10, help="Grid height (default: 10)")

    parser.add_argument(
        "-p",
        "--population",
        type=float,
        default=DEFAULT_ALIVE_PROBABILITY,
        help=f"Initial random population rate 0.0-1.0 (default: {DEFAULT_ALIVE_PROBABILITY})",
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for a reproducible initial grid",
    )

    # Simulation configuration
    parser.add_argument(
        "-n",
        "--generations",
        type=int,
        default=10,
        help="Number of generations to simulate (default: 10)",
    )

    parser.add_argument(
        "--vectorized",
        action="store_true",
        help="Count neighbors with a single convolution per generation",
    )

    # Output configuration
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print detailed progress information",
    )

    parser.add_argument(
        "-s",
        "--stats",
        action="store_true",
        help="Print simulation statistics after the transcript",
    )

    parser.add_argument(
        "--random-bytes",
        action="store_true",
        help="Print 32 secure random bytes as hex and exit",
    )

    return parser


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    """Build a simulation configuration from parsed arguments."""
    return SimulationConfig(
        width=args.width,
        height=args.height,
        generations=args.generations,
        alive_probability=args.population,
        seed=args.seed,
        vectorized=getattr(args, "vectorized", False),
    )


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = config_from_args(args).validate()

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def format_cycle(stats: Dict) -> str:
    """Describe the cycle state of a finished simulation."""
    if not stats.get("cycle_detected"):
        return "No cycle detected"

    length = stats.get("cycle_length", 0)
    start = stats.get("cycle_start_generation", 0)
    if length == 1:
        return f"Still life since generation {start}"
    return f"Cycle detected (length {length}, starting at generation {start})"


def print_results(stats: Dict, verbose: bool) -> None:
    """Print simulation statistics.

    Args:
        stats: Statistics from CLIGameOfLife.run_simulation
        verbose: Whether to print detailed statistics
    """
    print(f"\nSimulation completed after {stats['generation']} generations")
    print(format_cycle(stats))

    if verbose:
        print("\nDetailed Statistics:")
        print(f"  Grid size: {stats['grid_size'][0]}x{stats['grid_size'][1]}")
        print(f"  Initial population: {stats['initial_population']}")
        print(f"  Final population: {stats['population']}")
        print(f"  Population density: {stats['population_density']:.2%}")
        print(f"  Population change rate: {stats['population_change_rate']:.2f}")
        print(f"  Duration: {stats['duration_seconds']:.3f} seconds")
        print(f"  Speed: {stats['generations_per_second']:.0f} generations/second")
    else:
        initial_pop = stats["initial_population"]
        final_pop = stats["population"]
        duration = stats["duration_seconds"]
        speed = stats["generations_per_second"]
        print(
            "Population: {} → {}, "
            "Duration: {:.3f}s, "
            "Speed: {:.0f} gen/s".format(initial_pop, final_pop, duration, speed)
        )


def main() -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args()

    cli = CLIGameOfLife()

    if args.random_bytes:
        try:
            cli.print_random_bytes()
        except EntropyError as e:
            print(f"Error: {e}")
            return 1
        return 0

    if not validate_args(args):
        return 1

    try:
        transcript, stats = cli.run_simulation(config_from_args(args), verbose=args.verbose)

        print(transcript, end="")

        if args.stats:
            print_results(stats, args.verbose)

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
    sys.exit(main())
