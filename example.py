#!/usr/bin/env python3
"""
Example usage of the gridlife package.
"""

from gridlife import Grid, Simulation, run_simulation


def main():
    """Demonstrate programmatic usage of the gridlife package."""
    # Quick transcript of a random 8x8 grid
    print(run_simulation(8, 8, 3, seed=2024))
    print()

    # Drive a hand-built blinker until its cycle is detected
    grid = Grid(5, 5)
    for y in (1, 2, 3):
        grid.set_cell(2, y, True)

    simulation = Simulation(grid)
    print(simulation.render_generation())
    while not simulation.cycle_detected:
        simulation.step()
        print(simulation.render_generation())

    print(f"Cycle detected! Length: {simulation.cycle_length}")

    stats = simulation.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
