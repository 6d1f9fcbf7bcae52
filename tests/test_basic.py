"""Basic tests for the gridlife package."""

import gridlife
from gridlife import Grid, Simulation, run_simulation, generate_random


def test_package_exports():
    """Test the public API is importable from the package root."""
    assert gridlife.__version__ == "0.1.0"
    for name in gridlife.__all__:
        assert hasattr(gridlife, name)


def test_grid_creation():
    """Test basic grid creation and cell operations."""
    grid = Grid(10, 10)
    assert grid.width == 10
    assert grid.height == 10
    assert grid.get_cell(0, 0).is_alive() is False

    grid.set_cell(5, 5, True)
    assert grid.get_cell(5, 5).is_alive() is True


def test_blinker_pattern():
    """Test the blinker pattern oscillates correctly."""
    grid = Grid(5, 5)
    simulation = Simulation(grid)

    grid.set_cell(2, 1, True)
    grid.set_cell(2, 2, True)
    grid.set_cell(2, 3, True)

    simulation.step()
    assert simulation.population == 3
    assert simulation.grid.get_cell(1, 2).is_alive()
    assert simulation.grid.get_cell(3, 2).is_alive()

    simulation.step()
    assert simulation.grid.get_cell(2, 1).is_alive()
    assert simulation.grid.get_cell(2, 3).is_alive()


def test_run_simulation():
    """Test the top-level simulation entry point."""
    output = run_simulation(3, 3, 2)
    assert output.startswith("Generation 0:\n")
    assert "\nGeneration 2:\n" in output


def test_generate_random():
    """Test the random byte helper."""
    assert len(generate_random()) == 32
