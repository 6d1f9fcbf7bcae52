"""Conway's Game of Life on a bounded grid with text rendering."""

__version__ = "0.1.0"

from .core.cell import Cell
from .core.grid import Grid, GridInvariantError
from .core.game import Simulation, run_simulation
from .core.entropy import EntropyError, generate_random

__all__ = [
    "Cell",
    "Grid",
    "GridInvariantError",
    "Simulation",
    "run_simulation",
    "EntropyError",
    "generate_random",
]
