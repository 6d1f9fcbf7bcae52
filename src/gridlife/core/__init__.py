"""Core Game of Life logic."""

from .cell import Cell
from .grid import Grid, GridInvariantError
from .game import Simulation, run_simulation
from .config import SimulationConfig
from .entropy import EntropyError, generate_random

__all__ = [
    "Cell",
    "Grid",
    "GridInvariantError",
    "Simulation",
    "run_simulation",
    "SimulationConfig",
    "EntropyError",
    "generate_random",
]
