"""Grid data structure for Conway's Game of Life."""

from typing import List, Optional, Sequence, Tuple
import numpy as np
import torch
import torch.nn.functional as F

from .cell import Cell

ALIVE_GLYPH = "■"
DEAD_GLYPH = "□"

# Moore neighborhood, (0, 0) excluded
NEIGHBOR_OFFSETS = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


class GridInvariantError(RuntimeError):
    """Raised when the grid's cell collection no longer matches its coordinates."""


class Grid:
    """A bounded 2D grid of cells.

    Cells are stored column by column (outer loop over x, inner loop over y),
    so the cell at (x, y) lives at index ``y + x * height``. Edges do not wrap:
    coordinates outside ``[0, width) x [0, height)`` have no cell.
    """

    def __init__(self, width: int, height: int) -> None:
        """Initialize a grid with every cell dead.

        Args:
            width: Number of columns (negative values are treated as 0)
            height: Number of rows (negative values are treated as 0)
        """
        self.width = max(0, int(width))
        self.height = max(0, int(height))

        self._cells: List[Cell] = []
        cell_id = 0
        for x in range(self.width):
            for y in range(self.height):
                self._cells.append(Cell(cell_id, False, (x, y)))
                cell_id += 1

        # 3x3 convolution kernel for counting all neighbors at once
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    @classmethod
    def new(cls, width: int, height: int) -> "Grid":
        """Create an all-dead grid."""
        return cls(width, height)

    @classmethod
    def new_random(
        cls,
        width: int,
        height: int,
        alive_probability: float,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ) -> "Grid":
        """Create a grid with each cell independently alive with a given probability.

        One uniform [0, 1) sample is drawn per cell, in the same order the
        cells are created. The probability is not validated: values <= 0 give
        an all-dead grid, values > 1 an all-alive one.

        Args:
            width: Number of columns
            height: Number of rows
            alive_probability: Chance each cell starts alive
            rng: Random generator to draw from
            seed: Seed for a new generator when ``rng`` is not given

        Returns:
            Randomly populated grid
        """
        grid = cls(width, height)
        if rng is None:
            rng = np.random.default_rng(seed)

        draws = rng.random(len(grid._cells))
        for cell, draw in zip(grid._cells, draws):
            cell.state = bool(draw < alive_probability)
        return grid

    @property
    def cells(self) -> Tuple[Cell, ...]:
        """Cells in storage order."""
        return tuple(self._cells)

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (width, height)."""
        return (self.width, self.height)

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return sum(1 for cell in self._cells if cell.state)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _lookup(self, cells: Sequence[Cell], x: int, y: int) -> Cell:
        """Resolve a coordinate to its cell in ``cells`` through the storage index.

        Raises:
            GridInvariantError: If the indexed cell is missing or sits at another position
        """
        index = y + x * self.height
        if index >= len(cells):
            raise GridInvariantError(f"No cell stored for ({x}, {y})")

        cell = cells[index]
        if cell.position != (x, y):
            raise GridInvariantError(f"Cell at index {index} has position {cell.position}, expected ({x}, {y})")
        return cell

    def get_cell(self, x: int, y: int) -> Cell:
        """Get the cell at a coordinate.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            The cell stored at (x, y)

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not self.in_bounds(x, y):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds")
        return self._lookup(self._cells, x, y)

    def set_cell(self, x: int, y: int, alive: bool) -> None:
        """Set the state of a cell.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self.get_cell(x, y).state = bool(alive)

    def get_neighbors(self, cell: Cell, cells: Optional[Sequence[Cell]] = None) -> List[Cell]:
        """Get the in-bounds Moore neighbors of a cell.

        Args:
            cell: Cell whose neighbors to resolve
            cells: Collection to resolve against (defaults to the current cells)

        Returns:
            3 cells for a corner, 5 for an edge, 8 for an interior cell
        """
        if cells is None:
            cells = self._cells

        neighbors = []
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = cell.x + dx, cell.y + dy
            if self.in_bounds(nx, ny):
                neighbors.append(self._lookup(cells, nx, ny))
        return neighbors

    def count_live_neighbors(self, cell: Cell, cells: Optional[Sequence[Cell]] = None) -> int:
        """Count living neighbors of a cell."""
        return sum(1 for neighbor in self.get_neighbors(cell, cells) if neighbor.is_alive())

    def state_array(self) -> np.ndarray:
        """Get cell states as an int8 array indexed [x, y]."""
        states = np.fromiter((cell.state for cell in self._cells), dtype=np.int8, count=len(self._cells))
        return states.reshape((self.width, self.height))

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using PyTorch convolution.

        Returns:
            2D array indexed [x, y] with the neighbor count of each cell
        """
        if not self._cells:
            return np.zeros((self.width, self.height), dtype=np.int8)

        # Grid is indexed (width, height) but PyTorch expects (height, width)
        states = np.ascontiguousarray(self.state_array().T, dtype=np.float32)
        torch_input = torch.from_numpy(states).reshape(1, 1, self.height, self.width)

        # Zero padding keeps edges bounded
        neighbors = F.conv2d(torch_input, self._torch_kernel, padding=1)

        return neighbors[0, 0].numpy().astype(np.int8).T

    def update(self, vectorized: bool = False) -> None:
        """Advance every cell by one generation.

        All neighbor counts come from a snapshot of the current generation, and
        the new states are written to a separate working copy that replaces the
        cell collection only once every cell has been evaluated.

        Args:
            vectorized: Count neighbors with a single convolution instead of
                per-cell neighbor resolution
        """
        snapshot = [cell.copy() for cell in self._cells]
        next_cells = [cell.copy() for cell in snapshot]

        counts = self.count_all_neighbors() if vectorized else None

        for cell in self._cells:
            if counts is not None:
                live_neighbors = int(counts[cell.x, cell.y])
            else:
                live_neighbors = self.count_live_neighbors(cell, snapshot)

            self._lookup(next_cells, cell.x, cell.y).update_state(live_neighbors)

        self._cells = next_cells

    def render(self) -> str:
        """Render the grid one row per line, filled squares for living cells.

        Every glyph is followed by a space and every row ends with a newline.
        """
        rows = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                glyph = ALIVE_GLYPH if self._lookup(self._cells, x, y).is_alive() else DEAD_GLYPH
                row.append(f"{glyph} ")
            rows.append("".join(row) + "\n")
        return "".join(rows)

    def to_list(self) -> list:
        """Convert grid to nested list indexed [x][y]."""
        return self.state_array().tolist()

    def __eq__(self, other: object) -> bool:
        """Check if two grids have the same shape and cell states."""
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and np.array_equal(self.state_array(), other.state_array())

    def __str__(self) -> str:
        return self.render()
