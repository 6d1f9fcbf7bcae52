"""Single cell of a Game of Life grid."""

from typing import Tuple


class Cell:
    """A grid position with an alive/dead state.

    The identifier and position are fixed when the cell is created; only
    ``state`` changes from one generation to the next.
    """

    __slots__ = ("_id", "_position", "state")

    def __init__(self, cell_id: int, state: bool, position: Tuple[int, int]) -> None:
        """Initialize a cell.

        Args:
            cell_id: Unique identifier assigned by the owning grid
            state: True if the cell starts alive
            position: (x, y) coordinates within the grid
        """
        self._id = cell_id
        self._position = (int(position[0]), int(position[1]))
        self.state = bool(state)

    @property
    def id(self) -> int:
        """Identifier assigned at creation."""
        return self._id

    @property
    def position(self) -> Tuple[int, int]:
        """(x, y) coordinates of the cell."""
        return self._position

    @property
    def x(self) -> int:
        return self._position[0]

    @property
    def y(self) -> int:
        return self._position[1]

    def is_alive(self) -> bool:
        """Return True if the cell is alive."""
        return self.state

    def update_state(self, live_neighbors: int) -> None:
        """Apply Conway's rules given the number of living neighbors.

        - Live cell with fewer than 2 or more than 3 neighbors dies
        - Live cell with 2 or 3 neighbors survives
        - Dead cell with exactly 3 neighbors becomes alive
        """
        if self.state:
            if live_neighbors < 2 or live_neighbors > 3:
                self.state = False
        elif live_neighbors == 3:
            self.state = True

    def copy(self) -> "Cell":
        """Return an independent cell with the same id, state and position."""
        return Cell(self._id, self.state, self._position)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return False
        return self._id == other._id and self.state == other.state and self._position == other._position

    def __hash__(self) -> int:
        # Identity only, state is mutable
        return hash((self._id, self._position))

    def __repr__(self) -> str:
        return f"Cell(id={self._id}, state={self.state}, position={self._position})"
