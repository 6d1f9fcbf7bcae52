"""Conway's Game of Life simulation driver."""

from typing import Deque, Dict, List, Optional
from collections import deque
import numpy as np

from .grid import Grid

DEFAULT_ALIVE_PROBABILITY = 0.3


class Simulation:
    """Runs a grid forward generation by generation and records its history.

    Besides the generation counter, the simulation keeps a bounded population
    history and remembers the states it has seen so that oscillators and
    still lifes are reported as cycles. Only the most recent states are
    remembered, so cycles longer than ``STATE_HISTORY_PRUNE`` go unreported.
    """

    STATE_HISTORY_LIMIT = 1000
    STATE_HISTORY_PRUNE = 900

    def __init__(self, grid: Grid, vectorized: bool = False) -> None:
        """Initialize the simulation with a grid.

        Args:
            grid: The grid to simulate
            vectorized: Count neighbors with convolution when updating
        """
        self.grid = grid
        self.vectorized = vectorized
        self._generation = 0
        self._population_history: Deque[int] = deque(maxlen=100)
        self._state_history: Deque[bytes] = deque(maxlen=self.STATE_HISTORY_LIMIT)
        self._seen_states: Dict[bytes, int] = {}
        self._cycle_detected = False
        self._cycle_length = 0
        self._cycle_start_generation = 0

        self._population_history.append(self.population)

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.population

    @property
    def population_history(self) -> List[int]:
        """History of population counts."""
        return list(self._population_history)

    @property
    def cycle_detected(self) -> bool:
        return self._cycle_detected

    @property
    def cycle_length(self) -> int:
        """Length of detected cycle (0 if no cycle)."""
        return self._cycle_length

    @property
    def cycle_start_generation(self) -> int:
        """Generation where cycle started (0 if no cycle)."""
        return self._cycle_start_generation

    def step(self) -> None:
        """Advance the simulation by one generation."""
        self._check_for_cycles()
        self.grid.update(vectorized=self.vectorized)
        self._generation += 1
        self._population_history.append(self.population)

    def _check_for_cycles(self) -> None:
        """Record the current state and flag a cycle if it was seen before."""
        if self._cycle_detected:
            return

        current_state = self.grid.state_array().tobytes()
        if current_state in self._seen_states:
            first_occurrence = self._seen_states[current_state]
            self._cycle_detected = True
            self._cycle_length = self._generation - first_occurrence
            self._cycle_start_generation = first_occurrence
            return

        self._seen_states[current_state] = self._generation
        self._state_history.append(current_state)

        # Forget the oldest states to prevent memory growth
        if len(self._state_history) > self.STATE_HISTORY_PRUNE:
            old_state = self._state_history.popleft()
            self._seen_states.pop(old_state, None)

    def render_generation(self) -> str:
        """Render the current generation with its header."""
        return f"Generation {self._generation}:\n{self.grid.render()}"

    def run(self, generations: int) -> str:
        """Run for a number of generations and return the transcript.

        The transcript starts with the current generation and adds one block
        per update, each block preceded by a blank-line separator. A
        non-positive count yields only the current generation.
        """
        output = [self.render_generation()]
        for _ in range(generations):
            self.step()
            output.append("\n" + self.render_generation())
        return "".join(output)

    def get_population_change_rate(self, window_size: int = 10) -> float:
        """Average population change per generation over the recent window."""
        recent_history = list(self._population_history)[-window_size:]
        if len(recent_history) < 2:
            return 0.0

        return float(np.mean(np.diff(recent_history)))

    def get_statistics(self) -> Dict:
        """Get simulation statistics.

        Returns:
            Dictionary with generation, population and cycle information
        """
        cell_count = self.grid.width * self.grid.height
        return {
            "generation": self._generation,
            "population": self.population,
            "population_density": self.population / cell_count if cell_count else 0.0,
            "population_change_rate": self.get_population_change_rate(),
            "population_history": self.population_history,
            "cycle_detected": self._cycle_detected,
            "cycle_length": self._cycle_length,
            "cycle_start_generation": self._cycle_start_generation,
            "grid_size": self.grid.shape,
        }


def run_simulation(
    width: int,
    height: int,
    generations: int,
    alive_probability: float = DEFAULT_ALIVE_PROBABILITY,
    seed: Optional[int] = None,
    vectorized: bool = False,
) -> str:
    """Simulate a randomly seeded grid and return every generation as text.

    Args:
        width: Grid width
        height: Grid height
        generations: Number of updates to run after generation 0
        alive_probability: Chance each cell starts alive
        seed: Seed for reproducible initial states
        vectorized: Count neighbors with convolution when updating

    Returns:
        "Generation 0:" block followed by one block per generation
    """
    grid = Grid.new_random(width, height, alive_probability, seed=seed)
    return Simulation(grid, vectorized=vectorized).run(generations)
