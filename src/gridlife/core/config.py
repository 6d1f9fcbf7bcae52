"""Simulation configuration."""

from typing import List, Optional
from dataclasses import dataclass

from .game import DEFAULT_ALIVE_PROBABILITY


@dataclass
class SimulationConfig:
    """Configuration for a simulation run."""
    width: int = 10
    height: int = 10
    generations: int = 10
    alive_probability: float = DEFAULT_ALIVE_PROBABILITY
    seed: Optional[int] = None
    vectorized: bool = False

    def validate(self) -> List[str]:
        """Check the configuration for values a front end should reject.

        The library accepts any values; this is for user-facing input only.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if self.width <= 0:
            errors.append("Width must be positive")

        if self.height <= 0:
            errors.append("Height must be positive")

        if self.generations < 0:
            errors.append("Generations must be non-negative")

        if not 0.0 <= self.alive_probability <= 1.0:
            errors.append("Population rate must be between 0.0 and 1.0")

        if self.seed is not None and self.seed < 0:
            errors.append("Seed must be non-negative")

        return errors
