"""Tests for SimulationConfig."""

from gridlife.core.config import SimulationConfig


class TestSimulationConfig:
    """Test configuration defaults and validation."""

    def test_defaults(self):
        """Test default values."""
        config = SimulationConfig()
        assert config.width == 10
        assert config.height == 10
        assert config.generations == 10
        assert config.alive_probability == 0.3
        assert config.seed is None
        assert config.vectorized is False
        assert config.validate() == []

    def test_invalid_dimensions(self):
        """Test non-positive dimensions are rejected."""
        errors = SimulationConfig(width=0, height=-1).validate()
        assert "Width must be positive" in errors
        assert "Height must be positive" in errors

    def test_invalid_generations(self):
        """Test negative generation counts are rejected."""
        assert SimulationConfig(generations=-1).validate() == ["Generations must be non-negative"]
        assert SimulationConfig(generations=0).validate() == []

    def test_invalid_probability(self):
        """Test probabilities outside [0, 1] are rejected."""
        assert SimulationConfig(alive_probability=1.5).validate()
        assert SimulationConfig(alive_probability=-0.1).validate()
        assert SimulationConfig(alive_probability=1.0).validate() == []

    def test_invalid_seed(self):
        """Test negative seeds are rejected."""
        assert SimulationConfig(seed=-3).validate() == ["Seed must be non-negative"]
