"""Frontend interfaces for the simulator."""

from .cli import CLIGameOfLife

__all__ = ["CLIGameOfLife"]
