"""
Wave solver for square mazes.

Finds the shortest way from a start cell to the nearest boundary exit by
labelling cells with their distance from the start and walking the labels
back from the exit.
"""

from .config import WaveSolverConfig
from .logger import configure_logging
from .solver import WaveResult, WaveSolver

__all__ = ["WaveSolver", "WaveResult", "WaveSolverConfig", "configure_logging"]
