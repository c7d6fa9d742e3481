"""
Configuration for the wave solver.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class WaveSolverConfig:
    """Configuration for wave expansion."""

    # Safety bound on wave rounds; None means the total cell count of the maze
    max_rounds: Optional[int] = None

    # Emit a DEBUG line for every wave round
    trace_rounds: bool = False

    def __post_init__(self):
        """Validate configuration."""
        if self.max_rounds is not None and self.max_rounds <= 0:
            raise ValueError("max_rounds must be positive")

    def resolve_max_rounds(self, cell_count: int) -> int:
        if self.max_rounds is None:
            return cell_count
        return self.max_rounds
