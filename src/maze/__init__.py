"""
Grid-state model for square wall/open mazes.
"""

from .board import Direction, MazeBoard, Way

__all__ = ["MazeBoard", "Way", "Direction"]
