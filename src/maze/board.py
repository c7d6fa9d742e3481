from enum import Enum, IntEnum
from typing import Any, List, Tuple

import numpy as np


class Way(IntEnum):
    """Sentinel labels stored in the grid next to distance labels."""

    START = 0
    PATH = -1
    WALL = -2


class Direction(Enum):
    # Member order is the neighbour scan order used by the wave solver.
    DOWN = (1, 0)
    RIGHT = (0, 1)
    UP = (-1, 0)
    LEFT = (0, -1)

    @property
    def dr(self) -> int:
        return self.value[0]

    @property
    def dc(self) -> int:
        return self.value[1]


def _is_index(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


class MazeBoard:
    """Square grid of cell labels.

    Cells hold a ``Way`` sentinel or, once reached by a wave, the distance
    in steps from the start cell.
    """

    def __init__(self, size: int):
        self.size = size
        self.grid = np.full((size, size), Way.PATH.value, dtype=int)

    @classmethod
    def from_walls(cls, maze: Any, start_row: int, start_column: int) -> "MazeBoard":
        """Build the initial label grid from a boolean wall matrix.

        Args:
            maze: 2-D array-like, truthy for walls and falsy for open cells
            start_row: Zero-based row of the start cell
            start_column: Zero-based column of the start cell

        Returns:
            MazeBoard with walls, open cells and the start cell labelled

        Raises:
            ValueError: If the maze is None, malformed, empty or not square
            IndexError: If the start lies outside the grid
        """
        if maze is None:
            raise ValueError("maze must not be None")

        try:
            walls = np.asarray(maze, dtype=bool)
        except (TypeError, ValueError) as exc:
            raise ValueError("maze must be a rectangular boolean matrix") from exc

        if walls.size == 0:
            raise ValueError("invalid maze: maze is empty")
        if walls.ndim != 2:
            raise ValueError(f"maze must be 2-dimensional, got {walls.ndim} dimensions")
        if walls.shape[0] != walls.shape[1]:
            raise ValueError(
                f"maze must be square, got {walls.shape[0]}×{walls.shape[1]}"
            )

        board = cls(walls.shape[0])
        if not (
            _is_index(start_row)
            and _is_index(start_column)
            and board.is_valid_position(start_row, start_column)
        ):
            raise IndexError(
                f"invalid start position ({start_row}, {start_column}) "
                f"for a {board.size}×{board.size} maze"
            )

        board.grid[walls] = Way.WALL.value
        board.set_label(start_row, start_column, Way.START)
        return board

    @property
    def cell_count(self) -> int:
        return self.size * self.size

    def is_valid_position(self, row: int, column: int) -> bool:
        return 0 <= row < self.size and 0 <= column < self.size

    def is_boundary(self, row: int, column: int) -> bool:
        last = self.size - 1
        return row == 0 or column == 0 or row == last or column == last

    def get_label(self, row: int, column: int) -> int:
        return int(self.grid[row, column])

    def set_label(self, row: int, column: int, value: int) -> None:
        self.grid[row, column] = int(value)

    def neighbors(self, row: int, column: int) -> List[Tuple[int, int]]:
        """In-bounds 4-connected neighbours, in ``Direction`` order."""
        result = []
        for direction in Direction:
            nr, nc = row + direction.dr, column + direction.dc
            if self.is_valid_position(nr, nc):
                result.append((nr, nc))
        return result

    def find_cells_with_label(self, value: int) -> List[Tuple[int, int]]:
        rows, columns = np.nonzero(self.grid == int(value))
        # np.nonzero walks the array in row-major order
        return [(int(r), int(c)) for r, c in zip(rows, columns)]

    def copy(self) -> "MazeBoard":
        new_board = MazeBoard(self.size)
        new_board.grid = self.grid.copy()
        return new_board
