"""
Wave (breadth-first) solver for finding the shortest way out of a square maze.
"""

import time
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

import numpy as np

from ..maze.board import Direction, MazeBoard, Way
from .config import WaveSolverConfig
from .logger import logger


@dataclass
class WaveResult:
    """Result of a successful wave solve."""

    exit: Tuple[int, int]
    path: List[Tuple[int, int]]
    path_length: int
    distance: int
    rounds: int
    cells_labelled: int
    time_taken_ms: float


class WaveSolver:
    """Finds the nearest boundary exit of a maze from a fixed start cell.

    The solver labels every reachable cell with its distance from the start,
    one wave round at a time, until a boundary cell is reached. The path is
    then restored by walking the labels back from that exit to the start.

    A solver instance is single-use: labels are written in place, so create a
    new instance for each maze/start pair.
    """

    def __init__(
        self,
        maze: Any,
        start_row: int,
        start_column: int,
        config: Optional[WaveSolverConfig] = None,
    ):
        """Initialize the solver.

        Args:
            maze: Square 2-D matrix, truthy for walls and falsy for open cells
            start_row: Zero-based row of the start cell
            start_column: Zero-based column of the start cell
            config: Solver configuration, defaults to ``WaveSolverConfig()``

        Raises:
            ValueError: If the maze is None, empty or not a square matrix
            IndexError: If the start lies outside the maze
        """
        self.board = MazeBoard.from_walls(maze, start_row, start_column)
        self.config = config if config is not None else WaveSolverConfig()
        self.start_row = start_row
        self.start_column = start_column

        self.logger = logger.bind(
            component="wave_solver", id=f"{self.board.size}x{self.board.size}"
        )

        self.step = 0
        self.rounds = 0
        self.finished = False
        self.finish_row = 0
        self.finish_column = 0

        self._attempted = False
        self._path: Optional[List[Tuple[int, int]]] = None
        self._result: Optional[WaveResult] = None

        self.logger.debug(
            f"Solver ready: start=({start_row}, {start_column}), "
            f"max_rounds={self.config.resolve_max_rounds(self.board.cell_count)}"
        )

    @property
    def size(self) -> int:
        return self.board.size

    @property
    def start(self) -> Tuple[int, int]:
        return (self.start_row, self.start_column)

    def solve(self) -> WaveResult:
        """Run wave expansion and restore the shortest path.

        Returns:
            WaveResult describing the exit and path found

        Raises:
            RuntimeError: If no boundary exit is reachable from the start,
                or if this solver has already been run
        """
        if self._attempted:
            raise RuntimeError("Solver already ran. Create a new WaveSolver.")
        self._attempted = True

        start_time = time.time()

        if not (self._expand_waves() and self._restore_path()):
            self.logger.debug(f"No exit reachable after {self.step} rounds")
            raise RuntimeError(
                f"No exit reachable from ({self.start_row}, {self.start_column})"
            )

        rounds = self.rounds
        path = self.get_path()
        elapsed_ms = (time.time() - start_time) * 1000
        self._result = WaveResult(
            exit=self.get_exit(),
            path=path,
            path_length=len(path),
            distance=len(path) - 1,
            rounds=rounds,
            cells_labelled=int(np.count_nonzero(self.board.grid > Way.START.value)),
            time_taken_ms=elapsed_ms,
        )
        self.logger.debug(
            f"Exit {self._result.exit} found in {rounds} rounds, "
            f"path of {self._result.path_length} cells ({elapsed_ms:.2f}ms)"
        )
        return self._result

    def get_path(self) -> List[Tuple[int, int]]:
        """Get the shortest path as (row, column) pairs from start to exit.

        Raises:
            RuntimeError: If the maze has not been solved
        """
        if self._path is None:
            raise RuntimeError("Maze not solved. Call solve() first.")

        return list(reversed(self._path))

    def get_exit(self) -> Tuple[int, int]:
        """Get the (row, column) of the exit found.

        Raises:
            RuntimeError: If the maze has not been solved
        """
        if self._path is None:
            raise RuntimeError("Maze not solved. Call solve() first.")

        return (self.finish_row, self.finish_column)

    def get_result(self) -> WaveResult:
        if self._result is None:
            raise RuntimeError("Maze not solved. Call solve() first.")

        return self._result

    def distance_map(self) -> np.ndarray:
        """Copy of the label grid: distances, ``Way`` sentinels elsewhere."""
        return self.board.copy().grid

    def _expand_waves(self) -> bool:
        """Label cells round by round until a boundary cell is reached."""
        max_rounds = self.config.resolve_max_rounds(self.board.cell_count)
        self.rounds = 0

        while True:
            frontier = self.board.find_cells_with_label(self.step)
            for row, column in frontier:
                self._make_wave(row, column)
                self._check_finish(row, column)

            if self.config.trace_rounds:
                self.logger.debug(
                    f"Round {self.step}: {len(frontier)} cells expanded, "
                    f"finished={self.finished}"
                )

            self.step += 1
            self.rounds += 1
            if self.finished or self.step >= max_rounds:
                break

        return self.finished

    def _make_wave(self, row: int, column: int) -> None:
        for nr, nc in self.board.neighbors(row, column):
            if self.board.get_label(nr, nc) == Way.PATH:
                self.board.set_label(nr, nc, self.step + 1)

    def _check_finish(self, row: int, column: int) -> None:
        # First matching neighbour wins for this cell; cells scanned later in
        # the same round may still replace it.
        for nr, nc in self.board.neighbors(row, column):
            if self._is_finish(nr, nc):
                self.finish_row = nr
                self.finish_column = nc
                self.finished = True
                return

    def _is_finish(self, row: int, column: int) -> bool:
        return (
            self.board.is_boundary(row, column)
            and self.board.get_label(row, column) == self.step + 1
        )

    def _restore_path(self) -> bool:
        """Walk distance labels back from the exit to the start."""
        if not self.finished:
            return False

        row, column = self.finish_row, self.finish_column
        path = [(row, column)]

        while True:
            # The cursor is shared by the four checks of one step
            for direction in Direction:
                nr, nc = row + direction.dr, column + direction.dc
                if (
                    self.board.is_valid_position(nr, nc)
                    and self.board.get_label(nr, nc) == self.step - 1
                ):
                    row, column = nr, nc
                    path.append((row, column))

            self.step -= 1
            if self.step == Way.START:
                break

        self._path = path
        return True
