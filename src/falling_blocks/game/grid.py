from __future__ import annotations

from typing import Iterable, Tuple

import numpy as np


Coordinate = Tuple[int, int]

EMPTY = 0


class GameGrid:
    """Fixed-size playfield of ``rows`` x ``cols`` cells.

    The grid uses 0 for empty cells and positive integers for filled cells.
    A filled value is the 1-based palette color id of the piece that settled
    there. Cells are addressed as ``(row, col)`` with row 0 at the top.
    """

    def __init__(self, rows: int = 20, cols: int = 10) -> None:
        self.rows = int(rows)
        self.cols = int(cols)
        self.grid = np.zeros((self.rows, self.cols), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(EMPTY)

    def is_inside(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_occupied_or_out_of_bounds(self, row: int, col: int) -> bool:
        # Rows above the top edge count as open space.
        if row >= self.rows or col < 0 or col >= self.cols:
            return True
        if row < 0:
            return False
        return self.grid[row, col] != EMPTY

    def merge_cell(self, row: int, col: int, color: int) -> None:
        if row < 0 and 0 <= col < self.cols:
            return
        if not self.is_inside(row, col):
            raise ValueError(f"cell ({row}, {col}) is outside the grid")
        if self.grid[row, col] != EMPTY:
            raise ValueError(f"cell ({row}, {col}) is already filled")
        self.grid[row, col] = color

    def merge_cells(self, cells: Iterable[Coordinate], color: int) -> None:
        for row, col in cells:
            self.merge_cell(row, col, color)

    def complete_rows(self) -> np.ndarray:
        return np.where(np.all(self.grid != EMPTY, axis=1))[0]

    def clear_completed_lines(self) -> int:
        full_rows = self.complete_rows()
        if full_rows.size == 0:
            return 0
        num = int(full_rows.size)
        # Remove full rows and add empty rows at the top
        remaining = np.delete(self.grid, full_rows, axis=0)
        new_rows = np.zeros((num, self.cols), dtype=np.int8)
        self.grid = np.vstack((new_rows, remaining))
        return num

    def filled_cells(self) -> Iterable[Tuple[int, int, int]]:
        """Yield ``(row, col, color)`` for every non-empty cell."""
        rows, cols = np.nonzero(self.grid)
        for row, col in zip(rows.tolist(), cols.tolist()):
            yield row, col, int(self.grid[row, col])

    def is_empty(self) -> bool:
        return not np.any(self.grid)

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
