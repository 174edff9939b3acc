from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from .shapes import PALETTE, SHAPES, Shape


def rotate_clockwise(shape: Shape) -> Shape:
    """Return a new mask rotated 90 degrees clockwise.

    Equivalent to transposing and then reversing each row, i.e.
    ``rotated[i][j] == shape[h - 1 - j][i]``. The input is not modified.
    """
    return np.rot90(shape, 1, axes=(1, 0)).copy()


@dataclass
class Piece:
    shape: Shape
    color: int  # 1-based palette id
    row: int = 0
    col: int = 0

    @property
    def height(self) -> int:
        return int(self.shape.shape[0])

    @property
    def width(self) -> int:
        return int(self.shape.shape[1])

    def cells(self) -> List[Tuple[int, int]]:
        """Absolute ``(row, col)`` of every filled mask cell."""
        cells: List[Tuple[int, int]] = []
        for dr in range(self.height):
            for dc in range(self.width):
                if self.shape[dr, dc]:
                    cells.append((self.row + dr, self.col + dc))
        return cells


def spawn_col(shape: Shape, cols: int) -> int:
    # Width is taken from the first row; catalog masks are rectangular.
    return cols // 2 - len(shape[0]) // 2


def create_piece(rng: random.Random, cols: int = 10, row: int = 0) -> Piece:
    shape_index = rng.randrange(len(SHAPES))
    color_index = rng.randrange(len(PALETTE))
    template = SHAPES[shape_index]
    return Piece(
        shape=np.array(template, dtype=np.int8, copy=True),
        color=color_index + 1,
        row=row,
        col=spawn_col(template, cols),
    )
