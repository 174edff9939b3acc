from typing import Iterable, Optional

import numpy as np

from falling_blocks.game import Piece, TetrisGame
from falling_blocks.game.shapes import shape_by_name


def fill_row(game: TetrisGame, row: int, color: int = 1, skip: Iterable[int] = ()) -> None:
    """Fill every cell of ``row`` except the columns in ``skip``."""
    skip = set(skip)
    for col in range(game.grid.cols):
        if col not in skip:
            game.grid.grid[row, col] = color


def place_piece(game: TetrisGame, name: str, row: int = 0, col: Optional[int] = None, color: int = 3) -> Piece:
    """Swap the active piece for a known catalog shape."""
    shape = np.array(shape_by_name(name), dtype=np.int8)
    if col is None:
        col = game.grid.cols // 2 - shape.shape[1] // 2
    piece = Piece(shape=shape, color=color, row=row, col=col)
    game.current_piece = piece
    return piece
