from __future__ import annotations

from typing import Tuple

from falling_blocks.game import TetrisGame
from falling_blocks.game.shapes import color_for_id

from .surface import DrawingSurface


BLOCK_SIZE = 30


class Renderer:
    def __init__(self, block_size: int = BLOCK_SIZE) -> None:
        self.block_size = block_size

    def canvas_size(self, rows: int, cols: int) -> Tuple[int, int]:
        return cols * self.block_size, rows * self.block_size

    def _draw_block(self, surface: DrawingSurface, row: int, col: int, color: str) -> None:
        x = col * self.block_size
        y = row * self.block_size
        surface.fill_rect(x, y, self.block_size, self.block_size, color)
        surface.stroke_rect(x, y, self.block_size, self.block_size)

    def draw_board(self, surface: DrawingSurface, game: TetrisGame) -> None:
        width, height = self.canvas_size(game.grid.rows, game.grid.cols)
        surface.clear_region(0, 0, width, height)
        for row, col, value in game.grid.filled_cells():
            self._draw_block(surface, row, col, color_for_id(value))

    def draw_piece(self, surface: DrawingSurface, game: TetrisGame) -> None:
        color = color_for_id(game.current_piece.color)
        for row, col in game.piece_cells():
            self._draw_block(surface, row, col, color)

    def draw(self, surface: DrawingSurface, game: TetrisGame) -> None:
        self.draw_board(surface, game)
        self.draw_piece(surface, game)
