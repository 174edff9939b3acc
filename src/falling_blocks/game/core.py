from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Callable, List, Optional, Tuple

import numpy as np

from .grid import GameGrid
from .pieces import Piece, create_piece, rotate_clockwise
from .rules import ScoringRules


logger = logging.getLogger(__name__)


class Intent(IntEnum):
    LEFT = 0
    RIGHT = 1
    SOFT_DROP = 2
    ROTATE = 3
    NONE = 4


class GameStatus(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class GameConfig:
    rows: int = 20
    cols: int = 10
    random_seed: Optional[int] = None
    spawn_row: int = 0

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"grid dimensions must be positive, got {self.rows}x{self.cols}")
        if not 0 <= self.spawn_row < self.rows:
            raise ValueError(f"spawn_row must be within [0, {self.rows}), got {self.spawn_row}")


@dataclass
class DropResult:
    moved: bool = False
    locked: bool = False
    lines_cleared: int = 0
    game_over: bool = False
    final_score: Optional[int] = None


ScoreListener = Callable[[int], None]
GameOverListener = Callable[[int], None]


class TetrisGame:
    """Owns the session state: grid, active piece, score and status.

    Front ends receive the game by reference. ``on_score_change`` is called
    with the new score after every line clear and on reset;
    ``on_game_over`` is called with the final score before the automatic
    reset.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        on_score_change: Optional[ScoreListener] = None,
        on_game_over: Optional[GameOverListener] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.on_score_change = on_score_change
        self.on_game_over = on_game_over
        self.rng = random.Random(self.config.random_seed)
        self.grid = GameGrid(self.config.rows, self.config.cols)
        self.score = 0
        self.lines_cleared_total = 0
        self.games_played = 0
        self.status = GameStatus.PLAYING
        self.current_piece: Piece
        self.reset()

    # ---------- Session ----------
    def reset(self, seed: Optional[int] = None) -> None:
        if seed is not None:
            self.rng.seed(seed)
        self.grid.reset()
        self.score = 0
        self.lines_cleared_total = 0
        self.status = GameStatus.PLAYING
        self._notify_score()
        self.current_piece = self._new_piece()

    def _new_piece(self) -> Piece:
        return create_piece(self.rng, self.config.cols, self.config.spawn_row)

    def spawn_piece(self) -> bool:
        """Replace the active piece with a fresh one.

        Returns True if the new piece collided on arrival, in which case the
        game-over listener has been told the final score and the session has
        already been reset.
        """
        self.current_piece = self._new_piece()
        if not self.is_collision():
            return False
        final_score = self.score
        self.status = GameStatus.GAME_OVER
        self.games_played += 1
        logger.info("game over: score=%d lines=%d", final_score, self.lines_cleared_total)
        if self.on_game_over is not None:
            self.on_game_over(final_score)
        self.reset()
        return True

    def _notify_score(self) -> None:
        if self.on_score_change is not None:
            self.on_score_change(self.score)

    # ---------- Collision ----------
    def is_collision(self, piece: Optional[Piece] = None) -> bool:
        if piece is None:
            piece = self.current_piece
        for row, col in piece.cells():
            if self.grid.is_occupied_or_out_of_bounds(row, col):
                return True
        return False

    # ---------- Movement ----------
    def _shift(self, dcol: int) -> bool:
        self.current_piece.col += dcol
        if self.is_collision():
            self.current_piece.col -= dcol
            return False
        return True

    def move_left(self) -> bool:
        return self._shift(-1)

    def move_right(self) -> bool:
        return self._shift(1)

    def rotate(self) -> bool:
        previous = self.current_piece.shape
        self.current_piece.shape = rotate_clockwise(previous)
        if self.is_collision():
            self.current_piece.shape = previous
            return False
        return True

    def move_down(self) -> DropResult:
        piece = self.current_piece
        piece.row += 1
        if not self.is_collision():
            return DropResult(moved=True)
        piece.row -= 1

        lines = self._lock_piece()
        result = DropResult(locked=True, lines_cleared=lines)
        final_score = self.score
        if self.spawn_piece():
            result.game_over = True
            result.final_score = final_score
        return result

    def _lock_piece(self) -> int:
        piece = self.current_piece
        self.grid.merge_cells(piece.cells(), piece.color)
        lines = self.grid.clear_completed_lines()
        logger.debug("locked piece at row=%d col=%d, cleared %d", piece.row, piece.col, lines)
        if lines:
            self.lines_cleared_total += lines
            self.score += self.rules.score_for_lines(lines)
            self._notify_score()
        return lines

    def apply(self, intent: Intent) -> Optional[DropResult]:
        if intent == Intent.LEFT:
            self.move_left()
        elif intent == Intent.RIGHT:
            self.move_right()
        elif intent == Intent.SOFT_DROP:
            return self.move_down()
        elif intent == Intent.ROTATE:
            self.rotate()
        elif intent == Intent.NONE:
            pass
        else:
            raise ValueError(f"unknown intent: {intent!r}")
        return None

    # ---------- Queries ----------
    def piece_cells(self) -> List[Tuple[int, int]]:
        return self.current_piece.cells()

    def get_state(self) -> np.ndarray:
        # Overlay current piece on a copy of the grid for observation
        state = self.grid.clone_state()
        for row, col in self.piece_cells():
            if self.grid.is_inside(row, col):
                # Use negative to indicate falling piece overlay
                state[row, col] = -self.current_piece.color
        return state
