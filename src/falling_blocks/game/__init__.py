"""Game module for Falling Blocks.

Exports the core game engine and supporting classes:
- GameGrid: Grid representation, occupancy queries and line clearing
- Piece: Falling piece with its mask, color and anchor
- ScoringRules: Points awarded per cleared line
- TetrisGame: Session state, movement, merge and game-over handling
"""

from .grid import GameGrid
from .pieces import Piece, create_piece, rotate_clockwise
from .rules import ScoringRules
from .shapes import PALETTE, SHAPES, SHAPE_NAMES
from .core import DropResult, GameConfig, GameStatus, Intent, TetrisGame

__all__ = [
    "GameGrid",
    "Piece",
    "create_piece",
    "rotate_clockwise",
    "ScoringRules",
    "PALETTE",
    "SHAPES",
    "SHAPE_NAMES",
    "DropResult",
    "GameConfig",
    "GameStatus",
    "Intent",
    "TetrisGame",
]
