from __future__ import annotations

from typing import List, Tuple

import numpy as np


Shape = np.ndarray


def _template(rows: List[List[int]]) -> Shape:
    arr = np.array(rows, dtype=np.int8)
    arr.setflags(write=False)
    return arr


# Catalog order matters: the factory picks by index.
SHAPES: Tuple[Shape, ...] = (
    _template([[1, 1, 1, 1]]),
    _template([[1, 1], [1, 1]]),
    _template([[1, 1, 1], [0, 1, 0]]),
    _template([[1, 1, 1], [1, 0, 0]]),
    _template([[1, 1, 1], [0, 0, 1]]),
    _template([[1, 1, 0], [0, 1, 1]]),
    _template([[0, 1, 1], [1, 1, 0]]),
)

SHAPE_NAMES: Tuple[str, ...] = ("I", "O", "T", "L", "J", "Z", "S")

PALETTE: Tuple[str, ...] = (
    "#FF0000",
    "#00FF00",
    "#0000FF",
    "#FFFF00",
    "#00FFFF",
    "#FF00FF",
    "#FFA500",
)


def shape_by_name(name: str) -> Shape:
    return SHAPES[SHAPE_NAMES.index(name)]


def color_for_id(color_id: int) -> str:
    """Map a 1-based color id (as stored in the grid) to its palette entry."""
    if not 1 <= color_id <= len(PALETTE):
        raise ValueError(f"color id out of range: {color_id}")
    return PALETTE[color_id - 1]
