import random

import numpy as np
import pytest

from falling_blocks.game import PALETTE, SHAPES, create_piece, rotate_clockwise
from falling_blocks.game.shapes import color_for_id, shape_by_name


def test_catalog_sizes():
    assert len(SHAPES) == 7
    assert len(PALETTE) == 7
    for shape in SHAPES:
        assert int(shape.sum()) == 4


def test_templates_are_read_only():
    with pytest.raises(ValueError):
        SHAPES[0][0, 0] = 0


def test_rotate_clockwise_transform():
    t = np.array([[1, 1, 1], [0, 1, 0]], dtype=np.int8)
    rotated = rotate_clockwise(t)
    np.testing.assert_array_equal(rotated, [[0, 1], [1, 1], [0, 1]])
    h = t.shape[0]
    for i in range(rotated.shape[0]):
        for j in range(rotated.shape[1]):
            assert rotated[i, j] == t[h - 1 - j, i]


def test_rotate_clockwise_leaves_input_untouched():
    template = shape_by_name("L")
    rotated = rotate_clockwise(template)
    rotated[0, 0] = 9
    assert template.max() == 1


def test_four_rotations_return_original():
    for shape in SHAPES:
        current = shape
        for _ in range(4):
            current = rotate_clockwise(current)
        np.testing.assert_array_equal(current, shape)


def test_create_piece_anchor_and_color():
    rng = random.Random(0)
    for _ in range(50):
        piece = create_piece(rng, cols=10)
        assert piece.row == 0
        assert piece.col == 5 - piece.width // 2
        assert 1 <= piece.color <= len(PALETTE)
        color_for_id(piece.color)


def test_create_piece_copies_template():
    rng = random.Random(3)
    piece = create_piece(rng)
    piece.shape[0, 0] = 5
    assert all(int(s.max()) == 1 for s in SHAPES)


def test_create_piece_covers_catalog():
    rng = random.Random(42)
    seen_shapes = set()
    seen_colors = set()
    for _ in range(500):
        piece = create_piece(rng)
        seen_shapes.add(piece.shape.tobytes() + bytes(piece.shape.shape))
        seen_colors.add(piece.color)
    assert len(seen_shapes) == 7
    assert seen_colors == set(range(1, 8))


def test_piece_cells_are_offset_by_anchor():
    rng = random.Random(0)
    piece = create_piece(rng)
    piece.shape = np.array([[1, 1], [1, 1]], dtype=np.int8)
    piece.row, piece.col = 3, 4
    assert piece.cells() == [(3, 4), (3, 5), (4, 4), (4, 5)]


def test_color_for_id_range():
    assert color_for_id(1) == "#FF0000"
    assert color_for_id(7) == "#FFA500"
    with pytest.raises(ValueError):
        color_for_id(0)
